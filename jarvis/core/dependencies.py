"""FastAPI dependencies."""
from typing import Callable

from fastapi import Depends, HTTPException, Request

from jarvis.core import config as config_module
from jarvis.core.config import Settings
from jarvis.services.chat.orchestrator import ChatOrchestrator
from jarvis.services.llm.chain import ProviderChain
from jarvis.services.menu.in_memory_menu import InMemoryMenuProvider
from jarvis.services.menu.repository import MenuRepository
from jarvis.services.ratelimit.limiter import RateLimiter, RateLimitPolicy, client_identity

RATE_LIMIT_DETAIL = "Too many requests. Please try again later."


def get_settings() -> Settings:
    """Get application settings."""
    return config_module.settings


def get_menu_repository(config: Settings = Depends(get_settings)) -> MenuRepository:
    """Get menu repository instance."""
    return MenuRepository(provider=InMemoryMenuProvider(menu_file=config.menu_file))


def get_provider_chain(config: Settings = Depends(get_settings)) -> ProviderChain:
    """Get the LLM fallback chain."""
    return ProviderChain.from_settings(config)


def get_chat_orchestrator(
    provider_chain: ProviderChain = Depends(get_provider_chain),
    menu_repository: MenuRepository = Depends(get_menu_repository),
    config: Settings = Depends(get_settings),
) -> ChatOrchestrator:
    """Get chat orchestrator instance."""
    return ChatOrchestrator(
        provider_chain=provider_chain,
        menu_repository=menu_repository,
        config=config,
    )


def get_rate_limiter(request: Request) -> RateLimiter:
    """Get the process-wide rate limiter created with the app."""
    return request.app.state.rate_limiter


def admin_login_policy(config: Settings) -> RateLimitPolicy:
    return RateLimitPolicy(
        max_requests=config.admin_rate_limit_max,
        window_ms=config.admin_rate_limit_window_ms,
    )


def chat_policy(config: Settings) -> RateLimitPolicy:
    return RateLimitPolicy(
        max_requests=config.chat_rate_limit_max,
        window_ms=config.chat_rate_limit_window_ms,
    )


def rate_limit(policy_for: Callable[[Settings], RateLimitPolicy]):
    """
    Build a dependency that rejects callers over the route's limit.

    Requests are counted per (route path, client IP). A rejected request gets
    HTTP 429 with a Retry-After header equal to the window length.
    """

    async def check_rate_limit(
        request: Request,
        limiter: RateLimiter = Depends(get_rate_limiter),
        config: Settings = Depends(get_settings),
    ) -> None:
        decision = limiter.check(
            request.url.path, client_identity(request.headers), policy_for(config)
        )
        if not decision.allowed:
            raise HTTPException(
                status_code=429,
                detail=RATE_LIMIT_DETAIL,
                headers={"Retry-After": str(decision.retry_after_seconds)},
            )

    return check_rate_limit
