"""Multi-LLM fallback chain."""
import asyncio
import logging
from typing import Optional, Sequence

from jarvis.core.config import Settings
from jarvis.services.llm.base import ChatMessage, LLMProvider, ProviderResult
from jarvis.services.llm.providers import build_default_providers

logger = logging.getLogger(__name__)

FALLBACK_PROVIDER = "fallback"
FALLBACK_MESSAGE = (
    "I'm sorry, I'm having trouble connecting to my AI services right now. "
    "Please try again in a moment! 🙏"
)


class ProviderChain:
    """Asks each provider in turn and returns the first non-blank reply."""

    def __init__(self, providers: Sequence[LLMProvider], timeout_seconds: Optional[float] = None):
        self.providers = list(providers)
        self.timeout_seconds = timeout_seconds

    @classmethod
    def from_settings(cls, config: Settings) -> "ProviderChain":
        """Build the default Gemini -> Groq -> Cohere -> Claude chain."""
        return cls(
            providers=build_default_providers(config),
            timeout_seconds=config.provider_timeout_seconds,
        )

    async def chat(self, history: Sequence[ChatMessage], system_prompt: str) -> ProviderResult:
        """
        Get a reply from the first provider that gives one.

        Provider errors, timeouts and blank replies are logged and skipped.
        Never raises: if every provider fails the fixed apology is returned
        with provider name "fallback".
        """
        for provider in self.providers:
            try:
                response = await asyncio.wait_for(
                    provider.invoke(history, system_prompt),
                    timeout=self.timeout_seconds,
                )
            except asyncio.TimeoutError:
                logger.warning(
                    f"[LLM] {provider.name} failed: timed out after {self.timeout_seconds}s"
                )
                continue
            except Exception as e:
                logger.warning(f"[LLM] {provider.name} failed: {type(e).__name__}: {e}")
                continue

            if response and response.strip():
                logger.info(f"[LLM] Reply from {provider.name} ({len(response)} chars)")
                return ProviderResult(response_text=response, provider_name=provider.name)

            logger.warning(f"[LLM] {provider.name} returned an empty reply")

        logger.warning("[LLM] All providers failed - using fallback reply")
        return ProviderResult(response_text=FALLBACK_MESSAGE, provider_name=FALLBACK_PROVIDER)
