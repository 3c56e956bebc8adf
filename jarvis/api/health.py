"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request

from jarvis.core.config import Settings
from jarvis.core.dependencies import get_rate_limiter, get_settings
from jarvis.services.ratelimit.limiter import RateLimiter

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(
    request: Request,
    config: Settings = Depends(get_settings),
    limiter: RateLimiter = Depends(get_rate_limiter),
):
    """Health check endpoint. Reports which LLM providers have a key configured."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {
        "status": "healthy",
        "providers": {
            "Gemini": bool(config.gemini_api_key),
            "Groq": bool(config.groq_api_key),
            "Cohere": bool(config.cohere_api_key),
            "Claude": bool(config.claude_api_key),
        },
        "rate_limit_entries": len(limiter.store),
    }
