"""Application configuration."""
import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Values copied from .env.example that were never replaced
PLACEHOLDER_VALUES = [
    "your_api_key",
    "your_gemini_api_key",
    "your_groq_api_key",
    "your_cohere_api_key",
    "your_claude_api_key",
    "your_admin_username",
    "your_admin_password",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # LLM providers (each one is optional; a missing key skips that provider)
    gemini_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None
    cohere_api_key: Optional[str] = None
    claude_api_key: Optional[str] = None

    gemini_model: str = "gemini-2.0-flash"
    groq_model: str = "llama-3.1-8b-instant"
    cohere_model: str = "command-r-plus"
    claude_model: str = "claude-3-haiku-20240307"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1024
    provider_timeout_seconds: float = 20.0

    # Canteen
    canteen_name: str = "College Canteen"
    canteen_is_open: bool = True
    canteen_start_time: str = "9AM"
    canteen_end_time: str = "6PM"
    canteen_contact_phone: str = "9302593483"
    menu_file: Optional[str] = None

    # Admin
    admin_username: Optional[str] = None
    admin_password: Optional[str] = None

    # Rate limiting
    admin_rate_limit_max: int = Field(default=5, gt=0)
    admin_rate_limit_window_ms: int = Field(default=60_000, gt=0)
    chat_rate_limit_max: int = Field(default=20, gt=0)
    chat_rate_limit_window_ms: int = Field(default=60_000, gt=0)
    rate_limit_sweep_interval_seconds: float = Field(default=300.0, gt=0)
    rate_limit_cleanup_horizon_ms: int = Field(default=120_000, gt=0)

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def canteen_timing(self) -> str:
        """Opening hours as shown to customers."""
        return f"{self.canteen_start_time} – {self.canteen_end_time}"


def warn_on_placeholder_values(config: Settings) -> list[str]:
    """
    Log warnings for secrets that are missing or still hold placeholder values.

    Never raises: an unconfigured provider simply fails inside the fallback
    chain at request time.

    Returns:
        Names of the settings that still hold placeholder values
    """
    secrets = {
        "GEMINI_API_KEY": config.gemini_api_key,
        "GROQ_API_KEY": config.groq_api_key,
        "COHERE_API_KEY": config.cohere_api_key,
        "CLAUDE_API_KEY": config.claude_api_key,
        "ADMIN_USERNAME": config.admin_username,
        "ADMIN_PASSWORD": config.admin_password,
    }

    placeholders = [
        name
        for name, value in secrets.items()
        if value and value.lower() in PLACEHOLDER_VALUES
    ]
    if placeholders:
        logger.warning(
            f"[ENV] The following variables still have placeholder values: {', '.join(placeholders)}"
        )

    provider_keys = [
        config.gemini_api_key,
        config.groq_api_key,
        config.cohere_api_key,
        config.claude_api_key,
    ]
    if not any(provider_keys):
        logger.warning(
            "[ENV] No LLM provider key configured - chat will always return the fallback reply"
        )

    return placeholders


settings = Settings()
