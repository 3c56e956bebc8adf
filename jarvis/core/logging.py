"""Logging configuration."""
import logging
import sys
from typing import Optional

from jarvis.core.config import settings

# SDK loggers that log every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "anthropic", "google_genai")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure application logging to stdout.

    Args:
        level: Log level name; defaults to LOG_LEVEL from settings
    """
    level_name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(f"[LOGGING] Configured at {level_name}")
