"""Periodic cleanup of idle rate-limit entries."""
import asyncio
import logging
from typing import Optional

from jarvis.services.ratelimit.limiter import RateLimiter

logger = logging.getLogger(__name__)


class RateLimitSweeper:
    """Background task that keeps the rate-limit store from growing without bound."""

    def __init__(self, limiter: RateLimiter, interval_seconds: float, horizon_ms: int):
        self.limiter = limiter
        self.interval_seconds = interval_seconds
        self.horizon_ms = horizon_ms
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start sweeping on the running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="rate-limit-sweeper")
        logger.info(
            f"[RATE LIMIT] Sweeper started - every {self.interval_seconds}s, "
            f"horizon: {self.horizon_ms}ms"
        )

    async def stop(self) -> None:
        """Cancel the sweep task and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("[RATE LIMIT] Sweeper stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            self.limiter.sweep(self.horizon_ms)
