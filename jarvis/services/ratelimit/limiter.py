"""
In-memory sliding-window rate limiter.

Guards admin login against brute force and the chat endpoints against LLM
cost abuse. Counters are kept per (route path, client IP) in a
``RateLimitStore`` owned by the application; they reset on restart.
"""
import logging
import math
import threading
import time
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

UNKNOWN_CLIENT = "unknown"

RateLimitKey = Tuple[str, str]
Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Default clock: monotonic time in milliseconds."""
    return time.monotonic() * 1000


class RateLimitPolicy(BaseModel):
    """How many requests a client may make to one route per window."""

    max_requests: int = Field(gt=0)
    window_ms: int = Field(gt=0)

    @property
    def retry_after_seconds(self) -> int:
        return math.ceil(self.window_ms / 1000)


class RateLimitDecision(BaseModel):
    """Result of a rate-limit check."""

    allowed: bool
    remaining: int = 0
    retry_after_seconds: Optional[int] = None


class RateLimitStore:
    """
    Request timestamps per key, shared by every route.

    All reads and writes go through one lock so a check's
    prune-count-append sequence is atomic with respect to other checks and
    to sweeps.
    """

    def __init__(self):
        self._entries: Dict[RateLimitKey, List[float]] = {}
        self._windows: Dict[RateLimitKey, int] = {}
        self._lock = threading.Lock()

    def hit(self, key: RateLimitKey, now: float, max_requests: int, window_ms: int) -> Tuple[bool, int]:
        """
        Record a request for ``key`` if the window has room.

        Returns:
            Tuple of (allowed, requests left in the window)
        """
        with self._lock:
            timestamps = [t for t in self._entries.get(key, []) if now - t < window_ms]
            self._windows[key] = window_ms
            if len(timestamps) >= max_requests:
                self._entries[key] = timestamps
                return False, 0

            timestamps.append(now)
            self._entries[key] = timestamps
            return True, max_requests - len(timestamps)

    def sweep(self, now: float, horizon_ms: int) -> int:
        """
        Drop old timestamps and delete entries left empty.

        Each entry is pruned by the larger of ``horizon_ms`` and the window it
        was last checked with, so timestamps still inside a window survive.

        Returns:
            Number of entries removed
        """
        with self._lock:
            removed = 0
            for key in list(self._entries):
                keep_ms = max(horizon_ms, self._windows.get(key, 0))
                timestamps = [t for t in self._entries[key] if now - t < keep_ms]
                if timestamps:
                    self._entries[key] = timestamps
                else:
                    del self._entries[key]
                    self._windows.pop(key, None)
                    removed += 1
            return removed

    def timestamps(self, key: RateLimitKey) -> List[float]:
        """Copy of the timestamps recorded for ``key``."""
        with self._lock:
            return list(self._entries.get(key, []))

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: RateLimitKey) -> bool:
        with self._lock:
            return key in self._entries


class RateLimiter:
    """Sliding-window limiter over an injected store and clock."""

    def __init__(self, store: Optional[RateLimitStore] = None, clock: Clock = monotonic_ms):
        self.store = store if store is not None else RateLimitStore()
        self.clock = clock

    def check(self, route: str, client: str, policy: RateLimitPolicy) -> RateLimitDecision:
        """Count a request from ``client`` to ``route`` against ``policy``."""
        allowed, remaining = self.store.hit(
            (route, client), self.clock(), policy.max_requests, policy.window_ms
        )
        if not allowed:
            logger.warning(
                f"[RATE LIMIT] Rejected - route: {route}, client: {client}, "
                f"limit: {policy.max_requests}/{policy.window_ms}ms"
            )
            return RateLimitDecision(
                allowed=False, retry_after_seconds=policy.retry_after_seconds
            )
        return RateLimitDecision(allowed=True, remaining=remaining)

    def sweep(self, horizon_ms: int) -> int:
        """Remove entries idle for longer than ``horizon_ms``."""
        removed = self.store.sweep(self.clock(), horizon_ms)
        if removed:
            logger.debug(f"[RATE LIMIT] Sweep removed {removed} idle entries")
        return removed


def client_identity(headers: Mapping[str, str]) -> str:
    """
    Identify the caller from proxy headers.

    Uses the first X-Forwarded-For entry, then X-Real-IP, then "unknown".
    Header names are looked up in lower case (Starlette headers are
    case-insensitive).
    """
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first

    real_ip = headers.get("x-real-ip")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    return UNKNOWN_CLIENT
