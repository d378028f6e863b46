"""Per-client fixed-window rate limiting for the API routes."""

import logging
import time
from collections.abc import Callable

from fastapi import Depends, Request

from src.config.settings import settings
from src.errors import RateLimitExceeded

logger = logging.getLogger(__name__)

# Expired windows are swept once the table grows past this many keys
PRUNE_THRESHOLD = 10_000


class FixedWindowRateLimiter:
    """
    In-memory counter per key over a fixed window.

    State lives in the process and is only touched from the request path,
    so a single event loop needs no locking.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._windows: dict[str, tuple[float, int]] = {}

    def allow(self, key: str, limit: int, window_seconds: float) -> bool:
        now = self._clock()
        if len(self._windows) > PRUNE_THRESHOLD:
            self._prune(now, window_seconds)

        started, count = self._windows.get(key, (now, 0))
        if now - started >= window_seconds:
            started, count = now, 0

        if count >= limit:
            self._windows[key] = (started, count)
            return False

        self._windows[key] = (started, count + 1)
        return True

    def reset(self) -> None:
        self._windows.clear()

    def _prune(self, now: float, window_seconds: float) -> None:
        self._windows = {
            key: (started, count)
            for key, (started, count) in self._windows.items()
            if now - started < window_seconds
        }


rate_limiter = FixedWindowRateLimiter()


def get_rate_limiter() -> FixedWindowRateLimiter:
    """Dependency returning the process-wide limiter. Override in tests."""
    return rate_limiter


def client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("x-forwarded-for", "")
    if settings.trust_proxy_headers and forwarded_for:
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def rate_limit(bucket: str, limit: int, window_seconds: int | None = None):
    """Build a dependency that allows ``limit`` requests per window per client IP."""
    window = window_seconds or settings.rate_limit_window_seconds

    async def dependency(
        request: Request,
        limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
    ) -> None:
        ip = client_ip(request)
        if not limiter.allow(f"{bucket}:{ip}", limit, window):
            logger.warning("Rate limit '%s' exceeded for %s", bucket, ip)
            raise RateLimitExceeded(bucket)

    return dependency


api_rate_limit = rate_limit("api", settings.api_rate_limit)
login_rate_limit = rate_limit("login", settings.login_rate_limit)
