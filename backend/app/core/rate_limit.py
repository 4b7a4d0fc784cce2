import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from app.core.logging import client_address

logger = logging.getLogger(__name__)

# Expired windows are swept once the table grows past this many keys.
_SWEEP_THRESHOLD = 1024


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    remaining: int
    retry_after: int


class FixedWindowRateLimiter:
    """
    Process-local fixed-window counter.

    Each key gets `max_requests` hits per `window_seconds`; the window starts
    with the key's first hit and resets once it has fully elapsed.
    """

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.Lock()
        self._windows: dict[str, tuple[float, int]] = {}

    def hit(self, key: str) -> RateLimitDecision:
        now = self._clock()
        with self._lock:
            if len(self._windows) > _SWEEP_THRESHOLD:
                self._sweep(now)

            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_seconds:
                started, count = now, 0

            retry_after = max(1, math.ceil(started + self.window_seconds - now))
            if count >= self.max_requests:
                return RateLimitDecision(allowed=False, remaining=0, retry_after=retry_after)

            count += 1
            self._windows[key] = (started, count)
            return RateLimitDecision(
                allowed=True,
                remaining=self.max_requests - count,
                retry_after=retry_after,
            )

    def reset(self) -> None:
        with self._lock:
            self._windows.clear()

    def _sweep(self, now: float) -> None:
        expired = [
            key
            for key, (started, _) in self._windows.items()
            if now - started >= self.window_seconds
        ]
        for key in expired:
            del self._windows[key]


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limiter: FixedWindowRateLimiter) -> None:
        super().__init__(app)
        self.limiter = limiter

    async def dispatch(self, request: Request, call_next) -> Response:
        address = client_address(request)
        decision = self.limiter.hit(address)
        if not decision.allowed:
            logger.warning("Rate limit exceeded for %s on %s", address, request.url.path)
            return JSONResponse(
                status_code=429,
                content={
                    "success": False,
                    "error": "Rate limit exceeded",
                    "retryAfter": decision.retry_after,
                },
                headers={"Retry-After": str(decision.retry_after)},
            )

        response = await call_next(request)
        response.headers["X-RateLimit-Limit"] = str(self.limiter.max_requests)
        response.headers["X-RateLimit-Remaining"] = str(decision.remaining)
        return response
