import time
import logging
from typing import Callable, Dict, Optional, Tuple

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from skypulse.core.logger import logs

RATE_LIMIT_MESSAGE = "Too many requests. Please try again later."


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Fixed-window request limiter keyed by client IP.
    Each client gets `max_requests` per `window_seconds`; the window starts
    at the client's first request and resets once it has fully elapsed.
    Clients whose window has elapsed are dropped at most once per window.
    """

    def __init__(
        self,
        app,
        max_requests: int = 60,
        window_seconds: int = 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(app)
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        # client -> (window_start, hits)
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._last_purge = clock()

    def hit(self, client: str) -> Optional[int]:
        """Count a request; returns seconds until retry if over budget, else None."""
        now = self._clock()
        if now - self._last_purge >= self.window_seconds:
            self.purge_expired()

        window_start, hits = self._windows.get(client, (now, 0))
        if now - window_start >= self.window_seconds:
            window_start, hits = now, 0
        hits += 1
        self._windows[client] = (window_start, hits)

        if hits > self.max_requests:
            return max(1, int(window_start + self.window_seconds - now))
        return None

    def purge_expired(self) -> int:
        now = self._clock()
        self._last_purge = now
        expired = [
            client for client, (window_start, _) in self._windows.items()
            if now - window_start >= self.window_seconds
        ]
        for client in expired:
            del self._windows[client]
        return len(expired)

    def __len__(self) -> int:
        return len(self._windows)

    async def dispatch(self, request: Request, call_next):
        client = request.client.host if request.client else "anonymous"
        retry_after = self.hit(client)

        if retry_after is not None:
            logs.log(logging.WARNING, f"Rate limit exceeded for {client}")
            return PlainTextResponse(
                RATE_LIMIT_MESSAGE, status_code=429, headers={"Retry-After": str(retry_after)}
            )

        return await call_next(request)
