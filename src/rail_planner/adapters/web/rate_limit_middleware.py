"""Per-client rate limiting for the itinerary API using throttled-py."""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER_SECONDS = 60.0


def extract_client_ip(request: Request) -> str:
    """Return the originating client IP, honoring X-Forwarded-For.

    The first address of an X-Forwarded-For chain is the original client;
    without the header the direct peer address is used, else ``unknown``.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


def retry_after_seconds(result: Any) -> float:
    """Read the retry delay from a throttled-py result, defaulting to a minute."""
    state = getattr(result, "state", None)
    if state is not None and getattr(state, "retry_after", None) is not None:
        return float(state.retry_after)
    if getattr(result, "retry_after", None) is not None:
        return float(result.retry_after)
    return DEFAULT_RETRY_AFTER_SECONDS


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Token-bucket rate limit per client IP; exempt paths are never limited."""

    def __init__(
        self,
        app: Callable,
        requests_per_minute: int = 100,
        exempt_paths: Iterable[str] = ("/healthz",),
    ) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Requests allowed per IP per minute; 0 disables limiting.
            exempt_paths: Paths that bypass the limit, such as health checks.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.exempt_paths = frozenset(exempt_paths)
        self.enabled = requests_per_minute > 0
        if self.enabled:
            self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
            self.rate_limiter_store = store.MemoryStore()
            logger.info(f"Rate limiting enabled: {requests_per_minute} requests per minute per IP")
        else:
            logger.info("Rate limiting disabled")

    def _is_limited(self, client_ip: str) -> tuple[bool, float]:
        throttle = Throttled(
            key=client_ip,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.rate_limiter_store,
        )
        result = throttle.limit()
        if result.limited:
            return True, retry_after_seconds(result)
        return False, 0.0

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject the request with 429 when the client exceeded its quota."""
        if not self.enabled or request.url.path in self.exempt_paths:
            return await call_next(request)

        client_ip = extract_client_ip(request)
        limited, retry_after = self._is_limited(client_ip)
        if limited:
            logger.warning(f"Rate limit exceeded for IP {client_ip}, retry after {retry_after} seconds")
            return JSONResponse(
                {"error": "Rate limit exceeded. Please try again later."},
                status_code=429,
                headers={"Retry-After": str(int(retry_after))},
            )

        response: Response = await call_next(request)
        return response
