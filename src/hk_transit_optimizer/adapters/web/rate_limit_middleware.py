"""Per-IP rate limiting for the optimize endpoint using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

from hk_transit_optimizer.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)


def extract_client_ip(request: Request) -> str:
    """Client IP, taking the first address of X-Forwarded-For when behind a proxy."""
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Limits requests under ``path_prefix`` per client IP.

    Every optimize request fans out into dozens of geocoder and planner
    calls, so other paths such as /health are not limited.
    """

    def __init__(
        self,
        app: Callable,
        requests_per_minute: int = 30,
        path_prefix: str = "/api/",
    ) -> None:
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.path_prefix = path_prefix
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self.rate_limiter_store = store.MemoryStore()
        logger.info(f"Rate limiting {path_prefix}: {requests_per_minute} requests per minute per IP")

    @staticmethod
    def _extract_retry_after(result: Any) -> float:
        state = getattr(result, "state", None)
        retry_after = getattr(state, "retry_after", None) if state else None
        return float(retry_after) if retry_after else 60.0

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        client_ip = extract_client_ip(request)
        throttle = Throttled(
            key=client_ip,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.rate_limiter_store,
        )
        result = throttle.limit()
        if result.limited:
            retry_after = self._extract_retry_after(result)
            logger.warning(f"Rate limit exceeded for IP {client_ip}, retry after {retry_after}s")
            body = ErrorDetails(error="Rate limit exceeded", code="RATE_LIMITED")
            return JSONResponse(
                body.model_dump(),
                status_code=429,
                headers={"Retry-After": str(int(retry_after))},
            )

        response: Response = await call_next(request)
        return response
