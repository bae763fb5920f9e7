"""Starlette application exposing the optimizer over HTTP."""

import json
import logging

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from hk_transit_optimizer.adapters.web.rate_limit_middleware import RateLimitMiddleware
from hk_transit_optimizer.adapters.web.schemas import OptimizeRequest, OptimizeResponse
from hk_transit_optimizer.domain.exceptions import InvalidRequestError, TransitOptimizerError
from hk_transit_optimizer.domain.models.error_details import ErrorDetails
from hk_transit_optimizer.domain.ports.itinerary_planner import ItineraryPlanner

logger = logging.getLogger(__name__)


def _error(message: str, code: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorDetails(error=message, code=code).model_dump(), status_code=status_code)


def create_app(
    itinerary_service: ItineraryPlanner,
    rate_limit_per_minute: int | None = None,
) -> Starlette:
    """Build the ASGI app. Pass ``rate_limit_per_minute=None`` to disable rate limiting."""

    async def optimize(request: Request) -> JSONResponse:
        try:
            body = OptimizeRequest.model_validate(await request.json())
        except (json.JSONDecodeError, ValidationError):
            return _error("Need origin + exactly 5 destinations", "INVALID_REQUEST", 400)

        try:
            itinerary = await itinerary_service.optimize(body.origin, body.destinations)
        except InvalidRequestError as e:
            return _error(e.message, e.code, 400)
        except TransitOptimizerError as e:
            logger.error(f"Optimization failed: {e.message}")
            return _error(e.message, e.code, 500)
        except Exception as e:
            logger.exception("Unexpected error while optimizing")
            return _error(str(e), "INTERNAL_ERROR", 500)

        return JSONResponse(OptimizeResponse.from_itinerary(itinerary).model_dump(by_alias=True))

    async def health(_request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok"})

    middleware = []
    if rate_limit_per_minute:
        middleware.append(Middleware(RateLimitMiddleware, requests_per_minute=rate_limit_per_minute))

    return Starlette(
        routes=[
            Route("/api/optimize", optimize, methods=["POST"]),
            Route("/health", health, methods=["GET"]),
        ],
        middleware=middleware,
    )
