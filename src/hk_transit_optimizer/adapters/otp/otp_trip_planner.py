"""OpenTripPlanner trip planner adapter.

Uses the OTP REST endpoint ``/otp/routers/default/plan``.
"""

import asyncio
import logging
import time
from datetime import datetime
from typing import TYPE_CHECKING

import aiohttp

from hk_transit_optimizer.adapters.api_rate_limiter import ApiRateLimiter
from hk_transit_optimizer.adapters.api_request_logger import log_api_request, log_api_response
from hk_transit_optimizer.adapters.otp.itinerary_parser import parse_plan
from hk_transit_optimizer.domain.models.point import Point
from hk_transit_optimizer.domain.models.travel_plan import PlanOutcome
from hk_transit_optimizer.domain.ports.trip_planner import TripPlanner

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

OTP_PLAN_PATH = "/otp/routers/default/plan"


class OtpTripPlanner(TripPlanner):
    """Asks OTP for the best walk + transit itinerary between two points."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = "http://localhost:8080",
        timeout_seconds: float = 20.0,
        pause_seconds: float = 0.12,
    ) -> None:
        self._session = session
        self._url = base_url.rstrip("/") + OTP_PLAN_PATH
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._rate_limiter = ApiRateLimiter.get_instance("otp", pause_seconds)

    @staticmethod
    def build_params(origin: Point, destination: Point, departure: datetime) -> dict[str, str]:
        return {
            "fromPlace": f"{origin.latitude},{origin.longitude}",
            "toPlace": f"{destination.latitude},{destination.longitude}",
            "mode": "WALK,TRANSIT",
            "numItineraries": "1",
            "date": departure.strftime("%Y-%m-%d"),
            "time": departure.strftime("%H:%M"),
        }

    async def plan_trip(
        self, origin: Point, destination: Point, departure: datetime
    ) -> PlanOutcome:
        """Best OTP itinerary, or a missing outcome on any failure."""
        params = self.build_params(origin, destination, departure)
        log_api_request("otp", self._url, params=params)

        async with self._rate_limiter:
            started = time.monotonic()
            try:
                async with self._session.get(
                    self._url, params=params, timeout=self._timeout
                ) as response:
                    log_api_response("otp", response.status, time.monotonic() - started)
                    if response.status != 200:
                        body = await response.text()
                        logger.warning(
                            f"OTP plan failed for {origin.label} -> {destination.label}: "
                            f"{response.status} {body[:200]}"
                        )
                        return PlanOutcome.missing(f"otp plan failed: {response.status}")
                    data = await response.json(content_type=None)
            except asyncio.TimeoutError:
                logger.warning(f"OTP plan timed out for {origin.label} -> {destination.label}")
                return PlanOutcome.missing("otp timeout")
            except (aiohttp.ClientError, ValueError) as e:
                logger.warning(f"OTP plan error for {origin.label} -> {destination.label}: {e}")
                return PlanOutcome.missing(f"otp error: {e}")

        try:
            plan = parse_plan(data)
        except (TypeError, ValueError) as e:
            logger.warning(f"Malformed OTP itinerary for {origin.label} -> {destination.label}: {e}")
            return PlanOutcome.missing("otp malformed itinerary")
        if plan is None:
            return PlanOutcome.missing("otp no itinerary")
        return PlanOutcome.found(plan)
