"""Pick the cheapest way between two points among walk, transit and rail."""

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from hk_transit_optimizer.application.routing.geo import haversine_meters
from hk_transit_optimizer.domain.models.point import Point
from hk_transit_optimizer.domain.models.policy import LegSelectionPolicy
from hk_transit_optimizer.domain.models.travel_plan import Leg, PlanSource, TravelPlan

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from hk_transit_optimizer.application.services.rail_router import RailRouter
    from hk_transit_optimizer.domain.ports import TripPlanner


class HybridLegSelector:
    """Chooses one plan per OD pair.

    Points closer than ``short_walk_meters`` start with walking as the best
    plan, so another mode only wins if it is strictly faster. Beyond that,
    walking is only used when no other mode produced a plan.
    """

    def __init__(
        self,
        trip_planner: "TripPlanner",
        rail_router: "RailRouter | None" = None,
        policy: LegSelectionPolicy | None = None,
    ) -> None:
        self._trip_planner = trip_planner
        self._rail_router = rail_router
        self._policy = policy or LegSelectionPolicy()

    def walk_plan(self, origin: Point, destination: Point) -> TravelPlan:
        """Straight-line walk between two points."""
        meters = haversine_meters(
            origin.latitude, origin.longitude, destination.latitude, destination.longitude
        )
        seconds = round(meters / self._policy.walking_speed_mps)
        leg = Leg("WALK", None, origin.label, destination.label, seconds)
        return TravelPlan(seconds, (leg,), PlanSource.WALK)

    async def select(self, origin: Point, destination: Point, departure: datetime) -> TravelPlan:
        """Return the cheapest available plan from ``origin`` to ``destination``."""
        walk = self.walk_plan(origin, destination)
        meters = haversine_meters(
            origin.latitude, origin.longitude, destination.latitude, destination.longitude
        )
        best: TravelPlan | None = walk if meters < self._policy.short_walk_meters else None

        outcomes = [await self._trip_planner.plan_trip(origin, destination, departure)]
        if self._rail_router is not None:
            outcomes.append(await self._rail_router.plan(origin, destination))

        for outcome in outcomes:
            if not outcome.ok:
                logger.debug(f"{origin.label} -> {destination.label}: {outcome.reason}")
                continue
            plan = outcome.plan
            if best is None or plan.duration_seconds < best.duration_seconds:  # type: ignore[union-attr]
                best = plan

        if best is None:
            logger.info(f"{origin.label} -> {destination.label}: no transit or rail, walking")
            return walk
        return best
