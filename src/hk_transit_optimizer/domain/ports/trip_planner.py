"""Trip planner port."""

from datetime import datetime
from typing import Protocol

from hk_transit_optimizer.domain.models.point import Point
from hk_transit_optimizer.domain.models.travel_plan import PlanOutcome


class TripPlanner(Protocol):
    """Port for the external walk + transit trip planner."""

    async def plan_trip(self, origin: Point, destination: Point, departure: datetime) -> PlanOutcome:
        """Plan a trip departing at ``departure``.

        Never raises for planner failures; they are reported as a missing outcome.
        """
        ...
