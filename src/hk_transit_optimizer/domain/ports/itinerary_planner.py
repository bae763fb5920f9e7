"""Itinerary planner port."""

from datetime import datetime
from typing import Protocol

from hk_transit_optimizer.domain.models.itinerary import Itinerary


class ItineraryPlanner(Protocol):
    """Port for the optimize use case as seen by delivery adapters."""

    async def optimize(
        self, origin: object, destinations: object, departure: datetime | None = None
    ) -> Itinerary:
        """Best visiting order. Raises InvalidRequestError or another TransitOptimizerError."""
        ...
