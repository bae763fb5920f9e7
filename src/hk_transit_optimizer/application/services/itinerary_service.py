"""Use case: best visiting order for an origin and five destinations."""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from hk_transit_optimizer.application.services.order_optimizer import (
    build_itinerary,
    find_best_order,
)
from hk_transit_optimizer.domain.exceptions import InvalidRequestError
from hk_transit_optimizer.domain.models.itinerary import Itinerary
from hk_transit_optimizer.domain.models.place_alias import PlaceAlias
from hk_transit_optimizer.domain.models.point import Point

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from hk_transit_optimizer.application.services.cost_matrix_builder import CostMatrixBuilder
    from hk_transit_optimizer.domain.ports import Geocoder

DESTINATION_COUNT = 5


def validate_request(origin: object, destinations: object) -> tuple[str, list[str]]:
    """Check the request shape before anything external is called.

    Returns the stripped origin and destination labels.
    """
    if not isinstance(origin, str) or not origin.strip():
        raise InvalidRequestError("Need origin + exactly 5 destinations")
    if not isinstance(destinations, list) or len(destinations) != DESTINATION_COUNT:
        raise InvalidRequestError("Need origin + exactly 5 destinations")

    labels: list[str] = []
    for destination in destinations:
        if not isinstance(destination, str) or not destination.strip():
            raise InvalidRequestError("Destinations must be non-empty strings")
        labels.append(destination.strip())

    duplicates = sorted({label for label in labels if labels.count(label) > 1})
    if duplicates:
        raise InvalidRequestError(f"Duplicate destinations: {', '.join(duplicates)}")
    return origin.strip(), labels


class ItineraryService:
    """Validates, geocodes, builds the cost matrix and solves the order."""

    def __init__(
        self,
        geocoder: "Geocoder",
        matrix_builder: "CostMatrixBuilder",
        aliases: Mapping[str, PlaceAlias] | None = None,
        timezone: str = "Asia/Hong_Kong",
    ) -> None:
        self._geocoder = geocoder
        self._matrix_builder = matrix_builder
        self._aliases = dict(aliases or {})
        self._timezone = timezone

    async def resolve_point(self, label: str) -> Point:
        """Geocode a label, going through the alias table first."""
        alias = self._aliases.get(label)
        query = alias.query if alias else label
        result = await self._geocoder.geocode(query)
        return Point(
            label=label,
            query=query,
            latitude=result.latitude,
            longitude=result.longitude,
            display_name=result.display_name,
            station_code=alias.station_code if alias else None,
        )

    async def optimize(
        self, origin: object, destinations: object, departure: datetime | None = None
    ) -> Itinerary:
        """Return the fastest order to visit all destinations starting from origin."""
        origin_label, destination_labels = validate_request(origin, destinations)

        points = []
        for label in [origin_label, *destination_labels]:
            points.append(await self.resolve_point(label))
        logger.info(f"Geocoded {len(points)} points")

        departure = departure or datetime.now(ZoneInfo(self._timezone))
        matrix = await self._matrix_builder.build(points, departure)
        result = find_best_order(matrix.durations, start=0)
        logger.info(
            f"Best order {[points[i].label for i in result.order]} "
            f"takes {round(result.total_seconds / 60)} min"
        )
        return build_itinerary(points, matrix, result)
