"""Rail candidate for an OD pair, routed over the rail graph."""

import logging
from typing import TYPE_CHECKING

from hk_transit_optimizer.application.routing.geo import walk_seconds
from hk_transit_optimizer.application.routing.shortest_path import shortest_seconds
from hk_transit_optimizer.domain.models.point import Point
from hk_transit_optimizer.domain.models.policy import LegSelectionPolicy
from hk_transit_optimizer.domain.models.rail_graph import RailGraph
from hk_transit_optimizer.domain.models.travel_plan import (
    Leg,
    PlanOutcome,
    PlanSource,
    TravelPlan,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from hk_transit_optimizer.application.services.rail_graph_provider import RailGraphProvider

RAIL_MODE = "RAIL"
RAIL_ROUTE_LABEL = "MTR"


class RailRouter:
    """Computes walk + wait + ride + walk over every platform combination of two stations."""

    def __init__(
        self,
        graph_provider: "RailGraphProvider",
        policy: LegSelectionPolicy | None = None,
    ) -> None:
        self._graph_provider = graph_provider
        self._policy = policy or LegSelectionPolicy()

    def _walk(self, point: Point, stop_lat: float, stop_lon: float) -> int:
        return walk_seconds(
            point.latitude, point.longitude, stop_lat, stop_lon, self._policy.walking_speed_mps
        )

    def _best_platform_pair(
        self, graph: RailGraph, origin: Point, destination: Point
    ) -> tuple[int, str, str, int, int, int] | None:
        best: tuple[int, str, str, int, int, int] | None = None
        wait = self._policy.rail_wait_seconds
        for board_id in graph.platforms(origin.station_code or ""):
            board = graph.stops[board_id]
            walk_in = self._walk(origin, board.latitude, board.longitude)
            for alight_id in graph.platforms(destination.station_code or ""):
                ride = shortest_seconds(graph, board_id, alight_id)
                if ride is None:
                    continue
                alight = graph.stops[alight_id]
                walk_out = self._walk(destination, alight.latitude, alight.longitude)
                total = walk_in + wait + ride + walk_out
                if best is None or total < best[0]:
                    best = (total, board_id, alight_id, walk_in, ride, walk_out)
        return best

    async def plan(self, origin: Point, destination: Point) -> PlanOutcome:
        """Rail plan between two points carrying different station codes."""
        if not origin.station_code or not destination.station_code:
            return PlanOutcome.missing("point without station code")
        if origin.station_code == destination.station_code:
            return PlanOutcome.missing("same station")

        graph = await self._graph_provider.try_get_graph()
        if graph is None:
            return PlanOutcome.missing("rail graph unavailable")

        best = self._best_platform_pair(graph, origin, destination)
        if best is None:
            logger.debug(
                f"No rail path between {origin.station_code} and {destination.station_code}"
            )
            return PlanOutcome.missing("no rail path")

        total, board_id, alight_id, walk_in, ride, walk_out = best
        board_name = graph.stops[board_id].name or board_id
        alight_name = graph.stops[alight_id].name or alight_id
        penalty = self._policy.rail_penalty_seconds + self._policy.pair_penalty(
            origin.station_code, destination.station_code
        )
        legs = (
            Leg("WALK", None, origin.label, board_name, walk_in),
            Leg(
                RAIL_MODE,
                RAIL_ROUTE_LABEL,
                board_name,
                alight_name,
                self._policy.rail_wait_seconds + ride,
            ),
            Leg("WALK", None, alight_name, destination.label, walk_out),
        )
        return PlanOutcome.found(TravelPlan(total + penalty, legs, PlanSource.RAIL))
