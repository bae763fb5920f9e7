"""Rail routing algorithms."""

from hk_transit_optimizer.application.routing.geo import haversine_meters, walk_seconds
from hk_transit_optimizer.application.routing.rail_graph_builder import (
    build_rail_graph,
    station_code_for,
)
from hk_transit_optimizer.application.routing.shortest_path import (
    shortest_seconds,
    station_seconds,
)

__all__ = [
    "build_rail_graph",
    "haversine_meters",
    "shortest_seconds",
    "station_code_for",
    "station_seconds",
    "walk_seconds",
]
