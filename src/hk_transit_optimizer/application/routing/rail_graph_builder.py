"""Build the rail graph from GTFS feed tables.

Only rail stops, routes and trips are kept. Edges come from three places:

- consecutive stop events of each trip, added in both directions because
  some feeds only publish one direction per trip,
- a fixed transfer cost between every pair of platforms sharing a station code,
- a fixed walkway cost between two interchange stations that are connected
  on foot but carry different codes.

Whenever the same arc is proposed twice, the smaller weight wins.
"""

import logging
from collections import defaultdict
from itertools import permutations
from types import MappingProxyType

from hk_transit_optimizer.domain.models.feed_records import (
    FeedTables,
    StopRecord,
    StopTimeRecord,
)
from hk_transit_optimizer.domain.models.policy import RailGraphSettings
from hk_transit_optimizer.domain.models.rail_graph import RailGraph

logger = logging.getLogger(__name__)


def station_code_for(stop_id: str, prefix: str = "MTR-") -> str | None:
    """Extract the station code from a platform id like ``MTR-WTS`` or ``MTR-WTS-2``."""
    if not stop_id.startswith(prefix):
        return None
    code = stop_id[len(prefix) :].split("-", 1)[0].strip()
    return code or None


class _EdgeAccumulator:
    """Collects arcs while keeping the minimum weight per (from, to) pair."""

    def __init__(self) -> None:
        self._edges: dict[str, dict[str, int]] = defaultdict(dict)

    def add(self, from_stop: str, to_stop: str, seconds: int) -> None:
        current = self._edges[from_stop].get(to_stop)
        if current is None or seconds < current:
            self._edges[from_stop][to_stop] = seconds

    def add_both(self, stop_a: str, stop_b: str, seconds: int) -> None:
        self.add(stop_a, stop_b, seconds)
        self.add(stop_b, stop_a, seconds)

    def freeze(self) -> MappingProxyType:
        return MappingProxyType(
            {
                from_stop: tuple(sorted(arcs.items()))
                for from_stop, arcs in self._edges.items()
            }
        )


def _rail_trip_ids(tables: FeedTables, settings: RailGraphSettings) -> set[str]:
    rail_routes = {r.route_id for r in tables.routes if r.route_type == settings.rail_route_type}
    return {t.trip_id for t in tables.trips if t.route_id in rail_routes}


def _group_events_by_trip(
    stop_times: tuple[StopTimeRecord, ...], rail_trips: set[str], stops: dict[str, StopRecord]
) -> dict[str, list[StopTimeRecord]]:
    by_trip: dict[str, list[StopTimeRecord]] = defaultdict(list)
    dropped = 0
    for event in stop_times:
        if event.trip_id not in rail_trips or event.stop_id not in stops:
            continue
        if event.arrival_seconds is None or event.departure_seconds is None:
            dropped += 1
            continue
        by_trip[event.trip_id].append(event)
    if dropped:
        logger.debug(f"Dropped {dropped} rail stop events with unparseable times")
    return by_trip


def _add_trip_edges(
    edges: _EdgeAccumulator,
    by_trip: dict[str, list[StopTimeRecord]],
    max_edge_seconds: int,
) -> None:
    rejected = 0
    for events in by_trip.values():
        events.sort(key=lambda e: e.stop_sequence)
        for current, following in zip(events, events[1:]):
            # both times are present, filtered in _group_events_by_trip
            seconds = following.arrival_seconds - current.departure_seconds  # type: ignore[operator]
            if not 0 < seconds < max_edge_seconds:
                rejected += 1
                continue
            edges.add_both(current.stop_id, following.stop_id, seconds)
    if rejected:
        logger.debug(f"Rejected {rejected} implausible travel times between consecutive stops")


def _index_platforms(stops: dict[str, StopRecord], prefix: str) -> dict[str, tuple[str, ...]]:
    platforms: dict[str, list[str]] = defaultdict(list)
    for stop_id in sorted(stops):
        code = station_code_for(stop_id, prefix)
        if code:
            platforms[code].append(stop_id)
    return {code: tuple(ids) for code, ids in platforms.items()}


def build_rail_graph(tables: FeedTables, settings: RailGraphSettings | None = None) -> RailGraph:
    """Turn feed tables into an immutable rail graph."""
    settings = settings or RailGraphSettings()

    stops = {s.stop_id: s for s in tables.stops if s.stop_id.startswith(settings.stop_prefix)}
    rail_trips = _rail_trip_ids(tables, settings)
    by_trip = _group_events_by_trip(tables.stop_times, rail_trips, stops)

    edges = _EdgeAccumulator()
    _add_trip_edges(edges, by_trip, settings.max_edge_seconds)

    platforms_by_code = _index_platforms(stops, settings.stop_prefix)
    for platform_ids in platforms_by_code.values():
        for platform_a, platform_b in permutations(platform_ids, 2):
            edges.add(platform_a, platform_b, settings.transfer_seconds)

    if settings.walkway_codes:
        code_a, code_b = settings.walkway_codes
        for platform_a in platforms_by_code.get(code_a, ()):
            for platform_b in platforms_by_code.get(code_b, ()):
                edges.add_both(platform_a, platform_b, settings.walkway_seconds)

    graph = RailGraph(
        stops=MappingProxyType(stops),
        adjacency=edges.freeze(),
        platforms_by_code=MappingProxyType(platforms_by_code),
    )
    logger.info(
        f"Built rail graph: {len(stops)} platforms, {len(platforms_by_code)} stations, "
        f"{graph.edge_count} edges from {len(by_trip)} trips"
    )
    return graph
