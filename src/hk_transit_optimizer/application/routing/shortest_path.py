"""Single-source single-target shortest time over the rail graph."""

import heapq

from hk_transit_optimizer.domain.models.rail_graph import RailGraph


def shortest_seconds(graph: RailGraph, start: str, goal: str) -> int | None:
    """Dijkstra from ``start`` until ``goal`` is settled.

    Returns 0 when both ends are the same stop and None when the goal cannot
    be reached. Weights are assumed non-negative.
    """
    if start == goal:
        return 0

    dist: dict[str, int] = {start: 0}
    settled: set[str] = set()
    queue: list[tuple[int, str]] = [(0, start)]

    while queue:
        seconds, stop_id = heapq.heappop(queue)
        if stop_id in settled:
            continue
        if stop_id == goal:
            return seconds
        settled.add(stop_id)

        for neighbour, weight in graph.neighbours(stop_id):
            if neighbour in settled:
                continue
            candidate = seconds + weight
            if candidate < dist.get(neighbour, candidate + 1):
                dist[neighbour] = candidate
                heapq.heappush(queue, (candidate, neighbour))

    return None


def station_seconds(graph: RailGraph, from_code: str, to_code: str) -> int | None:
    """Fastest ride between any platform of one station and any platform of another."""
    best: int | None = None
    for start in graph.platforms(from_code):
        for goal in graph.platforms(to_code):
            seconds = shortest_seconds(graph, start, goal)
            if seconds is not None and (best is None or seconds < best):
                best = seconds
    return best
