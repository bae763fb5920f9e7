"""Exact search for the best visiting order with a fixed start."""

from collections.abc import Iterator, Sequence
from typing import TypeVar

from hk_transit_optimizer.domain.models.cost_matrix import CostMatrix
from hk_transit_optimizer.domain.models.itinerary import Itinerary, OrderResult, Segment
from hk_transit_optimizer.domain.models.point import Point

T = TypeVar("T")


def heap_permutations(items: Sequence[T]) -> Iterator[tuple[T, ...]]:
    """Yield every ordering of ``items`` using Heap's swap algorithm."""
    a = list(items)
    counters = [0] * len(a)
    yield tuple(a)
    i = 0
    while i < len(a):
        if counters[i] < i:
            if i % 2 == 0:
                a[0], a[i] = a[i], a[0]
            else:
                a[counters[i]], a[i] = a[i], a[counters[i]]
            yield tuple(a)
            counters[i] += 1
            i = 0
        else:
            counters[i] = 0
            i += 1


def path_seconds(durations: Sequence[Sequence[int]], order: Sequence[int]) -> int:
    """Sum of consecutive matrix lookups along ``order`` (no return leg)."""
    return sum(durations[a][b] for a, b in zip(order, order[1:]))


def find_best_order(durations: Sequence[Sequence[int]], start: int = 0) -> OrderResult:
    """Minimum open path from ``start`` through every other index.

    Ties keep the first ordering generated.
    """
    if not 0 <= start < len(durations):
        raise ValueError(f"start index {start} outside matrix of size {len(durations)}")
    others = [i for i in range(len(durations)) if i != start]
    best: OrderResult | None = None
    for permutation in heap_permutations(others):
        order = (start, *permutation)
        total = path_seconds(durations, order)
        if best is None or total < best.total_seconds:
            best = OrderResult(order=order, total_seconds=total)
    if best is None:
        raise ValueError("no ordering was evaluated")
    return best


def build_itinerary(points: Sequence[Point], matrix: CostMatrix, result: OrderResult) -> Itinerary:
    """Attach the per-segment breakdown of the winning order."""
    if matrix.size != len(points):
        raise ValueError(f"cost matrix of size {matrix.size} does not match {len(points)} points")
    segments = tuple(
        Segment(
            from_label=points[i].label,
            to_label=points[j].label,
            duration_seconds=matrix.seconds(i, j),
            legs=matrix.legs_for(i, j),
            source=matrix.source_for(i, j),
        )
        for i, j in zip(result.order, result.order[1:])
    )
    return Itinerary(
        points=tuple(points),
        order=result.order,
        total_seconds=result.total_seconds,
        segments=segments,
    )
