"""Itinerary domain models."""

from dataclasses import dataclass

from hk_transit_optimizer.domain.models.point import Point
from hk_transit_optimizer.domain.models.travel_plan import Leg, PlanSource


@dataclass(frozen=True)
class OrderResult:
    """Best visiting order found by the optimizer."""

    order: tuple[int, ...]
    total_seconds: int


@dataclass(frozen=True)
class Segment:
    """One hop of the winning order."""

    from_label: str
    to_label: str
    duration_seconds: int
    legs: tuple[Leg, ...]
    source: PlanSource | None = None


@dataclass(frozen=True)
class Itinerary:
    """Full answer for one optimization request."""

    points: tuple[Point, ...]
    order: tuple[int, ...]
    total_seconds: int
    segments: tuple[Segment, ...]

    @property
    def origin(self) -> Point:
        return self.points[0]

    @property
    def destinations(self) -> tuple[Point, ...]:
        return self.points[1:]

    @property
    def ordered_labels(self) -> list[str]:
        return [self.points[i].label for i in self.order]
