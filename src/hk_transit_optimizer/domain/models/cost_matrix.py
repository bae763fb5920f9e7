"""Cost matrix domain model."""

from dataclasses import dataclass

from hk_transit_optimizer.domain.models.travel_plan import Leg, PlanSource


@dataclass(frozen=True)
class CostMatrix:
    """Pairwise travel seconds between points plus the chosen leg breakdown.

    ``durations[i][j]`` is the cost of going from point ``i`` to point ``j``;
    the diagonal is unused and kept at zero.
    """

    durations: tuple[tuple[int, ...], ...]
    legs: dict[tuple[int, int], tuple[Leg, ...]]
    sources: dict[tuple[int, int], PlanSource]

    @property
    def size(self) -> int:
        return len(self.durations)

    def seconds(self, origin: int, destination: int) -> int:
        return self.durations[origin][destination]

    def legs_for(self, origin: int, destination: int) -> tuple[Leg, ...]:
        return self.legs.get((origin, destination), ())

    def source_for(self, origin: int, destination: int) -> PlanSource | None:
        return self.sources.get((origin, destination))
