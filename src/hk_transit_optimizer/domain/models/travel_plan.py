"""Travel plan domain models."""

from dataclasses import dataclass
from enum import Enum


class PlanSource(str, Enum):
    """Which candidate produced a plan."""

    WALK = "walk"
    TRANSIT = "transit"
    RAIL = "rail"


@dataclass(frozen=True)
class Leg:
    """One mode-homogeneous segment of a journey."""

    mode: str
    route: str | None
    from_name: str | None
    to_name: str | None
    duration_seconds: int


@dataclass(frozen=True)
class TravelPlan:
    """A candidate way to get from one point to another.

    ``duration_seconds`` is the cost used for comparison and may include
    policy penalties on top of the sum of the leg durations.
    """

    duration_seconds: int
    legs: tuple[Leg, ...]
    source: PlanSource

    @property
    def modes(self) -> tuple[str, ...]:
        return tuple(leg.mode for leg in self.legs)


@dataclass(frozen=True)
class PlanOutcome:
    """Result of asking one mode for a plan: either a plan or the reason there is none."""

    plan: TravelPlan | None = None
    reason: str | None = None

    @classmethod
    def found(cls, plan: TravelPlan) -> "PlanOutcome":
        return cls(plan=plan)

    @classmethod
    def missing(cls, reason: str) -> "PlanOutcome":
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        return self.plan is not None
