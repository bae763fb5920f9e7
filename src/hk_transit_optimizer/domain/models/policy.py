"""Tunable routing policy values."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RailGraphSettings:
    """How a GTFS feed is turned into a rail graph."""

    stop_prefix: str = "MTR-"
    rail_route_type: str = "1"
    max_edge_seconds: int = 3600
    transfer_seconds: int = 180
    walkway_codes: tuple[str, str] | None = ("TST", "ETS")
    walkway_seconds: int = 300


@dataclass(frozen=True)
class LegSelectionPolicy:
    """Numbers that decide which candidate wins for an OD pair."""

    walking_speed_mps: float = 1.2
    short_walk_meters: float = 1200.0
    rail_wait_seconds: int = 180
    rail_penalty_seconds: int = 240
    pair_penalty_seconds: int = 300
    penalized_pairs: frozenset[frozenset[str]] = field(default_factory=frozenset)

    def pair_penalty(self, code_a: str, code_b: str) -> int:
        """Extra rail penalty for a station pair known to be too cheap in the graph."""
        if frozenset((code_a, code_b)) in self.penalized_pairs:
            return self.pair_penalty_seconds
        return 0
