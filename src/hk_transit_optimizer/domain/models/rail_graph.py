"""Rail graph domain model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from hk_transit_optimizer.domain.models.feed_records import StopRecord


@dataclass(frozen=True)
class RailGraph:
    """Directed weighted graph over rail platform stops.

    Built once from a feed and only queried afterwards.
    """

    stops: Mapping[str, StopRecord] = field(default_factory=lambda: MappingProxyType({}))
    adjacency: Mapping[str, tuple[tuple[str, int], ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    platforms_by_code: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def neighbours(self, stop_id: str) -> tuple[tuple[str, int], ...]:
        """Outgoing arcs of a stop as ``(neighbour, seconds)`` pairs."""
        return self.adjacency.get(stop_id, ())

    def edge_seconds(self, from_stop: str, to_stop: str) -> int | None:
        """Weight of the arc ``from_stop -> to_stop``, or None if there is none."""
        for neighbour, seconds in self.neighbours(from_stop):
            if neighbour == to_stop:
                return seconds
        return None

    def platforms(self, station_code: str) -> tuple[str, ...]:
        """Platform stop ids sharing a station code."""
        return self.platforms_by_code.get(station_code, ())

    @property
    def edge_count(self) -> int:
        return sum(len(arcs) for arcs in self.adjacency.values())
