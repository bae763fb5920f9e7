"""Typed records for the tables of a GTFS feed."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StopRecord:
    """A stop from stops.txt."""

    stop_id: str
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class RouteRecord:
    """A route from routes.txt."""

    route_id: str
    route_type: str
    short_name: str = ""
    long_name: str = ""


@dataclass(frozen=True)
class TripRecord:
    """A trip from trips.txt."""

    trip_id: str
    route_id: str


@dataclass(frozen=True)
class StopTimeRecord:
    """A scheduled stop event from stop_times.txt.

    Times are seconds since midnight of the service day and may exceed 86400
    for services running past midnight. ``None`` marks a value that could not
    be parsed.
    """

    trip_id: str
    stop_id: str
    stop_sequence: int
    arrival_seconds: int | None
    departure_seconds: int | None


@dataclass(frozen=True)
class FeedTables:
    """The four tables the rail graph is built from."""

    stops: tuple[StopRecord, ...]
    routes: tuple[RouteRecord, ...]
    trips: tuple[TripRecord, ...]
    stop_times: tuple[StopTimeRecord, ...]
