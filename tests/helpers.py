"""Shared builders and fakes for tests."""

import io
import zipfile
from datetime import datetime
from typing import Any

from hk_transit_optimizer.domain.exceptions import GeocodingError
from hk_transit_optimizer.domain.models import (
    FeedTables,
    GeocodeResult,
    Leg,
    PlanOutcome,
    PlanSource,
    Point,
    TravelPlan,
)

STOPS_TXT = """stop_id,stop_name,stop_lat,stop_lon
MTR-WTS,Wong Tai Sin,22.3417,114.1938
MTR-DIH-1,Diamond Hill,22.3401,114.2016
MTR-DIH-2,Diamond Hill (Tuen Ma),22.3401,114.2016
MTR-KAT,Kai Tak,22.3305,114.1995
MTR-KWT,Kwun Tong,22.3122,114.2263
MTR-TST,Tsim Sha Tsui,22.2972,114.1722
MTR-ETS,East Tsim Sha Tsui,22.2951,114.1747
BUS-1,"Wong Tai Sin, Bus Terminus",22.3420,114.1940
"""

ROUTES_TXT = """route_id,route_type,route_short_name,route_long_name
KTL,1,,Kwun Tong Line
TML,1,,Tuen Ma Line
B1,3,1,"Wong Tai Sin - Kwun Tong"
"""

TRIPS_TXT = """route_id,service_id,trip_id
KTL,WD,KTL-1
TML,WD,TML-1
B1,WD,B1-1
"""

STOP_TIMES_TXT = """trip_id,arrival_time,departure_time,stop_id,stop_sequence
KTL-1,06:00:00,06:00:30,MTR-WTS,1
KTL-1,06:02:30,06:03:00,MTR-DIH-1,2
KTL-1,06:10:00,06:10:00,MTR-KWT,3
TML-1,06:05:00,06:05:00,MTR-DIH-2,1
TML-1,06:07:00,06:07:30,MTR-KAT,2
B1-1,06:00:00,06:00:00,BUS-1,1
B1-1,06:01:00,06:01:00,MTR-WTS,2
"""

FEED_TABLES = {
    "stops.txt": STOPS_TXT,
    "routes.txt": ROUTES_TXT,
    "trips.txt": TRIPS_TXT,
    "stop_times.txt": STOP_TIMES_TXT,
}


def build_gtfs_zip(tables: dict[str, str] | None = None) -> bytes:
    """Zip archive with the given table files (the sample feed by default)."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for name, text in (FEED_TABLES if tables is None else tables).items():
            archive.writestr(name, text)
    return buffer.getvalue()


def build_corrupt_gtfs_zip() -> bytes:
    """Sample archive whose stops.txt bytes no longer match the stored CRC."""
    payload = build_gtfs_zip()
    original = b"MTR-KWT,Kwun Tong,"
    assert payload.count(original) == 1
    return payload.replace(original, b"MTR-KWT,Kwun Tonx,")


def sample_feed_tables() -> FeedTables:
    """The sample feed parsed into records."""
    from hk_transit_optimizer.adapters.gtfs import read_feed_archive

    return read_feed_archive(build_gtfs_zip())


def make_point(
    label: str,
    latitude: float = 22.3417,
    longitude: float = 114.1938,
    station_code: str | None = None,
) -> Point:
    return Point(
        label=label,
        query=label,
        latitude=latitude,
        longitude=longitude,
        display_name=label,
        station_code=station_code,
    )


def transit_plan(seconds: int, route: str = "1") -> TravelPlan:
    leg = Leg("BUS", route, "Stop A", "Stop B", seconds)
    return TravelPlan(seconds, (leg,), PlanSource.TRANSIT)


class FakeTripPlanner:
    """Trip planner returning a fixed outcome and recording calls."""

    def __init__(self, outcome: PlanOutcome | None = None) -> None:
        self.outcome = outcome or PlanOutcome.missing("otp no itinerary")
        self.calls: list[tuple[str, str, datetime]] = []

    async def plan_trip(self, origin: Point, destination: Point, departure: datetime) -> PlanOutcome:
        self.calls.append((origin.label, destination.label, departure))
        return self.outcome


class FakeGeocoder:
    """Geocoder answering from a dict of query -> (lat, lon)."""

    def __init__(self, places: dict[str, tuple[float, float]] | None = None) -> None:
        self.places = places or {}
        self.calls: list[str] = []

    async def geocode(self, query: str) -> GeocodeResult:
        self.calls.append(query)
        if query not in self.places:
            raise GeocodingError(f"geocode no results for: {query}")
        latitude, longitude = self.places[query]
        return GeocodeResult(latitude, longitude, f"{query}, Hong Kong")


class StaticFeedSource:
    """Feed source returning fixed tables, or raising a fixed error."""

    def __init__(self, tables: FeedTables | None = None, error: Exception | None = None) -> None:
        self.tables = tables
        self.error = error
        self.calls = 0

    async def load(self) -> FeedTables:
        import asyncio

        self.calls += 1
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        assert self.tables is not None
        return self.tables


class FakeResponse:
    """Minimal stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, status: int = 200, payload: Any = None, body: bytes = b"") -> None:
        self.status = status
        self._payload = payload
        self._body = body

    async def json(self, content_type: str | None = None) -> Any:  # noqa: ARG002
        return self._payload

    async def text(self) -> str:
        return str(self._payload)

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *_exc: object) -> None:
        return None


class FakeSession:
    """Minimal stand-in for aiohttp.ClientSession.get."""

    def __init__(self, response: FakeResponse | None = None, error: Exception | None = None) -> None:
        self.response = response or FakeResponse()
        self.error = error
        self.calls: list[tuple[str, dict[str, Any]]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response
