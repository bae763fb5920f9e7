"""Request and response bodies of the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from hk_transit_optimizer.domain.models.itinerary import Itinerary, Segment
from hk_transit_optimizer.domain.models.point import Point
from hk_transit_optimizer.domain.models.travel_plan import Leg

NOTES = [
    "Transit times come from OpenTripPlanner built with Hong Kong GTFS + OSM data.",
    "MTR times come from the static GTFS timetable plus a fixed wait.",
    "If neither is available for a pair, it falls back to walking.",
]


class _ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class OptimizeRequest(BaseModel):
    """Body of POST /api/optimize."""

    origin: str
    destinations: list[str]


class LegResponse(_ApiModel):
    mode: str
    route: str | None = None
    from_name: str | None = Field(default=None, alias="from")
    to_name: str | None = Field(default=None, alias="to")
    duration_sec: int = Field(alias="durationSec")

    @classmethod
    def from_leg(cls, leg: Leg) -> "LegResponse":
        return cls(
            mode=leg.mode,
            route=leg.route,
            from_name=leg.from_name,
            to_name=leg.to_name,
            duration_sec=leg.duration_seconds,
        )


class SegmentResponse(_ApiModel):
    from_label: str = Field(alias="from")
    to_label: str = Field(alias="to")
    duration_min: int = Field(alias="durationMin")
    source: str | None = None
    legs: list[LegResponse]

    @classmethod
    def from_segment(cls, segment: Segment) -> "SegmentResponse":
        return cls(
            from_label=segment.from_label,
            to_label=segment.to_label,
            duration_min=round(segment.duration_seconds / 60),
            source=segment.source.value if segment.source else None,
            legs=[LegResponse.from_leg(leg) for leg in segment.legs],
        )


class PointResponse(_ApiModel):
    label: str
    query: str
    lat: float
    lon: float
    display: str
    station_code: str | None = Field(default=None, alias="stationCode")

    @classmethod
    def from_point(cls, point: Point) -> "PointResponse":
        return cls(
            label=point.label,
            query=point.query,
            lat=point.latitude,
            lon=point.longitude,
            display=point.display_name,
            station_code=point.station_code,
        )


class OptimizeResponse(_ApiModel):
    """Body returned by POST /api/optimize."""

    origin: PointResponse
    destinations: list[PointResponse]
    order: list[str]
    total_min: int = Field(alias="totalMin")
    segments: list[SegmentResponse]
    notes: list[str] = Field(default_factory=lambda: list(NOTES))

    @classmethod
    def from_itinerary(cls, itinerary: Itinerary) -> "OptimizeResponse":
        return cls(
            origin=PointResponse.from_point(itinerary.origin),
            destinations=[PointResponse.from_point(p) for p in itinerary.destinations],
            order=itinerary.ordered_labels,
            total_min=round(itinerary.total_seconds / 60),
            segments=[SegmentResponse.from_segment(s) for s in itinerary.segments],
        )
