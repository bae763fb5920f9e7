"""Domain models for the transit order optimizer."""

from hk_transit_optimizer.domain.models.cost_matrix import CostMatrix
from hk_transit_optimizer.domain.models.error_details import ErrorDetails
from hk_transit_optimizer.domain.models.feed_records import (
    FeedTables,
    RouteRecord,
    StopRecord,
    StopTimeRecord,
    TripRecord,
)
from hk_transit_optimizer.domain.models.geocode_result import GeocodeResult
from hk_transit_optimizer.domain.models.itinerary import Itinerary, OrderResult, Segment
from hk_transit_optimizer.domain.models.place_alias import PlaceAlias
from hk_transit_optimizer.domain.models.point import Point
from hk_transit_optimizer.domain.models.policy import LegSelectionPolicy, RailGraphSettings
from hk_transit_optimizer.domain.models.rail_graph import RailGraph
from hk_transit_optimizer.domain.models.travel_plan import (
    Leg,
    PlanOutcome,
    PlanSource,
    TravelPlan,
)

__all__ = [
    "CostMatrix",
    "ErrorDetails",
    "FeedTables",
    "GeocodeResult",
    "Itinerary",
    "Leg",
    "LegSelectionPolicy",
    "OrderResult",
    "PlaceAlias",
    "PlanOutcome",
    "PlanSource",
    "Point",
    "RailGraph",
    "RailGraphSettings",
    "RouteRecord",
    "Segment",
    "StopRecord",
    "StopTimeRecord",
    "TravelPlan",
    "TripRecord",
]
