"""Domain layer - core models, ports and errors."""

from hk_transit_optimizer.domain.exceptions import (
    FeedLoadError,
    GeocodingError,
    InvalidRequestError,
    TransitOptimizerError,
)
from hk_transit_optimizer.domain.models import (
    CostMatrix,
    Itinerary,
    Leg,
    Point,
    RailGraph,
    TravelPlan,
)
from hk_transit_optimizer.domain.ports import FeedSource, Geocoder, ItineraryPlanner, TripPlanner

__all__ = [
    "CostMatrix",
    "FeedLoadError",
    "FeedSource",
    "GeocodingError",
    "Geocoder",
    "ItineraryPlanner",
    "InvalidRequestError",
    "Itinerary",
    "Leg",
    "Point",
    "RailGraph",
    "TransitOptimizerError",
    "TravelPlan",
    "TripPlanner",
]
