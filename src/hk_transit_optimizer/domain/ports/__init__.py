"""Ports (interfaces) for the ports-and-adapters architecture."""

from hk_transit_optimizer.domain.ports.feed_source import FeedSource
from hk_transit_optimizer.domain.ports.geocoder import Geocoder
from hk_transit_optimizer.domain.ports.itinerary_planner import ItineraryPlanner
from hk_transit_optimizer.domain.ports.trip_planner import TripPlanner

__all__ = [
    "FeedSource",
    "Geocoder",
    "ItineraryPlanner",
    "TripPlanner",
]
