"""Adapters layer - external system integrations."""

from hk_transit_optimizer.adapters.config import AliasTableLoader, AppConfig
from hk_transit_optimizer.adapters.gtfs import GtfsFeedSource
from hk_transit_optimizer.adapters.nominatim import NominatimGeocoder
from hk_transit_optimizer.adapters.otp import OtpTripPlanner

__all__ = [
    "AliasTableLoader",
    "AppConfig",
    "GtfsFeedSource",
    "NominatimGeocoder",
    "OtpTripPlanner",
]
