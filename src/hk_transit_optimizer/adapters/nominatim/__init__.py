"""Nominatim geocoder adapter."""

from hk_transit_optimizer.adapters.nominatim.nominatim_geocoder import NominatimGeocoder

__all__ = ["NominatimGeocoder"]
