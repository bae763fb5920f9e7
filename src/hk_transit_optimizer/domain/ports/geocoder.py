"""Geocoder port."""

from typing import Protocol

from hk_transit_optimizer.domain.models.geocode_result import GeocodeResult


class Geocoder(Protocol):
    """Port for turning address text into coordinates."""

    async def geocode(self, query: str) -> GeocodeResult:
        """Resolve a query. Raises GeocodingError when nothing is found."""
        ...
