"""Geocode result domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeocodeResult:
    """Coordinates and display name for an address query."""

    latitude: float
    longitude: float
    display_name: str
