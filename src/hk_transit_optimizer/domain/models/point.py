"""Point domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A user supplied location after geocoding.

    ``label`` is what the user typed, ``query`` what was sent to the geocoder.
    ``station_code`` comes from the alias table, never from geocoding.
    """

    label: str
    query: str
    latitude: float
    longitude: float
    display_name: str = ""
    station_code: str | None = None
