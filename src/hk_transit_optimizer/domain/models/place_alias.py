"""Place alias domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceAlias:
    """Maps a user label to a geocoder query and an optional rail station code."""

    label: str
    query: str
    station_code: str | None = None
