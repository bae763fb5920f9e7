"""Map parsed GTFS rows to typed feed records."""

import logging
import re

from hk_transit_optimizer.domain.models.feed_records import (
    RouteRecord,
    StopRecord,
    StopTimeRecord,
    TripRecord,
)

logger = logging.getLogger(__name__)

_GTFS_TIME = re.compile(r"^(\d+):(\d{2}):(\d{2})$")


def parse_gtfs_time(value: str | None) -> int | None:
    """Seconds since midnight for ``H+:MM:SS``; hours past 23 are allowed."""
    if not value:
        return None
    match = _GTFS_TIME.match(value.strip())
    if not match:
        return None
    hours, minutes, seconds = (int(group) for group in match.groups())
    if minutes >= 60 or seconds >= 60:
        return None
    return hours * 3600 + minutes * 60 + seconds


def map_stops(rows: list[dict[str, str]]) -> tuple[StopRecord, ...]:
    """Stops with usable coordinates; rows with bad coordinates are dropped."""
    stops: list[StopRecord] = []
    dropped = 0
    for row in rows:
        stop_id = row.get("stop_id", "").strip()
        try:
            latitude = float(row.get("stop_lat", ""))
            longitude = float(row.get("stop_lon", ""))
        except ValueError:
            dropped += 1
            continue
        if not stop_id:
            dropped += 1
            continue
        stops.append(StopRecord(stop_id, row.get("stop_name", "").strip(), latitude, longitude))
    if dropped:
        logger.debug(f"Dropped {dropped} stops without id or coordinates")
    return tuple(stops)


def map_routes(rows: list[dict[str, str]]) -> tuple[RouteRecord, ...]:
    return tuple(
        RouteRecord(
            route_id=row.get("route_id", "").strip(),
            route_type=row.get("route_type", "").strip(),
            short_name=row.get("route_short_name", "").strip(),
            long_name=row.get("route_long_name", "").strip(),
        )
        for row in rows
        if row.get("route_id", "").strip()
    )


def map_trips(rows: list[dict[str, str]]) -> tuple[TripRecord, ...]:
    return tuple(
        TripRecord(trip_id=row.get("trip_id", "").strip(), route_id=row.get("route_id", "").strip())
        for row in rows
        if row.get("trip_id", "").strip()
    )


def map_stop_times(rows: list[dict[str, str]]) -> tuple[StopTimeRecord, ...]:
    """Stop events; an unparseable time is kept as None, a bad sequence drops the row."""
    events: list[StopTimeRecord] = []
    dropped = 0
    for row in rows:
        raw_sequence = row.get("stop_sequence", "").strip() or "0"
        try:
            sequence = int(raw_sequence)
        except ValueError:
            dropped += 1
            continue
        events.append(
            StopTimeRecord(
                trip_id=row.get("trip_id", "").strip(),
                stop_id=row.get("stop_id", "").strip(),
                stop_sequence=sequence,
                arrival_seconds=parse_gtfs_time(row.get("arrival_time")),
                departure_seconds=parse_gtfs_time(row.get("departure_time")),
            )
        )
    if dropped:
        logger.debug(f"Dropped {dropped} stop times with an invalid stop_sequence")
    return tuple(events)
