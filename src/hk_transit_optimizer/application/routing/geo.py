"""Great-circle distance and walking time."""

import math

EARTH_RADIUS_METERS = 6_371_000.0


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates in meters."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(a)))


def walk_seconds(
    lat1: float, lon1: float, lat2: float, lon2: float, speed_mps: float = 1.2
) -> int:
    """Walking time in whole seconds at a constant speed."""
    return round(haversine_meters(lat1, lon1, lat2, lon2) / speed_mps)
