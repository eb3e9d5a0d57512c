"""Great-circle helpers shared by the estimator and the route engine."""
from __future__ import annotations

from math import atan2, cos, degrees, radians, sin, sqrt
from typing import Sequence

from marine_route.core.models import Coordinates

EARTH_RADIUS_KM = 6371.0
KM_TO_NM = 0.539957


def haversine_nm(a: Coordinates, b: Coordinates) -> float:
    """Great-circle distance in nautical miles between two WGS-84 points."""
    lat1r, lon1r, lat2r, lon2r = map(radians, [a.lat, a.lon, b.lat, b.lon])
    dlat = lat2r - lat1r
    dlon = lon2r - lon1r
    h = sin(dlat / 2) ** 2 + cos(lat1r) * cos(lat2r) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(h), sqrt(1 - h))
    return EARTH_RADIUS_KM * c * KM_TO_NM


def path_distance_nm(waypoints: Sequence[Coordinates]) -> float:
    """Sum of leg distances along an ordered waypoint list."""
    return sum(haversine_nm(waypoints[i], waypoints[i + 1]) for i in range(len(waypoints) - 1))


def bearing_deg(a: Coordinates, b: Coordinates) -> float:
    """Initial bearing (degrees clockwise from true north)."""
    lat1r, lon1r, lat2r, lon2r = map(radians, [a.lat, a.lon, b.lat, b.lon])
    dlon = lon2r - lon1r
    x = sin(dlon) * cos(lat2r)
    y = cos(lat1r) * sin(lat2r) - sin(lat1r) * cos(lat2r) * cos(dlon)
    return (degrees(atan2(x, y)) + 360.0) % 360.0


def midpoint(a: Coordinates, b: Coordinates) -> Coordinates:
    """Plain lat/lon average; good enough for the short legs we sample."""
    return Coordinates(lat=(a.lat + b.lat) / 2, lon=(a.lon + b.lon) / 2)


def offset(p: Coordinates, dlat: float, dlon: float) -> Coordinates:
    """Shift a point by degrees, clamping latitude and wrapping longitude."""
    lat = max(-90.0, min(90.0, p.lat + dlat))
    lon = p.lon + dlon
    if lon > 180.0 or lon < -180.0:
        lon = ((lon + 180.0) % 360.0) - 180.0
    return Coordinates(lat=lat, lon=lon)
