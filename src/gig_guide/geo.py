# ABOUTME: Great-circle distance between two coordinates.
# ABOUTME: Haversine formula on a spherical earth of radius 6371 km.

import math

from gig_guide.models import Coordinate

EARTH_RADIUS_KM = 6371.0


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in kilometres. Symmetric and never negative."""
    lat_a = math.radians(a.latitude)
    lat_b = math.radians(b.latitude)
    d_lat = math.radians(abs(b.latitude - a.latitude))
    d_lon = math.radians(abs(b.longitude - a.longitude))

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat_a) * math.cos(lat_b) * math.sin(d_lon / 2) ** 2
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))
