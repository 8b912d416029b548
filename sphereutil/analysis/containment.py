"""
Point-in-polygon test on the sphere.

Counts how many polygon edges the meridian segment from the point down to
the South Pole crosses; an odd count means inside. "Inside" is the region
that does not contain the South Pole. Each edge is examined in a frame where
its start longitude is 0, which keeps antimeridian handling to a wrap().
"""

import math
from typing import Any, Sequence

from sphereutil.data.models import coords
from sphereutil.utils.math_util import mercator, wrap


def _tan_lat_gc(lat1: float, lat2: float, lng2: float, lng3: float) -> float:
    """tan(latitude at lng3) on the great circle (lat1, 0) to (lat2, lng2)."""
    return (math.tan(lat1) * math.sin(lng2 - lng3) + math.tan(lat2) * math.sin(lng3)) / math.sin(lng2)


def _mercator_lat_rhumb(lat1: float, lat2: float, lng2: float, lng3: float) -> float:
    """mercator(latitude at lng3) on the rhumb line (lat1, 0) to (lat2, lng2)."""
    return (mercator(lat1) * (lng2 - lng3) + mercator(lat2) * lng3) / lng2


def _intersects(lat1: float, lat2: float, lng2: float,
                lat3: float, lng3: float, geodesic: bool) -> bool:
    """
    Whether the segment from (lat3, lng3) down to the South Pole crosses
    the edge (lat1, 0) to (lat2, lng2). Radians, longitudes offset by -lng1.
    """
    # Both ends on the same side of lng3
    if (lng3 >= 0 and lng3 >= lng2) or (lng3 < 0 and lng3 < lng2):
        return False
    # Point is the South Pole
    if lat3 <= -math.pi / 2:
        return False
    # Either edge end is a pole
    if lat1 <= -math.pi / 2 or lat2 <= -math.pi / 2 or lat1 >= math.pi / 2 or lat2 >= math.pi / 2:
        return False
    if lng2 <= -math.pi:
        return False

    linear_lat = (lat1 * (lng2 - lng3) + lat2 * lng3) / lng2
    # Northern hemisphere edge and point under the lat/lng line
    if lat1 >= 0 and lat2 >= 0 and lat3 < linear_lat:
        return False
    # Southern hemisphere edge and point above the lat/lng line
    if lat1 <= 0 and lat2 <= 0 and lat3 >= linear_lat:
        return True
    # North Pole
    if lat3 >= math.pi / 2:
        return True

    # Compare through a strictly increasing function of latitude
    if geodesic:
        return math.tan(lat3) >= _tan_lat_gc(lat1, lat2, lng2, lng3)
    return mercator(lat3) >= _mercator_lat_rhumb(lat1, lat2, lng2, lng3)


def contains_coordinates(latitude: float, longitude: float,
                         polygon: Sequence[Any], geodesic: bool) -> bool:
    """
    Whether (latitude, longitude) lies inside the polygon.

    The polygon is always treated as closed whether or not the last point
    repeats the first. Edges are great circle segments if geodesic is True,
    rhumb lines otherwise. A point equal to a vertex is inside.

    Args:
        latitude, longitude: Point in decimal degrees
        polygon: Sequence of point-likes (may be empty)
        geodesic: Great circle (True) or rhumb (False) edges

    Returns:
        True if inside, False otherwise (always False for an empty polygon)
    """
    if len(polygon) == 0:
        return False
    lat3 = math.radians(latitude)
    lng3 = math.radians(longitude)
    prev_lat, prev_lng = coords(polygon[-1])
    lat1 = math.radians(prev_lat)
    lng1 = math.radians(prev_lng)
    crossings = 0
    for point in polygon:
        d_lng3 = wrap(lng3 - lng1, -math.pi, math.pi)
        if lat3 == lat1 and d_lng3 == 0.0:
            return True
        lat_deg, lng_deg = coords(point)
        lat2 = math.radians(lat_deg)
        lng2 = math.radians(lng_deg)
        if _intersects(lat1, lat2, wrap(lng2 - lng1, -math.pi, math.pi), lat3, d_lng3, geodesic):
            crossings += 1
        lat1 = lat2
        lng1 = lng2
    return crossings % 2 == 1


def contains_location(point: Any, polygon: Sequence[Any], geodesic: bool) -> bool:
    """Whether a point lies inside the polygon. See contains_coordinates()."""
    latitude, longitude = coords(point)
    return contains_coordinates(latitude, longitude, polygon, geodesic)
