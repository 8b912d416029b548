"""
Spherical geometry over geographic points and paths.

Headings are degrees clockwise from North, distances are metres on a sphere
of radius EARTH_RADIUS. Point arguments may be GeoPoints, LocationReadings
or (lat, lng) tuples; synthesised points are returned as GeoPoint.
"""

import logging
import math
from typing import Any, Optional, Sequence

import numpy as np

from sphereutil.config import EARTH_RADIUS, SLERP_MIN_SIN_ANGLE
from sphereutil.data.models import GeoPoint, coords
from sphereutil.utils.math_util import arc_hav, hav_distance, wrap

logger = logging.getLogger('sphereutil.core.spherical')


def compute_heading(from_point: Any, to_point: Any) -> float:
    """
    Initial heading from one point to another.

    Returns:
        Heading in degrees clockwise from North, in [-180, 180)
    """
    from_lat, from_lng = map(math.radians, coords(from_point))
    to_lat, to_lng = map(math.radians, coords(to_point))
    d_lng = to_lng - from_lng
    heading = math.atan2(
        math.sin(d_lng) * math.cos(to_lat),
        math.cos(from_lat) * math.sin(to_lat)
        - math.sin(from_lat) * math.cos(to_lat) * math.cos(d_lng),
    )
    return wrap(math.degrees(heading), -180.0, 180.0)


def compute_offset(from_point: Any, distance: float, heading: float) -> GeoPoint:
    """
    Point reached by travelling along a great circle.

    Args:
        from_point: Starting point
        distance: Distance to travel in metres
        heading: Heading in degrees clockwise from North

    Returns:
        Destination GeoPoint
    """
    distance /= EARTH_RADIUS
    heading = math.radians(heading)
    from_lat, from_lng = map(math.radians, coords(from_point))
    cos_distance = math.cos(distance)
    sin_distance = math.sin(distance)
    sin_from_lat = math.sin(from_lat)
    cos_from_lat = math.cos(from_lat)
    sin_lat = cos_distance * sin_from_lat + sin_distance * cos_from_lat * math.cos(heading)
    d_lng = math.atan2(
        sin_distance * cos_from_lat * math.sin(heading),
        cos_distance - sin_from_lat * sin_lat,
    )
    with np.errstate(invalid='ignore'):
        lat = np.arcsin(sin_lat)
    return GeoPoint(math.degrees(lat), math.degrees(from_lng + d_lng))


def compute_offset_origin(to_point: Any, distance: float,
                          heading: float) -> Optional[GeoPoint]:
    """
    Origin of a great circle trip, given its destination, length and heading.

    Solves a quadratic for the origin latitude. The '+sqrt(discriminant)'
    root is tried first, the '-sqrt(discriminant)' root if the first lands
    outside [-90, 90].

    Returns:
        Origin GeoPoint, or None when no origin exists in lat/lng space
    """
    heading = math.radians(heading)
    distance /= EARTH_RADIUS
    to_lat, to_lng = coords(to_point)
    n1 = math.cos(distance)
    n2 = math.sin(distance) * math.cos(heading)
    n3 = math.sin(distance) * math.sin(heading)
    n4 = math.sin(math.radians(to_lat))
    n12 = n1 * n1
    discriminant = n2 * n2 * n12 + n12 * n12 - n12 * n4 * n4
    if discriminant < 0:
        logger.debug(f"No offset origin: discriminant {discriminant:.3g} < 0")
        return None

    denom = n1 * n1 + n2 * n2
    b = (n2 * n4 + math.sqrt(discriminant)) / denom
    a = (n4 - n2 * b) / n1
    from_lat = math.atan2(a, b)
    if from_lat < -math.pi / 2 or from_lat > math.pi / 2:
        b = (n2 * n4 - math.sqrt(discriminant)) / denom
        from_lat = math.atan2(a, b)
    if from_lat < -math.pi / 2 or from_lat > math.pi / 2:
        logger.debug("No offset origin: both latitude roots out of range")
        return None

    from_lng = math.radians(to_lng) - math.atan2(
        n3, n1 * math.cos(from_lat) - n2 * math.sin(from_lat)
    )
    return GeoPoint(math.degrees(from_lat), math.degrees(from_lng))


def interpolate(from_point: Any, to_point: Any, fraction: float) -> GeoPoint:
    """
    Point lying the given fraction of the way along the great circle arc.

    Nearly coincident points are interpolated linearly in lat/lng.
    """
    from_lat_deg, from_lng_deg = coords(from_point)
    to_lat_deg, to_lng_deg = coords(to_point)
    from_lat = math.radians(from_lat_deg)
    from_lng = math.radians(from_lng_deg)
    to_lat = math.radians(to_lat_deg)
    to_lng = math.radians(to_lng_deg)
    cos_from_lat = math.cos(from_lat)
    cos_to_lat = math.cos(to_lat)

    angle = compute_angle_between(from_point, to_point)
    sin_angle = math.sin(angle)
    if sin_angle < SLERP_MIN_SIN_ANGLE:
        return GeoPoint(
            from_lat_deg + fraction * (to_lat_deg - from_lat_deg),
            from_lng_deg + fraction * (to_lng_deg - from_lng_deg),
        )

    a = math.sin((1 - fraction) * angle) / sin_angle
    b = math.sin(fraction * angle) / sin_angle

    # Polar to cartesian, interpolate, back to polar
    x = a * cos_from_lat * math.cos(from_lng) + b * cos_to_lat * math.cos(to_lng)
    y = a * cos_from_lat * math.sin(from_lng) + b * cos_to_lat * math.sin(to_lng)
    z = a * math.sin(from_lat) + b * math.sin(to_lat)

    lat = math.atan2(z, math.sqrt(x * x + y * y))
    lng = math.atan2(y, x)
    return GeoPoint(math.degrees(lat), math.degrees(lng))


def _distance_radians(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance on the unit sphere; arguments in radians."""
    return float(arc_hav(hav_distance(lat1, lat2, lng1 - lng2)))


def compute_angle_between(from_point: Any, to_point: Any) -> float:
    """Angle between two points in radians (distance on the unit sphere)."""
    from_lat, from_lng = map(math.radians, coords(from_point))
    to_lat, to_lng = map(math.radians, coords(to_point))
    return _distance_radians(from_lat, from_lng, to_lat, to_lng)


def compute_distance_between(from_point: Any, to_point: Any) -> float:
    """Great circle distance between two points in metres."""
    return compute_angle_between(from_point, to_point) * EARTH_RADIUS


def compute_length(path: Sequence[Any]) -> float:
    """Length of a path in metres. Zero for fewer than 2 points."""
    if len(path) < 2:
        return 0.0
    length = 0.0
    prev_lat, prev_lng = map(math.radians, coords(path[0]))
    for point in path[1:]:
        lat, lng = map(math.radians, coords(point))
        length += _distance_radians(prev_lat, prev_lng, lat, lng)
        prev_lat, prev_lng = lat, lng
    return length * EARTH_RADIUS


def cumulative_distances(path: Sequence[Any]) -> np.ndarray:
    """
    Running distance along a path in metres.

    Returns:
        Array the same length as path; element i is the distance travelled
        from path[0] to path[i]
    """
    if len(path) == 0:
        return np.zeros(0)
    latlng = np.radians(np.array([coords(p) for p in path], dtype=float))
    lat = latlng[:, 0]
    lng = latlng[:, 1]
    steps = arc_hav(hav_distance(lat[:-1], lat[1:], lng[:-1] - lng[1:])) * EARTH_RADIUS
    return np.concatenate(([0.0], np.cumsum(steps)))


def compute_area(path: Sequence[Any]) -> float:
    """Area of a closed path in square metres."""
    return abs(compute_signed_area(path))


def compute_signed_area(path: Sequence[Any], radius: float = EARTH_RADIUS) -> float:
    """
    Signed area of a closed path on a sphere of the given radius.

    The sign gives the orientation of the path. "Inside" is the surface that
    does not contain the South Pole. Units are those of radius squared.
    """
    size = len(path)
    if size < 3:
        return 0.0
    total = 0.0
    last_lat, last_lng = coords(path[-1])
    prev_tan_lat = math.tan((math.pi / 2 - math.radians(last_lat)) / 2)
    prev_lng = math.radians(last_lng)
    # Sum the signed areas of the triangles formed by each edge and the North Pole
    for point in path:
        lat_deg, lng_deg = coords(point)
        tan_lat = math.tan((math.pi / 2 - math.radians(lat_deg)) / 2)
        lng = math.radians(lng_deg)
        total += _polar_triangle_area(tan_lat, lng, prev_tan_lat, prev_lng)
        prev_tan_lat = tan_lat
        prev_lng = lng
    return total * (radius * radius)


def _polar_triangle_area(tan1: float, lng1: float, tan2: float, lng2: float) -> float:
    """
    Signed area of a triangle with the North Pole as a vertex.

    From "Area of a spherical triangle given two edges and the included
    angle" (Todhunter, Spherical Trigonometry, p. 71, s. 103). The tan
    arguments are tan((pi/2 - latitude) / 2).
    """
    delta_lng = lng1 - lng2
    t = tan1 * tan2
    return 2 * math.atan2(t * math.sin(delta_lng), 1 + t * math.cos(delta_lng))
