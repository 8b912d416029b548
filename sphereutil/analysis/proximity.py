"""
Point-near-path and point-near-edge tests with a tolerance in metres.

Great circle segments are tested with cross-track and along-track
haversines. Rhumb segments are tested in Mercator space, where they are
straight lines; the closest point found there is then judged by its true
great circle distance. That is an approximation, since "closest" in
Mercator space is not "closest" on the sphere, but the error is small for
small tolerances.
"""

import math
from typing import Any, Sequence

from sphereutil.config import DEFAULT_TOLERANCE, EARTH_RADIUS, SHORT_SEGMENT_HAV
from sphereutil.data.models import coords
from sphereutil.utils.math_util import (
    clamp,
    hav,
    hav_distance,
    hav_from_sin,
    inverse_mercator,
    mercator,
    sin_from_hav,
    sin_sum_from_hav,
    wrap,
)


def is_location_on_edge(point: Any, polygon: Sequence[Any], geodesic: bool,
                        tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Whether a point lies on or near the edge of a polygon.

    The edge is implicitly closed: the segment from the last point back to
    the first is included.
    """
    return location_index_on_edge_or_path(point, polygon, True, geodesic, tolerance) >= 0


def is_location_on_path(point: Any, polyline: Sequence[Any], geodesic: bool,
                        tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """
    Whether a point lies on or near a polyline.

    The polyline is open: no segment joins the last point to the first.
    """
    return location_index_on_edge_or_path(point, polyline, False, geodesic, tolerance) >= 0


def location_index_on_path(point: Any, polyline: Sequence[Any], geodesic: bool,
                           tolerance: float = DEFAULT_TOLERANCE) -> int:
    """Index of the open-polyline segment the point lies on, -1 if none."""
    return location_index_on_edge_or_path(point, polyline, False, geodesic, tolerance)


def location_index_on_edge_or_path(point: Any, poly: Sequence[Any], closed: bool,
                                   geodesic: bool, tolerance: float) -> int:
    """
    Whether (and where) a point lies on or near a polyline.

    Args:
        point: The needle
        poly: The haystack, a sequence of point-likes
        closed: Include the segment from the last point back to the first
        geodesic: Great circle (True) or rhumb (False) segments
        tolerance: Tolerance in metres

    Returns:
        -1 if the point is not on or near the polyline, otherwise the index
        of the first matching segment: 0 for poly[0]..poly[1] (inclusive),
        1 for poly[1]..poly[2], up to len(poly) - 2
    """
    size = len(poly)
    if size == 0:
        return -1
    tolerance = tolerance / EARTH_RADIUS
    hav_tolerance = hav(tolerance)
    lat3, lng3 = map(math.radians, coords(point))
    start_lat, start_lng = coords(poly[size - 1] if closed else poly[0])
    lat1 = math.radians(start_lat)
    lng1 = math.radians(start_lng)

    if geodesic:
        for idx, vertex in enumerate(poly):
            lat2, lng2 = map(math.radians, coords(vertex))
            if is_on_segment_gc(lat1, lng1, lat2, lng2, lat3, lng3, hav_tolerance):
                return max(0, idx - 1)
            lat1 = lat2
            lng1 = lng2
        return -1

    min_acceptable = lat3 - tolerance
    max_acceptable = lat3 + tolerance
    y1 = mercator(lat1)
    y3 = mercator(lat3)
    for idx, vertex in enumerate(poly):
        lat2, lng2 = map(math.radians, coords(vertex))
        y2 = mercator(lat2)
        if max(lat1, lat2) >= min_acceptable and min(lat1, lat2) <= max_acceptable:
            if (hav_distance(lat1, lat3, lng1 - lng3) <= hav_tolerance
                    or hav_distance(lat2, lat3, lng2 - lng3) <= hav_tolerance):
                return max(0, idx - 1)
            # Longitudes offset by -lng1; the implicit x1 is 0
            x2 = wrap(lng2 - lng1, -math.pi, math.pi)
            x3_base = wrap(lng3 - lng1, -math.pi, math.pi)
            # Also try the point wrapped once around the world each way
            for x3 in (x3_base, x3_base + 2 * math.pi, x3_base - 2 * math.pi):
                dy = y2 - y1
                len2 = x2 * x2 + dy * dy
                t = 0.0 if len2 <= 0 else clamp((x3 * x2 + (y3 - y1) * dy) / len2, 0.0, 1.0)
                x_closest = t * x2
                y_closest = y1 + t * dy
                lat_closest = inverse_mercator(y_closest)
                if hav_distance(lat3, lat_closest, x3 - x_closest) < hav_tolerance:
                    return max(0, idx - 1)
        lat1 = lat2
        lng1 = lng2
        y1 = y2
    return -1


def _sin_delta_bearing(lat1: float, lng1: float, lat2: float, lng2: float,
                       lat3: float, lng3: float) -> float:
    """sin(initial bearing 1->3 minus initial bearing 1->2)."""
    sin_lat1 = math.sin(lat1)
    cos_lat2 = math.cos(lat2)
    cos_lat3 = math.cos(lat3)
    lat31 = lat3 - lat1
    lng31 = lng3 - lng1
    lat21 = lat2 - lat1
    lng21 = lng2 - lng1
    a = math.sin(lng31) * cos_lat3
    c = math.sin(lng21) * cos_lat2
    b = math.sin(lat31) + 2 * sin_lat1 * cos_lat3 * hav(lng31)
    d = math.sin(lat21) + 2 * sin_lat1 * cos_lat2 * hav(lng21)
    denom = (a * a + b * b) * (c * c + d * d)
    if denom <= 0:
        return 1.0
    return (a * d - b * c) / math.sqrt(denom)


def is_on_segment_gc(lat1: float, lng1: float, lat2: float, lng2: float,
                     lat3: float, lng3: float, hav_tolerance: float) -> bool:
    """
    Whether (lat3, lng3) is within hav_tolerance of the great circle segment
    (lat1, lng1) to (lat2, lng2). Radians; tolerance as hav(angle).
    """
    hav_dist13 = hav_distance(lat1, lat3, lng1 - lng3)
    if hav_dist13 <= hav_tolerance:
        return True
    hav_dist23 = hav_distance(lat2, lat3, lng2 - lng3)
    if hav_dist23 <= hav_tolerance:
        return True

    sin_bearing = _sin_delta_bearing(lat1, lng1, lat2, lng2, lat3, lng3)
    sin_dist13 = sin_from_hav(hav_dist13)
    hav_cross_track = hav_from_sin(sin_dist13 * sin_bearing)
    if hav_cross_track > hav_tolerance:
        return False

    hav_dist12 = hav_distance(lat1, lat2, lng1 - lng2)
    term = hav_dist12 + hav_cross_track * (1 - 2 * hav_dist12)
    if hav_dist13 > term or hav_dist23 > term:
        return False
    if hav_dist12 < SHORT_SEGMENT_HAV:
        return True

    cos_cross_track = 1 - 2 * hav_cross_track
    hav_along_track13 = (hav_dist13 - hav_cross_track) / cos_cross_track
    hav_along_track23 = (hav_dist23 - hav_cross_track) / cos_cross_track
    sin_sum_along_track = sin_sum_from_hav(hav_along_track13, hav_along_track23)
    # Compare with a half circle using the sign of sin()
    return bool(sin_sum_along_track > 0)
