"""
Douglas-Peucker simplification of polylines and polygons.

The divide and conquer runs off an explicit stack of (lo, hi) index ranges
rather than recursion, so deep inputs cannot exhaust the call stack. The
time complexity is O(n^2); callers should bound how often and on how much
input they run it.
"""

import logging
import math
from typing import Any, List, Sequence

from sphereutil.config import CLOSED_POLYGON_OFFSET
from sphereutil.core.spherical import compute_distance_between
from sphereutil.data.models import GeoPoint, coords

logger = logging.getLogger('sphereutil.analysis.simplify')


def simplify(path: Sequence[Any], tolerance: float) -> List[Any]:
    """
    Simplify a polyline or polygon with Douglas-Peucker decimation.

    A polygon must be closed (first and last points equal) to be treated as
    a polygon; an unclosed polygon may not be fully simplified. The input
    sequence is not modified.

    Args:
        path: Polyline or closed polygon, at least 1 point
        tolerance: Maximum deviation in metres, must be positive. Larger
            tolerances keep fewer points.

    Returns:
        The retained items of path, in order, first and last always included

    Raises:
        ValueError: If path is empty or tolerance is not positive
    """
    n = len(path)
    if n < 1:
        raise ValueError("Polyline must have at least 1 point")
    if tolerance <= 0:
        raise ValueError("Tolerance must be greater than zero")

    # Working copy: the last point of a closed polygon is nudged so that the
    # first and last segments are not degenerate
    work = list(path)
    if is_closed_polygon(path):
        last_lat, last_lng = coords(path[-1])
        work[-1] = GeoPoint(last_lat + CLOSED_POLYGON_OFFSET, last_lng + CLOSED_POLYGON_OFFSET)

    dists = [0.0] * n
    dists[0] = 1.0
    dists[n - 1] = 1.0

    if n > 2:
        stack = [(0, n - 1)]
        while stack:
            lo, hi = stack.pop()
            max_dist = 0.0
            max_idx = lo
            for idx in range(lo + 1, hi):
                dist = distance_to_line(work[idx], work[lo], work[hi])
                if dist > max_dist:
                    max_dist = dist
                    max_idx = idx
            if max_dist > tolerance:
                dists[max_idx] = max_dist
                stack.append((lo, max_idx))
                stack.append((max_idx, hi))

    simplified = [item for item, dist in zip(path, dists) if dist != 0.0]
    logger.debug(f"Simplified {n} points to {len(simplified)} (tolerance {tolerance}m)")
    return simplified


def is_closed_polygon(path: Sequence[Any]) -> bool:
    """True if the first and last points of a non-empty path have the same coordinates."""
    return coords(path[0]) == coords(path[-1])


def distance_to_line(p: Any, start: Any, end: Any) -> float:
    """
    Distance on the sphere from p to the line segment start..end.

    The projection parameter is computed on the lat/lng chord, then the
    great circle distance to the projected point is returned.

    Returns:
        Distance in metres
    """
    if coords(start) == coords(end):
        return compute_distance_between(end, p)

    s0lat, s0lng = map(math.radians, coords(p))
    s1lat, s1lng = map(math.radians, coords(start))
    s2lat, s2lng = map(math.radians, coords(end))
    s2s1lat = s2lat - s1lat
    s2s1lng = s2lng - s1lng
    u = ((s0lat - s1lat) * s2s1lat + (s0lng - s1lng) * s2s1lng) / (
        s2s1lat * s2s1lat + s2s1lng * s2s1lng
    )
    if u <= 0:
        return compute_distance_between(p, start)
    if u >= 1:
        return compute_distance_between(p, end)

    start_lat, start_lng = coords(start)
    end_lat, end_lng = coords(end)
    projected = GeoPoint(
        start_lat + u * (end_lat - start_lat),
        start_lng + u * (end_lng - start_lng),
    )
    return compute_distance_between(p, projected)
