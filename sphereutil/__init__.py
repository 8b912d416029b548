"""
Spherical geometry engine for geographic points, paths and polygons.

Distances, headings and offsets on a spherical Earth, point-in-polygon and
point-on-path tests, Douglas-Peucker simplification and the encoded
polyline codec. Every function is pure and safe to call from any thread.
"""

from sphereutil.data.models import GeoPoint, LocationReading, coords
from sphereutil.core.spherical import (
    compute_angle_between,
    compute_area,
    compute_distance_between,
    compute_heading,
    compute_length,
    compute_offset,
    compute_offset_origin,
    compute_signed_area,
    cumulative_distances,
    interpolate,
)
from sphereutil.analysis.containment import contains_coordinates, contains_location
from sphereutil.analysis.proximity import (
    is_location_on_edge,
    is_location_on_path,
    location_index_on_edge_or_path,
    location_index_on_path,
)
from sphereutil.analysis.simplify import distance_to_line, is_closed_polygon, simplify
from sphereutil.utils.polyline_codec import decode, encode

__all__ = [
    'GeoPoint',
    'LocationReading',
    'coords',
    'compute_angle_between',
    'compute_area',
    'compute_distance_between',
    'compute_heading',
    'compute_length',
    'compute_offset',
    'compute_offset_origin',
    'compute_signed_area',
    'cumulative_distances',
    'interpolate',
    'contains_coordinates',
    'contains_location',
    'is_location_on_edge',
    'is_location_on_path',
    'location_index_on_edge_or_path',
    'location_index_on_path',
    'distance_to_line',
    'is_closed_polygon',
    'simplify',
    'decode',
    'encode',
]
