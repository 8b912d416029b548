"""
Encoded polyline codec.

Each coordinate is rounded to 1e-5 degrees and stored as the delta from the
previous point. A delta is zig-zag encoded and written as 5-bit groups,
least significant first, with 0x20 set on every group but the last, each
offset by 63 into printable ASCII.

Encoding is lossy only through the initial rounding: re-encoding a decoded
path gives back the same string.
"""

import logging
import math
from typing import Any, List, Sequence

from sphereutil.config import POLYLINE_CHAR_OFFSET, POLYLINE_PRECISION
from sphereutil.data.models import GeoPoint, coords

logger = logging.getLogger('sphereutil.utils.polyline_codec')


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _wrap_scaled_longitude(lng: int) -> int:
    half_turn = int(180 * POLYLINE_PRECISION)
    return (lng + half_turn) % (2 * half_turn) - half_turn


def _encode_value(value: int, out: List[str]) -> None:
    value = ~(value << 1) if value < 0 else value << 1
    while value >= 0x20:
        out.append(chr((0x20 | (value & 0x1f)) + POLYLINE_CHAR_OFFSET))
        value >>= 5
    out.append(chr(value + POLYLINE_CHAR_OFFSET))


def encode(path: Sequence[Any]) -> str:
    """
    Encode a sequence of points into a polyline string.

    Args:
        path: Sequence of point-likes

    Returns:
        Encoded polyline (empty string for an empty path)
    """
    last_lat = 0
    last_lng = 0
    out: List[str] = []
    for point in path:
        lat_deg, lng_deg = coords(point)
        lat = _round_half_up(lat_deg * POLYLINE_PRECISION)
        # Keep the rounded longitude in [-180, 180) so decoded points re-encode identically
        lng = _wrap_scaled_longitude(_round_half_up(lng_deg * POLYLINE_PRECISION))
        _encode_value(lat - last_lat, out)
        _encode_value(lng - last_lng, out)
        last_lat = lat
        last_lng = lng
    return ''.join(out)


def _decode_value(encoded: str, index: int):
    """Read one value starting at index. Returns (value, next_index)."""
    result = 0
    shift = 0
    while True:
        if index >= len(encoded):
            raise ValueError(f"Truncated polyline: value at offset {index} is incomplete")
        b = ord(encoded[index]) - POLYLINE_CHAR_OFFSET
        index += 1
        result |= (b & 0x1f) << shift
        shift += 5
        if b < 0x20:
            break
    value = ~(result >> 1) if result & 1 else result >> 1
    return value, index


def decode(encoded: str) -> List[GeoPoint]:
    """
    Decode a polyline string into points.

    Input is trusted to be well formed; characters outside the encoding
    alphabet decode to meaningless coordinates.

    Raises:
        ValueError: If the string ends in the middle of a coordinate
    """
    path: List[GeoPoint] = []
    index = 0
    lat = 0
    lng = 0
    while index < len(encoded):
        d_lat, index = _decode_value(encoded, index)
        d_lng, index = _decode_value(encoded, index)
        lat += d_lat
        lng += d_lng
        path.append(GeoPoint(lat / POLYLINE_PRECISION, lng / POLYLINE_PRECISION))
    logger.debug(f"Decoded {len(path)} points from {len(encoded)} characters")
    return path
