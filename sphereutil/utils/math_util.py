"""
Scalar math primitives shared by the spherical and path/polygon modules.

All angles are in radians. The trigonometric helpers take plain floats or
numpy arrays; floats go through the math module, arrays through numpy
ufuncs. Either way, inputs outside their domain produce NaN rather than
raising.
"""

import math

import numpy as np

from sphereutil.config import EARTH_RADIUS

__all__ = [
    'EARTH_RADIUS',
    'clamp',
    'wrap',
    'mod',
    'mercator',
    'inverse_mercator',
    'hav',
    'arc_hav',
    'sin_from_hav',
    'hav_from_sin',
    'sin_sum_from_hav',
    'hav_distance',
]


def clamp(x: float, low: float, high: float) -> float:
    """Restrict x to the range [low, high]."""
    if x < low:
        return low
    if x > high:
        return high
    return x


def wrap(n: float, low: float, high: float) -> float:
    """
    Wrap n into the inclusive-exclusive interval [low, high).

    Used for longitudes (-pi, pi) and headings in degrees (-180, 180).
    """
    if low <= n < high:
        return n
    return mod(n - low, high - low) + low


def mod(x: float, m: float) -> float:
    """Non-negative remainder of x / m."""
    return ((x % m) + m) % m


def mercator(lat):
    """Mercator Y corresponding to latitude."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.log(np.tan(lat * 0.5 + math.pi / 4))


def inverse_mercator(y):
    """Latitude corresponding to Mercator Y."""
    return 2 * np.arctan(np.exp(y)) - math.pi / 2


def _is_array(*args) -> bool:
    return any(isinstance(a, np.ndarray) for a in args)


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def hav(x):
    """
    Haversine of an angle.

    hav(x) == (1 - cos(x)) / 2 == sin(x / 2)^2
    """
    if _is_array(x):
        sin_half = np.sin(x * 0.5)
    else:
        sin_half = math.sin(x * 0.5)
    return sin_half * sin_half


def arc_hav(x):
    """
    Inverse haversine, stable around 0.

    arc_hav(x) == acos(1 - 2 * x) == 2 * asin(sqrt(x)). The argument must be
    in [0, 1]; the result is non-negative.
    """
    if _is_array(x):
        with np.errstate(invalid='ignore'):
            return 2 * np.arcsin(np.sqrt(x))
    if 0 <= x <= 1:
        return 2 * math.asin(math.sqrt(x))
    return math.nan


def sin_from_hav(h):
    """Given h == hav(x), return sin(abs(x))."""
    if _is_array(h):
        with np.errstate(invalid='ignore'):
            return 2 * np.sqrt(h * (1 - h))
    return 2 * _sqrt(h * (1 - h))


def hav_from_sin(x):
    """Return hav(asin(x)). NaN for |x| > 1."""
    x2 = x * x
    if _is_array(x):
        with np.errstate(invalid='ignore'):
            return x2 / (1 + np.sqrt(1 - x2)) * 0.5
    return x2 / (1 + _sqrt(1 - x2)) * 0.5


def sin_sum_from_hav(x, y):
    """Return sin(arc_hav(x) + arc_hav(y))."""
    if _is_array(x, y):
        with np.errstate(invalid='ignore'):
            a = np.sqrt(x * (1 - x))
            b = np.sqrt(y * (1 - y))
    else:
        a = _sqrt(x * (1 - x))
        b = _sqrt(y * (1 - y))
    return 2 * (a + b - 2 * (a * y + b * x))


def hav_distance(lat1, lat2, d_lng):
    """hav() of the distance between (lat1, lng1) and (lat2, lng2) on the unit sphere."""
    if _is_array(lat1, lat2, d_lng):
        return hav(lat1 - lat2) + hav(d_lng) * np.cos(lat1) * np.cos(lat2)
    return hav(lat1 - lat2) + hav(d_lng) * math.cos(lat1) * math.cos(lat2)
