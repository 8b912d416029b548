"""
Core data structures for the spherical geometry engine.

Unit Conventions
----------------
- Coordinates: decimal degrees on a spherical Earth
- Distance: metres
- Speed: metres per second (m/s)
- Angles: degrees (headings clockwise from North)
- Time: Unix timestamps in milliseconds

A GeoPoint is only a coordinate pair. Everything an upstream location
provider knows about a fix (altitude, accuracy, speed...) lives on a
LocationReading, which holds its GeoPoint by value. Geometric comparisons
only ever look at the coordinate pair.
"""

import time
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Tuple

from sphereutil.config import DEFAULT_PROVIDER, READING_DECIMALS
from sphereutil.utils.math_util import clamp, wrap


@dataclass(frozen=True, eq=False)
class GeoPoint:
    """
    Immutable geographic coordinate.

    Attributes:
        latitude: Latitude in decimal degrees, clamped to [-90, 90].
        longitude: Longitude in decimal degrees, wrapped to [-180, 180).
    """
    latitude: float
    longitude: float

    def __post_init__(self):
        lat = clamp(float(self.latitude), -90.0, 90.0)
        lng = wrap(float(self.longitude), -180.0, 180.0)
        object.__setattr__(self, 'latitude', lat)
        object.__setattr__(self, 'longitude', lng)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, GeoPoint):
            return NotImplemented
        return self.latitude == other.latitude and self.longitude == other.longitude

    def __hash__(self) -> int:
        return hash((self.latitude, self.longitude))

    def is_valid(self) -> bool:
        """False for the (0, 0)-style 'no fix yet' sentinel."""
        return self.latitude != 0.0 and self.longitude != 0.0

    def distance_to(self, other: Any) -> float:
        """Great circle distance to another point in metres."""
        from sphereutil.core.spherical import compute_distance_between
        return compute_distance_between(self, other)


def _round_half_up(value: float, decimals: int = READING_DECIMALS) -> float:
    """Round the exact binary value of a float half-up to a fixed scale."""
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True, eq=False)
class LocationReading:
    """
    One fix reported by a location provider.

    Attributes:
        point: Position of the fix. Equality and hashing use this only.
        provider: Name of the provider that produced the fix ('gps', 'network').
        altitude: Altitude above sea level in metres.
        accuracy: Horizontal accuracy estimate in metres.
        speed: Ground speed in metres per second.
        bearing: Course over ground in degrees.
        timestamp: Unix timestamp in milliseconds.
        satellites: Number of satellites used for the fix (0 if unknown).
    """
    point: GeoPoint
    provider: str = DEFAULT_PROVIDER
    altitude: float = 0.0
    accuracy: float = 0.0
    speed: float = 0.0
    bearing: float = 0.0
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))
    satellites: int = 0

    @property
    def latitude(self) -> float:
        return self.point.latitude

    @property
    def longitude(self) -> float:
        return self.point.longitude

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LocationReading):
            return NotImplemented
        return self.point == other.point

    def __hash__(self) -> int:
        return hash(self.point)

    @classmethod
    def at(cls, latitude: float, longitude: float) -> 'LocationReading':
        """Reading at a bare coordinate, stamped with the current time."""
        return cls(point=GeoPoint(latitude, longitude))

    @classmethod
    def from_raw(cls, provider: str, latitude: float, longitude: float,
                 altitude: float = 0.0, accuracy: float = 0.0,
                 speed: float = 0.0, bearing: float = 0.0,
                 timestamp: Optional[int] = None, satellites: int = 0) -> 'LocationReading':
        """
        Build a reading from a raw platform fix.

        Latitude, longitude and altitude are rounded half-up to
        READING_DECIMALS places.

        Args:
            provider: Provider name, None is treated as the default provider
            latitude, longitude: Raw position in decimal degrees
            altitude: Raw altitude in metres, None is treated as 0
            timestamp: Unix milliseconds, defaults to now

        Returns:
            LocationReading with rounded coordinates
        """
        if timestamp is None:
            timestamp = int(time.time() * 1000)
        return cls(
            point=GeoPoint(_round_half_up(latitude), _round_half_up(longitude)),
            provider=provider or DEFAULT_PROVIDER,
            altitude=_round_half_up(altitude) if altitude is not None else 0.0,
            accuracy=accuracy,
            speed=speed,
            bearing=bearing,
            timestamp=timestamp,
            satellites=satellites,
        )

    def is_valid(self) -> bool:
        return self.point.is_valid()

    def distance_to(self, other: Any) -> float:
        return self.point.distance_to(other)


def coords(point: Any) -> Tuple[float, float]:
    """Extract (latitude, longitude) from a GeoPoint, reading or (lat, lng) tuple."""
    if hasattr(point, 'latitude') and hasattr(point, 'longitude'):
        return point.latitude, point.longitude
    return point[0], point[1]
