"""Geographic value types."""

from sphereutil.data.models import GeoPoint, LocationReading, coords

__all__ = ['GeoPoint', 'LocationReading', 'coords']
