"""
Unit tests for GeoPoint and LocationReading.
"""

import dataclasses

import pytest

from sphereutil.data.models import GeoPoint, LocationReading, coords


class TestGeoPoint:
    """Tests for the coordinate value type."""

    @pytest.mark.unit
    @pytest.mark.parametrize("lat,expected", [
        (91.0, 90.0),
        (-95.0, -90.0),
        (45.5, 45.5),
    ])
    def test_latitude_clamped(self, lat, expected):
        """Test that latitude is clamped to [-90, 90]."""
        assert GeoPoint(lat, 0).latitude == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("lng,expected", [
        (180.0, -180.0),    # Upper bound is exclusive
        (-180.0, -180.0),
        (190.0, -170.0),
        (-0.1278, -0.1278),
    ])
    def test_longitude_wrapped(self, lng, expected):
        """Test that longitude is wrapped to [-180, 180)."""
        assert pytest.approx(GeoPoint(0, lng).longitude, abs=1e-12) == expected

    @pytest.mark.unit
    def test_coordinates_stored_as_float(self):
        """Test that integer input is stored as float."""
        point = GeoPoint(1, 2)
        assert isinstance(point.latitude, float)
        assert isinstance(point.longitude, float)

    @pytest.mark.unit
    def test_equality_and_hash(self):
        """Test that equal coordinates give equal, hash-equal points."""
        assert GeoPoint(1, 2) == GeoPoint(1.0, 2.0)
        assert GeoPoint(1, 2) != GeoPoint(2, 1)
        assert len({GeoPoint(1, 2), GeoPoint(1.0, 2.0), GeoPoint(3, 4)}) == 2

    @pytest.mark.unit
    def test_immutable(self):
        """Test that coordinates cannot be reassigned."""
        point = GeoPoint(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            point.latitude = 5.0

    @pytest.mark.unit
    @pytest.mark.parametrize("lat,lng,expected", [
        (0.0, 0.0, False),
        (0.0, 5.0, False),
        (5.0, 0.0, False),
        (51.5074, -0.1278, True),
    ])
    def test_is_valid(self, lat, lng, expected):
        """Test that zero coordinates mark a point as not yet fixed."""
        assert GeoPoint(lat, lng).is_valid() is expected

    @pytest.mark.unit
    def test_distance_to(self):
        """Test that distance_to matches one degree on the equator."""
        assert pytest.approx(GeoPoint(0, 0).distance_to(GeoPoint(0, 1)), abs=1.0) == 111_195


class TestLocationReading:
    """Tests for the location reading record."""

    @pytest.mark.unit
    def test_equality_uses_coordinates_only(self):
        """Test that auxiliary fields do not take part in equality."""
        a = LocationReading(GeoPoint(10, 20), speed=5.0, timestamp=1000, satellites=7)
        b = LocationReading(GeoPoint(10, 20), provider='network', speed=0.0, timestamp=2000)
        assert a == b
        assert hash(a) == hash(b)

    @pytest.mark.unit
    def test_different_coordinates_not_equal(self):
        """Test that readings at different positions differ."""
        a = LocationReading(GeoPoint(10, 20), timestamp=1000)
        b = LocationReading(GeoPoint(10, 21), timestamp=1000)
        assert a != b

    @pytest.mark.unit
    def test_not_equal_to_bare_point(self):
        """Test that a reading and a GeoPoint are distinct types."""
        point = GeoPoint(10, 20)
        assert LocationReading(point) != point

    @pytest.mark.unit
    def test_exposes_coordinates(self):
        """Test that latitude and longitude delegate to the contained point."""
        reading = LocationReading(GeoPoint(10, 200))
        assert reading.latitude == 10.0
        assert pytest.approx(reading.longitude, abs=1e-12) == -160.0

    @pytest.mark.unit
    def test_at_defaults(self):
        """Test the bare-coordinate constructor."""
        reading = LocationReading.at(1.5, 2.5)
        assert reading.point == GeoPoint(1.5, 2.5)
        assert reading.provider == 'gps'
        assert reading.altitude == 0.0
        assert reading.satellites == 0
        assert reading.timestamp > 0

    @pytest.mark.unit
    @pytest.mark.parametrize("raw,expected", [
        (51.5074446, 51.507445),    # Rounds up
        (51.5074444, 51.507444),    # Rounds down
        (-0.1278006, -0.127801),    # Half-up rounds away from zero
        (-0.1278004, -0.1278),
    ])
    def test_from_raw_rounds_coordinates(self, raw, expected):
        """Test that raw fixes are rounded to 6 decimal places."""
        reading = LocationReading.from_raw('gps', raw, raw, altitude=raw, timestamp=0)
        assert reading.latitude == expected
        assert reading.longitude == expected
        assert reading.altitude == expected

    @pytest.mark.unit
    def test_from_raw_missing_fields(self):
        """Test that missing provider and altitude fall back to defaults."""
        reading = LocationReading.from_raw(None, 1.0, 2.0, altitude=None, satellites=9)
        assert reading.provider == 'gps'
        assert reading.altitude == 0.0
        assert reading.satellites == 9
        assert reading.timestamp > 0

    @pytest.mark.unit
    def test_is_valid_and_distance_delegate(self):
        """Test that reading helpers delegate to the point."""
        reading = LocationReading(GeoPoint(0, 0))
        assert not reading.is_valid()
        assert pytest.approx(reading.distance_to((0, 1)), abs=1.0) == 111_195


class TestCoords:
    """Tests for point-like coordinate extraction."""

    @pytest.mark.unit
    def test_tuple(self):
        assert coords((1.0, 2.0)) == (1.0, 2.0)

    @pytest.mark.unit
    def test_geopoint(self):
        assert coords(GeoPoint(1, 2)) == (1.0, 2.0)

    @pytest.mark.unit
    def test_reading(self):
        assert coords(LocationReading.at(3, 4)) == (3.0, 4.0)
