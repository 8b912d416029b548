"""
Unit tests for the encoded polyline codec.
"""

import pytest

from fixtures.gps_test_data import ENCODED_POLYLINES, SIMPLIFY_PATHS
from sphereutil.data.models import GeoPoint, LocationReading
from sphereutil.utils.polyline_codec import decode, encode


class TestEncode:
    """Tests for polyline encoding."""

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ['reference', 'origin', 'empty'])
    def test_known_vectors(self, name):
        """Test encoding against published reference strings."""
        vector = ENCODED_POLYLINES[name]
        path = [GeoPoint(*p) for p in vector['path']]
        assert encode(path) == vector['encoded']

    @pytest.mark.unit
    def test_accepts_tuples_and_readings(self):
        """Test that any point-like can be encoded."""
        vector = ENCODED_POLYLINES['reference']
        readings = [LocationReading.at(*p) for p in vector['path']]
        assert encode(vector['path']) == vector['encoded']
        assert encode(readings) == vector['encoded']

    @pytest.mark.unit
    def test_repeated_point(self):
        """Test that a zero delta encodes as a single character."""
        assert encode([(0.0, 0.0), (0.0, 0.0)]) == '????'

    @pytest.mark.unit
    def test_sub_precision_change_not_encoded(self):
        """Test that movements below 1e-5 degrees round away."""
        assert encode([(38.5, -120.2)]) == encode([(38.500001, -120.200001)])


class TestDecode:
    """Tests for polyline decoding."""

    @pytest.mark.unit
    def test_reference_vector(self):
        """Test decoding the reference string into exact points."""
        vector = ENCODED_POLYLINES['reference']
        assert decode(vector['encoded']) == [GeoPoint(*p) for p in vector['path']]

    @pytest.mark.unit
    def test_empty_string(self):
        assert decode('') == []

    @pytest.mark.unit
    def test_origin(self):
        assert decode('??') == [GeoPoint(0, 0)]

    @pytest.mark.unit
    @pytest.mark.parametrize("encoded", [
        '_p~iF~ps|U_ulLnnqC_mqNvxq',   # Last longitude cut short
        '_p~iF',                        # Latitude without longitude
    ])
    def test_truncated_input(self, encoded):
        """Test that a string ending mid-coordinate is rejected."""
        with pytest.raises(ValueError, match="Truncated"):
            decode(encoded)


class TestRoundTrip:
    """Tests for decode(encode(path))."""

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ['equator_line', 'zigzag'])
    def test_within_precision(self, name):
        """Test that each coordinate survives within 1e-5 degrees."""
        path = [GeoPoint(*p) for p in SIMPLIFY_PATHS[name]]
        decoded = decode(encode(path))
        assert len(decoded) == len(path)
        for original, result in zip(path, decoded):
            assert pytest.approx(result.latitude, abs=1e-5) == original.latitude
            assert pytest.approx(result.longitude, abs=1e-5) == original.longitude

    @pytest.mark.unit
    def test_reencode_stable_near_antimeridian(self):
        """Test a longitude that rounds up to +180 degrees."""
        path = [GeoPoint(10, 179.999996), GeoPoint(10.5, 179)]
        encoded = encode(path)
        assert encode(decode(encoded)) == encoded
        assert decode(encoded)[0].longitude == -180.0

    @pytest.mark.unit
    def test_plus_180_encodes_as_minus_180(self):
        """Test that an unnormalised (lat, 180) tuple encodes like (lat, -180)."""
        assert encode([(0, 180), (0.5, 179)]) == encode([(0, -180), (0.5, 179)])

    @pytest.mark.unit
    def test_reencode_is_stable(self, sample_gps_path):
        """Test that re-encoding a decoded path gives the same string."""
        encoded = encode(sample_gps_path)
        assert encode(decode(encoded)) == encoded
