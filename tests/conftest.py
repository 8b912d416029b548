"""
Shared pytest fixtures for sphereutil tests.
"""

import os
import sys
import pytest

# Add project root to path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)
# Make tests/fixtures importable as 'fixtures'
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sphereutil.data.models import GeoPoint  # noqa: E402


@pytest.fixture
def square_polygon():
    """10 x 10 degree square with a corner at (0, 0), not explicitly closed."""
    return [
        GeoPoint(0, 0),
        GeoPoint(0, 10),
        GeoPoint(10, 10),
        GeoPoint(10, 0),
    ]


@pytest.fixture
def equator_path():
    """Open path along the equator from 0 to 2 degrees east."""
    return [
        GeoPoint(0, 0),
        GeoPoint(0, 1),
        GeoPoint(0, 2),
    ]


@pytest.fixture
def sample_gps_path():
    """Sample GPS path (a simple rectangular course, explicitly closed)."""
    return [
        GeoPoint(51.5074, -0.1278),   # London (start)
        GeoPoint(51.5074, -0.1178),   # East
        GeoPoint(51.5174, -0.1178),   # North
        GeoPoint(51.5174, -0.1278),   # West
        GeoPoint(51.5074, -0.1278),   # Back to start
    ]
