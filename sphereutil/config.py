"""
Configuration constants for the spherical geometry engine.

Contains the Earth model, tolerance defaults and codec parameters.
"""

# =============================================================================
# Earth Model
# =============================================================================

EARTH_RADIUS = 6371009.0        # Mean radius as defined by IUGG (meters)
                                 # Fixed: all metric results scale with it


# =============================================================================
# Proximity Settings
# =============================================================================

DEFAULT_TOLERANCE = 0.1         # Default on-path / on-edge tolerance (meters)

SHORT_SEGMENT_HAV = 0.74        # hav(segment length) below which the along-track
                                 # test is skipped for great circle segments


# =============================================================================
# Interpolation Settings
# =============================================================================

SLERP_MIN_SIN_ANGLE = 1e-6      # Below this sin(angle) interpolation falls back
                                 # to linear lat/lng to avoid dividing by ~0


# =============================================================================
# Simplification Settings
# =============================================================================

CLOSED_POLYGON_OFFSET = 1e-11   # Offset applied to the last point of a closed
                                 # polygon during Douglas-Peucker (degrees)


# =============================================================================
# Polyline Codec Settings
# =============================================================================

POLYLINE_PRECISION = 1e5        # Coordinates are rounded to 1e-5 degrees
POLYLINE_CHAR_OFFSET = 63       # ASCII offset of each 5-bit group ('?')


# =============================================================================
# Location Reading Settings
# =============================================================================

READING_DECIMALS = 6            # Decimal places kept from raw platform fixes
DEFAULT_PROVIDER = 'gps'        # Provider name for synthesised readings
