"""
Geographic constants used throughout the EEZ monitoring system.
"""

# Earth's mean radius in kilometers (haversine distances)
EARTH_RADIUS_KM = 6371.0

# Valid coordinate ranges (inclusive)
MIN_LON, MAX_LON = -180.0, 180.0
MIN_LAT, MAX_LAT = -90.0, 90.0

# Numerical wiggle room (degrees) for on-edge tests
EPS = 1e-9

# Default map center (lon, lat) - open water south of the Indian peninsula
DEFAULT_CENTER = (85.0, 12.0)
