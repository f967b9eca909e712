"""
Constants declarations for geodesolve
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening

# Ellipsoid domain
MIN_A = 1.0
MAX_A = 1e10
MAX_F = 1 / 150

# Flattenings at or below this are treated as a sphere
TINY_F = 1 / (1 << 26)

# Direct problem domain
MAX_S12 = 1e11

# Latitudes closer than this (relative) to a pole are pulled back from it
POLAR_EPS = 1 / (1 << 38)
