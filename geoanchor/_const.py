"""
Constants declarations for geoanchor
"""

# WGS84 Ellipsoid Constants
WGS84_EQUATOR_RADIUS = 6378137.0  # Semi-major axis (meters)
WGS84_POLAR_RADIUS = 6356752.3142451793  # Semi-minor axis (meters)

WGS84_EQUATOR_RADIUS_SQUARED = WGS84_EQUATOR_RADIUS * WGS84_EQUATOR_RADIUS
WGS84_POLAR_RADIUS_SQUARED = WGS84_POLAR_RADIUS * WGS84_POLAR_RADIUS
WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED = 1.0 / WGS84_EQUATOR_RADIUS_SQUARED
WGS84_ONE_OVER_POLAR_RADIUS_SQUARED = 1.0 / WGS84_POLAR_RADIUS_SQUARED

# Squared ellipsoidal norm below which the surface projection does not iterate
WGS84_CENTER_TOLERANCE_SQUARED = 0.1

# Surface projection (Newton's method) stopping criteria
SURFACE_CONVERGENCE_TOLERANCE = 0.01
SURFACE_MAX_ITERATIONS = 100

# Column-major 4x4 identity; marks a model that was never geolocated
IDENTITY_MATRIX = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)
