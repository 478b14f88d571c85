"""
Conversions between Earth-Centered-Earth-Fixed coordinates and WGS84
geodetic coordinates (latitude, longitude, ellipsoidal height).

The inverse conversion projects the ECEF point onto the ellipsoid surface
along the surface normal using Newton's method, then reads latitude and
longitude off that normal. The approach follows Cesium / iTwin.js
Cartographic.fromEcef.
"""

__all__ = [
    'geodetic_to_ecef', 'scale_to_geodetic_surface', 'try_ecef_to_geodetic',
]

import math
from typing import Optional, Tuple

from geoanchor._const import (
    SURFACE_CONVERGENCE_TOLERANCE,
    SURFACE_MAX_ITERATIONS,
    WGS84_CENTER_TOLERANCE_SQUARED,
    WGS84_EQUATOR_RADIUS_SQUARED,
    WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED,
    WGS84_ONE_OVER_POLAR_RADIUS_SQUARED,
    WGS84_POLAR_RADIUS_SQUARED,
)
from geoanchor.conversion import degrees_to_radians, radians_to_degrees
from geoanchor.coordinates import EcefPoint, GeodeticPoint
from geoanchor.utils.logging import warn_once


def geodetic_to_ecef(point: GeodeticPoint) -> EcefPoint:
    """
    Converts a WGS84 geodetic point to ECEF.

    Args:
        point:
            The geodetic point (degrees, degrees, meters)

    Returns:
        EcefPoint
    """
    lat = degrees_to_radians(point.latitude)
    lon = degrees_to_radians(point.longitude)

    # Surface normal at the given latitude/longitude
    cos_lat = math.cos(lat)
    nx = cos_lat * math.cos(lon)
    ny = cos_lat * math.sin(lon)
    nz = math.sin(lat)

    n_mag = math.sqrt(nx * nx + ny * ny + nz * nz)
    nx, ny, nz = nx / n_mag, ny / n_mag, nz / n_mag

    # Point on the ellipsoid surface with that normal
    kx = nx * WGS84_EQUATOR_RADIUS_SQUARED
    ky = ny * WGS84_EQUATOR_RADIUS_SQUARED
    kz = nz * WGS84_POLAR_RADIUS_SQUARED

    gamma = math.sqrt(nx * kx + ny * ky + nz * kz)
    kx, ky, kz = kx / gamma, ky / gamma, kz / gamma

    return EcefPoint(
        kx + nx * point.height,
        ky + ny * point.height,
        kz + nz * point.height,
    )


def scale_to_geodetic_surface(
    point: EcefPoint,
    max_iterations: int = SURFACE_MAX_ITERATIONS,
) -> Optional[EcefPoint]:
    """
    Projects an ECEF point onto the WGS84 ellipsoid surface along the
    surface normal.

    Args:
        point:
            The ECEF point to project

        max_iterations:
            The number of Newton steps allowed before giving up

    Returns:
        The surface point, or None if the point is at the center of the
        earth or the iteration did not converge
    """
    x2 = point.x * point.x * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED
    y2 = point.y * point.y * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED
    z2 = point.z * point.z * WGS84_ONE_OVER_POLAR_RADIUS_SQUARED

    # Squared ellipsoidal norm
    squared_norm = x2 + y2 + z2
    ratio = math.sqrt(1.0 / squared_norm) if squared_norm > 0.0 else math.inf

    # Radial intersection, used as the initial approximation
    intersection_x = point.x * ratio
    intersection_y = point.y * ratio
    intersection_z = point.z * ratio

    # Near the center the iteration will not converge
    if squared_norm < WGS84_CENTER_TOLERANCE_SQUARED:
        if math.isinf(ratio) or math.isnan(ratio):
            return None
        return EcefPoint(intersection_x, intersection_y, intersection_z)

    # Gradient at the intersection stands in for the true unit normal;
    # the difference in magnitude is absorbed by the multiplier
    gradient_x = intersection_x * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED * 2.0
    gradient_y = intersection_y * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED * 2.0
    gradient_z = intersection_z * WGS84_ONE_OVER_POLAR_RADIUS_SQUARED * 2.0

    gradient_mag = math.sqrt(
        gradient_x * gradient_x + gradient_y * gradient_y + gradient_z * gradient_z
    )

    # Initial guess at the normal vector multiplier
    lam = (1.0 - ratio) * point.magnitude / (0.5 * gradient_mag)
    correction = 0.0

    for _ in range(max_iterations):
        lam -= correction

        x_mult = 1.0 / (1.0 + lam * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED)
        y_mult = 1.0 / (1.0 + lam * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED)
        z_mult = 1.0 / (1.0 + lam * WGS84_ONE_OVER_POLAR_RADIUS_SQUARED)

        x_mult2, y_mult2, z_mult2 = x_mult * x_mult, y_mult * y_mult, z_mult * z_mult

        func = x2 * x_mult2 + y2 * y_mult2 + z2 * z_mult2 - 1.0
        if not math.isfinite(func):
            break

        if abs(func) <= SURFACE_CONVERGENCE_TOLERANCE:
            return EcefPoint(point.x * x_mult, point.y * y_mult, point.z * z_mult)

        denominator = (
            x2 * x_mult2 * x_mult * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED +
            y2 * y_mult2 * y_mult * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED +
            z2 * z_mult2 * z_mult * WGS84_ONE_OVER_POLAR_RADIUS_SQUARED
        )
        correction = func / (-2.0 * denominator)

    warn_once(
        'Geodetic surface projection did not converge for %r '
        '(this warning will not repeat)',
        point,
    )
    return None


def try_ecef_to_geodetic(point: EcefPoint) -> Tuple[bool, Optional[GeodeticPoint]]:
    """
    Converts an ECEF point to WGS84 geodetic coordinates.

    Args:
        point:
            The ECEF point

    Returns:
        (True, GeodeticPoint) on success; (False, None) if the point is too
        close to the center of the earth to produce a surface normal
    """
    surface = scale_to_geodetic_surface(point)
    if surface is None:
        return False, None

    normal_x = surface.x * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED
    normal_y = surface.y * WGS84_ONE_OVER_EQUATOR_RADIUS_SQUARED
    normal_z = surface.z * WGS84_ONE_OVER_POLAR_RADIUS_SQUARED

    normal_mag = math.sqrt(normal_x * normal_x + normal_y * normal_y + normal_z * normal_z)
    normal_x /= normal_mag
    normal_y /= normal_mag
    normal_z /= normal_mag

    longitude = radians_to_degrees(math.atan2(normal_y, normal_x))
    latitude = radians_to_degrees(math.asin(normal_z))

    h_x = point.x - surface.x
    h_y = point.y - surface.y
    h_z = point.z - surface.z
    height = math.sqrt(h_x * h_x + h_y * h_y + h_z * h_z)

    # Positive when the point lies outside the ellipsoid
    direction = h_x * point.x + h_y * point.y + h_z * point.z
    if direction == 0.0:
        height = 0.0
    elif direction < 0.0:
        height = -height

    return True, GeodeticPoint(latitude, longitude, height)
