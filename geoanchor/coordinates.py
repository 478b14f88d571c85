"""
Representations of a point in each of the supported coordinate spaces:
local engine space, ECEF, and WGS84 geodetic
"""

__all__ = ['EcefPoint', 'GeodeticPoint', 'LocalPoint']

import math
from typing import Optional, Tuple

import numpy as np
from pydantic import validate_call

from geoanchor._types import NUMBER_TYPE
from geoanchor.utils.mixins import ImmutableMixin


def _g15(value: float) -> str:
    """Formats a component to 15 significant digits"""
    return format(float(value), '.15g')


class LocalPoint(ImmutableMixin):
    """
    A point in local engine (scene) space. Left-handed and Y-up, with
    single-precision components.
    """

    __slots__ = ('x', 'y', 'z')

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, x: NUMBER_TYPE = 0.0, y: NUMBER_TYPE = 0.0, z: NUMBER_TYPE = 0.0):
        self._freeze(x=np.float32(x), y=np.float32(y), z=np.float32(z))

    def __eq__(self, other):
        if not isinstance(other, LocalPoint):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash(self.to_float())

    def __repr__(self):
        return f'<LocalPoint({", ".join(map(str, self.to_float()))})>'

    def __str__(self):
        return f'({_g15(self.x)}, {_g15(self.y)}, {_g15(self.z)})'

    def to_float(self) -> Tuple[float, float, float]:
        """Returns the components as a tuple of python floats (x, y, z)"""
        return float(self.x), float(self.y), float(self.z)

    def to_numpy(self) -> np.ndarray:
        """Returns the components as a float32 array"""
        return np.array([self.x, self.y, self.z], dtype=np.float32)


class EcefPoint(ImmutableMixin):
    """
    A point in Earth-Centered-Earth-Fixed space: right-handed, Z-up,
    double-precision meters.

    Equality is an exact comparison of all three components.
    """

    __slots__ = ('x', 'y', 'z')

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(self, x: NUMBER_TYPE, y: NUMBER_TYPE, z: NUMBER_TYPE):
        self._freeze(x=float(x), y=float(y), z=float(z))

    def __eq__(self, other):
        if not isinstance(other, EcefPoint):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f'<EcefPoint({self.x}, {self.y}, {self.z})>'

    def __str__(self):
        return f'({_g15(self.x)}, {_g15(self.y)}, {_g15(self.z)})'

    @property
    def magnitude(self) -> float:
        """Distance from the center of the earth, in meters"""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def to_float(self) -> Tuple[float, float, float]:
        """Returns the components as a tuple (x, y, z)"""
        return self.x, self.y, self.z

    def to_numpy(self) -> np.ndarray:
        """Returns the components as a float64 array"""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_geodetic(self) -> Tuple[bool, Optional['GeodeticPoint']]:
        """
        Converts this point to WGS84 geodetic coordinates.

        Returns:
            (success, GeodeticPoint) pair; the point is None when the
            conversion fails (e.g. at the center of the earth)
        """
        from geoanchor.geodetic import try_ecef_to_geodetic  # pylint: disable=import-outside-toplevel
        return try_ecef_to_geodetic(self)


class GeodeticPoint(ImmutableMixin):
    """
    A WGS84 geodetic position. Latitude and longitude are stored in degrees;
    height is in meters above (positive) or below (negative) the ellipsoid
    surface, measured along the surface normal.
    """

    __slots__ = ('latitude', 'longitude', 'height')

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        latitude: NUMBER_TYPE,
        longitude: NUMBER_TYPE,
        height: NUMBER_TYPE = 0.0,
    ):
        self._freeze(latitude=float(latitude), longitude=float(longitude), height=float(height))

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.height == other.height
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.height))

    def __repr__(self):
        return f'<GeodeticPoint({self.latitude}, {self.longitude}, {self.height})>'

    def __str__(self):
        return (
            f'Latitude: {_g15(self.latitude)} '
            f'Longitude: {_g15(self.longitude)} '
            f'Height: {_g15(self.height)}'
        )

    def to_float(self) -> Tuple[float, float, float]:
        """Returns the components as a tuple (latitude, longitude, height)"""
        return self.latitude, self.longitude, self.height

    def to_ecef(self) -> EcefPoint:
        """Converts this point to Earth-Centered-Earth-Fixed coordinates"""
        from geoanchor.geodetic import geodetic_to_ecef  # pylint: disable=import-outside-toplevel
        return geodetic_to_ecef(self)
