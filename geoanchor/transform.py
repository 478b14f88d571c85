"""
Affine mapping between local engine space and ECEF space.

The mapping is built from the 4x4 column-major matrix attached to a
geolocated 3D model: columns 0-2 are the model's local axes expressed in
ECEF and column 3 is the ECEF position of the local origin.
"""

__all__ = ['AffineEcefTransform', 'AxisNegation', 'TransformError']

from enum import Enum
from typing import Optional, Union

import numpy as np

from geoanchor._const import IDENTITY_MATRIX
from geoanchor._types import MATRIX_TYPE
from geoanchor.coordinates import EcefPoint, LocalPoint
from geoanchor.utils.logging import LOGGER


class AxisNegation(Enum):
    """
    Which local axis to negate when converting left-handed engine points into
    the right-handed space of the source matrix.

    Must match the axis flipped by whichever importer converted the model
    from right-handed glTF into the engine: glTFast negates X, while other
    importers (e.g. Azure Remote Rendering) negate Z.
    """
    X = 0
    Z = 2
    NONE = None

    def apply(self, linear: np.ndarray) -> np.ndarray:
        """Returns a copy of a 3x3 linear part with the chosen column negated"""
        corrected = np.array(linear, dtype=np.float64)
        if self.value is not None:
            corrected[:, self.value] = -corrected[:, self.value]
        return corrected


class TransformError(Enum):
    """Reasons a transform matrix cannot produce an AffineEcefTransform"""
    MISSING = 'no transform matrix was provided'
    WRONG_SIZE = 'transform matrix must contain exactly 16 elements'
    NOT_GEOLOCATED = 'transform matrix is the identity; source model was not geolocated'
    SINGULAR = 'linear part of the transform matrix is not invertible'

    @property
    def is_valid(self) -> bool:
        return False


def _invert_linear(linear: np.ndarray):
    """
    Inverts a 3x3 matrix through the cross products of its rows.

    Keeps the whole computation in double precision, which matters at ECEF
    magnitudes (~6.4e6 m) when sub-millimeter results are expected.

    Returns:
        (inverse, determinant); the inverse is None when the determinant is
        zero or not finite
    """
    row_x, row_y, row_z = linear[0], linear[1], linear[2]

    cross_xy = np.cross(row_x, row_y)
    cross_yz = np.cross(row_y, row_z)
    cross_zx = np.cross(row_z, row_x)

    determinant = float(np.dot(row_x, cross_yz))
    if determinant == 0.0 or not np.isfinite(determinant):
        return None, determinant

    return np.column_stack((cross_yz, cross_zx, cross_xy)) / determinant, determinant


class AffineEcefTransform:
    """
    A reversible mapping between local engine space and ECEF.

    Use AffineEcefTransform.from_matrix() to build one from a raw 4x4 model
    transform. Instances are never invalid; a bad matrix yields a
    TransformError instead.

    Args:
        linear:
            The right-handed 3x3 linear part (rotation/reflection/scale)

        translation:
            The ECEF position of the local origin, in meters

        axis_negation:
            The handedness correction already applied to `linear`. Recorded
            for reference only.
    """

    is_valid = True

    def __init__(
        self,
        linear: MATRIX_TYPE,
        translation: MATRIX_TYPE,
        axis_negation: AxisNegation = AxisNegation.NONE,
    ):
        linear = np.array(linear, dtype=np.float64)
        translation = np.array(translation, dtype=np.float64)
        if linear.shape != (3, 3):
            raise ValueError(f'linear part must be 3x3, not {linear.shape}')
        if translation.shape != (3,):
            raise ValueError(f'translation must have 3 elements, not {translation.shape}')

        inverse, determinant = _invert_linear(linear)
        if inverse is None:
            raise ValueError(
                f'{TransformError.SINGULAR.value} (determinant {determinant})'
            )

        for arr in (linear, translation, inverse):
            arr.setflags(write=False)

        self._linear = linear
        self._translation = translation
        self._inverse_linear = inverse
        self._determinant = determinant
        self._axis_negation = axis_negation

    def __repr__(self):
        return f'<AffineEcefTransform origin={EcefPoint(*self._translation)}>'

    @classmethod
    def from_matrix(
        cls,
        matrix: Optional[MATRIX_TYPE],
        axis_negation: AxisNegation = AxisNegation.X,
    ) -> Union['AffineEcefTransform', TransformError]:
        """
        Creates a transform from a 16-element column-major 4x4 matrix.

        Args:
            matrix:
                The model's ECEF transform. Columns 0-2 are the local axes in
                ECEF, column 3 is the ECEF translation.

            axis_negation:
                The handedness correction matching the importer that brought
                the model into engine space.

        Returns:
            An AffineEcefTransform, or the TransformError explaining why the
            matrix cannot be used. Check `.is_valid` on the result.
        """
        if matrix is None:
            LOGGER.warning('AffineEcefTransform: %s', TransformError.MISSING.value)
            return TransformError.MISSING

        if len(matrix) != 16:
            LOGGER.warning(
                'AffineEcefTransform: %s (got %d)', TransformError.WRONG_SIZE.value, len(matrix)
            )
            return TransformError.WRONG_SIZE

        # Exact comparison; the identity is a sentinel, not a computed value
        if all(value == expected for value, expected in zip(matrix, IDENTITY_MATRIX)):
            LOGGER.info('AffineEcefTransform: %s', TransformError.NOT_GEOLOCATED.value)
            return TransformError.NOT_GEOLOCATED

        full = np.array(matrix, dtype=np.float64).reshape((4, 4), order='F')
        linear = axis_negation.apply(full[:3, :3])
        translation = full[:3, 3]

        # Shapes are fixed by the reshape, so a ValueError here means singular
        try:
            return cls(linear, translation, axis_negation)
        except ValueError:
            LOGGER.warning('AffineEcefTransform: %s', TransformError.SINGULAR.value)
            return TransformError.SINGULAR

    @property
    def axis_negation(self) -> AxisNegation:
        return self._axis_negation

    @property
    def determinant(self) -> float:
        return self._determinant

    @property
    def inverse_linear(self) -> np.ndarray:
        """The cached inverse of the linear part (read-only)"""
        return self._inverse_linear

    @property
    def linear(self) -> np.ndarray:
        """The right-handed 3x3 linear part (read-only)"""
        return self._linear

    @property
    def translation(self) -> np.ndarray:
        """The ECEF position of the local origin (read-only)"""
        return self._translation

    def to_ecef(self, point: LocalPoint) -> EcefPoint:
        """Converts a local engine space point to ECEF"""
        local = point.to_numpy().astype(np.float64)
        return EcefPoint(*(self._linear @ local + self._translation))

    def to_local(self, point: EcefPoint) -> LocalPoint:
        """
        Converts an ECEF point to local engine space. The result is narrowed
        to single precision.
        """
        relative = point.to_numpy() - self._translation
        return LocalPoint(*(self._inverse_linear @ relative).astype(np.float32))
