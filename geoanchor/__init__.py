from geoanchor._version import __version__  # noqa: F401
from geoanchor.utils.logging import LOGGER
from geoanchor.coordinates import EcefPoint, GeodeticPoint, LocalPoint
from geoanchor.conversion import degrees_to_radians, radians_to_degrees
from geoanchor.geodetic import geodetic_to_ecef, try_ecef_to_geodetic
from geoanchor.parsers import parse_gltf_ecef_transform
from geoanchor.transform import AffineEcefTransform, AxisNegation, TransformError


__all__ = [
    'AffineEcefTransform',
    'AxisNegation',
    'EcefPoint',
    'GeodeticPoint',
    'LocalPoint',
    'TransformError',
    'degrees_to_radians',
    'geodetic_to_ecef',
    'parse_gltf_ecef_transform',
    'radians_to_degrees',
    'try_ecef_to_geodetic',
    'LOGGER',
]
