"""Module for extracting geolocation data from external structures"""

__all__ = ['parse_gltf_ecef_transform']

import json
from typing import cast, Any, Dict, List, Optional, Union


def parse_gltf_ecef_transform(gltf: Union[str, bytes, Dict[str, Any]]) -> Optional[List[float]]:
    """
    Extracts the ECEF transform stored in a glTF document's top-level extras
    (`extras.ecefTransform`), as written by geolocating exporters.

    Args:
        gltf:
            The glTF JSON document (as a string, bytes, or python dict)

    Returns:
        The 16-element column-major matrix as floats, or None if the
        document carries no ECEF transform
    """
    if isinstance(gltf, (str, bytes)):
        gltf = json.loads(gltf)

    gltf = cast(Dict[str, Any], gltf)

    extras = gltf.get('extras') or {}
    matrix = extras.get('ecefTransform')
    if matrix is None:
        return None

    return [float(x) for x in matrix]
