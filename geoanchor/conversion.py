"""
Module for angle unit conversions
"""
__all__ = ['degrees_to_radians', 'radians_to_degrees']

import math


def degrees_to_radians(degrees: float) -> float:
    """
    Converts an angle from degrees to radians.

    Args:
        degrees (float): The angle in degrees.

    Returns:
        float: The angle in radians.
    """
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    """
    Converts an angle from radians to degrees.

    Rather than a single multiplication, the angle is measured from the
    nearest quadrant boundary (0, 90, 180, 270 or 360 degrees) so that values
    at or near those boundaries come out exact. Negative angles are converted
    as the negation of their absolute value.

    Args:
        radians (float): The angle in radians.

    Returns:
        float: The angle in degrees.
    """
    if radians < 0.0:
        return -radians_to_degrees(-radians)

    pi = math.pi
    if radians <= 0.25 * pi:
        return (180.0 / pi) * radians
    if radians < 0.75 * pi:
        return 90.0 + 180.0 * ((radians - 0.5 * pi) / pi)
    if radians <= 1.25 * pi:
        return 180.0 + 180.0 * ((radians - pi) / pi)
    if radians <= 1.75 * pi:
        return 270.0 + 180.0 * ((radians - 1.5 * pi) / pi)

    # Everything larger is measured back from a full turn
    return 360.0 + 180.0 * ((radians - 2.0 * pi) / pi)
