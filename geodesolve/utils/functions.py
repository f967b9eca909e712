"""Module for miscellaneous multi-use functions"""

__all__ = ['nnz', 'sincosd', 'sq', 'wrap_longitude']

import math
from typing import Tuple


def sq(x: float) -> float:
    """Square of x"""
    return x * x


def nnz(x: float) -> float:
    """
    Replaces a negative zero with a positive one, leaving every other value untouched.

    Args:
        x:
            A float value

    Returns:
        float
    """
    if x == 0:
        return 0.0

    return x


def wrap_longitude(lon: float, delta: float) -> float:
    """
    Moves a longitude by a (possibly multi-revolution) delta, keeping the result
    within [-180, 180].

    The delta is first reduced to [-180, 180], after which a single shift of
    360 degrees is enough to bring the sum back in range.

    Args:
        lon:
            The starting longitude, in degrees, within [-180, 180]

        delta:
            The change in longitude, in degrees

    Returns:
        float
    """
    if not -180 <= delta <= 180:
        delta = math.remainder(delta, 360)

    lon += delta
    if lon < -180:
        lon += 360
    elif lon > 180:
        lon -= 360

    return lon


def sincosd(x: float) -> Tuple[float, float]:
    """
    Sine and cosine of an angle in degrees.

    The angle is reduced to [-45, 45] in degrees before conversion to radians, so
    results near the quadrant boundaries (e.g. the cosine of a latitude next to a
    pole) keep their full relative accuracy.

    Args:
        x:
            An angle, in degrees

    Returns:
        (sin(x), cos(x))
    """
    r = math.fmod(x, 360)
    q = round(r / 90)
    r = math.radians(r - 90 * q)
    s, c = math.sin(r), math.cos(r)

    q %= 4
    if q == 1:
        s, c = c, -s
    elif q == 2:
        s, c = -s, -c
    elif q == 3:
        s, c = -c, s

    return s, 0.0 + c
