"""
Internal module for summing the trigonometric series produced by geodesolve.series
"""

__all__ = ['sum_sin']

import math
from typing import Sequence


def sum_sin(sigma: float, coeffs: Sequence[float]) -> float:
    """
    Evaluates sum(coeffs[i] * sin((2i + 2) * sigma)) using Clenshaw's recurrence.

    Only sin(sigma) and cos(sigma) are evaluated; the higher harmonics are built by
    the backward recurrence b_k = c_k + 2 * cos(2 * sigma) * b_(k+1) - b_(k+2), and
    the sum is b_0 * sin(2 * sigma).

    Args:
        sigma:
            The angle, in radians

        coeffs:
            The series coefficients, lowest harmonic first

    Returns:
        float
    """
    sinx, cosx = math.sin(sigma), math.cos(sigma)
    ar = 2 * (cosx - sinx) * (cosx + sinx)  # 2 * cos(2 * sigma)
    b1 = b2 = 0.0
    for c in reversed(coeffs):
        b1, b2 = ar * b1 - b2 + c, b1

    return 2 * sinx * cosx * b1
