"""
Series expansions used to integrate along a geodesic on the auxiliary sphere.

The expansions and their coefficients are those of

    Karney, C.F.F. Algorithms for geodesics. J Geod 87, 43-55 (2013).
    https://doi.org/10.1007/s00190-012-0578-z

with the tabulated values at https://geographiclib.sourceforge.io/html/geodseries30.html

Every series is a polynomial in the small parameter eps. The Fourier coefficient
sets have their lowest power of eps factored out and the remaining even powers
nested (Horner form), which keeps the evaluation order identical to the published
tables.
"""

__all__ = [
    'a3_coefficients', 'auxiliary_eps', 'c3_coefficients',
    'series_a1', 'series_a2', 'series_a3',
    'series_c1', 'series_c1p', 'series_c2', 'series_c3',
]

import math
from typing import Sequence, Tuple

import numpy as np


# Coefficients of eps^l, eps^(l+2), ... for C1[l], l = 1..8
_C1_TABLE = (
    (-1 / 2, 3 / 16, -1 / 32, 19 / 2048),
    (-1 / 16, 1 / 32, -9 / 2048, 7 / 4096),
    (-1 / 48, 3 / 256, -3 / 2048),
    (-5 / 512, 3 / 512, -11 / 16384),
    (-7 / 1280, 7 / 2048),
    (-7 / 2048, 9 / 4096),
    (-33 / 14336,),
    (-429 / 262144,),
)

# Reversion of C1, coefficients of eps^l, eps^(l+2), ... for C1'[l], l = 1..8
_C1P_TABLE = (
    (1 / 2, -9 / 32, 205 / 1536, -4879 / 73728),
    (5 / 16, -37 / 96, 1335 / 4096, -86171 / 368640),
    (29 / 96, -75 / 128, 2901 / 4096),
    (539 / 1536, -2391 / 2560, 1082857 / 737280),
    (3467 / 7680, -28223 / 18432),
    (38081 / 61440, -733437 / 286720),
    (459485 / 516096,),
    (109167851 / 82575360,),
)

_C2_TABLE = (
    (1 / 2, 1 / 16, 1 / 32, 41 / 2048),
    (3 / 16, 1 / 32, 35 / 2048, 47 / 4096),
    (5 / 48, 5 / 256, 23 / 2048),
    (35 / 512, 7 / 512, 133 / 16384),
    (63 / 1280, 21 / 2048),
    (77 / 2048, 33 / 4096),
    (429 / 14336,),
    (6435 / 262144,),
)

# A3 = 1 - eps * (c1 + eps * (c2 + ... + eps * c8)); each c_j is a polynomial in n,
# listed highest power first
_A3_TABLE = (
    (-1 / 2, 1 / 2),
    (-3 / 8, 1 / 8, 1 / 4),
    (-5 / 16, 1 / 16, 3 / 16, 1 / 16),
    (-35 / 128, 5 / 128, 5 / 32, 1 / 32, 3 / 64),
    (7 / 256, 35 / 256, 5 / 256, 5 / 128, 3 / 128),
    (63 / 512, 7 / 512, 35 / 1024, 15 / 1024, 5 / 256),
    (21 / 2048, 63 / 2048, 21 / 2048, 35 / 2048, 25 / 2048),
    (231 / 8192, 63 / 8192, 63 / 4096, 35 / 4096, 175 / 16384),
)

# C3[l] = eps^l * (P_l,l + eps * (P_l,l+1 + ...)), l = 1..5; each P is a polynomial
# in n, listed highest power first
_C3_TABLE = (
    (
        (-1 / 4, 1 / 4),
        (-1 / 8, 0, 1 / 8),
        (-1 / 64, 3 / 64, 3 / 64),
        (1 / 64, 5 / 128),
        (3 / 128,),
    ),
    (
        (1 / 32, -3 / 32, 1 / 16),
        (-3 / 64, -1 / 32, 3 / 64),
        (1 / 128, 3 / 128),
        (5 / 256,),
    ),
    (
        (5 / 192, -3 / 64, 5 / 192),
        (-5 / 192, 3 / 128),
        (7 / 512,),
    ),
    (
        (-7 / 256, 7 / 512),
        (7 / 512,),
    ),
    (
        (21 / 2560,),
    ),
)


def _fourier_coefficients(eps: float, table) -> Tuple[float, ...]:
    """
    Evaluates a set of Fourier coefficients, where coefficient l (1-based) is
    eps^l * (t[0] + eps^2 * (t[1] + eps^2 * (...))).
    """
    eps2 = eps * eps
    mult = 1.0
    coeffs = []
    for row in table:
        mult *= eps
        acc = 0.0
        for c in reversed(row):
            acc = eps2 * acc + c
        coeffs.append(mult * acc)

    return tuple(coeffs)


def auxiliary_eps(ep2: float, cos_alpha0: float) -> float:
    """
    The expansion parameter of every series in this module.

    Args:
        ep2:
            The second eccentricity squared of the ellipsoid

        cos_alpha0:
            The cosine of the geodesic's azimuth at its (northward) equator crossing

    Returns:
        float
    """
    k2 = ep2 * cos_alpha0 * cos_alpha0
    t = math.sqrt(1 + k2)
    return (t - 1) / (t + 1)


def series_a1(eps: float) -> float:
    """Scale factor relating auxiliary-sphere arc length to distance (I1)"""
    eps2 = eps * eps
    return (1 + eps2 * (1 / 4 + eps2 * (1 / 64 + eps2 * (1 / 256 + eps2 * (25 / 16384))))) / (1 - eps)


def series_a2(eps: float) -> float:
    """Scale factor of the reduced length integral (I2)"""
    eps2 = eps * eps
    return (1 - eps2 * (3 / 4 + eps2 * (7 / 64 + eps2 * (11 / 256 + eps2 * (375 / 16384))))) / (1 + eps)


def series_c1(eps: float) -> Tuple[float, ...]:
    """Fourier coefficients C1[1..8] of the distance integral I1"""
    return _fourier_coefficients(eps, _C1_TABLE)


def series_c1p(eps: float) -> Tuple[float, ...]:
    """
    Fourier coefficients C1'[1..8] inverting I1, i.e. recovering the auxiliary arc
    from a scaled distance tau via sigma = tau + sum(C1'[l] * sin(2 * l * tau)).
    """
    return _fourier_coefficients(eps, _C1P_TABLE)


def series_c2(eps: float) -> Tuple[float, ...]:
    """Fourier coefficients C2[1..8] of the reduced length integral I2"""
    return _fourier_coefficients(eps, _C2_TABLE)


def a3_coefficients(n: float) -> Tuple[float, ...]:
    """
    Evaluates the A3 coefficient table for an ellipsoid's third flattening.

    Args:
        n:
            The third flattening, f / (2 - f)

    Returns:
        The 8 coefficients of eps^1..eps^8 in A3
    """
    return tuple(float(np.polyval(poly, n)) for poly in _A3_TABLE)


def c3_coefficients(n: float) -> Tuple[Tuple[float, ...], ...]:
    """
    Evaluates the C3 coefficient table for an ellipsoid's third flattening.

    Args:
        n:
            The third flattening, f / (2 - f)

    Returns:
        For each of C3[1..5], the coefficients of eps^l, eps^(l+1), ... eps^5
    """
    return tuple(
        tuple(float(np.polyval(poly, n)) for poly in row)
        for row in _C3_TABLE
    )


def series_a3(coeffs: Sequence[float], eps: float) -> float:
    """
    Scale factor of the longitude integral I3.

    Args:
        coeffs:
            The output of a3_coefficients()

        eps:
            The expansion parameter

    Returns:
        float
    """
    acc = 0.0
    for c in reversed(coeffs):
        acc = eps * (c + acc)

    return 1 - acc


def series_c3(coeffs: Sequence[Sequence[float]], eps: float) -> Tuple[float, ...]:
    """
    Fourier coefficients C3[1..5] of the longitude integral I3.

    Args:
        coeffs:
            The output of c3_coefficients()

        eps:
            The expansion parameter

    Returns:
        Tuple of 5 floats
    """
    mult = 1.0
    out = []
    for row in coeffs:
        mult *= eps
        acc = 0.0
        for c in reversed(row):
            acc = eps * acc + c
        out.append(mult * acc)

    return tuple(out)
