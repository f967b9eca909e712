import math
from typing import Tuple

from pytest import approx

from geodesolve import Solution


def angle_diff(x: float, y: float) -> float:
    """Difference between two angles in degrees, reduced to [-180, 180)"""
    return (x - y + 180) % 360 - 180


def reduced_latitude(f: float, lat: float) -> Tuple[float, float]:
    """Sine and cosine of the reduced latitude of a geodetic latitude (degrees)"""
    phi = math.radians(lat)
    beta = math.atan2((1 - f) * math.sin(phi), math.cos(phi))
    return math.sin(beta), math.cos(beta)


def assert_solution_matches(sol: Solution, expected: dict, deg_tol=1e-9, len_tol=1e-6):
    """
    Asserts that a Solution agrees with a dict of expected values (e.g. the output of
    geographiclib's Direct). Longitudes and azimuths are compared modulo 360.
    """
    try:
        assert sol.lat2 == approx(expected['lat2'], abs=deg_tol)
        assert angle_diff(sol.lon2, expected['lon2']) == approx(0., abs=deg_tol)
        assert angle_diff(sol.azi2, expected['azi2']) == approx(0., abs=deg_tol)
        assert sol.s12 == approx(expected['s12'], abs=len_tol)
    except AssertionError as e:
        print(sol)
        print(expected)
        raise e


def great_circle_destination(
    radius: float, lat1: float, lon1: float, azi1: float, s12: float
) -> Tuple[float, float]:
    """Destination (lat, lon) on a sphere, via spherical trigonometry"""
    phi1, lam1 = math.radians(lat1), math.radians(lon1)
    theta = math.radians(azi1)
    delta = s12 / radius

    phi2 = math.asin(
        math.sin(phi1) * math.cos(delta) +
        math.cos(phi1) * math.sin(delta) * math.cos(theta)
    )
    lam2 = lam1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(phi1),
        math.cos(delta) - math.sin(phi1) * math.sin(phi2)
    )
    return math.degrees(phi2), math.degrees(lam2)
