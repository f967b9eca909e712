import math

import pytest
from pytest import approx

from geodesolve import Geodesic, WGS84

from tests.functions import reduced_latitude


SPHERE = Geodesic(6371000., 0.)


@pytest.mark.parametrize('geod', [WGS84, SPHERE])
@pytest.mark.parametrize('lat1, azi1, s12', [
    (-30., 30., 1_000_000.),
    (10., -45., 500_000.),
    (-60., 10., 3_000_000.),
    (0., 80., 2_000_000.),
])
def test_hybrid_recovers_direct(geod, lat1, azi1, s12):
    sol = geod.direct(lat1, 0., azi1, s12)
    assert abs(sol.azi2) < 90.

    alpha1 = math.radians(azi1)
    alpha2, dist = geod.hybrid(
        *reduced_latitude(geod.f, sol.lat1),
        *reduced_latitude(geod.f, sol.lat2),
        math.sin(alpha1), math.cos(alpha1),
    )
    assert math.degrees(alpha2) == approx(sol.azi2, abs=1e-9)
    assert dist == approx(s12, abs=1e-6)


def test_hybrid_symmetric_about_equator():
    # A geodesic between mirror-image latitudes crosses them at the same azimuth
    sbet, cbet = reduced_latitude(WGS84.f, 35.)
    alpha1 = math.radians(40.)
    alpha2, dist = WGS84.hybrid(-sbet, cbet, sbet, cbet, math.sin(alpha1), math.cos(alpha1))

    assert alpha2 == approx(alpha1, abs=1e-15)
    assert dist > 0

    sol = WGS84.direct(-35., 0., 40., dist)
    assert sol.lat2 == approx(35., abs=1e-9)
    assert sol.azi2 == approx(40., abs=1e-9)


def test_hybrid_zero_length():
    sbet, cbet = reduced_latitude(WGS84.f, 20.)
    alpha1 = math.radians(60.)
    alpha2, dist = WGS84.hybrid(sbet, cbet, sbet, cbet, math.sin(alpha1), math.cos(alpha1))
    assert alpha2 == approx(alpha1, abs=1e-15)
    assert dist == approx(0., abs=1e-8)


def test_hybrid_past_vertex_is_finite():
    # Heading due east at 40 degrees, the geodesic never reaches a higher latitude;
    # the squared cosine of the end azimuth goes negative and must be clamped
    sbet1, cbet1 = reduced_latitude(WGS84.f, 40.)
    sbet2, cbet2 = reduced_latitude(WGS84.f, 40. + 1e-9)
    alpha2, dist = WGS84.hybrid(sbet1, cbet1, sbet2, cbet2, 1., 0.)

    assert math.isfinite(alpha2)
    assert math.isfinite(dist)
    assert alpha2 == approx(math.pi / 2, abs=1e-12)


def test_hybrid_near_antipodal():
    # Equator-straddling end points; approaching due east the arc between them
    # approaches half a great circle
    sbet, cbet = reduced_latitude(WGS84.f, 0.5)
    for azi1 in (1., 45., 89., 89.99):
        alpha1 = math.radians(azi1)
        alpha2, dist = WGS84.hybrid(
            -sbet, cbet, sbet, cbet, math.sin(alpha1), math.cos(alpha1)
        )
        assert math.isfinite(alpha2)
        assert alpha2 == approx(alpha1, abs=1e-14)
        assert 0 < dist < 20_004_000.
