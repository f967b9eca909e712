"""
Geodesic calculations on an oblate spheroid.

Reference: Karney, C.F.F. Algorithms for geodesics. J Geod 87, 43-55 (2013).
https://doi.org/10.1007/s00190-012-0578-z

Each solution works through two spherical triangles on the auxiliary sphere, both
with a vertex at the north pole (N) and one at the geodesic's northward equator
crossing (E); the third vertex is the start point (A) or the end point (B).
"""

__all__ = ['Geodesic', 'Solution', 'WGS84']

import math
from typing import Tuple

from pydantic import validate_call

from geodesolve._const import (
    MAX_A, MAX_F, MAX_S12, MIN_A, POLAR_EPS, TINY_F, WGS84_A, WGS84_F
)
from geodesolve._trig import sum_sin
from geodesolve.errors import InvalidArgumentError
from geodesolve.series import (
    a3_coefficients, auxiliary_eps, c3_coefficients,
    series_a1, series_a3, series_c1, series_c1p, series_c3
)
from geodesolve.utils.functions import nnz, sincosd, sq, wrap_longitude
from geodesolve.utils.mixins import LoggingMixin


class Solution:
    """
    The solution of a geodesic problem: both end points, the azimuth of the
    geodesic at each of them, and the distance between them.

    Angles are in degrees, the distance is in the units of the ellipsoid's axis.
    """

    __slots__ = ('lat1', 'lon1', 'azi1', 'lat2', 'lon2', 'azi2', 's12')

    def __init__(
        self,
        lat1: float,
        lon1: float,
        azi1: float,
        lat2: float,
        lon2: float,
        azi2: float,
        s12: float,
    ):
        self.lat1, self.lon1, self.azi1 = nnz(lat1), nnz(lon1), nnz(azi1)
        self.lat2, self.lon2, self.azi2 = nnz(lat2), nnz(lon2), nnz(azi2)
        self.s12 = nnz(s12)

    def __eq__(self, other):
        if not isinstance(other, Solution):
            return False

        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return (
            f'<Solution({self.lat1}, {self.lon1}, {self.azi1}) -> '
            f'({self.lat2}, {self.lon2}, {self.azi2}), s12={self.s12}>'
        )

    def to_tuple(self) -> Tuple[float, ...]:
        """Returns (lat1, lon1, azi1, lat2, lon2, azi2, s12)"""
        return tuple(getattr(self, attr) for attr in self.__slots__)

    def to_dict(self) -> dict:
        """Returns the solution keyed by field name"""
        return {attr: getattr(self, attr) for attr in self.__slots__}


class Geodesic(LoggingMixin):
    """
    Geodesic solver for an oblate spheroid (ellipsoid of revolution).

    Instances are immutable and may be shared freely between threads.

    Args:
        a:
            The equatorial radius, within [1, 1e10]

        f:
            The flattening, within [0, 1/150]. Values at or below 2**-26 are
            treated as a sphere.
    """

    @validate_call
    def __init__(self, a: float, f: float):
        if not MIN_A <= a <= MAX_A:
            raise InvalidArgumentError('a', a)
        if not 0 <= f <= MAX_F:
            raise InvalidArgumentError('f', f)
        if f <= TINY_F:
            if f > 0:
                self.warn_once(
                    'Flattening %s is negligible; treating the ellipsoid as a sphere. '
                    '(this warning will not repeat)', f
                )
            f = 0.0

        self._a = a
        self._f = f
        self._b = a * (1 - f)
        self._n = f / (2 - f)
        self._e2 = f * (2 - f)
        self._ep2 = self._e2 / ((1 - f) * (1 - f))
        self._a3x = a3_coefficients(self._n)
        self._c3x = c3_coefficients(self._n)

    def __eq__(self, other):
        if not isinstance(other, Geodesic):
            return False

        return self._a == other._a and self._f == other._f

    def __hash__(self):
        return hash((self._a, self._f))

    def __repr__(self):
        return f'<Geodesic(a={self._a}, f={self._f})>'

    @property
    def a(self) -> float:
        """The equatorial radius"""
        return self._a

    @property
    def f(self) -> float:
        """The flattening"""
        return self._f

    @property
    def b(self) -> float:
        """The polar semi-axis"""
        return self._b

    @property
    def n(self) -> float:
        """The third flattening"""
        return self._n

    @property
    def e2(self) -> float:
        """The eccentricity squared"""
        return self._e2

    @property
    def ep2(self) -> float:
        """The second eccentricity squared"""
        return self._ep2

    @validate_call
    def direct(self, lat1: float, lon1: float, azi1: float, s12: float) -> Solution:
        """
        Solves the direct geodesic problem: given a start point, an azimuth and a
        distance, finds the end point and the azimuth of the geodesic there.

        Args:
            lat1:
                Latitude of the start point, in degrees within [-90, 90]

            lon1:
                Longitude of the start point, in degrees within [-180, 180]

            azi1:
                Azimuth at the start point, in degrees clockwise from north within
                [-180, 180]

            s12:
                Distance to travel, within [0, 1e11], in the units of the axis

        Returns:
            Solution
        """
        if not -90 <= lat1 <= 90:
            raise InvalidArgumentError('lat1', lat1)
        if not -180 <= lon1 <= 180:
            raise InvalidArgumentError('lon1', lon1)
        if not -180 <= azi1 <= 180:
            raise InvalidArgumentError('azi1', azi1)
        if not 0 <= s12 <= MAX_S12:
            raise InvalidArgumentError('s12', s12)

        if abs(lat1) > 90 * (1 - POLAR_EPS):
            self.logger.debug('Latitude %s pulled back from the pole', lat1)
            lat1 = math.copysign(90 * (1 - POLAR_EPS), lat1)

        b, f = self._b, self._f

        sphi1, cphi1 = sincosd(lat1)
        alpha1 = math.radians(azi1)
        salp1, calp1 = math.sin(alpha1), math.cos(alpha1)

        # Triangle NEA
        sbet1, cbet1 = (1 - f) * sphi1, cphi1
        norm = math.hypot(sbet1, cbet1)
        sbet1, cbet1 = sbet1 / norm, cbet1 / norm
        alpha0 = math.atan2(salp1 * cbet1, math.hypot(calp1, salp1 * sbet1))
        salp0, calp0 = math.sin(alpha0), math.cos(alpha0)
        sigma1 = math.atan2(sbet1, calp1 * cbet1)
        # (sbet1, calp1 * cbet1) is proportional to (sin(sigma1), cos(sigma1))
        omega1 = math.atan2(salp0 * sbet1, calp1 * cbet1)

        # Distance along the geodesic to sigma2
        eps = auxiliary_eps(self._ep2, calp0)
        a1 = series_a1(eps)
        s1 = b * (a1 * (sigma1 + sum_sin(sigma1, series_c1(eps))))
        tau2 = (s1 + s12) / (b * a1)
        sigma2 = tau2 + sum_sin(tau2, series_c1p(eps))
        ssig2, csig2 = math.sin(sigma2), math.cos(sigma2)

        # Triangle NEB
        alpha2 = math.atan2(salp0, calp0 * csig2)
        beta2 = math.atan2(calp0 * ssig2, math.hypot(calp0 * csig2, salp0))
        omega2 = math.atan2(salp0 * ssig2, csig2)
        phi2 = math.atan2(math.sin(beta2), (1 - f) * math.cos(beta2))

        # Longitude on the ellipsoid lags the auxiliary sphere by f * sin(alpha0) * I3
        a3 = series_a3(self._a3x, eps)
        c3 = series_c3(self._c3x, eps)
        lam1 = omega1 - f * salp0 * a3 * (sigma1 + sum_sin(sigma1, c3))
        lam2 = omega2 - f * salp0 * a3 * (sigma2 + sum_sin(sigma2, c3))

        return Solution(
            lat1, lon1, azi1,
            math.degrees(phi2),
            wrap_longitude(lon1, math.degrees(lam2 - lam1)),
            math.degrees(alpha2),
            s12,
        )

    def hybrid(
        self,
        sbet1: float,
        cbet1: float,
        sbet2: float,
        cbet2: float,
        salp1: float,
        calp1: float,
    ) -> Tuple[float, float]:
        """
        Given the reduced latitudes of both end points and the azimuth at the first,
        finds the azimuth at the second and the distance between them.

        This is the step an inverse solver repeats while searching for the azimuth
        which joins two points. Inputs are not validated; the geodesic is assumed to
        still be heading north (cos(alpha2) >= 0) at the second point, the
        configuration such a solver reduces every problem to.

        Args:
            sbet1, cbet1:
                Sine and cosine of the first point's reduced latitude

            sbet2, cbet2:
                Sine and cosine of the second point's reduced latitude

            salp1, calp1:
                Sine and cosine of the azimuth at the first point

        Returns:
            (azimuth at the second point in radians, distance)
        """
        # Triangle NEA
        alpha0 = math.atan2(salp1 * cbet1, math.hypot(calp1, salp1 * sbet1))
        calp0 = math.cos(alpha0)
        sigma1 = math.atan2(sbet1, calp1 * cbet1)

        # Triangle NEB; cbet2^2 - cbet1^2 == sbet1^2 - sbet2^2, use whichever form is
        # better conditioned
        if cbet1 < -sbet1:
            diff = (cbet2 - cbet1) * (cbet2 + cbet1)
        else:
            diff = (sbet1 - sbet2) * (sbet1 + sbet2)
        alpha2 = math.atan2(math.sin(alpha0), math.sqrt(max(0.0, sq(calp1 * cbet1) + diff)))
        sigma2 = math.atan2(sbet2, math.cos(alpha2) * cbet2)

        eps = auxiliary_eps(self._ep2, calp0)
        a1 = series_a1(eps)
        c1 = series_c1(eps)
        s1 = self._b * (a1 * (sigma1 + sum_sin(sigma1, c1)))
        s2 = self._b * (a1 * (sigma2 + sum_sin(sigma2, c1)))

        return alpha2, s2 - s1


WGS84 = Geodesic(WGS84_A, WGS84_F)
