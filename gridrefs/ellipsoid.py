"""
Reference ellipsoid parameters used by the Transverse Mercator series
"""

__all__ = ['Ellipsoid', 'WGS84']

from functools import cached_property
import math

from gridrefs._const import WGS84_A, WGS84_INVERSE_F


class Ellipsoid:
    """
    An ellipsoid of revolution, described by its equatorial radius and inverse
    flattening. All other parameters are derived from those two values.

    Args:
        equatorial_radius:
            The semi-major axis, in meters

        inverse_flattening:
            The reciprocal of the flattening, e.g. 298.257223563 for WGS84
    """

    def __init__(self, equatorial_radius: float, inverse_flattening: float):
        self._a = float(equatorial_radius)
        self._inverse_flattening = float(inverse_flattening)

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return (
            self.a == other.a and
            self.inverse_flattening == other.inverse_flattening
        )

    def __hash__(self):
        return hash((self.a, self.inverse_flattening))

    def __repr__(self):
        return f'<Ellipsoid({self.a}, {self.inverse_flattening})>'

    @property
    def a(self) -> float:
        """Equatorial radius (meters)"""
        return self._a

    @property
    def inverse_flattening(self) -> float:
        return self._inverse_flattening

    @cached_property
    def b(self) -> float:
        """Polar radius (meters)"""
        return self.a * (1 - 1 / self.inverse_flattening)

    @cached_property
    def e(self) -> float:
        """First eccentricity"""
        # Round-off can push the radicand below zero when b ~= a
        return math.sqrt(max(0., 1 - self.b ** 2 / self.a ** 2))

    @cached_property
    def esq(self) -> float:
        """First eccentricity squared"""
        return 1 - (self.b / self.a) * (self.b / self.a)

    @cached_property
    def e0sq(self) -> float:
        """Second eccentricity squared"""
        return self.e * self.e / (1 - self.e ** 2)

    @cached_property
    def e0(self) -> float:
        """Second eccentricity"""
        return math.sqrt(self.e0sq)

    @cached_property
    def e1(self) -> float:
        """Eccentricity term of the footprint latitude series"""
        root = math.sqrt(1 - self.e ** 2)
        return (1 - root) / (1 + root)


WGS84 = Ellipsoid(WGS84_A, WGS84_INVERSE_F)
