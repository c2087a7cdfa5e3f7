"""
Reference ellipsoids
"""

__all__ = ['COSMIC_ELLIPSOID', 'Ellipsoid', 'WGS84']

import math
from typing import Optional

from pydantic import validate_call

from geodetics._const import COSMIC_A, COSMIC_B, WGS84_A, WGS84_F
from geodetics.exceptions import InvalidEllipsoid


class Ellipsoid:
    """
    An oblate ellipsoid of revolution, defined by its semi-major axis and either its
    semi-minor axis or its flattening. Units are those of the semi-major axis; distances
    and heights computed against the ellipsoid come back in the same units.

    Args:
        a:
            The semi-major (equatorial) axis

        b: (Optional)
            The semi-minor (polar) axis. Mutually exclusive with f.

        f: (Optional)
            The flattening, (a - b) / a. Mutually exclusive with b.

        name: (str) (Optional)
            A label for the ellipsoid, used only for display
    """

    @validate_call
    def __init__(
        self,
        a: float,
        b: Optional[float] = None,
        f: Optional[float] = None,
        name: str = '',
    ):
        if (b is None) == (f is None):
            raise InvalidEllipsoid('Exactly one of semi-minor axis (b) or flattening (f) is required.')

        if not math.isfinite(a) or a <= 0:
            raise InvalidEllipsoid(f'Semi-major axis must be positive and finite, got {a}')

        if f is not None:
            if not 0 < f < 1:
                raise InvalidEllipsoid(f'Flattening must be within (0, 1), got {f}')
            b = a * (1 - f)
        else:
            if not math.isfinite(b) or b <= 0:
                raise InvalidEllipsoid(f'Semi-minor axis must be positive and finite, got {b}')
            if a <= b:
                raise InvalidEllipsoid(
                    f'Semi-major axis ({a}) must be greater than semi-minor axis ({b})'
                )
            f = (a - b) / a

        self._a = a
        self._b = b
        self._f = f
        self._name = name

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.b == other.b and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.b, self.f))

    def __repr__(self):
        label = f'{self.name}: ' if self.name else ''
        return f'<Ellipsoid({label}a={self.a}, b={self.b}, f={self.f})>'

    @property
    def a(self) -> float:
        """The semi-major axis"""
        return self._a

    @property
    def b(self) -> float:
        """The semi-minor axis"""
        return self._b

    @property
    def f(self) -> float:
        """The flattening"""
        return self._f

    @property
    def name(self) -> str:
        return self._name

    @property
    def e2(self) -> float:
        """The first eccentricity squared, (a^2 - b^2) / a^2"""
        return (self._a * self._a - self._b * self._b) / (self._a * self._a)

    @classmethod
    def from_axes(cls, a: float, b: float, name: str = ''):
        """Create an Ellipsoid from its semi-major and semi-minor axes"""
        return cls(a, b=b, name=name)

    @classmethod
    def from_flattening(cls, a: float, f: float, name: str = ''):
        """Create an Ellipsoid from its semi-major axis and flattening"""
        return cls(a, f=f, name=name)


WGS84 = Ellipsoid.from_flattening(WGS84_A, WGS84_F, name='WGS84')

# Kilometer-scaled ellipsoid used by COSMIC occultation products
COSMIC_ELLIPSOID = Ellipsoid.from_axes(COSMIC_A, COSMIC_B, name='COSMIC')
