import pytest
from pytest import approx

from geodetics import COSMIC_ELLIPSOID, Ellipsoid, InvalidEllipsoid, WGS84


def test_wgs84():
    assert WGS84.a == 6378137.0
    assert WGS84.f == 1 / 298.257223563
    assert WGS84.b == approx(6356752.314245, abs=1e-6)
    assert WGS84.e2 == approx(0.00669437999014, abs=1e-13)
    assert WGS84.name == 'WGS84'


def test_cosmic_ellipsoid():
    assert COSMIC_ELLIPSOID.a == 6378.1370
    assert COSMIC_ELLIPSOID.b == 6356.7523142
    assert COSMIC_ELLIPSOID.f == approx(WGS84.f, rel=1e-6)


def test_ellipsoid_construction():
    assert Ellipsoid(2., b=1.).f == 0.5
    assert Ellipsoid(2., f=0.5).b == 1.

    assert Ellipsoid.from_axes(2., 1.) == Ellipsoid(2., b=1.)
    assert Ellipsoid.from_flattening(2., 0.5) == Ellipsoid(2., b=1.)

    # Numeric strings are coerced
    assert Ellipsoid('2.0', b='1.0') == Ellipsoid(2., b=1.)


def test_ellipsoid_invalid():
    # b must be smaller than a
    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(1., b=2.)

    # Spheres are not oblate
    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(1., b=1.)

    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(-1., b=-2.)

    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(1., b=0.)

    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(0., f=0.5)

    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(1., f=0.)

    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(1., f=1.)

    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(float('inf'), b=1.)

    # Exactly one of b, f
    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(1.)

    with pytest.raises(InvalidEllipsoid):
        Ellipsoid(2., b=1., f=0.5)

    # Non-numeric input fails validation
    with pytest.raises(ValueError):
        Ellipsoid('not a number', b=1.)

    assert issubclass(InvalidEllipsoid, ValueError)


def test_ellipsoid_immutable():
    with pytest.raises(AttributeError):
        WGS84.a = 1.

    with pytest.raises(AttributeError):
        WGS84.f = 0.1


def test_ellipsoid_eq_hash():
    assert Ellipsoid(2., b=1.) == Ellipsoid(2., b=1., name='other')
    assert Ellipsoid(2., b=1.) != Ellipsoid(3., b=1.)
    assert Ellipsoid(2., b=1.) != (2., 1.)

    ellipsoids = {Ellipsoid(2., b=1.), Ellipsoid(2., b=1.), Ellipsoid(3., b=1.)}
    assert len(ellipsoids) == 2


def test_ellipsoid_repr():
    assert repr(Ellipsoid(2., b=1.)) == '<Ellipsoid(a=2.0, b=1.0, f=0.5)>'
    assert repr(Ellipsoid(2., b=1., name='test')) == '<Ellipsoid(test: a=2.0, b=1.0, f=0.5)>'
