import numpy as np
import pytest

from geodetics import BearingResult, CartesianVector, CONVERGENCE_FAILURE, GeodeticPoint


def test_geodeticpoint_init():
    p = GeodeticPoint(1., 2., 3.)
    assert p.latitude == 1.
    assert p.longitude == 2.
    assert p.height == 3.

    p = GeodeticPoint('1.0', '2.0')
    assert p.latitude == 1.
    assert p.longitude == 2.
    assert p.height is None

    # Longitude wrapping
    assert GeodeticPoint(0., 190.).longitude == -170.
    assert GeodeticPoint(0., -190.).longitude == 170.
    assert GeodeticPoint(0., 540.).longitude == 180.
    assert GeodeticPoint(0., 180.).longitude == 180.
    assert GeodeticPoint(0., -180.).longitude == -180.

    # Latitudes are never clamped
    assert GeodeticPoint(95., 0.).latitude == 95.

    # Unbounded points don't auto-adjust
    assert GeodeticPoint(0., 190., _bounded=False).longitude == 190.

    # Far out of range longitudes wrap without stepping through every turn
    assert GeodeticPoint(0., 1e13).longitude == -80.
    assert GeodeticPoint(0., -1e13).longitude == 80.
    assert GeodeticPoint(0., 720. + 180.).longitude == 180.
    assert GeodeticPoint(0., -720. - 180.).longitude == -180.
    assert GeodeticPoint(0., float('inf')).longitude == float('inf')


def test_geodeticpoint_immutable():
    with pytest.raises(AttributeError):
        GeodeticPoint(0., 0.).latitude = 1.


def test_geodeticpoint_sentinel():
    assert CONVERGENCE_FAILURE.is_sentinel
    assert CONVERGENCE_FAILURE.to_float() == (-999., -999., -999.)
    assert GeodeticPoint(-999, -999, -999, _bounded=False).is_sentinel

    assert not GeodeticPoint(-999, -999, _bounded=False).is_sentinel
    assert not GeodeticPoint(0., 0., 0.).is_sentinel


def test_geodeticpoint_eq_hash():
    assert GeodeticPoint(0., 0.) == GeodeticPoint(0., 0.)
    assert GeodeticPoint(0., 0.) != GeodeticPoint(0., 0., 1.)
    assert GeodeticPoint(0., 0.) != (0., 0.)

    points = {GeodeticPoint(0., 0.), GeodeticPoint(0., 0.), GeodeticPoint(1., 1.)}
    assert len(points) == 2


def test_geodeticpoint_repr():
    assert repr(GeodeticPoint(1., 2.)) == '<GeodeticPoint(1.0, 2.0)>'
    assert repr(GeodeticPoint(1., 2., 3.)) == '<GeodeticPoint(1.0, 2.0, 3.0)>'


def test_geodeticpoint_to_float():
    assert GeodeticPoint(1., 2.).to_float() == (1., 2.)
    assert GeodeticPoint(1., 2., 0.).to_float() == (1., 2., 0.)


def test_cartesianvector():
    v = CartesianVector(3, 4, 12)
    assert (v.x, v.y, v.z) == (3., 4., 12.)
    assert tuple(v) == (3., 4., 12.)
    assert v.norm == 13.
    assert v.scale(1000.) == CartesianVector(3000., 4000., 12000.)

    assert np.array_equal(v.to_numpy(), np.array([3., 4., 12.]))
    assert CartesianVector.from_numpy(np.array([3., 4., 12.])) == v
    assert CartesianVector.from_numpy([3, 4, 12]) == v

    with pytest.raises(ValueError):
        CartesianVector.from_numpy([1., 2.])


def test_cartesianvector_eq_hash():
    assert CartesianVector(1, 2, 3) == CartesianVector(1., 2., 3.)
    assert CartesianVector(1, 2, 3) != CartesianVector(1, 2, 4)
    assert CartesianVector(1, 2, 3) != (1, 2, 3)
    assert len({CartesianVector(1, 2, 3), CartesianVector(1, 2, 3)}) == 1


def test_cartesianvector_repr():
    assert repr(CartesianVector(1, 2, 3)) == '<CartesianVector(1.0, 2.0, 3.0)>'


def test_bearingresult():
    result = BearingResult(90., 270., 111.)
    assert result.azimuth == 90.
    assert result.backazimuth == 270.
    assert result.distance == 111.

    assert result == BearingResult(90, 270, 111)
    assert result != BearingResult(90., 270., 112.)
    assert len({result, BearingResult(90., 270., 111.)}) == 1

    assert repr(result) == '<BearingResult(90.0, 270.0, 111.0)>'
    assert str(result) == 'Azimuth: 90.0 Back azimuth: 270.0 Distance: 111.0'

    with pytest.raises(AttributeError):
        result.distance = 0.
