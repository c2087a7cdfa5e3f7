import logging

import numpy as np
import pytest
from pytest import approx

from geodetics import COSMIC_ELLIPSOID, CartesianVector, GeodeticPoint, UTCEpoch, WGS84
from geodetics._const import LEGACY_PI
from geodetics.conversion import to_geodetic
from geodetics.occultation import inertial_to_geodetic, leo_to_geodetic
from geodetics.sidereal import inertial_to_earth_fixed


_EPOCH = UTCEpoch(2009, 1, 2, 3, 4, 5.5)

_POSITIONS = np.array([
    [7000., 0., 0.],
    [-4200., 1300., 5100.],
    [1500., -6500., -2100.],
    [0., 0., 6900.],
])


def test_inertial_to_geodetic():
    actual = inertial_to_geodetic(_POSITIONS, _EPOCH)
    assert actual.shape == (4, 3)

    dtheta = _EPOCH.hour_angle()
    for row, result in zip(_POSITIONS, actual):
        expected = to_geodetic(
            inertial_to_earth_fixed(CartesianVector(*row), dtheta),
            COSMIC_ELLIPSOID,
            legacy_pi=True
        )
        assert tuple(result) == expected.to_float()


def test_inertial_to_geodetic_equator():
    actual = inertial_to_geodetic([[7000., 0., 0.]], _EPOCH)
    lat, lon, alt = actual[0]

    dtheta = _EPOCH.hour_angle()
    expected_lon = GeodeticPoint(0., np.arctan2(-np.sin(dtheta), np.cos(dtheta)) * 180 / LEGACY_PI).longitude

    assert lat == approx(0., abs=1e-12)
    assert lon == approx(expected_lon, abs=1e-9)
    assert alt == approx(7000. - COSMIC_ELLIPSOID.a, abs=1e-9)
    assert -180. <= lon <= 180.


def test_inertial_to_geodetic_offset():
    # An offset moves the hour angle, not the positions
    actual = inertial_to_geodetic(_POSITIONS, _EPOCH, 90.)
    dtheta = _EPOCH.hour_angle(90.)
    for row, result in zip(_POSITIONS, actual):
        expected = to_geodetic(
            inertial_to_earth_fixed(CartesianVector(*row), dtheta),
            COSMIC_ELLIPSOID,
            legacy_pi=True
        )
        assert tuple(result) == expected.to_float()

    # Latitude and altitude are unaffected by a spin about the polar axis
    unshifted = inertial_to_geodetic(_POSITIONS, _EPOCH)
    assert np.allclose(actual[:, 0], unshifted[:, 0], rtol=0, atol=1e-9)
    assert np.allclose(actual[:, 2], unshifted[:, 2], rtol=0, atol=1e-6)


def test_inertial_to_geodetic_ellipsoid():
    meters = inertial_to_geodetic(_POSITIONS * 1000., _EPOCH, ellipsoid=WGS84)
    kilometers = inertial_to_geodetic(_POSITIONS, _EPOCH)

    # The two ellipsoids differ only slightly, and in units
    assert np.allclose(meters[:, 0], kilometers[:, 0], rtol=0, atol=1e-4)
    assert np.allclose(meters[:, 2] / 1000., kilometers[:, 2], rtol=0, atol=1e-3)


def test_inertial_to_geodetic_sentinel(caplog):
    positions = np.vstack((_POSITIONS, [[0., 0., 0.]]))
    with caplog.at_level(logging.WARNING, logger='geodetics'):
        actual = inertial_to_geodetic(positions, _EPOCH)

    assert tuple(actual[-1]) == (-999., -999., -999.)
    assert not np.any(actual[:-1] == -999.)
    assert '1 of 5 occultation samples failed to converge' in caplog.text


def test_inertial_to_geodetic_bad_shape():
    with pytest.raises(ValueError):
        inertial_to_geodetic(np.zeros((3, 2)), _EPOCH)

    with pytest.raises(ValueError):
        inertial_to_geodetic(np.zeros((2, 3, 3)), _EPOCH)

    # A single position is accepted
    assert inertial_to_geodetic([7000., 0., 0.], _EPOCH).shape == (1, 3)


def test_leo_to_geodetic():
    lat, lon, alt = leo_to_geodetic(
        _POSITIONS[:, 0], list(_POSITIONS[:, 1]), tuple(_POSITIONS[:, 2]), _EPOCH, 30.
    )
    expected = inertial_to_geodetic(_POSITIONS, _EPOCH, 30.)

    assert np.array_equal(lat, expected[:, 0])
    assert np.array_equal(lon, expected[:, 1])
    assert np.array_equal(alt, expected[:, 2])

    with pytest.raises(ValueError):
        leo_to_geodetic([7000., 6900.], [0.], [0., 0.], _EPOCH)
