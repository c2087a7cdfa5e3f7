"""
Geolocation of COSMIC radio occultation samples.

Satellite (LEO) positions in these products are inertial and in kilometers. Each
sample is carried into an approximate Earth-fixed frame by a single sidereal
rotation computed from the file's epoch, then converted to latitude, longitude and
altitude on a kilometer-scaled ellipsoid using the truncated pi of the historical
products.
"""

__all__ = ['inertial_to_geodetic', 'leo_to_geodetic']

from typing import Tuple

import numpy as np

from geodetics.conversion import to_geodetic
from geodetics.coordinates import CartesianVector
from geodetics.ellipsoid import COSMIC_ELLIPSOID, Ellipsoid
from geodetics.sidereal import inertial_to_earth_fixed
from geodetics.time import UTCEpoch
from geodetics.utils.logging import LOGGER


def inertial_to_geodetic(
    positions,
    epoch: UTCEpoch,
    offset_seconds: float = 0.,
    ellipsoid: Ellipsoid = COSMIC_ELLIPSOID,
) -> np.ndarray:
    """
    Geolocate inertial satellite positions.

    Args:
        positions:
            An array-like of shape (n, 3) of inertial positions, in the ellipsoid's
            units (kilometers for the default ellipsoid)

        epoch:
            The UTC epoch of the occultation. One hour angle is computed for the
            whole array.

        offset_seconds: (float) (Default 0.0)
            Seconds elapsed since the epoch, applied to the hour angle

        ellipsoid: (Ellipsoid) (Default COSMIC_ELLIPSOID)
            The reference ellipsoid

    Returns:
        numpy array of shape (n, 3) with rows of (latitude, longitude, altitude).
        Samples that failed to converge hold the sentinel value -999.
    """
    points = np.atleast_2d(np.asarray(positions, dtype=float))
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError(f'Expected an array of shape (n, 3), got {points.shape}')

    dtheta = epoch.hour_angle(offset_seconds)

    out = np.empty_like(points)
    failures = 0
    for idx, row in enumerate(points):
        v_ecf = inertial_to_earth_fixed(CartesianVector(*row), dtheta)
        llh = to_geodetic(v_ecf, ellipsoid, legacy_pi=True)
        failures += llh.is_sentinel
        out[idx] = llh.to_float()

    if failures:
        LOGGER.warning(
            '%d of %d occultation samples failed to converge and were set to the '
            'sentinel value', failures, len(points)
        )

    return out


def leo_to_geodetic(
    x_leo,
    y_leo,
    z_leo,
    epoch: UTCEpoch,
    offset_seconds: float = 0.,
    ellipsoid: Ellipsoid = COSMIC_ELLIPSOID,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Geolocate LEO positions stored as three separate component arrays.

    Args:
        x_leo, y_leo, z_leo:
            Equal-length array-likes of inertial position components

        epoch:
            The UTC epoch of the occultation

        offset_seconds: (float) (Default 0.0)
            Seconds elapsed since the epoch, applied to the hour angle

        ellipsoid: (Ellipsoid) (Default COSMIC_ELLIPSOID)
            The reference ellipsoid

    Returns:
        (latitude, longitude, altitude) arrays, each of length n
    """
    x_leo, y_leo, z_leo = (np.ravel(np.asarray(v, dtype=float)) for v in (x_leo, y_leo, z_leo))
    if not len(x_leo) == len(y_leo) == len(z_leo):
        raise ValueError('Position component arrays must have equal lengths.')

    llh = inertial_to_geodetic(
        np.column_stack((x_leo, y_leo, z_leo)), epoch, offset_seconds, ellipsoid
    )
    return llh[:, 0], llh[:, 1], llh[:, 2]
