"""
Conversions between Cartesian and geodetic coordinates on an ellipsoid
"""
__all__ = ['bowring_to_geodetic', 'to_cartesian', 'to_geodetic', 'to_geodetic_array']

import math

import numpy as np

from geodetics._const import (
    GEODETIC_MAX_ITERATIONS, HEIGHT_TOLERANCE, LATITUDE_TOLERANCE, LEGACY_PI
)
from geodetics.coordinates import CartesianVector, CONVERGENCE_FAILURE, GeodeticPoint
from geodetics.ellipsoid import Ellipsoid, WGS84
from geodetics.utils.logging import LOGGER


def _to_point(phi: float, rlam: float, h: float, legacy_pi: bool) -> GeodeticPoint:
    """Build a GeodeticPoint from radians, optionally scaling by the truncated pi"""
    if legacy_pi:
        return GeodeticPoint(phi * 180 / LEGACY_PI, rlam * 180 / LEGACY_PI, h)

    return GeodeticPoint(math.degrees(phi), math.degrees(rlam), h)


def to_geodetic(
    cartesian: CartesianVector,
    ellipsoid: Ellipsoid = WGS84,
    legacy_pi: bool = False,
) -> GeodeticPoint:
    """
    Convert Cartesian coordinates to ellipsoidal latitude, longitude and height by
    iterating on the latitude and height until both settle.

    Iteration stops once the latitude moves by no more than 1e-11 radians and the
    height by no more than 1e-5 (in the ellipsoid's units) within the same step. If
    that doesn't happen within 10 steps, the sentinel point (-999, -999, -999) is
    returned instead of raising; check GeodeticPoint.is_sentinel on the result.

    Args:
        cartesian:
            The Earth-fixed position, in the same units as the ellipsoid axes

        ellipsoid: (Ellipsoid) (Default WGS84)
            The reference ellipsoid

        legacy_pi: (bool) (Default False)
            If True, radians are converted to degrees using pi truncated to 3.1415926,
            reproducing historical occultation products

    Returns:
        GeodeticPoint, with height in the ellipsoid's units
    """
    a, b, e2 = ellipsoid.a, ellipsoid.b, ellipsoid.e2
    x, y, z = cartesian

    s = math.sqrt(x * x + y * y)
    rlam = math.atan2(y, x)

    if s == 0.:
        if z == 0.:
            LOGGER.debug('Cannot convert the ellipsoid center to geodetic coordinates')
            return CONVERGENCE_FAILURE

        # On the polar axis
        return GeodeticPoint(math.copysign(90., z), 0., abs(z) - b)

    zps = z / s
    h = math.sqrt(x * x + y * y + z * z) - a
    try:
        phi = math.atan(zps / (1.0 - e2 * a / (a + h)))

        for _ in range(GEODETIC_MAX_ITERATIONS):
            n = a / math.sqrt(1.0 - e2 * math.sin(phi) * math.sin(phi))
            hp, phip = h, phi
            h = s / math.cos(phi) - n
            phi = math.atan(zps / (1.0 - e2 * n / (n + h)))
            if abs(phip - phi) <= LATITUDE_TOLERANCE and abs(hp - h) <= HEIGHT_TOLERANCE:
                break
        else:
            LOGGER.debug('Geodetic conversion of %s did not converge', cartesian)
            return CONVERGENCE_FAILURE

    except ZeroDivisionError:
        LOGGER.debug('Geodetic conversion of %s hit a singular step', cartesian)
        return CONVERGENCE_FAILURE

    return _to_point(phi, rlam, h, legacy_pi)


def to_cartesian(point: GeodeticPoint, ellipsoid: Ellipsoid = WGS84) -> CartesianVector:
    """
    Convert geodetic coordinates to Earth-fixed Cartesian coordinates.
    A missing height is treated as zero.
    """
    phi, rlam = math.radians(point.latitude), math.radians(point.longitude)
    h = point.height or 0.
    e2 = ellipsoid.e2

    n = ellipsoid.a / math.sqrt(1.0 - e2 * math.sin(phi) ** 2)
    return CartesianVector(
        (n + h) * math.cos(phi) * math.cos(rlam),
        (n + h) * math.cos(phi) * math.sin(rlam),
        (n * (1.0 - e2) + h) * math.sin(phi),
    )


def bowring_to_geodetic(
    cartesian: CartesianVector,
    ellipsoid: Ellipsoid = WGS84
) -> GeodeticPoint:
    """
    Convert Cartesian coordinates to geodetic coordinates using Bowring's closed-form
    approximation. Useful as a cross-check against to_geodetic; accurate to well under
    a millimeter for points near the surface.

    Args:
        cartesian:
            The Earth-fixed position, in the same units as the ellipsoid axes

        ellipsoid: (Ellipsoid) (Default WGS84)
            The reference ellipsoid

    Returns:
        GeodeticPoint
    """
    a, b, e2 = ellipsoid.a, ellipsoid.b, ellipsoid.e2
    x, y, z = cartesian

    longitude = math.atan2(y, x)
    p = math.sqrt(x * x + y * y)
    if p == 0.:
        return GeodeticPoint(math.copysign(90., z), 0., abs(z) - b)

    e_prime2 = (a * a - b * b) / (b * b)
    theta = math.atan((z * a) / (p * b))
    top = z + e_prime2 * b * math.sin(theta) ** 3
    bottom = p - e2 * a * math.cos(theta) ** 3
    latitude = math.atan(top / bottom)

    n = a / math.sqrt(1 - e2 * math.sin(latitude) ** 2)
    altitude = p / math.cos(latitude) - n

    return GeodeticPoint(math.degrees(latitude), math.degrees(longitude), altitude)


def to_geodetic_array(
    xyz,
    ellipsoid: Ellipsoid = WGS84,
    legacy_pi: bool = False,
) -> np.ndarray:
    """
    Convert many Cartesian points at once.

    Args:
        xyz:
            An array-like of shape (n, 3)

        ellipsoid: (Ellipsoid) (Default WGS84)
            The reference ellipsoid

        legacy_pi: (bool) (Default False)
            See to_geodetic

    Returns:
        numpy array of shape (n, 3), with rows of (latitude, longitude, height).
        Rows which failed to converge hold the sentinel value -999.
    """
    points = np.atleast_2d(np.asarray(xyz, dtype=float))
    if points.ndim != 2 or points.shape[1] != 3:
        raise ValueError(f'Expected an array of shape (n, 3), got {points.shape}')

    out = np.empty_like(points)
    failures = 0
    for idx, row in enumerate(points):
        result = to_geodetic(CartesianVector(*row), ellipsoid, legacy_pi)
        failures += result.is_sentinel
        out[idx] = result.to_float()

    if failures:
        LOGGER.warning(
            '%d of %d points failed to converge and were set to the sentinel value',
            failures, len(points)
        )

    return out
