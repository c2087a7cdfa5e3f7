"""
Sidereal time and vector rotations, used to carry inertial satellite positions into an
approximate Earth-fixed frame.

The rotation is a plain spin about the Earth's axis by the Greenwich sidereal hour
angle. Precession, nutation and polar motion are deliberately ignored; products built
on this approximation depend on it being reproduced exactly.
"""

__all__ = [
    'gast', 'greenwich_hour_angle', 'inertial_to_earth_fixed', 'julian_day',
    'rotate_eci_to_ecef', 'spin'
]

import math
from typing import Iterable, Union

import numpy as np

from geodetics._const import (
    DAYS_PER_CENTURY, DEGREES_TO_RADIANS, EARTH_ROTATION_COEFFICIENTS, GMST_COEFFICIENTS,
    GREGORIAN_REFORM, J2000_JULIAN_DAY, SECONDS_PER_DAY, SIDEREAL_RATE,
    UNIX_EPOCH_J2000_DAYS
)
from geodetics.coordinates import CartesianVector
from geodetics.utils.functions import round_half_up
from geodetics.utils.logging import warn_once

VectorLike = Union[CartesianVector, Iterable[float]]

EARTH_AXIS = CartesianVector(0., 0., 1.)


def julian_day(month: int, day: int, year: int) -> float:
    """
    Calculates the Julian day from a Gregorian month, day and year. Not valid before
    1582-10-15; earlier dates are computed anyway but log a warning.

    Args:
        month:
            The calendar month, 1-12

        day:
            The day of the month

        year:
            The calendar year

    Returns:
        float
    """
    if (year, month, day) < GREGORIAN_REFORM:
        warn_once(
            'Julian day calculation is not valid for dates before 1582-10-15. '
            '(this warning will not repeat)'
        )

    shift = (12 - month) // 10
    iy = year - shift
    im = month + 1 + 12 * shift
    i = iy // 100
    j = 2 - i + i // 4 + round_half_up(365.25 * iy) + round_half_up(30.6001 * im)
    return j + day + 1720994.5


def _to_greenwich(offset_seconds: float, utco: float, gmst: float) -> float:
    """
    Advance mean sidereal time (seconds) by the elapsed UTC seconds of the day and
    return the resulting hour angle in radians.
    """
    utc = (utco + offset_seconds) * SIDEREAL_RATE
    gmst = gmst + utc
    if not math.isfinite(gmst):
        raise ValueError(f'Sidereal time is not finite: {gmst}')

    # gmst may be a positive number or may be a negative number.
    while gmst < 0.:
        gmst = gmst + SECONDS_PER_DAY

    while gmst >= SECONDS_PER_DAY:
        gmst = gmst - SECONDS_PER_DAY

    return gmst * 2. * math.pi / SECONDS_PER_DAY


def gast(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: float,
    offset_seconds: float = 0.,
) -> float:
    """
    Computes the Greenwich sidereal hour angle for a UTC date and time. The equation of
    the equinoxes is not applied; the occultation products this supports do not need
    that accuracy.

    Args:
        year, month, day:
            The UTC calendar date

        hour, minute, second:
            The UTC time of day

        offset_seconds: (float) (Default 0.0)
            Additional seconds elapsed since the given time

    Returns:
        The hour angle in radians, within [0, 2 * pi)
    """
    djd = julian_day(month, day, year)
    tu = (djd - J2000_JULIAN_DAY) / DAYS_PER_CENTURY

    c0, c1, c2, c3 = GMST_COEFFICIENTS
    gmst = c0 + c1 * tu + c2 * tu * tu + c3 * tu ** 3
    utco = (hour * 3600) + (minute * 60) + second

    return _to_greenwich(offset_seconds, utco, gmst)


def spin(vector: VectorLike, axis: VectorLike, angle: float) -> CartesianVector:
    """
    Rotates a vector around an axis by an angle (right-hand rule).

    Args:
        vector:
            The vector to be rotated

        axis:
            The vector to rotate around. Need not be normalized, but must have a
            nonzero length.

        angle:
            The angle of rotation, in radians

    Returns:
        CartesianVector
    """
    vs = np.asarray(tuple(axis), dtype=float)
    vsabs = math.sqrt(vs[0] * vs[0] + vs[1] * vs[1] + vs[2] * vs[2])
    if vsabs == 0.:
        raise ValueError('Cannot rotate around a zero-length axis.')

    x, y, z = vs / vsabs

    a1 = math.cos(angle)
    a2 = 1.0 - a1
    a3 = math.sin(angle)
    R = np.array([
        [a2 * x * x + a1, a2 * x * y - a3 * z, a2 * x * z + a3 * y],
        [a2 * y * x + a3 * z, a2 * y * y + a1, a2 * y * z - a3 * x],
        [a2 * z * x - a3 * y, a2 * z * y + a3 * x, a2 * z * z + a1],
    ])
    return CartesianVector.from_numpy(R @ np.asarray(tuple(vector), dtype=float))


def inertial_to_earth_fixed(vector: VectorLike, hour_angle: float) -> CartesianVector:
    """
    Rotate an inertial position into the approximate Earth-fixed frame by spinning it
    backwards through the Greenwich hour angle about the Earth's axis.

    Args:
        vector:
            The inertial position

        hour_angle:
            The Greenwich sidereal hour angle in radians, e.g. from gast()

    Returns:
        CartesianVector
    """
    return spin(vector, EARTH_AXIS, -1 * hour_angle)


def greenwich_hour_angle(seconds_since_1970: float) -> float:
    """
    Greenwich hour angle from a count of UTC seconds since 1970-01-01T00:00:00, using
    a polynomial model of the Earth's rotation rate. Nutation is not applied.

    Args:
        seconds_since_1970:
            The instant, as seconds since the unix epoch

    Returns:
        The hour angle in radians, within [0, 2 * pi)
    """
    tday = float(int(seconds_since_1970 / SECONDS_PER_DAY))
    tsec = seconds_since_1970 - tday * SECONDS_PER_DAY

    tu = (tday + UNIX_EPOCH_J2000_DAYS) / DAYS_PER_CENTURY
    tfrac = tsec / SECONDS_PER_DAY

    c0, c1, c2, c3 = GMST_COEFFICIENTS
    gmst = c0 + c1 * tu + c2 * tu * tu + c3 * tu ** 3

    r0, r1, r2 = EARTH_ROTATION_COEFFICIENTS
    omega = r0 + r1 * tu + r2 * tu * tu

    gmst = math.fmod(gmst + omega * tfrac, SECONDS_PER_DAY)
    if gmst < 0.:
        gmst += SECONDS_PER_DAY

    return gmst / SECONDS_PER_DAY * 360. * DEGREES_TO_RADIANS


def rotate_eci_to_ecef(vector: VectorLike, seconds_since_1970: float) -> CartesianVector:
    """
    Rotate an Earth-centered inertial position into the Earth-fixed frame using
    greenwich_hour_angle().
    """
    gha = greenwich_hour_angle(seconds_since_1970)
    c, s = math.cos(gha), math.sin(gha)
    R = np.array([
        [c, s, 0.],
        [-s, c, 0.],
        [0., 0., 1.],
    ])
    return CartesianVector.from_numpy(R @ np.asarray(tuple(vector), dtype=float))
