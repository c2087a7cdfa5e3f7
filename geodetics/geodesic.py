# geodetics/geodesic.py
"""
Geodesic calculations on an ellipsoid using Vincenty's iterative method.

Both solutions follow the U.S. National Geodetic Survey programs "inverse" (INVER1)
and "forward" (DIRCT1): Vincenty's modification of Rainsford's method with Helmert's
elliptical terms, effective in any azimuth and at any distance short of antipodal.
"""

__all__ = [
    'bearing_between', 'destination', 'vincenty_direct', 'vincenty_inverse',
]

import math

from geodetics._const import (
    DEGREES_TO_RADIANS, EPS, RADIANS_TO_DEGREES, VINCENTY_MAX_ITERATIONS
)
from geodetics.coordinates import BearingResult, GeodeticPoint
from geodetics.ellipsoid import Ellipsoid, WGS84
from geodetics.exceptions import IterationLimitExceeded


def _normalize_azimuth(degrees: float) -> float:
    """Bring an azimuth from [-180, 360] into [0, 360)"""
    if degrees < 0.:
        degrees += 360.
    if degrees >= 360.:
        degrees -= 360.
    return degrees


# -------------------------------------------------------------------------
# Inverse Problem
# -------------------------------------------------------------------------

def vincenty_inverse(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    ellipsoid: Ellipsoid = WGS84,
) -> BearingResult:
    """
    Computes the distance, azimuth and back azimuth between two points.

    Neither point may be a geographic pole. Near-antipodal points may fail to
    converge, in which case an error is raised rather than returning a wrong answer.

    Args:
        lat1, lon1:
            The first point, in degrees

        lat2, lon2:
            The second point, in degrees

        ellipsoid: (Ellipsoid) (Default WGS84)
            The reference ellipsoid, with axes in meters

    Returns:
        BearingResult, with the distance in kilometers and azimuths in degrees
        clockwise from north

    Raises:
        IterationLimitExceeded: if the longitude difference fails to converge
    """
    if lat1 == lat2 and lon1 == lon2:
        return BearingResult(0., 0., 0.)

    a = ellipsoid.a
    f = ellipsoid.f
    r = 1.0 - f

    glat1 = DEGREES_TO_RADIANS * lat1
    glat2 = DEGREES_TO_RADIANS * lat2
    glon1 = DEGREES_TO_RADIANS * lon1
    glon2 = DEGREES_TO_RADIANS * lon2

    # Reduced latitudes
    tu1 = r * math.sin(glat1) / math.cos(glat1)
    tu2 = r * math.sin(glat2) / math.cos(glat2)
    cu1 = 1. / math.sqrt(tu1 * tu1 + 1.)
    su1 = cu1 * tu1
    cu2 = 1. / math.sqrt(tu2 * tu2 + 1.)
    s = cu1 * cu2
    baz = s * tu2
    faz = baz * tu1

    x = glon2 - glon1
    for _ in range(VINCENTY_MAX_ITERATIONS):
        sx = math.sin(x)
        cx = math.cos(x)
        tu1 = cu2 * sx
        tu2 = baz - su1 * cu2 * cx
        sy = math.sqrt(tu1 * tu1 + tu2 * tu2)
        if sy == 0.:
            # Distinct inputs naming the same place, e.g. a pole at two longitudes
            return BearingResult(0., 0., 0.)

        cy = s * cx + faz
        y = math.atan2(sy, cy)
        sa = s * sx / sy
        c2a = -sa * sa + 1.
        cz = faz + faz
        if c2a > 0.:
            cz = -cz / c2a + cy

        e = cz * cz * 2. - 1.
        c = ((-3. * c2a + 4.) * f + 4.) * c2a * f / 16.
        d = x
        x = ((e * cy * c + cz) * sy * c + y) * sa
        x = (1. - c) * x * f + glon2 - glon1

        if abs(d - x) <= EPS:
            break
    else:
        raise IterationLimitExceeded(
            'inverse', (lat1, lon1, lat2, lon2), VINCENTY_MAX_ITERATIONS
        )

    faz = math.atan2(tu1, tu2)
    baz = math.atan2(cu1 * sx, baz * cx - su1 * cu2) + math.pi

    x = math.sqrt((1. / r / r - 1.) * c2a + 1.) + 1.
    x = (x - 2.) / x
    c = 1. - x
    c = (x * x / 4. + 1.) / c
    d = (0.375 * x * x - 1.) * x
    x = e * cy
    s = 1. - e - e
    s = ((((sy * sy * 4. - 3.) * s * cz * d / 6. - x) * d / 4. + cz) * sy * d + y) * c * a * r

    return BearingResult(
        _normalize_azimuth(faz * RADIANS_TO_DEGREES),
        _normalize_azimuth(baz * RADIANS_TO_DEGREES),
        s / 1000.0,  # meters to km
    )


def bearing_between(
    point1: GeodeticPoint,
    point2: GeodeticPoint,
    ellipsoid: Ellipsoid = WGS84
) -> BearingResult:
    """Convenience wrapper around vincenty_inverse for GeodeticPoints"""
    return vincenty_inverse(
        point1.latitude, point1.longitude, point2.latitude, point2.longitude, ellipsoid
    )


# -------------------------------------------------------------------------
# Direct Problem
# -------------------------------------------------------------------------

def vincenty_direct(
    lat1: float,
    lon1: float,
    azimuth: float,
    distance: float,
    ellipsoid: Ellipsoid = WGS84,
) -> GeodeticPoint:
    """
    Calculate a position given an azimuth and distance from another point.

    Args:
        lat1, lon1:
            The starting point, in degrees

        azimuth:
            The forward azimuth, in degrees clockwise from north. Any value is
            accepted and brought into [0, 360).

        distance:
            The distance to travel, in kilometers

        ellipsoid: (Ellipsoid) (Default WGS84)
            The reference ellipsoid, with axes in meters

    Returns:
        GeodeticPoint, with longitude in [-180, 180]

    Raises:
        IterationLimitExceeded: if the arc length fails to converge
    """
    if distance == 0:
        return GeodeticPoint(lat1, lon1, _bounded=False)

    a = ellipsoid.a
    f = ellipsoid.f
    r = 1.0 - f

    faz = _normalize_azimuth(azimuth % 360.) * DEGREES_TO_RADIANS
    glat1 = lat1 * DEGREES_TO_RADIANS
    glon1 = lon1 * DEGREES_TO_RADIANS
    s = distance * 1000.  # km to meters

    tu = r * math.sin(glat1) / math.cos(glat1)
    sf = math.sin(faz)
    cf = math.cos(faz)
    baz = 0.
    if cf != 0:
        baz = math.atan2(tu, cf) * 2

    cu = 1. / math.sqrt(tu * tu + 1.)
    su = tu * cu
    sa = cu * sf
    c2a = -sa * sa + 1.
    x = math.sqrt((1. / r / r - 1.) * c2a + 1.) + 1.
    x = (x - 2.) / x
    c = 1. - x
    c = (x * x / 4. + 1) / c
    d = (0.375 * x * x - 1.) * x

    tu = s / r / a / c
    y = tu
    for _ in range(VINCENTY_MAX_ITERATIONS):
        sy = math.sin(y)
        cy = math.cos(y)
        cz = math.cos(baz + y)
        e = cz * cz * 2. - 1.
        c = y
        x = e * cy
        y = e + e - 1.
        y = (((sy * sy * 4. - 3.) * y * cz * d / 6. + x) * d / 4. - cz) * sy * d + tu

        if abs(y - c) <= EPS:
            break
    else:
        raise IterationLimitExceeded(
            'direct', (lat1, lon1, azimuth, distance), VINCENTY_MAX_ITERATIONS
        )

    baz = cu * cy * cf - su * sy
    c = r * math.sqrt(sa * sa + baz * baz)
    d = su * cy + cu * sy * cf
    glat2 = math.atan2(d, c)

    c = cu * cy - su * sy * cf
    x = math.atan2(sy * sf, c)
    c = ((-3. * c2a + 4.) * f + 4.) * c2a * f / 16.
    d = ((e * cy * c + cz) * sy * c + y) * sa
    glon2 = glon1 + x - (1. - c) * d * f

    return GeodeticPoint(glat2 * RADIANS_TO_DEGREES, glon2 * RADIANS_TO_DEGREES)


def destination(
    start: GeodeticPoint,
    azimuth: float,
    distance: float,
    ellipsoid: Ellipsoid = WGS84,
) -> GeodeticPoint:
    """Convenience wrapper around vincenty_direct for a GeodeticPoint"""
    return vincenty_direct(start.latitude, start.longitude, azimuth, distance, ellipsoid)
