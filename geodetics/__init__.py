
from geodetics._version import __version__  # noqa: F401
from geodetics.utils.logging import LOGGER
from geodetics.exceptions import GeodeticsError, InvalidEllipsoid, IterationLimitExceeded
from geodetics.ellipsoid import COSMIC_ELLIPSOID, Ellipsoid, WGS84
from geodetics.coordinates import (
    BearingResult, CartesianVector, CONVERGENCE_FAILURE, GeodeticPoint
)
from geodetics.conversion import to_cartesian, to_geodetic
from geodetics.sidereal import gast, julian_day, spin
from geodetics.geodesic import (
    bearing_between, destination, vincenty_direct, vincenty_inverse
)
from geodetics.time import UTCEpoch

__all__ = [
    'BearingResult',
    'CartesianVector',
    'CONVERGENCE_FAILURE',
    'COSMIC_ELLIPSOID',
    'Ellipsoid',
    'GeodeticPoint',
    'GeodeticsError',
    'InvalidEllipsoid',
    'IterationLimitExceeded',
    'UTCEpoch',
    'WGS84',
    'bearing_between',
    'destination',
    'gast',
    'julian_day',
    'spin',
    'to_cartesian',
    'to_geodetic',
    'vincenty_direct',
    'vincenty_inverse',
    'LOGGER',
]
