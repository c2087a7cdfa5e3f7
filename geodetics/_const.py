"""
Constants declarations for geodetics
"""

import math

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Major axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_B = (1 - WGS84_F) * WGS84_A

# COSMIC occultation products work in kilometers
COSMIC_A = 6378.1370
COSMIC_B = 6356.7523142

DEGREES_TO_RADIANS = math.radians(1.0)
RADIANS_TO_DEGREES = math.degrees(1.0)

# Truncated pi used by historical occultation products
LEGACY_PI = 3.1415926

# Cartesian -> geodetic iteration
GEODETIC_MAX_ITERATIONS = 10
LATITUDE_TOLERANCE = 1.e-11  # radians
HEIGHT_TOLERANCE = 1.e-5  # ellipsoid units
SENTINEL_VALUE = -999.0

# Vincenty iteration
EPS = 0.5e-13
VINCENTY_MAX_ITERATIONS = 1000

# Sidereal time
SECONDS_PER_DAY = 86400.0
SIDEREAL_RATE = 1.0027379093
J2000_JULIAN_DAY = 2451545.0
DAYS_PER_CENTURY = 36525.0
GMST_COEFFICIENTS = (24110.548410, 8640184.812866, 0.093104, -6.2e-6)
GREGORIAN_REFORM = (1582, 10, 15)

# Seconds-since-1970 hour angle model
UNIX_EPOCH_J2000_DAYS = -10957.5
EARTH_ROTATION_COEFFICIENTS = (86636.55536790872, 5.098097e-6, -5.09e-10)
