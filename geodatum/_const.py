"""
Constants declarations for geodatum
"""

import math

# Angle conversion
ARCSEC_TO_RAD = math.pi / 180 / 3600
RAD_TO_ARCSEC = 1 / ARCSEC_TO_RAD
PPM = 1e-6

# Gauss mid-latitude convergence, 1e-5 arc-second (radians)
EPSILON4 = 1e-5 * ARCSEC_TO_RAD

# Geocentric -> geodetic
XYZ_TOLERANCE = 1e-12
XYZ_MAX_ITERATIONS = 10

# Meridian arc inversion (footpoint latitude)
FOOTPOINT_TOLERANCE = 1e-14
FOOTPOINT_MAX_ITERATIONS = 10

# Geodesic solvers
VINCENTY_TOLERANCE = 1e-12
VINCENTY_MAX_ITERATIONS = 100
BESSEL_TOLERANCE = 1e-13
BESSEL_MAX_ITERATIONS = 100
GAUSS_MAX_ITERATIONS = 100
GAUSS_NOMINAL_DISTANCE = 200_000.  # meters; mid-latitude series accuracy degrades beyond

# Transverse Mercator limits
TM_MAX_LATITUDE = math.radians(89.99)
TM_MAX_DELTA_LONGITUDE = math.radians(9.)
TM_NOMINAL_DELTA_LONGITUDE = math.radians(3.5)

# Grid systems
GK_FALSE_EASTING = 500_000.
GK_ZONE_PREFIX = 1_000_000.
UTM_SCALE_FACTOR = 0.9996
UTM_FALSE_EASTING = 500_000.
UTM_FALSE_NORTHING_SOUTH = 10_000_000.
UTM_MIN_LATITUDE = math.radians(-80.)
UTM_MAX_LATITUDE = math.radians(84.)
