"""
WGS84 ellipsoid constants and MGRS lettering alphabets.

All values are read-only module constants shared by the converters.
"""

import math

# Ellipsoid
EQUATORIAL_RADIUS = 6378137.0
POLAR_RADIUS = 6356752.314
ECCENTRICITY = math.sqrt(1 - (POLAR_RADIUS / EQUATORIAL_RADIUS) ** 2)
E1SQ = ECCENTRICITY * ECCENTRICITY / (1 - ECCENTRICITY * ECCENTRICITY)

# UTM scale factor on the central meridian
K0 = 0.9996

# One arc-second in radians, truncated as used by the forward series
SIN1 = 4.84814e-06

# Meridional arc coefficients
A0 = 6367449.146
B0 = 16038.42955
C0 = 16.83261333
D0 = 0.021984404
E0 = 0.000312705

# Rounded eccentricities used by the inverse series
INVERSE_ECCENTRICITY = 0.081819191
INVERSE_E1SQ = 0.006739497

FALSE_EASTING = 500000.0
NORTHING_OFFSET = 10_000_000.0
BLOCK_SIZE = 100000.0

# 100 km square column letters (A-Z without I, O)
COLUMN_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"

# 100 km square row letters (A-V without I, O)
ROW_LETTERS = "ABCDEFGHJKLMNPQRSTUV"

# Row lettering in even zones starts five letters further on
EVEN_ZONE_ROW_SHIFT = 5

# Sentinel returned when a row index falls outside ROW_LETTERS
INVALID_ROW_LETTER = "Z"
