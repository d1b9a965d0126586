"""
UTM conversions.

This module implements the inverse Transverse Mercator projection from
UTM back to WGS84 latitude/longitude, and the MGRS 100 km square
lettering applied on top of a UTM coordinate.
"""

import logging
import math

from geoconv.converters.constants import (
    BLOCK_SIZE,
    COLUMN_LETTERS,
    EQUATORIAL_RADIUS,
    EVEN_ZONE_ROW_SHIFT,
    FALSE_EASTING,
    INVALID_ROW_LETTER,
    INVERSE_E1SQ,
    INVERSE_ECCENTRICITY,
    K0,
    NORTHING_OFFSET,
    ROW_LETTERS,
)
from geoconv.models.coordinates import (
    DecimalDegreesCoordinate,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
)

logger = logging.getLogger(__name__)

_E = INVERSE_ECCENTRICITY
_E2 = _E * _E

# Footpoint latitude series coefficients
_MU_DENOMINATOR = EQUATORIAL_RADIUS * (1 - _E2 / 4.0 - 3 * _E2 ** 2 / 64.0 - 5 * _E2 ** 3 / 256.0)
_EI = (1 - math.sqrt(1 - _E2)) / (1 + math.sqrt(1 - _E2))
_CA = 3 * _EI / 2 - 27 * _EI ** 3 / 32.0
_CB = 21 * _EI ** 2 / 16 - 55 * _EI ** 4 / 32
_CC = 151 * _EI ** 3 / 96
_CD = 1097 * _EI ** 4 / 512


def to_decimal_degrees(utm: UtmCoordinate) -> DecimalDegreesCoordinate:
    """
    Convert a UTM coordinate to Decimal Degrees.

    Bands below N are treated as southern hemisphere: the northing is
    measured back from the 10,000,000 m false northing and the resulting
    latitude is negated.

    Args:
        utm: UTM coordinate

    Returns:
        Coordinate in decimal degrees
    """
    southern = not utm.is_north_hemisphere
    northing = NORTHING_OFFSET - utm.northing if southern else utm.northing

    arc = northing / K0
    mu = arc / _MU_DENOMINATOR
    phi1 = (
        mu
        + _CA * math.sin(2 * mu)
        + _CB * math.sin(4 * mu)
        + _CC * math.sin(6 * mu)
        + _CD * math.sin(8 * mu)
    )

    sin_phi1 = math.sin(phi1)
    cos_phi1 = math.cos(phi1)
    tan_phi1 = math.tan(phi1)

    n0 = EQUATORIAL_RADIUS / math.sqrt(1 - (_E * sin_phi1) ** 2)
    r0 = EQUATORIAL_RADIUS * (1 - _E2) / (1 - (_E * sin_phi1) ** 2) ** 1.5

    a1 = FALSE_EASTING - utm.easting
    dd0 = a1 / (n0 * K0)
    t0 = tan_phi1 ** 2
    q0 = INVERSE_E1SQ * cos_phi1 ** 2

    # Latitude correction terms
    fact1 = n0 * tan_phi1 / r0
    fact2 = dd0 * dd0 / 2
    fact3 = (5 + 3 * t0 + 10 * q0 - 4 * q0 * q0 - 9 * INVERSE_E1SQ) * dd0 ** 4 / 24
    fact4 = (61 + 90 * t0 + 298 * q0 + 45 * t0 * t0 - 252 * INVERSE_E1SQ - 3 * q0 * q0) * dd0 ** 6 / 720

    # Longitude correction terms
    lof1 = dd0
    lof2 = (1 + 2 * t0 + q0) * dd0 ** 3 / 6.0
    lof3 = (5 - 2 * q0 + 28 * t0 - 3 * q0 ** 2 + 8 * INVERSE_E1SQ + 24 * t0 ** 2) * dd0 ** 5 / 120
    a2 = (lof1 - lof2 + lof3) / cos_phi1
    a3 = math.degrees(a2)

    latitude = math.degrees(phi1 - fact1 * (fact2 - fact3 + fact4))
    longitude = utm.central_meridian - a3

    if southern:
        latitude = -latitude

    return DecimalDegreesCoordinate(latitude=latitude, longitude=longitude)


def get_column_letter(zone: int, easting: float) -> str:
    """
    Get the 100 km square column letter for an easting.

    Zones cycle through three column sets (A-H, J-R, S-Z) of eight letters.

    Args:
        zone: UTM zone number
        easting: UTM easting in metres

    Returns:
        Column letter
    """
    index = int(math.floor(easting / BLOCK_SIZE)) - 1 + ((zone - 1) % 3) * 8
    return COLUMN_LETTERS[index % len(COLUMN_LETTERS)]


def get_row_letter(zone: int, northing: float) -> str:
    """
    Get the 100 km square row letter for a northing.

    Rows cycle every 2,000 km through A-V; even zones start five letters on.
    Returns the 'Z' sentinel if the computed index falls outside the row
    alphabet, which only happens for negative northings.

    Args:
        zone: UTM zone number
        northing: UTM northing in metres (southern values already offset)

    Returns:
        Row letter, or 'Z' if the index is out of range
    """
    row = math.floor(northing / BLOCK_SIZE)
    if zone % 2 == 0:
        row += EVEN_ZONE_ROW_SHIFT
    # fmod keeps the sign, so rows below zero hit the sentinel
    index = int(math.fmod(row, len(ROW_LETTERS)))
    if not 0 <= index < len(ROW_LETTERS):
        logger.error(
            f"Row letter index {index} out of range for zone {zone}, northing {northing}"
        )
        return INVALID_ROW_LETTER
    return ROW_LETTERS[index]


def to_mgrs(utm: UtmCoordinate) -> MgrsCoordinate:
    """
    Convert a UTM coordinate to MGRS.

    The residual easting/northing inside the 100 km square become the
    MGRS x/y offsets.

    Args:
        utm: UTM coordinate

    Returns:
        MGRS coordinate in the same zone and band
    """
    return MgrsCoordinate(
        zone=utm.zone,
        band=utm.band,
        grid_column_id=get_column_letter(utm.zone, utm.easting),
        grid_row_id=get_row_letter(utm.zone, utm.northing),
        x=utm.easting % BLOCK_SIZE,
        y=utm.northing % BLOCK_SIZE,
    )


def to_dms(utm: UtmCoordinate) -> DmsCoordinate:
    """Convert UTM to DMS via Decimal Degrees."""
    dd = to_decimal_degrees(utm)
    return DmsCoordinate(latitude=dd.latitude, longitude=dd.longitude)
