"""
Decimal Degrees conversions.

This module implements the forward Transverse Mercator projection from
WGS84 latitude/longitude to UTM, using the fixed-order series
approximation (meridional arc plus K1-K5 power-series coefficients in
the longitude difference). MGRS and DMS are reached by composition.
"""

import bisect
import math
from typing import Tuple

from geoconv.converters import utm as utm_converter
from geoconv.converters.constants import (
    A0,
    B0,
    C0,
    D0,
    E0,
    E1SQ,
    ECCENTRICITY,
    EQUATORIAL_RADIUS,
    FALSE_EASTING,
    K0,
    NORTHING_OFFSET,
    SIN1,
)
from geoconv.models.coordinates import (
    LATITUDE_BANDS,
    DecimalDegreesCoordinate,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
)

# Southern edge of each latitude band, paired index-for-index with LATITUDE_BANDS.
# X is the only 12 degree band (72-84).
BAND_LOWER_BOUNDS: Tuple[int, ...] = tuple(range(-80, 80, 8))


def get_zone_number(longitude: float) -> int:
    """
    Compute the UTM zone number for a longitude.

    Longitudes exactly on a zone edge belong to the zone to the east.
    No clamping is applied, so 180 yields 61.

    Args:
        longitude: Longitude in decimal degrees

    Returns:
        Zone number
    """
    if longitude < 0.0:
        return int(math.floor((180.0 + longitude) / 6.0)) + 1
    return int(math.floor(longitude / 6.0)) + 31


def get_latitude_band(latitude: float) -> str:
    """
    Look up the MGRS latitude band letter for a latitude.

    Each band covers 8 degrees starting with C at -80; X covers 72 to 84.
    Latitudes south of -80 clamp to C and north of 84 clamp to X.

    Args:
        latitude: Latitude in decimal degrees

    Returns:
        Band letter (C-X, omitting I and O)
    """
    index = bisect.bisect_right(BAND_LOWER_BOUNDS, latitude) - 1
    index = min(max(index, 0), len(LATITUDE_BANDS) - 1)
    return LATITUDE_BANDS[index]


def _projection_terms(latitude: float, longitude: float, zone: int) -> Tuple[float, ...]:
    """Return (p, K1, K2, K3, K4, K5) for a point projected into ``zone``."""
    lat = math.radians(latitude)
    sin_lat = math.sin(lat)
    cos_lat = math.cos(lat)
    tan_lat = math.tan(lat)

    # Radius of curvature in the prime vertical
    nu = EQUATORIAL_RADIUS / math.sqrt(1 - (ECCENTRICITY * sin_lat) ** 2)

    zone_cm = 6 * zone - 183
    # Longitude difference in units of 10000 arc-seconds
    p = (longitude - zone_cm) * 3600 / 10000

    # Meridional arc
    s = (
        A0 * lat
        - B0 * math.sin(2 * lat)
        + C0 * math.sin(4 * lat)
        - D0 * math.sin(6 * lat)
        + E0 * math.sin(8 * lat)
    )

    k1 = s * K0
    k2 = nu * sin_lat * cos_lat * SIN1 ** 2 * K0 * 1e8 / 2
    k3 = (
        (SIN1 ** 4 * nu * sin_lat * cos_lat ** 3 / 24)
        * (5 - tan_lat ** 2 + 9 * E1SQ * cos_lat ** 2 + 4 * E1SQ ** 2 * cos_lat ** 4)
        * K0
        * 1e16
    )
    k4 = nu * cos_lat * SIN1 * K0 * 1e4
    k5 = (
        (SIN1 * cos_lat) ** 3
        * (nu / 6)
        * (1 - tan_lat ** 2 + E1SQ * cos_lat ** 2)
        * K0
        * 1e12
    )
    return p, k1, k2, k3, k4, k5


def to_utm(dd: DecimalDegreesCoordinate) -> UtmCoordinate:
    """
    Project a Decimal Degrees coordinate to UTM.

    Any finite latitude/longitude produces a result; outside the UTM
    envelope (-80 to 84 latitude) the values are numerically defined but
    not geographically meaningful.

    Args:
        dd: Coordinate in decimal degrees

    Returns:
        UTM coordinate; southern latitudes carry the 10,000,000 m offset
    """
    zone = get_zone_number(dd.longitude)
    band = get_latitude_band(dd.latitude)
    p, k1, k2, k3, k4, k5 = _projection_terms(dd.latitude, dd.longitude, zone)

    easting = FALSE_EASTING + k4 * p + k5 * p ** 3
    northing = k1 + k2 * p ** 2 + k3 * p ** 4
    if dd.latitude < 0.0:
        northing += NORTHING_OFFSET

    return UtmCoordinate(zone=zone, band=band, easting=easting, northing=northing)


def to_mgrs(dd: DecimalDegreesCoordinate) -> MgrsCoordinate:
    """Convert Decimal Degrees to MGRS via UTM."""
    return utm_converter.to_mgrs(to_utm(dd))


def to_dms(dd: DecimalDegreesCoordinate) -> DmsCoordinate:
    """Re-express Decimal Degrees as a DMS coordinate."""
    return DmsCoordinate(latitude=dd.latitude, longitude=dd.longitude)
