"""
Text notations for grid coordinates.

Formats and parses MGRS strings (``12SWC9156392016``), their spaced
USNG form (``12S WC 91563 92016``) and plain UTM strings
(``12S 591563 3792016``), picks references for bounding boxes and
renders DMS text.
"""

import logging
import math
import re
from typing import Optional

from geoconv.core.config import settings
from geoconv.core.errors import CoordinateParseError
from geoconv.converters import decimal_degrees as dd_converter
from geoconv.models.coordinates import (
    DecimalDegreesCoordinate,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
)

logger = logging.getLogger(__name__)

MAX_PRECISION = 5

# Spherical radius used to size bounding boxes
MEAN_EARTH_RADIUS = 6371000.0
BBOX_EDGE_LATITUDE = 89.9
BBOX_EDGE_LONGITUDE = 179.9

MGRS_PATTERN = re.compile(
    r"^(?P<zone>\d{1,2})"
    r"(?P<band>[CDEFGHJKLMNPQRSTUVWX])"
    r"(?P<column>[ABCDEFGHJKLMNPQRSTUVWXYZ])"
    r"(?P<row>[ABCDEFGHJKLMNPQRSTUV])"
    r"(?P<digits>(?:\d\d){0,5})$"
)

UTM_PATTERN = re.compile(
    r"^(?P<zone>\d{1,2})\s*"
    r"(?P<band>[CDEFGHJKLMNPQRSTUVWX])\s+"
    r"(?P<easting>\d+(?:\.\d*)?)\s+"
    r"(?P<northing>\d+(?:\.\d*)?)$"
)


def normalize_longitude(longitude: float) -> float:
    """
    Wrap a longitude into the range [-180, 180].

    Args:
        longitude: Longitude in decimal degrees

    Returns:
        Equivalent longitude in [-180, 180]
    """
    if -180.0 <= longitude <= 180.0:
        return longitude
    wrapped = (longitude + 180.0) % 360.0 - 180.0
    # Positive multiples of 180 stay on the eastern edge
    if wrapped == -180.0 and longitude > 0:
        return 180.0
    return wrapped


def _resolve_precision(precision: Optional[int]) -> int:
    if precision is None:
        return settings.default_mgrs_precision
    return min(max(precision, 0), MAX_PRECISION)


def _truncate(value: float, precision: int) -> str:
    if precision == 0:
        return ""
    digits = int(value) // 10 ** (MAX_PRECISION - precision)
    return f"{digits:0{precision}d}"


def format_mgrs(mgrs: MgrsCoordinate, precision: Optional[int] = None) -> str:
    """
    Render an MGRS coordinate without spaces.

    Offsets are truncated, not rounded, to the requested number of digits.

    Args:
        mgrs: MGRS coordinate
        precision: Digits per axis (0-5); defaults to the configured precision

    Returns:
        MGRS string such as ``12SWC9156392016``
    """
    digits = _resolve_precision(precision)
    return (
        f"{mgrs.grid_zone_designator}{mgrs.square_id}"
        f"{_truncate(mgrs.x, digits)}{_truncate(mgrs.y, digits)}"
    )


def format_usng(mgrs: MgrsCoordinate, precision: Optional[int] = None) -> str:
    """
    Render an MGRS coordinate in spaced USNG style.

    Args:
        mgrs: MGRS coordinate
        precision: Digits per axis (0-5); defaults to the configured precision

    Returns:
        String such as ``12S WC 91563 92016``
    """
    digits = _resolve_precision(precision)
    parts = [mgrs.grid_zone_designator, mgrs.square_id]
    if digits:
        parts.append(_truncate(mgrs.x, digits))
        parts.append(_truncate(mgrs.y, digits))
    return " ".join(parts)


def dd_to_mgrs_string(dd: DecimalDegreesCoordinate, precision: Optional[int] = None) -> str:
    """
    Convert a Decimal Degrees coordinate straight to MGRS text.

    Longitudes outside [-180, 180] are wrapped first.
    """
    wrapped = DecimalDegreesCoordinate(dd.latitude, normalize_longitude(dd.longitude))
    return format_mgrs(dd_converter.to_mgrs(wrapped), precision)


def _great_circle(delta_lat: float, delta_lon: float, cos_product: float) -> float:
    a = math.sin(delta_lat / 2) ** 2 + cos_product * math.sin(delta_lon / 2) ** 2
    return MEAN_EARTH_RADIUS * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def _digits_for_extent(distance: float) -> Optional[int]:
    """Digits per axis for a box of the given size; None means zone only."""
    if distance > 100000:
        return None
    for digits, limit in enumerate((10000, 1000, 100, 10, 1)):
        if distance > limit:
            return digits
    return MAX_PRECISION


def bbox_to_mgrs(north: float, south: float, east: float, west: float) -> str:
    """
    Pick an MGRS reference that best describes a bounding box.

    The reference is taken at the centre of the box. Its precision
    follows the larger of the box's north-south and east-west extents:
    boxes over 100 km get the grid zone designator only, over 10 km the
    100 km square, and each further factor of ten one more digit per
    axis, down to five digits for boxes of 1 m or less.

    Args:
        north: Northern edge latitude
        south: Southern edge latitude
        east: Eastern edge longitude
        west: Western edge longitude

    Returns:
        MGRS string such as ``12S``, ``12SWC`` or ``12SWC9192``
    """
    latitude = (north + south) / 2
    longitude = (east + west) / 2

    # A box straddling the antimeridian averages to 0
    if longitude == 0 and abs(east) > 90 and abs(west) > 90:
        longitude = 180.0
    longitude = min(max(longitude, -BBOX_EDGE_LONGITUDE), BBOX_EDGE_LONGITUDE)
    latitude = min(max(latitude, -BBOX_EDGE_LATITUDE), BBOX_EDGE_LATITUDE)

    north_rad = math.radians(north)
    south_rad = math.radians(south)
    height = _great_circle(south_rad - north_rad, 0.0, 0.0)
    length = _great_circle(
        0.0, math.radians(west - east), math.cos(north_rad) * math.cos(south_rad)
    )
    extent = max(height, length)

    mgrs = dd_converter.to_mgrs(DecimalDegreesCoordinate(latitude, longitude))
    digits = _digits_for_extent(extent)
    logger.debug(f"Bounding box extent {extent:.1f} m uses precision {digits}")
    if digits is None:
        return mgrs.grid_zone_designator
    return format_mgrs(mgrs, digits)


def format_dms(dms: DmsCoordinate, seconds_decimals: Optional[int] = None) -> str:
    """
    Render a DMS coordinate, latitude first.

    Args:
        dms: DMS coordinate
        seconds_decimals: Decimal places for seconds; defaults to the
            configured ``dms_seconds_decimals``

    Returns:
        String such as ``34°15'54.973"N 110°00'19.473"W``
    """
    if seconds_decimals is None:
        seconds_decimals = settings.dms_seconds_decimals
    return dms.format(max(seconds_decimals, 0))


def _clean(text: str) -> str:
    return text.upper().replace("%20", "").replace(" ", "").strip()


def is_mgrs(text: str) -> bool:
    """
    Check whether a string is a well-formed MGRS/USNG reference.

    A grid zone designator alone (``12S``) is not accepted; the 100 km
    square letters are required.
    """
    if not text:
        return False
    cleaned = _clean(text)
    match = MGRS_PATTERN.match(cleaned)
    return match is not None and 1 <= int(match.group("zone")) <= 60


def parse_mgrs(text: str, center: bool = False) -> MgrsCoordinate:
    """
    Parse an MGRS or USNG string.

    Case and spaces are ignored. Fewer than five digits per axis are
    scaled to metres, so ``12SWC9192`` gives x=91000, y=92000.

    Args:
        text: MGRS or USNG reference
        center: Return the centre of the square the reference names
            instead of its south-west corner (``12SWC9192`` then gives
            x=91500, y=92500)

    Returns:
        Parsed MGRS coordinate

    Raises:
        CoordinateParseError: If the text is not a valid reference
    """
    cleaned = _clean(text or "")
    match = MGRS_PATTERN.match(cleaned)
    if match is None:
        raise CoordinateParseError(f"Not a valid MGRS reference: '{text}'", text=text, notation="MGRS")

    zone = int(match.group("zone"))
    if not 1 <= zone <= 60:
        raise CoordinateParseError(
            f"MGRS zone must be between 1 and 60, got {zone}", text=text, notation="MGRS"
        )

    digits = match.group("digits")
    precision = len(digits) // 2
    scale = 10 ** (MAX_PRECISION - precision)
    x = float(int(digits[:precision]) * scale) if precision else 0.0
    y = float(int(digits[precision:]) * scale) if precision else 0.0
    if center:
        x += scale / 2
        y += scale / 2

    logger.debug(f"Parsed MGRS '{text}' with precision {precision}")
    return MgrsCoordinate(
        zone=zone,
        band=match.group("band"),
        grid_column_id=match.group("column"),
        grid_row_id=match.group("row"),
        x=x,
        y=y,
    )


def parse_utm(text: str) -> UtmCoordinate:
    """
    Parse a UTM string of the form ``12S 591563 3792016``.

    Args:
        text: UTM reference (zone, band letter, easting, northing)

    Raises:
        CoordinateParseError: If the text is not a valid UTM reference
    """
    match = UTM_PATTERN.match((text or "").strip().upper())
    if match is None:
        raise CoordinateParseError(f"Not a valid UTM reference: '{text}'", text=text, notation="UTM")

    zone = int(match.group("zone"))
    if not 1 <= zone <= 60:
        raise CoordinateParseError(
            f"UTM zone must be between 1 and 60, got {zone}", text=text, notation="UTM"
        )

    return UtmCoordinate(
        zone=zone,
        band=match.group("band"),
        easting=float(match.group("easting")),
        northing=float(match.group("northing")),
    )
