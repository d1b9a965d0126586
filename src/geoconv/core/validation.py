"""
Range validation layered on top of the pure converters.

The converters accept any finite input. Callers that want to reject
geographically meaningless values run these checks first, or use
:func:`validated_convert`.
"""

import logging
import math
from typing import Optional, Type

from geoconv.converters.constants import COLUMN_LETTERS, INVALID_ROW_LETTER, ROW_LETTERS
from geoconv.converters.graph import Coordinate, T, convert
from geoconv.core.config import settings
from geoconv.core.errors import GridLetterError, InvalidCoordinateRangeError
from geoconv.models.coordinates import (
    LATITUDE_BANDS,
    DecimalDegreesCoordinate,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
)

logger = logging.getLogger(__name__)

# UTM is only defined between these latitudes
UTM_MIN_LATITUDE = -80.0
UTM_MAX_LATITUDE = 84.0

MAX_NORTHING = 10_000_000.0
MAX_EASTING = 1_000_000.0
GRID_SQUARE_SIZE = 100000.0


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidCoordinateRangeError(f"{name} must be finite, got {value}", field=name, value=value)


def _check_range(name: str, value: float, low: float, high: float, upper_open: bool = False) -> None:
    _check_finite(name, value)
    above = value >= high if upper_open else value > high
    if value < low or above:
        bracket = ")" if upper_open else "]"
        raise InvalidCoordinateRangeError(
            f"{name} must be in [{low}, {high}{bracket}, got {value}",
            field=name,
            value=value,
        )


def _check_zone(zone: int) -> None:
    if not 1 <= zone <= 60:
        raise InvalidCoordinateRangeError(
            f"zone must be between 1 and 60, got {zone}", field="zone", value=zone
        )


def _check_band(band: str) -> None:
    if len(band) != 1 or band.upper() not in LATITUDE_BANDS:
        raise InvalidCoordinateRangeError(
            f"band must be one of {LATITUDE_BANDS}, got '{band}'", field="band", value=band
        )


def validate_decimal_degrees(
    dd: DecimalDegreesCoordinate, require_utm_envelope: bool = False
) -> None:
    """
    Validate a Decimal Degrees (or DMS) coordinate.

    Args:
        dd: Coordinate to check
        require_utm_envelope: Also require latitude within -80 to 84

    Raises:
        InvalidCoordinateRangeError: If any component is out of range
    """
    _check_range("latitude", dd.latitude, -90.0, 90.0)
    _check_range("longitude", dd.longitude, -180.0, 180.0)
    if require_utm_envelope:
        _check_range("latitude", dd.latitude, UTM_MIN_LATITUDE, UTM_MAX_LATITUDE)


def validate_utm(utm: UtmCoordinate) -> None:
    """
    Validate a UTM coordinate.

    Raises:
        InvalidCoordinateRangeError: If any component is out of range
    """
    _check_zone(utm.zone)
    _check_band(utm.band)
    _check_range("easting", utm.easting, 0.0, MAX_EASTING)
    _check_range("northing", utm.northing, 0.0, MAX_NORTHING, upper_open=True)


def validate_mgrs(mgrs: MgrsCoordinate) -> None:
    """
    Validate an MGRS coordinate.

    Raises:
        InvalidCoordinateRangeError: If any component is out of range
        GridLetterError: If a 100 km square letter is not a grid letter
    """
    _check_zone(mgrs.zone)
    _check_band(mgrs.band)
    if mgrs.grid_column_id.upper() not in COLUMN_LETTERS or len(mgrs.grid_column_id) != 1:
        raise GridLetterError(
            f"Invalid grid column letter '{mgrs.grid_column_id}'", letter=mgrs.grid_column_id
        )
    if mgrs.grid_row_id.upper() not in ROW_LETTERS or len(mgrs.grid_row_id) != 1:
        raise GridLetterError(f"Invalid grid row letter '{mgrs.grid_row_id}'", letter=mgrs.grid_row_id)
    _check_range("x", mgrs.x, 0.0, GRID_SQUARE_SIZE, upper_open=True)
    _check_range("y", mgrs.y, 0.0, GRID_SQUARE_SIZE, upper_open=True)


def validate(coordinate: Coordinate) -> None:
    """
    Validate any supported coordinate value.

    Raises:
        InvalidCoordinateRangeError: If any component is out of range
        TypeError: If the value is not a supported coordinate type
    """
    if isinstance(coordinate, (DecimalDegreesCoordinate, DmsCoordinate)):
        validate_decimal_degrees(DecimalDegreesCoordinate(coordinate.latitude, coordinate.longitude))
    elif isinstance(coordinate, UtmCoordinate):
        validate_utm(coordinate)
    elif isinstance(coordinate, MgrsCoordinate):
        validate_mgrs(coordinate)
    else:
        raise TypeError(f"Unsupported coordinate type: {type(coordinate).__name__}")


def validated_convert(
    coordinate: Coordinate, target: Type[T], strict: Optional[bool] = None
) -> T:
    """
    Convert a coordinate after checking its ranges.

    Args:
        coordinate: Any supported coordinate value
        target: Target coordinate class
        strict: Validate before converting; defaults to the configured
            ``strict_validation`` setting

    Returns:
        The converted coordinate

    Raises:
        InvalidCoordinateRangeError: If validation is on and the input is out of range
        GridLetterError: If the conversion produced the row-letter sentinel
    """
    if strict is None:
        strict = settings.strict_validation

    if strict:
        try:
            validate(coordinate)
        except InvalidCoordinateRangeError as e:
            logger.warning(f"Rejected {type(coordinate).__name__} {coordinate}: {e.message}")
            raise

    result = convert(coordinate, target)

    if isinstance(result, MgrsCoordinate) and result.grid_row_id == INVALID_ROW_LETTER:
        raise GridLetterError(
            f"Row letter could not be resolved for {coordinate}",
            letter=INVALID_ROW_LETTER,
            details={"source": str(coordinate)},
        )
    return result
