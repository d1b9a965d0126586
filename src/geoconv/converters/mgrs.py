"""
MGRS conversions.

Reconstructs a UTM coordinate from an MGRS grid reference. The column
letter fixes the 100 km easting digit directly; the row letter repeats
every 2,000 km, so the 2,000 km cycle it belongs to is resolved from the
latitude band and the zone parity using ROW_CYCLES.
"""

import logging
from typing import Dict, NamedTuple, Optional, Tuple

from geoconv.converters import utm as utm_converter
from geoconv.converters.constants import (
    BLOCK_SIZE,
    COLUMN_LETTERS,
    EVEN_ZONE_ROW_SHIFT,
    ROW_LETTERS,
)
from geoconv.models.coordinates import (
    DecimalDegreesCoordinate,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
)

logger = logging.getLogger(__name__)

# Number of row letters in one 2,000 km cycle
ROWS_PER_CYCLE = len(ROW_LETTERS)


class RowCycle(NamedTuple):
    """
    Cycle resolution for one latitude band in one zone parity.

    Row letters at or after ``threshold`` lie in ``low`` cycle; letters
    before it have wrapped into ``high``. Bands that sit inside a single
    cycle have no threshold and use ``low`` for every letter.
    """

    threshold: Optional[str]
    low: int
    high: int


def _single(cycle: int) -> RowCycle:
    return RowCycle(None, cycle, cycle)


def _split(threshold: str, cycle: int) -> RowCycle:
    return RowCycle(threshold, cycle, cycle + 1)


# band -> (odd zone, even zone)
ROW_CYCLES: Dict[str, Tuple[RowCycle, RowCycle]] = {
    "C": (_split("G", 0), _split("M", 0)),
    "D": (_single(1), _single(1)),
    "E": (_single(1), _split("J", 1)),
    "F": (_split("N", 1), _single(2)),
    "G": (_single(2), _split("G", 2)),
    "H": (_split("L", 2), _single(3)),
    "J": (_single(3), _single(3)),
    "K": (_split("J", 3), _split("P", 3)),
    "L": (_single(4), _single(4)),
    "M": (_single(4), _split("L", 4)),
    "N": (_single(0), _single(0)),
    "P": (_single(0), _split("J", 0)),
    "Q": (_split("N", 0), _single(1)),
    "R": (_single(1), _split("G", 1)),
    "S": (_split("L", 1), _single(2)),
    "T": (_single(2), _single(2)),
    "U": (_split("J", 2), _split("P", 2)),
    "V": (_single(3), _single(3)),
    "W": (_single(3), _split("L", 3)),
    "X": (_split("S", 3), _single(4)),
}


def get_row_cycle(band: str, row_letter: str, zone: int) -> int:
    """
    Resolve which 2,000 km cycle a row letter belongs to.

    Args:
        band: Latitude band letter
        row_letter: 100 km square row letter
        zone: UTM zone number

    Returns:
        Zero-based cycle number

    Raises:
        KeyError: If the band letter is not a latitude band
    """
    entry = ROW_CYCLES[band][1 if zone % 2 == 0 else 0]
    if entry.threshold is None or row_letter >= entry.threshold:
        return entry.low
    return entry.high


def get_row_number(band: str, row_letter: str, zone: int) -> int:
    """
    Get the number of whole 100 km rows north of the UTM origin.

    This inverts the row lettering of :func:`geoconv.converters.utm.get_row_letter`.

    Args:
        band: Latitude band letter
        row_letter: 100 km square row letter
        zone: UTM zone number

    Returns:
        ``floor(northing / 100000)`` of the square

    Raises:
        ValueError: If the row letter is not in A-V (omitting I and O)
    """
    index = ROW_LETTERS.index(row_letter)
    shift = EVEN_ZONE_ROW_SHIFT if zone % 2 == 0 else 0
    return get_row_cycle(band, row_letter, zone) * ROWS_PER_CYCLE + index - shift


def get_column_number(column_letter: str) -> int:
    """
    Get the 100 km easting digit (1-8) for a column letter.

    Raises:
        ValueError: If the column letter is not in A-Z (omitting I and O)
    """
    return COLUMN_LETTERS.index(column_letter) % 8 + 1


def to_utm(mgrs: MgrsCoordinate) -> UtmCoordinate:
    """
    Convert an MGRS coordinate to UTM.

    Args:
        mgrs: MGRS coordinate

    Returns:
        UTM coordinate in the same zone and band
    """
    band = mgrs.band.upper()
    column = mgrs.grid_column_id.upper()
    row = mgrs.grid_row_id.upper()

    easting = get_column_number(column) * BLOCK_SIZE + mgrs.x
    northing = get_row_number(band, row, mgrs.zone) * BLOCK_SIZE + mgrs.y

    logger.debug(f"Resolved {mgrs} to easting={easting}, northing={northing}")
    return UtmCoordinate(zone=mgrs.zone, band=band, easting=easting, northing=northing)


def to_decimal_degrees(mgrs: MgrsCoordinate) -> DecimalDegreesCoordinate:
    """Convert MGRS to Decimal Degrees via UTM."""
    return utm_converter.to_decimal_degrees(to_utm(mgrs))


def to_dms(mgrs: MgrsCoordinate) -> DmsCoordinate:
    """Convert MGRS to DMS via UTM and Decimal Degrees."""
    return utm_converter.to_dms(to_utm(mgrs))
