"""
DMS conversions.

A DMS coordinate stores signed decimal degrees, so converting to and from
Decimal Degrees is a value-level identity. UTM and MGRS are reached
through the Decimal Degrees converter.
"""

from geoconv.converters import decimal_degrees as dd_converter
from geoconv.models.coordinates import (
    DecimalDegreesCoordinate,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
)


def to_decimal_degrees(dms: DmsCoordinate) -> DecimalDegreesCoordinate:
    """Convert DMS to Decimal Degrees."""
    return DecimalDegreesCoordinate(latitude=dms.latitude, longitude=dms.longitude)


def from_decimal_degrees(dd: DecimalDegreesCoordinate) -> DmsCoordinate:
    """Convert Decimal Degrees to DMS."""
    return dd_converter.to_dms(dd)


def to_utm(dms: DmsCoordinate) -> UtmCoordinate:
    """Convert DMS to UTM via Decimal Degrees."""
    return dd_converter.to_utm(to_decimal_degrees(dms))


def to_mgrs(dms: DmsCoordinate) -> MgrsCoordinate:
    """Convert DMS to MGRS via Decimal Degrees and UTM."""
    return dd_converter.to_mgrs(to_decimal_degrees(dms))
