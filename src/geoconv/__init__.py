"""
geoconv - WGS84 coordinate conversion between Decimal Degrees, DMS, UTM and MGRS.

Each representation has a converter module under ``geoconv.converters``;
``convert`` dispatches any coordinate value to any other representation.
"""

from geoconv.converters import convert
from geoconv.models.coordinates import (
    DecimalDegreesCoordinate,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
)

__version__ = "0.1.0"

__all__ = [
    "DecimalDegreesCoordinate",
    "DmsCoordinate",
    "MgrsCoordinate",
    "UtmCoordinate",
    "convert",
]
