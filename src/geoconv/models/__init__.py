"""
Coordinate value types.
"""

from .coordinates import (
    LATITUDE_BANDS,
    DecimalDegreesCoordinate,
    DmsAngle,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
    split_angle,
)

__all__ = [
    "LATITUDE_BANDS",
    "DecimalDegreesCoordinate",
    "DmsAngle",
    "DmsCoordinate",
    "MgrsCoordinate",
    "UtmCoordinate",
    "split_angle",
]
