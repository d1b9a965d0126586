"""
Conversion graph dispatch.

Maps every (source type, target type) pair onto the converter function
that handles it, so callers can convert without picking a module.
"""

from typing import Callable, Dict, Tuple, Type, TypeVar, Union

from geoconv.converters import decimal_degrees, dms, mgrs, utm
from geoconv.models.coordinates import (
    DecimalDegreesCoordinate,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
)

Coordinate = Union[DecimalDegreesCoordinate, DmsCoordinate, UtmCoordinate, MgrsCoordinate]

T = TypeVar("T", DecimalDegreesCoordinate, DmsCoordinate, UtmCoordinate, MgrsCoordinate)

CONVERSIONS: Dict[Tuple[type, type], Callable[..., Coordinate]] = {
    (DecimalDegreesCoordinate, UtmCoordinate): decimal_degrees.to_utm,
    (DecimalDegreesCoordinate, MgrsCoordinate): decimal_degrees.to_mgrs,
    (DecimalDegreesCoordinate, DmsCoordinate): decimal_degrees.to_dms,
    (UtmCoordinate, DecimalDegreesCoordinate): utm.to_decimal_degrees,
    (UtmCoordinate, MgrsCoordinate): utm.to_mgrs,
    (UtmCoordinate, DmsCoordinate): utm.to_dms,
    (MgrsCoordinate, UtmCoordinate): mgrs.to_utm,
    (MgrsCoordinate, DecimalDegreesCoordinate): mgrs.to_decimal_degrees,
    (MgrsCoordinate, DmsCoordinate): mgrs.to_dms,
    (DmsCoordinate, DecimalDegreesCoordinate): dms.to_decimal_degrees,
    (DmsCoordinate, UtmCoordinate): dms.to_utm,
    (DmsCoordinate, MgrsCoordinate): dms.to_mgrs,
}


def convert(coordinate: Coordinate, target: Type[T]) -> T:
    """
    Convert a coordinate to another representation.

    Converting to the coordinate's own type returns it unchanged.

    Args:
        coordinate: Any supported coordinate value
        target: Target coordinate class

    Returns:
        The coordinate expressed as ``target``

    Raises:
        TypeError: If either type is not a supported coordinate class
    """
    source = type(coordinate)
    if source is target and source in {key[0] for key in CONVERSIONS}:
        return coordinate
    try:
        func = CONVERSIONS[(source, target)]
    except KeyError:
        raise TypeError(
            f"No conversion from {source.__name__} to {getattr(target, '__name__', target)}"
        ) from None
    return func(coordinate)
