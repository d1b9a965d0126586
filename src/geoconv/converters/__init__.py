"""
Coordinate converters.

One module per representation:
- decimal_degrees: forward UTM projection, DD -> MGRS/DMS
- utm: inverse projection and MGRS lettering
- mgrs: 100 km grid reconstruction back to UTM
- dms: DMS <-> DD re-expression
"""

from geoconv.converters import decimal_degrees, dms, mgrs, utm
from geoconv.converters.graph import CONVERSIONS, convert

__all__ = [
    "CONVERSIONS",
    "convert",
    "decimal_degrees",
    "dms",
    "mgrs",
    "utm",
]
