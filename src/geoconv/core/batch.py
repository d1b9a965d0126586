"""
Batch conversion helpers.

Converts many points at once for bulk geospatial processing, taking and
returning numpy arrays.
"""

import logging
from typing import List, Sequence, Tuple, Union

import numpy as np

from geoconv.converters import decimal_degrees as dd_converter
from geoconv.converters import utm as utm_converter
from geoconv.models.coordinates import DecimalDegreesCoordinate, UtmCoordinate
from geoconv.utils.logging import PerformanceTimer, log_performance

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray]


@log_performance(threshold_ms=100)
def to_utm_batch(
    latitudes: ArrayLike, longitudes: ArrayLike
) -> Tuple[np.ndarray, List[str], np.ndarray, np.ndarray]:
    """
    Project arrays of latitudes and longitudes to UTM.

    Args:
        latitudes: Latitudes in decimal degrees
        longitudes: Longitudes in decimal degrees

    Returns:
        Tuple of (zones, bands, eastings, northings)

    Raises:
        ValueError: If the input arrays differ in length
    """
    lat_arr = np.asarray(latitudes, dtype=float)
    lon_arr = np.asarray(longitudes, dtype=float)

    if lat_arr.shape != lon_arr.shape:
        raise ValueError("latitudes and longitudes must have same length")

    count = lat_arr.size
    zones = np.empty(count, dtype=int)
    eastings = np.empty(count, dtype=float)
    northings = np.empty(count, dtype=float)
    bands: List[str] = []

    for i, (lat, lon) in enumerate(zip(lat_arr.ravel(), lon_arr.ravel())):
        utm = dd_converter.to_utm(DecimalDegreesCoordinate(float(lat), float(lon)))
        zones[i] = utm.zone
        bands.append(utm.band)
        eastings[i] = utm.easting
        northings[i] = utm.northing

    logger.debug(f"Projected {count} points to UTM")
    return zones, bands, eastings, northings


def to_decimal_degrees_batch(
    zones: ArrayLike,
    bands: Sequence[str],
    eastings: ArrayLike,
    northings: ArrayLike,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Convert arrays of UTM components back to latitude/longitude.

    Args:
        zones: UTM zone numbers
        bands: Latitude band letters
        eastings: Eastings in metres
        northings: Northings in metres

    Returns:
        Tuple of (latitudes, longitudes)

    Raises:
        ValueError: If the inputs differ in length
    """
    zone_arr = np.asarray(zones, dtype=int)
    east_arr = np.asarray(eastings, dtype=float)
    north_arr = np.asarray(northings, dtype=float)

    count = zone_arr.size
    if not (len(bands) == east_arr.size == north_arr.size == count):
        raise ValueError("zones, bands, eastings and northings must have same length")

    latitudes = np.empty(count, dtype=float)
    longitudes = np.empty(count, dtype=float)

    with PerformanceTimer(f"utm_to_decimal_degrees_batch[{count}]", threshold_ms=100):
        for i in range(count):
            dd = utm_converter.to_decimal_degrees(
                UtmCoordinate(
                    zone=int(zone_arr[i]),
                    band=bands[i],
                    easting=float(east_arr[i]),
                    northing=float(north_arr[i]),
                )
            )
            latitudes[i] = dd.latitude
            longitudes[i] = dd.longitude

    return latitudes, longitudes
