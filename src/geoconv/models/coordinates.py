"""
Coordinate value types for the supported representations.

This module defines immutable value objects for Decimal Degrees, DMS,
UTM and MGRS coordinates on the WGS84 ellipsoid. None of them validate
their input on construction; range checks live in
:mod:`geoconv.core.validation`.
"""

import math
from dataclasses import dataclass
from typing import Tuple

# Latitude band letters from south (-80) to north (84), I and O omitted
LATITUDE_BANDS = "CDEFGHJKLMNPQRSTUVWX"


@dataclass(frozen=True)
class DmsAngle:
    """
    Sexagesimal split of a single signed angle.

    Attributes:
        degrees: Whole degrees (always non-negative)
        minutes: Whole minutes (0-59)
        seconds: Decimal seconds (0 to <60)
        hemisphere: One of 'N', 'S', 'E', 'W'
    """

    degrees: int
    minutes: int
    seconds: float
    hemisphere: str

    @property
    def is_negative(self) -> bool:
        """True for southern latitudes and western longitudes."""
        return self.hemisphere in ("S", "W")

    def to_decimal(self) -> float:
        """Convert back to signed decimal degrees."""
        value = self.degrees + self.minutes / 60.0 + self.seconds / 3600.0
        return -value if self.is_negative else value

    def format(self, seconds_decimals: int = 3) -> str:
        """
        Render as e.g. ``34°15'54.973"N``.

        Seconds are rounded to ``seconds_decimals`` first, and a value that
        rounds up to 60 carries into the minutes and degrees.
        """
        degrees, minutes = self.degrees, self.minutes
        seconds = round(self.seconds, seconds_decimals)
        if seconds >= 60.0:
            seconds -= 60.0
            minutes += 1
        if minutes >= 60:
            minutes -= 60
            degrees += 1

        width = seconds_decimals + 3 if seconds_decimals else 2
        return (
            f"{degrees}°{minutes:02d}'"
            f"{seconds:0{width}.{seconds_decimals}f}\""
            f"{self.hemisphere}"
        )

    def __str__(self) -> str:
        return self.format()


def split_angle(value: float, positive: str, negative: str) -> DmsAngle:
    """
    Split a signed decimal angle into degrees, minutes and seconds.

    Args:
        value: Signed angle in decimal degrees
        positive: Hemisphere letter for non-negative values ('N' or 'E')
        negative: Hemisphere letter for negative values ('S' or 'W')

    Returns:
        DmsAngle for the absolute value of the angle
    """
    hemisphere = negative if value < 0 else positive
    magnitude = abs(value)
    degrees = int(math.floor(magnitude))
    remainder = (magnitude - degrees) * 60.0
    minutes = int(math.floor(remainder))
    seconds = (remainder - minutes) * 60.0
    return DmsAngle(degrees, minutes, seconds, hemisphere)


@dataclass(frozen=True)
class DecimalDegreesCoordinate:
    """
    A point expressed as signed decimal degrees.

    Attributes:
        latitude: Latitude in degrees (nominally -90 to 90, north positive)
        longitude: Longitude in degrees (nominally -180 to 180, east positive)
    """

    latitude: float
    longitude: float

    def to_tuple(self) -> Tuple[float, float]:
        """Return (latitude, longitude)."""
        return (self.latitude, self.longitude)

    def __str__(self) -> str:
        return f"{self.latitude:.6f}, {self.longitude:.6f}"


@dataclass(frozen=True)
class DmsCoordinate:
    """
    A point in Degrees-Minutes-Seconds form.

    The coordinate is stored as signed decimal degrees; the sexagesimal
    parts are derived views computed on access.

    Attributes:
        latitude: Latitude in signed decimal degrees
        longitude: Longitude in signed decimal degrees
    """

    latitude: float
    longitude: float

    @classmethod
    def from_components(
        cls,
        lat_degrees: int,
        lat_minutes: int,
        lat_seconds: float,
        lat_hemisphere: str,
        lon_degrees: int,
        lon_minutes: int,
        lon_seconds: float,
        lon_hemisphere: str,
    ) -> "DmsCoordinate":
        """
        Build a DMS coordinate from its sexagesimal parts.

        Hemisphere letters are case-insensitive; 'S' and 'W' make the
        corresponding angle negative.
        """
        latitude = DmsAngle(
            lat_degrees, lat_minutes, lat_seconds, lat_hemisphere.upper()
        ).to_decimal()
        longitude = DmsAngle(
            lon_degrees, lon_minutes, lon_seconds, lon_hemisphere.upper()
        ).to_decimal()
        return cls(latitude=latitude, longitude=longitude)

    @property
    def latitude_dms(self) -> DmsAngle:
        """Latitude split into degrees, minutes, seconds and N/S."""
        return split_angle(self.latitude, "N", "S")

    @property
    def longitude_dms(self) -> DmsAngle:
        """Longitude split into degrees, minutes, seconds and E/W."""
        return split_angle(self.longitude, "E", "W")

    def format(self, seconds_decimals: int = 3) -> str:
        """Render both angles, latitude first."""
        return (
            f"{self.latitude_dms.format(seconds_decimals)} "
            f"{self.longitude_dms.format(seconds_decimals)}"
        )

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True)
class UtmCoordinate:
    """
    A point in Universal Transverse Mercator form.

    Attributes:
        zone: Longitude zone number (1-60)
        band: MGRS latitude band letter (C-X, omitting I and O)
        easting: Metres east, 500000 at the zone's central meridian
        northing: Metres north; southern hemisphere values carry the
            10,000,000 m false northing
    """

    zone: int
    band: str
    easting: float
    northing: float

    @property
    def is_north_hemisphere(self) -> bool:
        """Bands N and above lie north of the equator."""
        return self.band.upper() >= "N"

    @property
    def central_meridian(self) -> float:
        """Longitude of the zone's central meridian in degrees."""
        return 6.0 * self.zone - 183.0

    @property
    def grid_zone_designator(self) -> str:
        """Zone number followed by band letter, e.g. ``12S``."""
        return f"{self.zone}{self.band}"

    @property
    def epsg_code(self) -> int:
        """WGS84 / UTM EPSG code (32601-32660 north, 32701-32760 south)."""
        return (32600 if self.is_north_hemisphere else 32700) + self.zone

    def __str__(self) -> str:
        return f"{self.grid_zone_designator} {int(self.easting)} {int(self.northing)}"


@dataclass(frozen=True)
class MgrsCoordinate:
    """
    A point in Military Grid Reference System form.

    Attributes:
        zone: UTM zone number (1-60)
        band: Latitude band letter, shared with UTM
        grid_column_id: Column letter of the 100 km square
        grid_row_id: Row letter of the 100 km square
        x: Easting within the 100 km square in metres (0 to <100000)
        y: Northing within the 100 km square in metres (0 to <100000)
    """

    zone: int
    band: str
    grid_column_id: str
    grid_row_id: str
    x: float
    y: float

    @property
    def grid_zone_designator(self) -> str:
        """Zone number followed by band letter, e.g. ``12S``."""
        return f"{self.zone}{self.band}"

    @property
    def square_id(self) -> str:
        """The two-letter 100 km square identifier."""
        return f"{self.grid_column_id}{self.grid_row_id}"

    def __str__(self) -> str:
        return f"{self.grid_zone_designator}{self.square_id}{int(self.x):05d}{int(self.y):05d}"
