"""
Tests for coordinate value types.
"""

import dataclasses

import pytest

from geoconv.models.coordinates import (
    DecimalDegreesCoordinate,
    DmsAngle,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
    split_angle,
)


class TestSplitAngle:
    """Tests for splitting signed angles into DMS parts."""

    def test_positive_latitude(self) -> None:
        """Test a northern latitude splits into N parts."""
        angle = split_angle(34.265270233154297, "N", "S")

        assert angle.degrees == 34
        assert angle.minutes == 15
        assert angle.seconds == pytest.approx(54.9728, abs=1e-4)
        assert angle.hemisphere == "N"

    def test_negative_longitude(self) -> None:
        """Test a western longitude splits into W parts."""
        angle = split_angle(-110.00540924072266, "E", "W")

        assert angle.degrees == 110
        assert angle.minutes == 0
        assert angle.seconds == pytest.approx(19.4733, abs=1e-4)
        assert angle.hemisphere == "W"

    def test_fraction_below_one_degree(self) -> None:
        """Test a small negative angle keeps its hemisphere."""
        angle = split_angle(-0.5, "N", "S")
        assert angle == DmsAngle(0, 30, 0.0, "S")

    def test_zero_is_positive(self) -> None:
        """Test zero uses the positive hemisphere letter."""
        assert split_angle(0.0, "E", "W").hemisphere == "E"


class TestDmsAngle:
    """Tests for DmsAngle."""

    def test_to_decimal(self) -> None:
        """Test converting back to signed decimal degrees."""
        assert DmsAngle(33, 52, 7.68, "S").to_decimal() == pytest.approx(-33.8688, abs=1e-9)
        assert DmsAngle(151, 12, 33.48, "E").to_decimal() == pytest.approx(151.2093, abs=1e-9)

    def test_is_negative(self) -> None:
        """Test S and W are negative hemispheres."""
        assert DmsAngle(1, 0, 0.0, "S").is_negative
        assert DmsAngle(1, 0, 0.0, "W").is_negative
        assert not DmsAngle(1, 0, 0.0, "N").is_negative
        assert not DmsAngle(1, 0, 0.0, "E").is_negative

    def test_format(self) -> None:
        """Test default text rendering."""
        assert DmsAngle(34, 15, 54.9728, "N").format() == "34°15'54.973\"N"

    def test_format_pads_minutes_and_seconds(self) -> None:
        """Test single-digit minutes and seconds are zero padded."""
        assert DmsAngle(110, 0, 9.5, "W").format() == "110°00'09.500\"W"

    def test_format_whole_seconds(self) -> None:
        """Test zero seconds decimals renders whole seconds."""
        assert DmsAngle(110, 0, 9.4, "W").format(seconds_decimals=0) == "110°00'09\"W"

    def test_format_carries_rounded_seconds_into_minutes(self) -> None:
        """Test seconds rounding to 60 roll over into the next minute."""
        assert DmsAngle(20, 14, 59.9996, "E").format() == "20°15'00.000\"E"

    def test_format_carries_into_degrees(self) -> None:
        """Test a rollover at 59 minutes reaches the degrees."""
        assert DmsAngle(10, 59, 59.9996, "N").format() == "11°00'00.000\"N"
        assert DmsAngle(10, 59, 59.6, "N").format(seconds_decimals=0) == "11°00'00\"N"


class TestDecimalDegreesCoordinate:
    """Tests for DecimalDegreesCoordinate."""

    def test_to_tuple(self) -> None:
        """Test tuple form is (latitude, longitude)."""
        assert DecimalDegreesCoordinate(1.5, -2.5).to_tuple() == (1.5, -2.5)

    def test_str(self) -> None:
        """Test text rendering with six decimals."""
        assert str(DecimalDegreesCoordinate(1.5, -2.5)) == "1.500000, -2.500000"

    def test_frozen(self) -> None:
        """Test values cannot be reassigned."""
        coordinate = DecimalDegreesCoordinate(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            coordinate.latitude = 3.0  # type: ignore[misc]

    def test_no_validation_on_construction(self) -> None:
        """Test out-of-range values are accepted as plain data."""
        coordinate = DecimalDegreesCoordinate(123.0, 456.0)
        assert coordinate.latitude == 123.0


class TestDmsCoordinate:
    """Tests for DmsCoordinate."""

    def test_from_components(self) -> None:
        """Test building from sexagesimal parts."""
        coordinate = DmsCoordinate.from_components(33, 52, 7.68, "S", 151, 12, 33.48, "E")

        assert coordinate.latitude == pytest.approx(-33.8688, abs=1e-9)
        assert coordinate.longitude == pytest.approx(151.2093, abs=1e-9)

    def test_from_components_lower_case_hemisphere(self) -> None:
        """Test hemisphere letters are case-insensitive."""
        coordinate = DmsCoordinate.from_components(1, 0, 0.0, "s", 1, 0, 0.0, "w")
        assert coordinate.latitude == -1.0
        assert coordinate.longitude == -1.0

    def test_component_views(self) -> None:
        """Test derived DMS parts for each axis."""
        coordinate = DmsCoordinate(-33.8688, 151.2093)

        assert coordinate.latitude_dms.hemisphere == "S"
        assert coordinate.latitude_dms.degrees == 33
        assert coordinate.latitude_dms.minutes == 52
        assert coordinate.longitude_dms.hemisphere == "E"
        assert coordinate.longitude_dms.degrees == 151
        assert coordinate.longitude_dms.minutes == 12

    def test_str(self) -> None:
        """Test text rendering of both axes."""
        coordinate = DmsCoordinate(34.265270233154297, -110.00540924072266)
        assert str(coordinate) == "34°15'54.973\"N 110°00'19.473\"W"


class TestUtmCoordinate:
    """Tests for UtmCoordinate."""

    def test_hemisphere(self) -> None:
        """Test band N and above are northern."""
        assert UtmCoordinate(31, "N", 0.0, 0.0).is_north_hemisphere
        assert UtmCoordinate(31, "X", 0.0, 0.0).is_north_hemisphere
        assert not UtmCoordinate(31, "M", 0.0, 0.0).is_north_hemisphere
        assert not UtmCoordinate(31, "C", 0.0, 0.0).is_north_hemisphere
        assert not UtmCoordinate(31, "m", 0.0, 0.0).is_north_hemisphere

    @pytest.mark.parametrize("zone,meridian", [(1, -177.0), (12, -111.0), (31, 3.0), (60, 177.0)])
    def test_central_meridian(self, zone: int, meridian: float) -> None:
        """Test central meridians across the zone range."""
        assert UtmCoordinate(zone, "N", 0.0, 0.0).central_meridian == meridian

    @pytest.mark.parametrize("zone,band,code", [(12, "S", 32612), (56, "H", 32756), (31, "N", 32631), (31, "M", 32731)])
    def test_epsg_code(self, zone: int, band: str, code: int) -> None:
        """Test EPSG codes follow the hemisphere of the band."""
        assert UtmCoordinate(zone, band, 0.0, 0.0).epsg_code == code

    def test_str(self) -> None:
        """Test text rendering with truncated metres."""
        assert str(UtmCoordinate(12, "S", 591563.57, 3792016.8)) == "12S 591563 3792016"


class TestMgrsCoordinate:
    """Tests for MgrsCoordinate."""

    def test_identifiers(self) -> None:
        """Test grid zone designator and square id."""
        coordinate = MgrsCoordinate(12, "S", "W", "C", 91563.57, 92016.8)

        assert coordinate.grid_zone_designator == "12S"
        assert coordinate.square_id == "WC"

    def test_str_pads_offsets(self) -> None:
        """Test offsets are zero padded to five digits."""
        assert str(MgrsCoordinate(31, "N", "A", "A", 66021.4, 0.0)) == "31NAA6602100000"

    def test_equality(self) -> None:
        """Test value equality."""
        assert MgrsCoordinate(1, "C", "A", "B", 1.0, 2.0) == MgrsCoordinate(1, "C", "A", "B", 1.0, 2.0)
