"""
Tests for the Decimal Degrees converter (forward UTM projection).
"""

import pytest
from pyproj import Transformer

from geoconv.converters import decimal_degrees, utm
from geoconv.models.coordinates import (
    DecimalDegreesCoordinate,
    DmsCoordinate,
    MgrsCoordinate,
    UtmCoordinate,
)


class TestZoneNumber:
    """Tests for UTM zone computation."""

    def test_zone_east_of_prime_meridian(self) -> None:
        """Test positive longitude just east of 0 is zone 31."""
        assert decimal_degrees.get_zone_number(0.0001) == 31

    def test_zone_west_of_prime_meridian(self) -> None:
        """Test negative longitude just west of 0 is zone 30."""
        assert decimal_degrees.get_zone_number(-0.0001) == 30

    def test_zone_exactly_on_prime_meridian(self) -> None:
        """Test 0.0 uses the eastern formula."""
        assert decimal_degrees.get_zone_number(0.0) == 31

    def test_zone_on_interior_boundary(self) -> None:
        """Test a zone edge belongs to the zone to the east."""
        assert decimal_degrees.get_zone_number(6.0) == 32
        assert decimal_degrees.get_zone_number(5.9999) == 31
        assert decimal_degrees.get_zone_number(-6.0) == 30
        assert decimal_degrees.get_zone_number(-6.0001) == 29

    def test_zone_extremes(self) -> None:
        """Test zones at the antimeridian."""
        assert decimal_degrees.get_zone_number(-180.0) == 1
        assert decimal_degrees.get_zone_number(179.9999) == 60

    @pytest.mark.parametrize(
        "longitude,expected",
        [
            (-0.1278, 30),  # London
            (-74.0060, 18),  # New York
            (151.2093, 56),  # Sydney
            (139.6503, 54),  # Tokyo
            (-43.1729, 23),  # Rio de Janeiro
        ],
    )
    def test_zone_for_cities(self, longitude: float, expected: int) -> None:
        """Test zone numbers for well-known cities."""
        assert decimal_degrees.get_zone_number(longitude) == expected


class TestLatitudeBand:
    """Tests for latitude band lookup."""

    @pytest.mark.parametrize(
        "latitude,expected",
        [
            (0.0, "N"),
            (8.0, "P"),
            (-80.0, "C"),
            (84.0, "X"),
            (72.0, "X"),
            (-0.0001, "M"),
            (7.9999, "N"),
            (-72.0, "D"),
            (-72.0001, "C"),
            (71.9999, "W"),
            (36.0, "S"),
            (51.0, "U"),
        ],
    )
    def test_band_edges(self, latitude: float, expected: str) -> None:
        """Test band letters at and around band edges."""
        assert decimal_degrees.get_latitude_band(latitude) == expected

    def test_band_clamps_outside_envelope(self) -> None:
        """Test latitudes beyond -80/84 clamp to the end bands."""
        assert decimal_degrees.get_latitude_band(-85.0) == "C"
        assert decimal_degrees.get_latitude_band(-90.0) == "C"
        assert decimal_degrees.get_latitude_band(84.5) == "X"
        assert decimal_degrees.get_latitude_band(90.0) == "X"

    def test_every_band_reachable(self) -> None:
        """Test each of the 20 bands is produced by its bin midpoint."""
        bands = [decimal_degrees.get_latitude_band(-76.0 + 8 * i) for i in range(20)]
        assert "".join(bands) == "CDEFGHJKLMNPQRSTUVWX"


class TestToUTM:
    """Tests for DD -> UTM projection."""

    def test_reference_point(self) -> None:
        """Test the reference point in Arizona against frozen values."""
        dd = DecimalDegreesCoordinate(34.265270233154297, -110.00540924072266)
        result = decimal_degrees.to_utm(dd)

        assert result.zone == 12
        assert result.band == "S"
        assert result.is_north_hemisphere is True
        assert result.easting == pytest.approx(591563.6, abs=1.0)
        assert result.northing == pytest.approx(3792016.8, abs=1.0)

    def test_origin_of_zone_31(self) -> None:
        """Test the equator/prime meridian intersection."""
        result = decimal_degrees.to_utm(DecimalDegreesCoordinate(0.0, 0.0))

        assert result.zone == 31
        assert result.band == "N"
        assert result.easting == pytest.approx(166021.4, abs=1.0)
        assert result.northing == pytest.approx(0.0, abs=1e-6)

    def test_central_meridian_easting(self) -> None:
        """Test points on the central meridian have the false easting."""
        result = decimal_degrees.to_utm(DecimalDegreesCoordinate(45.0, 3.0))
        assert result.easting == pytest.approx(500000.0, abs=1e-6)

    def test_southern_hemisphere_offset(self) -> None:
        """Test southern latitudes carry the false northing."""
        result = decimal_degrees.to_utm(DecimalDegreesCoordinate(-33.8688, 151.2093))

        assert result.zone == 56
        assert result.band == "H"
        assert result.is_north_hemisphere is False
        assert 6_000_000 < result.northing < 6_400_000

    def test_just_south_of_equator(self) -> None:
        """Test a point just south of the equator sits just below 10,000,000."""
        result = decimal_degrees.to_utm(DecimalDegreesCoordinate(-0.0001, 3.0))
        assert result.band == "M"
        assert 9_999_900 < result.northing < 10_000_000

    def test_out_of_envelope_still_produces_result(self) -> None:
        """Test no error is raised outside the UTM envelope."""
        result = decimal_degrees.to_utm(DecimalDegreesCoordinate(89.0, 10.0))
        assert result.band == "X"
        assert result.zone == 32

    @pytest.mark.parametrize(
        "latitude,longitude",
        [
            (51.5074, -0.1278),
            (40.7128, -74.0060),
            (-33.8688, 151.2093),
            (35.6762, 139.6503),
            (-22.9068, -43.1729),
            (34.265270233154297, -110.00540924072266),
            (0.5, 3.0),
            (45.0, 5.999),
            (-45.0, 0.001),
            (78.0, 15.0),
            (-79.5, -70.0),
            (83.9, 100.0),
        ],
    )
    def test_matches_pyproj(self, latitude: float, longitude: float) -> None:
        """Test the series projection agrees with PROJ within a metre."""
        result = decimal_degrees.to_utm(DecimalDegreesCoordinate(latitude, longitude))
        transformer = Transformer.from_crs("EPSG:4326", f"EPSG:{result.epsg_code}", always_xy=True)
        easting, northing = transformer.transform(longitude, latitude)

        assert result.easting == pytest.approx(easting, abs=1.0)
        assert result.northing == pytest.approx(northing, abs=1.0)


class TestRoundTrip:
    """Tests for DD -> UTM -> DD round trips."""

    @pytest.mark.parametrize("latitude", [-80.0, -72.0, -55.5, -31.2, -8.0, -0.0001, 0.0, 0.0001, 12.3, 38.9, 56.0, 71.9, 72.0, 84.0])
    @pytest.mark.parametrize("longitude", [-180.0, -177.0, -110.0054, -74.006, -3.0001, -0.0001, 0.0, 2.9999, 5.9999, 91.7, 151.2093, 179.9999])
    def test_round_trip(self, latitude: float, longitude: float) -> None:
        """Test projecting and inverting returns the original point."""
        dd = DecimalDegreesCoordinate(latitude, longitude)
        back = utm.to_decimal_degrees(decimal_degrees.to_utm(dd))

        assert back.latitude == pytest.approx(latitude, abs=1e-5)
        assert back.longitude == pytest.approx(longitude, abs=1e-5)


class TestComposition:
    """Tests for DD -> MGRS and DD -> DMS."""

    def test_to_mgrs(self) -> None:
        """Test DD -> MGRS goes through UTM."""
        dd = DecimalDegreesCoordinate(34.265270233154297, -110.00540924072266)
        result = decimal_degrees.to_mgrs(dd)

        assert isinstance(result, MgrsCoordinate)
        assert result.zone == 12
        assert result.band == "S"
        assert result.grid_column_id == "W"
        assert result.grid_row_id == "C"
        assert result == utm.to_mgrs(decimal_degrees.to_utm(dd))

    def test_to_dms(self) -> None:
        """Test DD -> DMS keeps the same signed values."""
        dd = DecimalDegreesCoordinate(-33.8688, 151.2093)
        result = decimal_degrees.to_dms(dd)

        assert result == DmsCoordinate(-33.8688, 151.2093)

    def test_result_types(self) -> None:
        """Test the forward projection returns a UTM value object."""
        assert isinstance(decimal_degrees.to_utm(DecimalDegreesCoordinate(1.0, 1.0)), UtmCoordinate)
