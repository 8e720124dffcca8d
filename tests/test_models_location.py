"""Tests for location models."""

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from sunlight_calc.models.location import Coordinates, Location, resolve_timezone


class TestCoordinates:
    """Tests for the Coordinates model."""

    def test_valid_coordinates(self):
        """Test creating valid coordinates."""
        coords = Coordinates(latitude=54, longitude=9)
        assert coords.latitude == 54
        assert coords.longitude == 9

    def test_boundary_values(self):
        """Test boundary latitude/longitude values."""
        north = Coordinates(latitude=90, longitude=0)
        assert north.latitude == 90

        south = Coordinates(latitude=-90, longitude=0)
        assert south.latitude == -90

        # Date line
        east = Coordinates(latitude=0, longitude=180)
        west = Coordinates(latitude=0, longitude=-180)
        assert east.longitude == 180
        assert west.longitude == -180

    def test_invalid_latitude(self):
        """Test that invalid latitude raises error."""
        with pytest.raises(ValueError):
            Coordinates(latitude=91, longitude=0)

        with pytest.raises(ValueError):
            Coordinates(latitude=-91, longitude=0)

    def test_invalid_longitude(self):
        """Test that invalid longitude raises error."""
        with pytest.raises(ValueError):
            Coordinates(latitude=0, longitude=181)

        with pytest.raises(ValueError):
            Coordinates(latitude=0, longitude=-181)

    def test_coordinates_are_immutable(self):
        """Coordinates cannot be changed after construction."""
        coords = Coordinates(latitude=54, longitude=9)
        with pytest.raises(ValidationError):
            coords.latitude = 10

    def test_from_string(self):
        """Test parsing coordinates from a string."""
        coords = Coordinates.from_string("54.5,9.25")
        assert coords.latitude == pytest.approx(54.5)
        assert coords.longitude == pytest.approx(9.25)

    def test_from_string_southern_hemisphere(self):
        """Test parsing coordinates in southern hemisphere."""
        coords = Coordinates.from_string("-33.8688,151.2093")
        assert coords.latitude == pytest.approx(-33.8688)
        assert coords.longitude == pytest.approx(151.2093)

    def test_from_string_with_spaces_and_signs(self):
        """Test parsing coordinates with spaces and explicit plus signs."""
        coords = Coordinates.from_string("+69.6492 , +18.9553")
        assert coords.latitude == pytest.approx(69.6492)
        assert coords.longitude == pytest.approx(18.9553)

    def test_from_string_invalid_format(self):
        """Test that invalid format raises error."""
        with pytest.raises(ValueError, match="Invalid coordinate format"):
            Coordinates.from_string("not,valid")

        with pytest.raises(ValueError):
            Coordinates.from_string("54")  # Missing longitude

    def test_from_string_out_of_range(self):
        """Well-formed strings are still range checked."""
        with pytest.raises(ValueError):
            Coordinates.from_string("95,9")

    def test_str_representation(self):
        """Test string representation of coordinates."""
        coords = Coordinates(latitude=54.0, longitude=9.5)
        assert str(coords) == "54.0,9.5"

    def test_to_tuple(self):
        """Test converting to tuple."""
        coords = Coordinates(latitude=54, longitude=9)
        assert coords.to_tuple() == (54, 9)


class TestLocation:
    """Tests for the Location model."""

    def test_location_with_timezone(self, sample_location: Location):
        """Test creating location with a timezone."""
        assert sample_location.timezone == "Europe/Berlin"
        assert sample_location.get_tzinfo() == ZoneInfo("Europe/Berlin")

    def test_location_without_timezone(self, sample_coordinates: Coordinates):
        """Location timezone is optional."""
        loc = Location(coordinates=sample_coordinates)
        assert loc.timezone is None
        assert loc.get_tzinfo() is None

    def test_unknown_timezone_rejected(self, sample_coordinates: Coordinates):
        """Unknown IANA names fail validation."""
        with pytest.raises(ValueError, match="Unknown timezone"):
            Location(coordinates=sample_coordinates, timezone="Mars/Olympus_Mons")

    def test_from_coordinates(self):
        """Test creating location from coordinate values."""
        loc = Location.from_coordinates(54, 9, timezone="Europe/Berlin")
        assert loc.coordinates.latitude == 54
        assert loc.timezone == "Europe/Berlin"

    def test_from_string(self):
        """Test creating location from coordinate string."""
        loc = Location.from_string("54,9", timezone="UTC")
        assert loc.coordinates.longitude == pytest.approx(9)
        assert loc.timezone == "UTC"

    def test_display_name_with_name(self, sample_location: Location):
        """Test display name returns custom name."""
        assert sample_location.display_name() == "Schleswig-Holstein"

    def test_display_name_with_coordinates(self, sample_coordinates: Coordinates):
        """Test display name falls back to coordinates."""
        loc = Location(coordinates=sample_coordinates)
        assert "54" in loc.display_name()


class TestResolveTimezone:
    """Tests for timezone name resolution."""

    def test_none_passes_through(self):
        assert resolve_timezone(None) is None

    def test_tzinfo_passes_through(self):
        tz = ZoneInfo("Asia/Tokyo")
        assert resolve_timezone(tz) is tz

    def test_name_resolves(self):
        assert resolve_timezone("Europe/Berlin") == ZoneInfo("Europe/Berlin")

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown timezone"):
            resolve_timezone("Nowhere/Special")
