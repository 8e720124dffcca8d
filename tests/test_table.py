"""Tests for DataFrame rendering of bulk calculations."""

from datetime import date, datetime, timedelta

import pandas as pd
import pytest

from sunlight_calc.astronomy.table import sun_position_frame, sunlight_times_frame
from sunlight_calc.exceptions import InvalidArgumentError
from sunlight_calc.models.location import Coordinates


class TestSunlightTimesFrame:
    """Tests for sunlight_times_frame."""

    def test_columns_and_rows(self, sample_coordinates: Coordinates):
        dates = [date(2000, 7, 1) + timedelta(days=i) for i in range(3)]
        frame = sunlight_times_frame(
            dates, *sample_coordinates.to_tuple(), keep=["sunset", "sunrise"]
        )

        assert list(frame.columns) == ["date", "lat", "lon", "sunrise", "sunset"]
        assert len(frame) == 3
        assert list(frame["date"]) == dates
        assert pd.api.types.is_datetime64_any_dtype(frame["sunrise"])

    def test_reference_values(self, sample_coordinates: Coordinates):
        frame = sunlight_times_frame([date(2000, 7, 1)], *sample_coordinates.to_tuple())
        sunrise = frame.loc[0, "sunrise"].to_pydatetime()
        assert abs((sunrise - datetime(2000, 7, 1, 2, 57, 50)).total_seconds()) <= 3

    def test_absent_phases_are_nat(self, arctic_coordinates: Coordinates):
        frame = sunlight_times_frame(
            [date(2000, 6, 21), date(2000, 9, 21)],
            *arctic_coordinates.to_tuple(),
            keep=["sunrise"],
        )
        assert pd.isna(frame.loc[0, "sunrise"])
        assert not pd.isna(frame.loc[1, "sunrise"])

    def test_timezone_columns(self, sample_coordinates: Coordinates):
        frame = sunlight_times_frame(
            [date(2000, 1, 1), date(2000, 7, 1)],
            *sample_coordinates.to_tuple(),
            tz="Europe/Berlin",
            keep=["solarNoon"],
        )
        noon = frame["solarNoon"]
        assert str(noon.dt.tz) == "Europe/Berlin"
        assert noon.iloc[0].utcoffset() == timedelta(hours=1)
        assert noon.iloc[1].utcoffset() == timedelta(hours=2)

    def test_unknown_phase(self, sample_coordinates: Coordinates):
        with pytest.raises(InvalidArgumentError):
            sunlight_times_frame([date(2000, 7, 1)], *sample_coordinates.to_tuple(), keep=["dinner"])


class TestSunPositionFrame:
    """Tests for sun_position_frame."""

    def test_positions(self, sample_coordinates: Coordinates):
        times = [datetime(2000, 7, 1, h) for h in (0, 6, 12, 18)]
        frame = sun_position_frame(times, *sample_coordinates.to_tuple())

        assert list(frame.columns) == ["date", "lat", "lon", "altitude", "azimuth"]
        assert len(frame) == 4
        assert frame.loc[2, "altitude"] == pytest.approx(1.021444, abs=1e-5)
        assert frame["altitude"].idxmax() == 2

    def test_keep(self, sample_coordinates: Coordinates):
        frame = sun_position_frame(
            [datetime(2000, 7, 1, 12)], *sample_coordinates.to_tuple(), keep=["azimuth"]
        )
        assert list(frame.columns) == ["date", "lat", "lon", "azimuth"]
