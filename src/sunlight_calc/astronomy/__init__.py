"""Astronomical calculations for sun position and sunlight phases."""

from sunlight_calc.astronomy.calculator import (
    AstronomyCalculator,
    get_sun_position,
    get_sunlight_times,
    get_sunlight_times_series,
    get_sun_altitude_time,
)
from sunlight_calc.astronomy.table import sun_position_frame, sunlight_times_frame

__all__ = [
    "AstronomyCalculator",
    "get_sun_position",
    "get_sunlight_times",
    "get_sunlight_times_series",
    "get_sun_altitude_time",
    "sun_position_frame",
    "sunlight_times_frame",
]
