"""Sun position and sunlight phase times (sunrise, twilight, golden hour)."""

from sunlight_calc.astronomy import (
    AstronomyCalculator,
    get_sun_altitude_time,
    get_sun_position,
    get_sunlight_times,
    get_sunlight_times_series,
    sun_position_frame,
    sunlight_times_frame,
)
from sunlight_calc.exceptions import InvalidArgumentError, SunlightCalcError
from sunlight_calc.models import (
    Coordinates,
    Location,
    SunlightPhase,
    SunlightTimes,
    SunPosition,
    SunPositionField,
)

__version__ = "0.1.0"

__all__ = [
    "AstronomyCalculator",
    "Coordinates",
    "InvalidArgumentError",
    "Location",
    "SunlightCalcError",
    "SunlightPhase",
    "SunlightTimes",
    "SunPosition",
    "SunPositionField",
    "get_sun_altitude_time",
    "get_sun_position",
    "get_sunlight_times",
    "get_sunlight_times_series",
    "sun_position_frame",
    "sunlight_times_frame",
]
