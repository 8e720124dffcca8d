"""Domain models for sun calculations."""

from sunlight_calc.models.location import Coordinates, Location
from sunlight_calc.models.sun import (
    PHASE_ALTITUDES,
    PhaseAltitude,
    SunlightPhase,
    SunlightTimes,
    SunPosition,
    SunPositionField,
)

__all__ = [
    # Location
    "Coordinates",
    "Location",
    # Sun
    "PHASE_ALTITUDES",
    "PhaseAltitude",
    "SunlightPhase",
    "SunlightTimes",
    "SunPosition",
    "SunPositionField",
]
