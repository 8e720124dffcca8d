"""Sun position and sunlight phase result models."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Self

from sunlight_calc.exceptions import InvalidArgumentError


class _FieldEnum(str, Enum):
    """String enum whose members are selectable by value or member name."""

    @property
    def attribute(self) -> str:
        """Python attribute name of this field on the result record."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: str | Self) -> Self:
        """Resolve a member from itself, its camelCase value or snake_case name.

        Names are case sensitive: "solarNoon" and "solar_noon" match,
        "SolarNoon" does not.

        Raises:
            InvalidArgumentError: If the name is not recognized
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value in (member.value, member.attribute):
                    return member
        valid = ", ".join(m.value for m in cls)
        raise InvalidArgumentError(
            f"Unknown field name: {value!r}. Valid names: {valid}",
            argument="keep",
            value=value,
        )

    @classmethod
    def select(cls, keep: Iterable[str | Self] | None) -> tuple[Self, ...]:
        """Validate a keep selection and return it in canonical order.

        None selects every member. Duplicates are collapsed.
        """
        if keep is None:
            return tuple(cls)
        if isinstance(keep, str):
            keep = [keep]
        wanted = {cls.parse(v) for v in keep}
        return tuple(m for m in cls if m in wanted)


class SunPositionField(_FieldEnum):
    """Fields of a sun position record."""

    ALTITUDE = "altitude"
    AZIMUTH = "azimuth"


class SunlightPhase(_FieldEnum):
    """Named sunlight phases, in canonical output order."""

    SOLAR_NOON = "solarNoon"  # Sun at its highest position
    NADIR = "nadir"  # Sun at its lowest position
    SUNRISE = "sunrise"  # Top edge of the sun appears on the horizon
    SUNSET = "sunset"  # Sun disappears below the horizon
    SUNRISE_END = "sunriseEnd"  # Bottom edge of the sun touches the horizon
    SUNSET_START = "sunsetStart"
    DAWN = "dawn"  # Morning civil twilight starts
    DUSK = "dusk"  # Evening nautical twilight starts
    NAUTICAL_DAWN = "nauticalDawn"
    NAUTICAL_DUSK = "nauticalDusk"
    NIGHT_END = "nightEnd"  # Morning astronomical twilight starts
    NIGHT = "night"  # Dark enough for astronomical observations
    GOLDEN_HOUR_END = "goldenHourEnd"  # Morning golden hour ends
    GOLDEN_HOUR = "goldenHour"  # Evening golden hour starts


@dataclass(frozen=True)
class PhaseAltitude:
    """Sun altitude (degrees) that defines a morning/evening phase pair."""

    altitude_deg: float
    morning: SunlightPhase
    evening: SunlightPhase


# Sunrise/sunset use -0.833 degrees: 0.567 for refraction plus 0.266 for the
# solar semi-diameter.
PHASE_ALTITUDES: tuple[PhaseAltitude, ...] = (
    PhaseAltitude(-0.833, SunlightPhase.SUNRISE, SunlightPhase.SUNSET),
    PhaseAltitude(-0.3, SunlightPhase.SUNRISE_END, SunlightPhase.SUNSET_START),
    PhaseAltitude(-6, SunlightPhase.DAWN, SunlightPhase.DUSK),
    PhaseAltitude(-12, SunlightPhase.NAUTICAL_DAWN, SunlightPhase.NAUTICAL_DUSK),
    PhaseAltitude(-18, SunlightPhase.NIGHT_END, SunlightPhase.NIGHT),
    PhaseAltitude(6, SunlightPhase.GOLDEN_HOUR_END, SunlightPhase.GOLDEN_HOUR),
)


@dataclass(frozen=True)
class SunPosition:
    """Sun position at a specific time and location.

    Angles are in radians. Altitude is 0 at the horizon and pi/2 at the
    zenith. Azimuth is measured from south toward west in [-pi, pi), so 0 is
    south and 3*pi/4 is northwest. Fields left out of ``requested`` are None.
    """

    time: datetime
    latitude: float
    longitude: float
    requested: tuple[SunPositionField, ...]
    altitude: float | None = None
    azimuth: float | None = None

    @property
    def altitude_deg(self) -> float | None:
        """Altitude in degrees above the horizon (negative = below)."""
        if self.altitude is None:
            return None
        return math.degrees(self.altitude)

    @property
    def azimuth_deg(self) -> float | None:
        """Compass azimuth in degrees (0=N, 90=E, 180=S, 270=W)."""
        if self.azimuth is None:
            return None
        return (math.degrees(self.azimuth) + 180.0) % 360.0

    @property
    def is_day(self) -> bool | None:
        """Whether the sun's centre is above the horizon."""
        if self.altitude is None:
            return None
        return self.altitude > 0

    def as_dict(self) -> dict[str, float]:
        """Requested fields keyed by name, in canonical order."""
        return {f.value: getattr(self, f.attribute) for f in self.requested}


@dataclass(frozen=True)
class SunlightTimes:
    """Sunlight phase times for one date and location.

    A phase listed in ``requested`` whose value is None does not occur on
    this date at this latitude (polar day or night). A phase missing from
    ``requested`` was not computed; indexing it raises KeyError.
    """

    date: date
    latitude: float
    longitude: float
    timezone: str | None
    requested: tuple[SunlightPhase, ...]

    solar_noon: datetime | None = None
    nadir: datetime | None = None
    sunrise: datetime | None = None
    sunset: datetime | None = None
    sunrise_end: datetime | None = None
    sunset_start: datetime | None = None
    dawn: datetime | None = None
    dusk: datetime | None = None
    nautical_dawn: datetime | None = None
    nautical_dusk: datetime | None = None
    night_end: datetime | None = None
    night: datetime | None = None
    golden_hour_end: datetime | None = None
    golden_hour: datetime | None = None

    def is_computed(self, phase: str | SunlightPhase) -> bool:
        """Whether the phase was requested, whether or not it occurs."""
        return SunlightPhase.parse(phase) in self.requested

    def occurs(self, phase: str | SunlightPhase) -> bool:
        """Whether a requested phase happens on this date."""
        return self[phase] is not None

    def __getitem__(self, phase: str | SunlightPhase) -> datetime | None:
        member = SunlightPhase.parse(phase)
        if member not in self.requested:
            raise KeyError(f"Phase {member.value!r} was not computed")
        return getattr(self, member.attribute)

    def as_dict(self) -> dict[str, datetime | None]:
        """Requested phases keyed by camelCase name, in canonical order."""
        return {p.value: getattr(self, p.attribute) for p in self.requested}
