"""Sun position and sunlight phase calculations.

This module provides:
- Sun position (altitude, azimuth) for an instant and location
- The 14 named sunlight phases (solar noon, nadir, sunrise/sunset,
  civil/nautical/astronomical twilight, golden hour) for a date
- Finding the times the sun crosses an arbitrary altitude

All results come from closed-form solar formulas (see
`sunlight_calc.astronomy.solar`); nothing is searched numerically, so every
call is a handful of trigonometric evaluations.

Phases that do not happen on a given date (polar day or polar night) are
returned as None rather than raising.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, timezone, tzinfo

from pydantic import ValidationError

from sunlight_calc.astronomy import solar
from sunlight_calc.astronomy.julian import calendar_date, date_reference, from_julian, to_days
from sunlight_calc.exceptions import InvalidArgumentError
from sunlight_calc.models.location import Coordinates, Location, resolve_timezone
from sunlight_calc.models.sun import (
    PHASE_ALTITUDES,
    SunlightPhase,
    SunlightTimes,
    SunPosition,
    SunPositionField,
)

logger = logging.getLogger(__name__)

# Sun altitude (degrees) below which it counts as night / astronomical night
NIGHT_ALTITUDE_DEG = PHASE_ALTITUDES[0].altitude_deg
ASTRONOMICAL_NIGHT_ALTITUDE_DEG = -18.0


def _validate_coordinates(latitude: float, longitude: float) -> Coordinates:
    """Build Coordinates, reporting range violations as InvalidArgumentError."""
    try:
        return Coordinates(latitude=latitude, longitude=longitude)
    except ValidationError as e:
        error = e.errors()[0]
        argument = str(error["loc"][0]) if error["loc"] else "coordinates"
        value = latitude if argument == "latitude" else longitude
        raise InvalidArgumentError(
            f"Invalid {argument}: {value!r} ({error['msg']})",
            argument=argument,
            value=value,
        ) from e


def _resolve_output_timezone(tz: str | tzinfo | None) -> tuple[tzinfo | None, str | None]:
    """Resolve the output timezone and the name recorded on results."""
    try:
        resolved = resolve_timezone(tz)
    except ValueError as e:
        raise InvalidArgumentError(str(e), argument="tz", value=tz) from e
    if resolved is None:
        return None, None
    return resolved, tz if isinstance(tz, str) else str(resolved)


def _validate_height(height: float) -> float:
    if height < 0:
        raise InvalidArgumentError(
            f"Observer height must be non-negative, got {height!r}",
            argument="height",
            value=height,
        )
    return height


def _to_output(jd: float, tz: tzinfo | None) -> datetime:
    """Convert a Julian date to a naive UTC datetime or an aware one in tz."""
    dt = from_julian(jd)
    if tz is None:
        return dt
    return dt.replace(tzinfo=timezone.utc).astimezone(tz)


def get_sun_position(
    time: datetime,
    latitude: float,
    longitude: float,
    keep: Iterable[str | SunPositionField] | None = None,
) -> SunPosition:
    """Calculate the sun position at a given time and location.

    Args:
        time: Instant to calculate for (naive datetimes are taken as UTC)
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees
        keep: Fields to compute ('altitude', 'azimuth'); all if None

    Returns:
        SunPosition with altitude and azimuth in radians

    Raises:
        InvalidArgumentError: For out-of-range coordinates or unknown fields
    """
    _validate_coordinates(latitude, longitude)
    fields = SunPositionField.select(keep)

    lw = solar.RAD * -longitude
    phi = solar.RAD * latitude
    d = to_days(time)

    coords = solar.sun_coordinates(d)
    hour_angle = solar.sidereal_time(d, lw) - coords.right_ascension

    values: dict[str, float] = {}
    if SunPositionField.ALTITUDE in fields:
        values["altitude"] = solar.altitude(hour_angle, phi, coords.declination)
    if SunPositionField.AZIMUTH in fields:
        values["azimuth"] = solar.azimuth(hour_angle, phi, coords.declination)

    return SunPosition(
        time=time,
        latitude=latitude,
        longitude=longitude,
        requested=fields,
        **values,
    )


def get_sunlight_times(
    date: date | datetime,
    latitude: float,
    longitude: float,
    tz: str | tzinfo | None = None,
    keep: Iterable[str | SunlightPhase] | None = None,
    height: float = 0.0,
) -> SunlightTimes:
    """Calculate sunlight phase times for a date and location.

    Args:
        date: Local date in the output timezone (time portion is ignored)
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees
        tz: Output timezone (IANA name or tzinfo). None returns naive UTC.
        keep: Phase names to compute; all 14 if None
        height: Observer height above the horizon in metres

    Returns:
        SunlightTimes holding the requested phases in canonical order.
        Phases that do not occur that day are None.

    Raises:
        InvalidArgumentError: For out-of-range coordinates, unknown phase
            names, unknown timezones or a negative height
    """
    _validate_coordinates(latitude, longitude)
    phases = SunlightPhase.select(keep)
    out_tz, tz_name = _resolve_output_timezone(tz)
    dip = solar.horizon_dip(_validate_height(height))

    reference = date_reference(date, out_tz)
    day = solar.solar_day(to_days(reference), latitude, longitude)

    values: dict[str, datetime | None] = {}
    if SunlightPhase.SOLAR_NOON in phases:
        values[SunlightPhase.SOLAR_NOON.attribute] = _to_output(day.noon_jd, out_tz)
    if SunlightPhase.NADIR in phases:
        values[SunlightPhase.NADIR.attribute] = _to_output(day.noon_jd - 0.5, out_tz)

    for boundary in PHASE_ALTITUDES:
        wanted = [p for p in (boundary.morning, boundary.evening) if p in phases]
        if not wanted:
            continue
        crossing = solar.rise_set_jd(day, boundary.altitude_deg + dip)
        if crossing is None:
            logger.debug(
                f"Sun does not cross {boundary.altitude_deg}° on {calendar_date(date)} "
                f"at {latitude},{longitude}; {', '.join(p.value for p in wanted)} absent"
            )
            for phase in wanted:
                values[phase.attribute] = None
            continue
        rise_jd, set_jd = crossing
        if boundary.morning in phases:
            values[boundary.morning.attribute] = _to_output(rise_jd, out_tz)
        if boundary.evening in phases:
            values[boundary.evening.attribute] = _to_output(set_jd, out_tz)

    return SunlightTimes(
        date=calendar_date(date),
        latitude=latitude,
        longitude=longitude,
        timezone=tz_name,
        requested=phases,
        **values,
    )


def get_sunlight_times_series(
    dates: Iterable[date | datetime],
    latitude: float,
    longitude: float,
    tz: str | tzinfo | None = None,
    keep: Iterable[str | SunlightPhase] | None = None,
    height: float = 0.0,
) -> list[SunlightTimes]:
    """Calculate sunlight times for a sequence of dates.

    Returns one SunlightTimes per input date, in input order.
    """
    if isinstance(dates, (date, datetime)):
        raise InvalidArgumentError(
            "Expected a sequence of dates; use get_sunlight_times for a single date",
            argument="dates",
            value=dates,
        )
    phases = SunlightPhase.select(keep)
    return [
        get_sunlight_times(d, latitude, longitude, tz=tz, keep=phases, height=height)
        for d in dates
    ]


def get_sun_altitude_time(
    date: date | datetime,
    latitude: float,
    longitude: float,
    altitude_deg: float,
    rising: bool = True,
    tz: str | tzinfo | None = None,
    height: float = 0.0,
) -> datetime | None:
    """Find when the sun crosses a specific altitude on a date.

    Useful for solar observation planning (e.g., sun > 20°).

    Args:
        date: Local date in the output timezone (time portion is ignored)
        latitude: Observer latitude in degrees
        longitude: Observer longitude in degrees
        altitude_deg: Target altitude in degrees
        rising: True for the morning crossing, False for the evening one
        tz: Output timezone (IANA name or tzinfo). None returns naive UTC.
        height: Observer height above the horizon in metres

    Returns:
        Time of the crossing, or None if the sun never reaches that altitude
    """
    _validate_coordinates(latitude, longitude)
    if not -90 <= altitude_deg <= 90:
        raise InvalidArgumentError(
            f"Altitude must be within [-90, 90] degrees, got {altitude_deg!r}",
            argument="altitude_deg",
            value=altitude_deg,
        )
    out_tz, _ = _resolve_output_timezone(tz)
    dip = solar.horizon_dip(_validate_height(height))

    reference = date_reference(date, out_tz)
    day = solar.solar_day(to_days(reference), latitude, longitude)
    crossing = solar.rise_set_jd(day, altitude_deg + dip)
    if crossing is None:
        logger.debug(f"Sun does not cross {altitude_deg}° on {calendar_date(date)}")
        return None
    rise_jd, set_jd = crossing
    return _to_output(rise_jd if rising else set_jd, out_tz)


class AstronomyCalculator:
    """Calculator for sun data at a fixed location.

    This class provides a convenient interface for a single observer,
    caching full sunlight-time records per date.

    Example:
        ```python
        calc = AstronomyCalculator(Coordinates(latitude=54, longitude=9), "Europe/Berlin")

        # Get sunlight times for today
        times = calc.get_sunlight_times(date.today())

        # Get sun position right now
        sun = calc.get_sun_position(datetime.now(timezone.utc))

        # Find when sun reaches 20° altitude
        solar_time = calc.get_sun_altitude_time(date.today(), 20)
        ```
    """

    def __init__(
        self,
        coordinates: Coordinates,
        timezone: str | tzinfo | None = None,
        height: float = 0.0,
    ):
        """Initialize calculator for a specific location.

        Args:
            coordinates: Geographic coordinates for calculations
            timezone: Output timezone for sunlight times (None = naive UTC)
            height: Observer height above the horizon in metres
        """
        self.coordinates = coordinates
        self.timezone = timezone
        self.height = _validate_height(height)
        _resolve_output_timezone(timezone)
        self._times_cache: dict[str, SunlightTimes] = {}

    @classmethod
    def from_location(cls, location: Location, height: float = 0.0) -> AstronomyCalculator:
        """Create a calculator for a Location, reporting times in its timezone."""
        return cls(location.coordinates, timezone=location.timezone, height=height)

    def get_sun_position(self, time: datetime) -> SunPosition:
        """Get sun position at the given time."""
        return get_sun_position(time, *self.coordinates.to_tuple())

    def get_sunlight_times(self, date: date | datetime) -> SunlightTimes:
        """Get all sunlight times for a date (cached)."""
        cache_key = calendar_date(date).isoformat()
        if cache_key in self._times_cache:
            logger.debug(f"Sunlight times cache hit for {cache_key}")
        else:
            self._times_cache[cache_key] = get_sunlight_times(
                date,
                *self.coordinates.to_tuple(),
                tz=self.timezone,
                height=self.height,
            )
        return self._times_cache[cache_key]

    def get_sunlight_times_series(
        self, dates: Iterable[date | datetime]
    ) -> list[SunlightTimes]:
        """Get sunlight times for several dates, reusing the cache."""
        return [self.get_sunlight_times(d) for d in dates]

    def get_sun_altitude_time(
        self,
        date: date | datetime,
        altitude_deg: float,
        rising: bool = True,
    ) -> datetime | None:
        """Find when sun reaches a specific altitude."""
        return get_sun_altitude_time(
            date,
            *self.coordinates.to_tuple(),
            altitude_deg,
            rising=rising,
            tz=self.timezone,
            height=self.height,
        )

    def is_astronomical_night(self, time: datetime) -> bool:
        """Check if it's astronomical night (sun below -18°)."""
        sun = self.get_sun_position(time)
        return sun.altitude_deg < ASTRONOMICAL_NIGHT_ALTITUDE_DEG

    def is_night(self, time: datetime) -> bool:
        """Check if it's night (sun below the sunrise/sunset altitude)."""
        sun = self.get_sun_position(time)
        return sun.altitude_deg < NIGHT_ALTITUDE_DEG
