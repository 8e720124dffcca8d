"""Conversion between datetimes and Julian dates using astropy."""

from __future__ import annotations

import warnings
from datetime import date, datetime, time, timedelta, timezone, tzinfo

from astropy.time import Time
from erfa import ErfaWarning

# Julian date of the J2000.0 epoch
J2000 = 2451545.0


def to_utc_naive(dt: datetime) -> datetime:
    """Normalize a datetime to naive UTC.

    Naive datetimes are taken to already be UTC; aware ones are converted.
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def to_julian(dt: datetime) -> float:
    """Julian date (UTC scale) of a datetime."""
    # Years outside the leap-second table only earn a "dubious year" warning
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", ErfaWarning)
        return float(Time(to_utc_naive(dt), scale="utc").jd)


def from_julian(jd: float) -> datetime:
    """Naive UTC datetime of a Julian date, rounded to the nearest second.

    An instant inside a leap second is reported as the following second.
    """
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", ErfaWarning)
        dt = Time(jd, format="jd", scale="utc").to_datetime(leap_second_strict="silent")
    return (dt + timedelta(microseconds=500_000)).replace(microsecond=0)


def to_days(dt: datetime) -> float:
    """Days since J2000.0."""
    return to_julian(dt) - J2000


def calendar_date(day: date | datetime) -> date:
    """Calendar date of a date or datetime, ignoring any time of day."""
    if isinstance(day, datetime):
        return day.date()
    return day


def date_reference(day: date | datetime, tz: tzinfo | None = None) -> datetime:
    """Reference instant for a calendar date, as naive UTC.

    This is 12:00 on that date in ``tz``, or 12:00 UTC when no timezone is
    given. The time of day of a datetime argument is ignored.
    """
    noon = datetime.combine(calendar_date(day), time(12, 0))
    if tz is None:
        return noon
    return to_utc_naive(noon.replace(tzinfo=tz))
