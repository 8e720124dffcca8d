"""Tabular (pandas) rendering of bulk sun calculations."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, tzinfo

import pandas as pd

from sunlight_calc.astronomy.calculator import get_sun_position, get_sunlight_times_series
from sunlight_calc.models.location import resolve_timezone
from sunlight_calc.models.sun import SunlightPhase, SunPositionField


def sunlight_times_frame(
    dates: Iterable[date | datetime],
    latitude: float,
    longitude: float,
    tz: str | tzinfo | None = None,
    keep: Iterable[str | SunlightPhase] | None = None,
    height: float = 0.0,
) -> pd.DataFrame:
    """Sunlight times as a DataFrame, one row per date.

    Columns are ``date``, ``lat``, ``lon`` followed by the kept phases in
    canonical order. Phases that do not occur are NaT.
    """
    phases = SunlightPhase.select(keep)
    records = get_sunlight_times_series(
        dates, latitude, longitude, tz=tz, keep=phases, height=height
    )
    columns = ["date", "lat", "lon"] + [p.value for p in phases]
    rows = [
        {"date": r.date, "lat": r.latitude, "lon": r.longitude, **r.as_dict()}
        for r in records
    ]
    frame = pd.DataFrame(rows, columns=columns)
    out_tz = resolve_timezone(tz)
    for phase in phases:
        if out_tz is None:
            frame[phase.value] = pd.to_datetime(frame[phase.value])
        else:
            frame[phase.value] = pd.to_datetime(frame[phase.value], utc=True).dt.tz_convert(out_tz)
    return frame


def sun_position_frame(
    times: Iterable[datetime],
    latitude: float,
    longitude: float,
    keep: Iterable[str | SunPositionField] | None = None,
) -> pd.DataFrame:
    """Sun positions as a DataFrame, one row per instant.

    Columns are ``date``, ``lat``, ``lon`` followed by the kept fields.
    """
    fields = SunPositionField.select(keep)
    columns = ["date", "lat", "lon"] + [f.value for f in fields]
    rows = []
    for time in times:
        position = get_sun_position(time, latitude, longitude, keep=fields)
        rows.append(
            {"date": time, "lat": latitude, "lon": longitude, **position.as_dict()}
        )
    return pd.DataFrame(rows, columns=columns)
