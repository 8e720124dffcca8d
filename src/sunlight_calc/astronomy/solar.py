"""Low-precision solar position formulas.

Implements the compact solar model popularised by the "suncalc" family of
libraries, based on the formulas from the Astronomy Answers articles on the
position of the sun. Accuracy is around a minute of time for rise/set
events between roughly 1901 and 2099.

All angles are in radians. ``d`` is days since J2000.0 and ``lw`` is the
observer's west longitude (``-longitude``) in radians.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from sunlight_calc.astronomy.julian import J2000

RAD = math.pi / 180

# Obliquity of the Earth
OBLIQUITY = RAD * 23.4397

# Fractional-day correction of the transit approximation
J0 = 0.0009


class SunCoordinates(NamedTuple):
    """Equatorial coordinates of the sun."""

    declination: float
    right_ascension: float


def right_ascension(ecliptic_lon: float, ecliptic_lat: float) -> float:
    return math.atan2(
        math.sin(ecliptic_lon) * math.cos(OBLIQUITY)
        - math.tan(ecliptic_lat) * math.sin(OBLIQUITY),
        math.cos(ecliptic_lon),
    )


def declination(ecliptic_lon: float, ecliptic_lat: float) -> float:
    return math.asin(
        math.sin(ecliptic_lat) * math.cos(OBLIQUITY)
        + math.cos(ecliptic_lat) * math.sin(OBLIQUITY) * math.sin(ecliptic_lon)
    )


def azimuth(hour_angle: float, phi: float, dec: float) -> float:
    """Azimuth from south toward west, in [-pi, pi)."""
    az = math.atan2(
        math.sin(hour_angle),
        math.cos(hour_angle) * math.sin(phi) - math.tan(dec) * math.cos(phi),
    )
    return normalize_angle(az)


def altitude(hour_angle: float, phi: float, dec: float) -> float:
    return math.asin(
        math.sin(phi) * math.sin(dec)
        + math.cos(phi) * math.cos(dec) * math.cos(hour_angle)
    )


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [-pi, pi)."""
    return (angle + math.pi) % (2 * math.pi) - math.pi


def sidereal_time(d: float, lw: float) -> float:
    return RAD * (280.16 + 360.9856235 * d) - lw


def solar_mean_anomaly(d: float) -> float:
    return RAD * (357.5291 + 0.98560028 * d)


def ecliptic_longitude(mean_anomaly: float) -> float:
    m = mean_anomaly
    center = RAD * (1.9148 * math.sin(m) + 0.02 * math.sin(2 * m) + 0.0003 * math.sin(3 * m))
    perihelion = RAD * 102.9372
    return m + center + perihelion + math.pi


def sun_coordinates(d: float) -> SunCoordinates:
    """Declination and right ascension of the sun ``d`` days after J2000."""
    lon = ecliptic_longitude(solar_mean_anomaly(d))
    return SunCoordinates(
        declination=declination(lon, 0),
        right_ascension=right_ascension(lon, 0),
    )


def horizon_dip(height: float) -> float:
    """Apparent horizon depression (degrees) for an observer ``height`` metres up."""
    return -2.076 * math.sqrt(height) / 60


def julian_cycle(d: float, lw: float) -> int:
    return round(d - J0 - lw / (2 * math.pi))


def approx_transit(hour_angle: float, lw: float, n: int) -> float:
    return J0 + (hour_angle + lw) / (2 * math.pi) + n


def solar_transit_j(ds: float, mean_anomaly: float, ecliptic_lon: float) -> float:
    """Julian date of a transit, corrected by the equation of time."""
    return J2000 + ds + 0.0053 * math.sin(mean_anomaly) - 0.0069 * math.sin(2 * ecliptic_lon)


def hour_angle(h: float, phi: float, dec: float) -> float | None:
    """Hour angle at which the sun sits at altitude ``h``.

    Returns None when the sun never reaches that altitude on the day, i.e.
    the cosine falls outside [-1, 1].
    """
    cos_w = (math.sin(h) - math.sin(phi) * math.sin(dec)) / (math.cos(phi) * math.cos(dec))
    if not -1.0 <= cos_w <= 1.0:
        return None
    return math.acos(cos_w)


class SolarDay(NamedTuple):
    """Quantities shared by every phase computation for one day."""

    lw: float
    phi: float
    cycle: int
    mean_anomaly: float
    ecliptic_lon: float
    declination: float
    noon_jd: float


def solar_day(d: float, latitude: float, longitude: float) -> SolarDay:
    """Solve the solar transit nearest to ``d`` for the given location."""
    lw = RAD * -longitude
    phi = RAD * latitude
    n = julian_cycle(d, lw)
    ds = approx_transit(0, lw, n)
    m = solar_mean_anomaly(ds)
    lon = ecliptic_longitude(m)
    return SolarDay(
        lw=lw,
        phi=phi,
        cycle=n,
        mean_anomaly=m,
        ecliptic_lon=lon,
        declination=declination(lon, 0),
        noon_jd=solar_transit_j(ds, m, lon),
    )


def set_jd(day: SolarDay, h: float) -> float | None:
    """Julian date of the evening crossing of altitude ``h``, if any."""
    w = hour_angle(h, day.phi, day.declination)
    if w is None:
        return None
    a = approx_transit(w, day.lw, day.cycle)
    return solar_transit_j(a, day.mean_anomaly, day.ecliptic_lon)


def rise_set_jd(day: SolarDay, altitude_deg: float) -> tuple[float, float] | None:
    """Julian dates of the morning and evening crossings of an altitude.

    The morning crossing mirrors the evening one around solar noon.
    """
    j_set = set_jd(day, altitude_deg * RAD)
    if j_set is None:
        return None
    j_rise = day.noon_jd - (j_set - day.noon_jd)
    return j_rise, j_set
