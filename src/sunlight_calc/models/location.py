"""Observer location models."""

from __future__ import annotations

import re
from datetime import tzinfo
from typing import Self
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Regex for parsing lat/long coordinates: "latitude,longitude"
# Supports optional +/- prefix for both values
COORDINATE_PATTERN = re.compile(
    r"^(?P<lat>[-+]?\d*\.?\d+)\s*,\s*(?P<lon>[-+]?\d*\.?\d+)$"
)


class Coordinates(BaseModel):
    """Geographic coordinates of an observer (latitude/longitude).

    Latitude:
        - Negative (-) = south of equator
        - Positive (+) = north of equator
        - Range: -90 to +90

    Longitude:
        - Negative (-) = west of prime meridian
        - Positive (+) = east of prime meridian
        - Range: -180 to +180
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse coordinates from string format 'latitude,longitude'.

        Examples:
            '54,9' -> Schleswig-Holstein
            '-33.8688,151.2093' -> Sydney
            '+69.6492,18.9553' -> Tromsø
        """
        match = COORDINATE_PATTERN.match(value.strip())
        if not match:
            raise ValueError(
                f"Invalid coordinate format: '{value}'. "
                "Expected format: 'latitude,longitude' (e.g., '54,9')"
            )
        return cls(
            latitude=float(match.group("lat")),
            longitude=float(match.group("lon")),
        )

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"

    def to_tuple(self) -> tuple[float, float]:
        """Return coordinates as (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


def resolve_timezone(value: str | tzinfo | None) -> tzinfo | None:
    """Turn an IANA name into a tzinfo; pass tzinfo objects and None through.

    Raises:
        ValueError: If the name is not a known IANA timezone
    """
    if value is None or isinstance(value, tzinfo):
        return value
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: '{value}'") from e


class Location(BaseModel):
    """An observer location with an optional output timezone."""

    model_config = ConfigDict(frozen=True)

    coordinates: Coordinates = Field(..., description="Geographic coordinates")
    timezone: str | None = Field(
        default=None,
        description="IANA timezone identifier (e.g., 'Europe/Berlin')",
    )
    name: str | None = Field(
        default=None, description="Optional friendly name for this location"
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Reject timezone names zoneinfo does not know."""
        resolve_timezone(v)
        return v

    @classmethod
    def from_coordinates(
        cls,
        latitude: float,
        longitude: float,
        timezone: str | None = None,
        name: str | None = None,
    ) -> Self:
        """Create a Location from latitude/longitude values."""
        return cls(
            coordinates=Coordinates(latitude=latitude, longitude=longitude),
            timezone=timezone,
            name=name,
        )

    @classmethod
    def from_string(cls, value: str, timezone: str | None = None) -> Self:
        """Create a Location from a 'latitude,longitude' string."""
        return cls(coordinates=Coordinates.from_string(value), timezone=timezone)

    def get_tzinfo(self) -> tzinfo | None:
        """Return the tzinfo for this location's timezone, if any."""
        return resolve_timezone(self.timezone)

    def display_name(self) -> str:
        """Get a display name for this location."""
        if self.name:
            return self.name
        return str(self.coordinates)
