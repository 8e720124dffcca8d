"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
The library functions never read settings; only the command-line interface
does, so library calls stay pure.

## Optional Environment Variables

- SUNLIGHT_CALC_DEFAULT_TIMEZONE: IANA timezone used by the CLI when `--tz`
  is not given (default: UTC, naive output)
- SUNLIGHT_CALC_LOG_LEVEL: Logging level for the CLI (default: WARNING)
- SUNLIGHT_CALC_OBSERVER_HEIGHT_M: Observer height in metres (default: 0)
- SUNLIGHT_CALC_OUTPUT_FORMAT: `text` or `json` (default: text)

## Example .env file

```
SUNLIGHT_CALC_DEFAULT_TIMEZONE=Europe/Berlin
SUNLIGHT_CALC_LOG_LEVEL=INFO
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUNLIGHT_CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # Calculation defaults (CLI only)
    default_timezone: str | None = Field(
        default=None,
        description="IANA timezone identifier for CLI output (e.g., 'Europe/Berlin')",
    )
    observer_height_m: float = Field(
        default=0.0,
        ge=0,
        description="Observer height above the horizon plane in metres",
    )

    # Output
    output_format: Literal["text", "json"] = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("default_timezone", mode="before")
    @classmethod
    def empty_timezone_is_none(cls, v: str | None) -> str | None:
        """Treat an empty timezone variable as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()


def get_settings_uncached() -> Settings:
    """Get fresh settings without caching.

    Useful for testing when environment variables change.
    """
    return Settings()
