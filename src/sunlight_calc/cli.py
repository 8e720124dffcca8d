"""Command-line interface for sun position and sunlight times."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime, timedelta, timezone
from typing import Any

from sunlight_calc import __version__
from sunlight_calc.astronomy.calculator import (
    get_sun_altitude_time,
    get_sun_position,
    get_sunlight_times_series,
)
from sunlight_calc.config import get_settings
from sunlight_calc.exceptions import InvalidArgumentError
from sunlight_calc.log import configure_logging
from sunlight_calc.models.location import Coordinates, resolve_timezone

logger = logging.getLogger(__name__)


def _split_keep(value: str | None) -> list[str] | None:
    if not value:
        return None
    return [v.strip() for v in value.split(",") if v.strip()]


def _format_value(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)


def _emit(records: list[dict[str, Any]], as_json: bool) -> None:
    if as_json:
        payload = records[0] if len(records) == 1 else records
        print(json.dumps(payload, default=_format_value, indent=2))
        return
    for i, record in enumerate(records):
        if i:
            print()
        width = max(len(k) for k in record)
        for key, value in record.items():
            print(f"{key:<{width}}  {_format_value(value)}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sunlight-calc",
        description="Sun position and sunlight times (sunrise, twilight, golden hour)",
        epilog="Use '--' before coordinates that start with a minus sign, "
        "e.g. 'sunlight-calc times -- -33.87,151.21'.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: SUNLIGHT_CALC_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=None,
        help="Print results as JSON",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Position command
    position_parser = subparsers.add_parser(
        "position", help="Sun altitude/azimuth at an instant"
    )
    position_parser.add_argument("location", help="Location as lat,lon coordinates")
    position_parser.add_argument(
        "--time",
        type=datetime.fromisoformat,
        default=None,
        help="ISO 8601 instant (naive = UTC, default: now)",
    )
    position_parser.add_argument(
        "--keep", default=None, help="Comma-separated fields (altitude,azimuth)"
    )
    position_parser.add_argument(
        "--degrees",
        action="store_true",
        help="Report altitude and compass azimuth (0=N) in degrees",
    )

    # Times command
    times_parser = subparsers.add_parser(
        "times", help="Sunlight phase times for a date"
    )
    times_parser.add_argument("location", help="Location as lat,lon coordinates")
    times_parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Date as YYYY-MM-DD (default: today)",
    )
    times_parser.add_argument("--tz", default=None, help="IANA output timezone")
    times_parser.add_argument(
        "--keep", default=None, help="Comma-separated phase names (default: all)"
    )
    times_parser.add_argument(
        "--height", type=float, default=None, help="Observer height in metres"
    )
    times_parser.add_argument(
        "--days", type=int, default=1, help="Number of consecutive days"
    )

    # Altitude command
    altitude_parser = subparsers.add_parser(
        "altitude", help="When the sun crosses a given altitude"
    )
    altitude_parser.add_argument("location", help="Location as lat,lon coordinates")
    altitude_parser.add_argument("altitude", type=float, help="Altitude in degrees")
    altitude_parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=None,
        help="Date as YYYY-MM-DD (default: today)",
    )
    altitude_parser.add_argument(
        "--setting",
        action="store_true",
        help="Find the evening crossing instead of the morning one",
    )
    altitude_parser.add_argument("--tz", default=None, help="IANA output timezone")
    altitude_parser.add_argument(
        "--height", type=float, default=None, help="Observer height in metres"
    )

    return parser


def _today(tz_name: str | None) -> date:
    tz = resolve_timezone(tz_name) or timezone.utc
    return datetime.now(tz).date()


def _run_position(args: argparse.Namespace) -> list[dict[str, Any]]:
    coords = Coordinates.from_string(args.location)
    time = args.time or datetime.now(timezone.utc)
    position = get_sun_position(time, *coords.to_tuple(), keep=_split_keep(args.keep))
    record: dict[str, Any] = {"time": time, "lat": coords.latitude, "lon": coords.longitude}
    if args.degrees:
        values = {
            "altitude": position.altitude_deg,
            "azimuth": position.azimuth_deg,
        }
        record.update({f.value: values[f.value] for f in position.requested})
    else:
        record.update(position.as_dict())
    return [record]


def _run_times(args: argparse.Namespace, tz_name: str | None, height: float) -> list[dict[str, Any]]:
    coords = Coordinates.from_string(args.location)
    if args.days < 1:
        raise InvalidArgumentError("--days must be at least 1", argument="days", value=args.days)
    start = args.date or _today(tz_name)
    dates = [start + timedelta(days=i) for i in range(args.days)]
    records = get_sunlight_times_series(
        dates,
        *coords.to_tuple(),
        tz=tz_name,
        keep=_split_keep(args.keep),
        height=height,
    )
    return [
        {"date": r.date, "lat": r.latitude, "lon": r.longitude, **r.as_dict()}
        for r in records
    ]


def _run_altitude(args: argparse.Namespace, tz_name: str | None, height: float) -> list[dict[str, Any]]:
    coords = Coordinates.from_string(args.location)
    day = args.date or _today(tz_name)
    crossing = get_sun_altitude_time(
        day,
        *coords.to_tuple(),
        args.altitude,
        rising=not args.setting,
        tz=tz_name,
        height=height,
    )
    return [
        {
            "date": day,
            "lat": coords.latitude,
            "lon": coords.longitude,
            "altitude": args.altitude,
            "direction": "setting" if args.setting else "rising",
            "time": crossing,
        }
    ]


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    as_json = args.json if args.json is not None else settings.output_format == "json"
    tz_name = getattr(args, "tz", None) or settings.default_timezone
    height = getattr(args, "height", None)
    if height is None:
        height = settings.observer_height_m

    logger.debug(f"Running '{args.command}' command")
    try:
        if args.command == "position":
            records = _run_position(args)
        elif args.command == "times":
            records = _run_times(args, tz_name, height)
        else:
            records = _run_altitude(args, tz_name, height)
    except ValueError as e:
        # InvalidArgumentError and malformed coordinate strings
        print(f"error: {e}", file=sys.stderr)
        return 2

    _emit(records, as_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
