"""Command-line entry for zonedtime.

Resolves wall-clock times in named zones through the configured (or an
explicitly chosen) timezone provider.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser

from .config_loader import Config, load_config
from .datetime_ops import from_naive, to_timezone
from .exceptions import ProviderConfigurationError, TimezoneError
from .logging_setup import init_logging
from .models import ZonedDateTime
from .names import normalize_timezone_name
from .providers.base import TimezoneProvider
from .registry import available_providers, build_provider, provider_from_config

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_TIMEZONE_ERROR = 2


def _create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the zonedtime CLI.

    Returns:
        Configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="zonedtime",
        description="zonedtime - resolve wall-clock times in named time zones",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  zonedtime from-naive 2018-01-01T10:00:00 Australia/Sydney --provider zoneinfo
  zonedtime shift 2018-01-01T10:00 --from Australia/Sydney --to America/New_York
  zonedtime zones --provider pytz --prefix Europe/
        """,
    )
    parser.add_argument("--config", metavar="PATH", help="YAML/JSON config file")
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Logging level (default: from config or ZONEDTIME_LOG_LEVEL)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_provider_option(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--provider",
            metavar="SPEC",
            help="Provider name or dotted path (default: from configuration)",
        )

    def add_output_options(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--normalize",
            action="store_true",
            help="Accept Windows zone names and obsolete aliases",
        )
        sub.add_argument("--json", action="store_true", help="Print the result as JSON")

    from_naive_cmd = subparsers.add_parser(
        "from-naive", help="Bind a naive wall time to a zone"
    )
    from_naive_cmd.add_argument("wall", help="ISO 8601 wall time without offset")
    from_naive_cmd.add_argument(
        "zone", nargs="?", help="Zone name, e.g. Australia/Sydney (default: from config)"
    )
    from_naive_cmd.add_argument(
        "--fold",
        type=int,
        choices=(0, 1),
        default=0,
        help="Occurrence to use when the wall time repeats (default: 0)",
    )
    add_provider_option(from_naive_cmd)
    add_output_options(from_naive_cmd)

    shift_cmd = subparsers.add_parser("shift", help="Convert a wall time from one zone to another")
    shift_cmd.add_argument("wall", help="ISO 8601 wall time without offset")
    shift_cmd.add_argument(
        "--from", dest="from_zone", metavar="ZONE", help="Source zone (default: from config)"
    )
    shift_cmd.add_argument("--to", dest="to_zone", required=True, metavar="ZONE")
    add_provider_option(shift_cmd)
    add_output_options(shift_cmd)

    subparsers.add_parser("providers", help="List available timezone providers")

    zones_cmd = subparsers.add_parser("zones", help="List zone names known to a provider")
    zones_cmd.add_argument("--prefix", default="", help="Only list zones starting with PREFIX")
    add_provider_option(zones_cmd)

    return parser


def _parse_wall(text: str) -> datetime:
    """Parse an ISO 8601 wall time, rejecting values that carry an offset."""
    wall = date_parser.isoparse(text)
    if wall.tzinfo is not None:
        raise ValueError(f"wall time {text!r} must not include a UTC offset or zone")
    return wall


def _zone_name(name: str, provider: TimezoneProvider, normalize: bool) -> str:
    if not normalize:
        return name
    # Unresolvable names fall through so the provider reports them.
    return normalize_timezone_name(name, provider) or name


def _emit(zoned: ZonedDateTime, as_json: bool) -> None:
    print(zoned.model_dump_json() if as_json else str(zoned))


def _run(args: argparse.Namespace, config: Config) -> int:
    if args.command == "providers":
        for name, target in sorted(available_providers().items()):
            marker = "*" if name == config.timezone_provider else " "
            print(f"{marker} {name:<10} {target}")
        return EXIT_OK

    if args.provider:
        provider = build_provider(args.provider)
    else:
        provider = provider_from_config(config)

    if args.command == "zones":
        for name in sorted(provider.available_zones()):
            if name.startswith(args.prefix):
                print(name)
        return EXIT_OK

    wall = _parse_wall(args.wall)
    if args.command == "from-naive":
        zone = _zone_name(args.zone or config.default_timezone, provider, args.normalize)
        _emit(from_naive(wall.replace(fold=args.fold), zone, provider), args.json)
        return EXIT_OK

    # shift
    source = _zone_name(args.from_zone or config.default_timezone, provider, args.normalize)
    target = _zone_name(args.to_zone, provider, args.normalize)
    _emit(to_timezone(from_naive(wall, source, provider), target, provider), args.json)
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    """Run the zonedtime CLI and return the process exit code."""
    parser = _create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        print(f"zonedtime: configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    init_logging(args.log_level or config.log_level)

    try:
        return _run(args, config)
    except ProviderConfigurationError as exc:
        print(f"zonedtime: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except TimezoneError as exc:
        print(f"zonedtime: {exc.reason.value}: {exc}", file=sys.stderr)
        return EXIT_TIMEZONE_ERROR
    except ValueError as exc:
        print(f"zonedtime: invalid input: {exc}", file=sys.stderr)
        return EXIT_TIMEZONE_ERROR


if __name__ == "__main__":
    sys.exit(main())
