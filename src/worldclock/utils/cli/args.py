"""
Command-line argument parsing for WorldClock.

This module defines the global options (config file, log folder, verbosity)
and the subcommands of the ``worldclock`` tool.
"""

import argparse
import sys
from pathlib import Path
from typing import NamedTuple

from ..core.version import get_version


class PathValidationError(Exception):
    """Raised when a path validation fails."""

    pass


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    config_file: Path
    log_folder: Path
    verbose: bool
    command: str
    options: argparse.Namespace


class DefaultPaths:
    """Default paths for WorldClock."""

    CONFIG_FILE: Path = Path("worldclock.yml")
    LOG_FOLDER: Path = Path("logs")


def validate_config_file_path(config_file_str: str) -> Path:
    """
    Validate configuration file path.

    Args:
        config_file_str: String path to configuration file

    Returns:
        Resolved Path object for the configuration file

    Raises:
        PathValidationError: If the configuration file path is invalid
    """
    try:
        config_file = Path(config_file_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid config file path: {e}") from e

    if config_file.exists() and config_file.is_dir():
        raise PathValidationError(
            f"Config file path exists but is not a file: {config_file}"
        )

    return config_file


def validate_folder_path(path_str: str, folder_name: str) -> Path:
    """
    Validate and resolve a folder path.

    Args:
        path_str: String representation of the folder path
        folder_name: Name of the folder (for error messages)

    Returns:
        Resolved absolute path to the folder

    Raises:
        PathValidationError: If the path is invalid
    """
    try:
        path = Path(path_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid {folder_name} path: {e}") from e

    if path.exists() and not path.is_dir():
        raise PathValidationError(
            f"{folder_name.capitalize()} path exists but is not a directory: {path}"
        )

    return path


def _add_date_option(parser: argparse.ArgumentParser, help_text: str) -> None:
    _ = parser.add_argument(
        "--date",
        type=str,
        default=None,
        help=f"{help_text} in YYYY-MM-DD format (default: today)",
        metavar="DATE",
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for WorldClock.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="worldclock",
        description="WorldClock - timezone conversion, world clock and meeting planning",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  worldclock clock
    Show the current time in the configured cities

  worldclock convert "2024-01-15 09:00" --from America/New_York --to Asia/Kolkata
    Convert a wall-clock time between zones

  worldclock overlap London "New York"
    Show shared working hours of two cities

  worldclock meet London "New York" Mumbai --date 2024-01-15
    Suggest meeting times that fit every city's working day
""",
    )

    defaults = DefaultPaths()

    _ = parser.add_argument(
        "--config-file",
        type=str,
        default=str(defaults.CONFIG_FILE),
        help="Path to the configuration file (default: %(default)s). Defaults apply if it doesn't exist.",
        metavar="PATH",
    )
    _ = parser.add_argument(
        "--log-folder",
        type=str,
        default=str(defaults.LOG_FOLDER),
        help="Path to the log folder (default: %(default)s). Created if it doesn't exist.",
        metavar="PATH",
    )
    _ = parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Also show informational log messages on the console",
    )
    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    clock = subparsers.add_parser("clock", help="Show the current time in several cities")
    _ = clock.add_argument(
        "cities",
        nargs="*",
        help="City names or IANA timezones (default: configured cities)",
    )
    _ = clock.add_argument(
        "--all", action="store_true", help="Show every catalog city"
    )

    convert = subparsers.add_parser("convert", help="Convert a time between timezones")
    _ = convert.add_argument(
        "time", help="Wall-clock time 'YYYY-MM-DD HH:MM' in the source zone, or 'now'"
    )
    _ = convert.add_argument(
        "--from", dest="source", default=None, help="Source city or timezone (default: home timezone)"
    )
    _ = convert.add_argument(
        "--to", dest="target", required=True, help="Target city or timezone"
    )

    dst = subparsers.add_parser("dst", help="Show daylight-saving status of a timezone")
    _ = dst.add_argument("zone", help="City name or IANA timezone")

    overlap = subparsers.add_parser("overlap", help="Show shared working hours of two cities")
    _ = overlap.add_argument("city_a", help="First city or timezone")
    _ = overlap.add_argument("city_b", help="Second city or timezone")
    _add_date_option(overlap, "Local date")
    _ = overlap.add_argument("--start", default=None, help="Working day start HH:MM")
    _ = overlap.add_argument("--end", default=None, help="Working day end HH:MM")

    travel = subparsers.add_parser("travel", help="Plan a flight and assess jet lag")
    _ = travel.add_argument("departure", help="Departure city or timezone")
    _ = travel.add_argument("arrival", help="Arrival city or timezone")
    _ = travel.add_argument(
        "--depart", required=True, help="Local departure time 'YYYY-MM-DD HH:MM', or 'now'"
    )
    _ = travel.add_argument(
        "--duration", required=True, help="Flight duration such as '2h 30m' or '150'"
    )

    meet = subparsers.add_parser("meet", help="Suggest meeting times across cities")
    _ = meet.add_argument("cities", nargs="+", help="At least two cities or timezones")
    _add_date_option(meet, "UTC date")
    _ = meet.add_argument(
        "--duration", type=int, default=None, help="Meeting length in minutes"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        ParsedArgs containing validated paths and the chosen subcommand

    Raises:
        SystemExit: If argument parsing fails, path validation fails or --help is requested
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    try:
        config_file_str: str = getattr(parsed, "config_file", "")
        log_folder_str: str = getattr(parsed, "log_folder", "")

        if not config_file_str or not log_folder_str:
            raise ValueError("Missing required arguments from parser")

        config_file = validate_config_file_path(config_file_str)
        log_folder = validate_folder_path(log_folder_str, "log folder")
    except PathValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    return ParsedArgs(
        config_file=config_file,
        log_folder=log_folder,
        verbose=bool(getattr(parsed, "verbose", False)),
        command=str(getattr(parsed, "command", "")),
        options=parsed,
    )


def ensure_directories_exist(parsed_args: ParsedArgs) -> None:
    """
    Ensure that the log directory exists.

    Raises:
        OSError: If directory creation fails
    """
    parsed_args.log_folder.mkdir(parents=True, exist_ok=True)
