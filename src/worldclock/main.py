"""
Main entry point for WorldClock.

This module sets up logging, loads configuration, builds the city catalog
and dispatches the command-line subcommands to the timezone and planning
utilities, handling errors at the top level.
"""

import argparse
import logging
import logging.handlers
import sys
from collections.abc import Callable
from datetime import date, datetime
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from .cities import City, CityCatalog, cities_snapshot
from .config.manager import ConfigManager
from .config.schema import WorldClockConfig
from .planning import (
    WorkingHours,
    parse_flight_duration,
    plan_trip,
    suggest_meeting_times,
    working_hours_overlap,
)
from .utils.cli.args import ParsedArgs, ensure_directories_exist, parse_arguments
from .utils.cli.paths import get_path_config
from .utils.core.exceptions import ConfigurationError, ValidationError, WorldClockError
from .utils.time import (
    Granularity,
    convert,
    format_delta,
    format_duration,
    format_instant,
    format_offset_label,
    is_daylight_saving_time,
    localize,
    observes_daylight_saving,
    offset_minutes,
    utc_now,
)


LOG_FILE = "worldclock.log"
ERROR_LOG_FILE = "worldclock-errors.log"


def rotate_logs_on_startup(logs_dir: Path) -> None:
    """
    Rotate existing log files on startup with timestamp-based naming.

    Args:
        logs_dir: Directory containing log files
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    for log_file in (LOG_FILE, ERROR_LOG_FILE):
        log_path = logs_dir / log_file
        if log_path.exists() and log_path.stat().st_size > 0:
            backup_path = logs_dir / f"{log_file}.{timestamp}"
            try:
                _ = log_path.rename(backup_path)
            except OSError as e:
                print(f"Warning: Failed to rotate {log_file}: {e}", file=sys.stderr)


def cleanup_old_logs(logs_dir: Path, max_files: int = 10) -> None:
    """
    Clean up old timestamped log files, keeping only the most recent ones.

    Args:
        logs_dir: Directory containing log files
        max_files: Maximum number of timestamped log files to keep per type
    """
    for log_type in (LOG_FILE, ERROR_LOG_FILE):
        timestamped_files = [
            file_path
            for file_path in logs_dir.glob(f"{log_type}.*")
            if file_path.name != log_type
        ]
        timestamped_files.sort(key=lambda x: x.stat().st_mtime, reverse=True)

        for file_path in timestamped_files[max_files:]:
            try:
                file_path.unlink()
            except OSError as e:
                print(f"Warning: Failed to remove {file_path.name}: {e}", file=sys.stderr)


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging with rotation and multiple handlers.

    Sets up a detailed application log, an errors-only log and a console
    handler. The console only shows warnings unless ``verbose`` is set, so
    command output stays readable.
    """
    logs_dir = get_path_config().log_folder
    _ = logs_dir.mkdir(exist_ok=True, parents=True)

    rotate_logs_on_startup(logs_dir)
    cleanup_old_logs(logs_dir, max_files=10)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    )
    simple_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    # File handler with rotation (5MB max, keep 5 backups)
    file_handler = logging.handlers.RotatingFileHandler(
        logs_dir / LOG_FILE,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(simple_formatter)

    error_handler = logging.handlers.RotatingFileHandler(
        logs_dir / ERROR_LOG_FILE,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(detailed_formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(error_handler)

    logging.getLogger("discord").setLevel(logging.WARNING)


def apply_log_level(level_name: str) -> None:
    """Apply the configured level to the application log file."""
    level = logging.getLevelNamesMapping().get(level_name, logging.INFO)
    for handler in logging.getLogger().handlers:
        if (
            isinstance(handler, logging.handlers.RotatingFileHandler)
            and Path(handler.baseFilename).name == LOG_FILE
        ):
            handler.setLevel(level)


logger = logging.getLogger(__name__)


def parse_wall_time(value: str) -> datetime | None:
    """
    Parse a wall-clock time argument.

    Returns None for "now"; otherwise a naive datetime.

    Raises:
        ValidationError: If the value is not 'now' or an ISO-like date and time
    """
    text = value.strip()
    if text.lower() == "now":
        return None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValidationError(
            f"Invalid date/time: {value!r}",
            user_message=f"'{value}' is not a valid time. Use 'YYYY-MM-DD HH:MM' or 'now'.",
        ) from e
    return parsed


def parse_date(value: str | None) -> date | None:
    """
    Parse an optional YYYY-MM-DD argument.

    Raises:
        ValidationError: If the value is not a valid date
    """
    if value is None:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ValidationError(
            f"Invalid date: {value!r}",
            user_message=f"'{value}' is not a valid date. Use YYYY-MM-DD.",
        ) from e


def configured_working_hours(
    config: WorldClockConfig, start: str | None = None, end: str | None = None
) -> WorkingHours:
    """Working hours from configuration, with optional overrides."""
    return WorkingHours.from_strings(
        start or config.working_hours.start, end or config.working_hours.end
    )


def run_clock(
    config: WorldClockConfig, catalog: CityCatalog, options: argparse.Namespace
) -> None:
    """Print a world-clock snapshot."""
    names: list[str] = getattr(options, "cities", [])
    if names:
        cities = [catalog.resolve(name) for name in names]
    elif getattr(options, "all", False):
        cities = list(catalog)
    elif config.cities:
        cities = list(catalog)
    else:
        cities = catalog.popular()

    for entry in cities_snapshot(cities, hour12=config.display.hour12):
        dst_marker = " DST" if entry.is_dst else ""
        print(
            f"{entry.city.name:<16} {entry.formatted_time:>11}  "
            f"{entry.formatted_date:<17} {entry.offset_label}{dst_marker}"
        )


def run_convert(
    config: WorldClockConfig, catalog: CityCatalog, options: argparse.Namespace
) -> None:
    """Print a conversion between two zones."""
    source_name: str | None = getattr(options, "source", None)
    source = catalog.resolve(source_name or config.home_timezone)
    target = catalog.resolve(str(getattr(options, "target")))

    wall_time = parse_wall_time(str(getattr(options, "time")))
    instant = utc_now() if wall_time is None else localize(wall_time, source.timezone_id)

    result = convert(instant, source.timezone_id, target.timezone_id)
    granularity = Granularity(config.display.granularity)
    hour12 = config.display.hour12

    source_text = format_instant(result.source_instant, source.timezone_id, granularity, hour12)
    target_text = format_instant(result.source_instant, target.timezone_id, granularity, hour12)
    print(f"{source.name}: {source_text} ({result.source_offset_label})")
    print(f"{target.name}: {target_text} ({result.target_offset_label})")
    print(f"{target.name} is {format_delta(result.delta_minutes)} of {source.name}")


def run_dst(
    config: WorldClockConfig, catalog: CityCatalog, options: argparse.Namespace
) -> None:
    """Print daylight-saving information for a zone."""
    city = catalog.resolve(str(getattr(options, "zone")))
    timezone_id = city.timezone_id
    offset = offset_minutes(timezone_id)

    print(f"{city.name} ({timezone_id}): {format_offset_label(offset)}")
    print(f"Observes daylight saving: {'yes' if observes_daylight_saving(timezone_id) else 'no'}")
    print(f"Currently on daylight saving: {'yes' if is_daylight_saving_time(timezone_id) else 'no'}")


def run_overlap(
    config: WorldClockConfig, catalog: CityCatalog, options: argparse.Namespace
) -> None:
    """Print the working-hours overlap of two cities."""
    city_a = catalog.resolve(str(getattr(options, "city_a")))
    city_b = catalog.resolve(str(getattr(options, "city_b")))
    hours = configured_working_hours(
        config, getattr(options, "start", None), getattr(options, "end", None)
    )
    result = working_hours_overlap(
        city_a, city_b, hours, parse_date(getattr(options, "date", None))
    )

    hour12 = config.display.hour12
    for city, (start, end) in ((city_a, result.window_a), (city_b, result.window_b)):
        print(
            f"{city.name}: {format_instant(start, city.timezone_id, Granularity.TIME, hour12)}"
            f" - {format_instant(end, city.timezone_id, Granularity.TIME, hour12)}"
        )
    if result.overlap_start is not None and result.overlap_end is not None:
        print(
            f"Overlap (UTC): {format_instant(result.overlap_start, 'UTC', Granularity.TIME, hour12)}"
            f" - {format_instant(result.overlap_end, 'UTC', Granularity.TIME, hour12)}"
            f" ({format_duration(result.duration_minutes)})"
        )
    for recommendation in result.recommendations:
        print(f"- {recommendation}")


def run_travel(
    config: WorldClockConfig, catalog: CityCatalog, options: argparse.Namespace
) -> None:
    """Print a travel plan."""
    departure = catalog.resolve(str(getattr(options, "departure")))
    arrival = catalog.resolve(str(getattr(options, "arrival")))
    wall_time = parse_wall_time(str(getattr(options, "depart")))
    flight_minutes = parse_flight_duration(str(getattr(options, "duration")))

    plan = plan_trip(
        departure,
        arrival,
        utc_now() if wall_time is None else wall_time,
        flight_minutes,
    )

    hour12 = config.display.hour12
    print(
        f"Depart {departure.name}: "
        f"{format_instant(plan.departure_instant, departure.timezone_id, Granularity.DATETIME, hour12)}"
    )
    print(
        f"Arrive {arrival.name}: "
        f"{format_instant(plan.arrival_instant, arrival.timezone_id, Granularity.DATETIME, hour12)}"
    )
    print(f"Flight time: {format_duration(plan.flight_minutes)}")
    print(f"{arrival.name} is {plan.formatted_delta} of {departure.name}")
    print(f"Jet lag: {plan.jet_lag.value}")
    for recommendation in plan.recommendations:
        print(f"- {recommendation}")


def run_meet(
    config: WorldClockConfig, catalog: CityCatalog, options: argparse.Namespace
) -> None:
    """Print suggested meeting slots."""
    cities: list[City] = [catalog.resolve(name) for name in getattr(options, "cities", [])]
    duration: int | None = getattr(options, "duration", None)

    slots = suggest_meeting_times(
        cities,
        parse_date(getattr(options, "date", None)),
        hours=configured_working_hours(config),
        duration_minutes=duration or config.meetings.duration_minutes,
        step_minutes=config.meetings.step_minutes,
        limit=config.meetings.max_suggestions,
    )

    if not slots:
        print("No meeting time fits everyone's working hours.")
        print("Try fewer cities or wider working hours.")
        return

    hour12 = config.display.hour12
    style = config.display.timestamp_format
    for slot in slots:
        local = ", ".join(
            f"{entry.city.name} {entry.formatted(hour12)}" for entry in slot.local_times
        )
        print(f"{format_instant(slot.start, 'UTC', Granularity.TIME, hour12)} UTC: {local}")
        print(f"  share: {slot.discord_timestamp(style)}")


COMMANDS: dict[str, Callable[[WorldClockConfig, CityCatalog, argparse.Namespace], None]] = {
    "clock": run_clock,
    "convert": run_convert,
    "dst": run_dst,
    "overlap": run_overlap,
    "travel": run_travel,
    "meet": run_meet,
}


def load_configuration(config_path: Path) -> WorldClockConfig:
    """
    Load configuration, translating loader failures into ConfigurationError.

    Raises:
        ConfigurationError: If the file is unreadable or invalid
    """
    try:
        return ConfigManager.load_or_default(config_path)
    except (yaml.YAMLError, PydanticValidationError, ValueError, OSError) as e:
        raise ConfigurationError(
            f"Failed to load configuration from {config_path}: {e}",
            user_message=f"Configuration file {config_path} is invalid: {e}",
        ) from e


def run_command(parsed_args: ParsedArgs) -> None:
    """
    Load configuration and run the selected subcommand.

    Raises:
        WorldClockError: For invalid input, configuration or timezones
    """
    config = load_configuration(parsed_args.config_file)
    apply_log_level(config.system.log_level)

    catalog = CityCatalog.from_config(config)
    handler = COMMANDS[parsed_args.command]

    logger.info(f"Running command '{parsed_args.command}'")
    handler(config, catalog, parsed_args.options)


def main(argv: list[str] | None = None) -> int:
    """
    Run the WorldClock command line.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Process exit status
    """
    parsed_args = parse_arguments(argv)
    ensure_directories_exist(parsed_args)
    get_path_config().set_paths(parsed_args.log_folder)

    setup_logging(verbose=parsed_args.verbose)

    try:
        run_command(parsed_args)
    except WorldClockError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e.user_message}", file=sys.stderr)
        return 1

    return 0
