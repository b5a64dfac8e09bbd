"""
Tests for the command-line entry point.

This module tests logging setup, argument helpers, and the subcommands run
end to end through main() with temporary configuration and log folders.
"""

import logging
from collections.abc import Generator
from datetime import date, datetime
from pathlib import Path

import pytest

from src.worldclock.config.schema import WorldClockConfig
from src.worldclock.main import (
    ERROR_LOG_FILE,
    LOG_FILE,
    cleanup_old_logs,
    configured_working_hours,
    main,
    parse_date,
    parse_wall_time,
    rotate_logs_on_startup,
)
from src.worldclock.utils.core.exceptions import ValidationError
from tests.utils.test_helpers import create_temp_config_file


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Restore root logger handlers replaced by setup_logging."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level

    yield

    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


def run_main(tmp_path: Path, *args: str, config_file: Path | None = None) -> int:
    """Run main() with temporary paths."""
    return main(
        [
            "--config-file",
            str(config_file or tmp_path / "worldclock.yml"),
            "--log-folder",
            str(tmp_path / "logs"),
            *args,
        ]
    )


class TestArgumentHelpers:
    """Test the value parsers used by subcommands."""

    def test_parse_wall_time(self) -> None:
        """Test ISO-like date and time parsing."""
        assert parse_wall_time("2024-01-15 09:30") == datetime(2024, 1, 15, 9, 30)
        assert parse_wall_time("2024-01-15T09:30") == datetime(2024, 1, 15, 9, 30)
        assert parse_wall_time(" NOW ") is None

    def test_parse_wall_time_invalid(self) -> None:
        """Test rejected date and time values."""
        with pytest.raises(ValidationError):
            _ = parse_wall_time("tomorrow at nine")

    def test_parse_date(self) -> None:
        """Test optional date parsing."""
        assert parse_date(None) is None
        assert parse_date("2024-01-15") == date(2024, 1, 15)
        with pytest.raises(ValidationError):
            _ = parse_date("15/01/2024")

    def test_configured_working_hours(self, custom_config: WorldClockConfig) -> None:
        """Test configured hours and overrides."""
        hours = configured_working_hours(custom_config)
        assert hours.duration_minutes == 570

        overridden = configured_working_hours(custom_config, end="12:30")
        assert overridden.duration_minutes == 240


class TestLogFiles:
    """Test log rotation helpers."""

    def test_rotate_logs_on_startup(self, tmp_path: Path) -> None:
        """Test that non-empty logs are renamed and empty ones kept."""
        _ = (tmp_path / LOG_FILE).write_text("previous run\n", encoding="utf-8")
        _ = (tmp_path / ERROR_LOG_FILE).touch()

        rotate_logs_on_startup(tmp_path)

        assert not (tmp_path / LOG_FILE).exists()
        assert len(list(tmp_path.glob(f"{LOG_FILE}.*"))) == 1
        assert (tmp_path / ERROR_LOG_FILE).exists()

    def test_cleanup_old_logs(self, tmp_path: Path) -> None:
        """Test that only the newest rotated logs are kept."""
        for index in range(5):
            _ = (tmp_path / f"{LOG_FILE}.2024010{index}_000000").write_text("x", encoding="utf-8")

        cleanup_old_logs(tmp_path, max_files=2)

        assert len(list(tmp_path.glob(f"{LOG_FILE}.*"))) == 2


@pytest.mark.usefixtures("restore_logging")
class TestMain:
    """Test subcommands end to end."""

    def test_convert(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a conversion between raw IANA identifiers."""
        exit_code = run_main(
            tmp_path,
            "convert",
            "2024-01-15 07:00",
            "--from",
            "America/New_York",
            "--to",
            "Asia/Kolkata",
        )

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "New York: Mon, Jan 15, 2024, 07:00:00 AM (UTC-5)" in output
        assert "Kolkata: Mon, Jan 15, 2024, 05:30:00 PM (UTC+5:30)" in output
        assert "Kolkata is 10 hours 30 minutes ahead of New York" in output

    def test_convert_uses_configured_display(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test that display settings and the home zone are honoured."""
        config_data = {
            "home_timezone": "Europe/London",
            "display": {"hour12": False, "granularity": "time"},
        }
        with create_temp_config_file(config_data) as config_file:
            exit_code = run_main(
                tmp_path, "convert", "2024-01-15 12:00", "--to", "Tokyo", config_file=config_file
            )

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "London: 12:00:00 (UTC+0)" in output
        assert "Tokyo: 21:00:00 (UTC+9)" in output

    def test_clock_with_named_cities(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the clock in the requested order."""
        exit_code = run_main(tmp_path, "clock", "Tokyo", "London")

        lines = capsys.readouterr().out.splitlines()
        assert exit_code == 0
        assert len(lines) == 2
        assert lines[0].startswith("Tokyo")
        assert lines[1].startswith("London")

    def test_dst(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test DST information for a zone without daylight saving."""
        exit_code = run_main(tmp_path, "dst", "Asia/Kolkata")

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Kolkata (Asia/Kolkata): UTC+5:30" in output
        assert "Observes daylight saving: no" in output

    def test_overlap(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the overlap report."""
        exit_code = run_main(tmp_path, "overlap", "New York", "London", "--date", "2024-01-15")

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Overlap (UTC): 02:00:00 PM - 05:00:00 PM (3h 0m)" in output
        assert "- Good overlap for collaboration and meetings." in output

    def test_travel(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the travel plan report."""
        exit_code = run_main(
            tmp_path,
            "travel",
            "New York",
            "London",
            "--depart",
            "2024-01-15 18:00",
            "--duration",
            "7h",
        )

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Arrive London: Tue, Jan 16, 2024, 06:00:00 AM" in output
        assert "London is 5 hours ahead of New York" in output
        assert "Jet lag: mild" in output

    def test_meet(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test meeting suggestions with shareable timestamps."""
        exit_code = run_main(tmp_path, "meet", "London", "New York", "--date", "2024-01-15")

        output = capsys.readouterr().out
        assert exit_code == 0
        assert "02:00:00 PM UTC: London 02:00:00 PM, New York 09:00:00 AM" in output
        assert "  share: <t:1705327200:F>" in output

    def test_meet_without_shared_hours(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test the message when nothing fits."""
        exit_code = run_main(tmp_path, "meet", "Tokyo", "New York", "--date", "2024-01-15")

        assert exit_code == 0
        assert "No meeting time fits everyone's working hours." in capsys.readouterr().out

    def test_invalid_timezone(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that unknown zones are reported without a traceback."""
        exit_code = run_main(tmp_path, "dst", "Mars/Base")

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err

    def test_invalid_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that invalid configuration files fail cleanly."""
        with create_temp_config_file({"home_timezone": "Nowhere/Nothing"}) as config_file:
            exit_code = run_main(tmp_path, "clock", config_file=config_file)

        assert exit_code == 1
        assert "Configuration file" in capsys.readouterr().err

    def test_log_file_written(self, tmp_path: Path) -> None:
        """Test that the application log is created."""
        _ = run_main(tmp_path, "dst", "UTC")

        assert (tmp_path / "logs" / LOG_FILE).exists()
