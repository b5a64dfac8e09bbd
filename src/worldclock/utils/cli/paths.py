"""
Global path management for WorldClock.

This module provides a centralized way to access application paths that are
configured via command-line arguments.
"""

from pathlib import Path


class PathConfig:
    """Singleton class to manage application paths."""

    _instance: "PathConfig | None" = None
    _initialized: bool = False

    def __new__(cls) -> "PathConfig":
        """Ensure only one instance of PathConfig exists."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize path configuration (only runs once)."""
        if not self._initialized:
            self._log_folder: Path = Path("logs")
            PathConfig._initialized = True

    def set_paths(self, log_folder: Path) -> None:
        """
        Set the application paths.

        This should be called once at startup after parsing command-line
        arguments.
        """
        self._log_folder = log_folder

    @property
    def log_folder(self) -> Path:
        """Get the log folder path."""
        return self._log_folder


_path_config = PathConfig()


def get_path_config() -> PathConfig:
    """
    Get the global PathConfig instance.

    Returns:
        The singleton PathConfig instance
    """
    return _path_config
