"""Configuration manager for WorldClock.

This module provides functionality for loading, validating, and saving
YAML configuration files with Pydantic model validation.
"""

import logging
import tempfile
from pathlib import Path

import yaml

from ..config.schema import WorldClockConfig


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Configuration manager for handling YAML config files with Pydantic validation.

    Provides methods for loading, saving, and validating configuration files
    while ensuring atomic writes.
    """

    @staticmethod
    def load_config(config_path: Path) -> WorldClockConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            WorldClockConfig: Validated configuration object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML syntax is invalid
            ValueError: If the file does not contain a mapping
            pydantic.ValidationError: If the configuration fails validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ValueError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        parsed_data = ConfigManager._parse_config_data(config_data)
        return WorldClockConfig.model_validate(parsed_data)

    @staticmethod
    def _parse_config_data(config_data: dict[str, object]) -> dict[str, object]:
        """
        Normalize shorthand values before validation.

        City entries may be written as a bare IANA identifier, which becomes
        a city named after the zone's last path component.

        Args:
            config_data: Raw configuration data from YAML

        Returns:
            dict[str, object]: Parsed configuration data
        """
        parsed_data = config_data.copy()

        for key, value in config_data.items():
            match key:
                case "cities":
                    match value:
                        case list():
                            parsed_data[key] = [
                                ConfigManager._parse_city_entry(entry)
                                for entry in value  # pyright: ignore[reportUnknownVariableType]
                            ]
                        case _:
                            parsed_data[key] = value

                case _:
                    parsed_data[key] = value

        return parsed_data

    @staticmethod
    def _parse_city_entry(entry: object) -> object:
        match entry:
            case str() if "/" in entry:
                return {
                    "name": entry.rsplit("/", 1)[-1].replace("_", " "),
                    "timezone": entry,
                }
            case _:
                return entry

    @staticmethod
    def load_or_default(config_path: Path) -> WorldClockConfig:
        """
        Load configuration, falling back to defaults when the file is absent.

        Raises:
            yaml.YAMLError: If the YAML syntax is invalid
            pydantic.ValidationError: If the configuration fails validation
        """
        if not config_path.exists():
            logger.info(f"No configuration file at {config_path}, using defaults")
            return WorldClockConfig()
        return ConfigManager.load_config(config_path)

    @staticmethod
    def save_config(config: WorldClockConfig, config_path: Path) -> None:
        """
        Save configuration to a YAML file with atomic operation.

        Args:
            config: Configuration object to save
            config_path: Path where to save the configuration

        Raises:
            OSError: If file operations fail
        """
        config_dict = config.model_dump()

        content_to_write = yaml.safe_dump(
            config_dict,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )

        # Atomic save operation using temporary file
        temp_file = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=config_path.parent,
                prefix=f".{config_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                _ = temp_file.write(content_to_write)
                temp_file.flush()
                temp_path = Path(temp_file.name)

            _ = temp_path.replace(config_path)

        except Exception as e:
            if temp_file and Path(temp_file.name).exists():
                Path(temp_file.name).unlink(missing_ok=True)
            raise OSError(f"Failed to save configuration to {config_path}: {e}") from e

        logger.info(f"Configuration saved to {config_path}")
