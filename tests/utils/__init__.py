"""
Test utilities package for WorldClock tests.

## Available Modules

### test_helpers.py
- `create_temp_config_file()`: Context manager for temporary YAML config files
- `create_temp_directory()`: Context manager for temporary directories
"""

from .test_helpers import create_temp_config_file, create_temp_directory

__all__ = [
    "create_temp_config_file",
    "create_temp_directory",
]
