"""
WorldClock - timezone conversion, world clock and meeting planning utilities.
"""

import logging
import sys

from .main import main as cli_main


logger = logging.getLogger(__name__)


def main() -> None:
    """Console entry point that runs the command line and exits with its status."""
    try:
        exit_code = cli_main()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        exit_code = 130
    sys.exit(exit_code)


__all__ = ["main"]
