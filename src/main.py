"""
Main entry point for the unicon application.

This module sets up logging, resolves configuration and hands the command
line over to the CLI.
"""

import sys

from src.utils.config import get_config
from src.utils.logging_config import init_logging
from src.utils.unicon_cli import run


def main():
    """
    Main application entry point.

    Exits with status 0 on success and 1 on any failure.
    """
    # Handler first so configuration warnings are formatted
    init_logging()
    config = get_config()
    init_logging(config.log_level)
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
