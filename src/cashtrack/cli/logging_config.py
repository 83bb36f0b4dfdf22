"""Logging setup for the command line."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: str = "WARNING") -> None:
    """Send cashtrack log records to stderr at the given level.

    Args:
        level: Level name, case-insensitive (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        force=True,
    )
    # Keep SQL statement logging off at INFO
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)
