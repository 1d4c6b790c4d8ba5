"""Logging bootstrap shared by the command line entry points."""

import logging
import os


def configure_logging() -> str:
    """Configure root logging from LOG_LEVEL and return the level name used."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level_name = "INFO"
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return level_name
