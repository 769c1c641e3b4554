"""
Logging setup for the example entry points.

- Routes all records to stderr so stdout carries only the example output.
- Level and format come from config.settings (LOG_LEVEL / LOG_FORMAT).
"""
import logging
import sys

from config.settings import settings


def configure_logging(level: str | None = None):
    """Configure the root logger once; later calls only adjust the level."""
    level_name = (level or settings.LOG_LEVEL).upper()
    numeric = getattr(logging, level_name, None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown LOG_LEVEL: {level_name}")

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=numeric, format=settings.LOG_FORMAT, stream=sys.stderr)
    else:
        root.setLevel(numeric)
    return root
