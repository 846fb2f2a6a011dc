"""
Logging setup.

One place to configure handlers so the CLI and scripts log the same way.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None
) -> None:
    """
    Configure root logging to stdout.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses DEFAULT_FORMAT if None)

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format=format_string or DEFAULT_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger for a module (typically called with __name__)."""
    return logging.getLogger(name)
