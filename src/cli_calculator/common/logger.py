"""Shared application logger."""
import logging
import sys
from typing import Union


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("cli_calculator")

# Quiet by default so log records do not interleave with the interactive output
if not logger.handlers:
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(logging.WARNING)


def configure_logging(level: Union[int, str]) -> None:
    """
    Set the verbosity of the application logger.

    :param level: Logging level name (e.g. "DEBUG") or numeric value
    """
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
