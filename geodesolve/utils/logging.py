"""Logging utility for geodesolve"""

__all__ = ['LOGGER', 'log_level']

from contextlib import contextmanager
import logging
from typing import Iterator, Union

LOGGER = logging.getLogger('geodesolve')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)


@contextmanager
def log_level(level: Union[int, str]) -> Iterator[logging.Logger]:
    """
    Temporarily changes the level of the geodesolve logger, e.g. to see the debug
    messages emitted when inputs are adjusted:

        with log_level(logging.DEBUG):
            WGS84.direct(90., 0., 0., 1000.)

    Args:
        level:
            A logging level, as an int or a level name

    Yields:
        The geodesolve logger
    """
    previous = LOGGER.level
    LOGGER.setLevel(level)
    try:
        yield LOGGER
    finally:
        LOGGER.setLevel(previous)
