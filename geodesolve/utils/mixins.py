"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
import threading
from typing import ClassVar, Set


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Mixin class for logging.

    Each subclass gets a logger named after its module and class. The logger is
    bound when the class is created, so instances carry no logging state and stay
    safe to share between threads.
    """
    logger: ClassVar[logging.Logger]

    _WARNED_ONCE: ClassVar[Set[str]] = set()
    _WARNED_LOCK = threading.Lock()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        module_name = cls.__module__
        logstr = cls.__name__ if module_name == 'builtins' else f'{module_name}.{cls.__name__}'
        cls.logger = logging.getLogger(logstr)

    def warn_once(self, msg, *args, **kwargs):
        """Logs a warning only once per message, across all subclasses and threads"""
        with self._WARNED_LOCK:
            if msg in self._WARNED_ONCE:
                return
            self._WARNED_ONCE.add(msg)

        self.logger.warning(msg, *args, **kwargs)
