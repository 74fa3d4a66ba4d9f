"""
Verbosity handling for conversions.

The verbosity level follows the usual PDF renderer convention:
0 = errors, 1 = warnings, 5 = infos. Anything negative silences
everything but critical failures.

Each conversion keeps its verbosity in a context variable, so overlapping
conversions never touch logger levels. Loggers returned by ``get_logger``
drop records below the active conversion's threshold; outside a conversion
they log normally.
"""
import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

VERBOSITY_ERRORS = 0
VERBOSITY_WARNINGS = 1
VERBOSITY_INFOS = 5

_active_verbosity: ContextVar[int | None] = ContextVar("pdftopng_verbosity", default=None)


def verbosity_to_log_level(verbosity: int) -> int:
    if verbosity < VERBOSITY_ERRORS:
        return logging.CRITICAL
    if verbosity < VERBOSITY_WARNINGS:
        return logging.ERROR
    if verbosity < VERBOSITY_INFOS:
        return logging.WARNING
    return logging.INFO


class VerbosityFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        verbosity = _active_verbosity.get()
        if verbosity is None:
            return True
        return record.levelno >= verbosity_to_log_level(verbosity)


_verbosity_filter = VerbosityFilter()


def get_logger(name: str) -> logging.Logger:
    """``logging.getLogger`` whose records honour the active conversion's verbosity."""
    logger = logging.getLogger(name)
    if _verbosity_filter not in logger.filters:
        logger.addFilter(_verbosity_filter)
    return logger


@contextmanager
def apply_verbosity(level: int) -> Iterator[int]:
    """Set the verbosity for the current context (one conversion)."""
    token = _active_verbosity.set(level)
    try:
        yield level
    finally:
        _active_verbosity.reset(token)
