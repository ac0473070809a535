"""Logging setup for wirecross.

Results are printed to stdout, so log records always go to stderr and never
mix with output a caller may parse. Modules get their logger from
:func:`get_logger`; the command line picks the verbosity once through
:func:`configure_logging`.
"""

import logging
import sys

#: Name of the logger every package logger descends from.
ROOT_LOGGER_NAME = "wirecross"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _StderrHandler(logging.StreamHandler):
    """Handler bound to whatever ``sys.stderr`` is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        # The stream is always looked up on sys
        pass


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h, _StderrHandler) for h in root.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(logging.INFO)
        # Propagate so pytest's caplog sees the records
        root.propagate = True
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a package logger that defers to the ``wirecross`` root logger.

    Args:
        name: Logger name, normally ``__name__`` of the calling module.
    """
    _root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map command-line verbosity flags to a logging level.

    ``verbose`` wins over ``quiet`` when both are set.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(verbose: bool = False, quiet: bool = False) -> int:
    """Set the package log level from verbosity flags.

    Returns:
        The level now in effect for every ``wirecross`` logger.
    """
    level = level_for_flags(verbose, quiet)
    root = _root_logger()
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)
    return level
