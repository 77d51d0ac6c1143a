"""Defines the :class:`.Logger` class."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "oppolzer"
"""``str``: name of the top-level package log record."""


class Logger:
    """Wraps a :class:`logging.Logger` whose handler follows the ``logging`` config section.

    Log files are named ``<name>_<time stamp>.log`` and rotate once they reach ``MaxFileSize``.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Attach a handler to the named log record, unless one is already attached.

        Args:
            name (``str``): name of the log record, also used as the log file prefix
            level (``int``, optional): minimum level published. Defaults to ``logging.Level``.
            path (``str``, optional): directory for log files, or ``"stdout"``. Defaults to
                ``logging.OutputLocation``.
            allow_multiple_handlers (``bool``, optional): attach a handler even if one exists.
                Defaults to ``logging.AllowMultipleHandlers``.
        """
        log_config = BehavioralConfig.getConfig().logging
        if not level:
            level = log_config.Level
        if not path:
            path = log_config.OutputLocation
        if not allow_multiple_handlers:
            allow_multiple_handlers = log_config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        if self.logger.handlers and allow_multiple_handlers is not True:
            return

        if path == "stdout":
            handler = logging.StreamHandler(sys.stdout)
        else:
            if not exists(path):
                self.logger.info(f"Creating log directory {path!r}")
                makedirs(path)

            handler = RotatingFileHandler(
                join(path, f"{name}_{pathSafeTime()}.log"),
                maxBytes=log_config.MaxFileSize,
                backupCount=log_config.MaxFileCount,
            )

        handler.setFormatter(logging.Formatter("%(asctime)s - %(module)s - %(levelname)s - %(message)s"))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _oppolzerLog(message: str, level: int):
    """Log a message to the top-level log record.

    This provides a simple, easy one-liner that doesn't require pre-initializing a logger object.
    The primary use case is for simple functions that need to log messages.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.log(msg=message, level=level)


def oppolzerLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record.

    See Also:
        :func:`._oppolzerLog`
    """
    _oppolzerLog(message, level=logging.CRITICAL)


def oppolzerLogError(message: str):
    """Log a ERROR message to the top-level log record.

    See Also:
        :func:`._oppolzerLog`
    """
    _oppolzerLog(message, level=logging.ERROR)


def oppolzerLogWarning(message: str):
    """Log a WARNING message to the top-level log record.

    See Also:
        :func:`._oppolzerLog`
    """
    _oppolzerLog(message, level=logging.WARNING)


def oppolzerLogInfo(message: str):
    """Log a INFO message to the top-level log record.

    See Also:
        :func:`._oppolzerLog`
    """
    _oppolzerLog(message, level=logging.INFO)


def oppolzerLogDebug(message: str):
    """Log a DEBUG message to the top-level log record.

    See Also:
        :func:`._oppolzerLog`
    """
    _oppolzerLog(message, level=logging.DEBUG)
