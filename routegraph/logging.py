"""Logging setup shared by every routegraph module.

All package loggers hang off the ``routegraph`` logger, which owns a single
stdout handler. Modules obtain theirs with ``get_logger(__name__)``; the CLI
picks a level from its ``--verbose``/``--quiet`` flags via ``level_for_flags``
and applies it with ``set_global_log_level``.

Algorithms report at DEBUG (relaxations, result counts) and the zero-weight
hop ceiling is reported at WARNING, so the default INFO level keeps normal
runs quiet.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "routegraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the package handler on the ``routegraph`` logger.

    Runs once per process (or per ``reset_logging``); later calls are no-ops.

    Args:
        level: Initial level of the package logger.
        format_string: Record format, ``DEFAULT_FORMAT`` when omitted.
        handler: Destination handler, a stdout ``StreamHandler`` when omitted.
    """
    global _configured
    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring the package logger first."""
    setup_root_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def level_for_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level.

    ``verbose`` wins when both are set.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def reset_logging() -> None:
    """Drop the package handler so the next call reconfigures it. Used by tests."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
