from __future__ import annotations

import logging
import warnings
from typing import Any

LOGGER_ID = "cubicseg"
LOG_FORMAT = "%(asctime)-24s|%(levelname)-9s|%(name)-30s|%(message)s"
cubicseg_logger = logging.getLogger(LOGGER_ID)
_debug_handler: logging.Handler | None = None


class CubicSegError(Exception):
    """
    Generic cubicseg error.
    """

    pass


class CubicSegValueError(ValueError):
    """
    Value error specific to cubicseg.
    """

    pass


class DegenerateSegmentError(CubicSegValueError):
    """
    Raised for a segment whose endpoints share the same independent coordinate,
    when degenerate segment checks are enabled.
    """

    pass


def create_warning(msg: str, category: Any = None) -> None:
    """
    Helper function for cubicseg modules to create warnings.

    Args:
        msg: message to be displayed
        category: Category of warning to be issued. See `warnings` documentation for more details. Defaults to None.
    """
    warnings.warn(msg, category=category, stacklevel=2)


def show_segment_messages(handler: logging.Handler | None = None, level: int = logging.DEBUG) -> logging.Handler:
    """
    Shows the messages of the polynomial factories, most notably the one for segments with ``dx == 0``
    whose coefficients come out non-finite. The package only logs at debug level, so nothing is shown
    unless this is called.

    The handler is attached to the ``cubicseg`` logger only, the root logger is left alone. Calling this
    again replaces the handler installed before.

    Args:
        handler: handler receiving the messages, optional. Defaults to a ``sys.stderr`` handler using ``LOG_FORMAT``.
        level: log level of the ``cubicseg`` logger and the handler. Defaults to ``logging.DEBUG``.

    Returns:
        The installed handler.
    """
    global _debug_handler
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _debug_handler is not None:
        cubicseg_logger.removeHandler(_debug_handler)
    handler.setLevel(level)
    cubicseg_logger.addHandler(handler)
    cubicseg_logger.setLevel(level)
    _debug_handler = handler
    cubicseg_logger.debug(f"Showing cubicseg messages at level {logging.getLevelName(level)}.")
    return handler


def hide_segment_messages() -> None:
    """
    Removes the handler installed by :func:`show_segment_messages` and resets the ``cubicseg`` logger level.
    """
    global _debug_handler
    if _debug_handler is not None:
        cubicseg_logger.removeHandler(_debug_handler)
        _debug_handler = None
    cubicseg_logger.setLevel(logging.NOTSET)
