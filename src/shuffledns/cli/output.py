"""Logging configuration for the ``shuffledns`` logger hierarchy.

Every module logs through ``logging.getLogger(__name__)``; this module
attaches the single stderr handler and picks the level from the
``--silent`` and ``-v`` flags.
"""

from __future__ import annotations

import logging
import sys

from shuffledns.cli.console import console

LOGGER_NAME: str = "shuffledns"

_handler: logging.Handler | None = None


def _build_handler(no_color: bool) -> logging.Handler:
    """Return a Rich handler when Rich is installed, else a plain one."""
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        return handler

    return RichHandler(
        console=Console(stderr=True, no_color=no_color),
        show_time=False,
        show_path=False,
        markup=False,
    )


def level_for(*, silent: bool, verbose: bool) -> int:
    """Map the output flags to a logging level.  Silent wins."""
    if silent:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.INFO


def configure_output(
    *,
    silent: bool = False,
    verbose: bool = False,
    no_color: bool = False,
) -> logging.Logger:
    """Install the stderr handler on the package logger.

    Calling this again replaces the previous handler instead of adding
    a second one.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = _build_handler(no_color)
    logger.addHandler(_handler)
    logger.setLevel(level_for(silent=silent, verbose=verbose))

    console.no_color = no_color
    return logger
