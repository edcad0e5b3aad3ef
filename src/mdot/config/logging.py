"""Shared logging helpers for mdot."""

from __future__ import annotations

import logging


def _level_for_verbosity(verbose: int, *, quiet: bool) -> int:
    if quiet:
        return logging.WARNING
    if verbose > 0:
        return logging.DEBUG
    return logging.INFO


def configure_logging(
    *,
    verbose: int = 0,
    quiet: bool = False,
    level: int | None = None,
    force: bool = False,
) -> int:
    """Initialise the root logger for a CLI run and return the chosen level.

    ``verbose`` and ``quiet`` mirror the ``-v``/``-q`` flags; an explicit
    ``level`` wins over both. Records go to stderr, which keeps plan output on
    stdout machine readable.
    """

    effective_level = level if level is not None else _level_for_verbosity(verbose, quiet=quiet)
    logging.basicConfig(
        level=effective_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    return effective_level
