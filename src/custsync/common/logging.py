"""Shared logging helpers for custsync."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(
    *,
    level: int | None = None,
    verbose: bool = False,
    force: bool = False,
) -> None:
    """Initialise the root logger once with CLI-friendly defaults.

    ``level`` wins over ``verbose``; ``verbose`` switches the default INFO level to
    DEBUG so the individual synchronization stages become visible. Pass
    ``force=True`` to reconfigure during tests.
    """

    effective_level = level if level is not None else (logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(
        level=effective_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
