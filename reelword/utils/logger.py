"""Logging utilities for the reel-word solver.

Every logger handed out lives under the ``reelword`` hierarchy. Search
progress goes to its own ``reelword.progress`` logger so that a long run can
be watched without turning on DEBUG output everywhere else.
"""

from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "reelword"
PROGRESS_LOGGER = f"{PACKAGE_LOGGER}.progress"


def configure_logging(level: int = logging.INFO, show_progress: bool = False) -> None:
    """Configure root logging with a sensible formatter.

    Progress lines are emitted at DEBUG; ``show_progress`` lets them through
    even when ``level`` is higher.
    """

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger(PROGRESS_LOGGER).setLevel(logging.DEBUG if show_progress else level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under ``reelword``, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    name = name or PACKAGE_LOGGER
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def get_progress_logger() -> logging.Logger:
    return get_logger(PROGRESS_LOGGER)
