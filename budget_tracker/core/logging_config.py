"""Logging setup for the API process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single console handler.

    Safe to call more than once; handlers installed by a previous call are
    replaced so application factories used in tests do not stack output.
    """

    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in list(root.handlers):
        if getattr(handler, "_budget_tracker", False):
            root.removeHandler(handler)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    console._budget_tracker = True  # type: ignore[attr-defined]
    root.addHandler(console)

    logging.getLogger(__name__).debug("Logging initialized at level %s", level.upper())
