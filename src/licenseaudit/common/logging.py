"""Logging setup for verification runs."""

from __future__ import annotations

import logging
from typing import Final

# Per-request INFO lines from the HTTP stack drown out the per-authority summaries.
NOISY_LOGGERS: Final[tuple[str, ...]] = ("httpx", "httpcore", "httpx_retries")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger with a terse format.

    Pass ``force=True`` to reconfigure when pytest has already installed handlers.
    HTTP client loggers are held at WARNING unless ``level`` is DEBUG.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    http_level = level if level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
