"""Logging configuration for the catalog CLI.

The domain layer never logs; application handlers and repositories use
module-level loggers under the ``catalog`` namespace.  The level comes from
the ``--log-level`` CLI option, else ``CATALOG_LOG_LEVEL``, else WARNING.
"""

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def configure_logging(level_name: str | None = None) -> int:
    """Configure the ``catalog`` logger and return the effective level."""
    name = (level_name or os.getenv("CATALOG_LOG_LEVEL", "WARNING")).upper()
    level = getattr(logging, name, None)
    if not isinstance(level, int):
        level = logging.WARNING

    logger = logging.getLogger("catalog")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False
    return level
