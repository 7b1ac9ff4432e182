"""Centralized logging configuration.

Every module logs through ``logging.getLogger(__name__)``; this module only
installs the handler once at application startup.

Log Format:
    2026-10-18 10:15:30 [INFO    ] verticals.bookstore.checkout - ISBN 111 unavailable
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)-8s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def setup_logging(log_level: Optional[str | int] = None) -> None:
    """Install a console handler on the root logger.

    Safe to call more than once; only the first call adds a handler; later
    calls just update the level.
    """
    global _configured

    level = log_level or os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger()
    root.setLevel(level)

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    _configured = True
