"""
Logging setup for the backend.

Modules create their own `logging.getLogger(__name__)`; this only wires
the root handler once at startup.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging. Safe to call more than once."""
    if level is None:
        from marketdesk.core.config import settings

        level = "DEBUG" if settings.debug else settings.log_level

    root = logging.getLogger()
    root.setLevel(level.upper())

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
