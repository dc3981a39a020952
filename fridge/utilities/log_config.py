"""Centralized logging setup.

Console output only; call setup_logging() once at app startup.
"""
import logging
from typing import Optional

from fridge.utilities.config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_configured = False


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the root logger (idempotent)."""
    global _configured
    root = logging.getLogger()
    root.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        _configured = True
    # uvicorn access lines are noisy at DEBUG
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    return root
