"""Logger names used across mclisp.

The library only creates loggers; handlers are installed by the driver via
configure_logging so that embedding applications keep control of output.
"""

from __future__ import annotations

import logging
from typing import Optional

from mclisp.config import get_log_level

ROOT = "mclisp"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(component: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT}.{component}")


def configure_logging(level: Optional[int] = None) -> None:
    """Attach a stderr handler to the mclisp root logger (idempotent)."""
    root = logging.getLogger(ROOT)
    root.setLevel(get_log_level() if level is None else level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
