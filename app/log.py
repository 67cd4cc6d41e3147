"""Process-wide logging setup."""

from __future__ import annotations

import logging
import os

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Attach one stream handler to the ``app`` logger (idempotent across reruns)."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    level_name = (level or os.getenv("CLUB_LOG_LEVEL") or "INFO").upper()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    root = logging.getLogger("app")
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))
    root.propagate = False
    _CONFIGURED = True


__all__ = ["configure_logging"]
