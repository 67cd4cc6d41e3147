"""Public exports for the :mod:`app.ui` package."""

from __future__ import annotations

from .nav import go, page_param
from .sidebar import build_sidebar, compute_initials

__all__ = [
    "build_sidebar",
    "compute_initials",
    "go",
    "page_param",
]
