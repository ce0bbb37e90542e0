"""Traversal drivers for applying windows to iterables.

Architecture:
    - traversal.py: loop-protocol drivers (iter/collect/paginate, sync and async)
    - telemetry.py: structured logging for completed traversals
"""

from __future__ import annotations

from .traversal import (
    WindowResult,
    acollect_window,
    aiter_window,
    apaginate,
    collect_window,
    iter_window,
    paginate,
)

__all__ = [
    "WindowResult",
    "iter_window",
    "aiter_window",
    "collect_window",
    "acollect_window",
    "paginate",
    "apaginate",
]
