"""Structured logging for window traversals.

This module provides telemetry hooks for the traversal drivers, emitting
structured logs for observability. The core ``Limit`` does not log.
"""

from __future__ import annotations

import logging

from ..core.limit import Window

logger = logging.getLogger(__name__)


def log_window_collected(
    *,
    window: Window,
    emitted: int,
    scanned: int,
    has_more: bool,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a window collection.

    Args:
        window: Window that was applied
        emitted: Number of items inside the window
        scanned: Number of upstream items advanced past
        has_more: Whether items exist beyond the window
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "window_collected",
        extra={
            "items_to_skip": window.items_to_skip,
            "max_items": window.max_items,
            "emitted": emitted,
            "scanned": scanned,
            "has_more": has_more,
            "latency_ms": latency_ms,
        },
    )


def log_window_stopped_early(*, window: Window, scanned: int) -> None:
    """Log a traversal that stopped before the upstream source was exhausted."""
    logger.debug(
        "window_stopped_early",
        extra={
            "items_to_skip": window.items_to_skip,
            "max_items": window.max_items,
            "scanned": scanned,
        },
    )
