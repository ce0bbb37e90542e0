"""Traversal drivers applying a window to sync and async iterables.

These functions run the limiter loop protocol on behalf of the caller:
advance once per upstream item, keep the items inside the window and stop
pulling from the source as soon as the window is closed.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable, Iterator
from dataclasses import dataclass, field
from time import perf_counter
from typing import Generic, TypeVar

from ..core.limit import Limit, Window
from ..models.page import Page, PageRequest
from .telemetry import log_window_collected, log_window_stopped_early

T = TypeVar("T")


@dataclass
class WindowResult(Generic[T]):
    """Result of a collected window.

    Attributes:
        window: Window that was applied
        items: Items inside the window, in upstream order
        scanned: Number of upstream items advanced past
        has_more: Whether at least one item exists beyond the window
    """

    window: Window
    items: list[T] = field(default_factory=list)
    scanned: int = 0
    has_more: bool = False


def _limiter(window: Window | Limit) -> Limit:
    # A Window hands out a fresh limiter; a Limit is consumed as-is
    if isinstance(window, Limit):
        return window
    return window.limiter()


def iter_window(items: Iterable[T], window: Window | Limit) -> Iterator[T]:
    """Yield the items of ``items`` that fall inside ``window``.

    The upstream iterable is not consumed past the first item proving the
    window is closed.
    """
    limit = _limiter(window)
    scanned = 0
    for item in items:
        limit.advance()
        scanned += 1
        if limit.should_output():
            yield item
        if not limit.should_continue():
            log_window_stopped_early(window=limit.window, scanned=scanned)
            return


async def aiter_window(items: AsyncIterable[T], window: Window | Limit) -> AsyncIterator[T]:
    """Async variant of ``iter_window``."""
    limit = _limiter(window)
    scanned = 0
    async for item in items:
        limit.advance()
        scanned += 1
        if limit.should_output():
            yield item
        if not limit.should_continue():
            log_window_stopped_early(window=limit.window, scanned=scanned)
            return


def collect_window(items: Iterable[T], window: Window | Limit) -> WindowResult[T]:
    """Collect the items inside ``window`` along with traversal facts.

    Args:
        items: Upstream items, consumed in order
        window: Window description or a fresh limiter

    Returns:
        WindowResult with the windowed items, scan count and has_more flag
    """
    limit = _limiter(window)
    result: WindowResult[T] = WindowResult(window=limit.window)
    started = perf_counter()
    for item in items:
        limit.advance()
        result.scanned += 1
        if limit.should_output():
            result.items.append(item)
        if not limit.should_continue():
            result.has_more = True
            break
    _log_result(result, started)
    return result


async def acollect_window(items: AsyncIterable[T], window: Window | Limit) -> WindowResult[T]:
    """Async variant of ``collect_window``."""
    limit = _limiter(window)
    result: WindowResult[T] = WindowResult(window=limit.window)
    started = perf_counter()
    async for item in items:
        limit.advance()
        result.scanned += 1
        if limit.should_output():
            result.items.append(item)
        if not limit.should_continue():
            result.has_more = True
            break
    _log_result(result, started)
    return result


def paginate(items: Iterable[T], request: PageRequest) -> Page[T]:
    """Cut one page out of ``items``."""
    return Page.from_result(collect_window(items, request.to_window()))


async def apaginate(items: AsyncIterable[T], request: PageRequest) -> Page[T]:
    """Async variant of ``paginate``."""
    return Page.from_result(await acollect_window(items, request.to_window()))


def _log_result(result: WindowResult[T], started: float) -> None:
    if result.has_more:
        log_window_stopped_early(window=result.window, scanned=result.scanned)
    log_window_collected(
        window=result.window,
        emitted=len(result.items),
        scanned=result.scanned,
        has_more=result.has_more,
        latency_ms=(perf_counter() - started) * 1000.0,
    )
