"""Laakhay Window - skip/limit windowing over sequential data sources."""

from .config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from .core import SINGLE_ITEM, UNLIMITED, InvalidWindowError, Limit, Window, WindowError
from .models import Page, PageRequest
from .runtime import (
    WindowResult,
    acollect_window,
    aiter_window,
    apaginate,
    collect_window,
    iter_window,
    paginate,
)

__all__ = [
    # Core
    "Limit",
    "Window",
    "UNLIMITED",
    "SINGLE_ITEM",
    # Exceptions
    "WindowError",
    "InvalidWindowError",
    # Models
    "Page",
    "PageRequest",
    # Runtime
    "WindowResult",
    "iter_window",
    "aiter_window",
    "collect_window",
    "acollect_window",
    "paginate",
    "apaginate",
    # Config
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
]
