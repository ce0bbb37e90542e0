"""Core components."""

from .exceptions import InvalidWindowError, WindowError
from .limit import SINGLE_ITEM, UNLIMITED, Limit, Window

__all__ = [
    "Limit",
    "Window",
    "UNLIMITED",
    "SINGLE_ITEM",
    "WindowError",
    "InvalidWindowError",
]
