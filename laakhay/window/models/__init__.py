"""Pydantic models for the page request/response surface.

All models are immutable (frozen=True) so a request can be shared between
handlers while each traversal builds its own limiter from it.
"""

from .page import Page, PageRequest

__all__ = [
    "Page",
    "PageRequest",
]
