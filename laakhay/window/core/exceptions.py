"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class WindowError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidWindowError(WindowError, ValueError):
    """Window or page parameters rejected by the validated request surface.

    The core ``Limit`` sanitizes its inputs and never raises this; it is
    raised by page-oriented helpers where a bad page number or page size
    indicates a caller bug rather than something to clamp silently.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.value = value
