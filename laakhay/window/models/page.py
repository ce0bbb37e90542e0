"""Page request and page result models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..core.exceptions import InvalidWindowError
from ..core.limit import Window

if TYPE_CHECKING:
    from ..runtime.traversal import WindowResult

T = TypeVar("T")


class PageRequest(BaseModel):
    """Offset/limit page request.

    A ``limit`` of None requests every item after ``offset``.
    """

    offset: int = Field(default=0, ge=0)
    limit: int | None = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, data: Mapping[str, Any]) -> PageRequest:
        """Validate raw request parameters (e.g. query string values).

        Raises:
            InvalidWindowError: If a field is out of range or not an integer
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or None
            raise InvalidWindowError(
                f"Invalid page request: {error['msg']}",
                field=field,
                value=error.get("input"),
            ) from e

    @classmethod
    def from_page(cls, page: int, page_size: int = DEFAULT_PAGE_SIZE) -> PageRequest:
        """Build a request from a 1-based page number and page size."""
        window = Window.for_page(page, page_size)
        return cls.parse({"offset": window.items_to_skip, "limit": window.max_items})

    def to_window(self) -> Window:
        """Window covering this request."""
        return Window(items_to_skip=self.offset, max_items=self.limit)


class Page(BaseModel, Generic[T]):
    """One page of results.

    ``has_more`` is only true when the traversal actually observed an item
    beyond the page, so clients can stop requesting without a total count.
    """

    items: list[T]
    offset: int = Field(default=0, ge=0)
    limit: int | None = None
    has_more: bool = False

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def next_offset(self) -> int | None:
        """Offset of the following page, None if this is the last one."""
        if not self.has_more:
            return None
        return self.offset + len(self.items)

    @classmethod
    def from_result(cls, result: WindowResult[T]) -> Page[T]:
        """Create a page from a collected window."""
        return cls(
            items=result.items,
            offset=result.window.items_to_skip,
            limit=result.window.max_items,
            has_more=result.has_more,
        )
