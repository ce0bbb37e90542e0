"""Result windowing (skip + limit) over arbitrary sequential data.

A ``Limit`` processes a stream of items while restricting the output to a
window described by a number of items to skip and a maximum number of items
to pass on. A maximum of ``None`` (or 0) disables the upper bound.

Paging through results with a page size of 25 and showing the 2nd page::

    limit = Limit(25, 25)  # skip the first page, keep up to 25 items
    result = []
    for row in rows:
        limit.advance()
        if limit.should_output():
            result.append(row)
        # enough items collected, stop pulling from the source
        if not limit.should_continue():
            break

A ``Limit`` is mutable and owned by exactly one traversal. Reusable window
descriptions are expressed as frozen ``Window`` values, which hand out a
fresh ``Limit`` per traversal.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .exceptions import InvalidWindowError


@dataclass(frozen=True)
class Window:
    """Immutable description of a result window.

    Attributes:
        items_to_skip: Number of leading items to discard
        max_items: Maximum number of items to keep (None or 0 = unbounded)
    """

    items_to_skip: int = 0
    max_items: int | None = None

    def limiter(self) -> Limit:
        """Create a fresh limiter for a single traversal."""
        return Limit(self.items_to_skip, self.max_items)

    @classmethod
    def for_page(cls, page: int, page_size: int) -> Window:
        """Build the window covering a 1-based page.

        Args:
            page: Page number, starting at 1
            page_size: Number of items per page

        Returns:
            Window skipping all previous pages and keeping ``page_size`` items

        Raises:
            InvalidWindowError: If page or page_size is less than 1
        """
        if page < 1:
            raise InvalidWindowError("page must be >= 1", field="page", value=page)
        if page_size < 1:
            raise InvalidWindowError(
                "page_size must be >= 1", field="page_size", value=page_size
            )
        return cls(items_to_skip=(page - 1) * page_size, max_items=page_size)


# No skipping, no upper limit
UNLIMITED = Window()

# Only the first item is accepted
SINGLE_ITEM = Window(max_items=1)


class Limit:
    """Stateful window limiter driven once per candidate item.

    The output budget carries a +1 lookahead bias: after the last item of the
    window has been advanced past, ``should_continue()`` still holds once more,
    and only the following ``advance()`` closes the window. Reaching that
    point proves at least one item exists beyond the window.
    """

    __slots__ = ("_items_to_skip", "_max_items", "_skip_remaining", "_output_budget", "_skipped")

    def __init__(self, items_to_skip: int = 0, max_items: int | None = None) -> None:
        """Initialize limiter.

        Args:
            items_to_skip: Number of items to skip, negative values are treated as 0
            max_items: Max number of items to output, None or <= 0 disables limiting
        """
        self._items_to_skip = items_to_skip if items_to_skip > 0 else 0
        self._skip_remaining = self._items_to_skip
        self._skipped = False
        if max_items is not None and max_items > 0:
            self._max_items = max_items
            self._output_budget: int | None = max_items + 1
        else:
            self._max_items = 0
            self._output_budget = None

    @classmethod
    def unlimited(cls) -> Limit:
        """Create a limiter which neither skips nor limits."""
        return UNLIMITED.limiter()

    @classmethod
    def single_item(cls) -> Limit:
        """Create a limiter which only accepts the first item."""
        return SINGLE_ITEM.limiter()

    def advance(self) -> None:
        """Notify the limiter that the next item is being processed.

        Must be called before ``should_output()`` or ``should_continue()`` are
        queried for that item.
        """
        if self._skip_remaining > 0:
            self._skip_remaining -= 1
            self._skipped = True
            return
        self._skipped = False
        if self._output_budget is not None:
            self._output_budget -= 1

    def should_output(self) -> bool:
        """Determine if the current item is part of the window."""
        if self._skipped or self._skip_remaining > 0:
            return False
        return self._output_budget is None or self._output_budget > 0

    def should_continue(self) -> bool:
        """Determine if further items can still end up in the window."""
        return self._output_budget is None or self._output_budget > 0

    def as_predicate(self) -> Callable[[Any], bool]:
        """Convert the limiter into a filter predicate.

        The predicate checks ``should_output()`` first and only advances when
        the item is accepted. It shares this limiter's state, so it can only
        be consumed once.
        """

        def accept(_item: Any) -> bool:
            if self.should_output():
                self.advance()
                return True
            return False

        return accept

    @property
    def items_to_skip(self) -> int:
        """Number of items skipped before the window starts."""
        return self._items_to_skip

    @property
    def max_items(self) -> int:
        """Max number of items to accept, 0 if there is no upper limit."""
        return self._max_items

    @property
    def total_items(self) -> int:
        """Skipped plus accepted items, 0 if there is no upper limit."""
        if self._max_items == 0:
            return 0
        return self._items_to_skip + self._max_items

    @property
    def window(self) -> Window:
        """The window this limiter was created for."""
        return Window(self._items_to_skip, self._max_items or None)

    def __repr__(self) -> str:
        return f"Limit(items_to_skip={self._items_to_skip}, max_items={self._max_items or None})"
