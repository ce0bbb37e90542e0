"""Unit tests for page request and page models."""

from __future__ import annotations

import pydantic
import pytest

from laakhay.window import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, InvalidWindowError, Window
from laakhay.window.models import Page, PageRequest
from laakhay.window.runtime import WindowResult


class TestPageRequest:
    """Test PageRequest validation and conversion."""

    def test_defaults(self):
        """Test default offset and page size."""
        request = PageRequest()
        assert request.offset == 0
        assert request.limit == DEFAULT_PAGE_SIZE
        assert request.to_window() == Window(0, DEFAULT_PAGE_SIZE)

    def test_parse_query_values(self):
        """Test parsing string values as sent in a query string."""
        request = PageRequest.parse({"offset": "50", "limit": "25"})
        assert request.to_window() == Window(50, 25)

    def test_parse_rejects_negative_offset(self):
        """Test that a negative offset is rejected rather than clamped."""
        with pytest.raises(InvalidWindowError) as exc_info:
            PageRequest.parse({"offset": -1})
        assert exc_info.value.field == "offset"
        assert exc_info.value.value == -1
        assert isinstance(exc_info.value.__cause__, pydantic.ValidationError)

    def test_parse_rejects_oversized_limit(self):
        """Test that limit is bounded by the configured max page size."""
        with pytest.raises(InvalidWindowError, match="Invalid page request") as exc_info:
            PageRequest.parse({"limit": MAX_PAGE_SIZE + 1})
        assert exc_info.value.field == "limit"

    def test_invalid_window_error_is_value_error(self):
        """Test that callers catching ValueError also catch request errors."""
        with pytest.raises(ValueError):
            PageRequest.parse({"limit": 0})

    def test_from_page(self):
        """Test converting a page number into offset and limit."""
        request = PageRequest.from_page(4, 10)
        assert request.offset == 30
        assert request.limit == 10

    def test_from_page_rejects_page_zero(self):
        """Test that page numbers start at 1."""
        with pytest.raises(InvalidWindowError):
            PageRequest.from_page(0)

    def test_frozen(self):
        """Test that requests are immutable."""
        request = PageRequest()
        with pytest.raises(pydantic.ValidationError):
            request.offset = 10


class TestPage:
    """Test Page model behavior."""

    def test_next_offset(self):
        """Test next offset for a page with more items."""
        page = Page(items=["a", "b"], offset=4, limit=2, has_more=True)
        assert page.next_offset == 6

    def test_no_next_offset_on_last_page(self):
        """Test next offset for the last page."""
        page = Page(items=["a"], offset=4, limit=2, has_more=False)
        assert page.next_offset is None

    def test_from_result(self):
        """Test building a page from a collected window."""
        result = WindowResult(
            window=Window(10, 5),
            items=[10, 11, 12, 13, 14],
            scanned=16,
            has_more=True,
        )
        page = Page.from_result(result)
        assert page.items == [10, 11, 12, 13, 14]
        assert page.offset == 10
        assert page.limit == 5
        assert page.next_offset == 15
