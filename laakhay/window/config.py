"""Shared windowing defaults.

Page-oriented helpers read these values; the core ``Limit`` does not, since
it accepts any skip/max pair and sanitizes it.
"""

from __future__ import annotations

# Page size used when a request does not specify one
DEFAULT_PAGE_SIZE = 25

# Upper bound accepted by PageRequest.limit
MAX_PAGE_SIZE = 1000
