"""
analytics/pagination.py

Stateless page windows over a sorted result set, plus the continuation text
an automated caller needs to walk every page and stitch them back together.

Nothing is kept between requests: each page re-runs the filtered query, so
pages are only mutually consistent while the underlying rows don't change.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PageWindow:
    """
    Offset/limit window for one page and its derived totals.
    """

    current_page: int
    page_size: int
    total_count: int
    total_pages: int

    @property
    def skip(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def has_more_results(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def is_final_page(self) -> bool:
        return self.current_page == self.total_pages

    def next_page_instructions(self) -> str | None:
        """Re-invocation directive, present only while more pages remain."""
        if not self.has_more_results:
            return None
        return f"To get the next page of results, call this tool again with page={self.current_page + 1}."

    def merge_instructions(self) -> str | None:
        """Merge directive, present only on the last page of a multi-page result."""
        if self.total_pages <= 1 or not self.is_final_page:
            return None
        return (
            f"This is the final page (page {self.current_page} of {self.total_pages}). "
            "If you retrieved multiple pages, merge all timeSeries arrays from all pages "
            "into one large dataset for analysis. Do not leave out any items from any of "
            "the pages. Do not summarize or aggregate the data unless explicitly asked to do so."
        )


def paginate(total_count: int, page: int, page_size: int) -> PageWindow:
    """
    Build the :class:`PageWindow` for *page* (1-based) of *total_count* rows.

    Pages below 1 are treated as page 1.  A page past the end is a valid,
    empty window (``skip`` beyond the last row, no continuation text).
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}.")
    if total_count < 0:
        raise ValueError(f"total_count must not be negative, got {total_count}.")

    return PageWindow(
        current_page=max(1, page),
        page_size=page_size,
        total_count=total_count,
        total_pages=math.ceil(total_count / page_size),
    )
