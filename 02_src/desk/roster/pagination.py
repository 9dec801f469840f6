"""Fixed-size pagination and the page-selection window."""

import math
from dataclasses import dataclass, field
from typing import Sequence, TypeVar

from ..config import MAX_VISIBLE_PAGES, PAGE_SIZE

T = TypeVar("T")


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    return math.ceil(count / page_size)


def page_slice(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> list[T]:
    """Items shown on 1-based `page`; out-of-range pages are simply empty."""
    page = max(1, page)
    return list(items[(page - 1) * page_size : page * page_size])


def clamp_page(page: int, total: int) -> int:
    return min(max(1, page), max(1, total))


@dataclass
class PageWindow:
    """State of the Prev / 1 2 3 4 / Next control."""

    current: int
    total: int
    pages: list[int] = field(default_factory=list)
    leading_ellipsis: bool = False
    trailing_ellipsis: bool = False

    @property
    def visible(self) -> bool:
        """Hidden when everything fits on one page."""
        return self.total > 1

    @property
    def prev_disabled(self) -> bool:
        return self.current <= 1

    @property
    def next_disabled(self) -> bool:
        return self.current >= self.total

    @property
    def prev_page(self) -> int:
        return max(1, self.current - 1)

    @property
    def next_page(self) -> int:
        return max(1, min(self.total, self.current + 1))


def page_window(
    current: int, total: int, max_visible: int = MAX_VISIBLE_PAGES
) -> PageWindow:
    """Up to `max_visible` page numbers around `current`.

    The window starts one page before the current one and is shifted left
    when it would run past the last page.
    """
    start = max(1, current - 1)
    end = min(total, start + max_visible - 1)
    if end - start < max_visible - 1:
        start = max(1, end - max_visible + 1)

    return PageWindow(
        current=current,
        total=total,
        pages=list(range(start, end + 1)),
        leading_ellipsis=start > 1,
        trailing_ellipsis=end < total,
    )
