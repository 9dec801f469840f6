"""Check-in roster screens."""

from .pagination import PageWindow, page_slice, page_window, total_pages
from .screen import CheckInScreen, Notification, ScreenRegistry, ScreenStatus
from .search import filter_records
from .views import ScreenView

__all__ = [
    "CheckInScreen",
    "Notification",
    "PageWindow",
    "ScreenRegistry",
    "ScreenStatus",
    "ScreenView",
    "filter_records",
    "page_slice",
    "page_window",
    "total_pages",
]
