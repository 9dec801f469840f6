"""Generic searchable, paginated, confirm-then-mutate roster screen."""

import time
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from ..backend import IBackendClient, IRosterCache
from ..config import MAX_SCREENS, SCREEN_IDLE_SECONDS, SUCCESS_NOTIFICATION_SECONDS
from ..errors import FetchError, RecordNotFoundError, ScreenBusyError, ScreenError
from ..logging_config import get_logger
from ..models import PersonRecord, SessionCredential
from ..touchpoints import Touchpoint
from .pagination import clamp_page, page_slice, page_window, total_pages
from .search import filter_records
from .views import (
    ActionView,
    CardView,
    DetailLine,
    DialogView,
    NotificationView,
    PaginationView,
    ScreenView,
)

logger = get_logger(__name__)

Clock = Callable[[], float]
ScreenKey = tuple[str | None, str]


class ScreenStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass
class Notification:
    """Transient success message."""

    message: str
    expires_at: float


class CheckInScreen:
    """Roster screen for one touchpoint and one operator session.

    Search and pagination never touch the network. Exactly one status
    transition can be in flight at a time; it is confirmed through a
    dialog and followed by a roster refetch.
    """

    def __init__(
        self,
        touchpoint: Touchpoint,
        backend: IBackendClient,
        cache: IRosterCache,
        session: SessionCredential,
        clock: Clock = time.monotonic,
    ):
        self.touchpoint = touchpoint
        self._backend = backend
        self._cache = cache
        self.session = session
        self._clock = clock

        self.status = ScreenStatus.IDLE
        self.records: list[PersonRecord] = []
        self.query = ""
        self.page = 1
        self.selected: PersonRecord | None = None
        self.submitting = False
        self.error: str | None = None
        self.rejected = False
        self._notification: Notification | None = None
        # bumped by every confirmed mutation
        self._revision = 0

    @property
    def cache_key(self) -> tuple[str | None, str]:
        return (self.session.access_token, self.touchpoint.roster_path)

    async def _fetch(self) -> list[PersonRecord]:
        return await self._backend.list_roster(
            self.touchpoint.roster_path, self.session
        )

    # Loading

    async def load(self) -> None:
        """Load the roster through the shared cache. Never raises on fetch errors."""
        revision = self._revision
        self.status = ScreenStatus.LOADING
        try:
            records = await self._cache.get(self.cache_key, self._fetch)
        except FetchError as e:
            if revision == self._revision:
                self._fail(e)
            return
        if revision != self._revision:
            # a mutation refetched the roster meanwhile
            return
        self._set_records(records)

    def _set_records(self, records: list[PersonRecord]) -> None:
        self.records = list(records)
        self.error = None
        self.rejected = False
        self.status = ScreenStatus.READY
        self.page = clamp_page(self.page, self.total_pages)
        if self.selected is not None:
            # keep the dialog pointing at the fresh copy of the record
            self.selected = next(
                (r for r in self.records if r.id == self.selected.id), self.selected
            )

    def _fail(self, error: FetchError) -> None:
        logger.warning(
            "Roster unavailable for %s: %s",
            self.touchpoint.slug,
            error.message,
            extra={"context": {"status_code": error.status_code}},
        )
        self.records = []
        self.error = error.message
        self.rejected = error.status_code in (401, 403)
        self.status = ScreenStatus.ERROR

    # Search and pagination

    def search(self, query: str) -> bool:
        """Set the search text; returns True (and resets to page 1) if it changed."""
        if query == self.query:
            return False
        self.query = query
        self.page = 1
        return True

    def go_to(self, page: int) -> None:
        self.page = clamp_page(page, self.total_pages)

    @property
    def filtered(self) -> list[PersonRecord]:
        return filter_records(self.records, self.query, self.touchpoint.search_text)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered))

    @property
    def visible(self) -> list[PersonRecord]:
        return page_slice(self.filtered, self.page)

    # Status transition

    def find(self, record_id: str) -> PersonRecord:
        for record in self.records:
            if record.id == record_id:
                return record
        raise RecordNotFoundError(f"No record {record_id} on {self.touchpoint.slug}")

    @property
    def dialog_open(self) -> bool:
        return self.selected is not None

    def open_confirm(self, record_id: str) -> bool:
        """Select a record for confirmation; no-op if it is already done."""
        if self.submitting:
            raise ScreenBusyError("A status update is in progress")
        record = self.find(record_id)
        if self.touchpoint.is_done(record):
            return False
        self.selected = record
        return True

    def cancel(self) -> None:
        if self.submitting:
            raise ScreenBusyError("A status update is in progress")
        self.selected = None

    async def confirm(self) -> None:
        """Commit the selected transition, then refetch the roster.

        MutationError propagates with the dialog still open.
        """
        if self.submitting:
            raise ScreenBusyError("A status update is in progress")
        if self.selected is None:
            raise ScreenError("No record selected")

        record = self.selected
        self.submitting = True
        try:
            await self._backend.mark_status(
                record.id, self.touchpoint.action, self.session
            )
            logger.info(
                "Status updated",
                extra={
                    "context": {
                        "touchpoint": self.touchpoint.slug,
                        "path": self.touchpoint.mutation_path(record.id),
                    }
                },
            )
            self._revision += 1
            try:
                records = await self._cache.revalidate(self.cache_key, self._fetch)
            except FetchError as e:
                self._fail(e)
            else:
                self._set_records(records)
        finally:
            self.submitting = False

        self.selected = None
        self._notification = Notification(
            message=self.touchpoint.success_message,
            expires_at=self._clock() + SUCCESS_NOTIFICATION_SECONDS,
        )

    @property
    def notification(self) -> Notification | None:
        if self._notification and self._clock() >= self._notification.expires_at:
            self._notification = None
        return self._notification

    # Rendering

    def _card(self, record: PersonRecord) -> CardView:
        tp = self.touchpoint
        done = tp.is_done(record)
        has_details = tp.has_details(record)
        return CardView(
            id=record.id,
            name=record.name,
            email=record.email,
            phone=record.phone,
            details=[
                DetailLine(label=label, value=value)
                for label, value in tp.detail_lines(record)
            ],
            details_message=None if has_details else tp.missing_details_message,
            status_time=tp.status_time(record),
            action=ActionView(
                label=tp.done_label if done else tp.action_label,
                done=done,
                disabled=done or self.submitting,
            ),
        )

    def _dialog(self) -> DialogView | None:
        if self.selected is None:
            return None
        return DialogView(
            title=self.touchpoint.dialog_title,
            prompt=self.touchpoint.dialog_prompt,
            record_id=self.selected.id,
            name=self.selected.name,
            email=self.selected.email,
            phone=self.selected.phone,
            submitting=self.submitting,
            confirm_label="Processing..." if self.submitting else "Confirm",
        )

    def view(self) -> ScreenView:
        filtered = self.filtered
        pages = total_pages(len(filtered))
        visible = page_slice(filtered, self.page)
        window = page_window(self.page, pages)

        message = None
        if not visible and self.status is not ScreenStatus.LOADING:
            tp = self.touchpoint
            message = tp.no_match_message if self.query else tp.empty_message

        notification = self.notification
        return ScreenView(
            slug=self.touchpoint.slug,
            title=self.touchpoint.title,
            status=self.status.value,
            query=self.query,
            page=self.page,
            total_pages=pages,
            total_count=len(filtered),
            cards=[self._card(r) for r in visible],
            pagination=PaginationView(
                visible=window.visible,
                current=window.current,
                total=window.total,
                pages=window.pages,
                leading_ellipsis=window.leading_ellipsis,
                trailing_ellipsis=window.trailing_ellipsis,
                prev_disabled=window.prev_disabled,
                next_disabled=window.next_disabled,
            ),
            dialog=self._dialog(),
            notification=(
                NotificationView(
                    message=notification.message,
                    expires_in=round(notification.expires_at - self._clock(), 3),
                )
                if notification
                else None
            ),
            message=message,
            error=self.error,
        )


class ScreenRegistry:
    """One screen per (access token, touchpoint), shared cache for all.

    Holds at most `max_screens` screens; the least recently used one goes
    first, and screens untouched for `idle_seconds` are dropped.
    """

    def __init__(
        self,
        backend: IBackendClient,
        cache: IRosterCache,
        clock: Clock = time.monotonic,
        max_screens: int = MAX_SCREENS,
        idle_seconds: float = SCREEN_IDLE_SECONDS,
    ):
        self._backend = backend
        self._cache = cache
        self._clock = clock
        self._max_screens = max_screens
        self._idle_seconds = idle_seconds
        self._screens: OrderedDict[ScreenKey, CheckInScreen] = OrderedDict()
        self._last_used: dict[ScreenKey, float] = {}

    def __len__(self) -> int:
        return len(self._screens)

    def get(self, session: SessionCredential, touchpoint: Touchpoint) -> CheckInScreen:
        now = self._clock()
        self._expire(now)

        key = (session.access_token, touchpoint.slug)
        screen = self._screens.get(key)
        if screen is None:
            screen = CheckInScreen(
                touchpoint, self._backend, self._cache, session, clock=self._clock
            )
            self._screens[key] = screen
        self._screens.move_to_end(key)
        self._last_used[key] = now

        while len(self._screens) > self._max_screens:
            oldest, _ = self._screens.popitem(last=False)
            del self._last_used[oldest]
        return screen

    def forget(self, screen: CheckInScreen) -> None:
        """Drop `screen` if it is still registered."""
        key = (screen.session.access_token, screen.touchpoint.slug)
        if self._screens.get(key) is screen:
            del self._screens[key]
            del self._last_used[key]

    def release(self, screen: CheckInScreen) -> None:
        """Forget `screen` after a request if there is nothing worth keeping.

        That is a screen that never loaded, or one whose credential the
        backend refused.
        """
        if screen.rejected or screen.status is ScreenStatus.IDLE:
            self.forget(screen)

    def drop(self, session: SessionCredential) -> None:
        """Forget all screens and cached rosters of a signed-out session."""
        token = session.access_token
        for key in [k for k in self._screens if k[0] == token]:
            del self._screens[key]
            del self._last_used[key]
        self._cache.discard(lambda key: key[0] == token)

    def _expire(self, now: float) -> None:
        for key, screen in list(self._screens.items()):
            if now - self._last_used[key] < self._idle_seconds:
                # ordered by last use
                break
            if screen.submitting:
                continue
            del self._screens[key]
            del self._last_used[key]
