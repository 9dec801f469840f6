"""Serializable view models of a check-in screen."""

from pydantic import BaseModel


class DetailLine(BaseModel):
    """One labelled touchpoint detail on a card."""

    label: str
    value: str


class ActionView(BaseModel):
    """The card's status-transition control."""

    label: str
    done: bool
    disabled: bool


class CardView(BaseModel):
    """One roster record as displayed."""

    id: str
    name: str
    email: str
    phone: str
    details: list[DetailLine]
    details_message: str | None = None
    status_time: str
    action: ActionView


class PaginationView(BaseModel):
    visible: bool
    current: int
    total: int
    pages: list[int]
    leading_ellipsis: bool
    trailing_ellipsis: bool
    prev_disabled: bool
    next_disabled: bool


class DialogView(BaseModel):
    """Confirmation dialog for the selected record."""

    title: str
    prompt: str
    record_id: str
    name: str
    email: str
    phone: str
    submitting: bool
    confirm_label: str


class NotificationView(BaseModel):
    message: str
    expires_in: float


class ScreenView(BaseModel):
    """Full state of one check-in screen."""

    slug: str
    title: str
    status: str
    query: str
    page: int
    total_pages: int
    total_count: int
    cards: list[CardView]
    pagination: PaginationView
    dialog: DialogView | None = None
    notification: NotificationView | None = None
    message: str | None = None  # empty-state text
    error: str | None = None
