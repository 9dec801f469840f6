"""Per-touchpoint descriptors for the generic check-in screen."""

from dataclasses import dataclass
from datetime import datetime

from .models import PersonRecord

ROSTER_ALL = "/api/checkin-details"
ROSTER_WITH_TOPIC = "/api/checkin-details/topic/exist"


def format_timestamp(value: str) -> str:
    """Render an ISO timestamp like `1/5/2025, 3:04:05 PM`."""
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return str(value)
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return (
        f"{dt.month}/{dt.day}/{dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {suffix}"
    )


@dataclass(frozen=True)
class Touchpoint:
    """Everything that differs between two check-in screens."""

    slug: str
    label: str
    title: str
    roster_path: str
    action: str  # PUT /api/checkin-details/{id}/{action}
    status_field: str
    time_fields: tuple[str, ...]
    search_fields: tuple[str, ...]
    details: tuple[tuple[str, str], ...]
    time_label: str = "Check-in Time"
    requires_field: str | None = None
    missing_details_message: str = ""
    action_label: str = "Check-In"
    done_label: str = "Done"
    dialog_title: str = "Confirm Check-In"
    dialog_prompt: str = "Check in"
    success_message: str = "Check-In Successful"
    empty_message: str = "No faculty members found"
    no_match_message: str = "No faculty members match your search"

    def mutation_path(self, record_id: str) -> str:
        return f"/api/checkin-details/{record_id}/{self.action}"

    def is_done(self, record: PersonRecord) -> bool:
        return record.flag(self.status_field)

    def status_time(self, record: PersonRecord) -> str:
        """Formatted completion time, or "-" while the flag is false."""
        if not self.is_done(record):
            return "-"
        for name in self.time_fields:
            value = record.get(name)
            if value:
                return format_timestamp(value)
        return "-"

    def has_details(self, record: PersonRecord) -> bool:
        return self.requires_field is None or bool(record.get(self.requires_field))

    def detail_lines(self, record: PersonRecord) -> list[tuple[str, str]]:
        if not self.has_details(record):
            return []
        lines = [(label, str(record.get(name, ""))) for label, name in self.details]
        lines.append((self.time_label, self.status_time(record)))
        return lines

    def search_text(self, record: PersonRecord) -> str:
        parts = [record.name, record.email, record.phone]
        parts.extend(str(record.get(name, "")) for name in self.search_fields)
        return " ".join(parts)


TOUCHPOINTS: tuple[Touchpoint, ...] = (
    Touchpoint(
        slug="airport-arrival",
        label="Airport Arrival",
        title="Faculty Airport Arrival",
        roster_path=ROSTER_ALL,
        action="arrival",
        status_field="arrivalCheckInStatus",
        # older records only carry updatedAt
        time_fields=("arrivalCheckInTime", "updatedAt"),
        search_fields=("arrivalFlightDetail",),
        details=(
            ("Arrival Date", "arrivalDate"),
            ("Arrival Time", "arrivalTime"),
            ("Flight", "arrivalFlightDetail"),
        ),
    ),
    Touchpoint(
        slug="airport-departure",
        label="Airport Departure",
        title="Faculty Airport Departure",
        roster_path=ROSTER_ALL,
        action="departure",
        status_field="departureCheckInStatus",
        time_fields=("departureCheckInTime",),
        search_fields=("departureFlightDetail",),
        details=(
            ("Departure Date", "departureDate"),
            ("Departure Time", "departureTime"),
            ("Flight", "departureFlightDetail"),
        ),
    ),
    Touchpoint(
        slug="hotel",
        label="Hotel",
        title="Faculty Hotel Check-In",
        roster_path=ROSTER_ALL,
        action="hotel",
        status_field="hotelCheckInStatus",
        time_fields=("hotelCheckInTime",),
        search_fields=("hotelName",),
        details=(
            ("Hotel", "hotelName"),
            ("Check-In", "checkInDate"),
            ("Check-Out", "checkOutDate"),
        ),
    ),
    Touchpoint(
        slug="faculty-hall-session",
        label="Faculty in Hall Session",
        title="Faculty Hall Session Check-In",
        roster_path=ROSTER_WITH_TOPIC,
        action="hall",
        status_field="hallCheckInStatus",
        time_fields=("hallCheckInTime",),
        search_fields=("topicName",),
        details=(
            ("Topic", "topicName"),
            ("Talk Date", "talkDate"),
            ("Start", "talkStartTime"),
            ("End", "talkEndTime"),
        ),
        empty_message="No faculty found",
        no_match_message="No matching faculty found",
    ),
    Touchpoint(
        slug="preview-room",
        label="Preview Room",
        title="Faculty Preview Room",
        roster_path=ROSTER_WITH_TOPIC,
        action="presentation",
        status_field="presentationSubmitStatus",
        time_fields=("presentationSubmitTime",),
        search_fields=("topicName",),
        details=(
            ("Topic", "topicName"),
            ("Talk Date", "talkDate"),
            ("Start", "talkStartTime"),
            ("End", "talkEndTime"),
        ),
        time_label="Submitted At",
        requires_field="topicName",
        missing_details_message="No presentation details available",
        action_label="Submit Presentation",
        done_label="Submitted",
        dialog_title="Confirm Submission",
        dialog_prompt="Submit presentation for",
        success_message="Submission Successful",
        empty_message="No faculty found",
        no_match_message="No matching faculty found",
    ),
)

_BY_SLUG = {tp.slug: tp for tp in TOUCHPOINTS}


def get_touchpoint(slug: str) -> Touchpoint:
    """Look up a touchpoint by its route segment (KeyError if unknown)."""
    return _BY_SLUG[slug]


def all_touchpoints() -> tuple[Touchpoint, ...]:
    """Touchpoints in dashboard order."""
    return TOUCHPOINTS
