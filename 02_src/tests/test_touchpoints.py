"""Tests for touchpoint descriptors."""

import pytest

from desk.models import PersonRecord
from desk.touchpoints import all_touchpoints, format_timestamp, get_touchpoint

from conftest import CHECKED_AT, make_person


def record(**fields):
    return PersonRecord.from_api(make_person(1, **fields))


class TestTable:
    """Tests for the descriptor table."""

    def test_dashboard_order(self):
        assert [tp.slug for tp in all_touchpoints()] == [
            "airport-arrival",
            "airport-departure",
            "hotel",
            "faculty-hall-session",
            "preview-room",
        ]

    def test_unknown_slug(self):
        with pytest.raises(KeyError):
            get_touchpoint("spa")

    @pytest.mark.parametrize(
        "slug,path",
        [
            ("airport-arrival", "/api/checkin-details/abc/arrival"),
            ("hotel", "/api/checkin-details/abc/hotel"),
            ("faculty-hall-session", "/api/checkin-details/abc/hall"),
            ("preview-room", "/api/checkin-details/abc/presentation"),
        ],
    )
    def test_mutation_path(self, slug, path):
        assert get_touchpoint(slug).mutation_path("abc") == path

    def test_topic_screens_use_topic_roster(self):
        assert get_touchpoint("faculty-hall-session").roster_path.endswith("/topic/exist")
        assert get_touchpoint("preview-room").roster_path.endswith("/topic/exist")
        assert get_touchpoint("hotel").roster_path == "/api/checkin-details"


class TestStatus:
    """Tests for status flag and timestamp rendering."""

    def test_absent_flag_is_not_done(self):
        assert get_touchpoint("hotel").is_done(record()) is False

    def test_time_is_dash_until_done(self):
        hotel = get_touchpoint("hotel")
        # a stray timestamp without the flag is not shown
        assert hotel.status_time(record(hotelCheckInTime=CHECKED_AT)) == "-"

    def test_time_shown_when_done(self):
        hotel = get_touchpoint("hotel")
        done = record(hotelCheckInStatus=True, hotelCheckInTime=CHECKED_AT)
        assert hotel.status_time(done) == "1/5/2025, 3:04:05 PM"

    def test_arrival_falls_back_to_updated_at(self):
        arrival = get_touchpoint("airport-arrival")
        done = record(arrivalCheckInStatus=True, updatedAt="2025-01-05T09:00:00Z")
        assert arrival.status_time(done) == "1/5/2025, 9:00:00 AM"

    def test_format_timestamp_passes_through_garbage(self):
        assert format_timestamp("yesterday") == "yesterday"


class TestDetails:
    """Tests for detail lines."""

    def test_hotel_details(self):
        hotel = get_touchpoint("hotel")
        lines = hotel.detail_lines(
            record(hotelName="Grand Plaza", checkInDate="2025-01-05")
        )
        assert lines == [
            ("Hotel", "Grand Plaza"),
            ("Check-In", "2025-01-05"),
            ("Check-Out", ""),
            ("Check-in Time", "-"),
        ]

    def test_preview_room_without_topic_has_no_details(self):
        preview = get_touchpoint("preview-room")
        assert preview.detail_lines(record()) == []
        assert preview.has_details(record()) is False

    def test_preview_room_labels(self):
        preview = get_touchpoint("preview-room")
        lines = dict(preview.detail_lines(record(topicName="Valves")))
        assert lines["Topic"] == "Valves"
        assert lines["Submitted At"] == "-"
        assert preview.done_label == "Submitted"
        assert preview.success_message == "Submission Successful"
