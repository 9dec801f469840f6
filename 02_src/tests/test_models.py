"""Tests for data models."""

import pytest

from desk.models import LoginResult, PersonRecord, SessionCredential

from conftest import make_person


class TestPersonRecord:
    """Tests for PersonRecord."""

    def test_from_api_maps_backend_names(self):
        """Test field mapping from the API payload."""
        person = PersonRecord.from_api(make_person(4, hotelName="Grand Plaza"))
        assert person.id == "p004"
        assert person.name == "Faculty 4"
        assert person.email == "faculty4@example.com"
        assert person.phone == "9800000004"
        assert person.get("hotelName") == "Grand Plaza"

    def test_missing_contact_fields_are_empty(self):
        person = PersonRecord.from_api({"_id": "x1"})
        assert (person.name, person.email, person.phone) == ("", "", "")

    def test_id_is_required(self):
        with pytest.raises(ValueError):
            PersonRecord.from_api({"facultyName": "Nobody"})

    def test_flag_defaults_to_false(self):
        person = PersonRecord.from_api(make_person(1, hallCheckInStatus=None))
        assert person.flag("hallCheckInStatus") is False
        assert person.flag("hotelCheckInStatus") is False

    def test_get_default(self):
        person = PersonRecord.from_api(make_person(1, topicName=None))
        assert person.get("topicName", "") == ""

    def test_is_immutable(self):
        person = PersonRecord.from_api(make_person(1))
        with pytest.raises(AttributeError):
            person.id = "other"


class TestSessionCredential:
    """Tests for SessionCredential."""

    def test_from_cookies(self):
        session = SessionCredential.from_cookies({"accessToken": "abc"})
        assert session.is_authenticated
        assert session.access_token == "abc"

    def test_blank_cookie_is_anonymous(self):
        assert not SessionCredential.from_cookies({"accessToken": " "}).is_authenticated
        assert not SessionCredential.from_cookies({}).is_authenticated

    def test_headers(self):
        session = SessionCredential(access_token="abc")
        assert session.auth_headers() == {"Authorization": "Bearer abc"}
        assert session.request_headers() == {
            "Authorization": "Bearer abc",
            "Cookie": "accessToken=abc",
        }

    def test_anonymous_sends_nothing(self):
        session = SessionCredential.anonymous()
        assert session.auth_headers() == {}
        assert session.request_headers() == {}


class TestLoginResult:
    """Tests for LoginResult."""

    def test_create(self):
        result = LoginResult(access_token="abc")
        assert result.access_token == "abc"

    def test_is_immutable(self):
        result = LoginResult(access_token="abc")
        with pytest.raises(AttributeError):
            result.access_token = "other"
