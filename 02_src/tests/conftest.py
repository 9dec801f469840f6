"""Pytest configuration and fixtures."""

import json
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from desk.touchpoints import all_touchpoints  # noqa: E402

BACKEND_URL = "http://backend.test"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "secret123"
ACCESS_TOKEN = "tok-1"
REFRESH_TOKEN = "refresh-1"
CHECKED_AT = "2025-01-05T15:04:05Z"


def make_person(index: int, **fields) -> dict:
    """One roster entry as the conference API serves it."""
    person = {
        "_id": f"p{index:03d}",
        "facultyName": f"Faculty {index}",
        "email": f"faculty{index}@example.com",
        "mobile": f"98000{index:05d}",
    }
    person.update(fields)
    return person


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeConferenceApi:
    """In-memory stand-in for the conference REST API."""

    def __init__(self, people: list[dict] | None = None):
        self.people = {p["_id"]: dict(p) for p in (people or [])}
        self.calls: list[tuple[str, str]] = []
        self.fail_put_message: str | None = None
        self.fail_list_status: int | None = None
        self.list_network_error = False
        self.put_network_error = False
        self.logout_network_error = False
        self.reset_tokens = {"reset-ok"}
        self.logged_out: list[str] = []

    def _authorized(self, request: httpx.Request) -> bool:
        return request.headers.get("Authorization") == f"Bearer {ACCESS_TOKEN}"

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.calls.append((request.method, path))

        if request.method == "POST" and path == "/api/users/login":
            body = json.loads(request.content)
            if body == {"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}:
                return httpx.Response(
                    200,
                    json={"accessToken": ACCESS_TOKEN},
                    headers={"Set-Cookie": f"refreshToken={REFRESH_TOKEN}; Path=/"},
                )
            return httpx.Response(401, json={"message": "Invalid email or password"})

        if request.method == "POST" and path == "/api/users/logout":
            if self.logout_network_error:
                raise httpx.ConnectError("backend unreachable", request=request)
            self.logged_out.append(request.headers.get("Authorization", ""))
            return httpx.Response(200, json={"message": "Logged out"})

        if request.method == "POST" and path.startswith("/api/users/reset-password/"):
            token = path.rsplit("/", 1)[-1]
            if token not in self.reset_tokens:
                return httpx.Response(400, json={"message": "Reset link expired"})
            return httpx.Response(200, json={"message": "Password updated"})

        if path.startswith("/api/checkin-details") and not self._authorized(request):
            return httpx.Response(401, json={"message": "Not authorized"})

        if request.method == "GET" and path in (
            "/api/checkin-details",
            "/api/checkin-details/topic/exist",
        ):
            if self.list_network_error:
                raise httpx.ConnectError("backend unreachable", request=request)
            if self.fail_list_status:
                return httpx.Response(self.fail_list_status, json={"message": "Boom"})
            people = list(self.people.values())
            if path.endswith("/topic/exist"):
                people = [p for p in people if p.get("topicName")]
            return httpx.Response(200, json={"success": True, "data": people})

        if request.method == "PUT" and path.startswith("/api/checkin-details/"):
            if self.put_network_error:
                raise httpx.ConnectError("backend unreachable", request=request)
            _, _, _, record_id, action = path.split("/")
            if self.fail_put_message:
                return httpx.Response(400, json={"message": self.fail_put_message})
            person = self.people.get(record_id)
            touchpoint = next(
                (tp for tp in all_touchpoints() if tp.action == action), None
            )
            if person is None or touchpoint is None:
                return httpx.Response(404, json={"message": "Not found"})
            person[touchpoint.status_field] = True
            person[touchpoint.time_fields[0]] = CHECKED_AT
            return httpx.Response(200, json={"success": True, "data": person})

        return httpx.Response(404, json={"message": "No route"})

    def count(self, method: str, path: str) -> int:
        return self.calls.count((method, path))


@pytest.fixture
def people():
    """Twelve faculty members, two of them with talks."""
    roster = [make_person(i) for i in range(1, 13)]
    roster[0].update(
        hotelName="Grand Plaza",
        arrivalFlightDetail="AI 101",
        topicName="Cardiac Imaging",
        talkDate="2025-01-06",
        talkStartTime="10:00",
        talkEndTime="10:20",
    )
    roster[1].update(
        hotelName="Seaside Inn",
        hotelCheckInStatus=True,
        hotelCheckInTime=CHECKED_AT,
        topicName="Valve Repair",
    )
    return roster


@pytest.fixture
def fake_api(people):
    """Fake conference API seeded with `people`."""
    return FakeConferenceApi(people)


@pytest.fixture
def transport(fake_api):
    return httpx.MockTransport(fake_api.handler)


@pytest.fixture
def clock():
    return FakeClock()


@pytest_asyncio.fixture
async def http_client(transport):
    """httpx client pointed at the fake API."""
    client = httpx.AsyncClient(base_url=BACKEND_URL, transport=transport)
    yield client
    await client.aclose()


@pytest.fixture
def backend(http_client):
    from desk.backend import BackendClient

    return BackendClient(http_client)


@pytest.fixture
def cache(clock):
    from desk.backend import RosterCache

    return RosterCache(clock=clock)


@pytest.fixture
def session():
    from desk.models import SessionCredential

    return SessionCredential(access_token=ACCESS_TOKEN)


@pytest.fixture
def settings():
    from desk.config import Settings

    return Settings(api_base_url=BACKEND_URL)


@pytest_asyncio.fixture
async def application(settings, transport, clock):
    """Started Application talking to the fake API."""
    from desk.app import Application

    app = Application(settings=settings, transport=transport, clock=clock)
    await app.start()
    yield app
    await app.stop()


@pytest_asyncio.fixture
async def client(application):
    """HTTP client for the desk's FastAPI app."""
    from desk.api import create_fastapi_app

    fastapi_app = create_fastapi_app(application)
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=fastapi_app),
        base_url="http://desk.test",
    ) as c:
        yield c
