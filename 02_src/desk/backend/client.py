"""HTTP client for the conference REST API."""

from typing import Any, Protocol

import httpx

from ..errors import AuthError, FetchError, MutationError
from ..logging_config import get_logger
from ..models import LoginResult, PersonRecord, SessionCredential

logger = get_logger(__name__)

class IBackendClient(Protocol):
    """Calls made by the desk against the conference API."""

    async def login(self, email: str, password: str) -> LoginResult:
        """Exchange e-mail and password for a bearer credential."""
        ...

    async def logout(self, session: SessionCredential) -> None:
        """Invalidate the server-side session."""
        ...

    async def reset_password(self, token: str, password: str) -> str | None:
        """Set a new password given a reset token."""
        ...

    async def list_roster(
        self, path: str, session: SessionCredential
    ) -> list[PersonRecord]:
        """Fetch the roster served at `path`."""
        ...

    async def mark_status(
        self, record_id: str, action: str, session: SessionCredential
    ) -> dict:
        """Flip one touchpoint status flag to true."""
        ...


def _json(response: httpx.Response) -> dict[str, Any]:
    """Response body as a dict; anything else becomes {}."""
    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


class BackendClient:
    """Conference API client over a shared httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def login(self, email: str, password: str) -> LoginResult:
        """POST /api/users/login."""
        try:
            response = await self._client.post(
                "/api/users/login",
                json={"email": email, "password": password},
            )
        except httpx.HTTPError as e:
            logger.error("Login request failed: %s", e)
            raise AuthError("Something went wrong. Try again.") from e

        payload = _json(response)
        if not response.is_success:
            raise AuthError(
                payload.get("message") or "Invalid credentials",
                response.status_code,
            )

        access_token = payload.get("accessToken")
        if not access_token:
            raise AuthError("Login response did not include an access token")

        return LoginResult(access_token=access_token)

    async def logout(self, session: SessionCredential) -> None:
        """POST /api/users/logout. Only network failures raise."""
        try:
            response = await self._client.post(
                "/api/users/logout", headers=session.request_headers()
            )
        except httpx.HTTPError as e:
            raise AuthError(f"Logout failed: {e}") from e

        if not response.is_success:
            logger.warning("Logout answered %s", response.status_code)

    async def reset_password(self, token: str, password: str) -> str | None:
        """POST /api/users/reset-password/{token}; returns the API message."""
        try:
            response = await self._client.post(
                f"/api/users/reset-password/{token}",
                json={"password": password},
            )
        except httpx.HTTPError as e:
            raise AuthError(str(e) or "Something went wrong.") from e

        payload = _json(response) or {"message": "Invalid response from server"}
        if not response.is_success:
            raise AuthError(
                payload.get("message") or "Failed to reset password.",
                response.status_code,
            )
        return payload.get("message")

    async def list_roster(
        self, path: str, session: SessionCredential
    ) -> list[PersonRecord]:
        """GET a roster endpoint and unwrap its `data` array."""
        try:
            response = await self._client.get(path, headers=session.request_headers())
        except httpx.HTTPError as e:
            logger.error("Roster fetch %s failed: %s", path, e)
            raise FetchError("Failed to fetch data") from e

        if not response.is_success:
            logger.warning("Roster fetch %s answered %s", path, response.status_code)
            raise FetchError("Failed to fetch data", response.status_code)

        records = []
        for item in _json(response).get("data") or []:
            try:
                records.append(PersonRecord.from_api(item))
            except (AttributeError, ValueError):
                logger.warning("Skipping malformed roster entry from %s", path)
        return records

    async def mark_status(
        self, record_id: str, action: str, session: SessionCredential
    ) -> dict:
        """PUT /api/checkin-details/{id}/{action}."""
        try:
            response = await self._client.put(
                f"/api/checkin-details/{record_id}/{action}",
                headers=session.request_headers(),
            )
        except httpx.HTTPError as e:
            logger.error("Status update %s/%s failed: %s", record_id, action, e)
            raise MutationError(str(e) or "Something went wrong") from e

        payload = _json(response)
        if not response.is_success:
            raise MutationError(
                payload.get("message") or "Failed", response.status_code
            )
        return payload
