"""Session credential models."""

from dataclasses import dataclass
from typing import Mapping

from ..config import ACCESS_TOKEN_COOKIE


@dataclass(frozen=True)
class SessionCredential:
    """Bearer credential of the signed-in operator.

    This is the only place the ``accessToken`` cookie is read. Every
    backend call receives the credential explicitly.
    """

    access_token: str | None = None

    @classmethod
    def from_cookies(cls, cookies: Mapping[str, str]) -> "SessionCredential":
        """Extract the credential from request cookies."""
        token = (cookies.get(ACCESS_TOKEN_COOKIE) or "").strip()
        return cls(access_token=token or None)

    @classmethod
    def anonymous(cls) -> "SessionCredential":
        return cls(access_token=None)

    @property
    def is_authenticated(self) -> bool:
        return self.access_token is not None

    def auth_headers(self) -> dict[str, str]:
        """`Authorization` header, empty for anonymous sessions."""
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}

    def cookies(self) -> dict[str, str]:
        """Cookies forwarded with backend calls (credentials included)."""
        if not self.access_token:
            return {}
        return {ACCESS_TOKEN_COOKIE: self.access_token}

    def request_headers(self) -> dict[str, str]:
        """Bearer header plus the credential cookie, for backend requests."""
        headers = self.auth_headers()
        cookies = self.cookies()
        if cookies:
            headers["Cookie"] = "; ".join(f"{k}={v}" for k, v in cookies.items())
        return headers


@dataclass(frozen=True)
class LoginResult:
    """Credentials issued by a successful login."""

    access_token: str
