"""Request helpers shared by the routers."""

from fastapi import Request

from ..models import SessionCredential


def request_session(request: Request) -> SessionCredential:
    """Credential resolved by the session gate middleware."""
    session = getattr(request.state, "session", None)
    if session is None:
        session = SessionCredential.from_cookies(request.cookies)
    return session
