"""Session Gate: request-time authorization before any page is served."""

from enum import Enum
from typing import Protocol

from ..logging_config import get_logger
from ..models import SessionCredential

logger = get_logger(__name__)

LOGIN_PATH = "/"
DASHBOARD_PATH = "/dashboard"
PROTECTED_PREFIXES = ("/dashboard", "/checkin", "/admin", "/faculty")


class GateDecision(str, Enum):
    """Outcome of gating one request."""

    SERVE_LOGIN = "serve_login"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_DASHBOARD = "redirect_dashboard"
    SERVE = "serve"
    PASS = "pass"  # path is not gated

    @property
    def redirect_to(self) -> str | None:
        if self is GateDecision.REDIRECT_LOGIN:
            return LOGIN_PATH
        if self is GateDecision.REDIRECT_DASHBOARD:
            return DASHBOARD_PATH
        return None


class PathKind(str, Enum):
    LOGIN = "login"
    PROTECTED = "protected"
    OPEN = "open"


def classify_path(path: str) -> PathKind:
    """Sort a request path into login / protected / open."""
    if path == LOGIN_PATH:
        return PathKind.LOGIN
    for prefix in PROTECTED_PREFIXES:
        if path == prefix or path.startswith(prefix + "/"):
            return PathKind.PROTECTED
    return PathKind.OPEN


class ISessionGate(Protocol):
    """Decides serve vs. redirect for each incoming request."""

    def decide(self, path: str, session: SessionCredential) -> GateDecision:
        """Apply the gate to one request."""
        ...


class SessionGate:
    """Cookie-credential gate.

    Signed-out visitors only ever see the login page; signed-in operators
    are bounced from the login page to the dashboard. An expired credential
    is not renewed here: the next backend call fails and the operator signs
    in again.
    """

    def decide(self, path: str, session: SessionCredential) -> GateDecision:
        kind = classify_path(path)
        if kind is PathKind.OPEN:
            return GateDecision.PASS

        if not session.is_authenticated:
            if kind is PathKind.LOGIN:
                return GateDecision.SERVE_LOGIN
            logger.debug("Unauthenticated request to %s", path)
            return GateDecision.REDIRECT_LOGIN

        if kind is PathKind.LOGIN:
            return GateDecision.REDIRECT_DASHBOARD
        return GateDecision.SERVE
