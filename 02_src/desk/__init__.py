"""Check-in desk core module."""

from .app import Application, IApplication
from .auth import AuthService, IAuthService
from .backend import BackendClient, IBackendClient, IRosterCache, RosterCache
from .config import Settings
from .errors import (
    AuthError,
    BackendError,
    ConfigError,
    DeskError,
    FetchError,
    FormError,
    MutationError,
    RecordNotFoundError,
    ScreenBusyError,
    ScreenError,
)
from .models import LoginResult, PersonRecord, SessionCredential
from .roster import CheckInScreen, ScreenRegistry
from .session import GateDecision, ISessionGate, SessionGate
from .touchpoints import Touchpoint, all_touchpoints, get_touchpoint

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    # Models
    "PersonRecord",
    "SessionCredential",
    "LoginResult",
    "Touchpoint",
    "all_touchpoints",
    "get_touchpoint",
    # Components
    "IBackendClient",
    "BackendClient",
    "IRosterCache",
    "RosterCache",
    "ISessionGate",
    "SessionGate",
    "GateDecision",
    "CheckInScreen",
    "ScreenRegistry",
    "IAuthService",
    "AuthService",
    # Errors
    "DeskError",
    "ConfigError",
    "BackendError",
    "FetchError",
    "MutationError",
    "AuthError",
    "ScreenError",
    "ScreenBusyError",
    "RecordNotFoundError",
    "FormError",
]
