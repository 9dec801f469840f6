"""Error types raised across the check-in desk."""


class DeskError(Exception):
    """Base class for all check-in desk errors."""


class ConfigError(DeskError):
    """Missing or malformed configuration."""


class BackendError(DeskError):
    """A call to the conference REST API failed."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class FetchError(BackendError):
    """Roster fetch failed (network error or non-2xx answer)."""


class MutationError(BackendError):
    """Status transition was rejected or never reached the backend."""


class AuthError(BackendError):
    """Login, logout or password reset was rejected."""


class ScreenError(DeskError):
    """Operation not allowed in the screen's current state."""


class ScreenBusyError(ScreenError):
    """A status transition is already in flight on this screen."""


class RecordNotFoundError(ScreenError):
    """No record with the given id in the loaded roster."""


class FormError(DeskError):
    """Form validation failed; messages are keyed by field name."""

    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors
