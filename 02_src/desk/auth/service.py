"""Sign-in, sign-out and password reset."""

from typing import Any, Protocol

from ..backend import IBackendClient
from ..errors import AuthError
from ..logging_config import get_logger
from ..models import LoginResult, SessionCredential
from ..roster import ScreenRegistry
from .forms import LoginForm, ResetPasswordForm, validate_form

logger = get_logger(__name__)

RESET_SUCCESS_MESSAGE = "Your password has been successfully changed."


class IAuthService(Protocol):
    """Credential lifecycle: created at login, cleared at logout."""

    async def login(self, payload: Any) -> LoginResult:
        """Validate the login form and exchange it for a bearer credential."""
        ...

    async def logout(self, session: SessionCredential) -> None:
        """End the session on the backend and forget its screens."""
        ...

    async def reset_password(self, token: str | None, payload: Any) -> str:
        """Validate the reset form and set the new password."""
        ...


class AuthService:
    """Thin form-to-backend glue for the auth pages."""

    def __init__(self, backend: IBackendClient, screens: ScreenRegistry):
        self._backend = backend
        self._screens = screens

    async def login(self, payload: Any) -> LoginResult:
        form = validate_form(LoginForm, payload)
        result = await self._backend.login(form.email, form.password)
        logger.info("Operator signed in", extra={"context": {"email": form.email}})
        return result

    async def logout(self, session: SessionCredential) -> None:
        try:
            await self._backend.logout(session)
        except AuthError as e:
            logger.error("Logout failed: %s", e.message)
            raise
        self._screens.drop(session)
        logger.info("Operator signed out")

    async def reset_password(self, token: str | None, payload: Any) -> str:
        form = validate_form(ResetPasswordForm, payload)
        if not token:
            raise AuthError("Invalid or missing reset token.")
        await self._backend.reset_password(token, form.password)
        return RESET_SUCCESS_MESSAGE
