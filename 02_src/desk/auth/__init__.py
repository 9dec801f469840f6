"""Operator authentication flows."""

from .forms import LoginForm, ResetPasswordForm, validate_form
from .service import AuthService, IAuthService

__all__ = [
    "AuthService",
    "IAuthService",
    "LoginForm",
    "ResetPasswordForm",
    "validate_form",
]
