"""Core data models for the check-in desk."""

from .person import PersonRecord
from .session import LoginResult, SessionCredential

__all__ = [
    # Roster
    "PersonRecord",
    # Session
    "SessionCredential",
    "LoginResult",
]
