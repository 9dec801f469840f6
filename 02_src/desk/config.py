"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Roster screens
PAGE_SIZE = 10
MAX_VISIBLE_PAGES = 4
SUCCESS_NOTIFICATION_SECONDS = 1.8
ROSTER_DEDUP_SECONDS = 2.0
MAX_SCREENS = 500
SCREEN_IDLE_SECONDS = 30 * 60

# Auth flows
ACCESS_TOKEN_COOKIE = "accessToken"
LOGIN_REDIRECT_DELAY = 0.9
RESET_REDIRECT_DELAY = 3.0


def _env_flag(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read once from the environment."""

    api_base_url: str
    host: str = "localhost"
    port: int = 8000
    log_level: str = "INFO"
    cookie_secure: bool = False
    backend_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        api_base_url = (os.getenv("API_BASE_URL") or "").strip().rstrip("/")
        if not api_base_url:
            raise ConfigError("API_BASE_URL environment variable not set")

        try:
            port = int(os.getenv("APP_PORT", "8000"))
            timeout = float(os.getenv("BACKEND_TIMEOUT", "10"))
        except ValueError as e:
            raise ConfigError(f"Invalid numeric setting: {e}") from e

        return cls(
            api_base_url=api_base_url,
            host=os.getenv("APP_HOST", "localhost"),
            port=port,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            cookie_secure=_env_flag(os.getenv("COOKIE_SECURE")),
            backend_timeout=timeout,
        )
