"""Application bootstrap and lifecycle management."""

import time
from typing import Callable, Protocol

import httpx

from .auth import AuthService, IAuthService
from .backend import BackendClient, IBackendClient, RosterCache
from .config import Settings
from .logging_config import get_logger
from .roster import ScreenRegistry
from .session import ISessionGate, SessionGate

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._settings = settings
        self._transport = transport  # tests inject httpx.MockTransport
        self._clock = clock

        # Components (will be initialized in start())
        self._http: httpx.AsyncClient | None = None
        self._backend: IBackendClient | None = None
        self._cache: RosterCache | None = None
        self._gate: ISessionGate | None = None
        self._screens: ScreenRegistry | None = None
        self._auth: IAuthService | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        if self._http is not None:
            return
        if self._settings is None:
            self._settings = Settings.from_env()
        logger.info("Starting check-in desk against %s", self._settings.api_base_url)

        # 1. Shared HTTP client (no dependencies)
        self._http = httpx.AsyncClient(
            base_url=self._settings.api_base_url,
            timeout=self._settings.backend_timeout,
            transport=self._transport,
        )

        # 2. Backend client + roster cache
        self._backend = BackendClient(self._http)
        self._cache = RosterCache(clock=self._clock)

        # 3. Session gate (stateless)
        self._gate = SessionGate()

        # 4. Screens (depend on backend + cache)
        self._screens = ScreenRegistry(self._backend, self._cache, clock=self._clock)

        # 5. Auth (depends on backend + screens)
        self._auth = AuthService(self._backend, self._screens)
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._cache:
            self._cache.clear()
        if self._http:
            await self._http.aclose()
            self._http = None
            logger.info("HTTP client closed")

    @property
    def settings(self) -> Settings:
        """Get settings."""
        if not self._settings:
            raise RuntimeError("Application not started")
        return self._settings

    @property
    def backend(self) -> IBackendClient:
        """Get backend client."""
        if not self._backend:
            raise RuntimeError("Application not started")
        return self._backend

    @property
    def gate(self) -> ISessionGate:
        """Get session gate."""
        if not self._gate:
            raise RuntimeError("Application not started")
        return self._gate

    @property
    def screens(self) -> ScreenRegistry:
        """Get screen registry."""
        if not self._screens:
            raise RuntimeError("Application not started")
        return self._screens

    @property
    def auth(self) -> IAuthService:
        """Get auth service."""
        if not self._auth:
            raise RuntimeError("Application not started")
        return self._auth
