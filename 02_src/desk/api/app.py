"""FastAPI application setup."""

from contextlib import asynccontextmanager

from pydantic import BaseModel
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse

from ..app import Application
from ..logging_config import get_logger
from ..models import SessionCredential
from .routes import auth, checkin, dashboard

logger = get_logger(__name__)


# Global application instance
_app: Application | None = None


def get_app() -> Application:
    """Get the global application instance."""
    global _app
    if not _app:
        _app = Application()
    return _app


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


def install_session_gate(fastapi_app: FastAPI, application: Application) -> None:
    """Gate every request before it reaches a route."""

    @fastapi_app.middleware("http")
    async def session_gate(request: Request, call_next):
        session = SessionCredential.from_cookies(request.cookies)
        request.state.session = session

        decision = application.gate.decide(request.url.path, session)
        if decision.redirect_to:
            logger.debug(
                "Gate redirect %s -> %s", request.url.path, decision.redirect_to
            )
            # 303 turns a redirected form POST into a GET
            status_code = 307 if request.method in ("GET", "HEAD") else 303
            return RedirectResponse(url=decision.redirect_to, status_code=status_code)
        return await call_next(request)


def create_fastapi_app(application: Application | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    application = application or get_app()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifespan."""
        await application.start()
        yield
        await application.stop()

    fastapi_app = FastAPI(
        title="Check-in Desk",
        description="Conference check-in dashboard",
        version="0.1.0",
        lifespan=lifespan,
    )

    install_session_gate(fastapi_app, application)

    @fastapi_app.get("/healthz", response_model=StatusResponse, tags=["health"])
    async def healthz() -> dict:
        """Liveness probe (not gated)."""
        return {"status": "ok"}

    # Include routers
    fastapi_app.include_router(auth.create_auth_router(application))
    fastapi_app.include_router(dashboard.create_dashboard_router(application))
    fastapi_app.include_router(checkin.create_checkin_router(application))

    return fastapi_app
