"""Login and password-reset routes."""

from typing import Any

from pydantic import BaseModel
from fastapi import APIRouter, Body, HTTPException, Response

from ...app import Application
from ...config import ACCESS_TOKEN_COOKIE, LOGIN_REDIRECT_DELAY, RESET_REDIRECT_DELAY
from ...errors import AuthError, FormError
from ...session.gate import DASHBOARD_PATH, LOGIN_PATH


class LoginPageView(BaseModel):
    """Response model for the login page."""

    title: str
    forgot_password_url: str


class RedirectResponseModel(BaseModel):
    """Where the browser should go next, after `delay` seconds."""

    redirect: str
    delay: float = 0.0
    message: str | None = None


def create_auth_router(app: Application) -> APIRouter:
    """Create auth router."""
    router = APIRouter(tags=["auth"])

    @router.get(LOGIN_PATH, response_model=LoginPageView)
    async def login_page() -> dict:
        """Login page (signed-in operators are redirected by the gate)."""
        return {"title": "Admin Login", "forgot_password_url": "/forgot-password"}

    @router.post(LOGIN_PATH, response_model=RedirectResponseModel)
    async def login(response: Response, payload: Any = Body(...)) -> dict:
        """Submit the login form; stores the bearer credential in a cookie."""
        try:
            result = await app.auth.login(payload)
        except FormError as e:
            raise HTTPException(status_code=422, detail={"errors": e.errors})
        except AuthError as e:
            raise HTTPException(
                status_code=401, detail={"errors": {"password": e.message}}
            )

        response.set_cookie(
            ACCESS_TOKEN_COOKIE,
            result.access_token,
            path="/",
            httponly=True,
            samesite="lax",
            secure=app.settings.cookie_secure,
        )
        return {"redirect": DASHBOARD_PATH, "delay": LOGIN_REDIRECT_DELAY}

    @router.post("/reset-password/{token}", response_model=RedirectResponseModel)
    async def reset_password(token: str, payload: Any = Body(...)) -> dict:
        """Set a new password from an e-mailed reset link."""
        try:
            message = await app.auth.reset_password(token.strip() or None, payload)
        except FormError as e:
            raise HTTPException(status_code=422, detail={"errors": e.errors})
        except AuthError as e:
            raise HTTPException(status_code=400, detail={"error": e.message})

        return {
            "redirect": LOGIN_PATH,
            "delay": RESET_REDIRECT_DELAY,
            "message": message,
        }

    return router
