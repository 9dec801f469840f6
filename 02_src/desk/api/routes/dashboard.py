"""Dashboard and logout routes."""

from pydantic import BaseModel
from fastapi import APIRouter, HTTPException, Request, Response

from ...app import Application
from ...config import ACCESS_TOKEN_COOKIE
from ...errors import AuthError
from ...session.gate import DASHBOARD_PATH, LOGIN_PATH
from ...touchpoints import all_touchpoints
from ..deps import request_session


class CheckInPoint(BaseModel):
    """A link to one touchpoint screen."""

    id: str
    label: str
    href: str


class DashboardView(BaseModel):
    """Response model for the dashboard."""

    title: str
    check_in_points: list[CheckInPoint]


class LogoutResponse(BaseModel):
    redirect: str


def create_dashboard_router(app: Application) -> APIRouter:
    """Create dashboard router."""
    router = APIRouter(prefix=DASHBOARD_PATH, tags=["dashboard"])

    @router.get("", response_model=DashboardView)
    async def dashboard() -> dict:
        """List the check-in points."""
        return {
            "title": "Faculty Check-In Points",
            "check_in_points": [
                {
                    "id": tp.slug,
                    "label": tp.label,
                    "href": f"{DASHBOARD_PATH}/check-in/{tp.slug}",
                }
                for tp in all_touchpoints()
            ],
        }

    @router.post("/logout", response_model=LogoutResponse)
    async def logout(request: Request, response: Response) -> dict:
        """End the session and clear the credential cookie."""
        try:
            await app.auth.logout(request_session(request))
        except AuthError as e:
            raise HTTPException(status_code=502, detail=e.message)

        response.delete_cookie(ACCESS_TOKEN_COOKIE, path="/")
        return {"redirect": LOGIN_PATH}

    return router
