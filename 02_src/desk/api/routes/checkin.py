"""Check-in screen routes, one set shared by every touchpoint."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import APIRouter, HTTPException, Query, Request

from ...app import Application
from ...errors import (
    MutationError,
    RecordNotFoundError,
    ScreenBusyError,
    ScreenError,
)
from ...roster import CheckInScreen, ScreenStatus, ScreenView
from ...touchpoints import get_touchpoint
from ..deps import request_session


def create_checkin_router(app: Application) -> APIRouter:
    """Create check-in router."""
    router = APIRouter(prefix="/dashboard/check-in", tags=["check-in"])

    @asynccontextmanager
    async def screen_for(request: Request, slug: str) -> AsyncIterator[CheckInScreen]:
        try:
            touchpoint = get_touchpoint(slug)
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Unknown check-in point: {slug}")
        screen = app.screens.get(request_session(request), touchpoint)
        try:
            yield screen
        finally:
            app.screens.release(screen)

    @router.get("/{slug}", response_model=ScreenView)
    async def show_screen(
        request: Request,
        slug: str,
        q: str | None = Query(None, description="Search text"),
        page: int | None = Query(None, ge=1, description="1-based page"),
    ) -> ScreenView:
        """Load the roster, then apply search and page selection."""
        async with screen_for(request, slug) as screen:
            await screen.load()

            query_changed = q is not None and screen.search(q)
            # a new query always starts from page 1
            if page is not None and not query_changed:
                screen.go_to(page)
            return screen.view()

    @router.post("/{slug}/records/{record_id}/select", response_model=ScreenView)
    async def select_record(request: Request, slug: str, record_id: str) -> ScreenView:
        """Open the confirmation dialog (no-op for completed records)."""
        async with screen_for(request, slug) as screen:
            if screen.status is ScreenStatus.IDLE:
                await screen.load()
            if screen.status is ScreenStatus.ERROR:
                return screen.view()
            try:
                screen.open_confirm(record_id)
            except RecordNotFoundError as e:
                raise HTTPException(status_code=404, detail=str(e))
            except ScreenBusyError as e:
                raise HTTPException(status_code=409, detail=str(e))
            return screen.view()

    @router.post("/{slug}/cancel", response_model=ScreenView)
    async def cancel(request: Request, slug: str) -> ScreenView:
        """Close the confirmation dialog."""
        async with screen_for(request, slug) as screen:
            try:
                screen.cancel()
            except ScreenBusyError as e:
                raise HTTPException(status_code=409, detail=str(e))
            return screen.view()

    @router.post("/{slug}/confirm", response_model=ScreenView)
    async def confirm(request: Request, slug: str) -> ScreenView:
        """Commit the selected status transition."""
        async with screen_for(request, slug) as screen:
            try:
                await screen.confirm()
            except MutationError as e:
                raise HTTPException(status_code=502, detail={"alert": e.message})
            except ScreenError as e:
                raise HTTPException(status_code=409, detail=str(e))
            return screen.view()

    return router
