"""Web service for the leaderboard: on-demand ranking, snapshot, login gate."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from fastapi import FastAPI, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response

from api import pages
from api.schemas import ErrorResponse, LeaderboardResponse, LoginRequest
from config import settings
from core.async_http import FetchError
from domain import ranking
from domain.models import Snapshot
from services import auth, pipeline, snapshot_store
from services.leaderboard_cache import LeaderboardCache

logger = logging.getLogger(__name__)

TITLE = "Full manual SK"

PUBLIC_PATHS = {"/login", "/api/login", "/health"}
PUBLIC_PREFIXES = ("/static/",)


def _is_public(path: str) -> bool:
    return path in PUBLIC_PATHS or path.startswith(PUBLIC_PREFIXES)


def _wants_json(path: str) -> bool:
    return path.startswith("/api/") or path == "/stats.json"


def create_app(
    *,
    refresh: Callable[[], Awaitable[Snapshot]] | None = None,
    snapshot_path: str | None = None,
    club_id: str | None = None,
    cache_ttl: float = settings.CACHE_TTL_SECONDS,
) -> FastAPI:
    app = FastAPI(title="G+A leaderboard")
    club_id = club_id or settings.CLUB_ID
    snapshot_path = snapshot_path or settings.snapshot_path()

    async def _default_refresh() -> Snapshot:
        return await pipeline.build_snapshot(club_id)

    cache = LeaderboardCache(refresh or _default_refresh, ttl=cache_ttl)
    app.state.leaderboard_cache = cache

    @app.middleware("http")
    async def auth_gate(request: Request, call_next):
        path = request.url.path
        # Without a configured secret the site stays open (local development)
        if _is_public(path) or not settings.site_password():
            return await call_next(request)
        if auth.is_valid_session(request.cookies.get(settings.AUTH_COOKIE_NAME)):
            return await call_next(request)
        if _wants_json(path):
            return JSONResponse({"error": "Authentication required"}, status_code=401)
        return RedirectResponse("/login", status_code=303)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(
        "/api/ga-per-match",
        response_model=LeaderboardResponse,
        responses={502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
    )
    async def ga_per_match(min_games: float = Query(0, alias="minGames", ge=0)):
        try:
            snapshot, cached = await cache.get_or_refresh()
        except FetchError as e:
            logger.warning("Leaderboard refresh failed: %s", e)
            return JSONResponse({"error": f"squad page unavailable: {e}"}, status_code=502)
        except pipeline.PipelineTimeout as e:
            logger.warning("Leaderboard refresh timed out: %s", e)
            return JSONResponse({"error": str(e)}, status_code=504)
        rows = ranking.filter_min_games(snapshot.rows, min_games)
        return LeaderboardResponse.from_snapshot(
            snapshot,
            rows,
            club_id=club_id,
            source=settings.SOURCE_NAME,
            min_games=min_games,
            cached=cached,
        )

    @app.post("/api/login")
    async def login(payload: LoginRequest) -> Response:
        try:
            token = auth.login(payload.password)
        except auth.AuthError as e:
            return JSONResponse({"error": str(e)}, status_code=e.status_code)
        response = JSONResponse({"ok": True})
        response.set_cookie(
            settings.AUTH_COOKIE_NAME,
            token,
            max_age=settings.AUTH_COOKIE_MAX_AGE,
            httponly=True,
            secure=settings.COOKIE_SECURE,
            samesite="lax",
            path="/",
        )
        return response

    @app.post("/api/logout")
    async def logout() -> Response:
        response = JSONResponse({"ok": True})
        response.delete_cookie(settings.AUTH_COOKIE_NAME, path="/")
        return response

    @app.get("/stats.json")
    async def stats() -> Response:
        data = snapshot_store.load_snapshot(snapshot_path)
        if data is None:
            return JSONResponse({"error": "No snapshot published yet"}, status_code=404)
        return JSONResponse(data, headers={"Cache-Control": "no-store"})

    @app.get("/login", response_class=HTMLResponse)
    async def login_page() -> str:
        return pages.login_page(TITLE)

    @app.get("/", response_class=HTMLResponse)
    async def dashboard() -> str:
        return pages.dashboard_page(TITLE)

    return app
