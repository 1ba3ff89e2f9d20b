from __future__ import annotations

from fastapi import FastAPI

from core.config import get_settings
from core.logging import apply_log_level, get_logger

from api.routes.health import router as health_router
from api.routes.fixtures import router as fixtures_router
from api.routes.analytics import router as analytics_router
from api.routes.standings import router as standings_router
from api.routes.opta import router as opta_router
from api.routes.dashboard import router as dashboard_router

logger = get_logger("api.app")


def create_app() -> FastAPI:
    app = FastAPI(title="Season Pace API", version="0.1.0")
    try:
        apply_log_level(get_settings().log_level)
    except Exception as exc:  # pragma: no cover
        logger.error("Impossibile caricare settings: %s", exc)

    app.include_router(health_router)
    app.include_router(fixtures_router)
    app.include_router(analytics_router)
    app.include_router(standings_router)
    app.include_router(opta_router)
    app.include_router(dashboard_router)
    return app


app = create_app()
