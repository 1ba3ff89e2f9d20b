from __future__ import annotations

from fastapi import APIRouter
from core.config import get_settings

router = APIRouter(tags=["health"])

@router.get("/health", summary="Health check")
def health():
    """
    Health endpoint minimale.
    """
    settings = get_settings()
    return {
        "status": "ok",
        "domestic_league": settings.domestic_league,
        "seasons": {"previous": settings.season_prev_label, "current": settings.season_curr_label},
        "standings_fetch_enabled": settings.enable_standings_fetch,
    }
