from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from analytics.fixtures import filter_fixtures, number_matches, process_fixtures
from core.config import get_settings
from core.persistence import load_fixtures

router = APIRouter(tags=["fixtures"])


@router.get("/fixtures", summary="Lista partite annotate e filtrate")
def get_fixtures(
    competition: str = Query("all", description="all, PL, UCL, FA, EFL"),
    view: str = Query("fixtures", description="fixtures oppure graphs"),
):
    """
    Partite annotate (match_diff / agg) filtrate per competizione.
    Le righe di pausa restano sempre; i duplicati restano marcati (is_duplicate).
    """
    settings = get_settings()
    fixtures = load_fixtures()
    processed = process_fixtures(
        fixtures,
        league=settings.domestic_league,
        form_length=settings.form_length,
        labels=settings.season_labels,
    )
    try:
        items = filter_fixtures(processed["fixtures"], competition, view)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if not fixtures:
        return {"count": 0, "items": [], "detail": "fixtures file not found or empty"}
    return {"count": len(items), "items": number_matches(items)}
