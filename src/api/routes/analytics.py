from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from analytics.difficulty import fixture_difficulty
from analytics.fixtures import process_fixtures
from analytics.goals import goal_stats_rows, season_goal_stats
from analytics.home_away import home_away_rows, home_away_split
from analytics.phases import season_phases
from analytics.trend import head_to_head
from core.config import get_settings
from core.persistence import load_baselines, load_difficulty_table, load_fixtures

router = APIRouter(prefix="/analytics", tags=["analytics"])


def _processed():
    settings = get_settings()
    return process_fixtures(
        load_fixtures(),
        league=settings.domestic_league,
        form_length=settings.form_length,
        labels=settings.season_labels,
    )


@router.get("/summary", summary="Punti stagione corrente vs precedente")
def get_summary():
    return _processed()["stats"]


@router.get("/form", summary="Forma recente in campionato")
def get_form():
    form = _processed()["form"]
    return {"count": len(form), "form": form}


@router.get("/series", summary="Serie per grafici posizione e differenza cumulata")
def get_series():
    processed = _processed()
    return {
        "cumulative": processed["cumulative_series"],
        "positions": processed["position_series"],
    }


@router.get("/phases", summary="Punti per fase di stagione")
def get_phases():
    settings = get_settings()
    return season_phases(load_fixtures(), league=settings.domestic_league, labels=settings.season_labels)


@router.get("/home-away", summary="Risultati casa / trasferta")
def get_home_away():
    settings = get_settings()
    current = home_away_split(load_fixtures(), league=settings.domestic_league)
    return home_away_rows(current, load_baselines()["home_away"], settings.season_labels)


@router.get("/goals", summary="Gol fatti, subiti e clean sheet per competizione")
def get_goals():
    settings = get_settings()
    current = season_goal_stats(load_fixtures())
    return {
        "current": current,
        "rows": goal_stats_rows(current, load_baselines()["all_comps"], settings.season_labels),
    }


@router.get("/difficulty", summary="Difficoltà delle prossime partite")
def get_difficulty():
    settings = get_settings()
    table = load_difficulty_table() or None
    return fixture_difficulty(load_fixtures(), limit=settings.difficulty_window, table=table)


@router.get("/head-to-head", summary="Confronto con la stagione precedente")
def get_head_to_head(trend: str = Query("all", description="all, better, same, worse")):
    settings = get_settings()
    try:
        return head_to_head(load_fixtures(), league=settings.domestic_league, trend=trend)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
