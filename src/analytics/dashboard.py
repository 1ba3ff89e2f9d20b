from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from core.config import Settings, get_settings
from core.models import FixtureRecord, OptaProjection, SeasonBaselines
from standings.table import RankedTable

from .difficulty import fixture_difficulty
from .fixtures import number_matches, process_fixtures
from .goals import goal_stats_rows, season_goal_stats, season_totals
from .home_away import home_away_rows, home_away_split
from .phases import season_phases
from .trend import head_to_head

_EMPTY_BASELINES: SeasonBaselines = {"all_comps": {}, "home_away": {}}


def build_dashboard(
    fixtures: Sequence[FixtureRecord],
    *,
    league_table: Optional[RankedTable] = None,
    continental_table: Optional[RankedTable] = None,
    opta: Optional[Dict[str, List[OptaProjection]]] = None,
    baselines: Optional[SeasonBaselines] = None,
    difficulty_table: Optional[Dict[str, int]] = None,
    settings: Optional[Settings] = None,
) -> Dict[str, Any]:
    """
    Ricalcola tutte le viste dalla lista partite canonica e dalle classifiche.
    Input vuoti producono strutture vuote / a zero, mai eccezioni.
    """
    settings = settings or get_settings()
    league = settings.domestic_league
    labels = settings.season_labels
    baselines = baselines or _EMPTY_BASELINES
    league_table = league_table or RankedTable.empty(grouped=False)
    continental_table = continental_table or RankedTable.empty(grouped=True)

    processed = process_fixtures(fixtures, league=league, form_length=settings.form_length, labels=labels)
    goals_curr = season_goal_stats(fixtures)
    goals_prev = baselines.get("all_comps") or {}
    ha_curr = home_away_split(fixtures, league=league)

    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "seasons": {"previous": labels[0], "current": labels[1]},
        "stats": processed["stats"],
        "form": processed["form"],
        "fixtures": number_matches(processed["fixtures"]),
        "cumulative_series": processed["cumulative_series"],
        "position_series": processed["position_series"],
        "phases": season_phases(fixtures, league=league, labels=labels),
        "home_away": home_away_rows(ha_curr, baselines.get("home_away") or {}, labels),
        "goals": {
            "rows": goal_stats_rows(goals_curr, goals_prev, labels),
            "totals": {labels[1]: season_totals(goals_curr), labels[0]: season_totals(goals_prev)},
        },
        "difficulty": fixture_difficulty(fixtures, limit=settings.difficulty_window, table=difficulty_table),
        "head_to_head": head_to_head(fixtures, league=league),
        "standings": {
            "league": league_table.to_payload(),
            "continental": continental_table.to_payload(),
        },
        "opta": opta or {"league": [], "continental": []},
    }


__all__ = ["build_dashboard"]
