from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from core.logging import get_logger
from core.models import GOAL_COMPETITIONS, FixtureRecord
from core.scoring import is_clean_sheet, scored_conceded

logger = get_logger("analytics.goals")

METRICS = ("goals", "conceded", "clean_sheets")
_ROW_NAMES = {"goals": "Goals Scored", "conceded": "Goals Conceded", "clean_sheets": "Clean Sheets"}


def season_goal_stats(fixtures: Sequence[FixtureRecord]) -> Dict[str, Dict[str, int]]:
    """
    Gol fatti, subiti e clean sheet della stagione corrente per competizione.
    Le partite con punteggio non interpretabile vengono escluse (solo qui).
    """
    stats = {metric: {c: 0 for c in GOAL_COMPETITIONS} for metric in METRICS}
    for match in fixtures:
        league = match.get("league")
        if league not in GOAL_COMPETITIONS or match.get("is_duplicate"):
            continue
        score = match.get("score_curr")
        if not score:
            continue
        sc = scored_conceded(score, match.get("venue"))
        if sc is None:
            logger.debug("Punteggio non valido ignorato: %r (avversario=%s)", score, match.get("opponent"))
            continue
        scored, conceded = sc
        stats["goals"][league] += scored
        stats["conceded"][league] += conceded
        if is_clean_sheet(score, match.get("venue"), match.get("result_curr")):
            stats["clean_sheets"][league] += 1
    return stats


def goal_stats_rows(
    current: Mapping[str, Mapping[str, int]],
    baseline: Mapping[str, Mapping[str, int]],
    labels: Tuple[str, str] = ("24/25", "25/26"),
) -> List[Dict[str, Any]]:
    """Righe per il grafico confronto stagioni: una per metrica, colonne '<comp> <stagione>'."""
    prev_label, curr_label = labels
    rows: List[Dict[str, Any]] = []
    for metric in METRICS:
        row: Dict[str, Any] = {"name": _ROW_NAMES[metric]}
        for comp in GOAL_COMPETITIONS:
            row[f"{comp} {prev_label}"] = (baseline.get(metric) or {}).get(comp, 0)
            row[f"{comp} {curr_label}"] = (current.get(metric) or {}).get(comp, 0)
        rows.append(row)
    return rows


def season_totals(stats: Mapping[str, Mapping[str, int]]) -> Dict[str, int]:
    return {metric: sum((stats.get(metric) or {}).values()) for metric in METRICS}


__all__ = ["season_goal_stats", "goal_stats_rows", "season_totals"]
