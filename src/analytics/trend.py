from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from core.models import FixtureRecord
from core.scoring import is_counted_league_match, points_for_result

TRENDS = ("all", "better", "same", "worse")


def _trend_of(diff: Optional[int]) -> Optional[str]:
    if diff is None:
        return None
    if diff > 0:
        return "better"
    if diff < 0:
        return "worse"
    return "same"


def head_to_head(
    fixtures: Sequence[FixtureRecord],
    *,
    league: str = "PL",
    trend: str = "all",
) -> Dict[str, Any]:
    """
    Confronto partita per partita con la stagione precedente (stesso avversario/venue).
    Senza risultato precedente il diff è None e la partita compare solo con trend "all".
    """
    if trend not in TRENDS:
        raise ValueError(f"Trend non valido: {trend!r}")

    counts = {"better": 0, "same": 0, "worse": 0}
    matches: List[Dict[str, Any]] = []
    for match in fixtures:
        if not is_counted_league_match(match, league):
            continue
        diff = None
        if match.get("result_prev"):
            diff = points_for_result(match.get("result_curr")) - points_for_result(match.get("result_prev"))
        t = _trend_of(diff)
        if t is not None:
            counts[t] += 1
        if trend != "all" and t != trend:
            continue
        matches.append(
            {
                "mw": match.get("mw"),
                "opponent": match.get("opponent"),
                "venue": match.get("venue"),
                "result_prev": match.get("result_prev"),
                "result_curr": match.get("result_curr"),
                "score_prev": match.get("score_prev"),
                "score_curr": match.get("score_curr"),
                "diff": diff,
                "trend": t,
            }
        )
    return {"counts": counts, "matches": matches}


__all__ = ["TRENDS", "head_to_head"]
