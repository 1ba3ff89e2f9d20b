from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from core.models import FixtureRecord
from core.scoring import is_structural

# (etichetta, prima giornata, ultima giornata)
PHASES: Tuple[Tuple[str, int, int], ...] = (
    ("MW 1-10", 1, 10),
    ("MW 11-19", 11, 19),
    ("MW 20-29", 20, 29),
    ("MW 30-38", 30, 38),
)


def _is_matchweek(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def points_at_matchweek(
    fixtures: Sequence[FixtureRecord],
    target_mw: int,
    pts_key: str,
    *,
    league: str = "PL",
) -> int:
    """
    Punti cumulati registrati all'ultima giornata <= target_mw con valore presente.
    Nessun dato -> 0.
    """
    best = None
    for match in fixtures:
        if is_structural(match) or match.get("league") != league:
            continue
        mw = match.get("mw")
        pts = match.get(pts_key)
        if not _is_matchweek(mw) or mw > target_mw or pts is None:
            continue
        if best is None or mw > best.get("mw"):
            best = match
    return best.get(pts_key) if best is not None else 0


def season_phases(
    fixtures: Sequence[FixtureRecord],
    *,
    league: str = "PL",
    labels: Tuple[str, str] = ("24/25", "25/26"),
) -> List[Dict[str, Any]]:
    """
    Punti per fase di stagione. Un totale cumulato pari a 0 vale come
    "nessun dato" e produce 0 per la fase invece di un delta negativo.
    """
    seasons = ((labels[0], "pts_prev"), (labels[1], "pts_curr"))
    last = {label: 0 for label, _ in seasons}
    rows: List[Dict[str, Any]] = []
    for name, _start, end in PHASES:
        row: Dict[str, Any] = {"name": name}
        for label, key in seasons:
            total = points_at_matchweek(fixtures, end, key, league=league)
            row[label] = total - last[label] if total > 0 else 0
            last[label] = total
        rows.append(row)
    return rows


__all__ = ["PHASES", "points_at_matchweek", "season_phases"]
