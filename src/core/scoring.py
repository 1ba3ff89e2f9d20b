from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Tuple

_POINTS = {"W": 3, "D": 1, "L": 0}

# Due interi separati da trattino, es. "2-1"
_SCORE_RE = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def points_for_result(result: Optional[str]) -> int:
    """W -> 3, D -> 1, tutto il resto (L, None, valori sconosciuti) -> 0."""
    return _POINTS.get(result, 0) if result else 0


def parse_score(score: Optional[str]) -> Optional[Tuple[int, int]]:
    """
    Parsing di una stringa punteggio "casa-trasferta".
    Ritorna None se la stringa non contiene esattamente due interi separati da '-'.
    """
    if not score or not isinstance(score, str):
        return None
    m = _SCORE_RE.match(score)
    if not m:
        return None
    return int(m.group(1)), int(m.group(2))


def scored_conceded(score: Optional[str], venue: Optional[str]) -> Optional[Tuple[int, int]]:
    """Gol fatti/subiti dal punto di vista della squadra, in base alla venue."""
    parsed = parse_score(score)
    if parsed is None:
        return None
    home, away = parsed
    if venue == "Home":
        return home, away
    return away, home


def is_clean_sheet(score: Optional[str], venue: Optional[str], result: Optional[str]) -> bool:
    sc = scored_conceded(score, venue)
    if sc is None:
        return False
    return sc[1] == 0 and result in ("W", "D")


def is_break(match: Mapping[str, Any]) -> bool:
    return bool(match.get("is_fifa_break") or match.get("is_can_break"))


def is_structural(match: Mapping[str, Any]) -> bool:
    """Righe di pausa (FIFA / CAN) o duplicati: mai conteggiate nelle aggregazioni."""
    return is_break(match) or bool(match.get("is_duplicate"))


def is_counted_league_match(match: Mapping[str, Any], league: str) -> bool:
    """Partita di campionato con risultato registrato nella stagione corrente."""
    if is_structural(match):
        return False
    return match.get("league") == league and bool(match.get("result_curr"))


__all__ = [
    "points_for_result",
    "parse_score",
    "scored_conceded",
    "is_clean_sheet",
    "is_break",
    "is_structural",
    "is_counted_league_match",
]
