from __future__ import annotations

from statistics import mean
from typing import Any, Dict, List, Mapping, Optional, Sequence

from core.models import FixtureRecord
from core.scoring import is_structural

# Posizione "di forza" stimata per avversario (1 = più forte).
DEFAULT_DIFFICULTY_TABLE: Dict[str, int] = {
    "Liverpool": 1,
    "Arsenal": 2,
    "Manchester City": 3,
    "Chelsea": 4,
    "Manchester United": 5,
    "Newcastle United": 6,
    "Tottenham Hotspur": 7,
    "Bournemouth": 8,
    "Sunderland": 9,
    "Crystal Palace": 10,
    "Aston Villa": 11,
    "Brighton & Hove Albion": 12,
    "Brentford": 13,
    "Fulham": 14,
    "West Ham United": 15,
    "Everton": 16,
    "Wolverhampton Wanderers": 17,
    "Nottingham Forest": 18,
    "Leeds United": 19,
    "Burnley": 20,
    "Bayern Munich": 2,
    "Inter Milan": 3,
    "Atlético Madrid": 4,
    "Athletic Club": 6,
    "Olympiacos": 10,
    "Club Brugge": 14,
    "Slavia Praha": 16,
    "Kairat Almaty": 20,
    "Port Vale": 20,
}
DEFAULT_POSITION = 10

# (soglia posizione, livello, punteggio)
_TIERS = (
    (4, "Very Hard", 5),
    (8, "Hard", 4),
    (12, "Medium", 3),
    (16, "Easy", 2),
)
_LOWEST_TIER = ("Very Easy", 1)

# (soglia media, etichetta) dal più favorevole al meno favorevole
_OUTLOOKS = (
    (1.5, "Very Favorable"),
    (2.5, "Favorable"),
    (3.5, "Balanced"),
    (4.5, "Challenging"),
)
_WORST_OUTLOOK = "Very Challenging"


def difficulty_for(opponent: Optional[str], table: Optional[Mapping[str, int]] = None) -> Dict[str, Any]:
    lookup = DEFAULT_DIFFICULTY_TABLE if table is None else table
    position = lookup.get(opponent or "", DEFAULT_POSITION) or DEFAULT_POSITION
    for limit, level, score in _TIERS:
        if position <= limit:
            return {"level": level, "score": score}
    level, score = _LOWEST_TIER
    return {"level": level, "score": score}


def outlook_for(average: float) -> str:
    for limit, label in _OUTLOOKS:
        if average <= limit:
            return label
    return _WORST_OUTLOOK


def next_fixtures(fixtures: Sequence[FixtureRecord], limit: int = 6) -> List[FixtureRecord]:
    """Prime `limit` partite non ancora giocate, in ordine sorgente."""
    upcoming = [m for m in fixtures if not m.get("result_curr") and not is_structural(m)]
    return upcoming[:limit]


def fixture_difficulty(
    fixtures: Sequence[FixtureRecord],
    *,
    limit: int = 6,
    table: Optional[Mapping[str, int]] = None,
) -> Dict[str, Any]:
    """
    Difficoltà del prossimo calendario. Senza partite future (stagione finita)
    average e outlook sono None.
    """
    if table is not None:
        table = {**DEFAULT_DIFFICULTY_TABLE, **table}
    items: List[Dict[str, Any]] = []
    for match in next_fixtures(fixtures, limit):
        tier = difficulty_for(match.get("opponent"), table)
        items.append(
            {
                "mw": match.get("mw"),
                "round": match.get("round"),
                "date": match.get("date"),
                "opponent": match.get("opponent"),
                "venue": match.get("venue"),
                "league": match.get("league"),
                "level": tier["level"],
                "score": tier["score"],
            }
        )
    if not items:
        return {"fixtures": [], "average": None, "outlook": None}
    average = mean(item["score"] for item in items)
    return {"fixtures": items, "average": round(average, 2), "outlook": outlook_for(average)}


__all__ = [
    "DEFAULT_DIFFICULTY_TABLE",
    "difficulty_for",
    "outlook_for",
    "next_fixtures",
    "fixture_difficulty",
]
