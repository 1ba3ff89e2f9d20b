from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Tuple

from core.models import FixtureRecord, WDL
from core.scoring import is_counted_league_match

VENUES = ("Home", "Away")


def _empty() -> WDL:
    return {"W": 0, "D": 0, "L": 0}


def home_away_split(fixtures: Sequence[FixtureRecord], *, league: str = "PL") -> Dict[str, WDL]:
    """Conteggio V/N/P per venue, solo partite di campionato giocate."""
    out = {venue: _empty() for venue in VENUES}
    for match in fixtures:
        if not is_counted_league_match(match, league):
            continue
        venue = match.get("venue")
        result = match.get("result_curr")
        if venue in out and result in out[venue]:
            out[venue][result] += 1
    return out


def home_away_rows(
    current: Mapping[str, WDL],
    baseline: Mapping[str, WDL],
    labels: Tuple[str, str] = ("24/25", "25/26"),
) -> List[Dict[str, Any]]:
    prev_label, curr_label = labels
    rows: List[Dict[str, Any]] = []
    for venue in VENUES:
        for label, source in ((curr_label, current), (prev_label, baseline)):
            wdl = source.get(venue) or _empty()
            rows.append(
                {
                    "name": f"{venue} {label}",
                    "wins": wdl.get("W", 0),
                    "draws": wdl.get("D", 0),
                    "losses": wdl.get("L", 0),
                }
            )
    return rows


__all__ = ["home_away_split", "home_away_rows"]
