from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Dict, List, Optional, Sequence

from core.models import StandingEntry
from .sorting import DEFAULT_SORT, SortState, make_comparator

FORM_LIMIT = 5
ROW_STATS = (
    "gamesPlayed",
    "wins",
    "ties",
    "losses",
    "pointsFor",
    "pointsAgainst",
    "pointDifferential",
    "points",
)


def stat_value(entry: Any, name: str) -> float:
    """Valore numerico di una statistica; assente o malformata -> 0."""
    stats = entry.get("stats") if isinstance(entry, dict) else None
    if not isinstance(stats, list):
        return 0
    for stat in stats:
        if isinstance(stat, dict) and stat.get("name") == name:
            value = stat.get("value")
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return value
            return 0
    return 0


def _display_value(entry: StandingEntry, name: str) -> Optional[str]:
    for stat in entry.get("stats") or []:
        if isinstance(stat, dict) and stat.get("name") == name:
            return stat.get("displayValue")
    return None


def _team(entry: Any) -> Dict[str, Any]:
    team = entry.get("team") if isinstance(entry, dict) else None
    return team if isinstance(team, dict) else {}


def team_name(entry: Any) -> str:
    return str(_team(entry).get("name") or "")


# ---------------------------------------------------------------------------
# Adapter input
# ---------------------------------------------------------------------------


def _entries_of(node: Any) -> List[StandingEntry]:
    if not isinstance(node, dict):
        return []
    standings = node.get("standings")
    if not isinstance(standings, dict):
        return []
    entries = standings.get("entries")
    if not isinstance(entries, list):
        return []
    return [e for e in entries if isinstance(e, dict)]


def flat_entries(payload: Any) -> List[StandingEntry]:
    """children[0].standings.entries; qualsiasi forma diversa -> []."""
    if not isinstance(payload, dict):
        return []
    children = payload.get("children")
    if not isinstance(children, list) or not children:
        return []
    return _entries_of(children[0])


def grouped_entries(payload: Any) -> List[StandingEntry]:
    """Concatena gli entries di tutti i gironi; gironi malformati ignorati."""
    if not isinstance(payload, dict):
        return []
    children = payload.get("children")
    if not isinstance(children, list):
        return []
    out: List[StandingEntry] = []
    for group in children:
        out.extend(_entries_of(group))
    return out


def rank_grouped(entries: Sequence[StandingEntry]) -> List[StandingEntry]:
    """
    Classifica globale: punti desc, differenza reti desc, gol fatti desc, nome asc.
    Ritorna copie con calculated_rank (1-based).
    """
    ordered = sorted(
        entries,
        key=lambda e: (
            -stat_value(e, "points"),
            -stat_value(e, "pointDifferential"),
            -stat_value(e, "pointsFor"),
            team_name(e),
        ),
    )
    return [{**entry, "calculated_rank": idx} for idx, entry in enumerate(ordered, start=1)]


def form_letters(entry: Any, limit: int = FORM_LIMIT) -> List[str]:
    events = _team(entry).get("recentEvents")
    if not isinstance(events, list):
        return []
    out: List[str] = []
    for event in events[:limit]:
        result = event.get("result") if isinstance(event, dict) else None
        out.append(str(result)[:1].upper() if result else "")
    return out


# ---------------------------------------------------------------------------
# RankedTable
# ---------------------------------------------------------------------------


class RankedTable:
    """
    Tabella ordinabile unica per le due competizioni.
    - flat: entries passati così come sono, rank dalla statistica "rank"
    - grouped: gironi appiattiti e classifica globale calcolata (calculated_rank)
    """

    def __init__(self, entries: Sequence[StandingEntry], *, grouped: bool = False) -> None:
        self.grouped = grouped
        self.entries: List[StandingEntry] = rank_grouped(entries) if grouped else list(entries)
        self.has_form_data = any(
            isinstance(_team(e).get("recentEvents"), list) and len(_team(e)["recentEvents"]) > 0
            for e in self.entries
        )

    @classmethod
    def from_flat_payload(cls, payload: Any) -> "RankedTable":
        return cls(flat_entries(payload), grouped=False)

    @classmethod
    def from_grouped_payload(cls, payload: Any) -> "RankedTable":
        return cls(grouped_entries(payload), grouped=True)

    @classmethod
    def empty(cls, *, grouped: bool = False) -> "RankedTable":
        return cls([], grouped=grouped)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def rank_value(self, entry: StandingEntry) -> float:
        if self.grouped:
            return entry.get("calculated_rank") or 0
        return stat_value(entry, "rank")

    def _primary(self, key: str):
        if key == "rank":
            return self.rank_value
        return lambda e: stat_value(e, key)

    def sorted_entries(self, state: Optional[SortState] = DEFAULT_SORT) -> List[StandingEntry]:
        items = list(self.entries)
        if state is None:
            return items
        compare = make_comparator(state, self._primary(state.key), stat_value)
        items.sort(key=cmp_to_key(compare))
        return items

    def to_rows(self, state: Optional[SortState] = DEFAULT_SORT) -> List[Dict[str, Any]]:
        rows: List[Dict[str, Any]] = []
        for entry in self.sorted_entries(state):
            team = _team(entry)
            logos = team.get("logos")
            logo = None
            if isinstance(logos, list) and logos and isinstance(logos[0], dict):
                logo = logos[0].get("href")
            row: Dict[str, Any] = {
                "rank": self.rank_value(entry),
                "team": team.get("name"),
                "abbreviation": team.get("abbreviation"),
                "logo": logo,
                "stats": {name: stat_value(entry, name) for name in ROW_STATS},
                "display": {name: _display_value(entry, name) for name in ROW_STATS},
            }
            if self.has_form_data:
                row["form"] = form_letters(entry)
            rows.append(row)
        return rows

    def to_payload(self, state: Optional[SortState] = DEFAULT_SORT) -> Dict[str, Any]:
        if self.is_empty:
            return {
                "grouped": self.grouped,
                "has_form_data": False,
                "sort": None,
                "rows": [],
                "detail": "Standings not available.",
            }
        return {
            "grouped": self.grouped,
            "has_form_data": self.has_form_data,
            "sort": {"key": state.key, "direction": state.direction} if state else None,
            "rows": self.to_rows(state),
        }


__all__ = [
    "stat_value",
    "flat_entries",
    "grouped_entries",
    "rank_grouped",
    "form_letters",
    "RankedTable",
]
