from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Optional

Direction = Literal["asc", "desc"]

SORTABLE_KEYS = (
    "rank",
    "wins",
    "ties",
    "losses",
    "pointsFor",
    "pointsAgainst",
    "pointDifferential",
    "points",
)
# Chiavi per cui "meno è meglio": direzione iniziale ascendente
ASCENDING_BY_DEFAULT = frozenset({"rank", "losses", "pointsAgainst"})

GOAL_DIFF = "pointDifferential"
GOALS_FOR = "pointsFor"


@dataclass(frozen=True)
class SortState:
    key: str
    direction: Direction


DEFAULT_SORT = SortState("rank", "asc")


def request_sort(state: Optional[SortState], key: str) -> SortState:
    """
    Reducer (stato corrente, chiave richiesta) -> nuovo stato.
    Stessa chiave: inverte la direzione. Chiave nuova: direzione di default.
    """
    if key not in SORTABLE_KEYS:
        raise ValueError(f"Colonna non ordinabile: {key!r}")
    if state is not None and state.key == key:
        return SortState(key, "desc" if state.direction == "asc" else "asc")
    return SortState(key, "asc" if key in ASCENDING_BY_DEFAULT else "desc")


def _cmp(a: float, b: float) -> int:
    return (a > b) - (a < b)


def make_comparator(
    state: SortState,
    primary_value: Callable[[object], float],
    stat_value: Callable[[object, str], float],
) -> Callable[[object, object], int]:
    """
    Comparatore per functools.cmp_to_key:
    chiave primaria nella direzione richiesta, poi differenza reti desc,
    poi gol fatti desc (ognuno saltato se coincide con la chiave primaria).
    """
    sign = 1 if state.direction == "asc" else -1

    def compare(a: object, b: object) -> int:
        c = _cmp(primary_value(a), primary_value(b))
        if c:
            return sign * c
        if state.key != GOAL_DIFF:
            c = _cmp(stat_value(b, GOAL_DIFF), stat_value(a, GOAL_DIFF))
            if c:
                return c
        if state.key != GOALS_FOR:
            c = _cmp(stat_value(b, GOALS_FOR), stat_value(a, GOALS_FOR))
            if c:
                return c
        return 0

    return compare


__all__ = [
    "SORTABLE_KEYS",
    "SortState",
    "DEFAULT_SORT",
    "request_sort",
    "make_comparator",
]
