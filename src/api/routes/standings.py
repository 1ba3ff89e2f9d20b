from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from core.persistence import load_standings_snapshot
from providers.espn.standings_provider import CONTINENTAL, LEAGUE
from standings.sorting import DEFAULT_SORT, SORTABLE_KEYS, SortState, request_sort
from standings.table import RankedTable

router = APIRouter(prefix="/standings", tags=["standings"])


@router.get("/{competition}", summary="Classifica ordinabile")
def get_standings(
    competition: str,
    sort: Optional[str] = Query(None, description="Colonna richiesta (rank, wins, ties, losses, pointsFor, ...)"),
    current_key: Optional[str] = Query(None, description="Colonna dell'ordinamento corrente"),
    current_direction: Optional[str] = Query(None, description="asc oppure desc"),
):
    """
    Classifica dall'ultimo snapshot salvato. L'ordinamento segue il reducer:
    se `sort` coincide con `current_key` la direzione viene invertita,
    altrimenti si usa la direzione di default della colonna.
    """
    if competition == LEAGUE:
        build = RankedTable.from_flat_payload
    elif competition == CONTINENTAL:
        build = RankedTable.from_grouped_payload
    else:
        raise HTTPException(status_code=404, detail=f"unknown competition {competition!r}")

    current: Optional[SortState] = None
    if current_key:
        if current_key not in SORTABLE_KEYS:
            raise HTTPException(status_code=422, detail=f"colonna non ordinabile: {current_key!r}")
        if current_direction not in ("asc", "desc"):
            raise HTTPException(status_code=422, detail="current_direction deve essere asc o desc")
        current = SortState(current_key, current_direction)

    try:
        state = request_sort(current, sort) if sort else (current or DEFAULT_SORT)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    table = build(load_standings_snapshot(competition))
    return table.to_payload(state)
