from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

from core.models import COMPETITIONS, VIEWS, FixtureDataset, FixtureRecord, ProcessedData, SeasonStats
from core.scoring import is_break, is_counted_league_match, is_structural, points_for_result


def process_fixtures(
    fixtures: Sequence[FixtureRecord],
    *,
    league: str = "PL",
    form_length: int = 8,
    labels: tuple[str, str] = ("24/25", "25/26"),
) -> ProcessedData:
    """
    Annota la lista partite in un solo passaggio (ordine sorgente).

    - righe strutturali (pause / duplicati) passano invariate;
    - partite di campionato con risultato corrente ricevono match_diff e agg
      (somma progressiva di match_diff, solo campionato);
    - tutte le altre ricevono match_diff=None e agg=None.

    Le partite in input non vengono mai modificate: i campi derivati finiscono in copie.
    """
    prev_label, curr_label = labels
    running = 0
    processed: FixtureDataset = []
    cumulative_series: List[Dict[str, Any]] = []
    position_series: List[Dict[str, Any]] = []
    form: List[str] = []
    last_counted: Optional[FixtureRecord] = None
    played = 0

    for match in fixtures:
        if is_structural(match):
            processed.append(match)
            continue

        if not is_counted_league_match(match, league):
            processed.append({**match, "match_diff": None, "agg": None})
            continue

        result = match.get("result_curr")
        match_diff = points_for_result(result) - points_for_result(match.get("result_prev"))
        running += match_diff
        processed.append({**match, "match_diff": match_diff, "agg": running})

        form.append(str(result))
        played += 1
        last_counted = match

        name = f"MW{match.get('mw')}"
        opponent = match.get("opponent")
        cumulative_series.append({"name": name, "diff": running, "opponent": opponent})
        position_series.append(
            {
                "name": name,
                prev_label: match.get("pos_prev"),
                curr_label: match.get("pos_curr"),
                "opponent": opponent,
            }
        )

    points_curr = (last_counted or {}).get("pts_curr") or 0
    points_prev = (last_counted or {}).get("pts_prev") or 0
    stats: SeasonStats = {
        "points_curr": points_curr,
        "points_prev": points_prev,
        "matches_played": played,
        "difference": points_curr - points_prev,
    }

    return {
        "stats": stats,
        "fixtures": processed,
        "cumulative_series": cumulative_series,
        "position_series": position_series,
        "form": form[-form_length:] if form_length > 0 else [],
    }


def filter_fixtures(
    fixtures: Sequence[FixtureRecord],
    competition: str = "all",
    view: str = "fixtures",
) -> FixtureDataset:
    """
    Filtro per competizione. Con "all" o vista grafici la lista torna invariata;
    le righe di pausa non vengono mai nascoste.
    """
    if competition not in COMPETITIONS:
        raise ValueError(f"Competizione non valida: {competition!r}")
    if view not in VIEWS:
        raise ValueError(f"Vista non valida: {view!r}")
    if competition == "all" or view == "graphs":
        return list(fixtures)
    return [m for m in fixtures if m.get("league") == competition or is_break(m)]


def number_matches(fixtures: Iterable[FixtureRecord]) -> FixtureDataset:
    """
    Numerazione progressiva per la visualizzazione: i duplicati restano in lista
    ma non incrementano il contatore.
    """
    counter = 0
    out: FixtureDataset = []
    for match in fixtures:
        if is_structural(match):
            out.append({**match, "match_no": None})
            continue
        counter += 1
        out.append({**match, "match_no": counter})
    return out


__all__ = ["process_fixtures", "filter_fixtures", "number_matches"]
