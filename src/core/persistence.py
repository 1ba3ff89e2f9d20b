from __future__ import annotations

import json
import logging
import os
from json import JSONDecodeError
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import get_settings
from .models import FixtureDataset, GOAL_COMPETITIONS, OptaProjection, SeasonBaselines

LOGGER = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# File names
# ---------------------------------------------------------------------------
FIXTURES_FILE_NAME = "fixtures.json"
BASELINES_FILE_NAME = "baselines.json"
DIFFICULTY_FILE_NAME = "difficulty.json"
DASHBOARD_FILE_NAME = "dashboard.json"
OPTA_FILE_NAMES = {"league": "opta_pl.json", "continental": "opta_ucl.json"}
STANDINGS_FILE_NAMES = {"league": "standings_league.json", "continental": "standings_continental.json"}

# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def data_dir() -> Path:
    return Path(get_settings().data_dir or "data")


# ---------------------------------------------------------------------------
# Low level
# ---------------------------------------------------------------------------


def write_json_atomic(path: Path, data: Any, indent: int = 2) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=indent)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp_path, path)
    return path


def _load_json(path: Path) -> Optional[Any]:
    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except JSONDecodeError:
        LOGGER.warning("Invalid / corrupt JSON at %s", path)
        return None
    except OSError as e:
        LOGGER.warning("Error reading file %s: %s", path, e)
        return None


def _load_json_list(path: Path) -> List[Dict[str, Any]]:
    raw = _load_json(path)
    if raw is None:
        return []
    if not isinstance(raw, list):
        LOGGER.warning("Invalid structure in JSON (expected list) at %s", path)
        return []
    return [item for item in raw if isinstance(item, dict)]


def _load_json_dict(path: Path) -> Dict[str, Any]:
    raw = _load_json(path)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        LOGGER.warning("Invalid structure in JSON (expected object) at %s", path)
        return {}
    return raw


# ---------------------------------------------------------------------------
# Static inputs
# ---------------------------------------------------------------------------


def load_fixtures() -> FixtureDataset:
    """
    Carica la lista statica delle partite (ordine sorgente preservato).
    File mancante o corrotto -> lista vuota.
    """
    return _load_json_list(data_dir() / FIXTURES_FILE_NAME)  # type: ignore[return-value]


def load_opta(competition: str) -> List[OptaProjection]:
    """Tabelle Opta in sola lettura, restituite così come sono."""
    name = OPTA_FILE_NAMES.get(competition)
    if name is None:
        raise ValueError(f"Competizione Opta sconosciuta: {competition!r}")
    return _load_json_list(data_dir() / name)  # type: ignore[return-value]


def _int_or_zero(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def load_baselines() -> SeasonBaselines:
    """
    Baseline statiche della stagione precedente (gol per competizione, casa/trasferta).
    Chiavi mancanti -> 0.
    """
    raw = _load_json_dict(data_dir() / BASELINES_FILE_NAME)
    all_raw = raw.get("all_comps") if isinstance(raw.get("all_comps"), dict) else {}
    ha_raw = raw.get("home_away") if isinstance(raw.get("home_away"), dict) else {}

    all_comps: Dict[str, Dict[str, int]] = {}
    for metric in ("goals", "conceded", "clean_sheets"):
        per_comp = all_raw.get(metric) if isinstance(all_raw.get(metric), dict) else {}
        all_comps[metric] = {c: _int_or_zero(per_comp.get(c)) for c in GOAL_COMPETITIONS}

    home_away: Dict[str, Dict[str, int]] = {}
    for venue in ("Home", "Away"):
        wdl = ha_raw.get(venue) if isinstance(ha_raw.get(venue), dict) else {}
        home_away[venue] = {k: _int_or_zero(wdl.get(k)) for k in ("W", "D", "L")}

    return {"all_comps": all_comps, "home_away": home_away}


def load_difficulty_table() -> Dict[str, int]:
    """Override opzionale della tabella difficoltà (avversario -> posizione)."""
    raw = _load_json_dict(data_dir() / DIFFICULTY_FILE_NAME)
    out: Dict[str, int] = {}
    for name, pos in raw.items():
        try:
            out[str(name)] = int(pos)
        except (TypeError, ValueError):
            LOGGER.warning("Posizione difficoltà non valida per %s: %r", name, pos)
    return out


# ---------------------------------------------------------------------------
# Standings snapshots
# ---------------------------------------------------------------------------


def _standings_path(competition: str) -> Path:
    name = STANDINGS_FILE_NAMES.get(competition)
    if name is None:
        raise ValueError(f"Competizione classifica sconosciuta: {competition!r}")
    return data_dir() / name


def save_standings_snapshot(competition: str, payload: Optional[Dict[str, Any]]) -> Optional[Path]:
    """
    Salva il payload grezzo della classifica. Payload assente (fetch fallito)
    non sovrascrive lo snapshot precedente.
    """
    if not payload:
        return None
    return write_json_atomic(_standings_path(competition), payload)


def load_standings_snapshot(competition: str) -> Dict[str, Any]:
    return _load_json_dict(_standings_path(competition))


def write_dashboard(dashboard: Dict[str, Any]) -> Path:
    """Scrive dashboard.json nella data dir."""
    return write_json_atomic(data_dir() / DASHBOARD_FILE_NAME, dashboard)


def load_dashboard() -> Dict[str, Any]:
    return _load_json_dict(data_dir() / DASHBOARD_FILE_NAME)


__all__ = [
    "write_json_atomic",
    "load_fixtures",
    "load_opta",
    "load_baselines",
    "load_difficulty_table",
    "save_standings_snapshot",
    "load_standings_snapshot",
    "write_dashboard",
    "load_dashboard",
]
