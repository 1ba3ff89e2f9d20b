import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for p in (SRC, ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

import pytest  # noqa: E402
from core.config import _reset_settings_cache_for_tests  # noqa: E402


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch, tmp_path):
    monkeypatch.setenv("DASHBOARD_DATA_DIR", str(tmp_path))
    _reset_settings_cache_for_tests()
    yield
    _reset_settings_cache_for_tests()


@pytest.fixture
def season_fixtures():
    """Spaccato realistico: campionato, coppe, pause, duplicato e partite future."""
    return [
        {"mw": 1, "league": "PL", "opponent": "Manchester United", "venue": "Away",
         "result_prev": "D", "result_curr": "W", "score_prev": "1-1", "score_curr": "0-1",
         "pos_prev": 8, "pos_curr": 5, "pts_prev": 1, "pts_curr": 3},
        {"mw": 2, "league": "PL", "opponent": "Leeds United", "venue": "Home",
         "result_prev": None, "result_curr": "W", "score_prev": None, "score_curr": "5-0",
         "pos_prev": 4, "pos_curr": 1, "pts_prev": 4, "pts_curr": 6},
        {"mw": "R3", "league": "EFL", "opponent": "Port Vale", "venue": "Away",
         "result_curr": "W", "score_curr": "0-2"},
        {"is_fifa_break": True, "league": "FIFA"},
        {"mw": 3, "league": "PL", "opponent": "Liverpool", "venue": "Away",
         "result_prev": "D", "result_curr": "L", "score_prev": "2-2", "score_curr": "1-0",
         "pos_prev": 5, "pos_curr": 5, "pts_prev": 5, "pts_curr": 6},
        {"mw": "MD1", "league": "UCL", "opponent": "Athletic Club", "venue": "Away",
         "result_curr": "W", "score_curr": "0-2"},
        {"mw": "MD1", "league": "UCL", "opponent": "Athletic Club", "venue": "Away",
         "result_curr": "W", "score_curr": "0-2", "is_duplicate": True},
        {"mw": 4, "league": "PL", "opponent": "Nottingham Forest", "venue": "Home",
         "result_prev": "W", "result_curr": "W", "score_prev": "3-0", "score_curr": "3-0",
         "pos_prev": 3, "pos_curr": 2, "pts_prev": 8, "pts_curr": 9},
        {"is_can_break": True, "can_type": "start", "league": "CAN_START"},
        {"mw": 5, "league": "PL", "opponent": "Manchester City", "venue": "Home",
         "result_prev": "W", "result_curr": None, "pts_prev": 11, "pts_curr": None},
        {"mw": "MD2", "league": "UCL", "opponent": "Olympiacos", "venue": "Home", "result_curr": None},
        {"mw": 6, "league": "PL", "opponent": "Burnley", "venue": "Away", "result_curr": None},
    ]
