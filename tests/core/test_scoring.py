import pytest

from core.scoring import (
    is_clean_sheet,
    is_counted_league_match,
    is_structural,
    parse_score,
    points_for_result,
    scored_conceded,
)


@pytest.mark.parametrize("result,expected", [("W", 3), ("D", 1), ("L", 0), (None, 0), ("", 0), ("X", 0)])
def test_points_for_result(result, expected):
    assert points_for_result(result) == expected


def test_scored_conceded_uses_venue():
    assert scored_conceded("2-1", "Home") == (2, 1)
    assert scored_conceded("2-1", "Away") == (1, 2)


@pytest.mark.parametrize("raw", [None, "", "2", "2-", "-1", "a-b", "2-1-0", "2:1"])
def test_parse_score_rejects_malformed(raw):
    assert parse_score(raw) is None


def test_parse_score_tolerates_spaces():
    assert parse_score(" 3 - 0 ") == (3, 0)


def test_clean_sheet_requires_win_or_draw():
    assert is_clean_sheet("0-0", "Home", "D")
    assert is_clean_sheet("0-2", "Away", "W")
    assert not is_clean_sheet("1-0", "Away", "L")
    assert not is_clean_sheet("x", "Home", "W")


def test_structural_and_counted_rows():
    assert is_structural({"is_fifa_break": True})
    assert is_structural({"is_can_break": True})
    assert is_structural({"is_duplicate": True, "league": "PL", "result_curr": "W"})
    assert not is_counted_league_match({"is_duplicate": True, "league": "PL", "result_curr": "W"}, "PL")
    assert is_counted_league_match({"league": "PL", "result_curr": "D"}, "PL")
    assert not is_counted_league_match({"league": "UCL", "result_curr": "D"}, "PL")
    assert not is_counted_league_match({"league": "PL", "result_curr": None}, "PL")
