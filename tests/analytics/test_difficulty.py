import pytest

from analytics.difficulty import difficulty_for, fixture_difficulty, next_fixtures, outlook_for


@pytest.mark.parametrize(
    "opponent,level,score",
    [
        ("Liverpool", "Very Hard", 5),
        ("Newcastle United", "Hard", 4),
        ("Crystal Palace", "Medium", 3),
        ("Fulham", "Easy", 2),
        ("Burnley", "Very Easy", 1),
        ("Unknown FC", "Medium", 3),
        (None, "Medium", 3),
    ],
)
def test_difficulty_tiers(opponent, level, score):
    assert difficulty_for(opponent) == {"level": level, "score": score}


@pytest.mark.parametrize(
    "avg,label",
    [(1.0, "Very Favorable"), (1.5, "Very Favorable"), (2.5, "Favorable"), (3.4, "Balanced"),
     (4.5, "Challenging"), (4.6, "Very Challenging")],
)
def test_outlook_bands(avg, label):
    assert outlook_for(avg) == label


def test_next_fixtures_skip_played_and_structural(season_fixtures):
    upcoming = next_fixtures(season_fixtures)
    assert [m["opponent"] for m in upcoming] == ["Manchester City", "Olympiacos", "Burnley"]


def test_next_fixtures_limit():
    fixtures = [{"league": "PL", "opponent": f"Team {i}"} for i in range(10)]
    assert len(next_fixtures(fixtures)) == 6


def test_fixture_difficulty_average(season_fixtures):
    out = fixture_difficulty(season_fixtures)
    assert [f["score"] for f in out["fixtures"]] == [5, 3, 1]
    assert out["average"] == 3.0
    assert out["outlook"] == "Balanced"


def test_table_override_merges_with_defaults(season_fixtures):
    out = fixture_difficulty(season_fixtures, table={"Burnley": 1})
    assert [f["score"] for f in out["fixtures"]] == [5, 3, 5]


def test_season_finished():
    out = fixture_difficulty([{"league": "PL", "opponent": "Liverpool", "result_curr": "W"}])
    assert out == {"fixtures": [], "average": None, "outlook": None}
