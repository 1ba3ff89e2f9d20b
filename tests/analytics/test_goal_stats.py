from analytics.goals import goal_stats_rows, season_goal_stats, season_totals


def test_goal_stats_by_competition(season_fixtures):
    stats = season_goal_stats(season_fixtures)
    assert stats["goals"] == {"PL": 9, "UCL": 2, "FA": 0, "EFL": 2}
    assert stats["conceded"] == {"PL": 1, "UCL": 0, "FA": 0, "EFL": 0}
    assert stats["clean_sheets"] == {"PL": 3, "UCL": 1, "FA": 0, "EFL": 1}


def test_unparsable_score_excluded():
    fixtures = [
        {"league": "PL", "venue": "Home", "score_curr": "2-1", "result_curr": "W"},
        {"league": "PL", "venue": "Home", "score_curr": "P-P", "result_curr": "W"},
    ]
    stats = season_goal_stats(fixtures)
    assert stats["goals"]["PL"] == 2
    assert stats["conceded"]["PL"] == 1


def test_goalless_loss_is_not_clean_sheet():
    # Punteggio incoerente col risultato: il clean sheet richiede W o D
    stats = season_goal_stats([{"league": "FA", "venue": "Away", "score_curr": "0-0", "result_curr": "L"}])
    assert stats["clean_sheets"]["FA"] == 0


def test_rows_and_totals():
    current = season_goal_stats([{"league": "PL", "venue": "Away", "score_curr": "1-3", "result_curr": "W"}])
    baseline = {"goals": {"PL": 69}, "conceded": {"PL": 34}, "clean_sheets": {"PL": 13}}
    rows = goal_stats_rows(current, baseline)
    assert [r["name"] for r in rows] == ["Goals Scored", "Goals Conceded", "Clean Sheets"]
    assert rows[0]["PL 25/26"] == 3
    assert rows[0]["PL 24/25"] == 69
    assert rows[1]["UCL 24/25"] == 0
    assert season_totals(current) == {"goals": 3, "conceded": 1, "clean_sheets": 0}


def test_clean_sheet_uses_venue_to_pick_conceded():
    fixtures = [
        {"league": "UCL", "venue": "Away", "score_curr": "0-1", "result_curr": "W"},
        {"league": "UCL", "venue": "Home", "score_curr": "2-1", "result_curr": "W"},
    ]
    stats = season_goal_stats(fixtures)
    assert stats["clean_sheets"]["UCL"] == 1
    assert stats["conceded"]["UCL"] == 1
