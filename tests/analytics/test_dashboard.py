import json

from analytics.dashboard import build_dashboard
from standings.table import RankedTable


def test_dashboard_from_empty_inputs():
    out = build_dashboard([])
    assert out["stats"]["matches_played"] == 0
    assert out["fixtures"] == []
    assert out["difficulty"]["outlook"] is None
    assert out["standings"]["league"]["detail"] == "Standings not available."
    assert out["standings"]["continental"]["grouped"] is True
    json.dumps(out)


def test_dashboard_combines_pipelines(season_fixtures):
    league = RankedTable.from_flat_payload(
        {"children": [{"standings": {"entries": [
            {"team": {"name": "Arsenal"}, "stats": [{"name": "rank", "value": 1}, {"name": "points", "value": 9}]},
        ]}}]}
    )
    out = build_dashboard(season_fixtures, league_table=league)
    assert out["stats"]["points_curr"] == 9
    assert out["form"] == ["W", "W", "L", "W"]
    assert out["fixtures"][0]["match_no"] == 1
    assert out["goals"]["totals"]["25/26"]["goals"] == 13
    assert out["head_to_head"]["counts"]["worse"] == 1
    assert out["standings"]["league"]["rows"][0]["team"] == "Arsenal"
    assert out["standings"]["continental"]["rows"] == []
