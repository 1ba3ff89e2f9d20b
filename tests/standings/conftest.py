import pytest


def make_entry(name, *, points=0, gd=0, gf=0, ga=0, wins=0, ties=0, losses=0, rank=0, form=None):
    stats = {
        "rank": rank,
        "gamesPlayed": wins + ties + losses,
        "wins": wins,
        "ties": ties,
        "losses": losses,
        "pointsFor": gf,
        "pointsAgainst": ga,
        "pointDifferential": gd,
        "points": points,
    }
    return {
        "team": {
            "name": name,
            "abbreviation": name[:3].upper(),
            "logos": [{"href": f"https://img/{name}.png"}],
            "recentEvents": [{"result": r} for r in (form or [])],
        },
        "stats": [{"name": k, "value": v, "displayValue": str(v)} for k, v in stats.items()],
    }


@pytest.fixture
def entry_factory():
    return make_entry


@pytest.fixture
def grouped_payload():
    return {
        "children": [
            {"standings": {"entries": [
                make_entry("Zeta", points=12, gd=5, gf=9),
                make_entry("Alpha", points=12, gd=5, gf=9),
            ]}},
            {"standings": {"entries": [
                make_entry("Bravo", points=15, gd=2, gf=6),
                make_entry("Charlie", points=12, gd=7, gf=8),
            ]}},
            {"name": "broken group"},
        ]
    }
