import pytest

from standings.sorting import DEFAULT_SORT, SortState, request_sort
from standings.table import RankedTable


@pytest.mark.parametrize("key", ["rank", "losses", "pointsAgainst"])
def test_default_ascending_keys(key):
    assert request_sort(None, key) == SortState(key, "asc")


@pytest.mark.parametrize("key", ["wins", "ties", "pointsFor", "pointDifferential", "points"])
def test_default_descending_keys(key):
    assert request_sort(SortState("rank", "asc"), key) == SortState(key, "desc")


def test_toggle_twice_returns_original():
    first = request_sort(DEFAULT_SORT, "wins")
    toggled = request_sort(first, "wins")
    assert toggled.direction == "asc"
    assert request_sort(toggled, "wins") == first


def test_same_key_flips_default():
    assert request_sort(DEFAULT_SORT, "rank") == SortState("rank", "desc")


def test_unknown_key_rejected():
    with pytest.raises(ValueError):
        request_sort(None, "club")


def test_ties_broken_by_goal_difference_then_goals_for(entry_factory):
    table = RankedTable([
        entry_factory("A", wins=5, gd=3, gf=10),
        entry_factory("B", wins=5, gd=6, gf=8),
        entry_factory("C", wins=5, gd=3, gf=12),
        entry_factory("D", wins=7, gd=0, gf=5),
    ])
    names = [e["team"]["name"] for e in table.sorted_entries(SortState("wins", "desc"))]
    assert names == ["D", "B", "C", "A"]
    # La direzione ascendente inverte solo la chiave primaria
    names = [e["team"]["name"] for e in table.sorted_entries(SortState("wins", "asc"))]
    assert names == ["B", "C", "A", "D"]


def test_goal_difference_primary_skips_secondary(entry_factory):
    table = RankedTable([
        entry_factory("A", gd=2, gf=3),
        entry_factory("B", gd=2, gf=9),
        entry_factory("C", gd=5, gf=1),
    ])
    names = [e["team"]["name"] for e in table.sorted_entries(SortState("pointDifferential", "desc"))]
    assert names == ["C", "B", "A"]


def test_grouped_rank_sort_uses_calculated_rank(grouped_payload):
    table = RankedTable.from_grouped_payload(grouped_payload)
    asc = [r["team"] for r in table.to_rows(SortState("rank", "asc"))]
    desc = [r["team"] for r in table.to_rows(SortState("rank", "desc"))]
    assert asc == ["Bravo", "Charlie", "Alpha", "Zeta"]
    assert desc == list(reversed(asc))


def test_sort_none_keeps_input_order(entry_factory):
    table = RankedTable([entry_factory("B", rank=2), entry_factory("A", rank=1)])
    assert [e["team"]["name"] for e in table.sorted_entries(None)] == ["B", "A"]
