from __future__ import annotations
from typing import TypedDict, Optional, List, Dict, Literal, Union

Result = Literal["W", "D", "L"]

COMPETITIONS = ("all", "PL", "UCL", "FA", "EFL")
VIEWS = ("fixtures", "graphs")
# Ordine fisso usato per le statistiche gol
GOAL_COMPETITIONS = ("PL", "UCL", "FA", "EFL")


class FixtureRecord(TypedDict, total=False):
    mw: Union[int, str, None]
    round: Optional[str]
    date: Optional[str]
    opponent: Optional[str]
    venue: Optional[str]              # Home / Away
    league: Optional[str]             # PL, UCL, EFL, FA, FIFA, CAN_START, CAN_END
    result_prev: Optional[Result]
    result_curr: Optional[Result]
    score_prev: Optional[str]         # "home-away"
    score_curr: Optional[str]
    pos_prev: Optional[int]
    pos_curr: Optional[int]
    pts_prev: Optional[int]
    pts_curr: Optional[int]
    is_fifa_break: bool
    is_can_break: bool
    can_type: Literal["start", "end"]
    is_duplicate: bool
    correlated: str
    note: str
    postponed: bool
    skip_postponed: bool
    postponed_reason: str
    # derivati
    match_diff: Optional[int]
    agg: Optional[int]
    match_no: Optional[int]


FixtureDataset = List[FixtureRecord]


class SeasonStats(TypedDict):
    points_curr: int
    points_prev: int
    matches_played: int
    difference: int


class ProcessedData(TypedDict):
    stats: SeasonStats
    fixtures: FixtureDataset
    cumulative_series: List[Dict[str, object]]
    position_series: List[Dict[str, object]]
    form: List[str]


class StandingStat(TypedDict, total=False):
    name: str
    value: float
    displayValue: str


class StandingTeam(TypedDict, total=False):
    id: str
    name: str
    abbreviation: str
    logos: List[Dict[str, str]]
    recentEvents: List[Dict[str, str]]


class StandingEntry(TypedDict, total=False):
    team: StandingTeam
    stats: List[StandingStat]
    calculated_rank: int


class OptaProjection(TypedDict, total=False):
    team: str
    xPos: float
    xPts: float
    # continentale
    league: str
    qf: str
    sf: str
    final: str
    winner: str
    # campionato
    title: str
    ucl: str


WDL = Dict[str, int]


class SeasonBaselines(TypedDict):
    all_comps: Dict[str, Dict[str, int]]   # goals / conceded / clean_sheets -> competizione -> valore
    home_away: Dict[str, WDL]              # Home / Away -> W / D / L
