import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_DEFAULT_LEAGUE_URL = "https://site.web.api.espn.com/apis/v2/sports/soccer/eng.1/standings"
_DEFAULT_CONTINENTAL_URL = "https://site.web.api.espn.com/apis/v2/sports/soccer/uefa.champions/standings"


def _parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None or value == "":
        return default
    v = value.strip().lower()
    if v in {"0", "false", "no"}:
        return False
    return True


@dataclass
class Settings:
    data_dir: str
    log_level: str

    domestic_league: str
    season_prev_label: str
    season_curr_label: str

    form_length: int
    difficulty_window: int

    enable_standings_fetch: bool
    espn_league_url: str
    espn_continental_url: str
    espn_timeout: float

    @classmethod
    def from_env(cls) -> "Settings":
        def _int(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError as e:
                raise ValueError(f"Variabile {name} deve essere un intero (valore: {raw!r})") from e

        def _float(name: str, default: float) -> float:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return float(raw)
            except ValueError as e:
                raise ValueError(f"Variabile {name} deve essere un numero (valore: {raw!r})") from e

        data_dir = os.getenv("DASHBOARD_DATA_DIR", "data")
        log_level = os.getenv("DASHBOARD_LOG_LEVEL", "INFO").upper()

        domestic_league = os.getenv("DOMESTIC_LEAGUE", "PL").strip().upper() or "PL"
        season_prev_label = os.getenv("SEASON_PREV_LABEL", "24/25")
        season_curr_label = os.getenv("SEASON_CURR_LABEL", "25/26")

        form_length = _int("FORM_LENGTH", 8)
        if form_length < 1:
            form_length = 8
        difficulty_window = _int("DIFFICULTY_WINDOW", 6)
        if difficulty_window < 1:
            difficulty_window = 6

        enable_standings_fetch = _parse_bool(os.getenv("ENABLE_STANDINGS_FETCH"), True)
        espn_league_url = os.getenv("ESPN_LEAGUE_STANDINGS_URL", _DEFAULT_LEAGUE_URL)
        espn_continental_url = os.getenv("ESPN_CONTINENTAL_STANDINGS_URL", _DEFAULT_CONTINENTAL_URL)
        espn_timeout = _float("ESPN_TIMEOUT", 10.0)

        return cls(
            data_dir=data_dir,
            log_level=log_level,
            domestic_league=domestic_league,
            season_prev_label=season_prev_label,
            season_curr_label=season_curr_label,
            form_length=form_length,
            difficulty_window=difficulty_window,
            enable_standings_fetch=enable_standings_fetch,
            espn_league_url=espn_league_url,
            espn_continental_url=espn_continental_url,
            espn_timeout=espn_timeout,
        )

    @property
    def season_labels(self) -> tuple[str, str]:
        return self.season_prev_label, self.season_curr_label


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def _reset_settings_cache_for_tests() -> None:
    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "_reset_settings_cache_for_tests"]
