from __future__ import annotations

from typing import Optional

from analytics.dashboard import build_dashboard
from core.config import get_settings
from core.logging import apply_log_level, get_logger
from core.persistence import (
    load_baselines,
    load_difficulty_table,
    load_fixtures,
    load_opta,
    load_standings_snapshot,
    save_standings_snapshot,
    write_dashboard,
)
from providers.espn.standings_provider import (
    CONTINENTAL,
    LEAGUE,
    EspnStandingsProvider,
    fetch_all_standings,
)
from standings.table import RankedTable

log = get_logger("scripts.build_dashboard")


def main(provider: Optional[EspnStandingsProvider] = None) -> None:
    settings = get_settings()
    apply_log_level(settings.log_level)

    fixtures = load_fixtures()
    if not fixtures:
        log.warning("Nessuna partita caricata: la dashboard sarà vuota")

    if settings.enable_standings_fetch:
        provider = provider or EspnStandingsProvider()
        league_table, continental_table = fetch_all_standings(provider)
        save_standings_snapshot(LEAGUE, provider.get_last_raw(LEAGUE))
        save_standings_snapshot(CONTINENTAL, provider.get_last_raw(CONTINENTAL))
    else:
        # Fetch disabilitato: si riusano gli ultimi snapshot salvati
        league_table = RankedTable.from_flat_payload(load_standings_snapshot(LEAGUE))
        continental_table = RankedTable.from_grouped_payload(load_standings_snapshot(CONTINENTAL))

    dashboard = build_dashboard(
        fixtures,
        league_table=league_table,
        continental_table=continental_table,
        opta={"league": load_opta(LEAGUE), "continental": load_opta(CONTINENTAL)},
        baselines=load_baselines(),
        difficulty_table=load_difficulty_table() or None,
        settings=settings,
    )
    path = write_dashboard(dashboard)

    log.info(
        "dashboard_complete path=%s",
        path,
        extra={
            "counts": {
                "fixtures": len(fixtures),
                "matches_played": dashboard["stats"]["matches_played"],
                "league_rows": len(league_table),
                "continental_rows": len(continental_table),
            }
        },
    )


if __name__ == "__main__":
    main()
