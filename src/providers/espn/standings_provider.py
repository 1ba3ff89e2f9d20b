from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional, Tuple

from core.config import get_settings
from core.logging import get_logger
from standings.table import RankedTable
from .exceptions import StandingsFetchError
from .http_client import EspnHttpClient, get_http_client

log = get_logger(__name__)

LEAGUE = "league"
CONTINENTAL = "continental"


class EspnStandingsProvider:
    """
    Classifiche live delle due competizioni.
    Ogni fetch è indipendente: un errore viene loggato e produce una tabella vuota,
    senza influire sull'altra competizione.
    """

    def __init__(self, client_factory: Optional[Callable[[], EspnHttpClient]] = None) -> None:
        self._settings = get_settings()
        self._client_factory = client_factory or get_http_client
        self._last_raw: Dict[str, Any] = {}

    def _fetch_raw(self, competition: str, url: str) -> Optional[Any]:
        client = self._client_factory()
        try:
            raw = client.get_json(url)
        except StandingsFetchError as exc:
            log.error(
                "Fetch classifica fallito: %s",
                exc,
                extra={"competition": competition, "fetch_stats": client.get_stats()},
            )
            return None
        finally:
            client.close()
        log.info(
            "Classifica scaricata",
            extra={"competition": competition, "fetch_stats": client.get_stats()},
        )
        self._last_raw[competition] = raw
        return raw

    def fetch_league_table(self) -> RankedTable:
        raw = self._fetch_raw(LEAGUE, self._settings.espn_league_url)
        table = RankedTable.from_flat_payload(raw)
        if raw is not None and table.is_empty:
            log.warning("Payload classifica senza entries", extra={"competition": LEAGUE})
        return table

    def fetch_continental_table(self) -> RankedTable:
        raw = self._fetch_raw(CONTINENTAL, self._settings.espn_continental_url)
        table = RankedTable.from_grouped_payload(raw)
        if raw is not None and table.is_empty:
            log.warning("Payload classifica senza gironi", extra={"competition": CONTINENTAL})
        return table

    def get_last_raw(self, competition: str) -> Optional[Any]:
        return self._last_raw.get(competition)


def fetch_all_standings(provider: Optional[EspnStandingsProvider] = None) -> Tuple[RankedTable, RankedTable]:
    """
    Lancia le due richieste in parallelo; nessun ordine garantito tra le due.
    Ritorna (campionato, coppa continentale).
    """
    provider = provider or EspnStandingsProvider()
    with ThreadPoolExecutor(max_workers=2) as executor:
        league_future = executor.submit(provider.fetch_league_table)
        continental_future = executor.submit(provider.fetch_continental_table)
        return league_future.result(), continental_future.result()


__all__ = ["LEAGUE", "CONTINENTAL", "EspnStandingsProvider", "fetch_all_standings"]
