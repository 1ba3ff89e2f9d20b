from __future__ import annotations

import time
from typing import Any, Dict, Optional

import requests

from core.config import get_settings
from core.logging import get_logger
from .exceptions import StandingsFetchError

log = get_logger(__name__)


class EspnHttpClient:
    """
    Client HTTP minimale per i feed classifiche ESPN (requests).
    Un solo tentativo per chiamata: nessun retry, gli errori diventano StandingsFetchError.

    Telemetria dell'ultima chiamata:
      - _last_status: ultimo HTTP status code (None se nessuna risposta)
      - _last_latency_ms: durata in millisecondi
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        settings = get_settings()
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        self._timeout = timeout if timeout is not None else settings.espn_timeout

        self._last_status: Optional[int] = None
        self._last_latency_ms: float = 0.0

    def get_json(self, url: str) -> Any:
        log.info("espn GET %s", url)
        self._last_status = None
        start = time.perf_counter()
        try:
            resp = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            self._last_latency_ms = (time.perf_counter() - start) * 1000
            raise StandingsFetchError(f"Errore di rete su {url}: {e}") from e

        self._last_status = resp.status_code
        self._last_latency_ms = (time.perf_counter() - start) * 1000

        if not 200 <= resp.status_code < 300:
            raise StandingsFetchError(f"Status {resp.status_code} da {url}")
        try:
            return resp.json()
        except ValueError as e:
            raise StandingsFetchError(f"Risposta non valida (non JSON) da {url}") from e

    def close(self) -> None:
        self._session.close()

    def get_stats(self) -> Dict[str, Any]:
        return {
            "latency_ms": round(self._last_latency_ms, 2),
            "last_status": self._last_status,
        }


def get_http_client() -> EspnHttpClient:
    """Nuova istanza ad ogni chiamata: i test che cambiano l'ambiente hanno effetto immediato."""
    return EspnHttpClient()
