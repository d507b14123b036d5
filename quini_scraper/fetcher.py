from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import ScraperSettings
from .errors import NetworkError


class PageFetcher:
    """Plain HTTP GET of a results page; no retries at this layer."""

    def __init__(
        self,
        settings: ScraperSettings,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._settings = settings
        self._session = session
        self._logger = logger or logging.getLogger("quini6.scraper.fetcher")

    def fetch(self, url: str) -> str:
        timeout = self._settings.timeout_seconds
        get = self._session.get if self._session is not None else requests.get
        self._logger.debug("GET %s (timeout=%ss)", url, timeout)
        try:
            resp = get(url, headers=self._settings.headers(), timeout=timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkError(f"GET {url} failed: {exc}") from exc
        return resp.text
