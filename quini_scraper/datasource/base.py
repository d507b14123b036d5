from __future__ import annotations

import abc
import asyncio
from dataclasses import dataclass
from typing import Optional, Sequence

from bs4 import BeautifulSoup

from ..errors import NetworkError, ParseError
from ..fetcher import PageFetcher
from ..partition import partition_candidates
from ..types import ResultSet


@dataclass(frozen=True)
class Extraction:
    """Candidate numbers pulled from a page, in page order."""

    candidates: Sequence[int]
    draw_id: Optional[str] = None
    date: Optional[str] = None


class ResultSource(abc.ABC):
    """Abstract results provider."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Human readable source name used in logs."""

    @abc.abstractmethod
    async def fetch_results(self) -> ResultSet:
        """Return the latest draw results published by this source.

        Implementations raise `NetworkError` when the page cannot be
        retrieved and `ParseError` when its markup cannot be read. A page
        without numbers is not an error: the returned set is simply empty.
        """

    async def close(self) -> None:
        """Optional hook for sources that hold connections."""
        return None


class HtmlPageSource(ResultSource):
    """Fetches one HTML page and delegates number extraction to subclasses."""

    def __init__(
        self,
        name: str,
        url: str,
        fetcher: PageFetcher,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        self._name = name
        self._url = url
        self._fetcher = fetcher
        # Bounds the whole download; the fetcher timeout only covers connect and each read.
        self._timeout_seconds = timeout_seconds

    @property
    def name(self) -> str:
        return self._name

    async def fetch_results(self) -> ResultSet:
        try:
            html = await asyncio.wait_for(
                asyncio.to_thread(self._fetcher.fetch, self._url), timeout=self._timeout_seconds
            )
        except asyncio.TimeoutError as exc:
            raise NetworkError(
                f"GET {self._url} exceeded {self._timeout_seconds}s", source=self._name
            ) from exc
        except NetworkError as exc:
            exc.source = self._name
            raise
        extraction = self.parse(html)
        return partition_candidates(
            extraction.candidates, draw_id=extraction.draw_id, date=extraction.date
        )

    def parse(self, html: str) -> Extraction:
        try:
            soup = BeautifulSoup(html, "html.parser")
            return self.extract(soup)
        except Exception as exc:
            raise ParseError(f"Unreadable markup from {self._url}: {exc}", source=self._name) from exc

    @abc.abstractmethod
    def extract(self, soup: BeautifulSoup) -> Extraction:
        """Pull candidate numbers out of a parsed page."""
