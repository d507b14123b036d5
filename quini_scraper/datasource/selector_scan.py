from __future__ import annotations

from typing import Optional, Sequence

from bs4 import BeautifulSoup

from ..fetcher import PageFetcher
from ..partition import in_range, parse_int_token
from .base import Extraction, HtmlPageSource

DEFAULT_SELECTORS = (".numero", ".ball", ".number", "td.num", "span.num")


class SelectorScanSource(HtmlPageSource):
    """Reads numbers from "ball"/"number" widgets matched by CSS selectors.

    Matches are collected in document order; an element hit by more than one
    selector is only read once.
    """

    def __init__(
        self,
        name: str,
        url: str,
        fetcher: PageFetcher,
        selectors: Sequence[str] = DEFAULT_SELECTORS,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        super().__init__(name, url, fetcher, timeout_seconds=timeout_seconds)
        if not selectors:
            raise ValueError("SelectorScanSource requires at least one selector")
        self._selectors = tuple(selectors)

    def extract(self, soup: BeautifulSoup) -> Extraction:
        numbers = []
        for element in soup.select(", ".join(self._selectors)):
            value = parse_int_token(element.get_text())
            if value is not None and in_range(value):
                numbers.append(value)
        return Extraction(candidates=numbers)
