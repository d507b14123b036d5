from __future__ import annotations

from bs4 import BeautifulSoup

from ..partition import dedupe_preserving_order, in_range, parse_int_token
from ..types import CATEGORIES, NUMBERS_PER_DRAW
from .base import Extraction, HtmlPageSource

MAX_TOKEN_LENGTH = 2
MAX_CANDIDATES = NUMBERS_PER_DRAW * len(CATEGORIES)


class PermissiveDedupSource(HtmlPageSource):
    """Last-resort scan over every cell, span and div on the page.

    Any short numeric text counts. Because containers repeat the text of
    their children, values are de-duplicated before slicing.
    """

    def extract(self, soup: BeautifulSoup) -> Extraction:
        raw = []
        for element in soup.select("td, span, div"):
            text = element.get_text().strip()
            if len(text) > MAX_TOKEN_LENGTH:
                continue
            value = parse_int_token(text)
            if value is not None and in_range(value):
                raw.append(value)
        return Extraction(candidates=dedupe_preserving_order(raw, limit=MAX_CANDIDATES))
