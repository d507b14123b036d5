from __future__ import annotations

import re
from typing import List, Optional, Sequence

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..fetcher import PageFetcher
from ..partition import in_range, parse_int_token
from ..types import NUMBERS_PER_DRAW
from .base import Extraction, HtmlPageSource

HEADER_ROW = 0
# primary, second, bonus, always_out
CATEGORY_ROWS = (2, 4, 6, 8)

# A number right before "/" is part of a date, not the draw number.
_DRAW_ID = re.compile(
    r"(?:sorteo\s*(?:nro\.?|n[°º]|#)?|nro\.?|n[°º]|#)\s*:?\s*([0-9]+)(?![0-9])(?!\s*/)",
    re.IGNORECASE,
)
_DATE = re.compile(r"\b([0-9]{1,2}/[0-9]{1,2}/[0-9]{4})\b")
# Own rows only; rows of nested tables would shift the fixed positions.
_OWN_ROWS = ":scope > tr, :scope > thead > tr, :scope > tbody > tr, :scope > tfoot > tr"


class FixedTableRowSource(HtmlPageSource):
    """Reads the first table of the page using fixed row positions.

    Row 0 carries the draw number and date; rows 2, 4, 6 and 8 carry the
    numbers of each category. Reading stops at the first category row that
    does not hold six valid numbers.
    """

    def __init__(
        self,
        name: str,
        url: str,
        fetcher: PageFetcher,
        category_rows: Sequence[int] = CATEGORY_ROWS,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        super().__init__(name, url, fetcher, timeout_seconds=timeout_seconds)
        self._category_rows = tuple(category_rows)

    def extract(self, soup: BeautifulSoup) -> Extraction:
        table = soup.find("table")
        if table is None:
            return Extraction(candidates=[])
        rows = table.select(_OWN_ROWS)
        if not rows:
            return Extraction(candidates=[])

        header = rows[HEADER_ROW].get_text(" ", strip=True)
        draw_id = self._match(_DRAW_ID, header)
        date = self._match(_DATE, header)

        numbers: List[int] = []
        for index in self._category_rows:
            if index >= len(rows):
                break
            row_numbers = self._row_numbers(rows[index])
            if len(row_numbers) < NUMBERS_PER_DRAW:
                break
            numbers.extend(row_numbers[:NUMBERS_PER_DRAW])
        return Extraction(candidates=numbers, draw_id=draw_id, date=date)

    @staticmethod
    def _row_numbers(row: Tag) -> List[int]:
        values = []
        for cell in row.find_all(["td", "th"], recursive=False):
            value = parse_int_token(cell.get_text())
            if value is not None and in_range(value):
                values.append(value)
        return values

    @staticmethod
    def _match(pattern: re.Pattern, text: str) -> Optional[str]:
        match = pattern.search(text)
        return match.group(1) if match else None
