from __future__ import annotations

import datetime as dt
import re
from typing import Iterable, List, Optional, Sequence

from .types import CATEGORIES, MAX_NUMBER, MIN_NUMBER, NUMBERS_PER_DRAW, DrawEntry, ResultSet

DEFAULT_DRAW_ID = "Último"

_LEADING_INT = re.compile(r"^[+-]?[0-9]+")


def parse_int_token(text: str) -> Optional[int]:
    """Parse the leading integer of a trimmed token, e.g. ``"12abc"`` -> 12."""
    match = _LEADING_INT.match(text.strip())
    if match is None:
        return None
    return int(match.group(0))


def in_range(value: int) -> bool:
    return MIN_NUMBER <= value <= MAX_NUMBER


def dedupe_preserving_order(values: Iterable[int], limit: Optional[int] = None) -> List[int]:
    seen = set()
    unique: List[int] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        unique.append(value)
        if limit is not None and len(unique) >= limit:
            break
    return unique


def today_label(today: Optional[dt.date] = None) -> str:
    """Render a date the way es-AR locales print it (d/m/yyyy, no padding)."""
    today = today or dt.date.today()
    return f"{today.day}/{today.month}/{today.year}"


def partition_candidates(
    candidates: Sequence[int],
    draw_id: Optional[str] = None,
    date: Optional[str] = None,
) -> ResultSet:
    """Slice candidates into the four categories, six numbers each.

    A category is only emitted when its full slice is available, so later
    categories are never populated while an earlier one is empty.
    """
    draw_id = draw_id or DEFAULT_DRAW_ID
    date = date or today_label()
    categories = {}
    for index, name in enumerate(CATEGORIES):
        start = index * NUMBERS_PER_DRAW
        end = start + NUMBERS_PER_DRAW
        if len(candidates) < end:
            categories[name] = ()
            continue
        entry = DrawEntry(draw_id=draw_id, date=date, numbers=tuple(candidates[start:end]))
        categories[name] = (entry,)
    return ResultSet(**categories)
