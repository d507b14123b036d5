from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

NUMBERS_PER_DRAW = 6
MIN_NUMBER = 0
MAX_NUMBER = 45

# Publication order on every source page.
CATEGORIES = ("primary", "second", "bonus", "always_out")


@dataclass(frozen=True)
class DrawEntry:
    """One category's numbers for a single draw."""

    draw_id: str
    date: str
    numbers: Sequence[int]

    def is_complete(self) -> bool:
        return len(self.numbers) == NUMBERS_PER_DRAW


@dataclass(frozen=True)
class ResultSet:
    primary: Tuple[DrawEntry, ...] = ()
    second: Tuple[DrawEntry, ...] = ()
    bonus: Tuple[DrawEntry, ...] = ()
    always_out: Tuple[DrawEntry, ...] = ()
    note: Optional[str] = None

    def is_complete(self) -> bool:
        """Minimum usable payload: a primary entry with exactly six numbers."""
        return bool(self.primary) and self.primary[0].is_complete()

    def with_note(self, note: str) -> "ResultSet":
        return replace(self, note=note)


@dataclass(frozen=True)
class DrawSummary:
    """Identifier and date of the most recent draw."""

    draw_id: str
    date: str
