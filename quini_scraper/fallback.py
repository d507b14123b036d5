from __future__ import annotations

import logging
from typing import Optional, Sequence

from .datasource import ResultSource
from .errors import InsufficientDataError, ScrapeError
from .partition import today_label
from .types import DrawEntry, DrawSummary, ResultSet

EXAMPLE_DRAW_ID = "Demo"
EXAMPLE_NOTE = "Datos de ejemplo - No se pudieron obtener resultados reales"
UNAVAILABLE = "N/A"

_EXAMPLE_NUMBERS = {
    "primary": (5, 12, 23, 34, 41, 45),
    "second": (3, 8, 15, 22, 33, 40),
    "bonus": (1, 9, 18, 27, 36, 42),
    "always_out": (7, 14, 21, 28, 35, 44),
}


def example_results() -> ResultSet:
    """Fixed demo draw served when no source yields usable results."""
    date = today_label()
    return ResultSet(
        **{
            name: (DrawEntry(draw_id=EXAMPLE_DRAW_ID, date=date, numbers=numbers),)
            for name, numbers in _EXAMPLE_NUMBERS.items()
        }
    )


def ensure_complete(result: ResultSet, source_name: str) -> ResultSet:
    if not result.is_complete():
        raise InsufficientDataError(
            "fewer than 6 valid numbers for the primary draw", source=source_name
        )
    return result


class FallbackOrchestrator:
    """Tries each source in priority order and keeps the first usable result."""

    def __init__(
        self,
        sources: Sequence[ResultSource],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._sources = tuple(sources)
        self._logger = logger or logging.getLogger("quini6.scraper")

    async def collect(self) -> ResultSet:
        for source in self._sources:
            self._logger.info("Trying source %s", source.name)
            try:
                result = ensure_complete(await source.fetch_results(), source.name)
            except ScrapeError as exc:
                self._logger.warning("Source %s failed: %s", source.name, exc)
                continue
            except Exception as exc:
                self._logger.exception("Unexpected error from source %s: %s", source.name, exc)
                continue
            self._logger.info("Results obtained from %s", source.name)
            return result

        self._logger.warning("No source produced usable results; serving example data")
        return example_results().with_note(EXAMPLE_NOTE)

    async def latest_draw(self) -> DrawSummary:
        """Draw number and date as published by the highest priority source."""
        if not self._sources:
            return DrawSummary(draw_id=EXAMPLE_DRAW_ID, date=today_label())
        source = self._sources[0]
        try:
            result = await source.fetch_results()
        except Exception as exc:
            self._logger.warning("Source %s failed: %s", source.name, exc)
            return DrawSummary(draw_id=EXAMPLE_DRAW_ID, date=today_label())
        if not result.primary:
            return DrawSummary(draw_id=UNAVAILABLE, date=UNAVAILABLE)
        entry = result.primary[0]
        return DrawSummary(draw_id=entry.draw_id, date=entry.date)

    async def close(self) -> None:
        for source in self._sources:
            await source.close()
