from __future__ import annotations

from typing import Optional


class ScrapeError(RuntimeError):
    """Base class for failures raised while reading a results source."""

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(message)
        self.source = source


class NetworkError(ScrapeError):
    """Connection failure, timeout or non-2xx response."""


class ParseError(ScrapeError):
    """Markup could not be parsed into candidate numbers."""


class InsufficientDataError(ScrapeError):
    """Fewer than six valid numbers were found for the primary draw."""
