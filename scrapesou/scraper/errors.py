"""Exception types raised by the scraper core.

Every failure a single link can hit derives from :class:`ScrapeError`, which
is what the orchestrator catches at the task boundary.
"""

from __future__ import annotations

from typing import Optional


class ScrapeError(Exception):
    """Base class for recoverable, per-link scraping failures."""


class FetchError(ScrapeError):
    """A page could not be fetched or its body could not be parsed."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{message} ({url})")
        self.url = url


class DateParseError(ScrapeError, ValueError):
    """Date text matched none of the known layouts."""


class ExtractionError(ScrapeError):
    """A fetched page lacks the container the extractor was looking for."""

    def __init__(self, url: Optional[str], message: str) -> None:
        super().__init__(f"{message} ({url})" if url else message)
        self.url = url
