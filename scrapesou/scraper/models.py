"""Data models for the scraper pipeline."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Iterator, Optional

from bs4 import BeautifulSoup


@dataclass(frozen=True)
class LinkEntry:
    """One anchor from the listing page's table of contents."""

    text: str
    href: str


@dataclass(frozen=True)
class ResolvedUrl:
    """An absolute URL whose page was confirmed to hold a speech article.

    ``page`` is the document fetched by the validating probe, kept so the
    assembler does not have to download it a second time.
    """

    url: str
    page: Optional[BeautifulSoup] = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class SpeechRecord:
    """A fully extracted speech.

    ``id`` stays ``None`` until :meth:`ResultSet.finalize` numbers the
    date-sorted records.
    """

    speaker: str
    date: date
    url: str
    speech: str
    article_id: Optional[str] = None
    node_id: Optional[str] = None
    id: Optional[int] = None

    def as_row(self) -> dict[str, Any]:
        """Return the record as a flat dict in export column order."""
        return {
            "id": self.id,
            "speaker": self.speaker,
            "date": self.date.isoformat(),
            "url": self.url,
            "article_id": self.article_id,
            "node_id": self.node_id,
            "speech": self.speech,
        }


@dataclass(frozen=True)
class PartialFailure:
    """Why a link produced no speech."""

    speaker: str
    date: Optional[date]
    url: Optional[str]
    reason: str
    article_id: Optional[str] = None
    node_id: Optional[str] = None


class ResultSet:
    """Thread-safe accumulator for one scrape run.

    Tasks call :meth:`add_record` / :meth:`add_failure` concurrently; both go
    through the same lock.  :meth:`finalize` is called once, after every task
    has finished, to sort records by date and number them ``1..N``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._records: list[SpeechRecord] = []
        self._failures: dict[str, PartialFailure] = {}
        self._finalized = False

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------
    def add_record(self, record: SpeechRecord) -> None:
        with self._lock:
            self._check_open()
            self._records.append(record)

    def add_failure(self, display_text: str, failure: PartialFailure) -> None:
        with self._lock:
            self._check_open()
            self._failures[display_text] = failure

    def finalize(self) -> None:
        """Sort records by date and assign sequential ids.

        Raises:
            RuntimeError: If the set was already finalized.
        """
        with self._lock:
            self._check_open()
            ordered = sorted(self._records, key=lambda r: (r.date, r.speaker, r.url))
            self._records = [replace(r, id=i) for i, r in enumerate(ordered, start=1)]
            self._failures = dict(sorted(self._failures.items()))
            self._finalized = True

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("ResultSet has already been finalized")

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------
    @property
    def failures(self) -> dict[str, PartialFailure]:
        return dict(self._failures)

    def __iter__(self) -> Iterator[SpeechRecord]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return (
            f"ResultSet(records={len(self._records)}, "
            f"failures={len(self._failures)}, finalized={self._finalized})"
        )


@dataclass(frozen=True)
class AssembledSpeech:
    """Body text and identifiers pulled from one resolved speech page."""

    text: str
    node_id: str
    article_id: Optional[str] = None
