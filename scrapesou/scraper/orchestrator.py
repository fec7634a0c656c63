"""Fan-out over every link on the listing page.

One task per link runs on a bounded ``ThreadPoolExecutor``.  Each task ends
in exactly one of: a :class:`SpeechRecord`, a :class:`PartialFailure`, or a
silent skip (link text without a ``(date)`` part).  Results are collected
in a :class:`ResultSet` and only sorted once every task has finished.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from scrapesou.config import settings
from scrapesou.scraper.assembler import assemble_speech, load_article, section_containers
from scrapesou.scraper.dates import normalize_date
from scrapesou.scraper.errors import DateParseError, ExtractionError, ScrapeError
from scrapesou.scraper.extractor import find_toc
from scrapesou.scraper.fetcher import fetch_page
from scrapesou.scraper.models import LinkEntry, PartialFailure, ResultSet, SpeechRecord
from scrapesou.scraper.resolver import resolve_url

logger = logging.getLogger(__name__)

Outcome = Union[SpeechRecord, PartialFailure, None]


# ---------------------------------------------------------------------------
# Listing page
# ---------------------------------------------------------------------------

def _toc_anchors(listing: BeautifulSoup) -> List[Tag]:
    toc = find_toc(listing)
    if toc is None:
        raise ExtractionError(None, "Listing page has no table of contents")
    return toc.find_all("a")


def _entry(anchor: Tag) -> LinkEntry:
    return LinkEntry(text=anchor.get_text(), href=anchor.get("href", "") or "")


def enumerate_links(listing: BeautifulSoup) -> List[LinkEntry]:
    """Return every anchor of the listing page's table of contents.

    Raises:
        ExtractionError: If the page has no table of contents.
    """
    return [_entry(a) for a in _toc_anchors(listing)]


def split_display_text(text: str) -> Optional[Tuple[str, str]]:
    """``"George Washington (January 8, 1790)"`` -> ``("George Washington", "January 8, 1790")``.

    Returns ``None`` when the text does not split into a name and a date.
    """
    parts = text.split("(", 1)
    if len(parts) != 2:
        return None
    name = parts[0].strip()
    when = parts[1].split(")", 1)[0].strip()
    if not name or not when:
        return None
    return name, when


def _workers(max_workers: Optional[int]) -> int:
    return max(1, max_workers or settings.max_workers)


# ---------------------------------------------------------------------------
# Per-link task
# ---------------------------------------------------------------------------

def scrape_link(entry: LinkEntry) -> Outcome:
    """Extract one speech.  Never raises :class:`ScrapeError`."""
    parsed = split_display_text(entry.text)
    if parsed is None:
        logger.debug("Skipping link without a date: %r", entry.text)
        return None
    speaker, date_text = parsed

    try:
        when = normalize_date(date_text)
    except DateParseError as exc:
        return PartialFailure(
            speaker=speaker,
            date=None,
            url=None,
            reason=str(exc),
        )

    resolved = resolve_url(entry.href, speaker, when)
    if isinstance(resolved, PartialFailure):
        return resolved

    try:
        speech = assemble_speech(resolved.url, page=resolved.page)
    except ScrapeError as exc:
        return PartialFailure(speaker=speaker, date=when, url=resolved.url, reason=str(exc))

    return SpeechRecord(
        speaker=speaker,
        date=when,
        url=resolved.url,
        speech=speech.text,
        article_id=speech.article_id,
        node_id=speech.node_id,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def scrape_speeches(entries: List[LinkEntry], max_workers: Optional[int] = None) -> ResultSet:
    """Run one task per entry and return the finalized :class:`ResultSet`."""
    results = ResultSet()

    def task(entry: LinkEntry) -> None:
        outcome = scrape_link(entry)
        if isinstance(outcome, SpeechRecord):
            results.add_record(outcome)
            logger.info("Success: %s", entry.text)
        elif isinstance(outcome, PartialFailure):
            results.add_failure(entry.text, outcome)
            logger.error("Failed: %s: %s", entry.text, outcome.reason)

    with ThreadPoolExecutor(max_workers=_workers(max_workers), thread_name_prefix="scrape") as pool:
        future_to_entry = {pool.submit(task, entry): entry for entry in entries}
        for future in as_completed(future_to_entry):
            entry = future_to_entry[future]
            try:
                future.result()
            except Exception as exc:
                logger.exception("Unexpected error scraping %r", entry.text)
                results.add_failure(
                    entry.text,
                    PartialFailure(speaker=entry.text, date=None, url=entry.href or None, reason=repr(exc)),
                )

    results.finalize()
    logger.info(
        "Scraped %d speech(es), %d failure(s) from %d link(s)",
        len(results), len(results.failures), len(entries),
    )
    return results


def scrape_all(listing_url: Optional[str] = None, max_workers: Optional[int] = None) -> ResultSet:
    """Scrape every speech linked from the listing page.

    Raises:
        FetchError: If the listing page itself cannot be fetched.
        ExtractionError: If the listing page has no table of contents.
    """
    listing = fetch_page(listing_url or settings.listing_url)
    return scrape_speeches(enumerate_links(listing), max_workers=max_workers)


# ---------------------------------------------------------------------------
# Raw dump
# ---------------------------------------------------------------------------

def _dump_link(entry: LinkEntry, anchor_markup: str) -> str:
    parsed = split_display_text(entry.text)
    if parsed is None:
        return ""
    speaker, date_text = parsed
    chunks = [anchor_markup]
    try:
        resolved = resolve_url(entry.href, speaker, normalize_date(date_text))
        if isinstance(resolved, PartialFailure):
            return "".join(chunks)
        article = load_article(resolved.url, resolved.page)
        chunks.extend(str(c) for c in section_containers(article, resolved.url))
    except ScrapeError as exc:
        logger.error("Failed: %s: %s", entry.text, exc)
    return "".join(chunks)


def scrape_all_to_string(listing_url: Optional[str] = None, max_workers: Optional[int] = None) -> str:
    """Concatenate the raw markup of every speech on the listing page.

    For each link with a date, in listing order: the anchor's markup followed
    by the article (or every section of a multi-part speech).  Meant for bulk
    inspection; no records are built.
    """
    anchors = _toc_anchors(fetch_page(listing_url or settings.listing_url))

    with ThreadPoolExecutor(max_workers=_workers(max_workers), thread_name_prefix="dump") as pool:
        chunks = pool.map(
            lambda a: _dump_link(_entry(a), str(a)),
            anchors,
        )
        return "".join(chunks)
