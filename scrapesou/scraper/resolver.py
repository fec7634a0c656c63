"""Turn an unreliable listing href into a URL that actually holds a speech.

Decades of hand-edited links mean an ``href`` may be empty, stale, or point
at a renamed page.  The link *text* is more trustworthy than the href, so
when the literal link fails we rebuild the site's canonical URL from the
speaker's name and the speech date.
"""

from __future__ import annotations

import calendar
import logging
import unicodedata
from datetime import date
from typing import Optional, Union
from urllib.parse import urljoin

from scrapesou.config import settings
from scrapesou.scraper.errors import FetchError
from scrapesou.scraper.extractor import has_article
from scrapesou.scraper.fetcher import fetch_page
from scrapesou.scraper.models import PartialFailure, ResolvedUrl

logger = logging.getLogger(__name__)


def speaker_slug(name: str) -> str:
    """``"William J. Clinton"`` -> ``"william-j-clinton"``."""
    kept = "".join(ch for ch in name if not unicodedata.category(ch).startswith("P"))
    return "-".join(kept.lower().split())


def date_token(when: date) -> str:
    """``date(1998, 1, 27)`` -> ``"january-27-1998"``."""
    return f"{calendar.month_name[when.month].lower()}-{when.day}-{when.year}"


def strip_fragment(href: str) -> str:
    return href.split("#", 1)[0]


def absolute_url(base: str, href: str) -> str:
    """Join *href* onto *base*.

    Raises:
        FetchError: If *href* is too malformed to parse (e.g. ``http://[broken``).
    """
    try:
        return urljoin(base, href)
    except ValueError as exc:
        raise FetchError(href, "invalid URL") from exc


def candidate_urls(speaker: str, when: date) -> list[str]:
    """The reconstructed URLs to try, most likely first."""
    tail = f"{speaker_slug(speaker)}-{date_token(when)}"
    return [
        f"{settings.base_url}/{settings.speech_prefix}{tail}",
        f"{settings.base_url}/{tail}",
    ]


def _probe(url: str) -> Optional[ResolvedUrl]:
    """Fetch *url*; return it resolved only if the page holds a speech article."""
    try:
        page = fetch_page(url)
    except FetchError as exc:
        logger.warning("Probe failed: %s", exc)
        return None
    if not has_article(page):
        logger.warning("No article found: %s", url)
        return None
    return ResolvedUrl(url=url, page=page)


def _looks_trustworthy(href: str, speaker: str, when: date) -> bool:
    return bool(href) and speaker_slug(speaker) in href and date_token(when) in href


def resolve_url(href: str, speaker: str, when: date) -> Union[ResolvedUrl, PartialFailure]:
    """Find a working speech URL for a listing link.

    Order of attempts:

    1. The literal *href* (fragment removed, made absolute), when non-empty.
    2. If the href does not contain both the speaker slug and the date token,
       ``{base}/{speech_prefix}{slug}-{date}`` and then ``{base}/{slug}-{date}``.

    A literal href that contains both tokens but still fails is not
    reconstructed; the rebuilt URLs would name the same page.

    Returns:
        The first candidate whose page carries a speech article, or a
        :class:`PartialFailure` naming the last URL tried.
    """
    path = strip_fragment(href).strip()
    last_url: Optional[str] = None

    if path:
        try:
            last_url = absolute_url(settings.base_url + "/", path)
        except FetchError as exc:
            logger.warning("Probe failed: %s", exc)
            last_url = path
        else:
            resolved = _probe(last_url)
            if resolved is not None:
                return resolved

    if not _looks_trustworthy(href, speaker, when):
        logger.warning("Resource path error: %r", href)
        for url in candidate_urls(speaker, when):
            logger.warning("Attempting with new url: %s", url)
            last_url = url
            resolved = _probe(url)
            if resolved is not None:
                return resolved

    return PartialFailure(
        speaker=speaker,
        date=when,
        url=last_url,
        reason=f"ResolutionExhausted: no candidate URL held a speech article (last tried {last_url})",
    )
