"""Speech body extraction, including multi-part speeches.

Some addresses (e.g. 2006) are split over several pages; their article then
contains a nested table of contents linking to each part.  Parts are fetched
one after another inside the calling task, so the body keeps the author's
section order without any extra synchronisation.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from scrapesou.scraper.errors import ExtractionError
from scrapesou.scraper.extractor import (
    anchor_id,
    find_article,
    find_section,
    find_toc,
    node_id,
    paragraph_text,
)
from scrapesou.scraper.fetcher import fetch_page
from scrapesou.scraper.models import AssembledSpeech
from scrapesou.scraper.resolver import absolute_url, strip_fragment

logger = logging.getLogger(__name__)


def _is_in_page(href: str, page_url: str) -> bool:
    """True when *href* only jumps to a fragment of *page_url*."""
    if "#" not in href:
        return False
    path = strip_fragment(href)
    return not path or absolute_url(page_url, path) == strip_fragment(page_url)


def load_article(url: str, page: Optional[BeautifulSoup] = None) -> Tag:
    """Return the speech article of *url*, fetching it unless *page* is given.

    Raises:
        FetchError: If the page has to be fetched and cannot be.
        ExtractionError: If the page has no article container.
    """
    if page is None:
        page = fetch_page(url)
    article = find_article(page)
    if article is None:
        raise ExtractionError(url, "No speech article container")
    return article


def section_containers(article: Tag, page_url: str) -> List[Tag]:
    """Return the containers whose paragraphs make up the speech, in order.

    Without a nested table of contents that is just *article*.  Otherwise
    there is one container per ToC link: the fetched part's ``div.section``,
    or *article* itself when the link is a same-page anchor.
    """
    toc = find_toc(article)
    if toc is None:
        return [article]

    logger.info("Multiple sections in table of contents located: %s", page_url)
    containers: List[Tag] = []
    for link in toc.find_all("a"):
        href = link.get("href", "")
        if _is_in_page(href, page_url):
            # The outer article stands in for the anchored sub-section.
            containers.append(article)
            continue
        section_url = absolute_url(page_url, strip_fragment(href))
        section = find_section(fetch_page(section_url))
        if section is None:
            raise ExtractionError(section_url, "No section container")
        containers.append(section)
    return containers


def assemble_speech(url: str, page: Optional[BeautifulSoup] = None) -> AssembledSpeech:
    """Extract the full speech found at *url*.

    Args:
        url: A resolved speech URL.
        page: The already-parsed document for *url*, if the caller has one.

    Raises:
        FetchError: If *url* or one of its parts cannot be fetched.
        ExtractionError: If an expected container is missing.
    """
    article = load_article(url, page)
    text = "\n".join(paragraph_text(c) for c in section_containers(article, url))
    return AssembledSpeech(
        text=text,
        node_id=node_id(article),
        article_id=anchor_id(article),
    )
