"""Shared fixtures: a respx-mocked copy of the source site and HTML builders.

Requests that no route matches are answered with an empty ``200``, which the
fetcher reports as a :class:`FetchError`, the same as a dead link.
"""

from __future__ import annotations

from types import SimpleNamespace
from typing import Iterable, Optional, Sequence, Tuple

import pytest
import respx

from scrapesou.config import settings

BASE = settings.base_url
PREFIX = f"{BASE}/{settings.speech_prefix}"


def article_page(
    paragraphs: Iterable[str],
    node_id: str = "1234",
    anchor: Optional[str] = None,
    toc: Optional[Sequence[Tuple[str, str]]] = None,
) -> str:
    anchor_html = f'<a id="{anchor}"></a>' if anchor else ""
    toc_html = ""
    if toc:
        items = "".join(f'<li><a href="{href}">{text}</a></li>' for text, href in toc)
        toc_html = f'<div class="toc"><ul>{items}</ul></div>'
    body = "".join(f"<p>{p}</p>" for p in paragraphs)
    return (
        "<html><head><title>Address</title></head><body>"
        f'<article data-history-node-id="{node_id}">{anchor_html}{toc_html}{body}</article>'
        "</body></html>"
    )


def section_page(paragraphs: Iterable[str]) -> str:
    body = "".join(f"<p>{p}</p>" for p in paragraphs)
    return f'<html><body><div class="section">{body}</div></body></html>'


def listing_page(links: Sequence[Tuple[str, str]]) -> str:
    anchors = "".join(f'<p><a href="{href}">{text}</a></p>' for text, href in links)
    return f'<html><body><h1>State of the Union Addresses</h1><div class="toc">{anchors}</div></body></html>'


@pytest.fixture()
def pages() -> SimpleNamespace:
    """HTML builders for listing, article and section pages."""
    return SimpleNamespace(
        article=article_page,
        section=section_page,
        listing=listing_page,
        base=BASE,
        prefix=PREFIX,
    )


@pytest.fixture()
def site():
    """A respx router standing in for the whole source site."""
    with respx.mock(assert_all_called=False, assert_all_mocked=False) as router:
        yield router
