"""Selectors for the source site's markup.

The site is a Drupal install: each speech lives in an ``<article>`` carrying
a numeric ``data-history-node-id``; tables of contents are ``div.toc`` blocks;
the pages of a multi-part speech keep their text in ``div.section``.
"""

from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

_NODE_ID = re.compile(r"^[0-9]+$")
_ANCHOR_ID = re.compile(r"^[a-zA-Z0-9]+$")


def find_toc(root: BeautifulSoup | Tag) -> Optional[Tag]:
    """Return the first table-of-contents block under *root*, if any."""
    return root.find("div", class_="toc")


def find_article(page: BeautifulSoup | Tag) -> Optional[Tag]:
    """Return the speech article container, or ``None`` when the page has none."""
    return page.find("article", attrs={"data-history-node-id": _NODE_ID})


def find_section(page: BeautifulSoup | Tag) -> Optional[Tag]:
    """Return the ``div.section`` holding one part of a multi-part speech."""
    return page.find("div", class_="section")


def has_article(page: BeautifulSoup) -> bool:
    return find_article(page) is not None


def node_id(article: Tag) -> str:
    return article["data-history-node-id"]


def anchor_id(article: Tag) -> Optional[str]:
    """Return the id of the first alphanumeric-id ``<a>`` in *article*."""
    anchor = article.find("a", id=_ANCHOR_ID)
    return anchor["id"] if anchor is not None else None


def paragraphs(container: Tag) -> List[str]:
    """Return every ``<p>`` text under *container*, stripped, in document order."""
    return [p.get_text().strip() for p in container.find_all("p")]


def paragraph_text(container: Tag) -> str:
    return "\n".join(paragraphs(container))
