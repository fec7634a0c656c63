"""HTTP fetcher: one blocking GET, parsed into a BeautifulSoup tree."""

from __future__ import annotations

import httpx
from bs4 import BeautifulSoup

from scrapesou.config import settings
from scrapesou.scraper.errors import FetchError


def _headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def fetch_page(url: str) -> BeautifulSoup:
    """Fetch *url* and return its parsed document.

    No retries happen here; callers decide whether a failure means "try the
    next candidate URL" or "give up on this link".  A fresh client is opened
    per call, so the function is safe to run from many threads at once.

    Raises:
        FetchError: On any transport failure, a 4xx/5xx status, or an empty
            or undecodable body.
    """
    try:
        with httpx.Client(
            headers=_headers(),
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            html = response.text
    except httpx.HTTPStatusError as exc:
        raise FetchError(url, f"HTTP {exc.response.status_code}") from exc
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(url, f"request failed: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise FetchError(url, "undecodable response body") from exc

    if not html.strip():
        raise FetchError(url, "empty response body")

    return BeautifulSoup(html, "html.parser")
