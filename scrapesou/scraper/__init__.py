"""Scraper package: fetch, resolve, assemble and fan out over every speech."""

from scrapesou.scraper.dates import normalize_date
from scrapesou.scraper.errors import (
    DateParseError,
    ExtractionError,
    FetchError,
    ScrapeError,
)
from scrapesou.scraper.fetcher import fetch_page
from scrapesou.scraper.models import PartialFailure, ResultSet, SpeechRecord
from scrapesou.scraper.orchestrator import scrape_all, scrape_all_to_string

__all__ = [
    "fetch_page",
    "normalize_date",
    "scrape_all",
    "scrape_all_to_string",
    "ResultSet",
    "SpeechRecord",
    "PartialFailure",
    "ScrapeError",
    "FetchError",
    "DateParseError",
    "ExtractionError",
]
