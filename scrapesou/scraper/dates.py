"""Date normalisation for link text such as ``January 3rd, 2009``."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime

from scrapesou.scraper.errors import DateParseError

logger = logging.getLogger(__name__)

DATE_FORMAT = "%B %d, %Y"

_NON_DIGIT = re.compile(r"\D")


def _parse(month: str, day: str, year: str, original: str) -> date:
    text = f"{month.strip(',.')} {day}, {_NON_DIGIT.sub('', year)}"
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as exc:
        raise DateParseError(f"Unparseable date {original!r}") from exc


def normalize_date(text: str) -> date:
    """Convert loosely formatted date text into a :class:`datetime.date`.

    Rules, in order:

    1. The canonical ``Month Day, Year`` layout.
    2. Two tokens: ``Month Year``; the day defaults to 1.
    3. Three tokens: ``Month Day Year``, where the day keeps only its digits
       (``3rd`` becomes ``3``).

    Raises:
        DateParseError: For any other token count, or when the pieces still
            do not form a calendar date.
    """
    text = text.strip()
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        logger.warning("Date formatting error: %r", text)

    tokens = text.split()
    if len(tokens) == 2:
        logger.warning("Possibly no day provided: %r", text)
        month, year = tokens
        return _parse(month, "1", year, text)
    if len(tokens) == 3:
        logger.warning("Day may contain 'th', 'st', etc.: %r", text)
        month, day, year = tokens
        return _parse(month, _NON_DIGIT.sub("", day), year, text)

    raise DateParseError(f"Unparseable date {text!r}: expected 2 or 3 tokens, got {len(tokens)}")
