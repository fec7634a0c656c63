"""CSV export of scraped speeches."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable

from scrapesou.scraper.models import SpeechRecord

COLUMNS = ["id", "speaker", "date", "url", "article_id", "node_id", "speech"]


def write_csv(records: Iterable[SpeechRecord], path: Path | str) -> int:
    """Write *records* to *path*, one row per speech, and return the row count.

    Missing ids are written as empty cells.
    """
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as fh:
        writer = csv.DictWriter(fh, fieldnames=COLUMNS)
        writer.writeheader()
        for record in records:
            writer.writerow(
                {k: ("" if v is None else v) for k, v in record.as_row().items()}
            )
            count += 1
    return count
