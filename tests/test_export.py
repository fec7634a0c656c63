"""Tests for CSV export."""

from __future__ import annotations

import csv
from datetime import date

from scrapesou.export import COLUMNS, write_csv
from scrapesou.scraper.models import SpeechRecord


def test_writes_header_and_rows(tmp_path) -> None:
    records = [
        SpeechRecord(
            id=1,
            speaker="Abraham Lincoln",
            date=date(1861, 12, 3),
            url="https://www.infoplease.com/lincoln",
            speech="Fellow-Citizens\nof the Senate, \"and\" House",
            node_id="55",
        )
    ]
    path = tmp_path / "out.csv"

    assert write_csv(records, path) == 1

    with open(path, newline="", encoding="utf-8") as fh:
        reader = csv.DictReader(fh)
        assert reader.fieldnames == COLUMNS
        rows = list(reader)

    assert rows == [
        {
            "id": "1",
            "speaker": "Abraham Lincoln",
            "date": "1861-12-03",
            "url": "https://www.infoplease.com/lincoln",
            "article_id": "",
            "node_id": "55",
            "speech": "Fellow-Citizens\nof the Senate, \"and\" House",
        }
    ]


def test_empty_input_writes_header_only(tmp_path) -> None:
    path = tmp_path / "empty.csv"

    assert write_csv([], path) == 0
    assert path.read_text(encoding="utf-8").strip() == ",".join(COLUMNS)
