"""Load and read the ``speeches`` table."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Iterable, Optional

from scrapesou.scraper.models import SpeechRecord


def _row_to_record(row: sqlite3.Row) -> SpeechRecord:
    return SpeechRecord(
        id=row["id"],
        speaker=row["speaker"],
        date=date.fromisoformat(row["date"]),
        url=row["url"],
        article_id=row["article_id"],
        node_id=row["node_id"],
        speech=row["speech"] or "",
    )


def replace_speeches(conn: sqlite3.Connection, records: Iterable[SpeechRecord]) -> int:
    """Replace the table contents with *records* in a single transaction.

    Records must already carry their ids (see ``ResultSet.finalize``).

    Returns:
        The number of rows written.

    Raises:
        ValueError: If a record has no id.
    """
    rows = []
    for r in records:
        if r.id is None:
            raise ValueError(f"Record for {r.speaker!r} ({r.date}) has no id")
        rows.append(
            (r.id, r.speaker, r.date.isoformat(), r.url, r.article_id, r.node_id, r.speech)
        )

    with conn:
        conn.execute("DELETE FROM speeches")
        conn.executemany(
            """
            INSERT INTO speeches (id, speaker, date, url, article_id, node_id, speech)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            rows,
        )
    return len(rows)


def list_speeches(conn: sqlite3.Connection, limit: Optional[int] = None) -> list[SpeechRecord]:
    """Return stored speeches in id order, at most *limit* of them."""
    sql = "SELECT * FROM speeches ORDER BY id"
    params: tuple = ()
    if limit is not None:
        sql += " LIMIT ?"
        params = (limit,)
    return [_row_to_record(row) for row in conn.execute(sql, params).fetchall()]


def count_speeches(conn: sqlite3.Connection) -> int:
    return conn.execute("SELECT COUNT(*) FROM speeches").fetchone()[0]
