"""ScrapeSOU CLI: entry-point for scraping and storage operations.

Usage:
    python cli/main.py --help

Commands:
    scrape     → scrape every address, write CSV, reload SQLite
    db init    → create the speeches table
    db show    → print stored speeches
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from scrapesou.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from scrapesou.config import settings
from scrapesou.db import count_speeches, get_connection, init_db, list_speeches, replace_speeches
from scrapesou.export import write_csv
from scrapesou.scraper import ScrapeError, SpeechRecord, scrape_all, scrape_all_to_string

app = typer.Typer(
    name="scrapesou",
    help="State of the Union speech scraper.",
    no_args_is_help=True,
)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s [%(threadName)s] %(name)s: %(message)s",
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _echo_records(records: list[SpeechRecord]) -> None:
    if not records:
        typer.echo("  (no speeches stored)")
        return
    for r in records:
        words = len(r.speech.split())
        typer.echo(f"  {r.id:>4}  {r.date.isoformat()}  {r.speaker:<28}  {words:>6} words  {r.url}")


# ---------------------------------------------------------------------------
# Scrape
# ---------------------------------------------------------------------------
@app.command("scrape")
def scrape(
    string: bool = typer.Option(False, "--string", "-s", help="Dump raw markup as a string."),
    csvout: Path = typer.Option(
        settings.csv_path, "--csvout", "-c", help="Output path for the CSV file."
    ),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Rows to print after loading."),
    listing_url: Optional[str] = typer.Option(None, "--listing-url", help="Override the listing page URL."),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Worker pool size."),
    traces: bool = typer.Option(False, "--traces", help="Print every failed link and its reason."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    """Scrape every State of the Union address on the listing page."""
    _setup_logging(verbose)
    url = listing_url or settings.listing_url

    try:
        if string:
            typer.echo(f"[scrape] Dumping {url!r} as a string …", err=True)
            typer.echo(scrape_all_to_string(url, max_workers=workers))
            return

        typer.echo(f"[scrape] Scraping speeches from {url!r} …")
        results = scrape_all(url, max_workers=workers)
    except ScrapeError as exc:
        typer.echo(f"[scrape] ✗ {exc}")
        raise typer.Exit(1)

    typer.echo(f"[scrape] {len(results)} speech(es), {len(results.failures)} failure(s).")
    if traces:
        for text, failure in results.failures.items():
            typer.echo(f"  ✗ {text!r}: {failure.reason}")

    typer.echo(f"[scrape] Writing CSV file {str(csvout)!r} …")
    write_csv(results, csvout)

    conn = get_connection()
    try:
        init_db(conn)
        typer.echo("[scrape] Loading table …")
        replace_speeches(conn, results)
        typer.echo(f"[scrape] Loaded {count_speeches(conn)} row(s) into {settings.db_path}")
        stored = list_speeches(conn, limit=limit)
    finally:
        conn.close()
    _echo_records(stored)


# ---------------------------------------------------------------------------
# DB commands
# ---------------------------------------------------------------------------
db_app = typer.Typer(help="Database operations.", no_args_is_help=True)
app.add_typer(db_app, name="db")


@db_app.command("init")
def db_init() -> None:
    """Initialise the SQLite database (create tables if they do not exist)."""
    conn = get_connection()
    init_db(conn)
    conn.close()
    typer.echo(f"[db init] Database ready at {settings.db_path}")


@db_app.command("show")
def db_show(
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum rows to print."),
) -> None:
    """Print stored speeches in date order."""
    conn = get_connection()
    try:
        init_db(conn)
        records = list_speeches(conn, limit=limit)
    finally:
        conn.close()
    _echo_records(records)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
