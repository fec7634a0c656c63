"""Tests for the ``scrapesou`` CLI."""

from __future__ import annotations

from datetime import date

import pytest
from typer.testing import CliRunner

from cli.main import app
from scrapesou.db import get_connection, init_db, list_speeches
from scrapesou.scraper.errors import FetchError
from scrapesou.scraper.models import PartialFailure, ResultSet, SpeechRecord

runner = CliRunner()


@pytest.fixture(autouse=True)
def workspace(tmp_path, monkeypatch):
    """Point the SQLite workspace at a temp dir for each test."""
    monkeypatch.setattr("scrapesou.config.settings.workspace_dir", tmp_path / "ws")
    return tmp_path


def _results() -> ResultSet:
    results = ResultSet()
    results.add_record(
        SpeechRecord(speaker="John Adams", date=date(1797, 11, 22), url="https://x/adams", speech="Gentlemen")
    )
    results.add_record(
        SpeechRecord(speaker="George Washington", date=date(1790, 1, 8), url="https://x/gw", speech="Fellow citizens")
    )
    results.add_failure(
        "James Madison (November 5, 1811)",
        PartialFailure(speaker="James Madison", date=date(1811, 11, 5), url="https://x/jm", reason="HTTP 404"),
    )
    results.finalize()
    return results


class TestScrapeCommand:
    def test_writes_csv_and_loads_db(self, workspace, monkeypatch) -> None:
        monkeypatch.setattr("cli.main.scrape_all", lambda url, max_workers=None: _results())
        csv_path = workspace / "out.csv"

        result = runner.invoke(app, ["scrape", "--csvout", str(csv_path), "--limit", "1"])

        assert result.exit_code == 0, result.output
        assert "2 speech(es), 1 failure(s)" in result.output
        assert "Loaded 2 row(s)" in result.output
        assert csv_path.exists()
        assert "George Washington" in result.output
        assert "John Adams" not in result.output

        conn = get_connection()
        init_db(conn)
        stored = list_speeches(conn)
        conn.close()
        assert [(r.id, r.speaker) for r in stored] == [(1, "George Washington"), (2, "John Adams")]

    def test_traces_print_failures(self, workspace, monkeypatch) -> None:
        monkeypatch.setattr("cli.main.scrape_all", lambda url, max_workers=None: _results())

        result = runner.invoke(app, ["scrape", "--csvout", str(workspace / "o.csv"), "--traces"])

        assert result.exit_code == 0
        assert "James Madison (November 5, 1811)" in result.output
        assert "HTTP 404" in result.output

    def test_options_passed_through(self, workspace, monkeypatch) -> None:
        seen = {}

        def fake(url, max_workers=None):
            seen.update(url=url, workers=max_workers)
            return _results()

        monkeypatch.setattr("cli.main.scrape_all", fake)

        runner.invoke(
            app,
            ["scrape", "-c", str(workspace / "o.csv"), "--listing-url", "https://mirror.test/toc", "-w", "2"],
        )

        assert seen == {"url": "https://mirror.test/toc", "workers": 2}

    def test_string_dump(self, workspace, monkeypatch) -> None:
        monkeypatch.setattr(
            "cli.main.scrape_all_to_string", lambda url, max_workers=None: "<article>dump</article>"
        )
        monkeypatch.setattr("cli.main.scrape_all", lambda *a, **k: pytest.fail("should not scrape"))

        result = runner.invoke(app, ["scrape", "--string"])

        assert result.exit_code == 0
        assert "<article>dump</article>" in result.output

    def test_listing_failure_exits_non_zero(self, workspace, monkeypatch) -> None:
        def boom(url, max_workers=None):
            raise FetchError(url, "HTTP 500")

        monkeypatch.setattr("cli.main.scrape_all", boom)

        result = runner.invoke(app, ["scrape", "--csvout", str(workspace / "o.csv")])

        assert result.exit_code == 1
        assert "HTTP 500" in result.output
        assert not (workspace / "o.csv").exists()


class TestDbCommands:
    def test_init(self, workspace) -> None:
        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0
        assert (workspace / "ws" / "speeches.db").exists()

    def test_show_empty(self) -> None:
        result = runner.invoke(app, ["db", "show"])

        assert result.exit_code == 0
        assert "no speeches stored" in result.output

    def test_show_after_scrape(self, workspace, monkeypatch) -> None:
        monkeypatch.setattr("cli.main.scrape_all", lambda url, max_workers=None: _results())
        runner.invoke(app, ["scrape", "--csvout", str(workspace / "o.csv")])

        result = runner.invoke(app, ["db", "show", "--limit", "5"])

        assert result.exit_code == 0
        assert "George Washington" in result.output
        assert "John Adams" in result.output
