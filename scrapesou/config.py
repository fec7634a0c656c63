"""Centralised settings for the State of the Union scraper.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _default_workers() -> int:
    return max(1, os.cpu_count() or 1)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source site
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get(
            "SOU_BASE_URL", "https://www.infoplease.com"
        ).rstrip("/")
    )
    listing_path: str = field(
        default_factory=lambda: os.environ.get(
            "SOU_LISTING_PATH",
            "/primary-sources/government/presidential-speeches/state-union-addresses",
        )
    )
    # Path segment the site puts in front of "<slug>-<date token>" for
    # individual addresses.
    speech_prefix: str = field(
        default_factory=lambda: os.environ.get(
            "SOU_SPEECH_PREFIX",
            "primary-sources/government/presidential-speeches/state-union-address-",
        )
    )

    @property
    def listing_url(self) -> str:
        """Absolute URL of the table-of-contents page."""
        return self.base_url + self.listing_path

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SOU_USER_AGENT",
            "Mozilla/5.0 (compatible; ScrapeSOU/1.0; +https://github.com/scrapesou)",
        )
    )
    max_workers: int = field(
        default_factory=lambda: int(os.environ.get("MAX_WORKERS", _default_workers()))
    )

    # ------------------------------------------------------------------
    # Output / storage
    # ------------------------------------------------------------------
    workspace_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("SOU_WORKSPACE", Path.home() / ".scrapesou")
        )
    )
    csv_path: Path = field(
        default_factory=lambda: Path(
            os.environ.get("SOU_CSV_PATH", "presidential_sou_speeches.csv")
        )
    )

    @property
    def db_path(self) -> Path:
        """Absolute path to the SQLite database file."""
        return self.workspace_dir / "speeches.db"

    @property
    def schema_path(self) -> Path:
        """Absolute path to the schema SQL file bundled with the package."""
        return Path(__file__).resolve().parent / "db" / "schema.sql"

    def ensure_workspace(self) -> None:
        """Create the workspace directory if it does not exist."""
        self.workspace_dir.mkdir(parents=True, exist_ok=True)


# Module-level singleton; import this everywhere:
#   from scrapesou.config import settings
settings = Settings()
