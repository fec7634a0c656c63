"""Database layer package.

Public re-exports so callers can write::

    from scrapesou.db import get_connection, init_db
"""

from scrapesou.db.connection import get_connection, init_db
from scrapesou.db.speeches import count_speeches, list_speeches, replace_speeches

__all__ = ["get_connection", "init_db", "replace_speeches", "list_speeches", "count_speeches"]
