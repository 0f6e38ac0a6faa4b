# db/errors.py

from __future__ import annotations

from typing import Optional


class DataAccessError(Exception):
    """A query against the remote store failed (API error or transport error)."""

    def __init__(self, table: str, message: str, details: Optional[str] = None):
        super().__init__(f"{table}: {message}")
        self.table = table
        self.message = message
        self.details = details


class QueryCancelled(Exception):
    """The page that issued the query was torn down before the result arrived."""
