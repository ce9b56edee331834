# src/devises/adapters/persistence/sqlite_store.py
"""
SQLite Currency Store - Local Persistence for the Currency List

This module implements the CurrencyStore contract on top of an SQLite file.
A new connection is opened per call so the store can be used from executor
worker threads.

Files that USE this module:
- devises.app (builds the store from settings.database_path)
- tests.test_sqlite_store (unit tests)

Files that this module USES:
- devises.adapters.persistence.base (CurrencyStore, CurrencyRecord)
"""
from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Sequence, Union

from devises.adapters.persistence.base import CurrencyRecord, CurrencyStore

log = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS currencies (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    country_code TEXT NOT NULL,
    country_name TEXT NOT NULL
)
"""


class SQLiteCurrencyStore(CurrencyStore):
    def __init__(self, db_path: Union[str, Path]):
        """
        Initialize the store and create the schema if needed.

        Args:
            db_path: Path to the SQLite database file
        """
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.execute(SCHEMA)
        log.debug("Currency store ready at %s", self.db_path)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection inside a transaction; commit on success, roll back on error."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def row_count(self) -> int:
        with self._connect() as conn:
            row = conn.execute("SELECT COUNT(*) FROM currencies").fetchone()
        return int(row[0])

    def all_rows(self) -> List[CurrencyRecord]:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id, country_code, country_name FROM currencies ORDER BY id"
            ).fetchall()
        return [
            CurrencyRecord(code=row["country_code"], name=row["country_name"], id=row["id"])
            for row in rows
        ]

    def insert_all(self, records: Sequence[CurrencyRecord]) -> None:
        with self._connect() as conn:
            conn.executemany(
                "INSERT INTO currencies (country_code, country_name) VALUES (?, ?)",
                [(record.code, record.name) for record in records],
            )
        log.debug("Inserted %d currency rows", len(records))
