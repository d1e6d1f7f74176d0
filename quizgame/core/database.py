"""SQLite connection handling for accounts and scores.

Architecture note:
    A single connection is opened per application run and shared by the
    account and score stores. The app drives everything from the Qt thread,
    so no pooling or locking is needed. The schema is created with
    ``CREATE TABLE IF NOT EXISTS`` on every open; there are no migrations.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import logging
from pathlib import Path
import sqlite3

from quizgame.constants.storage_constants import (
    DEFAULT_DATABASE_PATH,
    IN_MEMORY_DATABASE,
    SCHEMA_STATEMENTS,
)
from quizgame.core.errors import StorageUnavailable

logger = logging.getLogger(__name__)


class Database:
    """Owns the SQLite connection and creates the schema on open."""

    def __init__(self, path: str | Path = DEFAULT_DATABASE_PATH) -> None:
        self.path = str(path)
        try:
            self._connection = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            raise StorageUnavailable(f"Could not open database {self.path}: {exc}") from exc
        self._closed = False
        try:
            self._connection.row_factory = sqlite3.Row
            self._connection.execute("PRAGMA foreign_keys = ON")
            self.ensure_schema()
        except sqlite3.Error as exc:
            self.close()
            raise StorageUnavailable(f"Could not open database {self.path}: {exc}") from exc
        except StorageUnavailable:
            self.close()
            raise

    @classmethod
    def in_memory(cls) -> Database:
        return cls(IN_MEMORY_DATABASE)

    def ensure_schema(self) -> None:
        with self.transaction() as connection:
            for statement in SCHEMA_STATEMENTS:
                connection.execute(statement)
        logger.info("Database schema ready at %s", self.path)

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Yield the connection; commit on success, roll back on any error.

        ``sqlite3.IntegrityError`` is re-raised untouched so the stores can map
        constraint violations to their own errors. Every other
        ``sqlite3.Error`` becomes StorageUnavailable.
        """
        if self._closed:
            raise StorageUnavailable("The database connection is closed.")
        try:
            yield self._connection
            self._connection.commit()
        except sqlite3.IntegrityError:
            self._connection.rollback()
            raise
        except sqlite3.Error as exc:
            self._connection.rollback()
            logger.error("Database error on %s: %s", self.path, exc)
            raise StorageUnavailable(f"Database error: {exc}") from exc
        except BaseException:
            self._connection.rollback()
            raise

    def close(self) -> None:
        if self._closed:
            return
        self._connection.close()
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
