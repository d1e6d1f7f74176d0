"""Tests for the SQLite wrapper."""

import sqlite3

import pytest

from quizgame.core.database import Database
from quizgame.core.errors import StorageUnavailable


def _table_names(database):
    with database.transaction() as connection:
        rows = connection.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
    return {row["name"] for row in rows}


def test_schema_is_created(database):
    assert {"users", "scores"} <= _table_names(database)


def test_schema_creation_is_idempotent(tmp_path):
    path = tmp_path / "quiz_game.db"
    with Database(path) as first:
        with first.transaction() as connection:
            connection.execute("INSERT INTO users(username, password) VALUES ('alice', 'hash')")

    with Database(path) as second:
        second.ensure_schema()
        with second.transaction() as connection:
            count = connection.execute("SELECT COUNT(*) FROM users").fetchone()[0]
    assert count == 1


def test_foreign_keys_are_enforced(database):
    with pytest.raises(sqlite3.IntegrityError):
        with database.transaction() as connection:
            connection.execute("INSERT INTO scores(user_id, level, score) VALUES (42, 'Easy', 1)")


def test_failed_transaction_is_rolled_back(database):
    with pytest.raises(RuntimeError):
        with database.transaction() as connection:
            connection.execute("INSERT INTO users(username, password) VALUES ('alice', 'hash')")
            raise RuntimeError("boom")
    with database.transaction() as connection:
        assert connection.execute("SELECT COUNT(*) FROM users").fetchone()[0] == 0


def test_sql_errors_become_storage_unavailable(database):
    with pytest.raises(StorageUnavailable):
        with database.transaction() as connection:
            connection.execute("SELECT * FROM missing_table")


def test_unreachable_path_is_storage_unavailable(tmp_path):
    with pytest.raises(StorageUnavailable):
        Database(tmp_path / "missing" / "dir" / "quiz_game.db")


def test_closed_database_is_unavailable():
    database = Database.in_memory()
    database.close()
    assert database.is_closed()
    with pytest.raises(StorageUnavailable):
        with database.transaction():
            pass


def test_connection_is_closed_when_schema_creation_fails(monkeypatch):
    opened = []
    real_connect = sqlite3.connect

    def tracking_connect(*args, **kwargs):
        connection = real_connect(*args, **kwargs)
        opened.append(connection)
        return connection

    monkeypatch.setattr(sqlite3, "connect", tracking_connect)
    monkeypatch.setattr("quizgame.core.database.SCHEMA_STATEMENTS", ("CREATE NONSENSE",))

    with pytest.raises(StorageUnavailable):
        Database.in_memory()

    assert len(opened) == 1
    with pytest.raises(sqlite3.ProgrammingError):
        opened[0].execute("SELECT 1")
