"""Service for registering and authenticating player accounts."""

from __future__ import annotations

import logging
import sqlite3

from werkzeug.security import check_password_hash, generate_password_hash

from quizgame.core.database import Database
from quizgame.core.errors import AuthFailure, DuplicateUsername, ValidationError
from quizgame.core.models import Account

logger = logging.getLogger(__name__)

# Compared against when the username is unknown so both failure paths do the same work.
_DUMMY_PASSWORD_HASH = generate_password_hash("quizgame-dummy-password")


class AccountStore:
    """Persists accounts in the ``users`` table.

    Passwords are stored as salted hashes, never as plain text.
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    def register(self, username: str, password: str) -> Account:
        self._require_credentials(username, password)
        password_hash = generate_password_hash(password)
        try:
            with self._database.transaction() as connection:
                cursor = connection.execute(
                    "INSERT INTO users(username, password) VALUES (?, ?)",
                    (username, password_hash),
                )
                account_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            raise DuplicateUsername(f"Username {username!r} already exists.") from exc

        logger.info("Registered account %s (id=%s)", username, account_id)
        return Account(id=account_id, username=username)

    def authenticate(self, username: str, password: str) -> Account:
        """Return the account matching both credentials or raise AuthFailure."""
        self._require_credentials(username, password)
        with self._database.transaction() as connection:
            row = connection.execute(
                "SELECT id, username, password FROM users WHERE username = ?",
                (username,),
            ).fetchone()

        if row is None:
            check_password_hash(_DUMMY_PASSWORD_HASH, password)
            logger.info("Failed login attempt for %s", username)
            raise AuthFailure("Incorrect username or password.")
        if not check_password_hash(row["password"], password):
            logger.info("Failed login attempt for %s", username)
            raise AuthFailure("Incorrect username or password.")

        logger.info("Account %s logged in", username)
        return Account(id=row["id"], username=row["username"])

    @staticmethod
    def _require_credentials(username: str, password: str) -> None:
        if not username or not password:
            raise ValidationError("Username and Password cannot be empty.")
