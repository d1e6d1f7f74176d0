"""Service for recording finished quizzes and reading the leaderboard."""

from __future__ import annotations

import logging
import sqlite3

from quizgame.core.database import Database
from quizgame.core.errors import StorageUnavailable, ValidationError
from quizgame.core.models import Difficulty, LeaderboardRow, ScoreRecord

logger = logging.getLogger(__name__)


class ScoreStore:
    """Append-only store over the ``scores`` table."""

    def __init__(self, database: Database) -> None:
        self._database = database

    def record_score(self, account_id: int, difficulty: Difficulty | str, score: int) -> ScoreRecord:
        """Append one immutable result for ``account_id``.

        Raises ValidationError for an unknown level or a score that is not a
        non-negative integer, and StorageUnavailable when the account does not
        exist or the database rejects the write.
        """
        if isinstance(score, bool) or not isinstance(score, int):
            raise ValidationError(f"Score must be an integer, got {score!r}.")
        if score < 0:
            raise ValidationError(f"Score must not be negative, got {score}.")
        level = Difficulty.parse(difficulty)
        if level is None:
            raise ValidationError(f"Unknown difficulty {difficulty!r}.")
        try:
            with self._database.transaction() as connection:
                cursor = connection.execute(
                    "INSERT INTO scores(user_id, level, score) VALUES (?, ?, ?)",
                    (account_id, level.value, score),
                )
                record_id = cursor.lastrowid
        except sqlite3.IntegrityError as exc:
            logger.error("Could not record score for account %s: %s", account_id, exc)
            raise StorageUnavailable(f"Could not record score for account {account_id}: {exc}") from exc

        logger.info("Recorded score %s on %s for account %s", score, level.value, account_id)
        return ScoreRecord(id=record_id, account_id=account_id, difficulty=level, score=score)

    def list_scores(self) -> list[LeaderboardRow]:
        """Return every score with its username, sorted by username then insertion order."""
        with self._database.transaction() as connection:
            rows = connection.execute(
                "SELECT users.username, scores.level, scores.score FROM scores "
                "JOIN users ON users.id = scores.user_id "
                "ORDER BY users.username, scores.id"
            ).fetchall()
        return [
            LeaderboardRow(username=row["username"], difficulty=row["level"], score=row["score"])
            for row in rows
        ]
