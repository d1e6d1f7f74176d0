"""Business logic shared between the Qt shell and the quiz core."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random

from quizgame.core.database import Database
from quizgame.core.errors import InvalidState
from quizgame.core.models import Account, Difficulty, LeaderboardRow, ScoreRecord
from quizgame.core.services.account_store import AccountStore
from quizgame.core.services.quiz_session import QuizSession
from quizgame.core.services.score_store import ScoreStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlayerContext:
    """The authenticated player that finished quizzes are attributed to."""

    account: Account

    @property
    def account_id(self) -> int:
        return self.account.id

    @property
    def username(self) -> str:
        return self.account.username


class GameManager:
    """Facade over accounts, scores and the active quiz session.

    Holds at most one logged-in player and one running session, both owned
    by the caller driving the UI.
    """

    def __init__(
        self,
        database: Database,
        *,
        rng: random.Random | None = None,
        strict_answers: bool = True,
    ) -> None:
        self._database = database
        self._accounts = AccountStore(database)
        self._scores = ScoreStore(database)
        self._rng = rng or random.Random()
        self._strict_answers = strict_answers

        self._player: PlayerContext | None = None
        self._session: QuizSession | None = None
        self._session_recorded: bool = False

    # --- Accounts ---

    @property
    def accounts(self) -> AccountStore:
        return self._accounts

    @property
    def scores(self) -> ScoreStore:
        return self._scores

    def register(self, username: str, password: str) -> Account:
        return self._accounts.register(username, password)

    def login(self, username: str, password: str) -> PlayerContext:
        account = self._accounts.authenticate(username, password)
        self._player = PlayerContext(account=account)
        self._clear_session()
        return self._player

    def logout(self) -> None:
        if self._player is not None:
            logger.info("Account %s logged out", self._player.username)
        self._player = None
        self._clear_session()

    @property
    def current_player(self) -> PlayerContext | None:
        return self._player

    def is_logged_in(self) -> bool:
        return self._player is not None

    # --- Quiz session ---

    def start_quiz(self, difficulty: Difficulty | str) -> QuizSession:
        """Begin a new play-through, abandoning any session still running."""
        if self._session is not None and not self._session.is_complete():
            logger.info(
                "Abandoning %s quiz at question %s",
                self._session.difficulty.value,
                self._session.question_number,
            )
        self._session = QuizSession(
            difficulty, rng=self._rng, strict_answers=self._strict_answers
        )
        self._session_recorded = False
        logger.info(
            "Started %s quiz with %s questions",
            self._session.difficulty.value,
            self._session.question_count,
        )
        return self._session

    @property
    def active_session(self) -> QuizSession | None:
        return self._session

    def finish_quiz(self) -> ScoreRecord | None:
        """Persist the completed session's score for the logged-in player.

        Returns None when nobody is logged in; the score is then discarded.
        A session is recorded at most once.
        """
        session = self._session
        if session is None:
            raise InvalidState("No quiz has been started.")
        if not session.is_complete():
            raise InvalidState("The quiz must be complete before its score is saved.")
        if self._session_recorded:
            raise InvalidState("This quiz has already been saved.")

        final_score = session.final_score()
        self._session_recorded = True
        if self._player is None:
            logger.info("Discarding score %s; no player is logged in", final_score)
            return None
        return self._scores.record_score(self._player.account_id, session.difficulty, final_score)

    # --- Leaderboard ---

    def leaderboard(self) -> list[LeaderboardRow]:
        return self._scores.list_scores()

    def _clear_session(self) -> None:
        self._session = None
        self._session_recorded = False
