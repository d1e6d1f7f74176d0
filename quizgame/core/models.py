"""Domain models for the quiz game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quizgame.constants.quiz_constants import OPTIONS_PER_QUESTION


class Difficulty(Enum):
    """Question tier selectable from the main menu.

    The value doubles as the text stored in the ``scores.level`` column.
    """

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"

    @classmethod
    def parse(cls, value: Difficulty | str | None) -> Difficulty | None:
        """Return the matching tier for an enum member or its name, else None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        cleaned = value.strip().lower()
        for member in cls:
            if member.value.lower() == cleaned:
                return member
        return None


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with exactly four distinct options."""

    prompt: str
    options: tuple[str, ...]
    correct_option: str

    def __post_init__(self) -> None:
        if not self.prompt.strip():
            raise ValueError("Question prompt must not be empty.")
        if len(self.options) != OPTIONS_PER_QUESTION:
            raise ValueError(f"Each question must have exactly {OPTIONS_PER_QUESTION} options.")
        if any(not option for option in self.options):
            raise ValueError("Option text cannot be empty.")
        if len(set(self.options)) != len(self.options):
            raise ValueError(f"Options must be distinct: {self.options!r}")
        if self.correct_option not in self.options:
            raise ValueError(f"Correct option {self.correct_option!r} is not one of the options.")


@dataclass(frozen=True, slots=True)
class AnswerResult:
    """Outcome of submitting one answer to a quiz session."""

    correct: bool
    correct_option: str


@dataclass(frozen=True, slots=True)
class Account:
    """Registered player identity. The password hash never leaves the store."""

    id: int
    username: str


@dataclass(frozen=True, slots=True)
class ScoreRecord:
    """One persisted result of a completed quiz."""

    id: int
    account_id: int
    difficulty: Difficulty
    score: int


@dataclass(frozen=True, slots=True)
class LeaderboardRow:
    """Score joined with the owning player's username, as shown in the scores table."""

    username: str
    difficulty: str
    score: int
