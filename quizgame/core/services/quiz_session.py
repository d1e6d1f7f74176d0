"""Service holding the state of one quiz play-through."""

from __future__ import annotations

import random
from collections.abc import Sequence

from quizgame.core.errors import InvalidArgument, InvalidState
from quizgame.core.models import AnswerResult, Difficulty, Question
from quizgame.core.question_bank import questions_for, resolve_difficulty


class QuizSession:
    """Sequential, shuffled quiz over one difficulty tier.

    The session is in progress while ``current_index < question_count`` and
    complete once every question has been answered. Submitting an answer
    scores it and advances to the next question in a single step.
    """

    def __init__(
        self,
        difficulty: Difficulty | str,
        *,
        rng: random.Random | None = None,
        questions: Sequence[Question] | None = None,
        strict_answers: bool = False,
    ) -> None:
        self._difficulty = resolve_difficulty(difficulty)
        source = questions_for(self._difficulty) if questions is None else questions
        if not source:
            raise InvalidArgument("A quiz needs at least one question.")

        self._shuffle_rng = rng or random.Random()
        ordered = list(source)
        self._shuffle_rng.shuffle(ordered)
        self._questions: tuple[Question, ...] = tuple(ordered)

        self._current_index: int = 0
        self._score: int = 0
        self._strict_answers = strict_answers

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def questions(self) -> tuple[Question, ...]:
        """Questions in the order this session presents them."""
        return self._questions

    @property
    def question_count(self) -> int:
        return len(self._questions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def question_number(self) -> int:
        """1-based number of the current question, for display."""
        return min(self._current_index + 1, len(self._questions))

    @property
    def score(self) -> int:
        return self._score

    @property
    def strict_answers(self) -> bool:
        return self._strict_answers

    def is_complete(self) -> bool:
        return self._current_index == len(self._questions)

    def current_question(self) -> Question:
        if self.is_complete():
            raise InvalidState("The quiz is complete; there is no current question.")
        return self._questions[self._current_index]

    def submit_answer(self, choice: str) -> AnswerResult:
        """Score ``choice`` against the current question and move to the next one.

        Comparison is exact string equality. In strict mode a choice that is not
        one of the option texts raises InvalidArgument and leaves the session as is.
        """
        question = self.current_question()
        if self._strict_answers and choice not in question.options:
            raise InvalidArgument(f"{choice!r} is not one of the options for this question.")

        correct = choice == question.correct_option
        if correct:
            self._score += 1
        self._current_index += 1
        return AnswerResult(correct=correct, correct_option=question.correct_option)

    def final_score(self) -> int:
        if not self.is_complete():
            raise InvalidState(
                f"The quiz is not complete yet ({self._current_index} of "
                f"{len(self._questions)} questions answered)."
            )
        return self._score
