"""Tests for the static question catalogue."""

import logging

import pytest

from quizgame.core.models import Difficulty
from quizgame.core.question_bank import all_difficulties, questions_for, resolve_difficulty


class TestQuestionsFor:
    @pytest.mark.parametrize(
        "difficulty, expected_count",
        [(Difficulty.EASY, 8), (Difficulty.MEDIUM, 7), (Difficulty.HARD, 7)],
    )
    def test_reference_question_counts(self, difficulty, expected_count):
        assert len(questions_for(difficulty)) == expected_count

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_returns_same_questions_every_call(self, difficulty):
        first = questions_for(difficulty)
        second = questions_for(difficulty)
        assert first == second
        assert first is second

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_correct_option_is_one_of_the_options(self, difficulty):
        for question in questions_for(difficulty):
            assert question.correct_option in question.options
            assert len(set(question.options)) == 4

    def test_tiers_do_not_share_questions(self):
        prompts = [q.prompt for d in Difficulty for q in questions_for(d)]
        assert len(prompts) == len(set(prompts))

    def test_accepts_level_text(self):
        assert questions_for("Hard") == questions_for(Difficulty.HARD)

    def test_first_easy_question_matches_reference(self):
        question = questions_for(Difficulty.EASY)[0]
        assert question.prompt == "What is 2 + 2?"
        assert question.options == ("3", "4", "5", "6")
        assert question.correct_option == "4"


class TestFallback:
    @pytest.mark.parametrize("raw", ["Expert", "", None])
    def test_unknown_difficulty_falls_back_to_easy(self, raw):
        assert questions_for(raw) == questions_for(Difficulty.EASY)

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="quizgame.core.question_bank"):
            assert resolve_difficulty("Impossible") is Difficulty.EASY
        assert "Impossible" in caplog.text


def test_all_difficulties_in_menu_order():
    assert all_difficulties() == (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)
