"""Tests for the domain models."""

import dataclasses

import pytest

from quizgame.core.models import Account, Difficulty, Question


class TestDifficulty:
    def test_values_match_stored_level_text(self):
        assert [d.value for d in Difficulty] == ["Easy", "Medium", "Hard"]

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Easy", Difficulty.EASY),
            ("medium", Difficulty.MEDIUM),
            ("  HARD ", Difficulty.HARD),
            (Difficulty.HARD, Difficulty.HARD),
        ],
    )
    def test_parse_known_values(self, raw, expected):
        assert Difficulty.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["Expert", "", None, 3])
    def test_parse_unknown_values_returns_none(self, raw):
        assert Difficulty.parse(raw) is None


class TestQuestion:
    def test_valid_question(self):
        question = Question("What is 2 + 2?", ("3", "4", "5", "6"), "4")
        assert question.correct_option in question.options

    def test_correct_option_must_be_an_option(self):
        with pytest.raises(ValueError):
            Question("What is 2 + 2?", ("3", "4", "5", "6"), "22")

    def test_requires_four_options(self):
        with pytest.raises(ValueError):
            Question("What is 2 + 2?", ("3", "4", "5"), "4")

    def test_options_must_be_distinct(self):
        with pytest.raises(ValueError):
            Question("What is 2 + 2?", ("4", "4", "5", "6"), "4")

    def test_prompt_must_not_be_blank(self):
        with pytest.raises(ValueError):
            Question("   ", ("3", "4", "5", "6"), "4")

    def test_question_is_immutable(self):
        question = Question("What is 2 + 2?", ("3", "4", "5", "6"), "4")
        with pytest.raises(dataclasses.FrozenInstanceError):
            question.correct_option = "3"


def test_account_has_no_password_field():
    fields = {field.name for field in dataclasses.fields(Account)}
    assert fields == {"id", "username"}
