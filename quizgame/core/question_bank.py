"""Static catalogue of quiz questions for each difficulty tier."""

from __future__ import annotations

import logging

from quizgame.constants.quiz_constants import FALLBACK_DIFFICULTY_NAME
from quizgame.core.models import Difficulty, Question

logger = logging.getLogger(__name__)


def _q(prompt: str, options: tuple[str, str, str, str], correct_option: str) -> Question:
    return Question(prompt=prompt, options=options, correct_option=correct_option)


_EASY_QUESTIONS: tuple[Question, ...] = (
    _q("What is 2 + 2?", ("3", "4", "5", "6"), "4"),
    _q("What color is the sky?", ("Blue", "Green", "Red", "Yellow"), "Blue"),
    _q(
        "What is the capital of the USA?",
        ("New York", "Washington DC", "Los Angeles", "Chicago"),
        "Washington DC",
    ),
    _q("How many days are there in a week?", ("5", "6", "7", "8"), "7"),
    _q("Which animal barks?", ("Cat", "Dog", "Cow", "Horse"), "Dog"),
    _q("Which fruit is yellow and sour?", ("Apple", "Banana", "Lemon", "Orange"), "Lemon"),
    _q("How many legs does a spider have?", ("6", "8", "10", "12"), "8"),
    _q("What do bees produce?", ("Milk", "Honey", "Wax", "Silk"), "Honey"),
)

_MEDIUM_QUESTIONS: tuple[Question, ...] = (
    _q("What is the capital of France?", ("Berlin", "Madrid", "Paris", "Rome"), "Paris"),
    _q("Which planet is known as the Red Planet?", ("Earth", "Venus", "Mars", "Jupiter"), "Mars"),
    _q("What is the chemical symbol for water?", ("O2", "CO2", "H2O", "NaCl"), "H2O"),
    _q("Who painted the Mona Lisa?", ("Van Gogh", "Picasso", "Da Vinci", "Michelangelo"), "Da Vinci"),
    _q("What is the largest ocean on Earth?", ("Atlantic", "Indian", "Pacific", "Arctic"), "Pacific"),
    _q(
        "What gas do plants absorb?",
        ("Oxygen", "Nitrogen", "Carbon Dioxide", "Hydrogen"),
        "Carbon Dioxide",
    ),
    _q("How many continents are there?", ("5", "6", "7", "8"), "7"),
)

_HARD_QUESTIONS: tuple[Question, ...] = (
    _q("What is the square root of 144?", ("10", "11", "12", "13"), "12"),
    _q("Who developed general relativity?", ("Newton", "Einstein", "Tesla", "Hawking"), "Einstein"),
    _q("What is the chemical formula of table salt?", ("NaCl", "KCl", "NaOH", "HCl"), "NaCl"),
    _q("Which element has the atomic number 26?", ("Iron", "Gold", "Silver", "Copper"), "Iron"),
    _q(
        "What is the name of the longest river in the world?",
        ("Amazon", "Nile", "Yangtze", "Mississippi"),
        "Nile",
    ),
    _q("In which year did World War II end?", ("1942", "1945", "1939", "1950"), "1945"),
    _q(
        "Who is known as the father of modern computers?",
        ("Charles Babbage", "Alan Turing", "John Von Neumann", "Bill Gates"),
        "Charles Babbage",
    ),
)

_QUESTIONS_BY_DIFFICULTY: dict[Difficulty, tuple[Question, ...]] = {
    Difficulty.EASY: _EASY_QUESTIONS,
    Difficulty.MEDIUM: _MEDIUM_QUESTIONS,
    Difficulty.HARD: _HARD_QUESTIONS,
}


def all_difficulties() -> tuple[Difficulty, ...]:
    """Return the tiers in the order they are offered on the menu."""
    return (Difficulty.EASY, Difficulty.MEDIUM, Difficulty.HARD)


def resolve_difficulty(difficulty: Difficulty | str | None) -> Difficulty:
    """Map user input to a tier, falling back to Easy for anything unrecognised."""
    resolved = Difficulty.parse(difficulty)
    if resolved is None:
        logger.warning(
            "Unknown difficulty %r, falling back to %s", difficulty, FALLBACK_DIFFICULTY_NAME
        )
        return Difficulty(FALLBACK_DIFFICULTY_NAME)
    return resolved


def questions_for(difficulty: Difficulty | str | None) -> tuple[Question, ...]:
    """Return the fixed, ordered question set for a tier.

    The same tuple is returned on every call. Unknown input yields the Easy set.
    """
    return _QUESTIONS_BY_DIFFICULTY[resolve_difficulty(difficulty)]
