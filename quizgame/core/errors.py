"""Exceptions raised by the quiz core and surfaced by the UI as dialogs."""

from __future__ import annotations


class QuizGameError(Exception):
    """Base class for every error the quiz core reports to its caller."""


class ValidationError(QuizGameError):
    """Raised when a required field is empty or a value is out of range."""


class DuplicateUsername(QuizGameError):
    """Raised when registering a username that already exists."""


class AuthFailure(QuizGameError):
    """Raised when no account matches the given username and password.

    Unknown usernames and wrong passwords share this error and its message.
    """


class InvalidState(QuizGameError):
    """Raised when a quiz operation is called out of sequence."""


class InvalidArgument(QuizGameError, ValueError):
    """Raised when an operation receives an argument it cannot accept."""


class StorageUnavailable(QuizGameError):
    """Raised when the database cannot be reached or rejects a write."""
