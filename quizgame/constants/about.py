"""Static metadata describing QuizGame."""

APP_NAME = "QuizGame"
APP_VERSION = "1.0"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizGame is a small desktop quiz built with Qt. Register an account, "
    "pick a difficulty and answer the shuffled multiple-choice questions. "
    "Every finished quiz is saved to the local leaderboard."
)

HELP_TEXT = (
    "Register with a username and password, then log in.\n\n"
    "Choose Easy, Medium or Hard to start a quiz. Select one of the four "
    "answers and press Next to move on; an answer cannot be changed once "
    "submitted.\n\n"
    "Your score is saved when the last question has been answered. Use "
    "Show Scores to see the results of every player."
)
