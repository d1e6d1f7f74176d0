"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizGame"
LOGIN_TITLE: str = "Login"
SCORES_WINDOW_TITLE: str = "All User Scores"

USERNAME_PLACEHOLDER: str = "Username"
PASSWORD_PLACEHOLDER: str = "Password"
LOGIN_BUTTON: str = "Login"
REGISTER_BUTTON: str = "Register"

MENU_HEADING: str = "Select Difficulty"
MENU_SHOW_SCORES_BUTTON: str = "Show Scores"
MENU_LOGOUT_BUTTON: str = "Logout"
MENU_ABOUT_BUTTON: str = "About"
MENU_HELP_BUTTON: str = "Help"
MENU_WELCOME_TEMPLATE: str = "Logged in as {username}"

QUIZ_NEXT_BUTTON: str = "Next"
QUIZ_QUESTION_TEMPLATE: str = "Question {number}: {prompt}"
QUIZ_PROGRESS_TEMPLATE: str = "{difficulty} - question {number} of {total}"

RESULT_TEMPLATE: str = "You scored: {score}"
RESULT_DETAIL_TEMPLATE: str = "{score} of {total} correct on {difficulty}"
RESULT_NOT_SAVED_MESSAGE: str = "Log in to have your score saved."
RESULT_SAVE_FAILED_MESSAGE: str = "Your score could not be saved."
RESULT_BACK_BUTTON: str = "Back to Menu"

SCORES_COLUMNS: tuple[str, ...] = ("Username", "Level", "Score")
SCORES_EMPTY_MESSAGE: str = "No scores have been recorded yet."

REGISTRATION_SUCCESS_MESSAGE: str = "Registration successful. Please login."
EMPTY_FIELDS_MESSAGE: str = "Username and Password cannot be empty."
LOGIN_FAILED_MESSAGE: str = "Incorrect username or password."
DUPLICATE_USERNAME_MESSAGE: str = "Username already exists."
