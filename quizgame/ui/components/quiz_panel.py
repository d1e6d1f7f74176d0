"""Component that walks the player through one quiz session."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QLabel,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from quizgame.constants.quiz_constants import OPTIONS_PER_QUESTION
from quizgame.constants.ui_constants import (
    QUIZ_NEXT_BUTTON,
    QUIZ_PROGRESS_TEMPLATE,
    QUIZ_QUESTION_TEMPLATE,
)
from quizgame.core.errors import QuizGameError
from quizgame.core.services.quiz_session import QuizSession
from quizgame.ui.dialog_helpers import show_game_error
from quizgame.styling.styles import Styles


class QuizPanel(QWidget):
    """Shows the current question with four exclusive options and a Next button."""

    def __init__(self, on_quiz_complete: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_quiz_complete = on_quiz_complete
        self._session: QuizSession | None = None
        self._option_buttons: list[QRadioButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(10)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.progress_label = QLabel("", self)
        self.progress_label.setStyleSheet(Styles.get_secondary_label_style())
        layout.addWidget(self.progress_label)

        self.question_label = QLabel("", self)
        self.question_label.setWordWrap(True)
        self.question_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.question_label)

        self.options_group = QButtonGroup(self)
        self.options_group.setExclusive(True)
        self.options_group.buttonToggled.connect(self._handle_option_toggled)
        for index in range(OPTIONS_PER_QUESTION):
            button = QRadioButton("", self)
            self.options_group.addButton(button, index)
            layout.addWidget(button)
            self._option_buttons.append(button)

        self.next_button = QPushButton(QUIZ_NEXT_BUTTON, self)
        self.next_button.setEnabled(False)
        self.next_button.clicked.connect(self._handle_next)
        layout.addWidget(self.next_button)

    def start_session(self, session: QuizSession) -> None:
        self._session = session
        self._load_question()

    def _load_question(self) -> None:
        session = self._session
        if session is None or session.is_complete():
            return
        question = session.current_question()
        self.progress_label.setText(
            QUIZ_PROGRESS_TEMPLATE.format(
                difficulty=session.difficulty.value,
                number=session.question_number,
                total=session.question_count,
            )
        )
        self.question_label.setText(
            QUIZ_QUESTION_TEMPLATE.format(number=session.question_number, prompt=question.prompt)
        )

        # Exclusive groups refuse to uncheck their last checked button.
        self.options_group.setExclusive(False)
        for button, option in zip(self._option_buttons, question.options):
            button.setChecked(False)
            button.setText(option)
        self.options_group.setExclusive(True)
        self.next_button.setEnabled(False)

    def _handle_option_toggled(self, _button: QRadioButton, _checked: bool) -> None:
        self.next_button.setEnabled(self.options_group.checkedId() >= 0)

    def _handle_next(self) -> None:
        session = self._session
        selected_index = self.options_group.checkedId()
        if session is None or selected_index < 0:
            return

        choice = session.current_question().options[selected_index]
        try:
            session.submit_answer(choice)
        except QuizGameError as exc:
            show_game_error(self, "Quiz Error", exc)
            return

        if session.is_complete():
            self.on_quiz_complete(session)
        else:
            self._load_question()

    def apply_font_size(self, font_size: int) -> None:
        for button in self._option_buttons:
            button.setStyleSheet(f"font-size: {font_size}pt;")
        self.next_button.setStyleSheet(f"font-size: {font_size}pt;")
