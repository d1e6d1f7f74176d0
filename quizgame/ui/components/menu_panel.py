"""Component for the difficulty selection menu."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quizgame.constants.ui_constants import (
    MENU_ABOUT_BUTTON,
    MENU_HEADING,
    MENU_HELP_BUTTON,
    MENU_LOGOUT_BUTTON,
    MENU_SHOW_SCORES_BUTTON,
    MENU_WELCOME_TEMPLATE,
)
from quizgame.core.models import Difficulty
from quizgame.core.question_bank import all_difficulties
from quizgame.styling.styles import Styles


class MenuPanel(QWidget):
    """Main menu shown after login."""

    def __init__(
        self,
        on_start_quiz: callable,
        on_show_scores: callable,
        on_logout: callable,
        on_about: callable,
        on_help: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_start_quiz = on_start_quiz
        self.on_show_scores = on_show_scores
        self.on_logout = on_logout
        self.on_about = on_about
        self.on_help = on_help
        self.difficulty_buttons: dict[Difficulty, QPushButton] = {}

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(15)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.welcome_label = QLabel("", self)
        self.welcome_label.setAlignment(Qt.AlignCenter)
        self.welcome_label.setStyleSheet(Styles.get_secondary_label_style())
        layout.addWidget(self.welcome_label)

        self.heading_label = QLabel(MENU_HEADING, self)
        self.heading_label.setAlignment(Qt.AlignCenter)
        self.heading_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.heading_label)

        for difficulty in all_difficulties():
            button = QPushButton(difficulty.value, self)
            button.setStyleSheet(Styles.get_difficulty_button_style(difficulty.value))
            button.clicked.connect(lambda _checked=False, d=difficulty: self.on_start_quiz(d))
            layout.addWidget(button)
            self.difficulty_buttons[difficulty] = button

        self.scores_button = QPushButton(MENU_SHOW_SCORES_BUTTON, self)
        self.scores_button.clicked.connect(self.on_show_scores)
        layout.addWidget(self.scores_button)

        self.about_button = QPushButton(MENU_ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self.on_about)
        layout.addWidget(self.about_button)

        self.help_button = QPushButton(MENU_HELP_BUTTON, self)
        self.help_button.clicked.connect(self.on_help)
        layout.addWidget(self.help_button)

        self.logout_button = QPushButton(MENU_LOGOUT_BUTTON, self)
        self.logout_button.clicked.connect(self.on_logout)
        layout.addWidget(self.logout_button)

    def set_player_name(self, username: str | None) -> None:
        self.welcome_label.setText(MENU_WELCOME_TEMPLATE.format(username=username) if username else "")
