"""Component showing the final score of a finished quiz."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quizgame.constants.ui_constants import (
    RESULT_BACK_BUTTON,
    RESULT_DETAIL_TEMPLATE,
    RESULT_NOT_SAVED_MESSAGE,
    RESULT_TEMPLATE,
)
from quizgame.core.models import ScoreRecord
from quizgame.core.services.quiz_session import QuizSession
from quizgame.styling.styles import Styles


class ResultPanel(QWidget):
    def __init__(self, on_back: callable, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.on_back = on_back
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(10)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.score_label = QLabel("", self)
        self.score_label.setAlignment(Qt.AlignCenter)
        self.score_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.score_label)

        self.detail_label = QLabel("", self)
        self.detail_label.setAlignment(Qt.AlignCenter)
        self.detail_label.setStyleSheet(Styles.get_secondary_label_style())
        layout.addWidget(self.detail_label)

        self.saved_label = QLabel("", self)
        self.saved_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.saved_label)

        self.back_button = QPushButton(RESULT_BACK_BUTTON, self)
        self.back_button.clicked.connect(self.on_back)
        layout.addWidget(self.back_button)

    def show_result(
        self,
        session: QuizSession,
        record: ScoreRecord | None,
        *,
        not_saved_message: str = RESULT_NOT_SAVED_MESSAGE,
    ) -> None:
        score = session.final_score()
        self.score_label.setText(RESULT_TEMPLATE.format(score=score))
        self.detail_label.setText(
            RESULT_DETAIL_TEMPLATE.format(
                score=score,
                total=session.question_count,
                difficulty=session.difficulty.value,
            )
        )
        self.saved_label.setText("" if record is not None else not_saved_message)
