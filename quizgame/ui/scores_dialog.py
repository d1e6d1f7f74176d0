"""Dialog listing every recorded score."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QDialog,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
)

from quizgame.constants.ui_constants import (
    SCORES_COLUMNS,
    SCORES_EMPTY_MESSAGE,
    SCORES_WINDOW_TITLE,
)
from quizgame.core.models import LeaderboardRow


class ScoresDialog(QDialog):
    """Read-only table of username, level and score, sorted by username."""

    def __init__(self, rows: list[LeaderboardRow], parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle(SCORES_WINDOW_TITLE)
        self.setMinimumSize(400, 300)
        self._rows = rows

        self._build_ui()
        self._populate()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(10, 10, 10, 10)
        self.setLayout(layout)

        self.table = QTableWidget(0, len(SCORES_COLUMNS), self)
        self.table.setHorizontalHeaderLabels(list(SCORES_COLUMNS))
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setAlternatingRowColors(True)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        layout.addWidget(self.table, stretch=1)

        self.empty_label = QLabel(SCORES_EMPTY_MESSAGE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.empty_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.close_button = QPushButton("Close", self)
        self.close_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        button_row.addWidget(self.close_button)
        layout.addLayout(button_row)

    def _populate(self) -> None:
        self.table.setRowCount(len(self._rows))
        for row_index, row in enumerate(self._rows):
            score_item = QTableWidgetItem(str(row.score))
            score_item.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            self.table.setItem(row_index, 0, QTableWidgetItem(row.username))
            self.table.setItem(row_index, 1, QTableWidgetItem(row.difficulty))
            self.table.setItem(row_index, 2, score_item)
        self.empty_label.setVisible(not self._rows)
