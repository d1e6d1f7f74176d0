"""Application entry point for QuizGame."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from quizgame.constants.storage_constants import DEFAULT_DATABASE_PATH
from quizgame.core.database import Database
from quizgame.core.errors import StorageUnavailable
from quizgame.core.game_manager import GameManager
from quizgame.ui.dialog_helpers import show_error
from quizgame.ui.game_main_window import GameMainWindow
from quizgame.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, open the database, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting QuizGame")

    app = QApplication(sys.argv)
    try:
        database = Database(DEFAULT_DATABASE_PATH)
    except StorageUnavailable as exc:
        logger.error("Database unavailable: %s", exc)
        show_error(None, "DB Setup Error", str(exc))
        sys.exit(1)

    game_manager = GameManager(database)
    window = GameMainWindow(game_manager=game_manager)
    window.resize(400, 450)
    window.show()
    exit_code = app.exec()
    database.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
