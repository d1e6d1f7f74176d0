"""Qt main window switching between login, menu, quiz and result screens."""

from __future__ import annotations

from enum import Enum, auto
import logging

from PySide6.QtWidgets import (
    QMainWindow,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quizgame.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quizgame.constants.ui_constants import (
    LOGIN_TITLE,
    RESULT_NOT_SAVED_MESSAGE,
    RESULT_SAVE_FAILED_MESSAGE,
    WINDOW_TITLE,
)
from quizgame.core.errors import QuizGameError, StorageUnavailable
from quizgame.core.game_manager import GameManager, PlayerContext
from quizgame.core.models import Difficulty
from quizgame.core.services.quiz_session import QuizSession
from quizgame.ui.components.login_panel import LoginPanel
from quizgame.ui.components.menu_panel import MenuPanel
from quizgame.ui.components.quiz_panel import QuizPanel
from quizgame.ui.components.result_panel import ResultPanel
from quizgame.ui.dialog_helpers import confirm_logout, show_error, show_game_error, show_info
from quizgame.ui.scores_dialog import ScoresDialog
from quizgame.styling.styles import Styles

logger = logging.getLogger(__name__)


class GameScreen(Enum):
    """Screen currently shown in the main window."""

    LOGIN = auto()
    MENU = auto()
    QUIZ = auto()
    RESULT = auto()


class GameMainWindow(QMainWindow):
    """Main Qt window orchestrating the game screens."""

    def __init__(self, game_manager: GameManager) -> None:
        super().__init__()
        self.game_manager = game_manager
        self._screen = GameScreen.LOGIN
        self._game_font_size: int = 12

        self._build_ui()
        self._apply_styles()
        self._set_screen(GameScreen.LOGIN)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self.screen_stack = QStackedWidget(self)

        self.login_panel = LoginPanel(self.game_manager, on_logged_in=self._handle_logged_in, parent=self)
        self.menu_panel = MenuPanel(
            on_start_quiz=self._handle_start_quiz,
            on_show_scores=self._handle_show_scores,
            on_logout=self._handle_logout,
            on_about=self._handle_about,
            on_help=self._handle_help,
            parent=self,
        )
        self.quiz_panel = QuizPanel(on_quiz_complete=self._handle_quiz_complete, parent=self)
        self.result_panel = ResultPanel(on_back=self._handle_back_to_menu, parent=self)

        self.screen_stack.addWidget(self.login_panel)
        self.screen_stack.addWidget(self.menu_panel)
        self.screen_stack.addWidget(self.quiz_panel)
        self.screen_stack.addWidget(self.result_panel)

        root_layout.addWidget(self.screen_stack)

    def _set_screen(self, screen: GameScreen) -> None:
        self._screen = screen
        index_map = {
            GameScreen.LOGIN: 0,
            GameScreen.MENU: 1,
            GameScreen.QUIZ: 2,
            GameScreen.RESULT: 3,
        }
        self.screen_stack.setCurrentIndex(index_map[screen])
        self.setWindowTitle(LOGIN_TITLE if screen == GameScreen.LOGIN else WINDOW_TITLE)

    def _handle_logged_in(self, player: PlayerContext) -> None:
        self.menu_panel.set_player_name(player.username)
        self._set_screen(GameScreen.MENU)

    def _handle_start_quiz(self, difficulty: Difficulty) -> None:
        try:
            session = self.game_manager.start_quiz(difficulty)
        except QuizGameError as exc:
            show_game_error(self, "Quiz Error", exc)
            return
        self.quiz_panel.start_session(session)
        self._set_screen(GameScreen.QUIZ)

    def _handle_quiz_complete(self, session: QuizSession) -> None:
        record = None
        not_saved_message = RESULT_NOT_SAVED_MESSAGE
        try:
            record = self.game_manager.finish_quiz()
        except StorageUnavailable as exc:
            show_error(self, "DB Error", str(exc))
            not_saved_message = RESULT_SAVE_FAILED_MESSAGE
        except QuizGameError as exc:
            show_game_error(self, "Quiz Error", exc)
            self._set_screen(GameScreen.MENU)
            return
        self.result_panel.show_result(session, record, not_saved_message=not_saved_message)
        self._set_screen(GameScreen.RESULT)

    def _handle_back_to_menu(self) -> None:
        self._set_screen(GameScreen.MENU)

    def _handle_show_scores(self) -> None:
        try:
            rows = self.game_manager.leaderboard()
        except StorageUnavailable as exc:
            show_error(self, "DB Error", str(exc))
            return
        dialog = ScoresDialog(rows, self)
        dialog.setStyleSheet(Styles.get_main_window_style())
        dialog.exec()

    def _handle_logout(self) -> None:
        player = self.game_manager.current_player
        if player is not None and not confirm_logout(self, player.username):
            return
        self.game_manager.logout()
        self.menu_panel.set_player_name(None)
        self.login_panel.reset_state()
        self._set_screen(GameScreen.LOGIN)

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style())
        self.login_panel.apply_font_size(self._game_font_size)
        self.quiz_panel.apply_font_size(self._game_font_size)
