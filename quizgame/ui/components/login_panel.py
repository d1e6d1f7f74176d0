"""Component for the login and registration screen."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quizgame.constants.ui_constants import (
    DUPLICATE_USERNAME_MESSAGE,
    EMPTY_FIELDS_MESSAGE,
    LOGIN_BUTTON,
    LOGIN_FAILED_MESSAGE,
    LOGIN_TITLE,
    PASSWORD_PLACEHOLDER,
    REGISTER_BUTTON,
    REGISTRATION_SUCCESS_MESSAGE,
    USERNAME_PLACEHOLDER,
)
from quizgame.core.errors import (
    AuthFailure,
    DuplicateUsername,
    StorageUnavailable,
    ValidationError,
)
from quizgame.core.game_manager import GameManager, PlayerContext
from quizgame.ui.dialog_helpers import show_error, show_info, show_warning
from quizgame.styling.styles import Styles


class LoginPanel(QWidget):
    """Username/password form with Login and Register actions."""

    def __init__(
        self,
        game_manager: GameManager,
        on_logged_in: callable,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.game_manager = game_manager
        self.on_logged_in = on_logged_in

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(10)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setAlignment(Qt.AlignCenter)
        self.setLayout(layout)

        self.title_label = QLabel(LOGIN_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet(Styles.get_large_label_style())
        layout.addWidget(self.title_label)

        self.username_field = QLineEdit(self)
        self.username_field.setPlaceholderText(USERNAME_PLACEHOLDER)
        layout.addWidget(self.username_field)

        self.password_field = QLineEdit(self)
        self.password_field.setPlaceholderText(PASSWORD_PLACEHOLDER)
        self.password_field.setEchoMode(QLineEdit.Password)
        self.password_field.returnPressed.connect(self._handle_login)
        layout.addWidget(self.password_field)

        self.login_button = QPushButton(LOGIN_BUTTON, self)
        self.login_button.setDefault(True)
        self.login_button.clicked.connect(self._handle_login)
        layout.addWidget(self.login_button)

        self.register_button = QPushButton(REGISTER_BUTTON, self)
        self.register_button.clicked.connect(self._handle_register)
        layout.addWidget(self.register_button)

    def _credentials(self) -> tuple[str, str]:
        return self.username_field.text(), self.password_field.text()

    def _handle_login(self) -> None:
        username, password = self._credentials()
        try:
            player: PlayerContext = self.game_manager.login(username, password)
        except ValidationError:
            show_warning(self, "Input Error", EMPTY_FIELDS_MESSAGE)
            return
        except AuthFailure:
            show_warning(self, "Login Failed", LOGIN_FAILED_MESSAGE)
            return
        except StorageUnavailable as exc:
            show_error(self, "Login Error", str(exc))
            return

        self.reset_state()
        self.on_logged_in(player)

    def _handle_register(self) -> None:
        username, password = self._credentials()
        try:
            self.game_manager.register(username, password)
        except ValidationError:
            show_warning(self, "Input Error", EMPTY_FIELDS_MESSAGE)
            return
        except DuplicateUsername:
            show_warning(self, "Registration Error", DUPLICATE_USERNAME_MESSAGE)
            return
        except StorageUnavailable as exc:
            show_error(self, "Registration Error", str(exc))
            return

        self.password_field.clear()
        show_info(self, "Success", REGISTRATION_SUCCESS_MESSAGE)

    def reset_state(self) -> None:
        self.username_field.clear()
        self.password_field.clear()
        self.username_field.setFocus()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for widget in (self.username_field, self.password_field, self.login_button, self.register_button):
            widget.setStyleSheet(style)
