"""Qt main window switching between round editing and event management."""

from __future__ import annotations

import logging
from enum import Enum, auto
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from trivia_app.constants.ui_constants import (
    AUDIENCE_URL_PLACEHOLDER,
    DEFAULT_LIBRARY_FILE,
    LIBRARY_DIALOG_TITLE,
    LIBRARY_FILE_FILTER,
    MODE_BUTTON_EVENTS,
    MODE_BUTTON_OPEN_LIBRARY,
    MODE_BUTTON_ROUNDS,
    MODE_BUTTON_SAVE_LIBRARY,
    WINDOW_TITLE,
)
from trivia_app.core.presentation_manager import PresentationManager
from trivia_app.core.services.trivia_repository import (
    EventNotFoundError,
    LibraryFormatError,
    TriviaRepository,
)
from trivia_app.styling.color_palette import Theme
from trivia_app.styling.styles import Styles
from trivia_app.ui.components.event_panel import EventPanel
from trivia_app.ui.components.round_editor_panel import RoundEditorPanel
from trivia_app.ui.dialog_helpers import show_error, show_info, show_warning
from trivia_app.ui.presentation_window import PresentationWindow
from trivia_app.ui.settings_dialog import SettingsDialog

logger = logging.getLogger(__name__)


class MainMode(Enum):
    """High-level UI mode for the host console."""

    ROUNDS = auto()
    EVENTS = auto()


class MainWindow(QMainWindow):
    """Main Qt window holding the round editor, the event list and the presenter."""

    def __init__(self, manager: PresentationManager, audience_url: str | None = None) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.manager = manager
        self.audience_url = audience_url or AUDIENCE_URL_PLACEHOLDER
        self.presentation_window: PresentationWindow | None = None

        self._mode = MainMode.ROUNDS
        self._ui_font_size: int = 10
        self._slide_font_size: int = 28
        self._theme: Theme = Theme.LIGHT
        self._library_path: Path | None = None

        self._build_ui()
        self._apply_styles()
        self._auto_load_default_library()

    @property
    def repository(self) -> TriviaRepository:
        return self.manager.repository

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_mode_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.round_panel = RoundEditorPanel(self.repository, on_round_saved=self._handle_rounds_changed, parent=self)
        self.event_panel = EventPanel(self.repository, on_present=self._start_presentation, parent=self)
        self.mode_stack.addWidget(self.round_panel)
        self.mode_stack.addWidget(self.event_panel)
        root_layout.addWidget(self.mode_stack)

        self.audience_label = QLabel(f"Audience view: {self.audience_url}", self)
        root_layout.addWidget(self.audience_label)

        self._set_mode(MainMode.ROUNDS)

    def _build_mode_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()

        self.rounds_mode_button = QPushButton(MODE_BUTTON_ROUNDS, self)
        self.rounds_mode_button.setCheckable(True)
        self.rounds_mode_button.clicked.connect(lambda _checked=False: self._set_mode(MainMode.ROUNDS))
        button_row.addWidget(self.rounds_mode_button)

        self.events_mode_button = QPushButton(MODE_BUTTON_EVENTS, self)
        self.events_mode_button.setCheckable(True)
        self.events_mode_button.clicked.connect(self._handle_events_mode)
        button_row.addWidget(self.events_mode_button)

        self.open_library_button = QPushButton(MODE_BUTTON_OPEN_LIBRARY, self)
        self.open_library_button.clicked.connect(self._handle_open_library)
        button_row.addWidget(self.open_library_button)

        self.save_library_button = QPushButton(MODE_BUTTON_SAVE_LIBRARY, self)
        self.save_library_button.clicked.connect(self._handle_save_library)
        button_row.addWidget(self.save_library_button)

        self.about_button = QPushButton(f"About {APP_NAME}", self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton("Settings", self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _set_mode(self, mode: MainMode) -> None:
        self._mode = mode
        self.rounds_mode_button.setChecked(mode == MainMode.ROUNDS)
        self.events_mode_button.setChecked(mode == MainMode.EVENTS)
        index_map = {
            MainMode.ROUNDS: 0,
            MainMode.EVENTS: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _handle_events_mode(self) -> None:
        if not self.round_panel.check_unsaved_changes():
            self.events_mode_button.setChecked(False)
            return
        self.event_panel.refresh()
        self._set_mode(MainMode.EVENTS)

    def _handle_rounds_changed(self) -> None:
        self.event_panel.refresh()

    # --- Presentation ---

    def _start_presentation(self, event_id: str) -> None:
        if self.manager.is_presenting():
            show_warning(self, "Already presenting", "Finish the running presentation first.")
            return

        window = PresentationWindow(self.manager, slide_font_size=self._slide_font_size)
        try:
            window.start(event_id)
        except EventNotFoundError as exc:
            window.deleteLater()
            show_error(self, "Event unavailable", str(exc))
            self.event_panel.refresh()
            return

        window.presentation_closed.connect(self._handle_presentation_closed)
        self.presentation_window = window
        logger.info("Presentation window opened for event %s", event_id)

    def _handle_presentation_closed(self) -> None:
        self.presentation_window = None
        self.activateWindow()

    # --- Library ---

    def _handle_open_library(self) -> None:
        if self.manager.is_presenting():
            show_warning(self, "Presentation running", "Close the presentation before opening a library.")
            return
        if not self.round_panel.check_unsaved_changes():
            return

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            LIBRARY_DIALOG_TITLE,
            str(Path.home()),
            LIBRARY_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            repository = TriviaRepository.load_library(Path(file_path))
        except (OSError, LibraryFormatError) as exc:
            show_error(self, "Open failed", str(exc))
            return

        self._install_repository(repository, Path(file_path))
        show_info(
            self,
            "Library opened",
            f"Loaded {len(repository.list_rounds())} rounds and {len(repository.list_events())} events.",
        )

    def _handle_save_library(self) -> None:
        if not self.round_panel.check_unsaved_changes():
            return

        default_path = self._library_path or (Path.cwd() / DEFAULT_LIBRARY_FILE)
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            LIBRARY_DIALOG_TITLE,
            str(default_path),
            LIBRARY_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            self.repository.save_library(Path(file_path))
        except OSError as exc:
            show_error(self, "Save failed", str(exc))
            return

        self._library_path = Path(file_path)
        show_info(self, "Library saved", f"Library saved to {file_path}.")

    def _install_repository(self, repository: TriviaRepository, path: Path | None) -> None:
        self.manager.set_repository(repository)
        self._library_path = path
        self.round_panel.set_repository(repository)
        self.event_panel.set_repository(repository)

    def _auto_load_default_library(self) -> None:
        default_path = Path(DEFAULT_LIBRARY_FILE)
        if not default_path.exists():
            return

        try:
            repository = TriviaRepository.load_library(default_path)
        except (OSError, LibraryFormatError) as exc:
            logger.warning("Could not auto-load %s: %s", default_path, exc)
            return

        self._install_repository(repository, default_path)
        logger.info("Auto-loaded %s", default_path)

    # --- Misc ---

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(self, self._ui_font_size, self._slide_font_size, self._theme)
        if dialog.exec():
            self._ui_font_size = dialog.get_ui_font_size()
            self._slide_font_size = dialog.get_slide_font_size()
            self._theme = dialog.get_theme()
            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.audience_label.setStyleSheet(Styles.get_muted_label_style(theme=self._theme))

        ui_style = f"font-size: {self._ui_font_size}pt;"
        buttons = [
            self.rounds_mode_button,
            self.events_mode_button,
            self.open_library_button,
            self.save_library_button,
            self.about_button,
            self.help_button,
            self.settings_button,
        ]
        for button in buttons:
            button.setStyleSheet(ui_style)

        self.round_panel.apply_font_size(self._ui_font_size)
        self.event_panel.apply_font_size(self._ui_font_size)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt API
        if not self.round_panel.check_unsaved_changes():
            event.ignore()
            return
        if self.presentation_window is not None:
            self.presentation_window.close()
        super().closeEvent(event)
