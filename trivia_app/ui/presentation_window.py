"""Full-screen Qt window that presents an event and acts as presentation host."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QEvent, Qt, Signal
from PySide6.QtGui import QCloseEvent, QKeyEvent, QMouseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.presentation_constants import (
    NAVIGATION_HINT,
    REVIEW_BUTTON_TEMPLATE,
    ROUND_BUTTON_TEMPLATE,
    SLIDE_COUNTER_TEMPLATE,
)
from trivia_app.constants.ui_constants import PRESENTATION_WINDOW_TITLE
from trivia_app.core.models import RoundInfo
from trivia_app.core.presentation_controller import command_for_key
from trivia_app.core.presentation_manager import PresentationManager
from trivia_app.core.presentation_state import PresentationUsageError
from trivia_app.core.slide_renderer import render_slide_html
from trivia_app.styling.styles import Styles
from trivia_app.ui.dialog_helpers import show_warning

logger = logging.getLogger(__name__)

_QT_KEY_NAMES: dict[int, str] = {
    Qt.Key_Right: "ArrowRight",
    Qt.Key_Space: "Space",
    Qt.Key_Return: "Enter",
    Qt.Key_Enter: "Enter",
    Qt.Key_Left: "ArrowLeft",
    Qt.Key_Escape: "Escape",
}


class PresentationWindow(QWidget):
    """Shows the current slide and turns input into presentation commands.

    Implements the ``PresentationHost`` protocol on top of Qt full screen.
    State changes may come from the audience server thread, so redraws and
    closing are routed through queued signals.
    """

    state_changed = Signal()
    leave_requested = Signal()
    presentation_closed = Signal()

    def __init__(
        self,
        manager: PresentationManager,
        slide_font_size: int = 28,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(PRESENTATION_WINDOW_TITLE)
        self.setFocusPolicy(Qt.StrongFocus)
        self._manager = manager
        self._slide_font_size = slide_font_size
        self._was_full_screen: bool = False
        self._closing: bool = False
        self.round_buttons: dict[int, QPushButton] = {}
        self.review_buttons: dict[int, QPushButton] = {}

        self._build_ui()
        self.state_changed.connect(self._refresh)
        self.leave_requested.connect(self._close_presentation)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        top_bar = QHBoxLayout()
        self.round_bar = QHBoxLayout()
        top_bar.addLayout(self.round_bar)
        top_bar.addStretch()
        self.counter_label = QLabel("", self)
        self.counter_label.setStyleSheet(Styles.get_muted_label_style())
        top_bar.addWidget(self.counter_label)
        self.exit_button = QPushButton("×", self)
        self.exit_button.setFocusPolicy(Qt.NoFocus)
        self.exit_button.setFixedSize(40, 40)
        self.exit_button.clicked.connect(lambda _checked=False: self._manager.exit_presentation())
        top_bar.addWidget(self.exit_button)
        layout.addLayout(top_bar)

        body = QHBoxLayout()
        self.slide_label = QLabel("", self)
        self.slide_label.setTextFormat(Qt.RichText)
        self.slide_label.setWordWrap(True)
        self.slide_label.setAlignment(Qt.AlignCenter)
        body.addWidget(self.slide_label, stretch=1)
        self.review_bar = QVBoxLayout()
        self.review_bar.addStretch()
        body.addLayout(self.review_bar)
        layout.addLayout(body, stretch=1)

        self.hint_label = QLabel(NAVIGATION_HINT, self)
        self.hint_label.setAlignment(Qt.AlignCenter)
        self.hint_label.setStyleSheet(Styles.get_muted_label_style())
        layout.addWidget(self.hint_label)

    # --- Session ---

    def start(self, event_id: str) -> None:
        """Start presenting an event. Raises ``EventNotFoundError``."""
        controller = self._manager.start_presentation(event_id, host=self)
        controller.add_listener(lambda _state: self.state_changed.emit())
        self._build_round_buttons(controller.deck.rounds)
        self._refresh()
        self.setFocus()

    def _build_round_buttons(self, rounds: tuple[RoundInfo, ...]) -> None:
        for info in rounds:
            round_button = QPushButton(ROUND_BUTTON_TEMPLATE.format(number=info.number), self)
            round_button.setFocusPolicy(Qt.NoFocus)
            round_button.setToolTip(info.title)
            round_button.clicked.connect(lambda _checked=False, n=info.number: self._jump_to_round(n))
            self.round_bar.addWidget(round_button)
            self.round_buttons[info.number] = round_button

            review_button = QPushButton(REVIEW_BUTTON_TEMPLATE.format(number=info.number), self)
            review_button.setFocusPolicy(Qt.NoFocus)
            # Reviewing needs at least one question slide
            review_button.setEnabled(info.question_count > 0)
            review_button.clicked.connect(lambda _checked=False, n=info.number: self._review_round(n))
            self.review_bar.insertWidget(self.review_bar.count() - 1, review_button)
            self.review_buttons[info.number] = review_button
        self.review_bar.addStretch()

    def _jump_to_round(self, round_number: int) -> None:
        try:
            self._manager.jump_to_round(round_number)
        except PresentationUsageError as exc:
            show_warning(self, "Round unavailable", str(exc))

    def _review_round(self, round_number: int) -> None:
        try:
            self._manager.review_round(round_number)
        except PresentationUsageError as exc:
            show_warning(self, "Review unavailable", str(exc))

    def _refresh(self) -> None:
        view = self._manager.get_current_view()
        if view is None:
            return
        self.slide_label.setText(
            render_slide_html(view.slide, view.answer_visible, view.in_review, self._slide_font_size)
        )
        self.counter_label.setText(
            SLIDE_COUNTER_TEMPLATE.format(current=view.state.current_slide + 1, total=view.slide_count)
        )
        reviewing = view.state.reviewing_round
        for number, button in self.round_buttons.items():
            active = view.slide.round_number == number and reviewing is None
            button.setStyleSheet(Styles.get_nav_button_style(active))
        for number, button in self.review_buttons.items():
            button.setStyleSheet(Styles.get_nav_button_style(reviewing == number, review=True))

    def _close_presentation(self) -> None:
        if self._closing:
            return
        self._closing = True
        self._manager.stop_presentation()
        self.presentation_closed.emit()
        self.close()

    # --- PresentationHost ---

    def request_exclusive_display(self) -> None:
        self.showFullScreen()

    def release_exclusive_display(self) -> None:
        self._was_full_screen = False
        self.showNormal()

    def is_exclusive_display_active(self) -> bool:
        return self.isFullScreen()

    def on_exclusive_display_ended(self, callback: Callable[[], None]) -> None:
        """Full screen ending is reported through the manager, which holds the lock.

        The manager's ``exit_presentation`` calls the same controller exit
        that ``callback`` would, so the bare callback is not kept.
        """

    def leave_presentation(self) -> None:
        self.leave_requested.emit()

    # --- Qt events ---

    def changeEvent(self, event: QEvent) -> None:  # noqa: N802 - Qt API
        if event.type() == QEvent.WindowStateChange:
            full_screen = self.isFullScreen()
            if self._was_full_screen and not full_screen:
                logger.info("Full screen ended outside the presentation")
                self._manager.exit_presentation()
            self._was_full_screen = full_screen
        super().changeEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:  # noqa: N802 - Qt API
        key_name = _QT_KEY_NAMES.get(event.key())
        command = command_for_key(key_name) if key_name else None
        if command is None:
            super().keyPressEvent(event)
            return
        event.accept()
        self._manager.handle_command(command)

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802 - Qt API
        if event.button() == Qt.LeftButton:
            self._manager.advance()
            event.accept()
            return
        super().mousePressEvent(event)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802 - Qt API
        if not self._closing:
            # Window closed by the window manager
            self._closing = True
            self._manager.exit_presentation()
            self._manager.stop_presentation()
            self.presentation_closed.emit()
        super().closeEvent(event)
