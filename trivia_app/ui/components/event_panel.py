"""Component for assembling events from saved rounds and starting them."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QDate, Qt
from PySide6.QtWidgets import (
    QDateEdit,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    EVENT_CREATE_BUTTON,
    EVENT_DELETE_BUTTON,
    EVENT_PRESENT_BUTTON,
    NO_EVENT_SELECTED_MESSAGE,
    PLACEHOLDER_EVENT_TITLE,
)
from trivia_app.core.services.trivia_repository import TriviaRepository
from trivia_app.core.slide_deck import format_event_date
from trivia_app.ui.dialog_helpers import confirm_delete, show_error, show_warning


class EventPanel(QWidget):
    """UI component listing events and building new ones from rounds."""

    def __init__(
        self,
        repository: TriviaRepository,
        on_present: Callable[[str], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.repository = repository
        self.on_present = on_present
        self._event_ids: list[str] = []

        self._build_ui()
        self.refresh()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        # Existing events
        events_column = QVBoxLayout()
        events_column.addWidget(QLabel("Events", self))
        self.event_list = QListWidget(self)
        self.event_list.itemDoubleClicked.connect(lambda _item: self._handle_present())
        events_column.addWidget(self.event_list)
        event_buttons = QHBoxLayout()
        self.present_button = QPushButton(EVENT_PRESENT_BUTTON, self)
        self.present_button.clicked.connect(self._handle_present)
        event_buttons.addWidget(self.present_button)
        self.delete_button = QPushButton(EVENT_DELETE_BUTTON, self)
        self.delete_button.clicked.connect(self._handle_delete)
        event_buttons.addWidget(self.delete_button)
        events_column.addLayout(event_buttons)
        layout.addLayout(events_column, stretch=1)

        # New event
        create_column = QVBoxLayout()
        self.title_input = QLineEdit(self)
        self.title_input.setPlaceholderText(PLACEHOLDER_EVENT_TITLE)
        create_column.addWidget(self.title_input)
        self.date_input = QDateEdit(QDate.currentDate(), self)
        self.date_input.setCalendarPopup(True)
        create_column.addWidget(self.date_input)
        create_column.addWidget(QLabel("Tick rounds in playing order (drag to reorder):", self))
        self.round_list = QListWidget(self)
        self.round_list.setDragDropMode(QListWidget.InternalMove)
        create_column.addWidget(self.round_list, stretch=1)
        self.create_button = QPushButton(EVENT_CREATE_BUTTON, self)
        self.create_button.clicked.connect(self._handle_create)
        create_column.addWidget(self.create_button)
        layout.addLayout(create_column, stretch=1)

    def refresh(self) -> None:
        self.event_list.clear()
        self._event_ids = []
        for event in self.repository.list_events():
            self.event_list.addItem(f"{event.title} · {format_event_date(event.date)} ({len(event.round_ids)} rounds)")
            self._event_ids.append(event.id)

        self.round_list.clear()
        for stored_round in self.repository.list_rounds():
            item = QListWidgetItem(f"{stored_round.title} ({len(stored_round.question_ids)} Q)")
            item.setData(Qt.UserRole, stored_round.id)
            item.setFlags(item.flags() | Qt.ItemIsUserCheckable)
            item.setCheckState(Qt.Unchecked)
            self.round_list.addItem(item)

    def set_repository(self, repository: TriviaRepository) -> None:
        self.repository = repository
        self.refresh()

    def _selected_event_id(self) -> str | None:
        row = self.event_list.currentRow()
        if 0 <= row < len(self._event_ids):
            return self._event_ids[row]
        return None

    def _handle_create(self) -> None:
        round_ids = [
            self.round_list.item(row).data(Qt.UserRole)
            for row in range(self.round_list.count())
            if self.round_list.item(row).checkState() == Qt.Checked
        ]
        if not round_ids:
            show_warning(self, "No rounds", "Tick at least one round for the event.")
            return
        try:
            self.repository.create_event(
                self.title_input.text(),
                self.date_input.date().toPython(),
                round_ids,
            )
        except (ValueError, LookupError) as exc:
            show_error(self, "Event not created", str(exc))
            return
        self.title_input.clear()
        self.refresh()

    def _handle_delete(self) -> None:
        event_id = self._selected_event_id()
        if event_id is None:
            show_warning(self, "No event", NO_EVENT_SELECTED_MESSAGE)
            return
        event = self.repository.get_event(event_id)
        if not confirm_delete(self, f'event "{event.title}"'):
            return
        self.repository.delete_event(event_id)
        self.refresh()

    def _handle_present(self) -> None:
        event_id = self._selected_event_id()
        if event_id is None:
            show_warning(self, "No event", NO_EVENT_SELECTED_MESSAGE)
            return
        self.on_present(event_id)

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for button in (self.present_button, self.delete_button, self.create_button):
            button.setStyleSheet(style)
