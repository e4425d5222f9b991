"""Component for authoring a round as numbered text or question by question."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.ui_constants import (
    EDITOR_ADD_BUTTON,
    EDITOR_EXPORT_BUTTON,
    EDITOR_FORMAT_BUTTON,
    EDITOR_IMPORT_BUTTON,
    EDITOR_NEW_ROUND_BUTTON,
    EDITOR_PARSE_BUTTON,
    EDITOR_SAVE_BUTTON,
    PLACEHOLDER_ANSWER,
    PLACEHOLDER_QUESTION,
    PLACEHOLDER_ROUND_TEXT,
    PLACEHOLDER_ROUND_TITLE,
    PLACEHOLDER_ROUND_TOPIC,
    ROUND_SAVED_MESSAGE,
    TEXT_DIALOG_TITLE,
    TEXT_FILE_FILTER,
)
from trivia_app.core.question_text_parser import (
    QuestionImportError,
    load_drafts_from_file,
    save_drafts_to_file,
)
from trivia_app.core.services.round_editor import DraftValidationError, RoundEditor
from trivia_app.core.services.trivia_repository import TriviaRepository
from trivia_app.ui.dialog_helpers import (
    check_unsaved_changes,
    confirm_delete,
    confirm_replace_questions,
    show_error,
    show_warning,
)


class RoundEditorPanel(QWidget):
    """UI component for creating and editing one round at a time."""

    def __init__(
        self,
        repository: TriviaRepository,
        on_round_saved: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.repository = repository
        self.on_round_saved = on_round_saved
        self.editor = RoundEditor()
        self._selected_index: int = -1
        self._round_ids: list[str] = []
        self._loading_fields: bool = False

        self._build_ui()
        self._refresh_round_list()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        # Saved rounds
        rounds_column = QVBoxLayout()
        rounds_column.addWidget(QLabel("Saved rounds", self))
        self.round_list = QListWidget(self)
        self.round_list.itemDoubleClicked.connect(lambda _item: self._handle_open_round())
        rounds_column.addWidget(self.round_list)
        round_buttons = QHBoxLayout()
        self.new_round_button = QPushButton(EDITOR_NEW_ROUND_BUTTON, self)
        self.new_round_button.clicked.connect(self._handle_new_round)
        round_buttons.addWidget(self.new_round_button)
        self.delete_round_button = QPushButton("Delete", self)
        self.delete_round_button.clicked.connect(self._handle_delete_round)
        round_buttons.addWidget(self.delete_round_button)
        rounds_column.addLayout(round_buttons)
        layout.addLayout(rounds_column, stretch=1)

        # Editor
        editor_column = QVBoxLayout()
        meta_row = QHBoxLayout()
        self.title_input = QLineEdit(self)
        self.title_input.setPlaceholderText(PLACEHOLDER_ROUND_TITLE)
        self.title_input.textEdited.connect(lambda _text: self._on_meta_changed())
        meta_row.addWidget(self.title_input, stretch=2)
        self.topic_input = QLineEdit(self)
        self.topic_input.setPlaceholderText(PLACEHOLDER_ROUND_TOPIC)
        self.topic_input.textEdited.connect(lambda _text: self._on_meta_changed())
        meta_row.addWidget(self.topic_input, stretch=1)
        editor_column.addLayout(meta_row)

        self.text_input = QPlainTextEdit(self)
        self.text_input.setPlaceholderText(PLACEHOLDER_ROUND_TEXT)
        editor_column.addWidget(self.text_input, stretch=2)

        text_buttons = QHBoxLayout()
        self.parse_button = QPushButton(EDITOR_PARSE_BUTTON, self)
        self.parse_button.clicked.connect(self._handle_parse_text)
        text_buttons.addWidget(self.parse_button)
        self.format_button = QPushButton(EDITOR_FORMAT_BUTTON, self)
        self.format_button.clicked.connect(self._handle_format_text)
        text_buttons.addWidget(self.format_button)
        self.import_button = QPushButton(EDITOR_IMPORT_BUTTON, self)
        self.import_button.clicked.connect(self._handle_import_text)
        text_buttons.addWidget(self.import_button)
        self.export_button = QPushButton(EDITOR_EXPORT_BUTTON, self)
        self.export_button.clicked.connect(self._handle_export_text)
        text_buttons.addWidget(self.export_button)
        editor_column.addLayout(text_buttons)

        self.question_list = QListWidget(self)
        self.question_list.currentRowChanged.connect(self._handle_question_selected)
        editor_column.addWidget(self.question_list, stretch=1)

        question_buttons = QHBoxLayout()
        self.add_button = QPushButton(EDITOR_ADD_BUTTON, self)
        self.add_button.clicked.connect(self._handle_add_question)
        question_buttons.addWidget(self.add_button)
        self.up_button = QPushButton("↑", self)
        self.up_button.clicked.connect(lambda: self._handle_move_question("up"))
        question_buttons.addWidget(self.up_button)
        self.down_button = QPushButton("↓", self)
        self.down_button.clicked.connect(lambda: self._handle_move_question("down"))
        question_buttons.addWidget(self.down_button)
        self.remove_button = QPushButton("×", self)
        self.remove_button.clicked.connect(self._handle_remove_question)
        question_buttons.addWidget(self.remove_button)
        editor_column.addLayout(question_buttons)

        self.question_input = QPlainTextEdit(self)
        self.question_input.setPlaceholderText(PLACEHOLDER_QUESTION)
        self.question_input.setMaximumHeight(90)
        self.question_input.textChanged.connect(self._on_question_edited)
        editor_column.addWidget(self.question_input)
        self.answer_input = QLineEdit(self)
        self.answer_input.setPlaceholderText(PLACEHOLDER_ANSWER)
        self.answer_input.textEdited.connect(self._on_answer_edited)
        editor_column.addWidget(self.answer_input)

        save_row = QHBoxLayout()
        self.status_label = QLabel("", self)
        save_row.addWidget(self.status_label, stretch=1)
        self.save_button = QPushButton(EDITOR_SAVE_BUTTON, self)
        self.save_button.clicked.connect(self._handle_save_round)
        save_row.addWidget(self.save_button)
        editor_column.addLayout(save_row)

        layout.addLayout(editor_column, stretch=3)

    # --- Round list ---

    def _refresh_round_list(self) -> None:
        self.round_list.clear()
        self._round_ids = []
        for stored_round in self.repository.list_rounds():
            self.round_list.addItem(f"{stored_round.title} ({len(stored_round.question_ids)} Q)")
            self._round_ids.append(stored_round.id)

    def _selected_round_id(self) -> str | None:
        row = self.round_list.currentRow()
        if 0 <= row < len(self._round_ids):
            return self._round_ids[row]
        return None

    def _handle_new_round(self) -> None:
        if not self.check_unsaved_changes():
            return
        self._load_editor(RoundEditor())
        self.status_label.setText("Ready to create a new round.")

    def _handle_open_round(self) -> None:
        round_id = self._selected_round_id()
        if round_id is None or not self.check_unsaved_changes():
            return
        self._load_editor(RoundEditor.for_existing_round(self.repository, round_id))
        self.status_label.setText(f"Editing {self.editor.title!r}.")

    def _handle_delete_round(self) -> None:
        round_id = self._selected_round_id()
        if round_id is None:
            return
        stored_round = self.repository.get_round(round_id)
        if not confirm_delete(self, f'round "{stored_round.title}"'):
            return
        self.repository.delete_round(round_id)
        if self.editor.round_id == round_id:
            self._load_editor(RoundEditor())
        self._refresh_round_list()
        self.on_round_saved()

    # --- Text ---

    def _handle_parse_text(self) -> None:
        text = self.text_input.toPlainText()
        if self.editor.get_question_count() and not confirm_replace_questions(self):
            return
        count = self.editor.load_text(text)
        if count == 0:
            show_warning(self, "No questions found", "Start each question with a number, e.g. '1. Question'.")
        self._refresh_question_list()
        self.status_label.setText(f"Parsed {count} questions.")

    def _handle_format_text(self) -> None:
        self.text_input.setPlainText(self.editor.to_text())

    def _handle_import_text(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(self, TEXT_DIALOG_TITLE, str(Path.home()), TEXT_FILE_FILTER)
        if not file_path:
            return
        try:
            imported = load_drafts_from_file(Path(file_path))
        except (OSError, UnicodeDecodeError, QuestionImportError) as exc:
            show_error(self, "Import failed", str(exc))
            return
        self.editor.load_drafts(imported.drafts)
        self.text_input.setPlainText(self.editor.to_text())
        self._refresh_question_list()
        self.status_label.setText(f"Imported {len(imported.drafts)} questions.")

    def _handle_export_text(self) -> None:
        default_path = Path.cwd() / f"{self.editor.title.strip() or 'round'}.txt"
        file_path, _ = QFileDialog.getSaveFileName(self, TEXT_DIALOG_TITLE, str(default_path), TEXT_FILE_FILTER)
        if not file_path:
            return
        try:
            save_drafts_to_file(Path(file_path), self.editor.get_drafts())
        except (OSError, ValueError) as exc:
            show_error(self, "Export failed", str(exc))
            return
        self.status_label.setText(f"Exported to {file_path}.")

    # --- Questions ---

    def _refresh_question_list(self, select: int | None = None) -> None:
        self._loading_fields = True
        self.question_list.clear()
        for number, draft in enumerate(self.editor.get_drafts(), start=1):
            first_line = draft.text.splitlines()[0] if draft.text else "(no text)"
            self.question_list.addItem(f"Q{number}. {first_line} · {draft.answer or '(no answer)'}")
        self._loading_fields = False
        if select is not None and 0 <= select < self.question_list.count():
            self.question_list.setCurrentRow(select)
        else:
            self._handle_question_selected(-1)

    def _handle_question_selected(self, row: int) -> None:
        if self._loading_fields:
            return
        self._selected_index = row
        self._loading_fields = True
        drafts = self.editor.get_drafts()
        if 0 <= row < len(drafts):
            self.question_input.setPlainText(drafts[row].text)
            self.answer_input.setText(drafts[row].answer)
        else:
            self.question_input.clear()
            self.answer_input.clear()
        self._loading_fields = False

    def _handle_add_question(self) -> None:
        self.editor.add_question()
        self._refresh_question_list(select=self.editor.get_question_count() - 1)

    def _handle_move_question(self, direction: str) -> None:
        if self._selected_index < 0:
            return
        new_index = self.editor.move_question(self._selected_index, direction)
        self._refresh_question_list(select=new_index)

    def _handle_remove_question(self) -> None:
        if self._selected_index < 0:
            return
        self.editor.remove_question(self._selected_index)
        self._refresh_question_list(select=min(self._selected_index, self.editor.get_question_count() - 1))

    def _on_question_edited(self) -> None:
        if self._loading_fields or self._selected_index < 0:
            return
        self.editor.update_question(self._selected_index, "text", self.question_input.toPlainText())
        self._update_selected_item()

    def _on_answer_edited(self, value: str) -> None:
        if self._loading_fields or self._selected_index < 0:
            return
        self.editor.update_question(self._selected_index, "answer", value)
        self._update_selected_item()

    def _update_selected_item(self) -> None:
        draft = self.editor.get_drafts()[self._selected_index]
        first_line = draft.text.splitlines()[0] if draft.text else "(no text)"
        item = self.question_list.item(self._selected_index)
        if item is not None:
            item.setText(f"Q{self._selected_index + 1}. {first_line} · {draft.answer or '(no answer)'}")

    def _on_meta_changed(self) -> None:
        self.editor.set_details(self.title_input.text(), self.topic_input.text())

    # --- Save ---

    def _handle_save_round(self) -> None:
        self._on_meta_changed()
        try:
            self.editor.save(self.repository)
        except DraftValidationError as exc:
            show_warning(self, "Round incomplete", str(exc))
            return
        self.status_label.setText(ROUND_SAVED_MESSAGE)
        self._refresh_round_list()
        self.on_round_saved()

    def check_unsaved_changes(self) -> bool:
        """Check if there are unsaved changes and prompt user. Returns True if ok to proceed."""
        if not self.editor.has_unsaved_changes():
            return True

        result = check_unsaved_changes(self)

        if result is True:  # Save
            self._handle_save_round()
            return not self.editor.has_unsaved_changes()
        elif result is False:  # Discard
            return True
        else:  # Cancel (None)
            return False

    def _load_editor(self, editor: RoundEditor) -> None:
        self.editor = editor
        self._loading_fields = True
        self.title_input.setText(editor.title)
        self.topic_input.setText(editor.topic)
        self.text_input.setPlainText(editor.to_text())
        self._loading_fields = False
        self._refresh_question_list()

    def reload(self) -> None:
        """Refresh after the repository was replaced or changed elsewhere."""
        self._refresh_round_list()
        self._load_editor(RoundEditor())

    def set_repository(self, repository: TriviaRepository) -> None:
        self.repository = repository
        self.reload()

    def apply_font_size(self, font_size: int) -> None:
        style = f"font-size: {font_size}pt;"
        for button in (
            self.new_round_button,
            self.delete_round_button,
            self.parse_button,
            self.format_button,
            self.import_button,
            self.export_button,
            self.add_button,
            self.save_button,
        ):
            button.setStyleSheet(style)
