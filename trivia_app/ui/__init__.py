"""Qt UI components for the trivia host application."""

from .dialog_helpers import (
    check_unsaved_changes,
    confirm_delete,
    confirm_replace_questions,
    show_error,
    show_info,
    show_warning,
)
from .main_window import MainWindow
from .presentation_window import PresentationWindow

__all__ = [
    "MainWindow",
    "PresentationWindow",
    "check_unsaved_changes",
    "confirm_delete",
    "confirm_replace_questions",
    "show_error",
    "show_info",
    "show_warning",
]
