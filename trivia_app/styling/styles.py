"""Centralized Qt stylesheets for the application."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QPushButton {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BACKGROUND_HOVER.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.ACCENT.get(theme)};
                color: {ColorPalette.ACCENT_TEXT.get(theme)};
                border: 1px solid {ColorPalette.ACCENT.get(theme)};
            }}
            QLineEdit, QPlainTextEdit, QDateEdit, QListWidget {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
        """

    @staticmethod
    def get_nav_button_style(active: bool, review: bool = False, theme: Theme = Theme.LIGHT) -> str:
        """Style for the presentation's "Round n" and "Review n" buttons."""
        if not active:
            return (
                f"QPushButton {{ background: transparent; color: {ColorPalette.TEXT_MUTED.get(theme)};"
                f" border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)}; border-radius: 6px; padding: 4px 10px; }}"
                f" QPushButton:hover {{ background: {ColorPalette.BACKGROUND_HOVER.get(theme)};"
                f" color: {ColorPalette.TEXT_PRIMARY.get(theme)}; }}"
            )
        background = ColorPalette.REVIEW if review else ColorPalette.ACCENT
        text = ColorPalette.REVIEW_TEXT if review else ColorPalette.ACCENT_TEXT
        return (
            f"QPushButton {{ background: {background.get(theme)}; color: {text.get(theme)};"
            f" border: 1px solid {background.get(theme)}; border-radius: 6px; padding: 4px 10px; }}"
        )

    @staticmethod
    def get_muted_label_style(font_size: int = 10, theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_MUTED.get(theme)}; font-size: {font_size}pt;"
