"""Settings dialog for configuring TriviaQt preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSpinBox,
    QPushButton,
    QGroupBox,
    QComboBox,
)

from trivia_app.styling.color_palette import Theme


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        ui_font_size: int = 10,
        slide_font_size: int = 28,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._ui_font_size = ui_font_size
        self._slide_font_size = slide_font_size
        self._theme = theme

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        font_group = QGroupBox("Font Sizes")
        font_layout = QVBoxLayout()
        font_group.setLayout(font_layout)

        # UI Font Size
        ui_font_row = QHBoxLayout()
        ui_font_label = QLabel("UI Font Size (buttons, lists):")
        ui_font_label.setToolTip("Font size for buttons and controls in the editor")
        self.ui_font_spinbox = QSpinBox()
        self.ui_font_spinbox.setRange(8, 24)
        self.ui_font_spinbox.setValue(self._ui_font_size)
        self.ui_font_spinbox.setSuffix(" pt")
        ui_font_row.addWidget(ui_font_label)
        ui_font_row.addStretch()
        ui_font_row.addWidget(self.ui_font_spinbox)
        font_layout.addLayout(ui_font_row)

        # Slide Font Size
        slide_font_row = QHBoxLayout()
        slide_font_label = QLabel("Slide Font Size (presentation):")
        slide_font_label.setToolTip("Base font size for questions and answers in the presentation window")
        self.slide_font_spinbox = QSpinBox()
        self.slide_font_spinbox.setRange(14, 72)
        self.slide_font_spinbox.setValue(self._slide_font_size)
        self.slide_font_spinbox.setSuffix(" pt")
        slide_font_row.addWidget(slide_font_label)
        slide_font_row.addStretch()
        slide_font_row.addWidget(self.slide_font_spinbox)
        font_layout.addLayout(slide_font_row)

        layout.addWidget(font_group)

        appearance_group = QGroupBox("Appearance")
        appearance_layout = QHBoxLayout()
        appearance_group.setLayout(appearance_layout)
        appearance_layout.addWidget(QLabel("Theme:"))
        appearance_layout.addStretch()
        self.theme_combo = QComboBox()
        for theme in Theme:
            self.theme_combo.addItem(theme.name.title(), theme.name)
        self.theme_combo.setCurrentIndex(self.theme_combo.findData(self._theme.name))
        appearance_layout.addWidget(self.theme_combo)
        layout.addWidget(appearance_group)

        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_ui_font_size(self) -> int:
        """Get the selected UI font size."""
        return self.ui_font_spinbox.value()

    def get_slide_font_size(self) -> int:
        """Get the selected slide font size."""
        return self.slide_font_spinbox.value()

    def get_theme(self) -> Theme:
        return Theme[self.theme_combo.currentData()]
