"""
Main Window - The .fnt to .lua converter window.
"""

import os
import sys
import logging
import tempfile
from typing import Optional

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QLabel,
    QPushButton, QFrame, QFileDialog
)
from PyQt6.QtCore import Qt

from ..core.converter import convert
from ..core.errors import ConversionError
from ..core.files import save_output, default_output_path
from ..core.status import (
    Severity, StatusMessage, no_input_status, saved_status,
    cancelled_status, error_status
)
from ..ui_text import tr

# ============================================================
# LOGGING SETUP - file and console
# ============================================================
LOG_FILE = os.path.join(tempfile.gettempdir(), 'fnt2lua_debug.log')

logger = logging.getLogger('FNT2LUA')


def setup_logging(log_file: str = LOG_FILE) -> None:
    """Attach file and console handlers to the application logger."""
    logger.setLevel(logging.DEBUG)

    # Clear existing handlers
    logger.handlers.clear()

    # File handler - detailed log
    file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(funcName)s: %(message)s'))

    # Console handler - diagnostics go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("=" * 60)
    logger.info("fnt2lua Converter - Starting")
    logger.info(f"Log file: {log_file}")
    logger.info(f"Python: {sys.executable}")
    logger.info(f"Working dir: {os.getcwd()}")
    logger.info("=" * 60)


WINDOW_SIZE = (300, 200)

THEME = {
    "background": "#11111b",
    "text": "#ccd6f4",
    "border": "#313244",
    "accent": "#89b4fa",
    "accent_hover": "#cba6f7",
    Severity.SUCCESS: "#a6e3a1",
    Severity.ERROR: "#f38ba8",
    Severity.WARNING: "#f9e2af",
    Severity.INFO: "#ccd6f4",
}


class ConverterWindow(QMainWindow):
    """Main application window."""

    def __init__(self):
        super().__init__()
        self.selected_file: Optional[str] = None
        self.status: Optional[StatusMessage] = None

        self._setup_ui()
        self._apply_dark_theme()

    def _setup_ui(self):
        """Setup the main UI layout."""
        self.setWindowTitle(tr("window.title"))
        self.resize(*WINDOW_SIZE)

        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)

        heading = QLabel(tr("window.heading"))
        heading.setObjectName("heading")
        layout.addWidget(heading)

        separator = QFrame()
        separator.setFrameShape(QFrame.Shape.HLine)
        separator.setObjectName("separator")
        layout.addWidget(separator)

        self.select_button = QPushButton(tr("button.select"))
        self.select_button.setObjectName("select_button")
        self.select_button.setToolTip(tr("button.select_tooltip"))
        self.select_button.clicked.connect(self._select_file)
        layout.addWidget(self.select_button)

        self.selected_label = QLabel()
        self.selected_label.setWordWrap(True)
        self.selected_label.hide()
        layout.addWidget(self.selected_label)

        self.convert_button = QPushButton(tr("button.convert"))
        self.convert_button.setObjectName("convert_button")
        self.convert_button.setToolTip(tr("button.convert_tooltip"))
        self.convert_button.clicked.connect(self._convert)
        layout.addWidget(self.convert_button)

        self.status_label = QLabel()
        self.status_label.setWordWrap(True)
        self.status_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(self.status_label)

        layout.addStretch()

    def _apply_dark_theme(self):
        """Apply dark theme to the application."""
        self.setStyleSheet(f"""
            QMainWindow, QWidget {{
                background-color: {THEME["background"]};
                color: {THEME["text"]};
                font-size: 12px;
            }}
            QLabel#heading {{
                font-size: 16px;
                font-weight: bold;
            }}
            QFrame#separator {{
                color: {THEME["border"]};
            }}
            QPushButton#select_button {{
                background-color: {THEME["background"]};
                color: {THEME["text"]};
                border: 1px solid {THEME["border"]};
                border-radius: 4px;
                padding: 4px 8px;
            }}
            QPushButton#select_button:hover {{
                background-color: {THEME["accent"]};
                color: {THEME["background"]};
                border: 1px solid {THEME["accent"]};
            }}
            QPushButton#convert_button {{
                background-color: {THEME["accent"]};
                color: {THEME["background"]};
                border: none;
                border-radius: 8px;
                font-size: 20px;
                padding: 6px 12px;
            }}
            QPushButton#convert_button:hover {{
                background-color: {THEME["accent_hover"]};
            }}
        """)

    def set_input_file(self, file_path: str):
        """Select the .fnt file to convert."""
        self.selected_file = file_path
        self.selected_label.setText(tr("label.selected", path=file_path))
        self.selected_label.show()
        self._clear_status()

    def _select_file(self):
        """Open a .fnt file dialog."""
        logger.info("Opening file dialog...")
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            tr("dialog.open_title"),
            "",
            tr("dialog.open_filter")
        )

        if file_path:
            logger.info(f"Selected file: {file_path}")
            self.set_input_file(file_path)
        else:
            logger.info("File dialog cancelled")

    def _convert(self):
        """Convert the selected file and save the result."""
        if not self.selected_file:
            self._show_status(no_input_status())
            return

        try:
            lua_text = convert(self.selected_file)
        except ConversionError as e:
            logger.error(f"Failed to convert {self.selected_file}: {e}")
            self._show_status(error_status(e))
            return

        output_path, _ = QFileDialog.getSaveFileName(
            self,
            tr("dialog.save_title"),
            default_output_path(self.selected_file),
            tr("dialog.save_filter")
        )

        if not output_path:
            logger.info("Save dialog cancelled")
            self._show_status(cancelled_status())
            return

        try:
            save_output(output_path, lua_text)
        except ConversionError as e:
            logger.error(f"Failed to save: {e}")
            self._show_status(error_status(e))
            return

        self._show_status(saved_status(output_path))

    def _show_status(self, status: StatusMessage):
        self.status = status
        self.status_label.setText(status.text)
        self.status_label.setStyleSheet(f"color: {THEME[status.severity]};")

    def _clear_status(self):
        self.status = None
        self.status_label.clear()


def run_app(file_path: str = None):
    """Run the application."""
    setup_logging()

    app = QApplication(sys.argv)
    app.setStyle("Fusion")

    window = ConverterWindow()
    window.show()

    if file_path:
        window.set_input_file(file_path)

    sys.exit(app.exec())
