"""Application entry point for TriviaQt."""

from __future__ import annotations

import socket
import sys

from PySide6.QtWidgets import QApplication

from trivia_app.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_app.core.presentation_manager import PresentationManager
from trivia_app.core.services.trivia_repository import TriviaRepository
from trivia_app.server.api_server import start_api_server
from trivia_app.ui.main_window import MainWindow
from trivia_app.utils.logging_config import configure_logging


def _determine_audience_url(port: int) -> str:
    """Best-effort determination of the local IP for the audience URL."""
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("8.8.8.8", 80))
            ip_address = sock.getsockname()[0]
    except OSError:
        ip_address = "127.0.0.1"
    return f"http://{ip_address}:{port}/"


def main() -> None:
    """Initialize logging, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting TriviaQt...")

    manager = PresentationManager(TriviaRepository())
    start_api_server(manager=manager, host=DEFAULT_HOST, port=DEFAULT_PORT)
    audience_url = _determine_audience_url(DEFAULT_PORT)
    logger.info("Audience page available at %s", audience_url)

    app = QApplication(sys.argv)
    window = MainWindow(manager=manager, audience_url=audience_url)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
