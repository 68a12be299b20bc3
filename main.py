"""
YatzyBoard - Desktop scoreboard for Yahtzee and Maxi Yatzy

Entry point for the application.
"""

import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from config import init_config, init_logging, APP_NAME, APP_VERSION


def main() -> int:
    """Main entry point for YatzyBoard."""
    # Initialize configuration, directories and logging
    init_config()
    init_logging()

    # High DPI scaling
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    # Create application
    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationVersion(APP_VERSION)
    app.setOrganizationName(APP_NAME)

    # Apply theme
    from gui.styles.theme import application_stylesheet
    app.setStyleSheet(application_stylesheet())

    # Create and show main window
    from app import YatzyBoardApp, open_storage_engine
    board_app = YatzyBoardApp(open_storage_engine())
    board_app.show()

    # Run event loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
