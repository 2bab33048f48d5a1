from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

ORG_ID = "wordsphere"
APP_ID = "word-sphere"

VISIBLE_APP_NAME = "Word Sphere"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    app = QApplication.instance()
    if app is not None:
        return app

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)

    return app
