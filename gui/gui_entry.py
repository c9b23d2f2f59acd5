"""
gui_entry.py - GUI Entry

Launch PySide6 GUI application
"""

import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from .gui_mainwindow import MainWindow

logger = logging.getLogger(__name__)


def main(argv=None):
    """GUI main entry"""
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("File Renaming")
    app.setOrganizationName("FileRenaming")
    app.setApplicationVersion("1.0.0")
    app.setStyle("Fusion")

    window = MainWindow()
    window.show()
    logger.info("GUI started")

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
