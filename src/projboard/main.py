# Rev 0.1.0

# src/projboard/main.py  (Rev 0.1.0)
import sys
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from projboard.app_context import AppContext
from projboard.ui.main_window import MainWindow
from projboard.utils.logging_setup import setup_logging


def main():
    app = QApplication(sys.argv)
    QCoreApplication.setOrganizationName("projboard")
    QCoreApplication.setApplicationName("projboard")

    logfile = setup_logging("projboard")

    # --- DI wiring: one store for the whole run ---
    ctx = AppContext.create(logfile=logfile)

    # --- UI ---
    win = MainWindow(ctx=ctx)
    win.show()

    # Keep a strong ref just in case someone stores nothing at module level
    app.setProperty("mainWindow", win)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
