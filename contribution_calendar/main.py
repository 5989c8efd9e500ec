# main.py
import logging
import sys

from PySide6.QtWidgets import QApplication

from contribution_calendar.config import load_settings
from contribution_calendar.gui.main_window import CalendarWindow


def main():
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    win = CalendarWindow(settings)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
