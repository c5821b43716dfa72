import logging
import os
import sys

from PySide6 import QtWidgets

from diodescout.core.settings import APPLICATION, ORGANIZATION
from diodescout.ui.main_window import MainWindow
from diodescout.ui.theme import apply_theme


def main():
    logging.basicConfig(
        level=os.environ.get("DIODESCOUT_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APPLICATION)
    app.setOrganizationName(ORGANIZATION)
    apply_theme(app)

    win = MainWindow()
    if not win.connect_device():
        QtWidgets.QMessageBox.warning(
            None, APPLICATION,
            "No DiodeScout device detected.\nPlease check the connection."
        )
        sys.exit(1)

    win.show()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
