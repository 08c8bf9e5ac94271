"""Entry point for the Order History Receipts desktop app."""

import logging
import sys

from PyQt5.QtWidgets import QApplication

from pos_receipt import config
from pos_receipt.ui.main_window import MainWindow


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
