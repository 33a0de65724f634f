"""Allow running StandTimer as a module: python -m standtimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .storage import SqlStore, init_db
from .app import StandTimerApp


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()
    logging.getLogger("standtimer").info("StandTimer ready!")

    app = QApplication(sys.argv)
    app.setApplicationName("StandTimer")
    app.setOrganizationName("StandTimer")

    window = StandTimerApp(store=SqlStore())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
