"""
Application Initialization
==========================
This module wires the model, the controller and the view together and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the calculator state (the input buffer).
2. Instantiates the window (View), passing the state in.
3. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from deskcalc.config import VISIBLE_APP_NAME
from deskcalc.logging_config import setup_logging
from deskcalc.model.state import CalculatorState
from deskcalc.view.main_window import CalculatorWindow

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (Console)
    # Use logging.DEBUG to see every buffer change during development
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model
    state = CalculatorState()

    # 4. Initialize the Window, passing the model
    window = CalculatorWindow(state)
    window.show()
    logger.info("Calculator window shown.")

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
