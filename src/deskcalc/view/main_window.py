"""
Main Application Window
=======================
The calculator widget: a read-only display above a fixed grid of buttons.

Why is this file needed?
------------------------
1. Layout: It builds the display and the 20 buttons from config.BUTTON_ROWS.
2. Routing: Every button is connected to one slot which forwards the pressed
   label to the controller and writes the returned text to the display.
"""
from PySide6.QtCore import QSize, Qt, Slot
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QGridLayout, QLineEdit, QPushButton, QWidget

from deskcalc.config import (
    BUTTON_ROWS, BUTTON_SIZE, DISPLAY_HEIGHT, VISIBLE_APP_NAME, WINDOW_HEIGHT, WINDOW_WIDTH
)
from deskcalc.controller.dispatch import ButtonAction, dispatch
from deskcalc.model.state import CalculatorState
from deskcalc.view.styles import BUTTON_STYLE, DISPLAY_STYLE, EQUALS_BUTTON_STYLE, WINDOW_STYLE


class CalculatorWindow(QWidget):
    def __init__(self, state: CalculatorState, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state: CalculatorState = state
        self.buttons: dict[str, QPushButton] = {}

        self.setWindowTitle(VISIBLE_APP_NAME)

        # --- DISPLAY ---
        self.display = QLineEdit(self)
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        self.display.setFixedHeight(DISPLAY_HEIGHT)

        # --- BUTTON GRID (row 0 is the display) ---
        layout = QGridLayout(self)
        layout.addWidget(self.display, 0, 0, 1, len(BUTTON_ROWS[0]))

        for row, labels in enumerate(BUTTON_ROWS, start=1):
            for col, label in enumerate(labels):
                button = QPushButton(label, self)
                button.clicked.connect(self.on_button_clicked)
                layout.addWidget(button, row, col)
                self.buttons[label] = button

        self._apply_styles()
        self.setFixedSize(self.minimumSizeHint())

    def _apply_styles(self) -> None:
        self.setStyleSheet(WINDOW_STYLE)
        self.display.setStyleSheet(DISPLAY_STYLE)
        for label, button in self.buttons.items():
            if label == ButtonAction.EVALUATE:
                button.setStyleSheet(EQUALS_BUTTON_STYLE)
            else:
                button.setStyleSheet(BUTTON_STYLE)
            button.setFixedSize(BUTTON_SIZE, BUTTON_SIZE)

    @Slot()
    def on_button_clicked(self) -> None:
        button = self.sender()
        if not isinstance(button, QPushButton):
            return
        self.press(button.text())

    def press(self, label: str) -> None:
        """Run the action of `label` and show the result."""
        self.display.setText(dispatch(self.state, label))

    def display_text(self) -> str:
        return self.display.text()

    # --- SIZE HINTS ---
    def minimumSizeHint(self) -> QSize:
        return QSize(WINDOW_WIDTH, WINDOW_HEIGHT)

    def sizeHint(self) -> QSize:
        return self.minimumSizeHint()

    def paintEvent(self, event: QPaintEvent, /) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), QColor(255, 255, 255))
        painter.end()
        super().paintEvent(event)
