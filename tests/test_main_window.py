import pytest

pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtCore import QSize

from deskcalc.config import BUTTON_LABELS
from deskcalc.model.state import CalculatorState
from deskcalc.view.main_window import CalculatorWindow


@pytest.fixture
def window(qapp):
    w = CalculatorWindow(CalculatorState())
    yield w
    w.close()
    w.deleteLater()


def test_has_one_button_per_label(window):
    assert list(window.buttons) == list(BUTTON_LABELS)
    assert window.windowTitle() == "Calculator"


def test_clicking_buttons_updates_display(window):
    for label in ("1", "2", "+", "3", "="):
        window.buttons[label].click()
    assert window.display_text() == "15"
    assert window.state.text == "15"


def test_error_is_shown(window):
    for label in ("9", "÷", "0", "="):
        window.press(label)
    assert window.display_text() == "Error"
    assert window.state.text == ""


def test_display_is_read_only(window):
    assert window.display.isReadOnly()
    assert window.sizeHint() == QSize(250, 350)
