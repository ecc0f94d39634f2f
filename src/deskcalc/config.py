"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic strings (button labels, glyphs, the error
   marker) and magic numbers (window geometry) scattered throughout the code.
2. Consistency: The model, the controller and the view all read the same
   button vocabulary from here.

Exports:
    VISIBLE_APP_NAME (str): Window title.
    ERROR_TEXT (str): The marker shown on the display after any failure.
    GLYPH_SUBSTITUTIONS (dict): Display glyph -> ASCII operator.
    BUTTON_ROWS (tuple): The button grid, top to bottom.
"""
from typing import Dict, Tuple

VISIBLE_APP_NAME: str = "Calculator"

# Geometry (pixels)
WINDOW_WIDTH: int = 250
WINDOW_HEIGHT: int = 350
DISPLAY_HEIGHT: int = 60
BUTTON_SIZE: int = 50

ERROR_TEXT: str = "Error"

MULTIPLY_GLYPH: str = "×"
DIVIDE_GLYPH: str = "÷"
DECIMAL_POINT: str = "."

GLYPH_SUBSTITUTIONS: Dict[str, str] = {
    MULTIPLY_GLYPH: "*",
    DIVIDE_GLYPH: "/",
}

# Characters that end a numeric run in the input buffer
OPERATOR_CHARS: frozenset[str] = frozenset({"+", "-", "*", "/", MULTIPLY_GLYPH, DIVIDE_GLYPH})

BUTTON_ROWS: Tuple[Tuple[str, ...], ...] = (
    ("C", "%", "+/-", MULTIPLY_GLYPH),
    ("7", "8", "9", DIVIDE_GLYPH),
    ("4", "5", "6", "-"),
    ("1", "2", "3", "+"),
    ("0", DECIMAL_POINT, "<-", "="),
)

BUTTON_LABELS: Tuple[str, ...] = tuple(label for row in BUTTON_ROWS for label in row)
