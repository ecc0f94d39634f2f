"""
Calculator State (Data Model)
=============================
This module defines the single piece of state of the running application:
the expression typed so far.

Why is this file needed?
------------------------
1. State Management: The input buffer lives in one owned object which is
   passed to the dispatch function, instead of a field every handler touches.
2. Decoupling: The view only writes what the controller returns; it never
   edits the buffer directly.

Classes:
    CalculatorState: The input buffer and its editing rules.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from deskcalc.config import DECIMAL_POINT, OPERATOR_CHARS
from deskcalc.errors import InvalidNumberError
from deskcalc.utils import format_number, parse_number

logger = logging.getLogger(__name__)


def _is_exponent_sign(text: str, index: int) -> bool:
    # The sign in "1.5e-7" belongs to the number, not to an operator
    return text[index] in "+-" and index > 0 and text[index - 1] in "eE"


@dataclass
class CalculatorState:
    """
    Holds the input buffer.
    Invariant: at most one decimal point per numeric run
    (the text after the last operator character).
    """
    text: str = ""

    def current_run(self) -> str:
        """Return the numeric run the next token would extend."""
        for i in range(len(self.text) - 1, -1, -1):
            char = self.text[i]
            if char in OPERATOR_CHARS and not _is_exponent_sign(self.text, i):
                return self.text[i + 1:]
        return self.text

    def append_token(self, token: str) -> None:
        # An exponent ends the fractional part, so "1e+21." is refused too
        if token == DECIMAL_POINT and any(c in self.current_run() for c in ".eE"):
            logger.debug(f"Ignoring decimal point in {self.text!r}")
            return
        self.text += token

    def clear(self) -> None:
        self.text = ""

    def backspace(self) -> None:
        if self.text:
            self.text = self.text[:-1]

    def replace(self, text: str) -> None:
        self.text = text

    def toggle_sign(self) -> None:
        """Replace the buffer with its negated value."""
        value = self._as_number()
        self.text = format_number(-value)

    def percentage(self) -> None:
        """Replace the buffer with its value divided by 100."""
        value = self._as_number()
        self.text = format_number(value / 100.0)

    def _as_number(self) -> float:
        try:
            return parse_number(self.text)
        except ValueError as e:
            raise InvalidNumberError(str(e)) from e
