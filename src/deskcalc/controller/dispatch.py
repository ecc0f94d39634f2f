"""
Button Dispatch
===============
Maps a pressed button label onto an operation of the calculator state.

The mapping is static and total over config.BUTTON_LABELS: the five labels in
ButtonAction have their own operation, every other label is appended to the
input buffer as a token.
"""
from __future__ import annotations

from enum import StrEnum
import logging

from deskcalc.config import BUTTON_LABELS, ERROR_TEXT
from deskcalc.controller.evaluator import evaluate
from deskcalc.errors import InvalidNumberError
from deskcalc.model.state import CalculatorState

logger = logging.getLogger(__name__)


class ButtonAction(StrEnum):
    CLEAR = "C"
    PERCENT = "%"
    TOGGLE_SIGN = "+/-"
    BACKSPACE = "<-"
    EVALUATE = "="


def dispatch(state: CalculatorState, label: str) -> str:
    """
    Apply the action bound to `label` and return the text for the display.

    Raises:
        ValueError: If `label` is not one of the calculator buttons.
    """
    if label not in BUTTON_LABELS:
        raise ValueError(f"Unknown button label: {label!r}")

    if label == ButtonAction.EVALUATE:
        outcome = evaluate(state.text)
        if outcome.ok:
            state.replace(outcome.text)
        else:
            state.clear()
        return outcome.text

    try:
        if label == ButtonAction.CLEAR:
            state.clear()
        elif label == ButtonAction.PERCENT:
            state.percentage()
        elif label == ButtonAction.TOGGLE_SIGN:
            state.toggle_sign()
        elif label == ButtonAction.BACKSPACE:
            state.backspace()
        else:
            state.append_token(label)
    except InvalidNumberError as e:
        logger.info(f"'{label}' rejected: {e}")
        state.clear()
        return ERROR_TEXT

    return state.text
