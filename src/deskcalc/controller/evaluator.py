"""
Expression Evaluator
====================
Turns the accumulated input buffer into an EvaluationOutcome.

Why is this file needed?
------------------------
1. Engine: ArithmeticEngine is a small tokenizer + recursive-descent parser
   for '+ - * /' with standard precedence and float literals. Nothing else
   (names, calls, parentheses) is accepted.
2. Classification: Every failure (syntax error, division by zero, a result
   that is not finite) collapses into a single Error outcome. No exception
   leaves evaluate().

Classes:
    EvaluationOutcome: Success(text) or Error.
    ArithmeticEngine: Evaluates an ASCII arithmetic string to a float.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
import re
from typing import List, Optional

from deskcalc.config import ERROR_TEXT, GLYPH_SUBSTITUTIONS
from deskcalc.errors import ExpressionError
from deskcalc.utils import format_number

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"\s*(?:(?P<number>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)|(?P<op>[-+*/]))")


@dataclass(frozen=True)
class EvaluationOutcome:
    ok: bool
    text: str

    @classmethod
    def success(cls, text: str) -> EvaluationOutcome:
        return cls(ok=True, text=text)

    @classmethod
    def error(cls) -> EvaluationOutcome:
        return cls(ok=False, text=ERROR_TEXT)


def tokenize(expression: str) -> List[str]:
    tokens: List[str] = []
    pos = 0
    end = len(expression.rstrip())
    while pos < end:
        match = _TOKEN_RE.match(expression, pos)
        if match is None:
            raise ExpressionError(f"Unexpected character {expression[pos]!r} at position {pos}")
        tokens.append(match.group("number") or match.group("op"))
        pos = match.end()
    return tokens


class ArithmeticEngine:
    """
    Grammar:
        expr   := term (('+' | '-') term)*
        term   := factor (('*' | '/') factor)*
        factor := ('+' | '-')* NUMBER
    """

    def __init__(self, expression: str) -> None:
        self.tokens = tokenize(expression)
        self.index = 0

    def evaluate(self) -> float:
        if not self.tokens:
            raise ExpressionError("Empty expression")
        value = self._expr()
        if self._peek() is not None:
            raise ExpressionError(f"Unexpected token {self._peek()!r}")
        return value

    def _peek(self) -> Optional[str]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _next(self) -> Optional[str]:
        token = self._peek()
        if token is not None:
            self.index += 1
        return token

    def _expr(self) -> float:
        left = self._term()
        while self._peek() in ("+", "-"):
            op = self._next()
            right = self._term()
            left = left + right if op == "+" else left - right
        return left

    def _term(self) -> float:
        left = self._factor()
        while self._peek() in ("*", "/"):
            op = self._next()
            right = self._factor()
            if op == "*":
                left = left * right
            else:
                if right == 0:
                    raise ExpressionError("Division by zero")
                left = left / right
        return left

    def _factor(self) -> float:
        # Unary signs are folded iteratively; the buffer has no length bound
        sign = 1.0
        while self._peek() in ("+", "-"):
            if self._next() == "-":
                sign = -sign
        token = self._next()
        if token is None:
            raise ExpressionError("Unexpected end of expression")
        if token in ("*", "/"):
            raise ExpressionError(f"Unexpected operator {token!r}")
        return sign * float(token)


def to_ascii(expression: str) -> str:
    """Replace the display glyphs (×, ÷) with their ASCII operators."""
    for glyph, ascii_op in GLYPH_SUBSTITUTIONS.items():
        expression = expression.replace(glyph, ascii_op)
    return expression


def evaluate(buffer: str) -> EvaluationOutcome:
    expression = to_ascii(buffer)
    try:
        value = ArithmeticEngine(expression).evaluate()
    except ExpressionError as e:
        logger.info(f"Evaluation of {buffer!r} failed: {e}")
        return EvaluationOutcome.error()

    if not math.isfinite(value):
        logger.info(f"Evaluation of {buffer!r} gave a non-finite result ({value})")
        return EvaluationOutcome.error()

    result = format_number(value)
    logger.debug(f"{buffer!r} = {result}")
    return EvaluationOutcome.success(result)
