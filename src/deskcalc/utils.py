from decimal import Decimal
import math
import re

_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# Decimal-point positions printed without an exponent: 1e-6 <= |x| < 1e21
_MIN_POINT = -5
_MAX_POINT = 21


def parse_number(text: str) -> float:
    """Parse a single finite decimal literal, e.g. '-5', '.5', '1e+21'."""
    stripped = text.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        raise ValueError(f"Not a number: {text!r}")
    return float(stripped)


def format_number(value: float) -> str:
    """
    Shortest round-trip text of `value`, laid out like a JavaScript number:
    plain decimals for 1e-6 <= |value| < 1e21, otherwise 'd.ddde+n'.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value}")
    if value == 0:
        return "0"  # also covers -0.0

    # repr gives the shortest digits that round-trip
    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    point = exponent + len(digits)  # value == 0.<digits> * 10**point
    prefix = "-" if sign else ""

    if len(digits) <= point <= _MAX_POINT:
        return prefix + digits + "0" * (point - len(digits))
    if 0 < point <= _MAX_POINT:
        return prefix + digits[:point] + "." + digits[point:]
    if _MIN_POINT <= point <= 0:
        return prefix + "0." + "0" * -point + digits

    e = point - 1
    mantissa = digits if len(digits) == 1 else digits[0] + "." + digits[1:]
    return f"{prefix}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
