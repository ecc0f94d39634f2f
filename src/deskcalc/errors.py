class CalculatorError(Exception):
    """Base class for every failure that ends in the 'Error' display state."""


class ExpressionError(CalculatorError):
    """The arithmetic engine could not evaluate the expression."""


class InvalidNumberError(CalculatorError, ValueError):
    """The input buffer does not hold a single number."""
