"""A table of binary integer operators looked up by symbol."""

import operator
from collections.abc import Callable


def add(lhs, rhs):
    """Return the sum of two integers."""
    return lhs + rhs


def divide(numerator, denominator):
    """Integer division that truncates toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def mod(lhs, rhs):
    """Remainder whose sign follows the dividend, matching truncating division."""
    return lhs - rhs * divide(lhs, rhs)


BINOPS: dict[str, Callable[[int, int], int]] = {
    "+": add,
    "-": operator.sub,
    "*": lambda lhs, rhs: lhs * rhs,
    "/": divide,
    "%": mod,
}


def apply(op, lhs, rhs):
    """Apply the operator named by ``op`` to two integers."""
    try:
        func = BINOPS[op]
    except KeyError:
        raise ValueError(f"unknown operator {op!r}") from None
    return func(lhs, rhs)