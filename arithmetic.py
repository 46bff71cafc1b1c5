"""Arithmetic helpers that never raise.

This module defines:
    add(a, b)        -> a + b   (also exported as ``sum``)
    subtract(a, b)   -> a - b
    multiply(a, b)   -> a * b
    divide(a, b)     -> a / b

Every operand is checked with :func:`is_numeric` first. When either operand
fails the check (a string, a bool, ``None`` or simply a missing argument) the
function returns :data:`NAN` instead of raising, so callers can test the result
with ``math.isnan``. Division by zero follows IEEE-754: ``inf``/``-inf`` for a
non-zero numerator and ``NAN`` for ``0 / 0``.

If the file is executed as a script (``python arithmetic.py``) it runs a small
set of vectors against the four functions and prints a short summary.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Callable

NAN = float("nan")

# Default for omitted operands; never numeric.
_MISSING: Any = object()


def is_numeric(value: Any) -> bool:
    """Return ``True`` if *value* is a real number (``bool`` excluded)."""

    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _guarded(op: Callable[[Any, Any], Any], a: Any, b: Any):
    if not (is_numeric(a) and is_numeric(b)):
        return NAN
    try:
        return op(a, b)
    except OverflowError:
        return NAN


def add(a: Any = _MISSING, b: Any = _MISSING):
    """Return the sum of *a* and *b*, or ``NAN``."""

    return _guarded(lambda x, y: x + y, a, b)


def subtract(a: Any = _MISSING, b: Any = _MISSING):
    """Return *a* minus *b*, or ``NAN``."""

    return _guarded(lambda x, y: x - y, a, b)


def multiply(a: Any = _MISSING, b: Any = _MISSING):
    """Return the product of *a* and *b*, or ``NAN``."""

    return _guarded(lambda x, y: x * y, a, b)


def _true_divide(a, b):
    if b != 0:
        return a / b
    if a == 0 or a != a:
        return NAN
    # Sign of a float zero divisor counts: 1 / -0.0 -> -inf.
    return (math.inf if a > 0 else -math.inf) * math.copysign(1.0, b)


def divide(a: Any = _MISSING, b: Any = _MISSING):
    """Return *a* divided by *b*, or ``NAN``.

    A zero divisor gives ``inf`` or ``-inf`` depending on the signs of the
    operands, and ``NAN`` when the numerator is zero as well.
    """

    return _guarded(_true_divide, a, b)


# Older callers import the sum name.
sum = add  # noqa: A001

OPERATIONS: dict[str, Callable[..., Any]] = {
    "add": add,
    "sum": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
}


def calculate(operation: Any, a: Any = _MISSING, b: Any = _MISSING):
    """Apply the operation called *operation* to *a* and *b*.

    Unknown operation names give ``NAN`` like any other bad input.
    """

    if not isinstance(operation, str):
        return NAN
    func = OPERATIONS.get(operation.strip().lower())
    if func is None:
        return NAN
    return func(a, b)


__all__ = [
    "NAN",
    "OPERATIONS",
    "add",
    "calculate",
    "divide",
    "is_numeric",
    "multiply",
    "subtract",
    "sum",
]


def _same(result, expected) -> bool:
    if isinstance(expected, float) and math.isnan(expected):
        return isinstance(result, float) and math.isnan(result)
    return result == expected


def _self_test() -> tuple[int, int]:
    """Run a very small set of self-tests.

    Returns
    -------
    tuple[int, int]
        (<number of passed tests>, <total number of tests>)
    """

    test_vectors = [
        (add, -1, -2, -3),
        (add, 0, 0, 0),
        (add, "a", 3, NAN),
        (subtract, 5, 3, 2),
        (multiply, 2, 3, 6),
        (multiply, 2, "c", NAN),
        (divide, 6, 3, 2),
        (divide, 6, 0, math.inf),
        (divide, -6, 0, -math.inf),
        (divide, 0, 0, NAN),
    ]

    passed = 0
    total = 0

    for func, a, b, expected in test_vectors:
        total += 1
        if _same(func(a, b), expected):
            passed += 1

    return passed, total


if __name__ == "__main__":
    passed, total = _self_test()
    status = "PASSED" if passed == total else "FAILED"
    print(f"Self-test {status}: {passed}/{total} assertions succeeded.")
