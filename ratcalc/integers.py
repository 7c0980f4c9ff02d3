"""Cancellable operations on arbitrary-precision unsigned integers.

Python's ``int`` already provides exact big-integer arithmetic. The helpers
below cover the operations whose running time grows with the size of their
operands, so that each of them can be aborted through an interrupt.
"""
from __future__ import annotations

import numbers

from .errors import DomainError
from .interrupt import Interrupt, check

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)
MACHINE_INT_MAX = 2**64 - 1


def ensure_uint(value: numbers.Integral, *, name: str) -> int:
    """Convert *value* to ``int`` when it is a non-negative integer."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer, got {type(value)!r}")
    value = int(value)
    if value < 0:
        raise DomainError(f"{name} must be non-negative, got {value}")
    return value


def check_base(base: int) -> int:
    if isinstance(base, bool) or not isinstance(base, numbers.Integral):
        raise TypeError(f"base must be an integer, got {type(base)!r}")
    if not MIN_BASE <= base <= MAX_BASE:
        raise DomainError(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}")
    return int(base)


def gcd(a: int, b: int, interrupt: Interrupt) -> int:
    """Euclid's algorithm. ``gcd(0, 0)`` is 0."""
    while b:
        check(interrupt)
        a, b = b, a % b
    return a


def pow(base: int, exponent: int, interrupt: Interrupt) -> int:
    """Return ``base ** exponent`` by repeated squaring."""
    result = 1
    while exponent:
        check(interrupt)
        if exponent & 1:
            result *= base
        exponent >>= 1
        if exponent:
            base *= base
    return result


def root_n(value: int, n: int, interrupt: Interrupt) -> tuple[int, bool]:
    """Return ``(floor(value ** (1/n)), exact)``.

    ``exact`` is true when the returned root raised to ``n`` gives back
    ``value``.
    """
    if n == 0:
        raise DomainError("Can't compute the zeroth root of a number")
    if n == 1 or value < 2:
        return value, True
    # Newton's method from an initial guess that is never below the root.
    x = 1 << -(-value.bit_length() // n)
    while True:
        check(interrupt)
        y = ((n - 1) * x + value // x ** (n - 1)) // n
        if y >= x:
            break
        x = y
    return x, x**n == value


def factorial(n: int, interrupt: Interrupt) -> int:
    result = 1
    for factor in range(2, n + 1):
        check(interrupt)
        result *= factor
    return result


def format_uint(value: int, base: int, interrupt: Interrupt) -> str:
    """Render *value* with lower-case digits in *base*."""
    if value == 0:
        return "0"
    digits = []
    while value:
        check(interrupt)
        value, digit = divmod(value, base)
        digits.append(DIGITS[digit])
    return "".join(reversed(digits))


def to_machine_int(value: int) -> int:
    if value > MACHINE_INT_MAX:
        raise DomainError("Number is too large to convert to a machine integer")
    return value


__all__ = [
    "DIGITS",
    "MIN_BASE",
    "MAX_BASE",
    "MACHINE_INT_MAX",
    "ensure_uint",
    "check_base",
    "gcd",
    "pow",
    "root_n",
    "factorial",
    "format_uint",
    "to_machine_int",
]
