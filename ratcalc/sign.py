"""Two-valued sign used by :class:`ratcalc.Rational`."""
from __future__ import annotations

import enum


class Sign(enum.Enum):
    POSITIVE = "+"
    NEGATIVE = "-"

    def flip(self) -> "Sign":
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        return Sign.POSITIVE

    @staticmethod
    def product(a: "Sign", b: "Sign") -> "Sign":
        """Return the sign of a product of values signed *a* and *b*."""
        if a is b:
            return Sign.POSITIVE
        return Sign.NEGATIVE


__all__ = ["Sign"]
