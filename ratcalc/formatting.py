"""Positional rendering of rationals in an arbitrary base.

A rational either terminates in a given base (``1/4 == 0.25``) or ends in a
repeating cycle of digits (``1/3 == 0.(3)``). :func:`format_rational` detects
which case applies and prints an integer, a fraction or a positional
expansion depending on the requested :class:`FormattingStyle`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Dict, List, Optional, Protocol

from . import integers
from .config import DEFAULT_MAX_DIGITS, Settings
from .errors import DomainError
from .interrupt import NEVER, Interrupt, check

if TYPE_CHECKING:  # pragma: no cover - imported for annotations only
    from .rational import Rational

EXACT_FRACTION = "exact_fraction"
EXACT_FLOAT = "exact_float"
EXACT_FLOAT_WITH_FRACTION_FALLBACK = "exact_float_with_fraction_fallback"
APPROX_FLOAT = "approx_float"
AUTO = "auto"

_KINDS = (EXACT_FRACTION, EXACT_FLOAT, EXACT_FLOAT_WITH_FRACTION_FALLBACK, APPROX_FLOAT, AUTO)

# From base 19 upwards "i" is a digit, so it needs separating.
_IMAGINARY_SPACE_BASE = 19


class Writer(Protocol):
    def write(self, text: str) -> int:
        ...


@dataclass(frozen=True)
class FormattingStyle:
    """How a non-integer value should be printed.

    ``precision`` is only used by ``approx_float`` styles, where it caps the
    number of digits after the point.
    """

    kind: str
    precision: Optional[int] = None

    EXACT_FRACTION: ClassVar["FormattingStyle"]
    EXACT_FLOAT: ClassVar["FormattingStyle"]
    EXACT_FLOAT_WITH_FRACTION_FALLBACK: ClassVar["FormattingStyle"]
    AUTO: ClassVar["FormattingStyle"]

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"Unknown formatting style {self.kind!r}")
        if self.kind == APPROX_FLOAT:
            if isinstance(self.precision, bool) or not isinstance(self.precision, int):
                raise TypeError("approx_float precision must be an integer")
            if self.precision < 1:
                raise ValueError("approx_float precision must be >= 1")
        elif self.precision is not None:
            raise ValueError(f"{self.kind} does not take a precision")

    @classmethod
    def approx_float(cls, precision: int) -> "FormattingStyle":
        return cls(APPROX_FLOAT, precision)


FormattingStyle.EXACT_FRACTION = FormattingStyle(EXACT_FRACTION)
FormattingStyle.EXACT_FLOAT = FormattingStyle(EXACT_FLOAT)
FormattingStyle.EXACT_FLOAT_WITH_FRACTION_FALLBACK = FormattingStyle(
    EXACT_FLOAT_WITH_FRACTION_FALLBACK
)
FormattingStyle.AUTO = FormattingStyle(AUTO)


def terminates_in_base(value: "Rational", base: int, interrupt: Interrupt = NEVER) -> bool:
    """Return whether *value* has a finite expansion in *base*."""
    x = value.simplify(interrupt)
    scale = type(value).from_int(base)
    while True:
        check(interrupt)
        old_denominator = x.denominator
        x = x.mul(scale, interrupt).simplify(interrupt)
        if x.denominator == old_denominator:
            break
    return x.denominator == 1


def _write_imaginary_marker(out: Writer, base: int) -> None:
    if base >= _IMAGINARY_SPACE_BASE:
        out.write(" ")
    out.write("i")


def _write_magnitude(
    out: Writer, value: int, base: int, imag: bool, interrupt: Interrupt
) -> None:
    if imag and base == 10 and value == 1:
        out.write("i")
        return
    out.write(integers.format_uint(value, base, interrupt))
    if imag:
        _write_imaginary_marker(out, base)


def _write_trailing_digits(
    out: Writer,
    base: int,
    remainder: int,
    denominator: int,
    max_digits: Optional[int],
    interrupt: Interrupt,
) -> bool:
    """Print the expansion of ``remainder / denominator`` (a proper fraction).

    With ``max_digits`` set, at most that many digits are printed and cycles
    are not marked. Otherwise a repeating tail is printed in parentheses.
    """
    digits: List[str] = []
    first_seen: Dict[int, int] = {}
    position = 0
    while max_digits is not None or remainder not in first_seen:
        check(interrupt)
        first_seen[remainder] = position
        digit, remainder = divmod(base * remainder, denominator)
        digits.append(integers.format_uint(digit, base, interrupt))
        position += 1
        if remainder == 0 or position == max_digits:
            out.write("".join(digits))
            # truncated unless the expansion really ended here
            return remainder == 0

    start = first_seen.get(remainder)
    assert start is not None, "repeating remainder was never recorded"
    out.write("".join(digits[:start]))
    out.write("(")
    out.write("".join(digits[start:]))
    out.write(")")
    return True


def format_rational(
    value: "Rational",
    out: Writer,
    base: int = 10,
    style: FormattingStyle = FormattingStyle.EXACT_FLOAT_WITH_FRACTION_FALLBACK,
    imag: bool = False,
    interrupt: Interrupt = NEVER,
    *,
    default_max_digits: Optional[int] = None,
    settings: Optional[Settings] = None,
) -> bool:
    """Write *value* to *out* in *base* and return whether it was exact.

    Integers are printed as such. Other values become ``num/den`` for
    ``EXACT_FRACTION`` (and for ``EXACT_FLOAT_WITH_FRACTION_FALLBACK`` when
    the expansion does not terminate), and a positional expansion otherwise.
    ``default_max_digits`` caps the expansion for styles that set no limit
    of their own. When it is not given, ``settings.default_max_digits`` is
    used, then :data:`DEFAULT_MAX_DIGITS`.
    """
    base = integers.check_base(base)
    if default_max_digits is None:
        if settings is not None:
            default_max_digits = settings.default_max_digits
        else:
            default_max_digits = DEFAULT_MAX_DIGITS
    if isinstance(default_max_digits, bool) or not isinstance(default_max_digits, int):
        raise TypeError("default_max_digits must be an integer")
    if default_max_digits < 1:
        raise DomainError(f"default_max_digits must be >= 1, got {default_max_digits}")
    x = value.simplify(interrupt)
    negative = x.is_negative()
    numerator, denominator = x.numerator, x.denominator

    if denominator == 1:
        if negative:
            out.write("-")
        _write_magnitude(out, numerator, base, imag, interrupt)
        return True

    terminating = terminates_in_base(x, base, interrupt)
    fallback = style.kind == EXACT_FLOAT_WITH_FRACTION_FALLBACK
    if style.kind == EXACT_FRACTION or (fallback and not terminating):
        if negative:
            out.write("-")
        _write_magnitude(out, numerator, base, imag, interrupt)
        out.write("/")
        out.write(integers.format_uint(denominator, base, interrupt))
        return True

    if negative:
        out.write("-")
    if style.kind == EXACT_FLOAT or (fallback and terminating):
        max_digits = None
    elif style.kind == APPROX_FLOAT:
        max_digits = style.precision
    else:
        max_digits = default_max_digits
    integer_part, remainder = divmod(numerator, denominator)
    out.write(integers.format_uint(integer_part, base, interrupt))
    out.write(".")
    exact = _write_trailing_digits(out, base, remainder, denominator, max_digits, interrupt)
    if imag:
        _write_imaginary_marker(out, base)
    return exact


__all__ = ["FormattingStyle", "Writer", "format_rational", "terminates_in_base"]
