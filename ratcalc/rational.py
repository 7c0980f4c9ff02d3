"""Exact rational numbers over arbitrary-precision unsigned integers."""
from __future__ import annotations

import io
import logging
import math
import numbers
import operator
from fractions import Fraction
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

from . import integers
from .config import ROOT_ITERATIONS, Settings
from .errors import DivideByZero, DomainError
from .formatting import FormattingStyle, format_rational
from .interrupt import NEVER, Interrupt, check
from .sign import Sign

logger = logging.getLogger(__name__)

NumberLike = Union["Rational", numbers.Integral]

# Fixed denominator used when turning a float into a Rational.
FLOAT_DENOMINATOR = 2**32 - 1
MAX_U64 = 2**64 - 1


def _coerce(value: Any) -> "Rational":
    if isinstance(value, Rational):
        return value
    if isinstance(value, bool):
        raise TypeError("Cannot interpret a bool as Rational")
    if isinstance(value, numbers.Integral):
        value = int(value)
        sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
        return Rational._from_parts(sign, abs(value), 1)
    if isinstance(value, Fraction):
        return Rational.from_fraction(value)
    if isinstance(value, np.generic):
        return _coerce(value.item())
    raise TypeError(f"Cannot interpret {type(value)!r} as Rational")


def _sum(sign: Sign) -> Callable[[int, int], Tuple[Sign, int]]:
    def resolve(a: int, b: int) -> Tuple[Sign, int]:
        return sign, a + b

    return resolve


def _difference(sign: Sign) -> Callable[[int, int], Tuple[Sign, int]]:
    # *sign* belongs to the left operand, the right one has the opposite sign.
    def resolve(a: int, b: int) -> Tuple[Sign, int]:
        if a < b:
            return sign.flip(), b - a
        return sign, a - b

    return resolve


# (left sign, right sign) -> combine scaled numerators over a shared denominator
_ADD_BY_SIGNS = {
    (Sign.POSITIVE, Sign.POSITIVE): _sum(Sign.POSITIVE),
    (Sign.POSITIVE, Sign.NEGATIVE): _difference(Sign.POSITIVE),
    (Sign.NEGATIVE, Sign.POSITIVE): _difference(Sign.NEGATIVE),
    (Sign.NEGATIVE, Sign.NEGATIVE): _sum(Sign.NEGATIVE),
}


class Rational:
    """Signed fraction of two arbitrary-precision unsigned integers.

    Values are immutable and are *not* kept in lowest terms: arithmetic
    leaves reduction to :meth:`simplify`, which callers run once at the end
    of a chain of operations. Zero may carry either sign; comparisons,
    hashing and formatting all treat it as non-negative.

    Every operation comes in two flavours. The named methods (``add``,
    ``div``, ``pow``, ``sin`` ...) accept an interrupt and raise
    :class:`~ratcalc.errors.Interrupted` when it fires. The Python operators
    use an interrupt that never fires, so they must not be used on untrusted or
    unbounded-magnitude input.
    """

    __slots__ = ("_sign", "_numerator", "_denominator")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    def __init__(
        self,
        numerator: numbers.Integral = 0,
        denominator: numbers.Integral = 1,
        sign: Sign = Sign.POSITIVE,
    ) -> None:
        num = integers.ensure_uint(numerator, name="numerator")
        den = integers.ensure_uint(denominator, name="denominator")
        if den == 0:
            raise DivideByZero("denominator must be non-zero")
        if not isinstance(sign, Sign):
            raise TypeError(f"sign must be a Sign, got {type(sign)!r}")
        self._sign = sign
        self._numerator = num
        self._denominator = den

    @classmethod
    def _from_parts(cls, sign: Sign, numerator: int, denominator: int) -> "Rational":
        value = object.__new__(cls)
        value._sign = sign
        value._numerator = numerator
        value._denominator = denominator
        return value

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_int(cls, value: numbers.Integral) -> "Rational":
        """Create a :class:`Rational` from an unsigned 64-bit integer."""
        value = integers.ensure_uint(value, name="value")
        if value > MAX_U64:
            raise DomainError(f"{value} does not fit in an unsigned 64-bit integer")
        return cls._from_parts(Sign.POSITIVE, value, 1)

    @classmethod
    def from_biguint(cls, value: numbers.Integral) -> "Rational":
        """Create a :class:`Rational` from any non-negative integer."""
        value = integers.ensure_uint(value, name="value")
        return cls._from_parts(Sign.POSITIVE, value, 1)

    @classmethod
    def from_float(cls, value: float) -> "Rational":
        """Approximate *value* with a denominator of ``2**32 - 1``.

        The scaled numerator is truncated, so the conversion is lossy.
        """
        value = float(value)
        if math.isnan(value) or math.isinf(value):
            raise DomainError("cannot convert NaN or infinity to Rational")
        scaled = abs(value) * FLOAT_DENOMINATOR
        if math.isinf(scaled):
            raise DomainError(f"{value!r} is too large to convert to Rational")
        sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
        return cls._from_parts(sign, int(scaled), FLOAT_DENOMINATOR)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        """Create a :class:`Rational` from :class:`fractions.Fraction`."""
        sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
        return cls._from_parts(sign, abs(value.numerator), value.denominator)

    @classmethod
    def approx_pi(cls) -> "Rational":
        return cls._from_parts(Sign.POSITIVE, 3_141_592_653_589_793_238, 10**18)

    @classmethod
    def approx_e(cls) -> "Rational":
        return cls._from_parts(Sign.POSITIVE, 2_718_281_828_459_045_235, 10**18)

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_negative(self) -> bool:
        """Return ``True`` for values below zero; zero never counts."""
        return self._sign is Sign.NEGATIVE and self._numerator != 0

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        numerator = -self._numerator if self.is_negative() else self._numerator
        return Fraction(numerator, self._denominator)

    def simplify(self, interrupt: Interrupt = NEVER) -> "Rational":
        """Return the same value reduced to lowest terms."""
        if self._denominator == 1:
            return self
        gcd = integers.gcd(self._numerator, self._denominator, interrupt)
        return Rational._from_parts(
            self._sign, self._numerator // gcd, self._denominator // gcd
        )

    def add_digit_in_base(self, digit: int, base: int) -> None:
        """Append *digit* to a literal that is being read in *base*.

        This mutates the value in place: the numerator becomes
        ``numerator * base + digit`` and the denominator is scaled by
        ``base``. Only call it on a value that is still being built from
        its digits, never after it has been simplified or used in an
        operation.
        """
        base = integers.check_base(base)
        digit = integers.ensure_uint(digit, name="digit")
        if digit >= base:
            raise DomainError(f"Digit {digit} is out of range for base {base}")
        self._numerator = self._numerator * base + digit
        self._denominator = self._denominator * base

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, other: NumberLike, interrupt: Interrupt = NEVER) -> "Rational":
        other = _coerce(other)
        if self._denominator == other._denominator:
            denominator = self._denominator
            a, b = self._numerator, other._numerator
        else:
            # Scale by lcm(den_l, den_r) rather than the plain product.
            gcd = integers.gcd(self._denominator, other._denominator, interrupt)
            denominator = self._denominator * other._denominator // gcd
            a = self._numerator * other._denominator // gcd
            b = other._numerator * self._denominator // gcd
        sign, numerator = _ADD_BY_SIGNS[self._sign, other._sign](a, b)
        return Rational._from_parts(sign, numerator, denominator)

    def sub(self, other: NumberLike, interrupt: Interrupt = NEVER) -> "Rational":
        return self.add(-_coerce(other), interrupt)

    def mul(self, other: NumberLike, interrupt: Interrupt = NEVER) -> "Rational":
        other = _coerce(other)
        return Rational._from_parts(
            Sign.product(self._sign, other._sign),
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def div(self, other: NumberLike, interrupt: Interrupt = NEVER) -> "Rational":
        other = _coerce(other)
        if other._numerator == 0:
            raise DivideByZero()
        return Rational._from_parts(
            Sign.product(self._sign, other._sign),
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def compare(self, other: NumberLike, interrupt: Interrupt = NEVER) -> int:
        """Return -1, 0 or 1 as ``self`` is below, equal to or above *other*."""
        difference = self.sub(other, interrupt)
        if difference._numerator == 0:
            return 0
        if difference._sign is Sign.POSITIVE:
            return 1
        return -1

    # ------------------------------------------------------------------
    # Powers and roots
    def pow(
        self,
        exponent: NumberLike,
        interrupt: Interrupt = NEVER,
        *,
        iterations: Optional[int] = None,
        settings: Optional[Settings] = None,
    ) -> Tuple["Rational", bool]:
        """Raise to a rational *exponent*.

        Returns ``(value, exact)``. Integer exponents are always exact;
        fractional exponents ``p/q`` take the ``q``-th root of the ``p``-th
        power and are exact only when that root is.
        """
        base = self.simplify(interrupt)
        exponent = _coerce(exponent).simplify(interrupt)
        if exponent.is_negative():
            inverse, exact = base.pow(
                -exponent, interrupt, iterations=iterations, settings=settings
            )
            return _ONE.div(inverse, interrupt), exact

        power = exponent._numerator
        sign = Sign.POSITIVE
        if base.is_negative() and power % 2 == 1:
            sign = Sign.NEGATIVE
        result = Rational._from_parts(
            sign,
            integers.pow(base._numerator, power, interrupt),
            integers.pow(base._denominator, power, interrupt),
        )
        if exponent._denominator == 1:
            return result, True
        return result.root_n(
            exponent._denominator, interrupt, iterations=iterations, settings=settings
        )

    def root_n(
        self,
        n: NumberLike,
        interrupt: Interrupt = NEVER,
        *,
        iterations: Optional[int] = None,
        settings: Optional[Settings] = None,
    ) -> Tuple["Rational", bool]:
        """Return ``(value ** (1/n), exact)`` for a non-negative value.

        Numerator and denominator are rooted separately. A side that is not
        a perfect power is refined by bisection, which makes the whole result
        an approximation. The number of bisection steps is *iterations*,
        else ``settings.root_iterations``, else :data:`ROOT_ITERATIONS`.
        """
        value = self.simplify(interrupt)
        if value.is_negative():
            raise DomainError("Can't compute roots of negative numbers")
        order = _coerce(n).simplify(interrupt)
        if order._denominator != 1 or order.is_negative():
            raise DomainError("Can't compute non-integer or negative roots")
        if value._numerator == 0:
            return _ZERO, True

        n = order._numerator
        num_root, num_exact = integers.root_n(value._numerator, n, interrupt)
        den_root, den_exact = integers.root_n(value._denominator, n, interrupt)
        if num_exact and den_exact:
            return Rational._from_parts(Sign.POSITIVE, num_root, den_root), True

        if iterations is None:
            iterations = settings.root_iterations if settings is not None else ROOT_ITERATIONS
        logger.debug("no exact %d-th root of %r, bisecting", n, value)
        if num_exact:
            numerator = Rational.from_biguint(num_root)
        else:
            numerator = _iter_root_n(num_root, value._numerator, n, iterations, interrupt)
        if den_exact:
            denominator = Rational.from_biguint(den_root)
        else:
            denominator = _iter_root_n(den_root, value._denominator, n, iterations, interrupt)
        return numerator.div(denominator, interrupt), False

    def sqrt(self, interrupt: Interrupt = NEVER, **kwargs: Any) -> "Rational":
        """Return the principal square root, exact when one exists."""
        return self.root_n(2, interrupt, **kwargs)[0]

    def cbrt(self, interrupt: Interrupt = NEVER, **kwargs: Any) -> "Rational":
        return self.root_n(3, interrupt, **kwargs)[0]

    def factorial(self, interrupt: Interrupt = NEVER) -> "Rational":
        value = self.simplify(interrupt)
        if value._denominator != 1:
            raise DomainError("Factorial is only supported for integers")
        if value.is_negative():
            raise DomainError("Factorial is only supported for positive integers")
        return Rational._from_parts(
            Sign.POSITIVE, integers.factorial(value._numerator, interrupt), 1
        )

    # ------------------------------------------------------------------
    # Transcendental functions, evaluated through a float approximation
    def _approximate(self, func: Callable[[float], float], interrupt: Interrupt) -> "Rational":
        value = self.to_float(interrupt)
        try:
            result = func(value)
        except OverflowError as exc:
            raise DomainError(f"{func.__name__} result is too large to approximate") from exc
        except ValueError as exc:
            # the float rounded onto or past a domain boundary, e.g. 1e-400 -> 0.0
            raise DomainError(f"{value!r} is outside the domain of {func.__name__}") from exc
        return Rational.from_float(result)

    def _check_unit_interval(self, interrupt: Interrupt, *, inclusive: bool) -> None:
        above = self.compare(_ONE, interrupt)
        below = self.compare(_MINUS_ONE, interrupt)
        if inclusive:
            inside = above <= 0 and below >= 0
        else:
            inside = above < 0 and below > 0
        if not inside:
            raise DomainError("Value must be between -1 and 1")

    def _check_positive(self, interrupt: Interrupt) -> None:
        if self.compare(_ZERO, interrupt) <= 0:
            raise DomainError("Value must be greater than 0")

    def sin(self, interrupt: Interrupt = NEVER) -> "Rational":
        return self._approximate(math.sin, interrupt)

    def cos(self, interrupt: Interrupt = NEVER) -> "Rational":
        return self._approximate(math.cos, interrupt)

    def tan(self, interrupt: Interrupt = NEVER) -> "Rational":
        return self._approximate(math.tan, interrupt)

    def asin(self, interrupt: Interrupt = NEVER) -> "Rational":
        self._check_unit_interval(interrupt, inclusive=True)
        return self._approximate(math.asin, interrupt)

    def acos(self, interrupt: Interrupt = NEVER) -> "Rational":
        self._check_unit_interval(interrupt, inclusive=True)
        return self._approximate(math.acos, interrupt)

    def atan(self, interrupt: Interrupt = NEVER) -> "Rational":
        return self._approximate(math.atan, interrupt)

    def sinh(self, interrupt: Interrupt = NEVER) -> "Rational":
        return self._approximate(math.sinh, interrupt)

    def cosh(self, interrupt: Interrupt = NEVER) -> "Rational":
        return self._approximate(math.cosh, interrupt)

    def tanh(self, interrupt: Interrupt = NEVER) -> "Rational":
        return self._approximate(math.tanh, interrupt)

    def asinh(self, interrupt: Interrupt = NEVER) -> "Rational":
        return self._approximate(math.asinh, interrupt)

    def acosh(self, interrupt: Interrupt = NEVER) -> "Rational":
        if self.compare(_ONE, interrupt) < 0:
            raise DomainError("Value must not be less than 1")
        return self._approximate(math.acosh, interrupt)

    def atanh(self, interrupt: Interrupt = NEVER) -> "Rational":
        self._check_unit_interval(interrupt, inclusive=False)
        return self._approximate(math.atanh, interrupt)

    def ln(self, interrupt: Interrupt = NEVER) -> "Rational":
        self._check_positive(interrupt)
        return self._approximate(math.log, interrupt)

    def log2(self, interrupt: Interrupt = NEVER) -> "Rational":
        self._check_positive(interrupt)
        return self._approximate(math.log2, interrupt)

    def log10(self, interrupt: Interrupt = NEVER) -> "Rational":
        self._check_positive(interrupt)
        return self._approximate(math.log10, interrupt)

    def exp(self, interrupt: Interrupt = NEVER) -> "Rational":
        return self._approximate(math.exp, interrupt)

    # NumPy object arrays call these names element-wise.
    arcsin = asin
    arccos = acos
    arctan = atan
    arcsinh = asinh
    arccosh = acosh
    arctanh = atanh
    log = ln

    # ------------------------------------------------------------------
    # Conversions
    def to_float(self, interrupt: Interrupt = NEVER) -> float:
        value = self.simplify(interrupt)
        try:
            magnitude = value._numerator / value._denominator
        except OverflowError as exc:
            raise DomainError("Number is too large to convert to a float") from exc
        return -magnitude if value.is_negative() else magnitude

    def try_as_int(self, interrupt: Interrupt = NEVER) -> int:
        """Return the value as a non-negative machine integer."""
        value = self.simplify(interrupt)
        if value._denominator != 1:
            raise DomainError("Cannot convert fraction to integer")
        if value.is_negative():
            raise DomainError("Cannot convert a negative number to an unsigned integer")
        return integers.to_machine_int(value._numerator)

    def __float__(self) -> float:
        return self.to_float(NEVER)

    def __bool__(self) -> bool:
        return self._numerator != 0

    # ------------------------------------------------------------------
    # Formatting
    def format(
        self,
        out: Any,
        base: int = 10,
        style: FormattingStyle = FormattingStyle.EXACT_FLOAT_WITH_FRACTION_FALLBACK,
        imag: bool = False,
        interrupt: Interrupt = NEVER,
        *,
        default_max_digits: Optional[int] = None,
        settings: Optional[Settings] = None,
    ) -> bool:
        """Write the value to *out* and return whether the output is exact."""
        return format_rational(
            self,
            out,
            base,
            style,
            imag,
            interrupt,
            default_max_digits=default_max_digits,
            settings=settings,
        )

    def to_string(
        self,
        base: int = 10,
        style: FormattingStyle = FormattingStyle.EXACT_FLOAT_WITH_FRACTION_FALLBACK,
        imag: bool = False,
        interrupt: Interrupt = NEVER,
        *,
        default_max_digits: Optional[int] = None,
        settings: Optional[Settings] = None,
    ) -> Tuple[str, bool]:
        buffer = io.StringIO()
        exact = self.format(
            buffer,
            base,
            style,
            imag,
            interrupt,
            default_max_digits=default_max_digits,
            settings=settings,
        )
        return buffer.getvalue(), exact

    def __repr__(self) -> str:
        if self._sign is Sign.NEGATIVE:
            return f"Rational({self._numerator}, {self._denominator}, Sign.NEGATIVE)"
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return self.to_string()[0]

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        return format(float(self), format_spec)

    # ------------------------------------------------------------------
    # Operators. These never report cancellation.
    def _binary_operation(self, other: Any, op):
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(lambda x: op(self, x), otypes=[object])
            return vectorised(as_rational_array(other))
        try:
            other_rat = _coerce(other)
        except TypeError:
            return NotImplemented
        return op(self, other_rat)

    def _reflected_operation(self, other: Any, op):
        try:
            other_rat = _coerce(other)
        except TypeError:
            return NotImplemented
        return op(other_rat, self)

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: a.add(b, NEVER))

    def __radd__(self, other: Any) -> Any:
        return self._reflected_operation(other, lambda a, b: a.add(b, NEVER))

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: a.sub(b, NEVER))

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, lambda a, b: a.sub(b, NEVER))

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: a.mul(b, NEVER))

    def __rmul__(self, other: Any) -> Any:
        return self._reflected_operation(other, lambda a, b: a.mul(b, NEVER))

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, lambda a, b: a.div(b, NEVER))

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, lambda a, b: a.div(b, NEVER))

    def __pow__(self, exponent: Any) -> Any:
        return self._binary_operation(exponent, lambda a, b: a.pow(b, NEVER)[0])

    def __rpow__(self, other: Any) -> Any:
        return self._reflected_operation(other, lambda a, b: a.pow(b, NEVER)[0])

    def __neg__(self) -> "Rational":
        return Rational._from_parts(self._sign.flip(), self._numerator, self._denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational._from_parts(Sign.POSITIVE, self._numerator, self._denominator)

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any, op) -> Any:
        try:
            other_rat = _coerce(other)
        except TypeError:
            return NotImplemented
        return op(self.compare(other_rat, NEVER), 0)

    def __eq__(self, other: Any) -> Any:
        return self._compare(other, operator.eq)

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        # Fraction reduces and hashes consistently with int, like our __eq__.
        return hash(self.as_fraction())

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: abs,
        np.power: operator.pow,
        np.sin: lambda a: a.sin(),
        np.cos: lambda a: a.cos(),
        np.tan: lambda a: a.tan(),
        np.arcsin: lambda a: a.asin(),
        np.arccos: lambda a: a.acos(),
        np.arctan: lambda a: a.atan(),
        np.sinh: lambda a: a.sinh(),
        np.cosh: lambda a: a.cosh(),
        np.tanh: lambda a: a.tanh(),
        np.arcsinh: lambda a: a.asinh(),
        np.arccosh: lambda a: a.acosh(),
        np.arctanh: lambda a: a.atanh(),
        np.log: lambda a: a.ln(),
        np.log2: lambda a: a.log2(),
        np.log10: lambda a: a.log10(),
        np.exp: lambda a: a.exp(),
        np.sqrt: lambda a: a.sqrt(),
        np.cbrt: lambda a: a.cbrt(),
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, np.ndarray):
                coerced.append(as_rational_array(value))
                has_array = True
            else:
                coerced.append(_coerce(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def _iter_root_n(
    low: int, target: int, n: int, iterations: int, interrupt: Interrupt
) -> Rational:
    """Bisect ``[low, low + 1]`` towards the real ``n``-th root of *target*."""
    low_bound = Rational.from_biguint(low)
    high_bound = low_bound.add(_ONE, interrupt)
    goal = Rational.from_biguint(target)
    order = Rational.from_biguint(n)
    for _ in range(iterations):
        check(interrupt)
        guess = low_bound.add(high_bound, interrupt).div(_TWO, interrupt)
        power, _ = guess.pow(order, interrupt)
        if power.compare(goal, interrupt) < 0:
            low_bound = guess
        else:
            high_bound = guess
    return low_bound.add(high_bound, interrupt).div(_TWO, interrupt)


_ZERO = Rational._from_parts(Sign.POSITIVE, 0, 1)
_ONE = Rational._from_parts(Sign.POSITIVE, 1, 1)
_TWO = Rational._from_parts(Sign.POSITIVE, 2, 1)
_MINUS_ONE = Rational._from_parts(Sign.NEGATIVE, 1, 1)


def rationalize(value: Any) -> Rational:
    """Public helper to convert *value* into :class:`Rational`.

    Integers, fractions and NumPy integer scalars convert exactly; floats go
    through :meth:`Rational.from_float`.
    """
    if isinstance(value, numbers.Real) and not isinstance(
        value, (numbers.Rational, Rational)
    ):
        return Rational.from_float(float(value))
    return _coerce(value)


def as_rational_array(values: Any) -> "np.ndarray":
    """Return a ``numpy.ndarray`` of :class:`Rational` values with the same shape."""
    array = np.asarray(values, dtype=object)
    vectorised = np.vectorize(rationalize, otypes=[object])
    return vectorised(array)


__all__ = ["Rational", "rationalize", "as_rational_array", "FLOAT_DENOMINATOR"]
