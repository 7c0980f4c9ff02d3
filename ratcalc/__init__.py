"""Exact rational arithmetic core for calculator engines."""

from .config import DEFAULT_MAX_DIGITS, ROOT_ITERATIONS, Settings, load_settings
from .errors import DivideByZero, DomainError, Interrupted
from .formatting import FormattingStyle, format_rational, terminates_in_base
from .interrupt import NEVER, CountdownInterrupt, EventInterrupt, Interrupt, Never
from .rational import FLOAT_DENOMINATOR, Rational, as_rational_array, rationalize
from .sign import Sign

__all__ = [
    "Rational",
    "rationalize",
    "as_rational_array",
    "FLOAT_DENOMINATOR",
    "Sign",
    "FormattingStyle",
    "format_rational",
    "terminates_in_base",
    "DomainError",
    "DivideByZero",
    "Interrupted",
    "Interrupt",
    "Never",
    "NEVER",
    "EventInterrupt",
    "CountdownInterrupt",
    "Settings",
    "load_settings",
    "DEFAULT_MAX_DIGITS",
    "ROOT_ITERATIONS",
]
