"""Exceptions raised by the rational arithmetic core.

Two families exist and are never mixed: :class:`DomainError` for invalid
input chosen by the caller, and :class:`Interrupted` for cooperative
cancellation requested through an interrupt.
"""


class DomainError(ValueError):
    """An argument lies outside the domain of the requested operation."""


class DivideByZero(DomainError, ZeroDivisionError):
    """Division by a zero-valued rational."""

    def __init__(self, message: str = "Attempt to divide by zero") -> None:
        super().__init__(message)


class Interrupted(Exception):
    """The interrupt asked a running computation to stop."""

    def __init__(self, message: str = "Interrupted") -> None:
        super().__init__(message)


__all__ = ["DomainError", "DivideByZero", "Interrupted"]
