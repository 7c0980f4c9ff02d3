"""Cooperative cancellation checks.

Long-running loops call :func:`check` once per iteration. The interrupt decides
whether the computation should stop; timing policy lives entirely in the
interrupt, never in the arithmetic code.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional, Protocol

from .errors import Interrupted

logger = logging.getLogger(__name__)


class Interrupt(Protocol):
    def should_interrupt(self) -> bool:
        ...


class Never:
    """Probe that never requests cancellation."""

    def should_interrupt(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Never()"


NEVER = Never()


class EventInterrupt:
    """Probe backed by a :class:`threading.Event` set from another thread."""

    def __init__(self, event: Optional[threading.Event] = None) -> None:
        self.event = event if event is not None else threading.Event()

    def cancel(self) -> None:
        self.event.set()

    def should_interrupt(self) -> bool:
        return self.event.is_set()


class CountdownInterrupt:
    """Probe that allows *budget* checks and signals on every later one."""

    def __init__(self, budget: int) -> None:
        if budget < 0:
            raise ValueError("budget must be >= 0")
        self.remaining = budget

    def should_interrupt(self) -> bool:
        if self.remaining == 0:
            return True
        self.remaining -= 1
        return False


def check(interrupt: Interrupt) -> None:
    """Raise :class:`Interrupted` if *interrupt* asks to stop."""
    if interrupt.should_interrupt():
        logger.debug("computation interrupted by %r", interrupt)
        raise Interrupted()


__all__ = [
    "Interrupt",
    "Never",
    "NEVER",
    "EventInterrupt",
    "CountdownInterrupt",
    "check",
]
