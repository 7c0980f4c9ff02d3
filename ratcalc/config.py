"""Tunable policy values for formatting and root extraction."""
from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Union

logger = logging.getLogger(__name__)

# Digits printed after the point when a style sets no limit of its own.
DEFAULT_MAX_DIGITS = 10
# Bisection steps used to refine an inexact integer root.
ROOT_ITERATIONS = 30


@dataclass(frozen=True)
class Settings:
    default_max_digits: int = DEFAULT_MAX_DIGITS
    root_iterations: int = ROOT_ITERATIONS

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{field.name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{field.name} must be >= 1, got {value}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "Settings":
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown ratcalc settings: {', '.join(unknown)}")
        return cls(**values)


def load_settings(path: Union[str, Path]) -> Settings:
    """Read the ``[ratcalc]`` table of a TOML file.

    A missing table yields the defaults.
    """
    path = Path(path).expanduser()
    with path.open("rb") as handle:
        data = tomllib.load(handle)
    settings = Settings.from_mapping(data.get("ratcalc", {}))
    logger.debug("loaded %s from %s", settings, path)
    return settings


__all__ = ["DEFAULT_MAX_DIGITS", "ROOT_ITERATIONS", "Settings", "load_settings"]
