"""Boundary sanitizers for string-typed numeric input.

Form fields arrive as strings (or not at all). Nothing here raises:
malformed values fall back to a safe default for the field.
"""

from __future__ import annotations
import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero on the positive side."""
    return int(math.floor(value + 0.5))


def to_float(value: object, default: float) -> float:
    """Parse a number; non-numeric or non-finite input returns `default`."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def positive_float(value: object, default: float) -> float:
    number = to_float(value, default)
    return number if number > 0 else default


def non_negative_float(value: object, default: float = 0.0) -> float:
    number = to_float(value, default)
    return number if number >= 0 else default


def non_negative_int(value: object, default: int = 0) -> int:
    """Integer pixel counts such as a border width override."""
    number = to_float(value, float(default))
    if number < 0:
        return default
    return int(number)


def percentage(value: object, default: float) -> float:
    """A percentage clamped to [0, 100]."""
    number = to_float(value, default)
    return max(0.0, min(100.0, number))


def min_size(value: object) -> int:
    """A pixel dimension that is never smaller than 1."""
    number = to_float(value, 1.0)
    return max(1, round_half_up(number))
