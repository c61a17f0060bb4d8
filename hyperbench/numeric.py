"""Small numeric helpers: float min/max, parameter numbers and environment offsets."""

from __future__ import annotations

import random
from collections.abc import Iterable
from decimal import Decimal
from typing import Union

Number = Union[int, Decimal]

_USIZE_MAX = 2**64 - 1
_OFFSET_MODULUS = 4096


def fmax(vals: Iterable[float]) -> float:
    """Largest value of a non-empty collection of floats without NaNs."""
    return max(vals)


def fmin(vals: Iterable[float]) -> float:
    """Smallest value of a non-empty collection of floats without NaNs."""
    return min(vals)


def to_usize(number: Number) -> int:
    """Convert a number to a non-negative size, truncating decimals toward zero."""
    if isinstance(number, Decimal):
        if not number.is_finite() or number < 0:
            raise ValueError(f"{number} is not a valid size")
        value = int(number)
    else:
        value = int(number)
        if value < 0:
            raise ValueError(f"{number} is not a valid size")
    if value > _USIZE_MAX:
        raise ValueError(f"{number} is not a valid size")
    return value


def format_number(number: Number) -> str:
    """Render a number as plain text, never in exponent notation."""
    if isinstance(number, Decimal):
        return format(number, "f")
    return str(number)


def random_environment_offset() -> str:
    """A string of random length, used to shift the environment's memory layout."""
    return "X" * random.randrange(_OFFSET_MODULUS)