"""Benchmark parameters: values, numeric ranges and list tokenizing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .numeric import Number, format_number, to_usize

MAX_PARAMETERS = 100_000


class ParameterScanError(ValueError):
    """Raised when a parameter scan range is invalid."""


@dataclass(frozen=True)
class ParameterValue:
    """A parameter value, either plain text or a number."""

    value: Union[str, int, Decimal]

    def __str__(self) -> str:
        if isinstance(self.value, str):
            return self.value
        return format_number(self.value)


def _size_hint(start: Number, end: Number, step: Number) -> int | None:
    span = end - start + 1
    if isinstance(span, Decimal) or isinstance(step, Decimal):
        steps: Number = Decimal(span) / Decimal(step)
    else:
        quotient = abs(span) // abs(step)
        steps = quotient if (span >= 0) == (step > 0) else -quotient
    try:
        return to_usize(steps)
    except ValueError:
        return None


class RangeStep:
    """The values start, start + step, ... up to and including end."""

    def __init__(self, start: Number, end: Number, step: Number) -> None:
        if end < start:
            raise ParameterScanError("Empty parameter range")
        if step == 0:
            raise ParameterScanError("Zero is not a valid parameter step")
        size = _size_hint(start, end, step)
        if size is None or size > MAX_PARAMETERS or step < 0:
            raise ParameterScanError("Parameter range is too large")
        self.start = start
        self.end = end
        self.step = step

    def __iter__(self) -> Iterator[Number]:
        state = self.start
        while state <= self.end:
            yield state
            state += self.step

    def __len__(self) -> int:
        return sum(1 for _ in self)


def tokenize(values: str) -> list[str]:
    """Split a comma-separated list; a backslash escapes a comma or a backslash."""
    tokens: list[str] = []
    current: list[str] = []
    chars = iter(values)
    for char in chars:
        if char == "\\":
            following = next(chars, None)
            if following is None:
                current.append("\\")
            elif following in (",", "\\"):
                current.append(following)
            else:
                current.append("\\")
                current.append(following)
        elif char == ",":
            tokens.append("".join(current))
            current = []
        else:
            current.append(char)
    tokens.append("".join(current))
    return tokens