"""Time units used when displaying benchmark results."""

from __future__ import annotations

from enum import Enum

Second = float


class Unit(Enum):
    """Supported time units."""

    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"

    def short_name(self) -> str:
        """The abbreviation of the unit."""
        return {
            Unit.SECOND: "s",
            Unit.MILLISECOND: "ms",
            Unit.MICROSECOND: "\u00b5s",
        }[self]

    def format(self, value: Second) -> str:
        """Format a value given in seconds for this unit."""
        if self is Unit.SECOND:
            return f"{value:.3f}"
        if self is Unit.MILLISECOND:
            return f"{value * 1e3:.1f}"
        return f"{value * 1e6:.1f}"