"""Formatting of durations for display."""

from __future__ import annotations

from .units import Second, Unit


def format_duration(duration: Second, unit: Unit | None = None) -> str:
    """Format a duration with its unit; the unit is chosen automatically if not given."""
    text, _ = format_duration_unit(duration, unit)
    return text


def format_duration_unit(duration: Second, unit: Unit | None = None) -> tuple[str, Unit]:
    """Like format_duration, but also return the unit used."""
    text, out_unit = format_duration_value(duration, unit)
    return f"{text} {out_unit.short_name()}", out_unit


def format_duration_value(duration: Second, unit: Unit | None = None) -> tuple[str, Unit]:
    """Format the bare number of a duration and return it with the unit used."""
    if (duration < 0.001 and unit is None) or unit is Unit.MICROSECOND:
        return Unit.MICROSECOND.format(duration), Unit.MICROSECOND
    if (duration < 1.0 and unit is None) or unit is Unit.MILLISECOND:
        return Unit.MILLISECOND.format(duration), Unit.MILLISECOND
    return Unit.SECOND.format(duration), Unit.SECOND