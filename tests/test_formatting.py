import pytest

from hyperbench.formatting import (
    format_duration,
    format_duration_unit,
    format_duration_value,
)
from hyperbench.units import Unit


@pytest.mark.parametrize(
    "duration, text, unit",
    [
        (1.3, "1.300 s", Unit.SECOND),
        (1.0, "1.000 s", Unit.SECOND),
        (0.999, "999.0 ms", Unit.MILLISECOND),
        (0.0005, "500.0 \u00b5s", Unit.MICROSECOND),
        (0.0, "0.0 \u00b5s", Unit.MICROSECOND),
        (1000.0, "1000.000 s", Unit.SECOND),
    ],
)
def test_format_duration_unit_basic(duration, text, unit):
    assert format_duration_unit(duration, None) == (text, unit)


@pytest.mark.parametrize(
    "unit, text",
    [
        (Unit.SECOND, "1.300 s"),
        (Unit.MILLISECOND, "1300.0 ms"),
        (Unit.MICROSECOND, "1300000.0 \u00b5s"),
    ],
)
def test_format_duration_unit_with_unit(unit, text):
    assert format_duration_unit(1.3, unit) == (text, unit)


def test_format_duration_drops_unit_object():
    assert format_duration(0.123) == "123.0 ms"


def test_format_duration_value_has_no_suffix():
    assert format_duration_value(2.005, None) == ("2.005", Unit.SECOND)