from decimal import Decimal

import pytest

from hyperbench.numeric import (
    fmax,
    fmin,
    format_number,
    random_environment_offset,
    to_usize,
)


@pytest.mark.parametrize(
    "vals, expected",
    [
        ([1.0], 1.0),
        ([-1.0], -1.0),
        ([-2.0, -1.0], -1.0),
        ([-1.0, 1.0], 1.0),
        ([-1.0, 1.0, 0.0], 1.0),
    ],
)
def test_max(vals, expected):
    assert fmax(vals) == pytest.approx(expected)


def test_min():
    assert fmin([3.0, -2.5, 7.0]) == -2.5


def test_max_of_empty_raises():
    with pytest.raises(ValueError):
        fmax([])


def test_to_usize():
    assert to_usize(5) == 5
    assert to_usize(Decimal("3.7")) == 3
    assert to_usize(Decimal("20")) == 20


def test_to_usize_rejects_negative():
    with pytest.raises(ValueError):
        to_usize(-1)
    with pytest.raises(ValueError):
        to_usize(Decimal("-2"))


def test_format_number():
    assert format_number(42) == "42"
    assert format_number(Decimal("0.10")) == "0.10"
    assert format_number(Decimal("1E+2")) == "100"


def test_random_environment_offset():
    offset = random_environment_offset()
    assert len(offset) < 4096
    assert set(offset) <= {"X"}