from decimal import Decimal

import pytest

from hyperbench.parameters import (
    ParameterScanError,
    ParameterValue,
    RangeStep,
    tokenize,
)


def test_integer_range():
    values = list(RangeStep(0, 10, 3))
    assert len(values) == 4
    assert values[0] == 0
    assert values[3] == 9
    assert len(RangeStep(0, 10, 3)) == 4


def test_decimal_range():
    values = list(RangeStep(Decimal(0), Decimal(1), Decimal("0.1")))
    assert len(values) == 11
    assert values[0] == Decimal(0)
    assert values[10] == Decimal(1)


def test_range_is_reiterable():
    scan = RangeStep(30, 45, 5)
    assert list(scan) == [30, 35, 40, 45]
    assert list(scan) == [30, 35, 40, 45]


def test_range_step_validate():
    assert list(RangeStep(0, 10, 3)) == [0, 3, 6, 9]
    assert len(RangeStep(Decimal(0), Decimal(1), Decimal("0.1"))) == 11

    with pytest.raises(ParameterScanError, match="^Empty parameter range$"):
        RangeStep(11, 10, 1)
    with pytest.raises(ParameterScanError, match="^Zero is not a valid parameter step$"):
        RangeStep(0, 10, 0)
    with pytest.raises(ParameterScanError, match="^Parameter range is too large$"):
        RangeStep(0, 100_001, 1)


def test_negative_step_is_rejected():
    with pytest.raises(ParameterScanError, match="too large"):
        RangeStep(0, 10, -1)


def test_parameter_value_str():
    assert str(ParameterValue("master")) == "master"
    assert str(ParameterValue(7)) == "7"
    assert str(ParameterValue(Decimal("0.30"))) == "0.30"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", [""]),
        ("foo", ["foo"]),
        (" ", [" "]),
        (r"hello\, world!", ["hello, world!"]),
        (r"\,", [","]),
        (r"\,\,\,", [",,,"]),
        (r"\n", [r"\n"]),
        (r"\\", ["\\"]),
        (r"\\\,", [r"\,"]),
    ],
)
def test_tokenize_single_value(text, expected):
    assert tokenize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo,bar,baz", ["foo", "bar", "baz"]),
        ("hello world,foo", ["hello world", "foo"]),
        (r"hello\,world!,baz", ["hello,world!", "baz"]),
    ],
)
def test_tokenize_multiple_values(text, expected):
    assert tokenize(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo,,bar", ["foo", "", "bar"]),
        (",bar", ["", "bar"]),
        ("bar,", ["bar", ""]),
        (",,", ["", "", ""]),
    ],
)
def test_tokenize_empty_values(text, expected):
    assert tokenize(text) == expected


def test_tokenize_trailing_backslash():
    assert tokenize("a\\") == ["a\\"]