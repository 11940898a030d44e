import pytest
from hypothesis import given, strategies as st

from ftkit.numbers import atoi, itoa

INT32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("   42", 42),
        ("   -123abc", -123),
        ("+456", 456),
        ("  2147483647", 2147483647),
        ("  -2147483648", -2147483648),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("  -") == 0


def test_atoi_single_sign_only():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_whitespace_set():
    assert atoi("\t\n\v\f\r 7") == 7


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == 12


@given(INT32)
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


@given(INT32)
def test_itoa_matches_decimal(n):
    assert int(itoa(n)) == n


def test_itoa_limits():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_atoi_wraps_to_int32_range():
    result = atoi("99999999999")
    assert -(2**31) <= result <= 2**31 - 1


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")
    with pytest.raises(TypeError):
        itoa(2.0)