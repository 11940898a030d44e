import string

import pytest
from hypothesis import given, strategies as st

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@given(st.integers(min_value=-10, max_value=300))
def test_is_alpha_matches_ascii_letters(code):
    in_range = 0 <= code < 0x110000
    expected = in_range and chr(code) in string.ascii_letters
    assert is_alpha(code) == expected


@given(st.integers(min_value=-10, max_value=300))
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code and chr(code) in string.digits
    assert is_digit(code) == expected


@given(st.integers(min_value=-10, max_value=300))
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(31) is False
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(127) is False


def test_string_arguments_are_accepted():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_alpha("7") is False
    assert is_print("~") is True


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("٣") is False


@given(st.sampled_from(string.ascii_lowercase))
def test_to_upper_lower_round_trip_str(ch):
    upper = to_upper(ch)
    assert upper.isupper()
    assert to_lower(upper) == ch


@given(st.sampled_from(string.ascii_uppercase))
def test_to_lower_upper_round_trip_int(ch):
    code = ord(ch)
    lower = to_lower(code)
    assert lower == ord(ch.lower())
    assert to_upper(lower) == code


@given(st.integers(min_value=0, max_value=300).filter(lambda n: not is_alpha(n)))
def test_case_conversion_leaves_non_letters(code):
    assert to_upper(code) == code
    assert to_lower(code) == code


def test_case_conversion_keeps_type():
    assert to_upper("a") == "A"
    assert to_lower(ord("A")) == ord("a")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)