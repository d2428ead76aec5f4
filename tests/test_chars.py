import string

import pytest

from pipeflow.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII)
def test_is_print_matches_printable_range(ch):
    assert is_print(ch) == (ch.isprintable() and ch.isascii())


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_digit("٣") is False


def test_integer_codes_accepted():
    assert is_alpha(ord("Q")) is True
    assert is_digit(ord("Q")) is False


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_upper(to_lower(ch)) == ch


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_non_letters(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_case_conversion_keeps_integer_type():
    assert to_lower(ord("M")) == ord("m")
    assert to_upper(ord("m")) == ord("M")


def test_eof_marker_passes_through():
    assert to_lower(-1) == -1
    assert to_upper(-1) == -1


def test_negative_signed_char_is_folded():
    assert to_lower(-128) == 128
    assert to_upper(-2) == to_lower(-2)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        to_lower(1.5)