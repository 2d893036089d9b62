import base64

import pytest

from levelboard.parsing import decode_text_safely, parse_optional_number


def b64(text):
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


@pytest.mark.parametrize("text", ["Hello World", "Jöröd ✓", "a", "ab", "abc", ""])
def test_decode_text_safely_recovers_encoded_text(text):
    assert decode_text_safely(b64(text)) == text


@pytest.mark.parametrize(
    "value",
    [
        "not base64!",
        "abc",
        "ignoredTail",
        "QQ",  # unpadded
        "QQ=",
        "SGVsbG8_V29ybGQ=",  # url-safe alphabet
        " QQ== ",
    ],
)
def test_decode_text_safely_returns_invalid_input_unchanged(value):
    assert decode_text_safely(value) == value


def test_decode_text_safely_keeps_input_when_bytes_are_not_utf8():
    # "////" is valid base64 for b"\xff\xff\xff"
    assert decode_text_safely("////") == "////"


@pytest.mark.parametrize("value", ["", "   ", "abc", "12abc", "nan", "inf", "-Infinity", "1e999", "0x10", "1_000"])
def test_parse_optional_number_returns_none_for_non_numbers(value):
    assert parse_optional_number(value) is None


def test_parse_optional_number_parses_decimals_and_integers():
    assert parse_optional_number("12.5") == 12.5

    downloads = parse_optional_number("120")
    assert downloads == 120
    assert isinstance(downloads, int)

    assert parse_optional_number(" 7 ") == 7
    assert parse_optional_number("-3") == -3
    assert parse_optional_number("0") == 0
    assert parse_optional_number(".5") == 0.5
    assert parse_optional_number("1e3") == 1000.0


@pytest.mark.parametrize("value", ["9" * 5000, "-" + "9" * 5000])
def test_parse_optional_number_returns_none_past_the_integer_digit_limit(value):
    assert parse_optional_number(value) is None


@pytest.mark.parametrize("value", ["١٢٣", "１２", "٣.٥"])
def test_parse_optional_number_accepts_ascii_digits_only(value):
    assert parse_optional_number(value) is None
