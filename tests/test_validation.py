import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from intcalc.validation import (
    get_proposed_text,
    is_text_valid_integer,
    parse_native_int,
)

# -----------------------------------------------------------------------------
# Strategies
# -----------------------------------------------------------------------------

# Mostly digits and minus signs, plus a few characters that must never pass
# (space, plus, a non-ASCII digit, a separator).
field_texts = st.text(alphabet="-0123456789 +,.٣", max_size=6)
numbers = st.integers(min_value=-5000, max_value=5000)


def _expected(text: str) -> bool:
    if text in ("", "-"):
        return True
    body = text[1:] if text.startswith("-") else text
    if not body or not (body.isascii() and body.isdigit()):
        return False
    return -999 <= int(text) <= 999


@pytest.mark.parametrize(
    "text", ["", "-", "0", "-0", "7", "999", "-999", "007", "-12"]
)
def test_accepts_in_progress_and_in_range_values(text):
    assert is_text_valid_integer(text)


@pytest.mark.parametrize(
    "text",
    ["1000", "-1000", "--1", "1-", "+5", " 5", "5 ", "1,000", "12.5", "abc", "٣"],
)
def test_rejects_malformed_or_out_of_range(text):
    assert not is_text_valid_integer(text)


def test_none_is_treated_as_empty():
    assert is_text_valid_integer(None)


def test_trailing_newline_is_not_a_match():
    assert not is_text_valid_integer("12\n")


def test_overflowing_literal_is_rejected():
    assert not is_text_valid_integer("99999999999999999999")
    assert parse_native_int("99999999999999999999") is None


def test_parse_native_int_limits():
    assert parse_native_int("2147483647") == 2**31 - 1
    assert parse_native_int("-2147483648") == -(2**31)
    assert parse_native_int("2147483648") is None
    assert parse_native_int("12a") is None


@given(text=field_texts)
@settings(max_examples=300)
def test_predicate_matches_contract(text):
    assert is_text_valid_integer(text) == _expected(text)


@given(value=numbers)
def test_predicate_bounds_numeric_values(value):
    assert is_text_valid_integer(str(value)) == (-999 <= value <= 999)


def test_proposed_text_splices_selection():
    assert get_proposed_text("abc", 1, 1, "X") == "aXc"


@pytest.mark.parametrize(
    "text, start, length, incoming, expected",
    [
        ("", 0, 0, "5", "5"),
        ("12", 2, 0, "3", "123"),
        ("12", 0, 0, "-", "-12"),
        ("123", 0, 3, "9", "9"),
        (None, 0, 0, "4", "4"),
    ],
)
def test_proposed_text_cases(text, start, length, incoming, expected):
    assert get_proposed_text(text, start, length, incoming) == expected


@given(
    text=st.text(max_size=10),
    data=st.data(),
    incoming=st.text(max_size=5),
)
def test_proposed_text_is_pure_splice(text, data, incoming):
    start = data.draw(st.integers(min_value=0, max_value=len(text)))
    length = data.draw(st.integers(min_value=0, max_value=len(text) - start))

    result = get_proposed_text(text, start, length, incoming)

    assert result.startswith(text[:start])
    assert result.endswith(text[start + length :])
    assert len(result) == len(text) - length + len(incoming)
    # Calling twice must not depend on hidden state.
    assert get_proposed_text(text, start, length, incoming) == result
