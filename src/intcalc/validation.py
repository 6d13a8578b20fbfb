from __future__ import annotations

"""Pure validation helpers shared by the keystroke filter, the paste
interceptor and the calculation step.

Nothing in here touches a widget, so every function can be exercised without
a display.
"""

import re

from . import config

__all__ = [
    "INTEGER_RE",
    "matches_integer_pattern",
    "parse_native_int",
    "is_text_valid_integer",
    "get_proposed_text",
]

INTEGER_RE = re.compile(config.INTEGER_PATTERN)


def matches_integer_pattern(text: str) -> bool:
    """Return ``True`` if *text* is an optional ``-`` followed by digits only."""
    return INTEGER_RE.fullmatch(text) is not None


def parse_native_int(text: str) -> int | None:
    """Parse *text* as a 32-bit signed integer.

    Returns ``None`` when *text* is not an integer literal or when the value
    does not fit between :data:`config.INT_MIN` and :data:`config.INT_MAX`.
    """
    try:
        value = int(text)
    except ValueError:
        return None
    if value < config.INT_MIN or value > config.INT_MAX:
        return None
    return value


def is_text_valid_integer(text: str | None) -> bool:  # noqa: D401
    """Decide whether *text* may exist in an integer field while editing.

    The empty string and a lone ``-`` are accepted as in-progress values.
    Anything else must be a whole number within the configured range.
    """
    if not text:
        return True
    if text == "-":
        return True
    if not matches_integer_pattern(text):
        return False
    value = parse_native_int(text)
    if value is None:
        return False
    return config.MIN_VALUE <= value <= config.MAX_VALUE


def get_proposed_text(
    text: str | None, sel_start: int, sel_len: int, input_text: str
) -> str:
    """Return *text* with the selected span replaced by *input_text*."""
    text = text or ""
    return text[:sel_start] + input_text + text[sel_start + sel_len :]
