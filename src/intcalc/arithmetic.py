from __future__ import annotations

"""Two-operand checked arithmetic behind the *Calculate* action.

:func:`calculate` runs the input gates in a fixed order and raises
:class:`CalculationError` with the message of the first gate that fails.
"""

from enum import Enum

from . import config
from .logger import logger
from .validation import matches_integer_pattern, parse_native_int

__all__ = [
    "Operation",
    "CalculationError",
    "checked_add",
    "checked_subtract",
    "calculate",
    "format_result",
]


class Operation(str, Enum):
    """Operation selected by the radio pair on the form."""

    ADD = "add"
    SUBTRACT = "subtract"


class CalculationError(ValueError):
    """Raised when a calculation attempt is rejected.

    ``str(exc)`` is the message shown to the user.
    """


def _check_native(value: int) -> int:
    if value < config.INT_MIN or value > config.INT_MAX:
        raise OverflowError(f"{value} does not fit a native signed integer")
    return value


def checked_add(a: int, b: int) -> int:  # noqa: D401
    """Return ``a + b``, raising :class:`OverflowError` outside the native range."""
    return _check_native(a + b)


def checked_subtract(a: int, b: int) -> int:  # noqa: D401
    """Return ``a - b``, raising :class:`OverflowError` outside the native range."""
    return _check_native(a - b)


def calculate(a_text: str, b_text: str, operation: Operation) -> int:
    """Validate both operand texts and apply *operation*.

    The range gate bounds the operands only, never the result: ``999 + 1``
    yields ``1000``.
    """
    a_text = (a_text or "").strip()
    b_text = (b_text or "").strip()

    if not a_text or not b_text:
        raise CalculationError(config.MSG_FIELDS_REQUIRED)

    if not matches_integer_pattern(a_text) or not matches_integer_pattern(b_text):
        raise CalculationError(config.MSG_NOT_WHOLE_NUMBER)

    a = parse_native_int(a_text)
    b = parse_native_int(b_text)
    if a is None or b is None:
        raise CalculationError(config.MSG_TOO_LARGE)

    low, high = config.MIN_VALUE, config.MAX_VALUE
    if not (low <= a <= high and low <= b <= high):
        raise CalculationError(config.MSG_OUT_OF_RANGE.format(low=low, high=high))

    op = Operation(operation)
    try:
        if op is Operation.ADD:
            return checked_add(a, b)
        return checked_subtract(a, b)
    except OverflowError as exc:
        logger.warning("Overflow during %s of %d and %d", op.value, a, b)
        raise CalculationError(config.MSG_OVERFLOW) from exc


def format_result(value: int) -> str:
    return config.RESULT_TEMPLATE.format(value=value)
