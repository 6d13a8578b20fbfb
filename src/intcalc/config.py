from __future__ import annotations

import os
from typing import Final

"""Centralised configuration for intcalc.

Operand bounds, user-facing messages and GUI constants live here.  Core code
reads the bounds through this module (``config.MAX_VALUE``) rather than
importing the names, so tests can monkeypatch them.

Supports optional ``INTCALC_THEME`` and ``INTCALC_LOG_LEVEL`` environment
variables."""

# -----------------------------------------------------------------------------
# Operand bounds.
# -----------------------------------------------------------------------------
MIN_VALUE: Final[int] = -999
MAX_VALUE: Final[int] = 999

# Width of a native signed integer (32-bit).  Parsing and checked arithmetic
# signal overflow outside these limits.
INT_MIN: Final[int] = -(2**31)
INT_MAX: Final[int] = 2**31 - 1

# Optional leading minus, then one or more ASCII digits, nothing else.
INTEGER_PATTERN: Final[str] = r"^-?[0-9]+$"

# -----------------------------------------------------------------------------
# User-facing messages.
# -----------------------------------------------------------------------------
MSG_FIELDS_REQUIRED: Final[str] = "Both fields must be filled."
MSG_NOT_WHOLE_NUMBER: Final[str] = (
    "Input must be a whole number (no spaces or separators)."
)
MSG_TOO_LARGE: Final[str] = "Number is too large or invalid."
MSG_OUT_OF_RANGE: Final[str] = "Numbers must be within the range {low}..{high}."
MSG_OVERFLOW: Final[str] = "Overflow occurred during calculation."
RESULT_TEMPLATE: Final[str] = "Result: {value}"

# -----------------------------------------------------------------------------
# GUI constants.
# -----------------------------------------------------------------------------
APP_TITLE: Final[str] = "intcalc - Integer Calculator"
APP_GEOMETRY: Final[str] = "420x340"
THEME: Final[str] = os.getenv("INTCALC_THEME", "darkly")

# -----------------------------------------------------------------------------
# Logging.
# -----------------------------------------------------------------------------
LOG_LEVEL: Final[str] = os.getenv("INTCALC_LOG_LEVEL", "INFO").upper()
