"""Pytest configuration for the intcalc test suite.

Ensures the *src* directory is on *sys.path* so the *intcalc* package can be
imported when running tests without installing the project into the active
virtual environment.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

ROOT_DIR = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT_DIR / "src"
if SRC_DIR.exists() and str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

# ---------------------------------------------------------------------------
# Hypothesis global configuration – suppress the health-check warning when
# function-scoped fixtures are combined with ``@given`` (see property tests).
# ---------------------------------------------------------------------------
settings.register_profile(
    "intcalc_ci", suppress_health_check=(HealthCheck.function_scoped_fixture,)
)
settings.load_profile("intcalc_ci")


class FakeField:
    """In-memory stand-in for an entry widget implementing ``TextField``."""

    def __init__(self, text: str = "", cursor: int | None = None, sel_len: int = 0):
        self.text = text
        self.start = len(text) if cursor is None else cursor
        self.sel_len = sel_len
        self.focused = False

    def get_text(self) -> str:
        return self.text

    def set_text(self, text: str) -> None:
        self.text = text
        self.start, self.sel_len = len(text), 0

    def get_selection(self) -> tuple[int, int]:
        return self.start, self.sel_len

    def replace_selection(self, text: str) -> None:
        from intcalc.validation import get_proposed_text

        self.text = get_proposed_text(self.text, self.start, self.sel_len, text)
        self.start, self.sel_len = self.start + len(text), 0

    def focus(self) -> None:
        self.focused = True

    def move_cursor_to_x(self, x: int) -> None:
        # One character per pixel keeps the arithmetic obvious in tests.
        self.start, self.sel_len = min(max(x, 0), len(self.text)), 0


@pytest.fixture()
def make_field():
    """Factory for :class:`FakeField` instances."""
    return FakeField
