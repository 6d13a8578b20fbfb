from __future__ import annotations

"""Edit filtering for integer fields.

Both the keystroke filter and the paste interceptor compute the text a field
*would* hold after the pending edit and accept the edit only if that text
passes :func:`intcalc.validation.is_text_valid_integer`.  The field itself is
reached through the small :class:`TextField` protocol so the rules can be
tested without a toolkit.
"""

from typing import Protocol

from .validation import get_proposed_text, is_text_valid_integer

__all__ = [
    "TextField",
    "accepts_key",
    "accepts_text_input",
    "PasteInterceptor",
]

# Key symbols rejected at key-press level regardless of field content.
REJECTED_KEYSYMS = frozenset({"space"})


class TextField(Protocol):
    """Text-input abstraction used by the filters."""

    def get_text(self) -> str: ...

    def set_text(self, text: str) -> None: ...

    def get_selection(self) -> tuple[int, int]:
        """Return ``(start, length)`` of the span an insertion would replace.

        Length is 0 unless the insert cursor lies within a selection.
        """
        ...

    def replace_selection(self, text: str) -> None: ...

    def focus(self) -> None: ...

    def move_cursor_to_x(self, x: int) -> None:
        """Place the insert cursor under pixel offset *x*, clearing no text."""
        ...


def proposed_text_for(field: TextField, input_text: str) -> str:
    start, length = field.get_selection()
    return get_proposed_text(field.get_text(), start, length, input_text)


def accepts_key(keysym: str) -> bool:  # noqa: D401
    """Return ``False`` for keys blocked before any text is composed."""
    return keysym not in REJECTED_KEYSYMS


def accepts_text_input(field: TextField, text: str) -> bool:
    """Decide whether typing *text* into *field* may proceed."""
    if not text or text.isspace():
        return False
    return is_text_valid_integer(proposed_text_for(field, text))


class PasteInterceptor:
    """Permission predicate plus action for paste requests on integer fields.

    :meth:`can_execute` decides, :meth:`execute` performs the replacement.
    A ``None`` field means no text field holds focus; such pastes are left to
    the toolkit's default behaviour.
    """

    @staticmethod
    def _normalise(clipboard: str | None) -> str:
        return (clipboard or "").strip()

    def can_execute(self, field: TextField | None, clipboard: str | None) -> bool:
        if field is None:
            return True
        return is_text_valid_integer(
            proposed_text_for(field, self._normalise(clipboard))
        )

    def execute(self, field: TextField | None, clipboard: str | None) -> bool:
        """Paste into *field* if permitted.

        Returns ``True`` when the field was modified.  A rejected paste is
        dropped silently.
        """
        if field is None or not self.can_execute(field, clipboard):
            return False
        field.replace_selection(self._normalise(clipboard))
        return True
