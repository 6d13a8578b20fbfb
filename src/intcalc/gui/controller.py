from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from ..form import FormState
from ..input_filter import (
    PasteInterceptor,
    TextField,
    accepts_key,
    accepts_text_input,
)
from ..logger import logger

if TYPE_CHECKING:
    from .view import MainView

# Returned from Tk event handlers to stop the default class binding.
BREAK = "break"


class Controller:
    """
    Orchestrates the application's logic, connecting the view and the model.
    It filters edits before they land in a field, runs calculations and
    mirrors the form state back into the UI.
    """

    def __init__(self, model: FormState, view: MainView):
        self.model = model
        self.view = view
        self.paste_interceptor = PasteInterceptor()

    def start(self) -> None:
        """Builds the form and shows the initial hint."""
        self.view.setup_form_ui()
        self.view.update_status("Enter two whole numbers and press Calculate.")

    # ------------------------------------------------------------------
    # Edit filtering
    # ------------------------------------------------------------------

    def on_key_press(self, field: TextField, keysym: str, char: str) -> str | None:
        """Filter a key press on *field*; ``"break"`` rejects it."""
        if not accepts_key(keysym):
            logger.debug("Rejected key %s", keysym)
            return BREAK
        # Navigation keys carry no character; BackSpace, Delete, Tab and Ctrl
        # chords carry a control character.  Both belong to the entry.
        if not char or unicodedata.category(char[0]) == "Cc":
            return None
        if not accepts_text_input(field, char):
            logger.debug("Rejected input %r into %r", char, field.get_text())
            return BREAK
        return None

    def on_paste(self) -> str | None:
        """Intercept a paste into the focused field.

        Pastes with no integer field focused pass through untouched.
        """
        field = self.view.focused_field()
        if field is None:
            return None
        clipboard = self.view.clipboard_text()
        if not self.paste_interceptor.execute(field, clipboard):
            logger.debug("Suppressed paste of %r", clipboard)
        return BREAK

    def on_paste_selection(self, field: TextField, x: int) -> str:
        """Intercept a middle-click paste of the PRIMARY selection at *x*."""
        field.move_cursor_to_x(x)
        text = self.view.primary_selection_text()
        if not self.paste_interceptor.execute(field, text):
            logger.debug("Suppressed selection paste of %r", text)
        return BREAK

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def calculate(self) -> None:
        """Reads the form, computes and displays the result or error."""
        self.model.a_text = self.view.a_field.get_text()
        self.model.b_text = self.view.b_field.get_text()
        self.model.operation = self.view.get_operation()

        if self.model.calculate():
            logger.info(
                "Calculated %s of %r and %r: %s",
                self.model.operation.value,
                self.model.a_text,
                self.model.b_text,
                self.model.result,
            )
            self.view.update_status("Calculation complete.")
        else:
            logger.info("Calculation rejected: %s", self.model.error)
            self.view.update_status("Please correct the input.")
        self._render_messages()

    def clear(self) -> None:
        """Resets both fields, selects Add and focuses the first field."""
        self.model.clear()
        self.view.a_field.set_text(self.model.a_text)
        self.view.b_field.set_text(self.model.b_text)
        self.view.set_operation(self.model.operation)
        self._render_messages()
        self.view.a_field.focus()
        logger.info("Form cleared.")
        self.view.update_status("Form cleared.")

    def _render_messages(self) -> None:
        self.view.error_var.set(self.model.error)
        self.view.result_var.set(self.model.result)
