from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING

import ttkbootstrap as tb
from ttkbootstrap.tooltip import ToolTip

from .. import config
from ..arithmetic import Operation

if TYPE_CHECKING:
    from .controller import Controller


class EntryField:
    """Adapts a ttk entry to the :class:`intcalc.input_filter.TextField` protocol."""

    def __init__(self, entry: tb.Entry):
        self.entry = entry

    def get_text(self) -> str:
        return self.entry.get()

    def set_text(self, text: str) -> None:
        self.entry.delete(0, tk.END)
        self.entry.insert(0, text)

    def get_selection(self) -> tuple[int, int]:
        # Tk only types over the selection when the insert cursor is inside it.
        insert = self.entry.index(tk.INSERT)
        if self.entry.selection_present():
            start = self.entry.index("sel.first")
            end = self.entry.index("sel.last")
            if start <= insert <= end:
                return start, end - start
        return insert, 0

    def replace_selection(self, text: str) -> None:
        start, length = self.get_selection()
        if length:
            self.entry.delete(start, start + length)
        self.entry.insert(start, text)
        self.entry.icursor(start + len(text))
        self.entry.selection_clear()

    def focus(self) -> None:
        self.entry.focus_set()

    def move_cursor_to_x(self, x: int) -> None:
        self.entry.icursor(f"@{x}")


class MainView:
    """Handles the creation and layout of all GUI widgets."""

    def __init__(self, root: tb.Window, controller: Controller | None = None):
        self.root = root
        self.controller: Controller | None = controller
        self._setup_style()

        # Widget placeholders
        self.a_field: EntryField | None = None
        self.b_field: EntryField | None = None
        self.calc_button: tb.Button | None = None
        self.operation_var = tk.StringVar(value=Operation.ADD.value)
        self.error_var = tk.StringVar()
        self.result_var = tk.StringVar()

        self.status_var = tk.StringVar()
        self.status_bar = tb.Label(
            self.root, textvariable=self.status_var, relief=tk.SUNKEN, anchor="w"
        )
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)

    # ------------------------------------------------------------------
    # Dependency injection helpers
    # ------------------------------------------------------------------

    def set_controller(self, controller: Controller) -> None:  # noqa: D401
        """Link the **already-constructed** controller to this view."""
        self.controller = controller

    def _setup_style(self) -> None:
        """Configures ttkbootstrap styles and fonts."""
        style = tb.Style()
        default_font = ("Segoe UI", 10)
        heading_font = ("Segoe UI", 12, "bold")
        style.configure("TLabel", font=default_font)
        style.configure("Heading.TLabel", font=heading_font)
        style.configure("TButton", font=default_font, padding=5)
        style.configure("TEntry", font=default_font, padding=5)

    def update_status(self, text: str) -> None:
        """Updates the text in the status bar."""
        self.status_var.set(text)

    # ------------------------------------------------------------------
    # Accessors used by the controller
    # ------------------------------------------------------------------

    def get_operation(self) -> Operation:
        return Operation(self.operation_var.get())

    def set_operation(self, operation: Operation) -> None:
        self.operation_var.set(Operation(operation).value)

    def focused_field(self) -> EntryField | None:
        """Return the entry field holding keyboard focus, if any."""
        focused = self.root.focus_get()
        for field in (self.a_field, self.b_field):
            if field is not None and field.entry is focused:
                return field
        return None

    def clipboard_text(self) -> str:
        """Return the clipboard as plain text, ``""`` when it is empty."""
        try:
            return self.root.clipboard_get()
        except tk.TclError:
            return ""

    def primary_selection_text(self) -> str:
        """Return the X11 PRIMARY selection, ``""`` when there is none."""
        try:
            return self.root.selection_get(selection="PRIMARY")
        except tk.TclError:
            return ""

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def setup_form_ui(self) -> None:
        """Creates the two-operand form."""
        tb.Label(self.root, text="Integer Calculator", style="Heading.TLabel").pack(
            pady=(15, 10)
        )

        range_hint = f"Whole number from {config.MIN_VALUE} to {config.MAX_VALUE}"
        self.a_field = self._create_operand_row("First number:", range_hint)
        self.b_field = self._create_operand_row("Second number:", range_hint)

        op_frame = tb.Frame(self.root)
        op_frame.pack(pady=5)
        for text, operation in (("Add", Operation.ADD), ("Subtract", Operation.SUBTRACT)):
            tb.Radiobutton(
                op_frame,
                text=text,
                value=operation.value,
                variable=self.operation_var,
            ).pack(side=tk.LEFT, padx=10)

        frame = tb.Frame(self.root)
        frame.pack(pady=10)
        self.calc_button = tb.Button(
            frame,
            text="Calculate",
            style="primary.TButton",
            command=self.controller.calculate,
        )
        self.calc_button.pack(side=tk.LEFT, padx=5)
        tb.Button(
            frame,
            text="Clear",
            style="secondary.TButton",
            command=self.controller.clear,
        ).pack(side=tk.LEFT, padx=5)

        tb.Label(
            self.root, textvariable=self.error_var, style="danger.TLabel"
        ).pack(pady=(5, 0))
        tb.Label(
            self.root, textvariable=self.result_var, style="success.TLabel"
        ).pack(pady=(0, 5))

        self.root.bind("<Escape>", lambda e: self.controller.clear())
        self.a_field.focus()

    def _create_operand_row(self, label: str, hint: str) -> EntryField:
        """Creates a labelled integer entry with its edit filters bound."""
        frame = tb.Frame(self.root)
        frame.pack(pady=5, padx=20, fill=tk.X)
        tb.Label(frame, text=label, width=15).pack(side=tk.LEFT, padx=(0, 5))
        entry = tb.Entry(frame, width=12)
        entry.pack(side=tk.LEFT, fill=tk.X, expand=True)
        ToolTip(entry, hint)

        field = EntryField(entry)
        entry.bind(
            "<KeyPress>",
            lambda e, f=field: self.controller.on_key_press(f, e.keysym, e.char),
        )
        entry.bind("<<Paste>>", lambda e: self.controller.on_paste())
        # Middle-click paste inserts PRIMARY at the pointer, bypassing <<Paste>>.
        entry.bind(
            "<<PasteSelection>>",
            lambda e, f=field: self.controller.on_paste_selection(f, e.x),
        )
        entry.bind("<Return>", lambda e: self.calc_button.invoke())
        return field
