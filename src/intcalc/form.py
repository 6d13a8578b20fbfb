from __future__ import annotations

"""Form model: the two field texts, the selected operation and the messages
currently on display."""

from dataclasses import dataclass

from .arithmetic import CalculationError, Operation, calculate, format_result


@dataclass
class FormState:
    """State of the arithmetic form.

    ``error`` and ``result`` are mutually exclusive; at most one of them is
    non-empty after any action.
    """

    a_text: str = ""
    b_text: str = ""
    operation: Operation = Operation.ADD
    error: str = ""
    result: str = ""

    def clear_messages(self) -> None:
        self.error = ""
        self.result = ""

    def calculate(self) -> bool:
        """Run the calculation on the current texts.

        Returns ``True`` when a result is displayed, ``False`` when an error
        message was set instead.
        """
        self.clear_messages()
        try:
            value = calculate(self.a_text, self.b_text, self.operation)
        except CalculationError as exc:
            self.error = str(exc)
            return False
        self.result = format_result(value)
        return True

    def clear(self) -> None:
        """Reset both texts, select *Add* and drop any message."""
        self.a_text = ""
        self.b_text = ""
        self.operation = Operation.ADD
        self.clear_messages()
