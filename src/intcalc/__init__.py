"""intcalc package.

A two-operand integer calculator with live input validation and a simple
ttkbootstrap GUI.
"""

__all__ = [
    "config",
    "validation",
    "arithmetic",
    "form",
    "input_filter",
]
