from __future__ import annotations

# ruff: noqa: E402

"""Unified launcher for intcalc.

Running the *intcalc* console-script without any arguments opens the
calculator window.  As soon as at least one positional argument is supplied we
delegate to :pyfunc:`intcalc.cli.main`, so ``intcalc add 2 3`` works from a
terminal with no display.
"""

import sys
from importlib import import_module


def main(argv: list[str] | None = None) -> None:  # noqa: D401
    """Dispatch to GUI or CLI depending on *argv* length."""

    args = sys.argv[1:] if argv is None else argv

    if not args:
        # No sub-command → launch desktop application.
        gui = import_module("intcalc.gui.__main__")
        gui.main()
    else:
        cli = import_module("intcalc.cli")
        cli.main([*args])


if __name__ == "__main__":
    main()
