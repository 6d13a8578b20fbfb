"""Makes ``python -m intcalc.cli`` behave like the command-line script.

It simply calls :pyfunc:`intcalc.cli.main`.
"""

from importlib import import_module


def main() -> None:  # noqa: D401
    cli = import_module("intcalc.cli")
    cli.main()


if __name__ == "__main__":
    main()
