"""Module entry-point so `python -m intcalc` works.

It simply imports and executes :pymod:`intcalc.launcher`, keeping the single
source of truth for runtime dispatch between GUI & CLI.
"""

from importlib import import_module


def main() -> None:  # noqa: D401
    """Entrypoint that forwards to :pymod:`intcalc.launcher.main`."""

    launcher = import_module("intcalc.launcher")
    launcher.main()


if __name__ == "__main__":
    main()
