#  ---------------------------------------------------------------------------
#  intcalc CLI
#  ---------------------------------------------------------------------------
#  NOTE: The module docstring **must** be the very first statement so that both
#  Python and tooling like Ruff interpret it correctly. The ``__future__``
#  import then follows immediately afterwards, in accordance with PEP 236.
#  ---------------------------------------------------------------------------

"""Light-weight command-line interface for intcalc.

This complements the GUI by exposing the same validation and calculation
rules without a graphical environment.

Example::

    # Add two operands
    intcalc-cli add 12 7

    # Subtract; negative operands are fine as positionals
    intcalc-cli sub -5 3

    # Would this text be allowed to sit in an input field?
    intcalc-cli check -42

Calculation errors are printed to stderr with exit status 2.  ``check`` exits
with status 1 when the text is rejected.
"""

from __future__ import annotations

# Standard library
import argparse
import sys
from typing import Sequence

# Internal imports – keep *after* std-lib for Ruff/I sort rules
from .. import config
from ..arithmetic import CalculationError, Operation, calculate, format_result
from ..logger import logger
from ..validation import is_text_valid_integer

EXIT_INVALID = 1
EXIT_CALCULATION_ERROR = 2

COMMANDS = ("add", "sub", "check")
HELP_FLAGS = ("-h", "--help")


def _build_arg_parser() -> argparse.ArgumentParser:  # noqa: D401
    parser = argparse.ArgumentParser(
        prog="intcalc-cli", description="intcalc command-line interface"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    operand_help = f"Whole number between {config.MIN_VALUE} and {config.MAX_VALUE}"

    # ------------------------------------------------------------------
    # "add" / "sub" – run the two-operand calculation
    # ------------------------------------------------------------------
    for name, help_text in (
        ("add", "Print the sum of two operands"),
        ("sub", "Print the difference of two operands"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("a", help=operand_help)
        cmd.add_argument("b", help=operand_help)

    # ------------------------------------------------------------------
    # "check" – apply the field validation rule to a single text
    # ------------------------------------------------------------------
    check_cmd = sub.add_parser(
        "check", help="Report whether TEXT is acceptable as field content"
    )
    check_cmd.add_argument("text", help="Candidate field text")

    return parser


# ------------------------------------------------------------------
# Command implementations
# ------------------------------------------------------------------


def _cmd_calculate(a_text: str, b_text: str, operation: Operation) -> None:  # noqa: D401
    try:
        value = calculate(a_text, b_text, operation)
    except CalculationError as exc:
        logger.debug("CLI calculation rejected: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(EXIT_CALCULATION_ERROR)
    print(format_result(value))


def _cmd_check(text: str) -> None:  # noqa: D401
    if is_text_valid_integer(text):
        print("valid")
        return
    print("invalid")
    sys.exit(EXIT_INVALID)


# ------------------------------------------------------------------
# Public entrypoint
# ------------------------------------------------------------------


def _positional_argv(argv: Sequence[str] | None) -> list[str]:
    """Mark everything after the command name as positional.

    Operands such as ``-1a`` or ``-x`` are not negative-number literals, so
    argparse would otherwise read them as unknown options.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in COMMANDS:
        return args
    rest = args[1:]
    if "--" in rest or any(flag in rest for flag in HELP_FLAGS):
        return args
    return [args[0], "--", *rest]


def main(argv: Sequence[str] | None = None) -> None:  # noqa: D401
    args = _build_arg_parser().parse_args(_positional_argv(argv))

    if args.command == "add":
        _cmd_calculate(args.a, args.b, Operation.ADD)
    elif args.command == "sub":
        _cmd_calculate(args.a, args.b, Operation.SUBTRACT)
    elif args.command == "check":
        _cmd_check(args.text)
    else:  # pragma: no cover, argparse enforces valid choices
        raise RuntimeError(f"Unhandled command: {args.command}")


if __name__ == "__main__":
    main()
