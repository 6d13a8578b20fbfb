from __future__ import annotations

"""CLI unit tests.

The commands are driven through :pyfunc:`intcalc.cli.main` with an explicit
argv so no subprocess is spawned.
"""

import pytest

from intcalc import config
from intcalc.cli import EXIT_CALCULATION_ERROR, EXIT_INVALID, main


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["add", " 12 ", "7"], "Result: 19"),
        (["sub", "-5", "3"], "Result: -8"),
        (["add", "999", "1"], "Result: 1000"),
    ],
)
def test_calculation_prints_result(capsys, argv, expected):
    main(argv)
    assert capsys.readouterr().out.strip() == expected


def test_calculation_error_goes_to_stderr(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["add", "12.5", "3"])

    assert excinfo.value.code == EXIT_CALCULATION_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == f"Error: {config.MSG_NOT_WHOLE_NUMBER}"


def test_empty_operand_reports_required(capsys):
    with pytest.raises(SystemExit):
        main(["sub", "", "5"])
    assert config.MSG_FIELDS_REQUIRED in capsys.readouterr().err


@pytest.mark.parametrize("text", ["", "-", "-42", "999"])
def test_check_valid(capsys, text):
    main(["check", text])
    assert capsys.readouterr().out.strip() == "valid"


@pytest.mark.parametrize("text", ["1000", "1 2", "1-2", "-1a", "-x", "--5"])
def test_check_invalid(capsys, text):
    with pytest.raises(SystemExit) as excinfo:
        main(["check", text])
    assert excinfo.value.code == EXIT_INVALID
    assert capsys.readouterr().out.strip() == "invalid"


@pytest.mark.parametrize(
    "argv",
    [["add", "-1a", "3"], ["sub", "3", "-x"]],
)
def test_dash_prefixed_operand_reports_format_error(capsys, argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == EXIT_CALCULATION_ERROR
    assert capsys.readouterr().err.strip() == f"Error: {config.MSG_NOT_WHOLE_NUMBER}"


def test_help_still_reaches_subcommand(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["check", "--help"])
    assert excinfo.value.code == 0
    assert "TEXT" in capsys.readouterr().out.upper()


def test_missing_command_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
