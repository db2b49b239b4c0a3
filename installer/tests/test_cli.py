from unittest.mock import patch

import pytest

from mathac.cli import console_confirm, parse_args, print_help
from mathac.core.models import Mode


def test_default_mode_is_skip():
    args = parse_args([])
    assert args.mode is Mode.SKIP
    assert args.help is False
    assert args.unknown == []


@pytest.mark.parametrize("flag, mode", [
    ("-i", Mode.INTERACTIVE),
    ("--interactive", Mode.INTERACTIVE),
    ("-f", Mode.FORCE),
    ("--force", Mode.FORCE),
    ("-F", Mode.FORCE),
    ("--Interactive", Mode.INTERACTIVE),
])
def test_mode_flags(flag, mode):
    assert parse_args([flag]).mode is mode


def test_last_mode_flag_wins():
    assert parse_args(["-f", "-i"]).mode is Mode.INTERACTIVE
    assert parse_args(["--interactive", "--force"]).mode is Mode.FORCE


@pytest.mark.parametrize("flag", ["-h", "--help", "--HELP"])
def test_help_flag(flag):
    assert parse_args([flag]).help is True


@pytest.mark.parametrize("arg", ["--Verbose", "extra", "--inter", "--force=1", "-f=x", "-if", "-fi", "-ih"])
def test_unknown_argument_forces_help(arg):
    args = parse_args(["-f", arg])
    assert args.unknown == [arg]
    assert args.help is True


def test_print_help_lists_options_and_modes(capsys):
    print_help()
    out = capsys.readouterr().out
    assert "-i, --interactive" in out
    assert "-f, --force" in out
    assert "-h, --help" in out
    assert "Overwrite all existing entries without asking" in out


@pytest.mark.parametrize("answer, expected", [
    ("y", True),
    (" YES ", True),
    ("n", False),
    ("", False),
    ("sure", False),
])
def test_console_confirm(answer, expected, capsys):
    with patch("builtins.input", return_value=answer) as mock_input:
        assert console_confirm("Entry '\\union' already exists.") is expected
    mock_input.assert_called_once_with("Do you want to overwrite it? (y/n): ")
    assert "Entry '\\union' already exists." in capsys.readouterr().out


def test_console_confirm_treats_eof_as_no():
    with patch("builtins.input", side_effect=EOFError):
        assert console_confirm("prompt") is False


@pytest.mark.parametrize("arg", ["--force=1", "-if"])
def test_malformed_flags_do_not_change_mode(arg):
    args = parse_args([arg])
    assert args.mode is Mode.SKIP
    assert args.unknown == [arg]
