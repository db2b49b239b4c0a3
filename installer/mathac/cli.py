"""Command-line surface: flags, help text and console interaction."""

from __future__ import annotations

import argparse
import sys

from mathac.core.models import Mode

PROG = "math-autocorrect"

_MODES_EPILOG = """\
Modes:
  Default (no options)  Skip any existing entries automatically
  Interactive           Ask before overwriting existing entries with different values
  Force                 Overwrite all existing entries without asking
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Math AutoCorrect Installer - Command Line Options",
        epilog=_MODES_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-i", "--interactive",
        dest="mode", action="store_const", const=Mode.INTERACTIVE,
        help="Interactive mode - prompt before overwriting entries",
    )
    parser.add_argument(
        "-f", "--force",
        dest="mode", action="store_const", const=Mode.FORCE,
        help="Force overwrite existing entries without asking",
    )
    parser.add_argument(
        "-h", "--help",
        dest="help", action="store_true",
        help="Show this help message",
    )
    parser.set_defaults(mode=Mode.SKIP)
    return parser


def _option_strings(parser: argparse.ArgumentParser) -> set[str]:
    return {opt for action in parser._actions for opt in action.option_strings}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line.

    Flags match case-insensitively and the last mode flag wins. Only the
    exact option strings are accepted: clustered (``-if``) or valued
    (``--force=1``) forms end up in ``unknown`` with anything else
    unrecognised, and turn on ``help``.
    """
    parser = build_parser()
    known = _option_strings(parser)
    args, unknown = [], []
    for arg in (sys.argv[1:] if argv is None else argv):
        folded = arg.lower()
        if folded in known:
            args.append(folded)
        else:
            unknown.append(arg)

    namespace = parser.parse_args(args)
    namespace.unknown = unknown
    if unknown:
        namespace.help = True
    return namespace


def print_help() -> None:
    build_parser().print_help()


def console_confirm(prompt: str) -> bool:
    """Ask on the console; only ``y`` / ``yes`` count as agreement."""
    print(prompt)
    try:
        response = input("Do you want to overwrite it? (y/n): ")
    except EOFError:
        return False
    return response.strip().lower() in ("y", "yes")


def wait_for_keypress(message: str = "Press any key to exit...") -> None:
    print(f"\n{message}", flush=True)
    if sys.platform == "win32":
        import msvcrt
        msvcrt.getwch()
        return
    try:
        input()
    except EOFError:
        pass
