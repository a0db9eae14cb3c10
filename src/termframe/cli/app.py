"""CLI application entry point and command routing for termframe.

This module is the **sole error boundary** for the application.  It
catches :class:`~termframe.exceptions.TermframeError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages through the console proxy and returning
well-defined exit codes.

Commands
--------
* ``termframe frame LINE... [--border C]``
* ``termframe info|warn|error LINE... [--heading H]``
* ``termframe ask TYPE QUESTION [--not-understood MSG]``
* ``termframe --version``

Each ``LINE`` argument becomes one line of the rendered message.
"""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal
from typing import TYPE_CHECKING

from termframe.cli import exit_codes
from termframe.cli.console import console
from termframe.exceptions import TermframeError
from termframe.version import __version__

if TYPE_CHECKING:
    from termframe.core.config import PromptEngineBuilder

ASK_METHODS: dict[str, str] = {
    "string": "ask_string",
    "bool": "ask_bool",
    "byte": "ask_byte",
    "short": "ask_short",
    "int": "ask_int",
    "long": "ask_long",
    "biginteger": "ask_big_integer",
    "bigdecimal": "ask_big_decimal",
    "float": "ask_float",
    "double": "ask_double",
}
"""Maps the ``ask`` command's TYPE argument to a PromptEngine method."""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="termframe",
        description="Framed console messages and typed prompts.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    commands = parser.add_subparsers(dest="command")

    frame_cmd = commands.add_parser("frame", help="Draw a frame around text.")
    frame_cmd.add_argument("lines", nargs="+", metavar="LINE")
    frame_cmd.add_argument("--border", default=None, help="Border character.")

    for name, help_text in (
        ("info", "Print a headed info frame to stdout."),
        ("warn", "Print a headed warning frame to stderr."),
        ("error", "Print a headed error frame to stderr."),
    ):
        message_cmd = commands.add_parser(name, help=help_text)
        message_cmd.add_argument("lines", nargs="+", metavar="LINE")
        message_cmd.add_argument("--heading", default=None)
        message_cmd.add_argument("--border", default=None, help="Border character.")

    ask_cmd = commands.add_parser(
        "ask",
        help="Ask a question on stdout and read answers from stdin.",
    )
    ask_cmd.add_argument("type", choices=sorted(ASK_METHODS))
    ask_cmd.add_argument("question")
    ask_cmd.add_argument("--not-understood", default=None)
    ask_cmd.add_argument("--yes", default=None, help="Positive answer pattern.")
    ask_cmd.add_argument("--no", default=None, help="Negative answer pattern.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _builder_from_args(args: argparse.Namespace) -> PromptEngineBuilder:
    """Translate command-line options into a configured builder."""
    from termframe.core.config import PromptEngineBuilder

    builder = PromptEngineBuilder()
    border = getattr(args, "border", None)
    heading = getattr(args, "heading", None)
    if border is not None:
        builder = {
            "frame": builder.info_frame,
            "info": builder.info_frame,
            "warn": builder.warning_frame,
            "error": builder.error_frame,
        }[args.command](border)
    if heading is not None:
        builder = {
            "info": builder.info_heading,
            "warn": builder.warning_heading,
            "error": builder.error_heading,
        }[args.command](heading)
    if getattr(args, "yes", None) is not None:
        builder = builder.positive(args.yes)
    if getattr(args, "no", None) is not None:
        builder = builder.negative(args.no)
    return builder


def _handle_message(args: argparse.Namespace) -> int:
    """Render one of the framing commands."""
    from termframe.infra.token_source import StreamTokenSource

    engine = _builder_from_args(args).build(StreamTokenSource())
    message = "\n".join(args.lines)
    emit = {
        "frame": engine.print,
        "info": engine.info,
        "warn": engine.warn,
        "error": engine.err,
    }[args.command]
    emit(message)
    return exit_codes.SUCCESS


def _handle_ask(args: argparse.Namespace) -> int:
    """Ask a typed question and print the accepted value to stdout."""
    from termframe.infra.token_source import StreamTokenSource

    engine = _builder_from_args(args).build(StreamTokenSource())
    ask = getattr(engine, ASK_METHODS[args.type])
    value = ask(args.question, args.not_understood)
    if isinstance(value, int) and not isinstance(value, bool):
        # str(int) is capped by sys.get_int_max_str_digits; str(Decimal) is not.
        value = Decimal(value)
    print(value)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the termframe CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "ask":
        return _handle_ask(args)

    return _handle_message(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Wraps :func:`main` and guarantees the process never exits with a raw
    stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TermframeError as exc:
        console.report(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.report_interrupt()
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.report_unexpected(exc)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
