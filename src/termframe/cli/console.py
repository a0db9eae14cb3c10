"""Diagnostic console for the CLI error boundary.

Framed prompt output goes through :class:`~termframe.core.PromptEngine`;
this module only renders the CLI's own diagnostics (errors, hints,
interrupts) on stderr.  Rich is imported lazily so ``--help``,
``--version`` and the framing commands keep working without it, in
which case the same lines are written as plain text.
"""

from __future__ import annotations

import sys
from typing import Any

from termframe.exceptions import EnvironmentError, TermframeError


def _load_rich() -> tuple[type[Any], type[Any]]:
    """Return Rich's ``Console`` and ``Text`` classes or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console, Text


class _ConsoleProxy:
    """Writes ``(style, label, text)`` lines with Rich or as plain text."""

    def line(self, text: str, *, label: str = "", style: str = "") -> None:
        """Write one diagnostic line to stderr.

        *label* is rendered in *style* when Rich is available and is
        prefixed verbatim otherwise.
        """
        try:
            console_class, text_class = _load_rich()
        except EnvironmentError:
            print(f"{label} {text}" if label else text, file=sys.stderr)
            return
        if label:
            rendered = text_class.assemble((label, style), " ", text)
        else:
            rendered = text_class(text, style=style)
        console_class(stderr=True).print(rendered)

    def report(self, exc: TermframeError) -> None:
        """Render a known error and its optional hint."""
        self.line(str(exc), label="Error:", style="bold red")
        if exc.hint:
            self.line(exc.hint, label="Hint:", style="yellow")

    def report_interrupt(self) -> None:
        self.line("Aborted by user.", style="yellow")

    def report_unexpected(self, exc: Exception) -> None:
        """Render an exception that escaped every known boundary."""
        self.line("Please report this issue.", label="Unexpected error.", style="bold red")
        self.line(f"  {type(exc).__name__}: {exc}")


console = _ConsoleProxy()
