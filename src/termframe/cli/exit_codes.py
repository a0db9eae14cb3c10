"""Process exit codes returned by ``termframe`` commands.

The framing commands always succeed; ``ask`` fails with
:data:`GENERAL_ERROR` when standard input closes before an acceptable
answer arrives.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed; for ``ask`` the accepted value was printed."""

GENERAL_ERROR: int = 1
"""A TermframeError was reported, e.g. input exhausted or bad configuration."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C while a question was pending (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped the error boundary."""
