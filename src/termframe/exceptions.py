"""Custom exception hierarchy for termframe.

Every error that crosses a layer boundary inherits from
:class:`TermframeError`.  Transient parse failures never appear here:
they are absorbed by the ask-and-retry loop and only reach the user as
the not-understood message.

Hierarchy
---------
TermframeError
├── InputExhaustedError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class TermframeError(Exception):
    """Base exception for all termframe errors.

    The CLI error boundary renders the message plus the optional hint
    without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Input -----------------------------------------------------------------

class InputExhaustedError(TermframeError):
    """Raised when the input source has no more tokens to offer."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(TermframeError):
    """Raised when a configuration value is malformed."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(TermframeError):
    """Raised when an optional runtime dependency is not available."""
