"""Protocols (interfaces) consumed by the core layer.

The prompt engine depends ONLY on these contracts, never on a concrete
input stream or regex engine, so tests can inject doubles without
touching the real standard streams.
"""

from __future__ import annotations

from typing import Protocol


class TokenSource(Protocol):
    """Blocking FIFO of textual tokens, consumed destructively.

    Exactly one logical reader is assumed; implementations need not be
    thread-safe.
    """

    def peek(self) -> str:
        """Return the next token without consuming it.

        Raises
        ------
        InputExhaustedError
            When no further token will ever be available.
        """
        ...  # pragma: no cover

    def consume(self) -> str:
        """Remove and return the next token.

        Raises
        ------
        InputExhaustedError
            When no further token will ever be available.
        """
        ...  # pragma: no cover


class BooleanMatcher(Protocol):
    """Predicate deciding whether a token spells one boolean answer."""

    def matches(self, token: str) -> bool:
        """Return ``True`` when *token* is accepted by this matcher."""
        ...  # pragma: no cover
