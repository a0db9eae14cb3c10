"""Line-oriented token source over a text stream.

Each non-blank line of the stream is one token, stripped of
surrounding whitespace.  Blank lines are skipped, so consecutive line
separators collapse.  Lines are pulled lazily: :meth:`peek` blocks
until the stream delivers a non-blank line or reaches end-of-file.
"""

from __future__ import annotations

import io
import sys
from typing import TextIO

from termframe.exceptions import InputExhaustedError


class StreamTokenSource:
    """:class:`~termframe.core.protocols.TokenSource` backed by a stream.

    Parameters
    ----------
    stream:
        Text stream to read from.  Defaults to ``sys.stdin`` as it is
        at construction time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream: TextIO = stream if stream is not None else sys.stdin
        self._pending: str | None = None

    @classmethod
    def from_text(cls, text: str) -> StreamTokenSource:
        """Build a source reading the lines of *text*."""
        return cls(io.StringIO(text))

    def peek(self) -> str:
        """Return the next token without consuming it.

        Raises
        ------
        InputExhaustedError
            When the stream is at end-of-file.
        """
        if self._pending is None:
            self._pending = self._read_token()
        return self._pending

    def consume(self) -> str:
        """Remove and return the next token.

        Raises
        ------
        InputExhaustedError
            When the stream is at end-of-file.
        """
        token = self.peek()
        self._pending = None
        return token

    def _read_token(self) -> str:
        for line in iter(self._stream.readline, ""):
            token = line.strip()
            if token:
                return token
        raise InputExhaustedError(
            "No more input available.",
            hint="The input stream was closed before a valid answer was given.",
        )
