"""Prompt engine — framed messages and typed ask-and-retry questions.

The engine is the only stateful piece of the core: it holds a
:class:`~termframe.core.protocols.TokenSource` and consumes it token by
token, in call order.  Outgoing text is built with
:mod:`termframe.core.layout` and written to two sinks, ``out`` for
questions and informative output, ``err`` for errors and warnings.

Retry loop
----------
Every ``ask_*`` method runs the same state machine::

    print question
    while next token is not recognized:
        print not-understood message
        print question
        discard one token
    consume token and return its parsed value

There is no retry limit.  Only exhaustion of the token source ends a
pending question early, by raising
:class:`~termframe.exceptions.InputExhaustedError`.
"""

from __future__ import annotations

import sys
from decimal import Decimal
from typing import TextIO, TypeVar

from termframe.core import recognizers
from termframe.core.config import EngineConfig
from termframe.core.layout import format_heading, frame
from termframe.core.protocols import TokenSource
from termframe.core.recognizers import Recognizer

T = TypeVar("T")


class PromptEngine:
    """Console helper bound to one token source.

    Parameters
    ----------
    config:
        Frames, headings, retry text and boolean matchers.
    source:
        Token source answers are read from.
    out:
        Sink for questions and informative output.  ``None`` means
        ``sys.stdout`` as it is at write time.
    err:
        Sink for errors and warnings.  ``None`` means ``sys.stderr``.
    """

    def __init__(
        self,
        config: EngineConfig,
        source: TokenSource,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.config: EngineConfig = config
        self._source: TokenSource = source
        self._out: TextIO | None = out
        self._err: TextIO | None = err
        self._boolean: Recognizer[bool] = recognizers.boolean(config.booleans)

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def print(self, message: str) -> None:
        """Write *message* in an info frame, without heading."""
        self._write_out(frame(message, self.config.frames.info))

    def info(self, message: str, heading: str | None = None) -> None:
        """Write a headed info frame to the output sink."""
        heading = self.config.headings.info if heading is None else heading
        self._write_out(
            frame(format_heading(message, heading), self.config.frames.info),
        )

    def err(self, message: str, heading: str | None = None) -> None:
        """Write a headed error frame to the error sink."""
        heading = self.config.headings.error if heading is None else heading
        self._write_err(
            frame(format_heading(message, heading), self.config.frames.error),
        )

    def warn(self, message: str, heading: str | None = None) -> None:
        """Write a headed warning frame to the error sink."""
        heading = self.config.headings.warning if heading is None else heading
        self._write_err(
            frame(format_heading(message, heading), self.config.frames.warning),
        )

    # ------------------------------------------------------------------
    # Ask-and-retry
    # ------------------------------------------------------------------

    def ask(
        self,
        question: str,
        recognizer: Recognizer[T],
        not_understood: str | None = None,
    ) -> T:
        """Ask *question* until a token satisfies *recognizer*.

        Parameters
        ----------
        question:
            Text written before the first attempt and after every
            rejected token.
        recognizer:
            Decides which tokens are acceptable and parses them.
        not_understood:
            Message written after a rejected token.  Defaults to the
            configured not-understood text.

        Returns
        -------
        T
            The parsed value of the first recognized token.

        Raises
        ------
        InputExhaustedError
            If the token source runs dry before a valid answer arrives.
        """
        if not_understood is None:
            not_understood = self.config.retry.not_understood

        self._write_out(question)
        while not recognizer.recognizes(self._source.peek()):
            self._write_out(not_understood)
            self._write_out(question)
            self._source.consume()
        return recognizer.parse(self._source.consume())

    def ask_string(self, question: str, not_understood: str | None = None) -> str:
        return self.ask(question, recognizers.STRING, not_understood)

    def ask_bool(self, question: str, not_understood: str | None = None) -> bool:
        """Ask a yes/no question; positive matches win ties."""
        return self.ask(question, self._boolean, not_understood)

    def ask_byte(self, question: str, not_understood: str | None = None) -> int:
        return self.ask(question, recognizers.BYTE, not_understood)

    def ask_short(self, question: str, not_understood: str | None = None) -> int:
        return self.ask(question, recognizers.SHORT, not_understood)

    def ask_int(self, question: str, not_understood: str | None = None) -> int:
        return self.ask(question, recognizers.INT32, not_understood)

    def ask_long(self, question: str, not_understood: str | None = None) -> int:
        return self.ask(question, recognizers.INT64, not_understood)

    def ask_big_integer(
        self, question: str, not_understood: str | None = None,
    ) -> int:
        return self.ask(question, recognizers.BIG_INTEGER, not_understood)

    def ask_big_decimal(
        self, question: str, not_understood: str | None = None,
    ) -> Decimal:
        return self.ask(question, recognizers.BIG_DECIMAL, not_understood)

    def ask_float(self, question: str, not_understood: str | None = None) -> float:
        """Ask for a number and round it to single precision."""
        return self.ask(question, recognizers.FLOAT32, not_understood)

    def ask_double(self, question: str, not_understood: str | None = None) -> float:
        return self.ask(question, recognizers.FLOAT64, not_understood)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _write_out(self, text: str) -> None:
        print(text, file=self._out if self._out is not None else sys.stdout)

    def _write_err(self, text: str) -> None:
        print(text, file=self._err if self._err is not None else sys.stderr)
