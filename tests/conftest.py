"""Shared pytest fixtures and configuration for the termframe test suite.

Guidelines
----------
* No test reads the real terminal: answers come from in-memory streams.
* Sinks are ``io.StringIO`` objects or pytest's ``capsys``.
* Layout tests must be pure.
"""

from __future__ import annotations

import io

import pytest

from termframe.core.config import PromptEngineBuilder
from termframe.core.prompt_engine import PromptEngine
from termframe.infra.token_source import StreamTokenSource


class EngineHarness:
    """A prompt engine wired to in-memory input and output streams."""

    def __init__(self, answers: str, builder: PromptEngineBuilder | None = None) -> None:
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.engine: PromptEngine = (builder or PromptEngineBuilder()).build(
            StreamTokenSource.from_text(answers),
            out=self.out,
            err=self.err,
        )


@pytest.fixture
def harness() -> type[EngineHarness]:
    """Return the harness class so tests can choose their own answers."""
    return EngineHarness
