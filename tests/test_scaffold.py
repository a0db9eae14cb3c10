"""Smoke tests for termframe's package wiring.

These tests prove that:
* Every name in ``termframe.__all__`` (builder, config values, engine,
  stream token source) is importable from the top-level package.
* Input exhaustion, configuration and missing-Rich errors all derive
  from ``TermframeError`` and carry an optional hint.
* The version string and the ``termframe`` exit codes are defined.
"""

from __future__ import annotations

import pytest

import termframe
from termframe import __version__
from termframe.cli import exit_codes
from termframe.exceptions import (
    ConfigurationError,
    EnvironmentError,
    InputExhaustedError,
    TermframeError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

class TestPublicApi:
    @pytest.mark.parametrize("name", termframe.__all__)
    def test_exported_names_exist(self, name: str) -> None:
        assert hasattr(termframe, name)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [InputExhaustedError, ConfigurationError, EnvironmentError],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[TermframeError]
    ) -> None:
        assert issubclass(exc_class, TermframeError)

    def test_base_inherits_from_exception(self) -> None:
        assert issubclass(TermframeError, Exception)

    def test_hint_is_stored(self) -> None:
        err = TermframeError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = TermframeError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2
