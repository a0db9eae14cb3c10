"""Immutable configuration values for the prompt engine.

All models are **frozen** dataclasses.  :class:`PromptEngineBuilder`
is itself a frozen value: every fluent step returns a new builder and
leaves the receiver untouched, so a partially configured builder can be
shared and branched freely.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, TextIO, Union

from termframe.core.protocols import BooleanMatcher, TokenSource
from termframe.exceptions import ConfigurationError

if TYPE_CHECKING:
    from termframe.core.prompt_engine import PromptEngine

PatternLike = Union[str, "re.Pattern[str]", BooleanMatcher]
"""Anything :meth:`PromptEngineBuilder.positive` / ``negative`` accept."""


# ---------------------------------------------------------------------------
# Boolean recognition
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PatternMatcher:
    """Regex-backed :class:`BooleanMatcher`.

    The whole token must match (``re.fullmatch``).  Build from a raw
    pattern source with :meth:`compile`, which always applies
    ``re.IGNORECASE``.
    """

    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, source: str) -> PatternMatcher:
        """Compile *source* case-insensitively."""
        try:
            return cls(re.compile(source, re.IGNORECASE))
        except re.error as exc:
            raise ConfigurationError(
                f"Invalid boolean pattern {source!r}: {exc}",
                hint="Pass a valid Python regular expression.",
            ) from exc

    def matches(self, token: str) -> bool:
        return self.pattern.fullmatch(token) is not None


def to_matcher(value: PatternLike) -> BooleanMatcher:
    """Normalise a pattern source, compiled pattern or matcher."""
    if isinstance(value, str):
        return PatternMatcher.compile(value)
    if isinstance(value, re.Pattern):
        return PatternMatcher(value)
    return value


@dataclass(frozen=True, slots=True)
class BooleanPatterns:
    """Positive and negative answer matchers.

    The two should be disjoint but this is not enforced: a token
    matching both counts as positive.
    """

    positive: BooleanMatcher = field(
        default_factory=lambda: PatternMatcher.compile("(true)|y|(yes)"),
    )
    negative: BooleanMatcher = field(
        default_factory=lambda: PatternMatcher.compile("(false)|n|(no)"),
    )


# ---------------------------------------------------------------------------
# Frames, headings, retry text
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FrameConfig:
    """Border glyphs for the three message severities."""

    info: str = "#"
    error: str = "@"
    warning: str = "%"

    def __post_init__(self) -> None:
        for name in ("info", "error", "warning"):
            glyph = getattr(self, name)
            if len(glyph) != 1:
                raise ConfigurationError(
                    f"{name} frame must be a single character, got {glyph!r}.",
                )


@dataclass(frozen=True, slots=True)
class HeadingConfig:
    """Default headings for the three message severities."""

    info: str = "INFO"
    error: str = "ERROR"
    warning: str = "WARN"


@dataclass(frozen=True, slots=True)
class RetryConfig:
    """Text shown when an answer could not be parsed."""

    not_understood: str = "I did not understand that, please try again."


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Everything a :class:`PromptEngine` needs besides its streams."""

    frames: FrameConfig = field(default_factory=FrameConfig)
    headings: HeadingConfig = field(default_factory=HeadingConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)
    booleans: BooleanPatterns = field(default_factory=BooleanPatterns)


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PromptEngineBuilder:
    """Fluent, immutable builder for :class:`EngineConfig` and engines.

    Example::

        engine = (
            PromptEngineBuilder()
            .info_heading("NOTE")
            .positive("ja|j")
            .build()
        )
    """

    settings: EngineConfig = field(default_factory=EngineConfig)

    # -- frames -------------------------------------------------------------

    def info_frame(self, glyph: str) -> PromptEngineBuilder:
        return self._with(frames=replace(self.settings.frames, info=glyph))

    def error_frame(self, glyph: str) -> PromptEngineBuilder:
        return self._with(frames=replace(self.settings.frames, error=glyph))

    def warning_frame(self, glyph: str) -> PromptEngineBuilder:
        return self._with(frames=replace(self.settings.frames, warning=glyph))

    # -- headings -----------------------------------------------------------

    def info_heading(self, heading: str) -> PromptEngineBuilder:
        return self._with(headings=replace(self.settings.headings, info=heading))

    def error_heading(self, heading: str) -> PromptEngineBuilder:
        return self._with(headings=replace(self.settings.headings, error=heading))

    def warning_heading(self, heading: str) -> PromptEngineBuilder:
        return self._with(
            headings=replace(self.settings.headings, warning=heading),
        )

    # -- answers ------------------------------------------------------------

    def not_understood(self, message: str) -> PromptEngineBuilder:
        return self._with(retry=RetryConfig(not_understood=message))

    def positive(self, pattern: PatternLike) -> PromptEngineBuilder:
        """Replace the positive matcher.

        *pattern* may be a compiled pattern (used as is), a pattern
        source (compiled case-insensitively) or any ``BooleanMatcher``.
        """
        return self._with(
            booleans=replace(self.settings.booleans, positive=to_matcher(pattern)),
        )

    def negative(self, pattern: PatternLike) -> PromptEngineBuilder:
        """Replace the negative matcher; see :meth:`positive`."""
        return self._with(
            booleans=replace(self.settings.booleans, negative=to_matcher(pattern)),
        )

    # -- terminal steps -----------------------------------------------------

    def config(self) -> EngineConfig:
        return self.settings

    def build(
        self,
        source: TokenSource,
        *,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> PromptEngine:
        """Create a :class:`PromptEngine` with this configuration.

        *source* is required; to read from standard input pass a
        :class:`~termframe.infra.token_source.StreamTokenSource`, as the
        CLI does.
        """
        from termframe.core.prompt_engine import PromptEngine

        return PromptEngine(self.settings, source, out=out, err=err)

    def _with(self, **changes: object) -> PromptEngineBuilder:
        return PromptEngineBuilder(replace(self.settings, **changes))
