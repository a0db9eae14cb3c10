"""Core layer — text layout, configuration and the prompt engine.

Rules
-----
* No imports from ``cli`` or ``infra``.
* Layout functions are pure; only :class:`PromptEngine` performs I/O,
  and only through the sinks and token source it was given.
"""

from termframe.core.config import (
    BooleanPatterns,
    EngineConfig,
    FrameConfig,
    HeadingConfig,
    PatternMatcher,
    PromptEngineBuilder,
    RetryConfig,
)
from termframe.core.prompt_engine import PromptEngine
from termframe.core.protocols import BooleanMatcher, TokenSource
from termframe.core.recognizers import Recognizer

__all__: list[str] = [
    "BooleanMatcher",
    "BooleanPatterns",
    "EngineConfig",
    "FrameConfig",
    "HeadingConfig",
    "PatternMatcher",
    "PromptEngine",
    "PromptEngineBuilder",
    "Recognizer",
    "RetryConfig",
    "TokenSource",
]
