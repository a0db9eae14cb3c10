"""termframe — framed console messages and typed ask-and-retry prompts.

The public surface is re-exported here so callers can write
``from termframe import PromptEngineBuilder``.
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
from termframe.infra.token_source import StreamTokenSource
from termframe.version import __version__

__all__: list[str] = [
    "BooleanPatterns",
    "EngineConfig",
    "FrameConfig",
    "HeadingConfig",
    "PatternMatcher",
    "PromptEngine",
    "PromptEngineBuilder",
    "RetryConfig",
    "StreamTokenSource",
    "__version__",
]
