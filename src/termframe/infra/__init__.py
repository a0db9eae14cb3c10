"""Infrastructure layer — adapters for real input streams.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* End-of-input is reported as
  :class:`~termframe.exceptions.InputExhaustedError`.
"""

from termframe.infra.token_source import StreamTokenSource

__all__: list[str] = ["StreamTokenSource"]
