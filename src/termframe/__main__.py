"""Allow ``python -m termframe`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m termframe`` behaves identically to the ``termframe``
console script.
"""

from __future__ import annotations

from termframe.cli.app import cli

if __name__ == "__main__":
    cli()
