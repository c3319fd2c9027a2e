"""Allow ``python -m shuffledns`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m shuffledns`` behaves identically to the ``shuffledns``
console script.
"""

from __future__ import annotations

from shuffledns.cli.app import cli

if __name__ == "__main__":
    cli()
