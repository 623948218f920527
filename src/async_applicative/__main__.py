"""Allow ``python -m async_applicative`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m async_applicative`` behaves identically to the
``async-applicative`` console script.
"""

from __future__ import annotations

from async_applicative.cli.app import cli

if __name__ == "__main__":
    cli()
