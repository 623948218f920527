"""CLI application entry point and command routing for async-applicative.

This module is the **sole error boundary** for the entire application.
It catches :class:`~async_applicative.exceptions.AsyncApplicativeError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from async_applicative.cli import exit_codes
from async_applicative.cli.console import configure_logging, console
from async_applicative.exceptions import AsyncApplicativeError
from async_applicative.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``async-applicative doctor``  — environment and law diagnostics
    * ``async-applicative --version``
    """
    parser = argparse.ArgumentParser(
        prog="async-applicative",
        description="Applicative capability instance for asyncio futures.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=None,
        choices=["doctor"],
        help="Command to run.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_doctor() -> int:
    from async_applicative.cli.doctor import run_doctor

    return run_doctor()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse *argv* and dispatch to a command.

    Returns an exit code; raises nothing but ``SystemExit`` from argparse
    (``--help``, ``--version``, bad arguments) and library errors, which
    :func:`cli` handles.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(verbose=True)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_doctor()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except AsyncApplicativeError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
