"""``async-applicative doctor`` — environment and law diagnostics.

Checks the interpreter, the optional Rich dependency, that the asyncio
instance is registered, and runs every Applicative law against it.
The results are rendered as a Rich table, or as plain text when Rich is
missing.
"""

from __future__ import annotations

import asyncio
import platform
import sys
from importlib.metadata import PackageNotFoundError, version

from async_applicative.cli import exit_codes
from async_applicative.cli.console import console
from async_applicative.core.laws import verify_instance
from async_applicative.core.models import LawResult
from async_applicative.core.registry import ApplicativeRegistry
from async_applicative.infra.asyncio_instance import default_registry
from async_applicative.version import __version__

MIN_PYTHON: tuple[int, int] = (3, 10)

OK = "[green]OK[/green]"
WARN = "[yellow]WARN[/yellow]"
FAIL = "[red]FAIL[/red]"


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _package_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the async-applicative version row."""
    return "async-applicative", __version__, OK


def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    current = platform.python_version()
    ok = sys.version_info[:2] >= MIN_PYTHON
    required = ".".join(str(part) for part in MIN_PYTHON)
    status = OK if ok else f"[red]FAIL (>={required} required)[/red]"
    return "Python", current, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the optional Rich row."""
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "NOT INSTALLED", WARN
    try:
        return "rich", version("rich"), OK
    except PackageNotFoundError:
        return "rich", "unknown", OK


def _instance_check(registry: ApplicativeRegistry) -> tuple[str, str, str]:
    """Return (label, value, status) for the asyncio instance row."""
    implementation = registry.get(asyncio.Future)
    if implementation is None:
        return "asyncio.Future", "no instance", FAIL
    return "asyncio.Future", type(implementation).__name__, OK


def _law_rows(registry: ApplicativeRegistry) -> list[tuple[str, str, str]]:
    """Run the law checks and return one row per law."""
    implementation = registry.get(asyncio.Future)
    if implementation is None:
        return []
    results: tuple[LawResult, ...] = asyncio.run(verify_instance(implementation))
    return [
        (f"law: {result.name}", "holds" if result.passed else result.detail, OK if result.passed else FAIL)
        for result in results
    ]


def _loop_is_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    if "FAIL" in status:
        return "FAIL"
    if "WARN" in status:
        return "WARN"
    if "OK" in status:
        return "OK"
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nasync-applicative doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Check':<20} {'Value':<34} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<20} {value:<34} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(registry: ApplicativeRegistry | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    This is a synchronous entry point: it runs the law checks on its own
    event loop and must not be called from a coroutine.  Inside a running
    loop, await :func:`~async_applicative.core.laws.verify_instance`
    directly instead.

    Parameters
    ----------
    registry:
        Registry to inspect.  Defaults to a fresh :func:`default_registry`.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.

    Raises
    ------
    RuntimeError
        If called while an event loop is running in this thread.
    """
    if _loop_is_running():
        raise RuntimeError("run_doctor() cannot be called from a running event loop.")

    if registry is None:
        registry = default_registry()

    checks = [
        _package_version_check(),
        _python_version_check(),
        _rich_check(),
        _instance_check(registry),
        *_law_rows(registry),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS

    table = Table(
        title="async-applicative doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Check", style="bold", min_width=16)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
