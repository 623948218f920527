"""Regression tests for the optional Rich dependency.

Bootstrap commands and diagnostics must keep working, in plain text,
when Rich cannot be imported.
"""

from __future__ import annotations

import logging
import sys

import pytest

from async_applicative.cli import exit_codes
from async_applicative.cli.app import main
from async_applicative.cli.console import configure_logging, console, get_rich_console
from async_applicative.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    assert main(["doctor"]) == exit_codes.SUCCESS


def test_rich_console_raises_environment_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_console_proxy_falls_back_to_stderr(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.print("plain message")
    assert "plain message" in capsys.readouterr().err


def test_logging_falls_back_to_stream_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    handler = configure_logging(verbose=True)
    assert type(handler) is logging.StreamHandler
    assert handler in logging.getLogger().handlers


def test_logging_uses_rich_handler_when_available() -> None:
    from rich.logging import RichHandler

    handler = configure_logging(verbose=False)
    assert isinstance(handler, RichHandler)
    assert logging.getLogger().level == logging.WARNING


def test_logging_handler_reused_and_level_updated() -> None:
    first = configure_logging(verbose=True)
    second = configure_logging(verbose=False)
    assert second is first
    assert logging.getLogger().handlers.count(first) == 1
    assert logging.getLogger().level == logging.WARNING
