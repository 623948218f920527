"""CLI console and logging helpers with optional Rich support.

Rich is imported lazily so ``--help`` and ``--version`` keep working
when it is not installed.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from async_applicative.exceptions import EnvironmentError

LOG_FORMAT: str = "%(name)s: %(message)s"
HANDLER_NAME: str = "async-applicative"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


def configure_logging(verbose: bool) -> logging.Handler:
	"""Attach a stderr handler to the root logger.

	Uses ``rich.logging.RichHandler`` when Rich is importable.  The level
	is DEBUG when *verbose*, WARNING otherwise.  Repeated calls reuse the
	handler attached by the first one and only adjust the level.
	"""
	root = logging.getLogger()
	root.setLevel(logging.DEBUG if verbose else logging.WARNING)
	for existing in root.handlers:
		if existing.get_name() == HANDLER_NAME:
			return existing

	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(f"%(levelname)s {LOG_FORMAT}"))
	else:
		handler = RichHandler(console=get_rich_console(), show_path=False)
		handler.setFormatter(logging.Formatter(LOG_FORMAT))

	handler.set_name(HANDLER_NAME)
	root.addHandler(handler)
	return handler
