"""Shared pytest fixtures and configuration for the async-applicative test suite.

Guidelines
----------
* Coroutine tests are marked ``@pytest.mark.asyncio`` and run on the
  loop pytest-asyncio provides.
* Every test builds its own registry; nothing is shared across tests.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from async_applicative.core.registry import ApplicativeRegistry
from async_applicative.infra.asyncio_instance import AsyncioApplicative, default_registry


@pytest.fixture
def registry() -> ApplicativeRegistry:
    return default_registry()


@pytest.fixture
def app() -> AsyncioApplicative:
    return AsyncioApplicative()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo handlers and level changes made by ``--verbose`` runs."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
