"""Infrastructure: the Applicative instance for :class:`asyncio.Future`.

This is the only module that touches the event loop.  It adapts
asyncio's own primitives (``create_future``, ``create_task`` and
``gather``) to the two-operation
:class:`~async_applicative.core.protocols.Applicative` contract.

Rules
-----
* Failures from either input propagate unchanged; nothing is wrapped.
* Inputs are never cancelled by ``apply_one``.
* No threads, no locks: everything runs on one event loop.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any

from async_applicative.core.protocols import UnaryFn
from async_applicative.core.registry import ApplicativeRegistry
from async_applicative.exceptions import NoEventLoopError

logger = logging.getLogger(__name__)


class AsyncioApplicative:
    """``pure`` / ``apply_one`` over asyncio futures.

    Parameters
    ----------
    loop:
        Event loop on which futures and tasks are created.  When
        ``None`` (the default) the currently running loop is used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop: asyncio.AbstractEventLoop | None = loop

    # ------------------------------------------------------------------
    # Applicative operations
    # ------------------------------------------------------------------

    def pure(self, value: Any) -> asyncio.Future[Any]:
        """Return a future already resolved with *value*.

        *value* is stored as-is, even when it is itself awaitable.
        """
        future: asyncio.Future[Any] = self._resolve_loop().create_future()
        future.set_result(value)
        return future

    def apply_one(
        self,
        left: Awaitable[UnaryFn],
        right: Awaitable[Any],
    ) -> asyncio.Future[Any]:
        """Resolve *left* and *right* concurrently, then apply one to the other.

        Both inputs may be any awaitable (future, task or coroutine
        object).  The returned task fails with the first input failure
        ``asyncio.gather`` observes; the slower input keeps running and
        its outcome is discarded.  Cancelling the returned task does
        not cancel either input.
        """
        loop = self._resolve_loop()
        logger.debug("Scheduling apply_one on loop %#x", id(loop))
        return loop.create_task(_join_and_apply(left, right))

    # ------------------------------------------------------------------
    # Loop resolution
    # ------------------------------------------------------------------

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as exc:
            raise NoEventLoopError(
                "No running event loop to create a future on.",
                hint="Call from inside a coroutine, or construct AsyncioApplicative(loop=...).",
            ) from exc


async def _join_and_apply(left: Awaitable[UnaryFn], right: Awaitable[Any]) -> Any:
    # shield keeps cancellation of the result task away from the inputs.
    # gather and shield both mark a later sibling failure as retrieved,
    # so the loser of a double failure is not reported as unhandled.
    fn, value = await asyncio.gather(asyncio.shield(left), asyncio.shield(right))
    return fn(value)


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

def register_asyncio_instance(
    registry: ApplicativeRegistry,
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> AsyncioApplicative:
    """Register an :class:`AsyncioApplicative` for :class:`asyncio.Future`.

    ``asyncio.Task`` subclasses ``Future`` and therefore shares the
    instance through the registry's MRO lookup.
    """
    implementation = AsyncioApplicative(loop=loop)
    registry.instance(asyncio.Future, implementation)
    return implementation


def default_registry() -> ApplicativeRegistry:
    """Build a fresh registry holding the asyncio instance."""
    registry = ApplicativeRegistry()
    register_asyncio_instance(registry)
    return registry
