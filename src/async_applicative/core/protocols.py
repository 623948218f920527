"""Protocols (interfaces) consumed by the core layer.

:class:`Applicative` is the whole capability: two operations, implemented
once per concrete container type and selected through an explicit
:class:`~async_applicative.core.registry.ApplicativeRegistry` rather than
by duck-typed lookup on the container.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Applicative(Protocol):
    """Contract for an Applicative instance over one container type.

    Any object implementing :meth:`pure` and :meth:`apply_one` satisfies
    this protocol structurally (no explicit inheritance required).
    """

    def pure(self, value: Any) -> Any:
        """Lift an already-available *value* into the container.

        The returned container must resolve successfully with *value*
        and must have no side effect beyond its own construction.
        """
        ...  # pragma: no cover

    def apply_one(self, left: Any, right: Any) -> Any:
        """Combine a contained function with a contained argument.

        Parameters
        ----------
        left:
            Container holding a one-argument callable.
        right:
            Container holding the argument.

        Returns a container resolving to ``fn(value)``.  A failure of
        either input becomes the failure of the result, unchanged.
        """
        ...  # pragma: no cover


UnaryFn = Callable[[Any], Any]
"""Shape of the function carried by the left operand of ``apply_one``."""
