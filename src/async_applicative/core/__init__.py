"""Core layer — the capability contract, registry and generic operations.

Rules
-----
* No event-loop access; containers are only combined through an
  :class:`~async_applicative.core.protocols.Applicative` instance.
* No imports from ``cli`` or ``infra``.
* No ``print()`` calls.
"""

from async_applicative.core.laws import verify_instance
from async_applicative.core.models import InstanceRecord, LawResult
from async_applicative.core.operations import apply, fmap, lift_a2
from async_applicative.core.protocols import Applicative
from async_applicative.core.registry import ApplicativeRegistry

__all__: list[str] = [
    "Applicative",
    "ApplicativeRegistry",
    "InstanceRecord",
    "LawResult",
    "apply",
    "fmap",
    "lift_a2",
    "verify_instance",
]
