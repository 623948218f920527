"""Explicit capability registry mapping container types to instances.

The registry is an ordinary object: build it at startup, populate it,
then hand it to whatever code needs generic dispatch.  There is no
process-wide table hidden behind a module import.

Guarantees
----------
* At most one :class:`~async_applicative.core.models.InstanceRecord`
  per container type.
* Records are immutable once registered.
* Lookup follows the MRO, so subclasses (``asyncio.Task`` for
  ``asyncio.Future``) resolve to their base's instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from async_applicative.core.models import InstanceRecord
from async_applicative.core.protocols import Applicative
from async_applicative.exceptions import (
    DuplicateInstanceError,
    InstanceNotFoundError,
    InvalidInstanceError,
)

logger = logging.getLogger(__name__)

_REQUIRED_OPERATIONS: tuple[str, ...] = ("pure", "apply_one")


class ApplicativeRegistry:
    """Mapping from container type to its Applicative implementation."""

    def __init__(self) -> None:
        self._records: dict[type, InstanceRecord] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def instance(self, container_type: type, implementation: Applicative) -> InstanceRecord:
        """Register *implementation* as the Applicative for *container_type*.

        Raises
        ------
        InvalidInstanceError
            If *container_type* is not a class, or *implementation* lacks
            a callable ``pure`` or ``apply_one``.
        DuplicateInstanceError
            If *container_type* already has an instance.
        """
        if not isinstance(container_type, type):
            raise InvalidInstanceError(
                f"Container type must be a class, got {container_type!r}.",
            )
        self._validate_implementation(container_type, implementation)

        existing = self._records.get(container_type)
        if existing is not None:
            raise DuplicateInstanceError(
                f"An Applicative instance is already registered for {existing.type_name}.",
                hint="Build a fresh registry instead of re-registering.",
            )

        record = InstanceRecord(container_type=container_type, implementation=implementation)
        self._records[container_type] = record
        logger.debug(
            "Registered Applicative %s for %s",
            type(implementation).__name__,
            record.type_name,
        )
        return record

    @staticmethod
    def _validate_implementation(container_type: type, implementation: object) -> None:
        missing = [
            name
            for name in _REQUIRED_OPERATIONS
            if not callable(getattr(implementation, name, None))
        ]
        if missing:
            raise InvalidInstanceError(
                f"Instance for {container_type.__qualname__} is missing: {', '.join(missing)}",
                hint="An Applicative instance must provide pure(value) and apply_one(left, right).",
            )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, container_type: type) -> Applicative | None:
        """Return the instance for *container_type* or ``None``."""
        for klass in getattr(container_type, "__mro__", (container_type,)):
            record = self._records.get(klass)
            if record is not None:
                return record.implementation
        return None

    def lookup(self, container_type: type) -> Applicative:
        """Return the instance for *container_type*.

        Raises
        ------
        InstanceNotFoundError
            If neither the type nor any of its bases is registered.
        """
        found = self.get(container_type)
        if found is None:
            name = getattr(container_type, "__qualname__", repr(container_type))
            logger.debug("No Applicative instance for %s", name)
            raise InstanceNotFoundError(
                f"No Applicative instance registered for {name}.",
            )
        return found

    def for_value(self, value: Any) -> Applicative:
        """Return the instance for the container *value* belongs to."""
        return self.lookup(type(value))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def registered_types(self) -> tuple[type, ...]:
        """Registered container types in registration order."""
        return tuple(self._records)

    def records(self) -> tuple[InstanceRecord, ...]:
        return tuple(self._records.values())

    def __contains__(self, container_type: object) -> bool:
        return isinstance(container_type, type) and self.get(container_type) is not None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[InstanceRecord]:
        return iter(self.records())
