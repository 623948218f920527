"""Domain models for async-applicative.

All models are **frozen** dataclasses: immutable value objects created
once and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from async_applicative.core.protocols import Applicative


# ---------------------------------------------------------------------------
# Registry entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InstanceRecord:
    """One registered ``{pure, apply_one}`` implementation."""

    container_type: type
    """The container class the instance is registered for."""

    implementation: Applicative
    """Object providing ``pure`` and ``apply_one``."""

    @property
    def type_name(self) -> str:
        """Qualified display name of :attr:`container_type`."""
        return f"{self.container_type.__module__}.{self.container_type.__qualname__}"


# ---------------------------------------------------------------------------
# Law check outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class LawResult:
    """Outcome of checking a single law against an instance."""

    name: str
    """Short law identifier (e.g. ``"identity"``)."""

    passed: bool

    detail: str = ""
    """Human-readable explanation, mostly useful when :attr:`passed` is false."""
