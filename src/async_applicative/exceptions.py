"""Custom exception hierarchy for async-applicative.

Every error the library raises *itself* inherits from
:class:`AsyncApplicativeError`.  Failures of the underlying asynchronous
work are a different matter: they pass through ``apply_one`` unchanged
and are never wrapped in anything defined here.

Hierarchy
---------
AsyncApplicativeError
├── InvalidInstanceError
├── DuplicateInstanceError
├── InstanceNotFoundError
├── NoEventLoopError
└── EnvironmentError
"""

from __future__ import annotations


class AsyncApplicativeError(Exception):
    """Base exception for all async-applicative errors.

    The CLI error boundary renders the message and the optional hint
    without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Registry --------------------------------------------------------------

class InvalidInstanceError(AsyncApplicativeError):
    """Raised when a registration does not satisfy the Applicative contract."""


class DuplicateInstanceError(AsyncApplicativeError):
    """Raised when a container type already has a registered instance."""


class InstanceNotFoundError(AsyncApplicativeError):
    """Raised when no instance is registered for a container type."""


# --- Runtime / environment -------------------------------------------------

class NoEventLoopError(AsyncApplicativeError):
    """Raised when a future is needed but no event loop is available."""


class EnvironmentError(AsyncApplicativeError):
    """Raised when a required runtime dependency is not available."""
