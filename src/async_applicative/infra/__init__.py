"""Infrastructure layer — integration with the asyncio event loop.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Failures of user work pass through untouched.
"""

from async_applicative.infra.asyncio_instance import (
    AsyncioApplicative,
    default_registry,
    register_asyncio_instance,
)

__all__: list[str] = [
    "AsyncioApplicative",
    "default_registry",
    "register_asyncio_instance",
]
