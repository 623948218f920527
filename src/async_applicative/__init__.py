"""async-applicative — an Applicative capability instance for asyncio futures.

Generic code written against :class:`~async_applicative.core.protocols.Applicative`
can combine asynchronous values uniformly, looking the instance up in an
explicitly constructed :class:`~async_applicative.core.registry.ApplicativeRegistry`.
"""

from async_applicative.core.operations import apply, fmap, lift_a2
from async_applicative.core.protocols import Applicative
from async_applicative.core.registry import ApplicativeRegistry
from async_applicative.infra.asyncio_instance import (
    AsyncioApplicative,
    default_registry,
    register_asyncio_instance,
)
from async_applicative.version import __version__

__all__: list[str] = [
    "Applicative",
    "ApplicativeRegistry",
    "AsyncioApplicative",
    "__version__",
    "apply",
    "default_registry",
    "fmap",
    "lift_a2",
    "register_asyncio_instance",
]
