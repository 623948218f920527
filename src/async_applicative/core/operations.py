"""Generic operations written only against the Applicative protocol.

Nothing here knows which container it is working with; the caller
passes the instance (usually from
:meth:`ApplicativeRegistry.for_value`).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from async_applicative.core.protocols import Applicative


def fmap(app: Applicative, fn: Callable[[Any], Any], container: Any) -> Any:
    """Apply a plain *fn* to the contents of *container*."""
    return app.apply_one(app.pure(fn), container)


def lift_a2(
    app: Applicative,
    fn: Callable[[Any, Any], Any],
    left: Any,
    right: Any,
) -> Any:
    """Combine two containers with a plain binary *fn*."""
    curried = fmap(app, lambda a: lambda b: fn(a, b), left)
    return app.apply_one(curried, right)


def apply(app: Applicative, fn_container: Any, *containers: Any) -> Any:
    """Positional application of a contained n-ary function.

    ``apply(app, pure(f), a, b)`` resolves to ``f(a_value, b_value)``.
    With no argument containers the contained function is called with
    no arguments.
    """
    if not containers:
        return app.apply_one(app.pure(lambda f: f()), fn_container)

    arity = len(containers)
    curried = fmap(app, lambda f: _curry(f, arity), fn_container)
    for container in containers:
        curried = app.apply_one(curried, container)
    return curried


def _curry(fn: Callable[..., Any], arity: int, collected: tuple[Any, ...] = ()) -> Callable[[Any], Any]:
    def step(arg: Any) -> Any:
        args = collected + (arg,)
        if len(args) == arity:
            return fn(*args)
        return _curry(fn, arity, args)

    return step
