"""Executable Applicative law checks.

:func:`verify_instance` runs every check against an instance and
returns one :class:`~async_applicative.core.models.LawResult` per law.
The checks only use ``pure`` and ``apply_one`` plus ``await`` to observe
a container's outcome, so they apply to any awaitable container.
Failing containers are built generically by mapping a raising function
over ``pure(None)``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from async_applicative.core.models import LawResult
from async_applicative.core.operations import fmap
from async_applicative.core.protocols import Applicative

logger = logging.getLogger(__name__)

DEFAULT_SAMPLE: int = 41


class LawProbeError(Exception):
    """Marker failure injected into containers by the failure checks."""


class _LawViolation(Exception):
    pass


LawCheck = Callable[[Applicative, Any], Awaitable[None]]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _failing(app: Applicative, error: BaseException) -> Any:
    def _raise(_: Any) -> Any:
        raise error

    return fmap(app, _raise, app.pure(None))


def _expect_equal(actual: Any, expected: Any) -> None:
    if actual != expected:
        raise _LawViolation(f"expected {expected!r}, got {actual!r}")


async def _expect_failure(container: Any, *allowed: BaseException) -> None:
    try:
        value = await container
    except LawProbeError as exc:
        if not any(exc is candidate for candidate in allowed):
            raise _LawViolation(f"failed with an unrelated error {exc!r}") from exc
        return
    raise _LawViolation(f"expected a failure, resolved with {value!r}")


def _increment(n: Any) -> Any:
    return n + 1


# ---------------------------------------------------------------------------
# Individual laws
# ---------------------------------------------------------------------------

async def _check_pure(app: Applicative, sample: Any) -> None:
    _expect_equal(await app.pure(sample), sample)


async def _check_homomorphism(app: Applicative, sample: Any) -> None:
    result = await app.apply_one(app.pure(_increment), app.pure(sample))
    _expect_equal(result, _increment(sample))


async def _check_identity(app: Applicative, sample: Any) -> None:
    result = await app.apply_one(app.pure(lambda x: x), app.pure(sample))
    _expect_equal(result, sample)


async def _check_interchange(app: Applicative, sample: Any) -> None:
    left = await app.apply_one(app.pure(_increment), app.pure(sample))
    right = await app.apply_one(app.pure(lambda f: f(sample)), app.pure(_increment))
    _expect_equal(left, right)


async def _check_left_failure(app: Applicative, sample: Any) -> None:
    error = LawProbeError("left")
    await _expect_failure(app.apply_one(_failing(app, error), app.pure(sample)), error)


async def _check_right_failure(app: Applicative, sample: Any) -> None:
    error = LawProbeError("right")
    await _expect_failure(app.apply_one(app.pure(_increment), _failing(app, error)), error)


async def _check_both_failures(app: Applicative, sample: Any) -> None:
    left_error = LawProbeError("left")
    right_error = LawProbeError("right")
    combined = app.apply_one(_failing(app, left_error), _failing(app, right_error))
    await _expect_failure(combined, left_error, right_error)


LAWS: tuple[tuple[str, LawCheck], ...] = (
    ("pure", _check_pure),
    ("homomorphism", _check_homomorphism),
    ("identity", _check_identity),
    ("interchange", _check_interchange),
    ("left-failure", _check_left_failure),
    ("right-failure", _check_right_failure),
    ("both-failures", _check_both_failures),
)
"""Ordered ``(name, check)`` pairs run by :func:`verify_instance`."""


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

async def verify_instance(app: Applicative, *, sample: Any = DEFAULT_SAMPLE) -> tuple[LawResult, ...]:
    """Run every law in :data:`LAWS` against *app*.

    *sample* must support ``+ 1``.  A check that raises is reported as
    failed rather than aborting the run.
    """
    results: list[LawResult] = []
    for name, check in LAWS:
        try:
            await check(app, sample)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Applicative law %r failed for %s: %s", name, type(app).__name__, exc)
            results.append(LawResult(name=name, passed=False, detail=f"{type(exc).__name__}: {exc}"))
        else:
            results.append(LawResult(name=name, passed=True))
    return tuple(results)
