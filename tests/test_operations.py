"""Tests for the generic operations (core/operations.py).

Run against the asyncio instance, since that is the only container the
package ships an instance for.
"""

from __future__ import annotations

import asyncio

import pytest

from async_applicative.core.operations import apply, fmap, lift_a2
from async_applicative.infra.asyncio_instance import AsyncioApplicative


class BoomError(Exception):
    pass


async def _fail(error: BaseException) -> int:
    await asyncio.sleep(0)
    raise error


class TestFmap:
    @pytest.mark.asyncio
    async def test_maps_value(self, app: AsyncioApplicative) -> None:
        assert await fmap(app, len, app.pure("four")) == 4

    @pytest.mark.asyncio
    async def test_failure_passes_through(self, app: AsyncioApplicative) -> None:
        error = BoomError()
        with pytest.raises(BoomError) as exc_info:
            await fmap(app, len, _fail(error))
        assert exc_info.value is error


class TestLiftA2:
    @pytest.mark.asyncio
    async def test_combines_in_order(self, app: AsyncioApplicative) -> None:
        result = lift_a2(app, lambda a, b: a - b, app.pure(10), app.pure(3))
        assert await result == 7

    @pytest.mark.asyncio
    async def test_right_failure(self, app: AsyncioApplicative) -> None:
        with pytest.raises(BoomError):
            await lift_a2(app, lambda a, b: a + b, app.pure(1), _fail(BoomError()))


class TestApply:
    @pytest.mark.asyncio
    async def test_zero_arguments(self, app: AsyncioApplicative) -> None:
        assert await apply(app, app.pure(lambda: "called")) == "called"

    @pytest.mark.asyncio
    async def test_single_argument_matches_apply_one(self, app: AsyncioApplicative) -> None:
        assert await apply(app, app.pure(lambda n: n + 1), app.pure(41)) == 42

    @pytest.mark.asyncio
    async def test_positional_order(self, app: AsyncioApplicative) -> None:
        result = apply(
            app,
            app.pure(lambda a, b, c: f"{a}-{b}-{c}"),
            app.pure("x"),
            app.pure("y"),
            app.pure("z"),
        )
        assert await result == "x-y-z"

    @pytest.mark.asyncio
    async def test_any_argument_failure(self, app: AsyncioApplicative) -> None:
        error = BoomError("middle")
        result = apply(app, app.pure(lambda a, b, c: a), app.pure(1), _fail(error), app.pure(3))
        with pytest.raises(BoomError) as exc_info:
            await result
        assert exc_info.value is error
