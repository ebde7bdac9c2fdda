"""Combinators transforming and combining F values.

All combinators are pure: they wrap their inputs in a new F and run
nothing until that F is run. Sequencing combinators short-circuit on the
first Left, passing the very same Left object through. Exceptions are never
turned into Left here; only :func:`~klaw_fp.effect.constructors.try_` and
:func:`~klaw_fp.effect.constructors.try_async` do that.

Most combinators are data-last, so they chain with ``F.pipe``:

    ```python
    program = succeed(5).pipe(
        map(lambda x: x * 2),
        tap(print),
        zip(succeed('five'), concurrent=True),
    )
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable, Sequence
from typing import Any

import aiologic
import anyio

from klaw_fp._config import Concurrency, get_config
from klaw_fp._logging import get_logger
from klaw_fp.effect.core import F
from klaw_fp.either import Either, Left, Right
from klaw_fp.errors import InvalidConcurrencyError

__all__ = [
    'all',
    'as_',
    'as_unit',
    'flat_map',
    'flatten',
    'for_each',
    'iterate',
    'loop',
    'map',
    'map_error',
    'tap',
    'tap_error',
    'zip',
    'zip_with',
]

_log = get_logger(__name__)


def map[E, A, B](f: Callable[[A], B]) -> Callable[[F[E, A]], F[E, B]]:  # noqa: A001
    """Transform the success value of an F.

    Args:
        f: Sync function applied to the Right payload.

    Returns:
        A function taking ``self`` and returning the mapped F.

    Example:
        ```python
        assert await succeed(5).pipe(map(lambda x: x * 2)) == Right(10)
        ```
    """

    def _apply(self: F[E, A]) -> F[E, B]:
        async def _mapped() -> Either[E, B]:
            result = await self.run()
            if isinstance(result, Right):
                return Right(f(result.right))
            return result

        return F(_mapped)

    return _apply


def flat_map[E1, E2, A, B](f: Callable[[A], F[E2, B]]) -> Callable[[F[E1, A]], F[E1 | E2, B]]:
    """Chain an F-returning function after a successful F.

    On Right, ``f(payload)`` is run and its result returned. On Left, ``f``
    is never called.
    """

    def _apply(self: F[E1, A]) -> F[E1 | E2, B]:
        async def _chained() -> Either[E1 | E2, B]:
            result = await self.run()
            if isinstance(result, Left):
                return result
            return await f(result.right).run()

        return F(_chained)

    return _apply


def tap[E, A](f: Callable[[A], Any]) -> Callable[[F[E, A]], F[E, A]]:
    """Run a side effect on the success value, keeping the original result.

    ``f`` may be sync or async; an awaitable return value is awaited before
    the original Right is returned. ``f`` is not called on Left.
    """

    def _apply(self: F[E, A]) -> F[E, A]:
        async def _tapped() -> Either[E, A]:
            result = await self.run()
            if isinstance(result, Right):
                ret = f(result.right)
                if inspect.isawaitable(ret):
                    await ret
            return result

        return F(_tapped)

    return _apply


def tap_error[E, A](f: Callable[[E], Any]) -> Callable[[F[E, A]], F[E, A]]:
    """Run a side effect on the error value, keeping the original result."""

    def _apply(self: F[E, A]) -> F[E, A]:
        async def _tapped() -> Either[E, A]:
            result = await self.run()
            if isinstance(result, Left):
                ret = f(result.left)
                if inspect.isawaitable(ret):
                    await ret
            return result

        return F(_tapped)

    return _apply


def map_error[E, E2, A](f: Callable[[E], E2]) -> Callable[[F[E, A]], F[E2, A]]:
    """Transform the error value of an F; Right passes through unchanged."""

    def _apply(self: F[E, A]) -> F[E2, A]:
        async def _mapped() -> Either[E2, A]:
            result = await self.run()
            if isinstance(result, Left):
                return Left(f(result.left))
            return result

        return F(_mapped)

    return _apply


async def _settle(effects: Sequence[F[Any, Any]], limit: int | None) -> list[Either[Any, Any]]:
    """Run effects concurrently and return their results in input order.

    Every effect runs to completion: a member raising an Exception does not
    cancel its siblings. Once all have finished, the exception of the first
    faulting member by input position is re-raised as is.

    Args:
        effects: The effects to run.
        limit: Maximum number in flight, or None for no limit.
    """
    limiter = aiologic.CapacityLimiter(limit) if limit is not None else None
    settled: dict[int, Either[Any, Any] | Exception] = {}

    async def run_one(i: int, effect: F[Any, Any]) -> None:
        try:
            if limiter is None:
                settled[i] = await effect.run()
            else:
                async with limiter:
                    settled[i] = await effect.run()
        except Exception as exc:
            settled[i] = exc

    async with anyio.create_task_group() as tg:
        for i, effect in enumerate(effects):
            tg.start_soon(run_one, i, effect)

    results: list[Either[Any, Any]] = []
    for i in range(len(effects)):
        outcome = settled[i]
        if isinstance(outcome, Exception):
            _log.debug('effect.fault', index=i, error_type=type(outcome).__name__)
            raise outcome
        results.append(outcome)
    return results


def zip[E1, E2, A, B](  # noqa: A001
    that: F[E2, B],
    *,
    concurrent: bool = False,
) -> Callable[[F[E1, A]], F[E1 | E2, tuple[A, B]]]:
    """Combine two F values into a pair.

    Sequential (default): ``self`` runs first; ``that`` is only run when
    ``self`` succeeded.

    Concurrent: both run at once and both always run to completion. If
    both fail, the error of ``self`` wins regardless of completion order.
    An exception raised by either side does not cancel the other; it is
    re-raised unwrapped once both finished, ``self``'s first.

    Args:
        that: The F providing the second element.
        concurrent: Run ``self`` and ``that`` concurrently.

    Returns:
        A function taking ``self`` and returning the zipped F.
    """

    def _apply(self: F[E1, A]) -> F[E1 | E2, tuple[A, B]]:
        async def _sequential() -> Either[E1 | E2, tuple[A, B]]:
            first = await self.run()
            if isinstance(first, Left):
                return first
            second = await that.run()
            if isinstance(second, Left):
                return second
            return Right((first.right, second.right))

        async def _concurrent() -> Either[E1 | E2, tuple[A, B]]:
            first, second = await _settle([self, that], None)
            if isinstance(first, Left):
                return first
            if isinstance(second, Left):
                return second
            return Right((first.right, second.right))

        return F(_concurrent if concurrent else _sequential)

    return _apply


def zip_with[E1, E2, A, B, C](
    that: F[E2, B],
    f: Callable[[A, B], C],
    *,
    concurrent: bool = False,
) -> Callable[[F[E1, A]], F[E1 | E2, C]]:
    """Combine two F values with ``f``; same ordering rules as :func:`zip`."""

    def _apply(self: F[E1, A]) -> F[E1 | E2, C]:
        zipped = zip(that, concurrent=concurrent)(self)

        async def _combined() -> Either[E1 | E2, C]:
            result = await zipped.run()
            if isinstance(result, Left):
                return result
            a, b = result.right
            return Right(f(a, b))

        return F(_combined)

    return _apply


def _resolve_concurrency(concurrency: Concurrency) -> int | None:
    """Map a concurrency option to an in-flight limit.

    Returns 0 for sequential evaluation, None for unbounded, or the limit.
    """
    if concurrency is None:
        concurrency = get_config().default_concurrency
    if concurrency is None:
        return 0
    if concurrency == 'unbounded':
        return None
    if isinstance(concurrency, bool) or not isinstance(concurrency, int) or concurrency < 1:
        raise InvalidConcurrencyError(concurrency)
    return concurrency


async def _all_sequential[E, A](effects: list[F[E, A]]) -> Either[E, list[A]]:
    values: list[A] = []
    for effect in effects:
        result = await effect.run()
        if isinstance(result, Left):
            return result
        values.append(result.right)
    return Right(values)


async def _all_concurrent[E, A](effects: list[F[E, A]], limit: int | None) -> Either[E, list[A]]:
    _log.debug('effect.all.start', size=len(effects), concurrency=limit or 'unbounded')
    results = await _settle(effects, limit)
    values: list[A] = []
    for i, result in enumerate(results):
        if isinstance(result, Left):
            _log.debug('effect.all.failed', index=i)
            return result
        values.append(result.right)
    return Right(values)


def all[E, A](effects: Iterable[F[E, A]], *, concurrency: Concurrency = None) -> F[E, list[A]]:  # noqa: A001
    """Aggregate F values into an F of their payloads, in input order.

    Args:
        effects: The effects to run. Materialized once, when ``all`` is called.
        concurrency: How to run them.

            * ``None``: the configured default (sequential unless
              :func:`klaw_fp.init` set one). Sequential evaluation stops at
              the first Left; later effects never run.
            * ``'unbounded'``: run all at once.
            * ``int`` N: at most N effects in flight.

            Concurrent modes run every effect to completion and then return
            the first Left by input position. An exception raised by a
            member cancels nothing; once all finished, the first one by
            input position is re-raised unwrapped.

    Returns:
        An F resolving to Right(list of payloads) or the first Left.

    Raises:
        InvalidConcurrencyError: When run with an unsupported ``concurrency``.

    Example:
        ```python
        assert await all([succeed(1), succeed(2)]) == Right([1, 2])
        assert await all([succeed(1), fail('x'), succeed(3)]) == Left('x')
        ```
    """
    members = list(effects)

    async def _all() -> Either[E, list[A]]:
        limit = _resolve_concurrency(concurrency)
        if limit == 0:
            return await _all_sequential(members)
        return await _all_concurrent(members, limit)

    return F(_all)


def for_each[T, E, B](
    items: Iterable[T],
    f: Callable[[T, int], F[E, B]],
    *,
    concurrency: Concurrency = None,
) -> F[E, list[B]]:
    """Build an effect per item with ``f(item, index)`` and aggregate with :func:`all`.

    ``items`` is materialized and ``f`` is called for every item right away;
    only the resulting effects are deferred.
    """
    effects = [f(item, index) for index, item in enumerate(items)]
    return all(effects, concurrency=concurrency)


def loop[S, E, A](
    initial: S,
    *,
    while_: Callable[[S], bool],
    step: Callable[[S], S],
    body: Callable[[S], F[E, A]],
) -> F[E, list[A]]:
    """Run ``body`` for each state while ``while_`` holds, collecting payloads.

    Per iteration: ``while_(state)``, then ``body(state)``, then on success
    ``state = step(state)``. A Left stops the loop and is returned; payloads
    gathered so far are discarded.

    Example:
        ```python
        doubled = loop(0, while_=lambda n: n < 3, step=lambda n: n + 1, body=lambda n: succeed(n * 2))
        assert await doubled == Right([0, 2, 4])
        ```
    """

    async def _loop() -> Either[E, list[A]]:
        values: list[A] = []
        state = initial
        while while_(state):
            result = await body(state).run()
            if isinstance(result, Left):
                return result
            values.append(result.right)
            state = step(state)
        return Right(values)

    return F(_loop)


def iterate[S, E](
    initial: S,
    *,
    while_: Callable[[S], bool],
    body: Callable[[S], F[E, S]],
) -> F[E, S]:
    """Thread a state through ``body`` while ``while_`` holds; return the final state."""

    async def _iterate() -> Either[E, S]:
        state = initial
        while while_(state):
            result = await body(state).run()
            if isinstance(result, Left):
                return result
            state = result.right
        return Right(state)

    return F(_iterate)


def flatten[E1, E2, A](self: F[E1, F[E2, A]]) -> F[E1 | E2, A]:
    """Run an F whose payload is another F, returning the inner result."""

    async def _flattened() -> Either[E1 | E2, A]:
        result = await self.run()
        if isinstance(result, Left):
            return result
        return await result.right.run()

    return F(_flattened)


def as_[E, A, B](value: B) -> Callable[[F[E, A]], F[E, B]]:
    """Replace the success value with ``value``."""
    return map(lambda _: value)


def as_unit[E, A](self: F[E, A]) -> F[E, None]:
    """Replace the success value with None."""
    return as_(None)(self)

