"""Constructors for primitive F values.

Every constructor returns immediately without running anything; the work
happens when the resulting F is run.

Example:
    ```python
    import json

    parsed = try_(lambda: json.loads(raw), catch=lambda exc: f'bad json: {exc}')
    fetched = try_async(lambda: client.get('/users'), catch=lambda exc: 'network')
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from klaw_fp._logging import get_logger
from klaw_fp.effect.core import F
from klaw_fp.either import Either, Left, Right

__all__ = [
    'async_',
    'defer',
    'fail',
    'of',
    'succeed',
    'sync',
    'try_',
    'try_async',
]

_log = get_logger(__name__)


def succeed[A](value: A) -> F[Never, A]:
    """Create an F that resolves to Right(value)."""

    async def _succeed() -> Either[Never, A]:
        return Right(value)

    return F(_succeed)


def fail[E](error: E) -> F[E, Never]:
    """Create an F that resolves to Left(error)."""

    async def _fail() -> Either[E, Never]:
        return Left(error)

    return F(_fail)


def try_[E, A](thunk: Callable[[], A], *, catch: Callable[[Exception], E]) -> F[E, A]:
    """Create an F from synchronous code that may raise.

    On normal return the value is wrapped in Right. If ``thunk`` raises an
    Exception, ``catch`` maps it to the Left payload. Exceptions raised by
    ``catch`` itself propagate as faults.

    Args:
        thunk: Zero-argument callable producing the value.
        catch: Maps the raised exception to a typed error.

    Returns:
        An F resolving to Right(thunk()) or Left(catch(exc)).

    Example:
        ```python
        f = try_(lambda: int('x'), catch=lambda exc: 'not a number')
        assert await f == Left('not a number')
        ```
    """

    async def _try() -> Either[E, A]:
        try:
            value = thunk()
        except Exception as exc:
            _log.debug('effect.try.caught', error_type=type(exc).__name__)
            return Left(catch(exc))
        return Right(value)

    return F(_try)


def try_async[E, A](thunk: Callable[[], Awaitable[A]], *, catch: Callable[[Exception], E]) -> F[E, A]:
    """Create an F from async code that may raise.

    The awaitable returned by ``thunk`` is awaited before wrapping. A raised
    exception, whether from calling ``thunk`` or while awaiting, is mapped
    by ``catch`` into the Left payload.

    Example:
        ```python
        async def fetch() -> bytes: ...

        f = try_async(fetch, catch=lambda exc: {'kind': 'network', 'cause': exc})
        ```
    """

    async def _try_async() -> Either[E, A]:
        try:
            value = await thunk()
        except Exception as exc:
            _log.debug('effect.try_async.caught', error_type=type(exc).__name__)
            return Left(catch(exc))
        return Right(value)

    return F(_try_async)


def defer[E, A](thunk: Callable[[], F[E, A]]) -> F[E, A]:
    """Create an F whose definition is computed at run time.

    ``thunk`` is called on every run and the F it returns is run in turn,
    which allows recursive or input-dependent effects.
    """

    async def _defer() -> Either[E, A]:
        return await thunk().run()

    return F(_defer)


def sync[A](thunk: Callable[[], A]) -> F[Never, A]:
    """Create an F from synchronous code that is not expected to fail.

    Exceptions raised by ``thunk`` propagate to whoever runs the F.
    """

    async def _sync() -> Either[Never, A]:
        return Right(thunk())

    return F(_sync)


def async_[A](thunk: Callable[[], Awaitable[A]]) -> F[Never, A]:
    """Create an F from async code that is not expected to fail.

    Exceptions propagate to whoever runs the F.
    """

    async def _async() -> Either[Never, A]:
        return Right(await thunk())

    return F(_async)


of = succeed
"""Alias for :func:`succeed`."""
