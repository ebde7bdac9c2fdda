"""@effectful and @effectful_async decorators turning functions into F factories."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from klaw_fp.effect.constructors import try_, try_async
from klaw_fp.effect.core import F

__all__ = ['effectful', 'effectful_async']


def _keep(exc: Exception) -> Exception:
    return exc


@overload
def effectful[**P, T](
    func: Callable[P, T],
) -> Callable[P, F[Exception, T]]: ...


@overload
def effectful[**P, T, E](
    func: None = None,
    *,
    catch: Callable[[Exception], E],
) -> Callable[[Callable[P, T]], Callable[P, F[E, T]]]: ...


def effectful(
    func: Callable[..., Any] | None = None,
    *,
    catch: Callable[[Exception], Any] = _keep,
) -> Any:
    """Decorator making a function return a lazy F instead of running.

    Calling the decorated function captures its arguments and returns an F;
    the body runs each time that F is run. Raised exceptions become Left,
    mapped through ``catch`` (the exception itself by default).

    Can be used with or without arguments:
        @effectful
        def parse(raw: str) -> dict: ...

        @effectful(catch=lambda exc: ParseError(str(exc)))
        def parse(raw: str) -> dict: ...

    Example:
        ```python
        @effectful
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2).run_sync()
        # Right(right=5.0)
        divide(10, 0).run_sync()
        # Left(left=ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> F[Any, Any]:
        return try_(lambda: wrapped(*args, **kwargs), catch=catch)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def effectful_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, F[Exception, T]]: ...


@overload
def effectful_async[**P, T, E](
    func: None = None,
    *,
    catch: Callable[[Exception], E],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, F[E, T]]]: ...


def effectful_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    catch: Callable[[Exception], Any] = _keep,
) -> Any:
    """Async counterpart of :func:`effectful`.

    The coroutine function is only called when the returned F runs, so the
    F can be run repeatedly.

    Example:
        ```python
        @effectful_async(catch=lambda exc: 'unreachable')
        async def ping(host: str) -> float: ...

        latency = await ping('db.internal')
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Awaitable[Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> F[Any, Any]:
        return try_async(lambda: wrapped(*args, **kwargs), catch=catch)

    if func is not None:
        return wrapper(func)
    return wrapper
