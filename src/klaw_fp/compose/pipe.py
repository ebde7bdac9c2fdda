"""pipe(), pipe_async() and compose() for point-free function composition."""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TypeVar, overload

__all__ = ['compose', 'pipe', 'pipe_async']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')
T6 = TypeVar('T6')


# Overloads for type inference (up to 6 functions)
@overload
def pipe(value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    /,
) -> T6: ...
@overload
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Thread a value through functions, left to right.

    Args:
        value: The initial value.
        *fns: Functions to apply in sequence, each receiving the previous output.

    Returns:
        The output of the last function, or ``value`` when no function is given.

    Example:
        ```python
        def double(x: int) -> int:
            return x * 2

        def add_ten(x: int) -> int:
            return x + 10

        pipe(5, double, add_ten)
        # 20
        ```
    """
    result = value
    for fn in fns:
        result = fn(result)
    return result


async def pipe_async(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Like :func:`pipe`, awaiting each step whose result is awaitable.

    Sync and async functions can be mixed freely; steps never overlap.

    Example:
        ```python
        user = await pipe_async(user_id, fetch_user, validate_user, save_user)
        ```
    """
    result = value
    for fn in fns:
        result = fn(result)
        if inspect.isawaitable(result):
            result = await result
    return result


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right to left: ``compose(f, g)(x) == f(g(x))``.

    With no functions the result is the identity function.
    """

    def _composed(value: Any) -> Any:
        result = value
        for fn in reversed(fns):
            result = fn(result)
        return result

    return _composed
