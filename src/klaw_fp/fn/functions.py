"""Basic point-free helpers: identity, constant, tap, curry and partial."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

__all__ = ['constant', 'curry', 'identity', 'partial', 'tap']


def identity[T](value: T) -> T:
    """Return the argument unchanged.

    Example:
        ```python
        list(filter(identity, [1, 0, 2, None, 3]))  # [1, 2, 3]
        ```
    """
    return value


def constant[T](value: T) -> Callable[..., T]:
    """Build a function that ignores its arguments and always returns ``value``.

    Example:
        ```python
        list(map(constant('x'), [1, 2, 3]))  # ['x', 'x', 'x']
        ```
    """

    def _constant(*_args: Any, **_kwargs: Any) -> T:
        return value

    return _constant


def tap[T](f: Callable[[T], Any]) -> Callable[[T], T]:
    """Build a function that calls ``f`` for its side effect and returns its input.

    Handy for debugging inside :func:`klaw_fp.pipe` chains.
    """

    def _tap(value: T) -> T:
        f(value)
        return value

    return _tap


def _arity(fn: Callable[..., Any]) -> int:
    """Count positional parameters without a default."""
    params = inspect.signature(fn).parameters.values()
    return sum(
        1
        for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD) and p.default is p.empty
    )


def curry(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Collect positional arguments across calls until ``fn``'s arity is met.

    The arity is the number of positional parameters without a default.
    Each call may pass several arguments at once.

    Example:
        ```python
        def add(a: int, b: int, c: int) -> int:
            return a + b + c

        curried = curry(add)
        curried(1)(2)(3)  # 6
        curried(1, 2)(3)  # 6
        add5 = curried(5)
        add5(10)(3)  # 18
        ```
    """
    arity = _arity(fn)

    @functools.wraps(fn)
    def curried(*args: Any) -> Any:
        if len(args) >= arity:
            return fn(*args)
        return functools.partial(curried, *args)

    return curried


def partial(fn: Callable[..., Any], /, *fixed: Any) -> Callable[..., Any]:
    """Fix the leading positional arguments of ``fn``.

    Example:
        ```python
        def multiply(a: int, b: int, c: int) -> int:
            return a * b * c

        by_two = partial(multiply, 2)
        by_two(3, 4)  # 24
        ```
    """

    @functools.wraps(fn)
    def _partial(*rest: Any, **kwargs: Any) -> Any:
        return fn(*fixed, *rest, **kwargs)

    return _partial
