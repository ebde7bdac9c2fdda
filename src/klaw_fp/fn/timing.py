"""Caching and rate-limiting wrappers: memoize, memoize_async, debounce, throttle.

Example:
    ```python
    @memoize
    def fib(n: int) -> int:
        return n if n <= 1 else fib(n - 1) + fib(n - 2)

    fib(80)  # fast, every n is computed once

    save = debounce(write_draft, 300)
    save('h'); save('he'); save('hello')  # only 'hello' is written, 300ms later
    ```
"""

from __future__ import annotations

import functools
import math
import threading
import time
from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

from async_lru import alru_cache

__all__ = ['debounce', 'memoize', 'memoize_async', 'throttle']

P = ParamSpec('P')
T = TypeVar('T')


def memoize[K, R](fn: Callable[[K], R]) -> Callable[[K], R]:
    """Cache results of a single-argument function, keyed by the argument.

    Each memoized function owns its cache, exposed as ``wrapper.cache`` and
    emptied with ``wrapper.cache_clear()``. Arguments must be hashable.
    """
    cache: dict[K, R] = {}

    @functools.wraps(fn)
    def wrapper(arg: K) -> R:
        if arg in cache:
            return cache[arg]
        result = fn(arg)
        cache[arg] = result
        return result

    wrapper.cache = cache  # type: ignore[attr-defined]
    wrapper.cache_clear = cache.clear  # type: ignore[attr-defined]
    return wrapper


@overload
def memoize_async(
    fn: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[T]]: ...


@overload
def memoize_async(
    *,
    maxsize: int | None = 128,
    ttl: float | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]: ...


def memoize_async(
    fn: Callable[P, Awaitable[T]] | None = None,
    *,
    maxsize: int | None = 128,
    ttl: float | None = None,
) -> Callable[P, Awaitable[T]] | Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """Cache results of an async function with async-lru.

    Concurrent calls with the same arguments share one in-flight call.
    Exceptions are not cached.

    Can be used with or without arguments:
        @memoize_async
        async def fetch(id: int) -> Data: ...

        @memoize_async(maxsize=256, ttl=60.0)
        async def fetch(id: int) -> Data: ...

    Args:
        fn: The async function to wrap (when used without parens).
        maxsize: Maximum cache size. None means unlimited.
        ttl: Time-to-live in seconds. None means no expiration.
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        return alru_cache(maxsize=maxsize, ttl=ttl)(func)  # type: ignore[return-value]

    if fn is not None:
        return decorator(fn)

    return decorator


class _Debounced:
    """Callable that delays ``fn`` until ``delay_ms`` passed without a new call."""

    def __init__(self, fn: Callable[..., Any], delay_ms: float) -> None:
        self._fn = fn
        self._delay = delay_ms / 1000
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()
        functools.update_wrapper(self, fn)

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self._delay, self._fn, args, kwargs)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        """True while a call is scheduled and has not fired yet."""
        timer = self._timer
        return timer is not None and timer.is_alive()


def debounce(fn: Callable[..., Any], delay_ms: float) -> _Debounced:
    """Delay calls to ``fn`` until ``delay_ms`` milliseconds passed since the last call.

    Only the arguments of the last call are used. The call runs on a timer
    thread; ``cancel()`` drops a pending call.
    """
    return _Debounced(fn, delay_ms)


def throttle(fn: Callable[..., Any], delay_ms: float) -> Callable[..., None]:
    """Call ``fn`` at most once per ``delay_ms`` milliseconds.

    The first call runs immediately; calls arriving inside the window are
    dropped, not queued.
    """
    interval = delay_ms / 1000
    last_call = -math.inf
    lock = threading.Lock()

    @functools.wraps(fn)
    def throttled(*args: Any, **kwargs: Any) -> None:
        nonlocal last_call
        now = time.monotonic()
        with lock:
            if now - last_call < interval:
                return
            last_call = now
        fn(*args, **kwargs)

    return throttled
