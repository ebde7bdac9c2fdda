"""Either type: Left[E] | Right[A] for completed computations.

``Left`` holds a failure, ``Right`` holds a success. Every effect in
:mod:`klaw_fp.effect` resolves to one of the two.

Example:
    ```python
    from klaw_fp import either, pipe

    parsed = either.right(21)
    doubled = pipe(parsed, either.map(lambda x: x * 2))
    assert doubled == either.Right(42)

    failed = either.left('bad input')
    assert pipe(failed, either.map(lambda x: x * 2)) is failed
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

__all__ = [
    'Either',
    'Left',
    'Right',
    'flat_map',
    'get_or_else',
    'is_left',
    'is_right',
    'left',
    'map',
    'map_left',
    'match',
    'right',
]


class Left[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Either carrying an error payload.

    Transformations of the success side return this same instance, so a
    failure flows through a chain untouched.

    Attributes:
        left: The error value.
    """

    left: E

    def is_left(self) -> TypeIs[Left[E]]:
        """Return True since this is Left."""
        return True

    def is_right(self) -> TypeIs[Right[Any]]:
        """Return False since this is Left."""
        return False

    def get_or_else[A](self, default: A) -> A:
        """Return the default, discarding the error."""
        return default

    def map[A, B](self, _f: Callable[[A], B]) -> Left[E]:
        """Return self unchanged."""
        return self

    def map_left[E2](self, f: Callable[[E], E2]) -> Left[E2]:
        """Transform the error value."""
        return Left(f(self.left))

    def flat_map[A, E2, B](self, _f: Callable[[A], Either[E2, B]]) -> Left[E]:
        """Return self without calling the function."""
        return self

    def match[A, B](self, *, on_left: Callable[[E], B], on_right: Callable[[A], B]) -> B:  # noqa: ARG002
        """Call ``on_left`` with the error."""
        return on_left(self.left)


class Right[A](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Either carrying a value.

    Attributes:
        right: The success value.
    """

    right: A

    def is_left(self) -> TypeIs[Left[Any]]:
        """Return False since this is Right."""
        return False

    def is_right(self) -> TypeIs[Right[A]]:
        """Return True since this is Right."""
        return True

    def get_or_else(self, default: A) -> A:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.right

    def map[B](self, f: Callable[[A], B]) -> Right[B]:
        """Transform the success value."""
        return Right(f(self.right))

    def map_left[E, E2](self, _f: Callable[[E], E2]) -> Right[A]:
        """Return self unchanged."""
        return self

    def flat_map[E2, B](self, f: Callable[[A], Either[E2, B]]) -> Either[E2, B]:
        """Chain a computation returning an Either."""
        return f(self.right)

    def match[E, B](self, *, on_left: Callable[[E], B], on_right: Callable[[A], B]) -> B:  # noqa: ARG002
        """Call ``on_right`` with the value."""
        return on_right(self.right)


type Either[E, A] = Left[E] | Right[A]


# ---------------------------------------------------------------------
# Module functions (curried, data-last)
# ---------------------------------------------------------------------


def left[E](error: E) -> Left[E]:
    return Left(error)


def right[A](value: A) -> Right[A]:
    return Right(value)


def is_left[E, A](e: Either[E, A]) -> TypeIs[Left[E]]:
    return isinstance(e, Left)


def is_right[E, A](e: Either[E, A]) -> TypeIs[Right[A]]:
    return isinstance(e, Right)


def get_or_else[A](default: A) -> Callable[[Either[Any, A]], A]:
    """Build a function unwrapping a Right, or returning ``default`` for Left."""

    def _get(e: Either[Any, A]) -> A:
        return e.get_or_else(default)

    return _get


def map[E, A, B](f: Callable[[A], B]) -> Callable[[Either[E, A]], Either[E, B]]:  # noqa: A001
    """Build a function transforming the Right value.

    A Left is returned as the same object.
    """

    def _map(e: Either[E, A]) -> Either[E, B]:
        return e.map(f)

    return _map


def map_left[E, E2, A](f: Callable[[E], E2]) -> Callable[[Either[E, A]], Either[E2, A]]:
    """Build a function transforming the Left value."""

    def _map_left(e: Either[E, A]) -> Either[E2, A]:
        return e.map_left(f)

    return _map_left


def flat_map[E1, E2, A, B](
    f: Callable[[A], Either[E2, B]],
) -> Callable[[Either[E1, A]], Either[E1 | E2, B]]:
    """Build a function chaining an Either-returning ``f``.

    Short-circuits on Left without calling ``f``.
    """

    def _flat_map(e: Either[E1, A]) -> Either[E1 | E2, B]:
        return e.flat_map(f)

    return _flat_map


def match[E, A, B](
    *, on_left: Callable[[E], B], on_right: Callable[[A], B]
) -> Callable[[Either[E, A]], B]:
    """Build a total pattern match over an Either."""

    def _match(e: Either[E, A]) -> B:
        return e.match(on_left=on_left, on_right=on_right)

    return _match
