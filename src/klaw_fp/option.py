"""Option type: Some[T] | Nothing for optional values.

The variants carry methods, and the module also exposes curried, data-last
functions so options compose with ``pipe``:

    >>> from klaw_fp import option
    >>> pipe(option.from_nullable(5), option.map(lambda x: x * 2), option.get_or_else(0))
    10
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'filter',
    'flat_map',
    'from_nullable',
    'get_or_else',
    'is_none',
    'is_some',
    'map',
    'match',
    'none',
    'some',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(42).filter(lambda x: x < 0)
        NothingType()
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some."""
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        Exceptions raised by ``f`` propagate to the caller.
        """
        return Some(f(self.value))

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def match[B](self, *, on_none: Callable[[], B], on_some: Callable[[T], B]) -> B:  # noqa: ARG002
        """Call ``on_some`` with the value."""
        return on_some(self.value)


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.
    """

    def is_some(self) -> TypeIs[Some[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing."""
        return True

    def get_or_else[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def flat_map[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing without calling the function."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def match[T, B](self, *, on_none: Callable[[], B], on_some: Callable[[T], B]) -> B:  # noqa: ARG002
        """Call ``on_none``."""
        return on_none()


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


# ---------------------------------------------------------------------
# Module functions (curried, data-last)
# ---------------------------------------------------------------------


def some[T](value: T) -> Option[T]:
    """Wrap a value in Some."""
    return Some(value)


def none() -> NothingType:
    """Return the Nothing singleton."""
    return Nothing


def is_some[T](opt: Option[T]) -> TypeIs[Some[T]]:
    return isinstance(opt, Some)


def is_none[T](opt: Option[T]) -> TypeIs[NothingType]:
    return isinstance(opt, NothingType)


def from_nullable[T](value: T | None) -> Option[T]:
    """Return Some(value) unless value is None.

    Examples:
        >>> from_nullable(0)
        Some(value=0)
        >>> from_nullable(None)
        NothingType()
    """
    if value is None:
        return Nothing
    return Some(value)


def get_or_else[T](default: T) -> Callable[[Option[T]], T]:
    """Build a function unwrapping an Option, falling back to ``default``."""

    def _get(opt: Option[T]) -> T:
        return opt.get_or_else(default)

    return _get


def map[T, U](f: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:  # noqa: A001
    """Build a function applying ``f`` to the value of a Some."""

    def _map(opt: Option[T]) -> Option[U]:
        return opt.map(f)

    return _map


def flat_map[T, U](f: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    """Build a function chaining an Option-returning ``f``.

    ``f`` is not called for Nothing.
    """

    def _flat_map(opt: Option[T]) -> Option[U]:
        return opt.flat_map(f)

    return _flat_map


def filter[T](predicate: Callable[[T], bool]) -> Callable[[Option[T]], Option[T]]:  # noqa: A001
    """Build a function keeping a Some only when ``predicate`` holds."""

    def _filter(opt: Option[T]) -> Option[T]:
        return opt.filter(predicate)

    return _filter


def match[T, B](*, on_none: Callable[[], B], on_some: Callable[[T], B]) -> Callable[[Option[T]], B]:
    """Build a total pattern match over an Option.

    Exactly one of the branches is called.
    """

    def _match(opt: Option[T]) -> B:
        return opt.match(on_none=on_none, on_some=on_some)

    return _match
