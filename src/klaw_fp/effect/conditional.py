"""Conditional combinators: when, unless and if_."""

from __future__ import annotations

from collections.abc import Callable

from klaw_fp.effect.core import F
from klaw_fp.either import Either, Left, Right
from klaw_fp.option import Nothing, Option, Some

__all__ = [
    'if_',
    'unless',
    'unless_effect',
    'when',
    'when_effect',
]


def when[E, A](predicate: Callable[[A], bool]) -> Callable[[F[E, A]], F[E, Option[A]]]:
    """Keep the success value as Some when ``predicate`` holds, else Nothing.

    Example:
        ```python
        assert await succeed(5).pipe(when(lambda x: x > 0)) == Right(Some(5))
        assert await succeed(-5).pipe(when(lambda x: x > 0)) == Right(Nothing)
        ```
    """

    def _apply(self: F[E, A]) -> F[E, Option[A]]:
        async def _when() -> Either[E, Option[A]]:
            result = await self.run()
            if isinstance(result, Left):
                return result
            value = result.right
            if predicate(value):
                return Right(Some(value))
            return Right(Nothing)

        return F(_when)

    return _apply


def _when_effect[E1, E2, A](
    predicate: Callable[[A], F[E2, bool]],
    *,
    negate: bool,
) -> Callable[[F[E1, A]], F[E1 | E2, Option[A]]]:
    def _apply(self: F[E1, A]) -> F[E1 | E2, Option[A]]:
        async def _when() -> Either[E1 | E2, Option[A]]:
            result = await self.run()
            if isinstance(result, Left):
                return result
            value = result.right
            condition = await predicate(value).run()
            if isinstance(condition, Left):
                return condition
            if bool(condition.right) is not negate:
                return Right(Some(value))
            return Right(Nothing)

        return F(_when)

    return _apply


def when_effect[E1, E2, A](
    predicate: Callable[[A], F[E2, bool]],
) -> Callable[[F[E1, A]], F[E1 | E2, Option[A]]]:
    """Like :func:`when`, but the condition is itself an effect.

    ``predicate(value)`` is run after ``self`` succeeds. A Left from either
    one is returned as is.
    """
    return _when_effect(predicate, negate=False)


def unless[E, A](predicate: Callable[[A], bool]) -> Callable[[F[E, A]], F[E, Option[A]]]:
    """Keep the success value as Some when ``predicate`` does not hold."""
    return when(lambda value: not predicate(value))


def unless_effect[E1, E2, A](
    predicate: Callable[[A], F[E2, bool]],
) -> Callable[[F[E1, A]], F[E1 | E2, Option[A]]]:
    """Like :func:`when_effect` with the condition negated."""
    return _when_effect(predicate, negate=True)


def if_[E, A](
    condition: F[E, bool],
    *,
    on_true: Callable[[], F[E, A]],
    on_false: Callable[[], F[E, A]],
) -> F[E, A]:
    """Run one of two branches depending on an effectful condition.

    Only the selected branch thunk is called, and only after ``condition``
    resolved to Right. A Left condition is returned without calling either.

    Example:
        ```python
        greeting = if_(
            is_admin(user),
            on_true=lambda: succeed('welcome back'),
            on_false=lambda: fail('forbidden'),
        )
        ```
    """

    async def _if() -> Either[E, A]:
        result = await condition.run()
        if isinstance(result, Left):
            return result
        branch = on_true if result.right else on_false
        return await branch().run()

    return F(_if)
