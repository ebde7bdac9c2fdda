"""The F type: a lazy, re-runnable async computation resolving to an Either.

F[E, A] holds a recipe, a zero-argument callable producing an awaitable of
``Either[E, A]``. Building an F never runs anything; ``run()`` starts a fresh
evaluation every time it is called.

Example:
    ```python
    from klaw_fp import effect as fx

    program = fx.succeed(20).pipe(
        fx.map(lambda x: x + 1),
        fx.flat_map(lambda x: fx.succeed(x * 2)),
    )

    async def main():
        assert await program.run() == Right(42)
        assert await program == Right(42)  # awaiting runs it again

    assert program.run_sync() == Right(42)
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any, Literal

import anyio

from klaw_fp.either import Either

__all__ = ['F', 'Recipe']

type Recipe[E, A] = Callable[[], Awaitable[Either[E, A]]]


class F[E, A]:
    """Deferred async computation with a typed error channel.

    Unlike a coroutine, an F can be evaluated any number of times; each
    evaluation invokes the recipe again and nothing is cached.

    Attributes:
        _recipe: The zero-argument callable producing the Either.
    """

    __slots__ = ('_recipe',)

    def __init__(self, recipe: Recipe[E, A]) -> None:
        """Create an F from a recipe. The recipe is not called."""
        self._recipe = recipe

    async def run(self) -> Either[E, A]:
        """Invoke the recipe and await its Either.

        Exceptions escaping the recipe propagate to the caller; they are not
        converted into Left.
        """
        return await self._recipe()

    def __await__(self) -> Generator[Any, Any, Either[E, A]]:
        """Support ``await fx`` as a shorthand for ``await fx.run()``."""
        return self.run().__await__()

    def pipe(self, *fns: Callable[[Any], Any]) -> Any:
        """Thread this F through data-last combinators, left to right.

        ``fx.pipe(map(f), flat_map(g))`` equals ``flat_map(g)(map(f)(fx))``.
        """
        value: Any = self
        for fn in fns:
            value = fn(value)
        return value

    def run_sync(self, *, backend: Literal['asyncio', 'trio'] = 'asyncio') -> Either[E, A]:
        """Evaluate from synchronous code on a fresh event loop.

        Must not be called from inside a running event loop.
        """
        return anyio.run(self.run, backend=backend)

    def __repr__(self) -> str:
        name = getattr(self._recipe, '__qualname__', None) or repr(self._recipe)
        return f'F({name})'
