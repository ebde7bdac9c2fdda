"""F: lazy async computations with a typed error channel.

Import the module and use its names qualified, since several shadow
builtins (``map``, ``zip``, ``all``):

    from klaw_fp import effect as fx

    program = fx.all([fx.succeed(1), fx.succeed(2)], concurrency='unbounded').pipe(
        fx.map(sum),
        fx.when(lambda total: total > 2),
    )
    result = program.run_sync()  # Right(right=Some(value=3))
"""

from klaw_fp.effect.combinators import (
    all,  # noqa: A004
    as_,
    as_unit,
    flat_map,
    flatten,
    for_each,
    iterate,
    loop,
    map,  # noqa: A004
    map_error,
    tap,
    tap_error,
    zip,  # noqa: A004
    zip_with,
)
from klaw_fp.effect.conditional import (
    if_,
    unless,
    unless_effect,
    when,
    when_effect,
)
from klaw_fp.effect.constructors import (
    async_,
    defer,
    fail,
    of,
    succeed,
    sync,
    try_,
    try_async,
)
from klaw_fp.effect.core import F, Recipe
from klaw_fp.effect.decorators import effectful, effectful_async

__all__ = [
    # Core
    'F',
    'Recipe',
    # Combinators
    'all',
    'as_',
    'as_unit',
    # Constructors
    'async_',
    'defer',
    # Decorators
    'effectful',
    'effectful_async',
    'fail',
    'flat_map',
    'flatten',
    'for_each',
    # Conditionals
    'if_',
    'iterate',
    'loop',
    'map',
    'map_error',
    'of',
    'succeed',
    'sync',
    'tap',
    'tap_error',
    'try_',
    'try_async',
    'unless',
    'unless_effect',
    'when',
    'when_effect',
    'zip',
    'zip_with',
]
