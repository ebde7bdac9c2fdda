"""klaw-fp: lazy typed-error effects, Either and Option for Python 3.13+.

Flat imports (preferred):
    from klaw_fp import F, Either, Left, Right, Option, Some, Nothing
    from klaw_fp import pipe, compose, curry, memoize

Module imports (for the curried, data-last operations):
    from klaw_fp import effect as fx
    from klaw_fp import either, option

Example:
    ```python
    from klaw_fp import Right, effect as fx

    program = fx.for_each([1, 2, 3], lambda n, _: fx.succeed(n * 10), concurrency='unbounded')
    assert program.run_sync() == Right([10, 20, 30])
    ```
"""

from klaw_fp import effect, either, option

# Config
from klaw_fp._config import RuntimeConfig, get_config, init

# Logging
from klaw_fp._logging import configure_logging, get_logger

# Composition
from klaw_fp.compose import compose, pipe, pipe_async

# Effect
from klaw_fp.effect import F, effectful, effectful_async
from klaw_fp.either import Either, Left, Right

# Errors
from klaw_fp.errors import InvalidConcurrencyError, InvalidConfigError

# Function helpers
from klaw_fp.fn import (
    constant,
    curry,
    debounce,
    identity,
    memoize,
    memoize_async,
    partial,
    tap,
    throttle,
)
from klaw_fp.option import Nothing, NothingType, Option, Some

__all__ = [
    # Either
    'Either',
    # Effect
    'F',
    # Errors
    'InvalidConcurrencyError',
    'InvalidConfigError',
    'Left',
    # Option
    'Nothing',
    'NothingType',
    'Option',
    'Right',
    # Config
    'RuntimeConfig',
    'Some',
    # Composition
    'compose',
    # Logging
    'configure_logging',
    # Function helpers
    'constant',
    'curry',
    'debounce',
    # Modules
    'effect',
    'effectful',
    'effectful_async',
    'either',
    'get_config',
    'get_logger',
    'identity',
    'init',
    'memoize',
    'memoize_async',
    'option',
    'partial',
    'pipe',
    'pipe_async',
    'tap',
    'throttle',
]
