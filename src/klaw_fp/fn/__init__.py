"""Point-free helpers and function wrappers.

Example:
    ```python
    from klaw_fp.fn import constant, curry, identity, memoize

    identity(42)  # 42
    constant('x')()  # 'x'
    curry(lambda a, b: a + b)(1)(2)  # 3
    ```
"""

from klaw_fp.fn.functions import constant, curry, identity, partial, tap
from klaw_fp.fn.timing import debounce, memoize, memoize_async, throttle

__all__ = [
    'constant',
    'curry',
    'debounce',
    'identity',
    'memoize',
    'memoize_async',
    'partial',
    'tap',
    'throttle',
]
