"""Structured logging for klaw-fp.

Effect events (caught exceptions, concurrent aggregation progress) are
emitted at debug level through :func:`get_logger`, which always forwards to
the stdlib logger of the same name. Nothing is printed until the
application enables the level, either through :func:`configure_logging` /
``init(log_level=...)`` or its own stdlib logging setup.

Example:
    ```python
    from klaw_fp import configure_logging, effect as fx
    from klaw_fp._logging import add_log_hook

    configure_logging('DEBUG', json_output=False)
    add_log_hook(lambda entry: print(entry['event']))
    fx.try_(lambda: 1 / 0, catch=str).run_sync()  # prints effect.try.caught
    ```
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_hooks: list[LogHook] = []


def add_log_hook(hook: LogHook) -> None:
    """Call ``hook`` with a copy of every emitted log entry."""
    _hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Unregister a hook; unknown hooks are ignored."""
    if hook in _hooks:
        _hooks.remove(hook)


def clear_log_hooks() -> None:
    """Unregister every hook."""
    _hooks.clear()


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _hooks:
        try:
            hook(event_dict.copy())
        except Exception:  # noqa: S110
            pass  # a broken hook must not break the caller
    return event_dict


def _enrich() -> list[Any]:
    """Processors adding context; shared by structlog and foreign stdlib records."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _bound_chain() -> list[Any]:
    """Processor chain of loggers returned by :func:`get_logger`.

    Disabled levels are dropped before any processor (hooks included) runs.
    """
    import structlog

    return [
        structlog.stdlib.filter_by_level,
        *_enrich(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route structlog and stdlib records to stderr through one formatter.

    Replaces the root logger's handlers.

    Args:
        level: Root logging level ("DEBUG", "INFO", "WARNING", ...).
        json_output: Render JSON lines; otherwise use structlog's console
            renderer (colored when stderr is a terminal).
    """
    import structlog

    structlog.configure(
        processors=_bound_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrich(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger writing to the stdlib logger ``name``.

    Unlike ``structlog.get_logger``, the result does not depend on whether
    structlog was configured, so library events stay silent under default
    stdlib settings.
    """
    import structlog

    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_bound_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
