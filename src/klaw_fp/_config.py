"""Runtime configuration: RuntimeConfig, initialization and env detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Literal

from klaw_fp._logging import configure_logging
from klaw_fp.errors import InvalidConfigError

__all__ = [
    'Concurrency',
    'RuntimeConfig',
    'get_config',
    'init',
    'reset',
]

type Concurrency = int | Literal['unbounded'] | None

_MAX_CONCURRENCY = 256
_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class RuntimeConfig:
    """Process-wide defaults for effect evaluation.

    Attributes:
        default_concurrency: Concurrency used by ``all``/``for_each`` when the
            call site passes none. None keeps the sequential behavior.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    default_concurrency: Concurrency = None
    log_level: str | None = None


# Global configuration (set by init())
_config: RuntimeConfig | None = None


def _parse_concurrency(raw: object, *, key: str) -> Concurrency:
    """Normalize a concurrency setting, clamping integers to [1, 256]."""
    if raw is None or raw == 'unbounded':
        return raw  # type: ignore[return-value]
    if isinstance(raw, str):
        try:
            raw = int(raw)
        except ValueError:
            raise InvalidConfigError(key, raw) from None
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise InvalidConfigError(key, raw)
    return max(1, min(_MAX_CONCURRENCY, raw))


def _detect_concurrency() -> Concurrency:
    """Read the default concurrency from KLAW_FP_CONCURRENCY."""
    env_value = os.environ.get('KLAW_FP_CONCURRENCY', '').strip().lower()
    if not env_value:
        return None
    try:
        return _parse_concurrency(env_value, key='KLAW_FP_CONCURRENCY')
    except InvalidConfigError:
        logging.warning("Unknown KLAW_FP_CONCURRENCY value '%s', defaulting to sequential", env_value)
        return None


def _detect_log_level() -> str | None:
    """Read the log level from KLAW_FP_LOG_LEVEL."""
    env_value = os.environ.get('KLAW_FP_LOG_LEVEL', '').strip().upper()
    if not env_value:
        return None
    if env_value not in _LOG_LEVELS:
        logging.warning("Unknown KLAW_FP_LOG_LEVEL value '%s', ignoring", env_value)
        return None
    return env_value


def init(
    default_concurrency: Concurrency = None,
    log_level: str | None = None,
) -> RuntimeConfig:
    """Initialize klaw-fp with the given defaults.

    Args:
        default_concurrency: Default for ``all``/``for_each``. Read from
            KLAW_FP_CONCURRENCY if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            KLAW_FP_LOG_LEVEL if None; logging stays untouched when neither
            is set.

    Returns:
        The RuntimeConfig that was set.

    Raises:
        InvalidConfigError: If a passed value is not acceptable.

    Example:
        ```python
        from klaw_fp import init

        init(default_concurrency=8, log_level="DEBUG")
        ```
    """
    global _config  # noqa: PLW0603

    if default_concurrency is None:
        resolved_concurrency = _detect_concurrency()
    else:
        resolved_concurrency = _parse_concurrency(default_concurrency, key='default_concurrency')

    if log_level is None:
        resolved_level = _detect_log_level()
    elif log_level.upper() in _LOG_LEVELS:
        resolved_level = log_level.upper()
    else:
        raise InvalidConfigError('log_level', log_level)

    _config = RuntimeConfig(
        default_concurrency=resolved_concurrency,
        log_level=resolved_level,
    )

    if resolved_level is not None:
        configure_logging(resolved_level)

    return _config


def get_config() -> RuntimeConfig:
    """Get the current configuration.

    Returns the default RuntimeConfig when init() has not been called, so
    effects behave sequentially out of the box.
    """
    if _config is None:
        return RuntimeConfig()
    return _config


def reset() -> None:
    """Forget any configuration set by init()."""
    global _config  # noqa: PLW0603
    _config = None
