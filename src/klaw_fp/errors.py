"""Library error types: dual struct+exception for Either and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidConcurrency',
    'InvalidConcurrencyError',
    'InvalidConfig',
    'InvalidConfigError',
]


# --- Aggregation Errors ---


class InvalidConcurrency(msgspec.Struct, frozen=True, gc=False):
    """Unsupported concurrency option - struct variant for Left[InvalidConcurrency]."""

    value: object

    def to_exception(self) -> InvalidConcurrencyError:
        """Convert to exception for raise-based code."""
        return InvalidConcurrencyError(self.value)


class InvalidConcurrencyError(ValueError):
    """Unsupported concurrency option - exception variant.

    Raised when an aggregation is run with a concurrency that is neither
    ``None``, ``'unbounded'`` nor a positive integer.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid concurrency {value!r}: expected None, 'unbounded' or a positive int")

    def to_struct(self) -> InvalidConcurrency:
        """Convert to struct for Either-based code."""
        return InvalidConcurrency(self.value)


# --- Config Errors ---


class InvalidConfig(msgspec.Struct, frozen=True, gc=False):
    """Configuration value rejected - struct variant for Left[InvalidConfig]."""

    key: str
    value: object

    def to_exception(self) -> InvalidConfigError:
        """Convert to exception for raise-based code."""
        return InvalidConfigError(self.key, self.value)


class InvalidConfigError(ValueError):
    """Configuration value rejected - exception variant."""

    def __init__(self, key: str, value: object) -> None:
        self.key = key
        self.value = value
        super().__init__(f'Invalid value for {key}: {value!r}')

    def to_struct(self) -> InvalidConfig:
        """Convert to struct for Either-based code."""
        return InvalidConfig(self.key, self.value)
