"""Tests for runtime configuration and initialization."""

import logging

import pytest
from klaw_fp import InvalidConfigError, RuntimeConfig, get_config, init
from klaw_fp._config import _detect_concurrency, _detect_log_level
from klaw_fp.errors import InvalidConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, reset_config):
    """Run every test without klaw-fp environment variables."""
    monkeypatch.delenv('KLAW_FP_CONCURRENCY', raising=False)
    monkeypatch.delenv('KLAW_FP_LOG_LEVEL', raising=False)


class TestRuntimeConfig:
    """Tests for the RuntimeConfig dataclass."""

    def test_default_values(self) -> None:
        config = RuntimeConfig()
        assert config.default_concurrency is None
        assert config.log_level is None

    def test_config_is_frozen(self) -> None:
        config = RuntimeConfig()
        with pytest.raises(AttributeError):
            config.default_concurrency = 4  # type: ignore[misc]


class TestDetectConcurrency:
    """Tests for KLAW_FP_CONCURRENCY detection."""

    def test_unset(self) -> None:
        assert _detect_concurrency() is None

    def test_integer(self, monkeypatch) -> None:
        monkeypatch.setenv('KLAW_FP_CONCURRENCY', '8')
        assert _detect_concurrency() == 8

    def test_unbounded(self, monkeypatch) -> None:
        monkeypatch.setenv('KLAW_FP_CONCURRENCY', ' Unbounded ')
        assert _detect_concurrency() == 'unbounded'

    def test_clamped(self, monkeypatch) -> None:
        monkeypatch.setenv('KLAW_FP_CONCURRENCY', '10000')
        assert _detect_concurrency() == 256
        monkeypatch.setenv('KLAW_FP_CONCURRENCY', '0')
        assert _detect_concurrency() == 1

    def test_garbage_falls_back(self, monkeypatch, caplog) -> None:
        monkeypatch.setenv('KLAW_FP_CONCURRENCY', 'lots')
        with caplog.at_level(logging.WARNING):
            assert _detect_concurrency() is None
        assert 'KLAW_FP_CONCURRENCY' in caplog.text


class TestDetectLogLevel:
    """Tests for KLAW_FP_LOG_LEVEL detection."""

    def test_unset(self) -> None:
        assert _detect_log_level() is None

    def test_normalized(self, monkeypatch) -> None:
        monkeypatch.setenv('KLAW_FP_LOG_LEVEL', 'debug')
        assert _detect_log_level() == 'DEBUG'

    def test_unknown_ignored(self, monkeypatch) -> None:
        monkeypatch.setenv('KLAW_FP_LOG_LEVEL', 'chatty')
        assert _detect_log_level() is None


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init(self) -> None:
        assert get_config() == RuntimeConfig()

    def test_explicit_values(self) -> None:
        config = init(default_concurrency=4)
        assert config.default_concurrency == 4
        assert get_config() is config

    def test_unbounded(self) -> None:
        assert init(default_concurrency='unbounded').default_concurrency == 'unbounded'

    def test_clamps(self) -> None:
        assert init(default_concurrency=1000).default_concurrency == 256
        assert init(default_concurrency=-2).default_concurrency == 1

    def test_reads_env(self, monkeypatch) -> None:
        monkeypatch.setenv('KLAW_FP_CONCURRENCY', '3')
        assert init().default_concurrency == 3

    def test_explicit_overrides_env(self, monkeypatch) -> None:
        monkeypatch.setenv('KLAW_FP_CONCURRENCY', '3')
        assert init(default_concurrency=5).default_concurrency == 5

    @pytest.mark.parametrize('bad', ['many', 2.5, True])
    def test_invalid_concurrency_raises(self, bad) -> None:
        with pytest.raises(InvalidConfigError) as exc_info:
            init(default_concurrency=bad)
        assert exc_info.value.key == 'default_concurrency'

    def test_invalid_log_level_raises(self) -> None:
        with pytest.raises(InvalidConfigError, match='log_level'):
            init(log_level='LOUD')

    def test_log_level_configures_logging(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            config = init(log_level='warning')
            assert config.log_level == 'WARNING'
            assert root.level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)


class TestConfigErrors:
    """Tests for the struct/exception error pair."""

    def test_round_trip(self) -> None:
        err = InvalidConfigError('log_level', 'LOUD')
        assert err.to_struct() == InvalidConfig('log_level', 'LOUD')
        assert isinstance(err.to_struct().to_exception(), InvalidConfigError)
        assert isinstance(err, ValueError)
