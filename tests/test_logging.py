"""Tests for logging configuration and hooks."""

import logging
from typing import Any

import pytest
from klaw_fp import effect as fx
from klaw_fp._logging import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    remove_log_hook,
)


@pytest.fixture(autouse=True)
def cleanup_hooks():
    """Clear log hooks and restore the root logger around each test."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    clear_log_hooks()
    yield
    clear_log_hooks()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        """Registered hooks receive log entry dicts."""
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'

    def test_remove_hook(self) -> None:
        """remove_log_hook() stops the hook from being called."""
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append(event_dict['event'])

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)
        get_logger('test').info('First')
        remove_log_hook(hook)
        get_logger('test').info('Second')

        assert calls == ['First']

    def test_failing_hook_does_not_break_logging(self) -> None:
        """Exceptions raised by hooks are swallowed."""
        received: list[dict[str, Any]] = []

        def broken(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failure')

        configure_logging(level='DEBUG', json_output=False)
        add_log_hook(broken)
        add_log_hook(received.append)

        get_logger('test').warning('Still logged')
        assert any(e.get('event') == 'Still logged' for e in received)


class TestLibraryEvents:
    """Effect modules log structured events through get_logger."""

    def test_try_logs_caught_exception(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        fx.try_(lambda: 1 / 0, catch=str).run_sync()

        caught = [e for e in received if e.get('event') == 'effect.try.caught']
        assert len(caught) == 1
        assert caught[0]['error_type'] == 'ZeroDivisionError'

    def test_concurrent_all_logs_start(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        fx.all([fx.succeed(1), fx.succeed(2)], concurrency=2).run_sync()

        started = [e for e in received if e.get('event') == 'effect.all.start']
        assert started
        assert started[0]['size'] == 2
        assert started[0]['concurrency'] == 2

    def test_silent_above_debug(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='INFO', json_output=True)
        add_log_hook(received.append)

        fx.try_(lambda: 1 / 0, catch=str).run_sync()

        assert not [e for e in received if e.get('event') == 'effect.try.caught']

    def test_concurrent_fault_logs_index(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        def boom() -> None:
            raise KeyError('missing')

        with pytest.raises(KeyError):
            fx.all([fx.succeed(1), fx.sync(boom)], concurrency='unbounded').run_sync()

        faults = [e for e in received if e.get('event') == 'effect.fault']
        assert len(faults) == 1
        assert faults[0]['index'] == 1
        assert faults[0]['error_type'] == 'KeyError'
        assert faults[0]['logger'] == 'klaw_fp.effect.combinators'


class TestGetLogger:
    """get_logger() always writes through the stdlib logger of the same name."""

    def test_follows_stdlib_levels_without_configure(self) -> None:
        """Hooks see library events once the stdlib level allows them."""
        received: list[dict[str, Any]] = []
        add_log_hook(received.append)
        lib_logger = logging.getLogger('klaw_fp')
        saved = lib_logger.level
        try:
            lib_logger.setLevel(logging.CRITICAL)
            fx.try_(lambda: 1 / 0, catch=str).run_sync()
            assert received == []

            lib_logger.setLevel(logging.DEBUG)
            fx.try_(lambda: 1 / 0, catch=str).run_sync()
            assert [e['event'] for e in received] == ['effect.try.caught']
        finally:
            lib_logger.setLevel(saved)

    def test_binds_context(self) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').bind(request_id='r-1').info('bound')

        assert received[-1]['request_id'] == 'r-1'
        assert received[-1]['logger'] == 'test'
