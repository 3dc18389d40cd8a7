"""Tests for AsyncLoopRunner."""

import threading

import pytest


def test_runner_executes_coroutines_on_its_thread():
    from charbrowser.services.async_runner import AsyncLoopRunner

    runner = AsyncLoopRunner()
    runner.start()
    try:

        async def current_thread():
            return threading.get_ident()

        result = runner.submit(current_thread()).result(timeout=2)
    finally:
        runner.stop()

    assert result != threading.get_ident()


def test_runner_call_soon():
    from charbrowser.services.async_runner import AsyncLoopRunner

    runner = AsyncLoopRunner()
    runner.start()
    called = threading.Event()
    try:
        runner.call_soon(called.set)
        assert called.wait(timeout=2)
    finally:
        runner.stop()


def test_runner_drives_list_manager(paged_port):
    from charbrowser.managers import CharacterListManager
    from charbrowser.services.async_runner import AsyncLoopRunner

    runner = AsyncLoopRunner()
    runner.start()
    try:
        manager = CharacterListManager(paged_port)
        runner.submit(manager.start()).result(timeout=2)
        runner.submit(manager.load_more()).result(timeout=2)
    finally:
        runner.stop()

    assert manager.current_page == 2
    assert len(manager.characters) == 6


def test_runner_not_started():
    from charbrowser.services.async_runner import AsyncLoopRunner

    runner = AsyncLoopRunner()

    async def noop():
        return None

    with pytest.raises(RuntimeError):
        runner.submit(noop())
    with pytest.raises(RuntimeError):
        runner.call_soon(print)
    assert runner.is_running() is False


def test_runner_stop_is_idempotent():
    from charbrowser.services.async_runner import AsyncLoopRunner

    runner = AsyncLoopRunner()
    runner.start()
    assert runner.is_running() is True

    runner.stop()
    runner.stop()

    assert runner.is_running() is False
    assert runner.loop is None
