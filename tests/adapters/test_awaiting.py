"""Settling pending operations through :class:`DefaultAwaiter`."""

from __future__ import annotations

import asyncio
import concurrent.futures
import threading

import pytest

from lib_exception_assert.adapters.awaiting.default import DefaultAwaiter
from lib_exception_assert.domain.errors import InvalidOptionError
from tests.support import complete_later, raise_later


def test_coroutine_failure_is_returned() -> None:
    error = ValueError("late")
    assert DefaultAwaiter().wait(raise_later(error)) is error


def test_coroutine_success_returns_none() -> None:
    assert DefaultAwaiter().wait(complete_later()) is None


def test_executor_future_failure_is_returned() -> None:
    error = KeyError("worker")
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(_raise, error)
        assert DefaultAwaiter().wait(future) is error


def test_executor_future_success_returns_none() -> None:
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        assert DefaultAwaiter().wait(pool.submit(int, "7")) is None


def test_cancelled_executor_future_yields_cancelled_error() -> None:
    future: concurrent.futures.Future[None] = concurrent.futures.Future()
    future.cancel()
    assert isinstance(DefaultAwaiter().wait(future), concurrent.futures.CancelledError)


def test_task_on_idle_loop_is_driven_to_completion() -> None:
    loop = asyncio.new_event_loop()
    try:
        error = RuntimeError("idle loop")
        task = loop.create_task(raise_later(error))
        assert DefaultAwaiter().wait(task) is error
    finally:
        loop.close()


def test_task_on_loop_in_other_thread() -> None:
    loop = asyncio.new_event_loop()
    thread = threading.Thread(target=loop.run_forever, daemon=True)
    thread.start()
    try:
        error = LookupError("remote")

        async def spawn() -> asyncio.Task[None]:
            return asyncio.get_running_loop().create_task(raise_later(error))

        task = asyncio.run_coroutine_threadsafe(spawn(), loop).result()
        assert DefaultAwaiter().wait(task) is error
    finally:
        loop.call_soon_threadsafe(loop.stop)
        thread.join()
        loop.close()


def test_future_on_current_running_loop_is_rejected() -> None:
    async def scenario() -> None:
        future = asyncio.get_running_loop().create_future()
        with pytest.raises(InvalidOptionError):
            DefaultAwaiter().wait(future)
        future.cancel()

    asyncio.run(scenario())


def test_coroutine_inside_running_loop_is_rejected_and_closed() -> None:
    async def scenario() -> None:
        pending = raise_later(ValueError("x"))
        with pytest.raises(InvalidOptionError) as info:
            DefaultAwaiter().wait(pending)
        assert info.value.parameter == "pending"
        assert pending.cr_frame is None

    asyncio.run(scenario())


def test_cancelled_task_yields_cancelled_error() -> None:
    loop = asyncio.new_event_loop()
    try:
        task = loop.create_task(asyncio.sleep(10))
        task.cancel()
        assert isinstance(DefaultAwaiter().wait(task), asyncio.CancelledError)
        assert task.cancelled()
    finally:
        loop.close()


def test_non_awaitable_is_rejected() -> None:
    with pytest.raises(InvalidOptionError) as info:
        DefaultAwaiter().wait(42)
    assert info.value.parameter == "pending"


def _raise(exc: BaseException) -> None:
    raise exc
