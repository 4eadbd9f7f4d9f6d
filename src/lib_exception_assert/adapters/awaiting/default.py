"""Blocking waits on pending asynchronous operations.

Purpose
-------
Turn a caller-owned asynchronous operation into a plain outcome (the exception
it raised, or ``None``) so the verifier can stay synchronous.

Key behaviours
--------------
* :class:`concurrent.futures.Future` – waits via :meth:`Future.exception`; a
  cancelled future yields its ``CancelledError``.
* :class:`asyncio.Future` / :class:`asyncio.Task` – driven on the loop that owns
  them; when that loop runs in another thread the wait is scheduled onto it
  with :func:`asyncio.run_coroutine_threadsafe`. A cancelled future or task
  yields its ``CancelledError``.
* Any other awaitable (typically a coroutine) – driven on a fresh event loop
  through :func:`asyncio.run`.
* Waiting from inside a running event loop would deadlock or fail, so it is
  rejected with :class:`InvalidOptionError` (a rejected coroutine is closed).

No timeout is applied. Cancellation or deadlines belong to the pending
operation itself.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import inspect
from typing import Any, Awaitable

from ...domain.errors import InvalidOptionError
from ...observability import log_debug


class DefaultAwaiter:
    """Settle pending operations for :meth:`ExceptionVerifier.verify_async`.

    Examples
    --------
    >>> async def explode():
    ...     raise ValueError("late")
    >>> DefaultAwaiter().wait(explode())
    ValueError('late')
    >>> async def fine():
    ...     return 1
    >>> DefaultAwaiter().wait(fine()) is None
    True
    """

    def wait(self, pending: object) -> BaseException | None:
        if isinstance(pending, concurrent.futures.Future):
            outcome = _settle_executor_future(pending)
            kind = "executor_future"
        elif isinstance(pending, asyncio.Future):
            outcome = _settle_asyncio_future(pending)
            kind = "asyncio_future"
        elif inspect.isawaitable(pending):
            outcome = _settle_awaitable(pending)
            kind = "awaitable"
        else:
            raise InvalidOptionError("pending", pending)
        log_debug("pending_settled", kind=kind, raised=type(outcome).__qualname__ if outcome is not None else None)
        return outcome


def _settle_executor_future(pending: concurrent.futures.Future[Any]) -> BaseException | None:
    try:
        return pending.exception()
    except concurrent.futures.CancelledError as exc:
        return exc


def _settle_awaitable(pending: Awaitable[Any]) -> BaseException | None:
    if _running_loop() is not None:
        if inspect.iscoroutine(pending):
            pending.close()
        raise InvalidOptionError("pending", pending)
    return asyncio.run(_outcome(pending))


def _settle_asyncio_future(pending: asyncio.Future[Any]) -> BaseException | None:
    loop = pending.get_loop()
    if _running_loop() is loop:
        raise InvalidOptionError("pending", pending)
    if loop.is_running():
        return asyncio.run_coroutine_threadsafe(_outcome(pending), loop).result()
    return loop.run_until_complete(_outcome(pending))


async def _outcome(pending: Awaitable[Any]) -> BaseException | None:
    try:
        await pending
    except Exception as exc:
        return exc
    except asyncio.CancelledError as exc:
        if isinstance(pending, asyncio.Future) and pending.cancelled():
            return exc
        raise
    return None


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None
