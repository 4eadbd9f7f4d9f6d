"""Shared exception types and operations for verifier tests."""

from __future__ import annotations

import asyncio


class BaseError(Exception):
    """Parent type for inheritance scenarios."""


class CustomError(BaseError):
    """Strict subtype of :class:`BaseError`."""


def raiser(exc: BaseException):
    """Return a zero-argument operation that raises *exc* when called."""

    def operation() -> None:
        raise exc

    return operation


def succeed() -> int:
    return 42


async def raise_later(exc: BaseException) -> None:
    await asyncio.sleep(0)
    raise exc


async def complete_later() -> str:
    await asyncio.sleep(0)
    return "done"
