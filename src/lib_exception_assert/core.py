"""Composition root for ``lib_exception_assert``.

Purpose
-------
Wire the verifier to its default adapters and expose the call shapes test
authors actually use. Everything here forwards to
:class:`~lib_exception_assert.application.verify.ExceptionVerifier`; the only
logic of its own is turning keyword arguments into
:class:`~lib_exception_assert.domain.options.VerifyOptions`.

Contents
--------
* :func:`verify_options` – build options with the message-mode defaulting rule.
* :func:`throws` / :func:`throws_async` – module-level assertions using the
  default :class:`AssertionErrorReporter` unless another reporter is passed.
* :class:`ExceptionAssert` – entry point bound to one reporter, for suites that
  report through ``pytest.fail`` or ``TestCase.fail``.
"""

from __future__ import annotations

from typing import Callable

from .adapters.awaiting.default import DefaultAwaiter
from .adapters.reporters.default import AssertionErrorReporter
from .application.ports import FailureReporter
from .application.verify import ExceptionVerifier
from .domain.options import InheritanceMode, MessageCompareMode, VerifyOptions


def verify_options(
    expected_message: str | None = None,
    *,
    message_mode: MessageCompareMode | str | None = None,
    inheritance_mode: InheritanceMode | str = InheritanceMode.INHERITS,
) -> VerifyOptions:
    """Return :class:`VerifyOptions` for the given keyword arguments.

    Examples
    --------
    >>> verify_options().message_mode
    <MessageCompareMode.NONE: 'none'>
    >>> verify_options("bad value").message_mode
    <MessageCompareMode.EXACT: 'exact'>
    >>> verify_options(inheritance_mode="exact").inheritance_mode
    <InheritanceMode.EXACT: 'exact'>
    """

    return VerifyOptions(
        expected_message=expected_message,
        message_mode=message_mode,
        inheritance_mode=inheritance_mode,
    )


class ExceptionAssert:
    """Exception assertions bound to a single failure reporter.

    Parameters
    ----------
    reporter:
        Destination for mismatches. Defaults to :class:`AssertionErrorReporter`.

    Examples
    --------
    >>> from lib_exception_assert.adapters.reporters.default import CollectingReporter
    >>> soft = ExceptionAssert(CollectingReporter())
    >>> soft.throws(lambda: int("x"), ValueError, "invalid literal", message_mode="contains")
    ValueError("invalid literal for int() with base 10: 'x'")
    >>> soft.throws(lambda: None) is None
    True
    >>> soft.reporter.messages
    ['Expected exception but no exception was thrown.']
    """

    def __init__(self, reporter: FailureReporter | None = None) -> None:
        self.reporter = reporter if reporter is not None else AssertionErrorReporter()
        self._verifier = ExceptionVerifier(self.reporter, DefaultAwaiter())

    def throws(
        self,
        operation: Callable[[], object],
        expected_type: type[BaseException] | None = None,
        expected_message: str | None = None,
        *,
        message_mode: MessageCompareMode | str | None = None,
        inheritance_mode: InheritanceMode | str = InheritanceMode.INHERITS,
    ) -> BaseException | None:
        """Run *operation* and verify it raises *expected_type*."""

        options = verify_options(expected_message, message_mode=message_mode, inheritance_mode=inheritance_mode)
        return self._verifier.verify(operation, expected_type, options)

    def throws_async(
        self,
        pending: object,
        expected_type: type[BaseException] | None = None,
        expected_message: str | None = None,
        *,
        message_mode: MessageCompareMode | str | None = None,
        inheritance_mode: InheritanceMode | str = InheritanceMode.INHERITS,
    ) -> BaseException | None:
        """Wait for *pending* and verify it failed with *expected_type*."""

        options = verify_options(expected_message, message_mode=message_mode, inheritance_mode=inheritance_mode)
        return self._verifier.verify_async(pending, expected_type, options)


def throws(
    operation: Callable[[], object],
    expected_type: type[BaseException] | None = None,
    expected_message: str | None = None,
    *,
    message_mode: MessageCompareMode | str | None = None,
    inheritance_mode: InheritanceMode | str = InheritanceMode.INHERITS,
    reporter: FailureReporter | None = None,
) -> BaseException | None:
    """Assert that *operation* raises *expected_type* and return the exception.

    Parameters
    ----------
    operation:
        Zero-argument callable, invoked exactly once.
    expected_type:
        Exception class to expect; ``None`` accepts any :class:`Exception`.
    expected_message:
        Message to compare; ``None`` or ``""`` skips the message check.
    message_mode:
        ``EXACT`` (case-insensitive) by default when a message is given.
    inheritance_mode:
        ``INHERITS`` accepts subclasses, ``EXACT`` does not.
    reporter:
        Destination for mismatches; :class:`AssertionErrorReporter` by default.

    Raises
    ------
    ExpectationFailed
        Through the default reporter when the expectation is not met.
    InvalidOptionError
        When a mode or *expected_type* is not recognised.

    Examples
    --------
    >>> def parse():
    ...     raise ValueError("bad value")
    >>> throws(parse, ValueError, "BAD VALUE")
    ValueError('bad value')
    >>> throws(lambda: None, ValueError)
    Traceback (most recent call last):
    ...
    lib_exception_assert.domain.errors.ExpectationFailed: Expected exception of type ValueError but no exception was thrown.
    """

    return ExceptionAssert(reporter).throws(
        operation,
        expected_type,
        expected_message,
        message_mode=message_mode,
        inheritance_mode=inheritance_mode,
    )


def throws_async(
    pending: object,
    expected_type: type[BaseException] | None = None,
    expected_message: str | None = None,
    *,
    message_mode: MessageCompareMode | str | None = None,
    inheritance_mode: InheritanceMode | str = InheritanceMode.INHERITS,
    reporter: FailureReporter | None = None,
) -> BaseException | None:
    """Assert that the pending operation fails with *expected_type*.

    *pending* is a coroutine, an :mod:`asyncio` future/task or a
    :class:`concurrent.futures.Future`. An exception group raised by the
    operation is unwrapped by exactly one level, keeping its first member.

    Examples
    --------
    >>> import asyncio
    >>> async def fan_out():
    ...     async with asyncio.TaskGroup() as group:
    ...         group.create_task(asyncio.sleep(0))
    ...         raise KeyError("shard-3")
    >>> throws_async(fan_out(), KeyError)
    KeyError('shard-3')
    """

    return ExceptionAssert(reporter).throws_async(
        pending,
        expected_type,
        expected_message,
        message_mode=message_mode,
        inheritance_mode=inheritance_mode,
    )


__all__ = [
    "ExceptionAssert",
    "throws",
    "throws_async",
    "verify_options",
]
