"""Exception capture and verification.

Purpose
-------
Run an operation, capture the exception it raises and decide whether that
exception satisfies the caller's expectations on type and message. Every
mismatch is handed to a :class:`~lib_exception_assert.application.ports.FailureReporter`;
invalid options raise :class:`~lib_exception_assert.domain.errors.InvalidOptionError`
instead.

Contents
--------
* :class:`ExceptionVerifier` – synchronous and asynchronous verification.
* :func:`unwrap_aggregate` – peel exactly one level of exception grouping.
* :func:`type_name` – stable type label used in report messages.

System Role
-----------
Application layer. Receives its reporter and awaiter through the constructor
and is wired together by :mod:`lib_exception_assert.core`.
"""

from __future__ import annotations

import asyncio
import builtins
from typing import Callable

from ..domain.errors import InvalidOptionError
from ..domain.options import DEFAULT_OPTIONS, InheritanceMode, MessageCompareMode, VerifyOptions
from ..observability import log_debug, log_info, make_event
from .ports import Awaiter, FailureReporter

NO_EXCEPTION_MESSAGE = "Expected exception but no exception was thrown."
_MESSAGE_CHECKS = (MessageCompareMode.EXACT, MessageCompareMode.CONTAINS)


def type_name(exc_type: type) -> str:
    """Return a readable name for *exc_type*.

    Builtins keep their bare name, everything else is module-qualified.

    Examples
    --------
    >>> type_name(ValueError)
    'ValueError'
    >>> from collections import OrderedDict
    >>> type_name(OrderedDict)
    'collections.OrderedDict'
    """

    if exc_type.__module__ == builtins.__name__:
        return exc_type.__qualname__
    return f"{exc_type.__module__}.{exc_type.__qualname__}"


def unwrap_aggregate(exc: BaseException) -> BaseException:
    """Return the first exception inside an exception group, else *exc* itself.

    Only one level is removed. A group sitting in first position is returned
    as-is, and sibling exceptions as well as ``__cause__`` chains are ignored.

    Examples
    --------
    >>> inner = ValueError("boom")
    >>> unwrap_aggregate(ExceptionGroup("tasks", [inner, KeyError("x")])) is inner
    True
    >>> unwrap_aggregate(inner) is inner
    True
    """

    if isinstance(exc, BaseExceptionGroup):
        return exc.exceptions[0]
    return exc


class ExceptionVerifier:
    """Check that an operation raises the expected exception.

    Why
    ----
    Tests want the raised exception back for further inspection, and want a
    precise report when it is missing or different.

    Parameters
    ----------
    reporter:
        Receives every assertion mismatch.
    awaiter:
        Settles pending operations for :meth:`verify_async`.

    Examples
    --------
    >>> from lib_exception_assert.adapters.reporters.default import CollectingReporter
    >>> from lib_exception_assert.adapters.awaiting.default import DefaultAwaiter
    >>> reporter = CollectingReporter()
    >>> verifier = ExceptionVerifier(reporter, DefaultAwaiter())
    >>> def explode():
    ...     raise KeyError("missing")
    >>> verifier.verify(explode, LookupError)
    KeyError('missing')
    >>> verifier.verify(lambda: None, KeyError) is None
    True
    >>> reporter.messages
    ['Expected exception of type KeyError but no exception was thrown.']
    """

    def __init__(self, reporter: FailureReporter, awaiter: Awaiter) -> None:
        self._reporter = reporter
        self._awaiter = awaiter

    def verify(
        self,
        operation: Callable[[], object],
        expected_type: type[BaseException] | None = None,
        options: VerifyOptions | None = None,
    ) -> BaseException | None:
        """Run *operation* once and verify the exception it raises.

        Returns
        -------
        BaseException | None
            The captured exception when it satisfies every check, otherwise
            ``None`` after the reporter has been called.

        Raises
        ------
        InvalidOptionError
            When *expected_type* or a mode in *options* is not recognised.
        """

        expected = _resolve_expected(expected_type)
        opts = _validate_options(options)
        try:
            operation()
        except _capture_class(expected) as exc:
            return self._check(exc, expected, opts)
        self._no_failure(expected_type)
        return None

    def verify_async(
        self,
        pending: object,
        expected_type: type[BaseException] | None = None,
        options: VerifyOptions | None = None,
    ) -> BaseException | None:
        """Block until *pending* settles and verify the exception it raised.

        An exception group produced by the asynchronous machinery is unwrapped
        by one level before any check runs. Cancellation of *pending* is
        checked like any other failure. Other outcomes outside the capture
        class (for example ``SystemExit`` while expecting ``ValueError``) are
        re-raised untouched.
        """

        expected = _resolve_expected(expected_type)
        opts = _validate_options(options)
        raised = self._awaiter.wait(pending)
        if raised is None:
            self._no_failure(expected_type)
            return None
        if not isinstance(raised, (_capture_class(expected), asyncio.CancelledError)):
            raise raised
        failure = unwrap_aggregate(raised)
        if failure is not raised:
            log_debug("aggregate_unwrapped", **make_event(expected, failure, {"siblings": len(raised.exceptions) - 1}))
        return self._check(failure, expected, opts)

    def _check(
        self, exc: BaseException, expected: type[BaseException], opts: VerifyOptions
    ) -> BaseException | None:
        log_debug("failure_captured", **make_event(expected, exc))
        if not self._check_type(exc, expected, opts.inheritance_mode):
            return None
        if not self._check_message(exc, opts):
            return None
        log_info("verification_passed", **make_event(expected, exc))
        return exc

    def _check_type(self, exc: BaseException, expected: type[BaseException], mode: InheritanceMode) -> bool:
        if not isinstance(exc, expected):
            return self._report(
                f"Expected exception of type {type_name(expected)} but got {type_name(type(exc))}: {exc}",
                expected,
                exc,
            )
        if mode is InheritanceMode.EXACT and type(exc) is not expected:
            return self._report(
                f"Expected exception of exactly type {type_name(expected)} but got subtype {type_name(type(exc))}",
                expected,
                exc,
            )
        return True

    def _check_message(self, exc: BaseException, opts: VerifyOptions) -> bool:
        if not opts.checks_message:
            return True
        expected_message = opts.expected_message or ""
        actual = str(exc)
        if opts.message_mode is MessageCompareMode.EXACT:
            if expected_message.casefold() == actual.casefold():
                return True
            return self._report(
                f"Expected exception message <{expected_message!r}> but got <{actual!r}>.",
                type(exc),
                exc,
            )
        if expected_message in actual:
            return True
        return self._report(
            f"Expected exception message does not contain <{expected_message}>.",
            type(exc),
            exc,
        )

    def _no_failure(self, expected_type: type[BaseException] | None) -> None:
        if expected_type is None or expected_type is Exception:
            message = NO_EXCEPTION_MESSAGE
        else:
            message = f"Expected exception of type {type_name(expected_type)} but no exception was thrown."
        log_info("no_failure_raised", **make_event(expected_type, None))
        self._reporter.fail(message)

    def _report(self, message: str, expected: type[BaseException], exc: BaseException) -> bool:
        log_info("mismatch_reported", **make_event(expected, exc, {"report": message}))
        self._reporter.fail(message)
        return False


def _resolve_expected(expected_type: object) -> type[BaseException]:
    if expected_type is None:
        return Exception
    if isinstance(expected_type, type) and issubclass(expected_type, BaseException):
        return expected_type
    raise InvalidOptionError("expected_type", expected_type)


def _validate_options(options: VerifyOptions | None) -> VerifyOptions:
    opts = DEFAULT_OPTIONS if options is None else options
    if not isinstance(opts.inheritance_mode, InheritanceMode):
        raise InvalidOptionError("inheritance_mode", opts.inheritance_mode)
    if opts.checks_message and opts.message_mode not in _MESSAGE_CHECKS:
        raise InvalidOptionError("message_mode", opts.message_mode)
    return opts


def _capture_class(expected: type[BaseException]) -> type[BaseException]:
    """Return ``Exception`` unless the caller expects something outside it."""

    return Exception if issubclass(expected, Exception) else BaseException
