"""Framework-neutral failure reporters.

Purpose
-------
Provide the reporters that need nothing beyond the standard library:
:class:`AssertionErrorReporter` aborts the test with an ``AssertionError``
subclass and :class:`CollectingReporter` records messages for soft assertions.

Both satisfy :class:`lib_exception_assert.application.ports.FailureReporter`.
"""

from __future__ import annotations

from ...domain.errors import ExpectationFailed


class AssertionErrorReporter:
    """Raise :class:`ExpectationFailed` for every reported mismatch.

    Examples
    --------
    >>> AssertionErrorReporter().fail("Expected exception but no exception was thrown.")
    Traceback (most recent call last):
    ...
    lib_exception_assert.domain.errors.ExpectationFailed: Expected exception but no exception was thrown.
    """

    def fail(self, message: str) -> None:
        raise ExpectationFailed(message)


class CollectingReporter:
    """Record reported messages instead of aborting.

    Why
    ----
    Lets a test gather several verification outcomes before asserting on them,
    and exercises the verifier's behaviour when the reporter returns.

    Examples
    --------
    >>> reporter = CollectingReporter()
    >>> reporter.fail("first")
    >>> reporter.fail("second")
    >>> reporter.messages
    ['first', 'second']
    >>> reporter.clear()
    >>> reporter.failed
    False
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def fail(self, message: str) -> None:
        self.messages.append(message)

    @property
    def failed(self) -> bool:
        """Return ``True`` once at least one message has been recorded."""

        return bool(self.messages)

    def clear(self) -> None:
        self.messages.clear()
