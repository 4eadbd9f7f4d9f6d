"""Domain-level exception hierarchy.

Purpose
-------
Separate the two failure classes the verifier can surface: assertion
mismatches (the code under test misbehaved) and invalid configuration (the
test itself is written wrong). Keeping both here lets adapters and the
composition root share one taxonomy without depending on each other.

Contents
--------
* :class:`ExceptionAssertError` – umbrella base class for library errors.
* :class:`InvalidOptionError` – unrecognised mode or expected type.
* :class:`TargetResolutionError` – a ``module:attribute`` reference could not
  be imported.
* :class:`ExpectationFailed` – assertion mismatch raised by the default
  reporter.

System Role
-----------
:class:`InvalidOptionError` is raised directly by the verifier and never routed
through a reporter. :class:`ExpectationFailed` derives from
:class:`AssertionError` so plain ``pytest``/``unittest`` runs treat it as a test
failure rather than an error.
"""

from __future__ import annotations


class ExceptionAssertError(Exception):
    """Base type for configuration errors emitted by ``lib_exception_assert``.

    Why
    ----
    Provide a single catch-all type for callers that do not need fine-grained
    handling.
    """


class InvalidOptionError(ExceptionAssertError, ValueError):
    """Raised when a verification option carries an unrecognised value.

    Why
    ----
    A bad mode is a bug in the test, not in the code under test. Reporting it as
    "the wrong exception was thrown" would send the author looking in the wrong
    place.

    Attributes
    ----------
    parameter:
        Name of the offending argument (``"inheritance_mode"``,
        ``"message_mode"`` or ``"expected_type"``).
    value:
        The rejected value.
    """

    def __init__(self, parameter: str, value: object) -> None:
        self.parameter = parameter
        self.value = value
        super().__init__(f"Unsupported value for {parameter}: {value!r}")


class TargetResolutionError(ExceptionAssertError):
    """Raised when a ``module:attribute`` reference cannot be resolved."""


class ExpectationFailed(AssertionError):
    """Assertion mismatch raised by :class:`AssertionErrorReporter`.

    Typical Sources
    ---------------
    Wrong exception type, subtype under exact inheritance, message mismatch, or
    an operation that completed without raising.
    """
