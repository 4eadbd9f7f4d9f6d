"""Application-layer ports describing collaborator responsibilities.

Purpose
-------
Define the structural contracts the verifier depends on so that it never
imports a test framework or an event loop directly.

Contents
--------
* :class:`FailureReporter` – surfaces an assertion mismatch to the host test
  framework.
* :class:`Awaiter` – blocks on a pending asynchronous operation and hands back
  whatever it raised.

System Role
-----------
Adapters under :mod:`lib_exception_assert.adapters` implement these protocols;
:class:`~lib_exception_assert.application.verify.ExceptionVerifier` receives
them through its constructor.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FailureReporter(Protocol):
    """Report an assertion failure with a human-readable message.

    Why
    ----
    Each host framework aborts a test its own way (``AssertionError``,
    ``pytest.fail``, ``TestCase.fail``). The verifier only needs somewhere to
    send the message.

    Contract
    --------
    Implementations usually raise and never return. The verifier does not rely
    on that and still returns ``None`` after calling :meth:`fail`.
    """

    def fail(self, message: str) -> None:
        """Flag the enclosing test as failed with *message*."""


@runtime_checkable
class Awaiter(Protocol):
    """Wait for a pending operation to settle.

    Why
    ----
    Keep event-loop and executor details out of the verification logic.
    """

    def wait(self, pending: object) -> BaseException | None:
        """Block until *pending* completes; return the exception it raised or ``None``."""
