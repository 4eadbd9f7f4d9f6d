"""Structured logging helpers for verification events.

Purpose
    Make every verification decision traceable (captured, unwrapped, matched,
    reported) without forcing test suites to adopt a logging backend.

Contents
    - ``TRACE_ID``: context variable storing the active trace identifier.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_trace_id``: binds or clears the active trace identifier.
    - ``log_debug`` / ``log_info``: emit structured entries via a
      single private emitter.
    - ``make_event``: builder for expected/actual event payloads.

System Integration
    Used by the verifier and the awaiting adapter. A test run that enables the
    ``lib_exception_assert`` logger (for example via ``caplog``) sees why a
    verification passed or failed, tagged with the bound trace identifier.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_exception_assert_trace_id", default=None)
"""Current trace identifier propagated through logging helpers."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_exception_assert")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so test suites may attach handlers."""

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('test_parse_rejects_empty')
    >>> TRACE_ID.get()
    'test_parse_rejects_empty'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry that includes the trace context."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry that includes the trace context."""

    _emit(logging.INFO, message, fields)


def make_event(
    expected: type[BaseException] | None,
    actual: BaseException | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured payload describing an expected/actual pair.

    What
        Returns a dictionary with ``expected`` (type name or ``None``),
        ``actual`` (type name of the captured exception or ``None``) and any
        optional payload fields.

    Examples
    --------
    >>> make_event(ValueError, KeyError('k'), {'report': 'mismatch'})
    {'expected': 'ValueError', 'actual': 'KeyError', 'report': 'mismatch'}
    >>> make_event(None, None)
    {'expected': None, 'actual': None}
    """

    event = _base_event(expected, actual)
    return _merge_payload(event, payload)


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": _with_trace(fields)})


def _with_trace(fields: Mapping[str, Any]) -> dict[str, Any]:
    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    return context


def _base_event(expected: type[BaseException] | None, actual: BaseException | None) -> dict[str, Any]:
    return {
        "expected": expected.__qualname__ if expected is not None else None,
        "actual": type(actual).__qualname__ if actual is not None else None,
    }


def _merge_payload(event: dict[str, Any], payload: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge optional diagnostic data into the event payload when provided."""

    if payload:
        event |= dict(payload)
    return event
