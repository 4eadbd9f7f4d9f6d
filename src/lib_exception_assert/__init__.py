"""Public package surface for exception assertions.

``throws`` and ``throws_async`` cover most tests. ``ExceptionAssert`` binds a
different failure reporter (``PytestReporter``, ``TestCaseReporter``,
``CollectingReporter``), and the option enums tune type and message
strictness.
"""

from __future__ import annotations

from .adapters.reporters.default import AssertionErrorReporter, CollectingReporter
from .adapters.reporters.frameworks import PytestReporter, TestCaseReporter
from .application.ports import FailureReporter
from .application.verify import ExceptionVerifier, unwrap_aggregate
from .core import ExceptionAssert, throws, throws_async, verify_options
from .domain.errors import ExceptionAssertError, ExpectationFailed, InvalidOptionError, TargetResolutionError
from .domain.options import InheritanceMode, MessageCompareMode, VerifyOptions
from .observability import bind_trace_id, get_logger

__all__ = [
    "AssertionErrorReporter",
    "CollectingReporter",
    "ExceptionAssert",
    "ExceptionAssertError",
    "ExceptionVerifier",
    "ExpectationFailed",
    "FailureReporter",
    "InheritanceMode",
    "InvalidOptionError",
    "MessageCompareMode",
    "PytestReporter",
    "TargetResolutionError",
    "TestCaseReporter",
    "VerifyOptions",
    "bind_trace_id",
    "get_logger",
    "throws",
    "throws_async",
    "unwrap_aggregate",
    "verify_options",
]
