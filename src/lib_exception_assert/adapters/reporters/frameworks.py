"""Failure reporters bound to concrete test frameworks.

Contents
--------
* :class:`PytestReporter` – routes mismatches to :func:`pytest.fail` so pytest
  renders them as failures without an extra traceback frame.
* :class:`TestCaseReporter` – routes mismatches to
  :meth:`unittest.TestCase.fail` of the running test case.

``pytest`` is imported when :meth:`PytestReporter.fail` runs, keeping it an
optional dependency for callers that never use this reporter.
"""

from __future__ import annotations

import unittest


class PytestReporter:
    """Fail the current pytest test with the verifier's message."""

    def __init__(self, *, pytrace: bool = False) -> None:
        self._pytrace = pytrace

    def fail(self, message: str) -> None:
        import pytest

        pytest.fail(message, pytrace=self._pytrace)


class TestCaseReporter:
    """Fail a :class:`unittest.TestCase` with the verifier's message.

    Parameters
    ----------
    case:
        The running test case, usually ``self`` inside a test method.
    """

    __test__ = False

    def __init__(self, case: unittest.TestCase) -> None:
        self._case = case

    def fail(self, message: str) -> None:
        self._case.fail(message)
