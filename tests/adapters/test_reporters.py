from __future__ import annotations

import unittest

import pytest

from lib_exception_assert.adapters.reporters.default import AssertionErrorReporter, CollectingReporter
from lib_exception_assert.adapters.reporters.frameworks import PytestReporter, TestCaseReporter
from lib_exception_assert.domain.errors import ExpectationFailed


def test_assertion_error_reporter_raises() -> None:
    with pytest.raises(ExpectationFailed, match="^wrong type$"):
        AssertionErrorReporter().fail("wrong type")


def test_collecting_reporter_records_in_order() -> None:
    reporter = CollectingReporter()
    assert not reporter.failed
    reporter.fail("one")
    reporter.fail("two")
    assert reporter.messages == ["one", "two"]
    assert reporter.failed
    reporter.clear()
    assert reporter.messages == []


def test_pytest_reporter_fails_current_test() -> None:
    with pytest.raises(pytest.fail.Exception, match="no exception was thrown"):
        PytestReporter().fail("Expected exception but no exception was thrown.")


def test_pytest_outcome_is_not_an_exception_subclass() -> None:
    # The verifier only captures Exception subclasses unless told otherwise.
    assert not issubclass(pytest.fail.Exception, Exception)


def test_testcase_reporter_uses_failure_exception() -> None:
    case = unittest.TestCase()
    with pytest.raises(case.failureException, match="^mismatch$"):
        TestCaseReporter(case).fail("mismatch")
