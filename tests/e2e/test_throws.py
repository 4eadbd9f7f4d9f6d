"""End-to-end coverage for the public ``throws`` / ``throws_async`` API."""

from __future__ import annotations

import asyncio
import concurrent.futures
import unittest

import pytest

from lib_exception_assert import (
    CollectingReporter,
    ExceptionAssert,
    ExpectationFailed,
    InheritanceMode,
    InvalidOptionError,
    MessageCompareMode,
    PytestReporter,
    TestCaseReporter,
    throws,
    throws_async,
)
from tests.support import BaseError, CustomError, complete_later, raise_later, raiser


class ArgumentError(ValueError):
    pass


def test_matching_type_and_message_returns_exception() -> None:
    error = ArgumentError("bad value")
    captured = throws(
        raiser(error),
        ArgumentError,
        "bad value",
        message_mode=MessageCompareMode.EXACT,
        inheritance_mode=InheritanceMode.INHERITS,
    )
    assert captured is error


def test_subtype_rejected_with_exact_inheritance() -> None:
    with pytest.raises(ExpectationFailed, match="exactly type tests.support.BaseError"):
        throws(raiser(CustomError("x")), BaseError, inheritance_mode="exact")


def test_no_failure_with_any_exception_expected() -> None:
    with pytest.raises(ExpectationFailed, match="^Expected exception but no exception was thrown.$"):
        throws(lambda: None)


def test_message_defaults_to_exact_comparison() -> None:
    with pytest.raises(ExpectationFailed, match="Expected exception message"):
        throws(raiser(ValueError("bad value here")), ValueError, "bad value")


def test_contains_mode_passes_for_substring() -> None:
    error = ValueError("bad value here")
    assert throws(raiser(error), ValueError, "value", message_mode="contains") is error


def test_invalid_mode_is_not_an_assertion_failure() -> None:
    with pytest.raises(InvalidOptionError) as info:
        throws(raiser(ValueError("x")), ValueError, inheritance_mode="loose")
    assert not isinstance(info.value, AssertionError)


def test_none_mode_with_expected_message_is_invalid() -> None:
    with pytest.raises(InvalidOptionError) as info:
        throws(raiser(ValueError("boom")), ValueError, "totally different", message_mode=MessageCompareMode.NONE)
    assert info.value.parameter == "message_mode"


def test_cancelled_task_is_verified_like_any_failure() -> None:
    loop = asyncio.new_event_loop()
    try:
        task = loop.create_task(asyncio.sleep(10))
        task.cancel()
        with pytest.raises(ExpectationFailed, match="but got asyncio.exceptions.CancelledError"):
            throws_async(task, ValueError)
        assert isinstance(throws_async(task, asyncio.CancelledError), asyncio.CancelledError)
    finally:
        loop.close()


def test_throws_async_inside_running_loop_is_rejected() -> None:
    async def scenario() -> None:
        with pytest.raises(InvalidOptionError):
            throws_async(raise_later(ValueError("x")), ValueError)

    asyncio.run(scenario())


def test_async_failure_inside_task_group_is_unwrapped() -> None:
    async def fan_out() -> None:
        async with asyncio.TaskGroup() as group:
            group.create_task(raise_later(ArgumentError("shard failed")))

    captured = throws_async(fan_out(), ArgumentError, "SHARD FAILED")
    assert isinstance(captured, ArgumentError)


def test_async_unwrap_ignores_siblings() -> None:
    first, second = KeyError("first"), ValueError("second")
    assert throws_async(raise_later(ExceptionGroup("batch", [first, second])), KeyError) is first
    with pytest.raises(ExpectationFailed, match="Expected exception of type ValueError but got KeyError"):
        throws_async(raise_later(ExceptionGroup("batch", [first, second])), ValueError)


def test_async_unwrap_is_a_single_level() -> None:
    inner = ExceptionGroup("inner", [KeyError("deep")])
    with pytest.raises(ExpectationFailed):
        throws_async(raise_later(ExceptionGroup("outer", [inner])), KeyError)
    assert throws_async(raise_later(ExceptionGroup("outer", [inner])), ExceptionGroup) is inner


def test_async_does_not_follow_cause_chain() -> None:
    async def wrapped() -> None:
        try:
            raise KeyError("root")
        except KeyError as exc:
            raise RuntimeError("outer") from exc

    with pytest.raises(ExpectationFailed, match="but got RuntimeError"):
        throws_async(wrapped(), KeyError)


def test_async_plain_failure_is_checked_directly() -> None:
    error = CustomError("direct")
    assert throws_async(raise_later(error), BaseError, "direct") is error


def test_async_without_failure_names_type() -> None:
    with pytest.raises(ExpectationFailed, match="^Expected exception of type KeyError but no exception was thrown.$"):
        throws_async(complete_later(), KeyError)


def test_async_executor_future() -> None:
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(raiser(ArgumentError("worker")))
        assert isinstance(throws_async(future, ValueError, "worker"), ArgumentError)


def test_async_base_exception_outside_expectation_propagates() -> None:
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        future = pool.submit(raiser(SystemExit(3)))
        future.exception()
        with pytest.raises(SystemExit):
            throws_async(future, ValueError)


def test_soft_assertions_collect_every_mismatch() -> None:
    soft = ExceptionAssert(CollectingReporter())
    assert soft.throws(lambda: None, KeyError) is None
    assert soft.throws(raiser(ValueError("x")), KeyError) is None
    assert soft.throws_async(complete_later()) is None
    assert soft.reporter.messages == [
        "Expected exception of type KeyError but no exception was thrown.",
        "Expected exception of type KeyError but got ValueError: x",
        "Expected exception but no exception was thrown.",
    ]


def test_pytest_reporter_integration() -> None:
    with pytest.raises(pytest.fail.Exception, match="no exception was thrown"):
        throws(lambda: None, ValueError, reporter=PytestReporter())


class UnittestIntegration(unittest.TestCase):
    def test_reports_through_testcase(self) -> None:
        check = ExceptionAssert(TestCaseReporter(self))
        with self.assertRaises(self.failureException):
            check.throws(raiser(KeyError("k")), ValueError)
        captured = check.throws(raiser(KeyError("k")), LookupError)
        self.assertIsInstance(captured, KeyError)
