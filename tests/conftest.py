from __future__ import annotations

import pytest

from lib_exception_assert.adapters.awaiting.default import DefaultAwaiter
from lib_exception_assert.adapters.reporters.default import CollectingReporter
from lib_exception_assert.application.verify import ExceptionVerifier


@pytest.fixture()
def reporter() -> CollectingReporter:
    """Reporter that records mismatches so tests can inspect every message."""

    return CollectingReporter()


@pytest.fixture()
def verifier(reporter: CollectingReporter) -> ExceptionVerifier:
    return ExceptionVerifier(reporter, DefaultAwaiter())
