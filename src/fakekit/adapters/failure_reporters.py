"""Failure reporters for pytest-based suites.

`PytestFailureReporter` fails the running test on the first report, which is
pytest's native policy. `RecordingFailureReporter` collects every report so a
test can inspect them or fail once with all of them (soft assertions).
"""

import logging

import pytest

from fakekit.interfaces.failure_reporter import Failure, FailureReporter
from fakekit.location import SourceLocation

logger = logging.getLogger(__name__)


class PytestFailureReporter(FailureReporter):
    """Report failures through `pytest.fail`."""

    def report_failure(self, message: str, location: SourceLocation) -> None:
        logger.debug("Failing test at %s: %s", location, message)
        pytest.fail(str(Failure(message, location)))


class RecordingFailureReporter(FailureReporter):
    """Collect failures in memory instead of failing immediately."""

    def __init__(self) -> None:
        self._failures: list[Failure] = []

    def report_failure(self, message: str, location: SourceLocation) -> None:
        logger.debug("Recorded failure at %s: %s", location, message)
        self._failures.append(Failure(message, location))

    @property
    def failures(self) -> list[Failure]:
        """Failures reported so far, in report order (a copy)."""
        return list(self._failures)

    @property
    def messages(self) -> list[str]:
        """Messages of the failures reported so far."""
        return [failure.message for failure in self._failures]

    def clear(self) -> None:
        """Forget every recorded failure."""
        self._failures = []

    def raise_if_failed(self) -> None:
        """Fail the running test once, listing every recorded failure.

        Does nothing when no failure was recorded.
        """
        if not self._failures:
            return
        summary = "\n".join(str(failure) for failure in self._failures)
        pytest.fail(f"{len(self._failures)} failure(s) reported:\n{summary}")

    def __len__(self) -> int:
        return len(self._failures)
