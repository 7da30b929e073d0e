"""Interface for reporting assertion failures to the host test framework.

The invocation-log helpers never raise on mismatch themselves. They describe
each mismatch and hand it to a `FailureReporter`, which decides whether to
fail the test immediately or collect the failure for later.
"""

import abc
from dataclasses import dataclass

from fakekit.location import SourceLocation

# pylint: disable=too-few-public-methods


@dataclass(frozen=True)
class Failure:
    """One reported assertion failure."""

    message: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class FailureReporter(abc.ABC):
    """Contract for a sink of assertion failures."""

    @abc.abstractmethod
    def report_failure(self, message: str, location: SourceLocation) -> None:
        """Report a single failure.

        Args:
            message: Human-readable description of the mismatch.
            location: Where the failing assertion was made.
        """
