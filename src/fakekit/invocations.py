"""Invocation recording for test doubles.

A test double mixes in `HasInvocations`, appends one record to
``self.invocations`` from each observable method, and lets tests check the
recorded sequence:

```py
class FakeEngine(HasInvocations[str]):
    def start(self):
        self.invocations.append("start")

    def stop(self):
        self.invocations.append("stop")


engine = FakeEngine()
engine.start()
engine.stop()
engine.assert_invocations(["start", "stop"])
engine.clear_invocations()
```

The invocation type is defined by the double; it only needs a meaningful
``__eq__``. The mixin never appends to the log itself.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Generic, TypeVar

from fakekit import messages
from fakekit.adapters.failure_reporters import PytestFailureReporter
from fakekit.location import SourceLocation

if TYPE_CHECKING:
    from fakekit.interfaces.failure_reporter import FailureReporter

logger = logging.getLogger(__name__)

InvocationT = TypeVar("InvocationT")

_LOG_ATTR = "_fakekit_invocations"


class HasInvocations(Generic[InvocationT]):
    """Mixin for test doubles that record the calls they receive.

    Attributes:
        invocations: Ordered log of recorded invocations. Doubles append to it;
            tests may read or replace it wholesale.
        failure_reporter: Where mismatches go when `assert_invocations` is not
            given an explicit reporter. Defaults to failing the pytest test.
    """

    failure_reporter: FailureReporter = PytestFailureReporter()

    @property
    def invocations(self) -> list[InvocationT]:
        # Created on first access; doubles may skip super().__init__().
        return self.__dict__.setdefault(_LOG_ATTR, [])

    @invocations.setter
    def invocations(self, value: list[InvocationT]) -> None:
        self.__dict__[_LOG_ATTR] = value

    def assert_invocations(
        self,
        expected: Sequence[InvocationT],
        *,
        location: SourceLocation | None = None,
        reporter: FailureReporter | None = None,
    ) -> None:
        """Check the recorded log against ``expected``.

        A length mismatch is reported once, with both full sequences, and no
        element comparison follows. Otherwise the pairs are compared in index
        order and every mismatching pair is reported.

        Args:
            expected: Invocations the caller expects, in order.
            location: Location to attach to failures. Defaults to the caller.
            reporter: Failure sink. Defaults to ``self.failure_reporter``.
        """
        if location is None:
            location = SourceLocation.of_caller(depth=1)
        if reporter is None:
            reporter = self.failure_reporter

        actual = list(self.invocations)
        wanted = list(expected)
        logger.debug(
            "Checking %d recorded invocation(s) against %d expected at %s",
            len(actual),
            len(wanted),
            location,
        )

        if len(actual) != len(wanted):
            reporter.report_failure(messages.length_mismatch(wanted, actual), location)
            return

        for index in range(len(actual)):  # pylint: disable=consider-using-enumerate
            if actual[index] != wanted[index]:
                reporter.report_failure(
                    messages.element_mismatch(index, wanted[index], actual[index]),
                    location,
                )

    def clear_invocations(self) -> None:
        """Reset the log to an empty list."""
        logger.debug(
            "Clearing %d invocation(s) on %s",
            len(self.invocations),
            type(self).__name__,
        )
        self.__dict__[_LOG_ATTR] = []
