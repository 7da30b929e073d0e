"""FAKEKIT

Small helpers for writing test doubles: equality derived from a value's
textual rendering, and a mixin that records invocations and asserts them
against an expected sequence.
"""

from fakekit.equatable import FakeEquatable, FakeEquatableWrapper
from fakekit.invocations import HasInvocations
from fakekit.location import SourceLocation

__all__ = [
    "FakeEquatable",
    "FakeEquatableWrapper",
    "HasInvocations",
    "SourceLocation",
    "__version__",
]
__version__ = "0.1.0"
