"""Failure-message formatting for invocation assertions.

Values are rendered with Rich's pretty printer so long sequences wrap onto
several lines instead of producing one unreadable line.
"""

from collections.abc import Sequence
from typing import Any

from rich.pretty import pretty_repr

from fakekit.config import get_repr_width


def render(value: Any) -> str:
    """Render a value for a failure message."""
    return pretty_repr(value, max_width=get_repr_width())


def length_mismatch(expected: Sequence[Any], actual: Sequence[Any]) -> str:
    """Describe a log whose length differs from the expected one.

    Both full sequences are included so the mismatch can be diagnosed
    without re-running the test.
    """
    return (
        f"Invocations mismatch: expected {render(list(expected))} "
        f"but got {render(list(actual))}"
    )


def element_mismatch(index: int, expected: Any, actual: Any) -> str:
    """Describe a single mismatching pair at ``index``."""
    return (
        f"Invocation mismatch at index {index}: "
        f"expected {render(expected)} but got {render(actual)}"
    )
