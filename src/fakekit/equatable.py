"""Equality derived from a value's textual rendering.

`FakeEquatable` is a mixin: two instances of the same class are equal when
their ``fake_value`` strings are equal. By default ``fake_value`` is
``repr(self)``.

`FakeEquatableWrapper` applies the same idea to values you do not own
(closures, opaque handles, third-party objects). The rendering projection is
passed explicitly and defaults to `repr`.

Note:
    This is a proxy for equality, not structural equality. Distinct values
    that render identically compare equal. That is accepted behaviour: the
    helper exists for assertions where a description is good enough.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


class FakeEquatable:
    """Mixin giving a class equality and hashing based on ``fake_value``.

    Subclasses declared with `dataclasses.dataclass` must pass ``eq=False``
    so the generated ``__eq__`` does not replace this one.
    """

    __slots__ = ()

    @property
    def fake_value(self) -> str:
        """Textual projection used for equality. Defaults to ``repr(self)``."""
        return repr(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FakeEquatable) or type(other) is not type(self):
            return NotImplemented
        return self.fake_value == other.fake_value

    def __hash__(self) -> int:
        return hash(self.fake_value)


@dataclass(frozen=True, eq=False)
class FakeEquatableWrapper(FakeEquatable, Generic[T]):
    """Wrap any value so it compares by its rendering.

    Example:
        ```py
        assert FakeEquatableWrapper(print) == FakeEquatableWrapper(print)
        assert FakeEquatableWrapper(1, render=str) == FakeEquatableWrapper("1", render=str)
        ```
    """

    element: T
    render: Callable[[T], str] = field(default=repr, kw_only=True, repr=False)

    @property
    def fake_value(self) -> str:
        return self.render(self.element)
