"""Fixtures for invocation-log contract tests."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import pytest

from fakekit import HasInvocations
from tests.helpers.doubles import (
    FakeEngine,
    FakeFile,
    FakeMailer,
    FakeRepository,
    FileCall,
    SentMessage,
)


@dataclass
class DoubleCase:
    """A double plus three distinct calls and the records they produce.

    ``calls["a"]()`` performs a call on ``double`` that appends ``records["a"]``
    to its log; likewise for ``"b"`` and ``"c"``.
    """

    double: HasInvocations[Any]
    calls: dict[str, Callable[[], None]]
    records: dict[str, Any]

    def perform(self, *names: str) -> None:
        """Perform the named calls in order."""
        for name in names:
            self.calls[name]()

    def expect(self, *names: str) -> list[Any]:
        """Return the records the named calls produce, in order."""
        return [self.records[name] for name in names]


@pytest.fixture(params=["engine", "file", "mailer", "repository"])
def case(request: pytest.FixtureRequest) -> Iterable[DoubleCase]:
    """Yield a fresh DoubleCase for the requested double.

    Supported params:
      - `"engine"` → FakeEngine (string invocations)
      - `"file"` → FakeFile (enum invocations)
      - `"mailer"` → FakeMailer (frozen dataclass invocations)
      - `"repository"` → FakeRepository (dataclass double, no super().__init__)
    """

    match request.param:
        case "engine":
            engine = FakeEngine()
            yield DoubleCase(
                double=engine,
                calls={"a": engine.start, "b": engine.stop, "c": engine.restart},
                records={"a": "start", "b": "stop", "c": "restart"},
            )
        case "file":
            file = FakeFile()
            yield DoubleCase(
                double=file,
                calls={
                    "a": file.open,
                    "b": lambda: file.write(b"x"),
                    "c": file.close,
                },
                records={"a": FileCall.OPEN, "b": FileCall.WRITE, "c": FileCall.CLOSE},
            )
        case "mailer":
            mailer = FakeMailer(sender="ops@example.com")
            yield DoubleCase(
                double=mailer,
                calls={
                    "a": lambda: mailer.send("alice", "hi"),
                    "b": lambda: mailer.send("bob", "hi"),
                    "c": lambda: mailer.send("bob", "bye"),
                },
                records={
                    "a": SentMessage("alice", "hi"),
                    "b": SentMessage("bob", "hi"),
                    "c": SentMessage("bob", "bye"),
                },
            )
        case "repository":
            repository = FakeRepository(name="users")
            yield DoubleCase(
                double=repository,
                calls={
                    "a": lambda: repository.get("1"),
                    "b": lambda: repository.put("1"),
                    "c": lambda: repository.get("2"),
                },
                records={"a": "get:1", "b": "put:1", "c": "get:2"},
            )
        case _:
            raise ValueError(f"unknown double type: {request.param}")
