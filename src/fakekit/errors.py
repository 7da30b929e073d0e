"""Library-level error definitions.

Assertion mismatches are not errors in this sense; they are handed to a
`FailureReporter`. These exceptions cover misuse and bad configuration.
"""


class FakekitError(Exception):
    """Base class for fakekit errors."""


class InvalidConfigError(FakekitError):
    """Raised when an environment setting holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r} ({reason})")
        self.name = name
        self.value = value
