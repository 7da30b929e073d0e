"""Configuration utilities for FAKEKIT.

Settings are read from the environment on every call so that tests can
override them with ``monkeypatch.setenv``.
"""

import os

from fakekit.errors import InvalidConfigError

REPR_WIDTH_ENV = "FAKEKIT_REPR_WIDTH"  # pragma: no mutate
DEFAULT_REPR_WIDTH = 88


def get_repr_width() -> int:
    """Get the maximum width used when rendering values in failure messages.

    Returns:
        The value of `FAKEKIT_REPR_WIDTH`, or `DEFAULT_REPR_WIDTH` when unset.

    Raises:
        InvalidConfigError: If the variable is not a positive integer.
    """
    if not (raw := os.environ.get(REPR_WIDTH_ENV)):
        return DEFAULT_REPR_WIDTH
    try:
        width = int(raw)
    except ValueError as e:
        raise InvalidConfigError(REPR_WIDTH_ENV, raw, "expected an integer") from e
    if width <= 0:
        raise InvalidConfigError(REPR_WIDTH_ENV, raw, "must be positive")
    return width
