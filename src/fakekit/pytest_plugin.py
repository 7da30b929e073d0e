"""pytest plugin shipped with fakekit.

Registered through the ``pytest11`` entry point, so it is active as soon as
fakekit is installed. It provides:

* the `failure_recorder` fixture, for soft invocation assertions;
* ``--fakekit-log-level LEVEL`` (or the ``fakekit_log_level`` ini setting),
  which echoes fakekit's own log records to stderr.
"""

from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from fakekit.adapters.failure_reporters import RecordingFailureReporter
from fakekit.errors import InvalidConfigError
from fakekit.logging import (
    attach_console_handler,
    detach_console_handler,
    parse_log_level,
)

LOG_LEVEL_OPTION = "fakekit_log_level"
console_handler_key = pytest.StashKey[RichHandler]()


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the fakekit command-line option and ini setting."""
    group = parser.getgroup("fakekit")
    group.addoption(
        "--fakekit-log-level",
        dest=LOG_LEVEL_OPTION,
        default=None,
        metavar="LEVEL",
        help="Echo fakekit log records at LEVEL and above to stderr (e.g. DEBUG).",
    )
    parser.addini(
        LOG_LEVEL_OPTION,
        help="Default for --fakekit-log-level.",
        default="",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Attach the console handler when a log level was requested."""
    level_name = config.getoption(LOG_LEVEL_OPTION) or config.getini(LOG_LEVEL_OPTION)
    if not level_name:
        return
    try:
        level = parse_log_level(level_name)
    except InvalidConfigError as e:
        raise pytest.UsageError(str(e)) from e
    config.stash[console_handler_key] = attach_console_handler(
        level, color=config.getoption("color") != "no"
    )


def pytest_unconfigure(config: pytest.Config) -> None:
    """Detach the console handler attached by `pytest_configure`, if any."""
    if (handler := config.stash.get(console_handler_key, None)) is not None:
        detach_console_handler(handler)
        del config.stash[console_handler_key]


@pytest.fixture
def failure_recorder() -> Iterator[RecordingFailureReporter]:
    """Yield a fresh `RecordingFailureReporter` for soft invocation assertions.

    Pass it as ``reporter=`` to `HasInvocations.assert_invocations`, then either
    inspect ``failure_recorder.messages`` or call ``raise_if_failed()``.
    """
    recorder = RecordingFailureReporter()
    yield recorder
    recorder.clear()
