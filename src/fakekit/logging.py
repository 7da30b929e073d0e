"""Console output for fakekit's own log records.

fakekit logs at DEBUG through module loggers under ``fakekit``. The pytest
plugin uses these helpers to echo those records to stderr with Rich when a
suite asks for it (``--fakekit-log-level``).
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from fakekit.errors import InvalidConfigError

LOGGER_NAME = "fakekit"


def parse_log_level(name: str) -> int:
    """Convert a level name such as ``"debug"`` into its numeric value.

    Raises:
        InvalidConfigError: If ``name`` is not a standard logging level.
    """
    level = getattr(logging, name.strip().upper(), None)
    if not isinstance(level, int):
        raise InvalidConfigError("fakekit log level", name, "unknown level name")
    return level


def config_console_handler(
    level: int = logging.DEBUG, color: bool = True
) -> RichHandler:
    """Build a stderr RichHandler that prefixes records with their logger name."""
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    handler = RichHandler(
        level=level,
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s"))
    return handler


def attach_console_handler(level: int, color: bool = True) -> RichHandler:
    """Route records of the ``fakekit`` logger at ``level`` and above to the console.

    Returns:
        The attached handler, to be passed to `detach_console_handler`.
    """
    handler = config_console_handler(level=level, color=color)
    logger = logging.getLogger(LOGGER_NAME)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def detach_console_handler(handler: logging.Handler) -> None:
    """Undo `attach_console_handler`."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    handler.close()
