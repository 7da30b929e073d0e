"""Source locations attached to reported failures."""

from __future__ import annotations

import inspect
from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """A file/line pair identifying where an assertion was made.

    Used only to decorate failure messages; it never affects comparison logic.
    """

    file: str
    line: int
    function: str | None = None

    @classmethod
    def of_caller(cls, depth: int = 0) -> SourceLocation:
        """Capture the location of the code calling this method.

        Args:
            depth: Extra frames to skip. ``0`` is the direct caller of
                `of_caller`; helpers that capture on behalf of *their* caller
                pass ``1``.

        Returns:
            The captured location. If the stack is shallower than requested,
            the outermost available frame is used.
        """
        frame = inspect.currentframe()
        try:
            for _ in range(depth + 1):
                if frame is None or frame.f_back is None:
                    break
                frame = frame.f_back
            if frame is None:  # pragma: no cover - only without frame support
                return cls(file="<unknown>", line=0)
            return cls(
                file=frame.f_code.co_filename,
                line=frame.f_lineno,
                function=frame.f_code.co_name,
            )
        finally:
            del frame

    def __str__(self) -> str:
        where = f"{self.file}:{self.line}"
        if self.function:
            where += f" in {self.function}"
        return where
