"""The error raised for invalid scene files and its report format."""

from __future__ import annotations

import sys
from typing import TextIO

PROGRAM_NAME = "cub3D"


class CubError(Exception):
    """A scene description or its resources could not be accepted."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


def report(error: BaseException, stream: TextIO | None = None) -> int:
    """Write the error in the program's format and return the exit status."""
    out = sys.stderr if stream is None else stream
    out.write(f"{PROGRAM_NAME}: error: {error}\n")
    return 1