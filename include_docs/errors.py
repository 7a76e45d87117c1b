"""Exception types raised while extracting and combining module docs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class IncludeDocsError(RuntimeError):
    """Base class for every failure surfaced to the caller."""


class UnreadableFile(IncludeDocsError):
    """Raised when a requested source file cannot be read."""

    def __init__(self, path: PathLike, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read '{self.path}': {reason}")


class MalformedRegion(IncludeDocsError):
    """Raised for an unterminated block comment or an invalid doc string literal."""

    def __init__(
        self,
        message: str,
        *,
        path: Optional[PathLike] = None,
        line: int,
        column: int,
    ) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        self.line = line
        self.column = column
        location = f"{self.path}:{line}:{column}" if self.path is not None else f"{line}:{column}"
        super().__init__(f"{location}: {message}")


class EmptyFileList(IncludeDocsError):
    """Raised when docs are requested from zero files."""

    def __init__(self) -> None:
        super().__init__("Expected at least one file path")


__all__ = [
    "EmptyFileList",
    "IncludeDocsError",
    "MalformedRegion",
    "UnreadableFile",
]
