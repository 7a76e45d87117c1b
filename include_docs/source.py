"""Source text model and the filesystem lookup that produces it."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .errors import PathLike, UnreadableFile
from .logging import get_logger
from .models import Line

_BOM = "\ufeff"

logger = get_logger("source")


def split_lines(text: str) -> List[Line]:
    """Split text into physical lines on ``\\n``, keeping ``\\r\\n`` as a terminator kind.

    A lone ``\\r`` is content. A trailing newline does not produce an extra
    empty line.
    """
    lines: List[Line] = []
    offset = 0
    number = 1
    length = len(text)
    while offset < length:
        newline = text.find("\n", offset)
        if newline == -1:
            lines.append(Line(number=number, offset=offset, text=text[offset:], terminator=""))
            break
        if newline > offset and text[newline - 1] == "\r":
            content, terminator = text[offset : newline - 1], "\r\n"
        else:
            content, terminator = text[offset:newline], "\n"
        lines.append(Line(number=number, offset=offset, text=content, terminator=terminator))
        offset = newline + 1
        number += 1
    return lines


@dataclass(frozen=True)
class SourceText:
    """Immutable contents of one source file plus its physical lines."""

    text: str
    path: Optional[Path] = None
    lines: Tuple[Line, ...] = field(init=False, repr=False, compare=False)
    _starts: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lines = tuple(split_lines(self.text))
        object.__setattr__(self, "lines", lines)
        object.__setattr__(self, "_starts", tuple(line.offset for line in lines))

    @classmethod
    def from_text(cls, text: str, path: Optional[PathLike] = None) -> "SourceText":
        """Build a SourceText, dropping a leading byte-order mark."""
        if text.startswith(_BOM):
            text = text[len(_BOM) :]
        return cls(text=text, path=Path(path) if path is not None else None)

    def line_index_at(self, offset: int) -> int:
        """Return the index into ``lines`` of the line containing ``offset``."""
        if not self.lines:
            return 0
        return max(bisect_right(self._starts, offset) - 1, 0)

    def position(self, offset: int) -> Tuple[int, int]:
        """Return the 1-based ``(line, column)`` of a character offset."""
        if not self.lines:
            return 1, 1
        line = self.lines[self.line_index_at(offset)]
        return line.number, offset - line.offset + 1


class SourceLoader:
    """Resolves requested paths against a base directory and reads them."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def resolve(self, base_dir: PathLike, relative: PathLike) -> Path:
        """Join ``relative`` onto ``base_dir``; absolute paths pass through."""
        return Path(base_dir).expanduser() / Path(relative)

    def load(self, path: PathLike) -> SourceText:
        """Read a file into a SourceText or raise UnreadableFile."""
        full_path = Path(path)
        if full_path.is_dir():
            raise UnreadableFile(full_path, "is a directory")
        try:
            text = full_path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as exc:
            raise UnreadableFile(full_path, f"not valid {self.encoding}: {exc.reason}") from exc
        except OSError as exc:
            raise UnreadableFile(full_path, exc.strerror or str(exc)) from exc
        logger.debug("Read %d characters from %s", len(text), full_path)
        return SourceText.from_text(text, full_path)


__all__ = ["SourceLoader", "SourceText", "split_lines"]
