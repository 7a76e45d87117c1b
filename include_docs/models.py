"""Core data models shared across include_docs components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class DocForm(str, Enum):
    """Concrete syntaxes a module doc prologue can be written in."""

    LINE_COMMENT = "line"
    BLOCK_COMMENT = "block"
    ATTRIBUTE_STRING = "attribute"


@dataclass(frozen=True)
class Line:
    """One physical line of a source file, without its terminator."""

    number: int
    offset: int
    text: str
    terminator: str

    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class Region:
    """A recognized doc region delimited by its form's syntax.

    ``body`` is the form-specific payload: the text after ``//!``, the text
    between ``/*!`` and ``*/``, or the string literal token of a doc attribute.
    ``trailing`` holds whatever follows the region's close on its last line.
    """

    form: DocForm
    first_line: int
    last_line: int
    body: str
    trailing: str = ""


@dataclass(frozen=True)
class DecodedBlock:
    """Decoration-free documentation lines extracted from one file."""

    lines: Tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __bool__(self) -> bool:
        return bool(self.lines)


__all__ = ["DecodedBlock", "DocForm", "Line", "Region"]
