"""``//!`` inner line doc comments."""

from __future__ import annotations

from typing import List

from .base import DocFormHandler
from ..models import DocForm, Region
from ..source import SourceText

MARKER = "//!"


class LineCommentHandler(DocFormHandler):
    """Each ``//!`` line is one region holding one text line."""

    form = DocForm.LINE_COMMENT

    def recognizes(self, source: SourceText, index: int) -> bool:
        return source.lines[index].text.startswith(MARKER)

    def scan(self, source: SourceText, index: int) -> Region:
        line = source.lines[index]
        return Region(
            form=self.form,
            first_line=index,
            last_line=index,
            body=line.text[len(MARKER) :],
        )

    def decode(self, region: Region) -> List[str]:
        return [strip_one_space(region.body)]


def strip_one_space(text: str) -> str:
    return text[1:] if text.startswith(" ") else text


__all__ = ["LineCommentHandler", "MARKER", "strip_one_space"]
