"""``/*! ... */`` inner block doc comments."""

from __future__ import annotations

from typing import List

from .base import DocFormHandler
from .line_comment import strip_one_space
from ..models import DocForm, Region
from ..source import SourceText

OPEN = "/*!"
CLOSE = "*/"
CONTINUATION = "*"


class BlockCommentHandler(DocFormHandler):
    """A region runs from ``/*!`` to the ``*/`` that brings nesting back to zero."""

    form = DocForm.BLOCK_COMMENT

    def recognizes(self, source: SourceText, index: int) -> bool:
        return source.lines[index].text.startswith(OPEN)

    def scan(self, source: SourceText, index: int) -> Region:
        text = source.text
        opened_at = source.lines[index].offset
        cursor = opened_at + len(OPEN)
        depth = 1
        while depth and cursor < len(text):
            if text.startswith("/*", cursor):
                depth += 1
                cursor += 2
            elif text.startswith(CLOSE, cursor):
                depth -= 1
                cursor += 2
            else:
                cursor += 1

        if depth:
            message = "unterminated block doc comment"
            if depth > 1:
                message += f" ({depth - 1} nested `/*` left open)"
            raise self.malformed(source, opened_at, message)

        close_at = cursor - len(CLOSE)
        last_index = source.line_index_at(close_at)
        last = source.lines[last_index]
        return Region(
            form=self.form,
            first_line=index,
            last_line=last_index,
            body=text[opened_at + len(OPEN) : close_at],
            trailing=text[cursor : last.offset + len(last.text)],
        )

    def decode(self, region: Region) -> List[str]:
        parts = region.body.replace("\r\n", "\n").split("\n")
        if len(parts) == 1:
            single = strip_one_space(parts[0]).rstrip()
            return [single] if single else []

        first, *middle, last = parts
        lines: List[str] = []
        if first.strip():
            lines.append(strip_one_space(first))
        lines.extend(_strip_continuation(part) for part in middle)
        closing = _strip_continuation(last).rstrip()
        if closing:
            lines.append(closing)
        return lines


def _strip_continuation(text: str) -> str:
    """Drop a leading `` * `` continuation marker; other lines are kept verbatim."""
    stripped = text.lstrip(" \t")
    if stripped.startswith(CONTINUATION) and not stripped.startswith(CONTINUATION * 2):
        return strip_one_space(stripped[len(CONTINUATION) :])
    return text


__all__ = ["BlockCommentHandler", "CLOSE", "OPEN"]
