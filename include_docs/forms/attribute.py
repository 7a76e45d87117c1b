"""``#![doc = "..."]`` inner doc attributes."""

from __future__ import annotations

import re
from typing import List, Optional

from .base import DocFormHandler
from ..literals import LiteralError, decode_string_literal, lex_string_literal, starts_literal
from ..models import DocForm, Region
from ..source import SourceText

# Whitespace may include newlines, as in rustfmt's `#![doc =\n    "..."]`.
_ATTRIBUTE_OPEN = re.compile(r"#!\[\s*doc\s*=\s*")
_WHITESPACE = re.compile(r"\s*")


class AttributeStringHandler(DocFormHandler):
    """Doc attributes whose value is a plain or raw string literal.

    ``#![doc = include_str!(...)]`` and other non-literal values are not
    recognized, so they end the prologue instead of failing.
    """

    form = DocForm.ATTRIBUTE_STRING

    def recognizes(self, source: SourceText, index: int) -> bool:
        return self._literal_start(source, index) is not None

    def scan(self, source: SourceText, index: int) -> Region:
        start = self._literal_start(source, index)
        if start is None:
            line = source.lines[index]
            raise self.malformed(source, line.offset, "expected a doc attribute with a string literal")

        text = source.text
        try:
            literal = lex_string_literal(text, start)
        except LiteralError as exc:
            raise self.malformed(source, exc.offset, exc.message) from exc

        cursor = _WHITESPACE.match(text, literal.end).end()
        if not text.startswith("]", cursor):
            raise self.malformed(source, cursor, "expected `]` to close doc attribute")
        cursor += 1

        last_index = source.line_index_at(cursor - 1)
        last = source.lines[last_index]
        return Region(
            form=self.form,
            first_line=index,
            last_line=last_index,
            body=text[start : literal.end],
            trailing=text[cursor : last.offset + len(last.text)],
        )

    def decode(self, region: Region) -> List[str]:
        return decode_string_literal(region.body).split("\n")

    @staticmethod
    def _literal_start(source: SourceText, index: int) -> Optional[int]:
        """Offset of the string literal when the line opens a doc attribute."""
        match = _ATTRIBUTE_OPEN.match(source.text, source.lines[index].offset)
        if match is None or not starts_literal(source.text, match.end()):
            return None
        return match.end()


__all__ = ["AttributeStringHandler"]
