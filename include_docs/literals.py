"""Lexer for the string literals accepted in ``#![doc = ...]`` attributes.

Covers quoted literals with escape processing and raw literals
(``r"..."``, ``r#"..."#``, ...) which are taken verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

MAX_RAW_HASHES = 255

_LITERAL_START = re.compile(r'r#*"|"')
_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "0": "\0",
    "'": "'",
    '"': '"',
}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_CONTINUATION_WHITESPACE = frozenset(" \t\n\r")


class LiteralError(ValueError):
    """Raised for malformed literals; ``offset`` points at the offending character."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(message)
        self.message = message
        self.offset = offset


@dataclass(frozen=True)
class StringLiteral:
    """A lexed string literal token and its decoded value."""

    start: int
    end: int
    value: str


def starts_literal(text: str, pos: int) -> bool:
    """Return True when a quoted or raw string literal begins at ``pos``."""
    return _LITERAL_START.match(text, pos) is not None


def lex_string_literal(text: str, start: int) -> StringLiteral:
    """Lex the literal beginning at ``start`` and decode its value."""
    if text.startswith("r", start):
        return _lex_raw(text, start)
    if text.startswith('"', start):
        return _lex_quoted(text, start)
    raise LiteralError("expected a string literal", start)


def decode_string_literal(token: str) -> str:
    """Decode a complete literal token such as ``"a\\nb"`` or ``r#"a"#``."""
    literal = lex_string_literal(token, 0)
    if literal.end != len(token):
        raise LiteralError("unexpected characters after string literal", literal.end)
    return literal.value


def _lex_quoted(text: str, start: int) -> StringLiteral:
    out: List[str] = []
    index = start + 1
    length = len(text)
    while index < length:
        char = text[index]
        if char == '"':
            return StringLiteral(start=start, end=index + 1, value="".join(out))
        if char == "\\":
            index = _read_escape(text, index, out, start)
            continue
        if char == "\r":
            if text.startswith("\n", index + 1):
                out.append("\n")
                index += 2
                continue
            raise LiteralError("bare CR not allowed in string", index)
        out.append(char)
        index += 1
    raise LiteralError("unterminated double quote string", start)


def _read_escape(text: str, index: int, out: List[str], start: int) -> int:
    """Decode the escape at ``index`` (a backslash) into ``out``; return the next index."""
    if index + 1 >= len(text):
        raise LiteralError("unterminated double quote string", start)
    kind = text[index + 1]

    simple = _SIMPLE_ESCAPES.get(kind)
    if simple is not None:
        out.append(simple)
        return index + 2

    if kind == "x":
        digits = text[index + 2 : index + 4]
        if len(digits) < 2 or not set(digits) <= _HEX_DIGITS:
            raise LiteralError("invalid character in numeric character escape", index)
        value = int(digits, 16)
        if value > 0x7F:
            raise LiteralError("out of range hex escape", index)
        out.append(chr(value))
        return index + 4

    if kind == "u":
        return _read_unicode_escape(text, index, out)

    if kind == "\n" or (kind == "\r" and text.startswith("\n", index + 2)):
        # Line continuation: drop the newline and any leading whitespace after it.
        cursor = index + 2
        while cursor < len(text) and text[cursor] in _CONTINUATION_WHITESPACE:
            cursor += 1
        return cursor

    raise LiteralError(f"unknown character escape: `{kind}`", index)


def _read_unicode_escape(text: str, index: int, out: List[str]) -> int:
    if not text.startswith("{", index + 2):
        raise LiteralError("incorrect unicode escape sequence", index)
    close = text.find("}", index + 3)
    if close == -1:
        raise LiteralError("unterminated unicode escape", index)
    body = text[index + 3 : close]
    if not body or body.startswith("_"):
        raise LiteralError("invalid start of unicode escape", index)
    digits = body.replace("_", "")
    if not set(digits) <= _HEX_DIGITS:
        raise LiteralError("invalid character in unicode escape", index)
    if len(digits) > 6:
        raise LiteralError("overlong unicode escape", index)
    value = int(digits, 16)
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        raise LiteralError("invalid unicode character escape", index)
    out.append(chr(value))
    return close + 1


def _lex_raw(text: str, start: int) -> StringLiteral:
    cursor = start + 1
    while cursor < len(text) and text[cursor] == "#":
        cursor += 1
    hashes = cursor - start - 1
    if hashes > MAX_RAW_HASHES:
        raise LiteralError(
            f"too many `#` symbols: raw strings may be delimited by up to {MAX_RAW_HASHES} `#` symbols",
            start,
        )
    if not text.startswith('"', cursor):
        raise LiteralError("found invalid character; only `#` is allowed in raw string delimitation", cursor)

    terminator = '"' + "#" * hashes
    close = text.find(terminator, cursor + 1)
    if close == -1:
        raise LiteralError(f"unterminated raw string; expected `{terminator}`", start)
    content = text[cursor + 1 : close]
    value = content.replace("\r\n", "\n")
    if "\r" in value:
        bare = cursor + 1 + _bare_cr_index(content)
        raise LiteralError("bare CR not allowed in raw string", bare)
    return StringLiteral(start=start, end=close + len(terminator), value=value)


def _bare_cr_index(content: str) -> int:
    for index, char in enumerate(content):
        if char == "\r" and not content.startswith("\n", index + 1):
            return index
    return 0


__all__ = [
    "LiteralError",
    "MAX_RAW_HASHES",
    "StringLiteral",
    "decode_string_literal",
    "lex_string_literal",
    "starts_literal",
]
