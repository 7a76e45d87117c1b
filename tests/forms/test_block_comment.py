"""Tests for the /*! */ block comment form."""

from __future__ import annotations

import pytest

from include_docs.errors import MalformedRegion
from include_docs.forms import BlockCommentHandler
from include_docs.source import SourceText


def _decode(text: str) -> list[str]:
    handler = BlockCommentHandler()
    source = SourceText.from_text(text)
    return handler.decode(handler.scan(source, 0))


def test_block_comment_recognition() -> None:
    handler = BlockCommentHandler()
    assert handler.recognizes(SourceText.from_text("/*! docs */"), 0)
    assert not handler.recognizes(SourceText.from_text("/* plain */"), 0)
    assert not handler.recognizes(SourceText.from_text("/** outer */"), 0)
    assert not handler.recognizes(SourceText.from_text(" /*! indented */"), 0)


def test_single_line_block() -> None:
    assert _decode("/*! Title */\n") == ["Title"]
    assert _decode("/*!*/\n") == []


def test_star_continuation_lines_are_stripped() -> None:
    text = "/*!\n * # Title\n *\n * Body text.\n *   indented\n */\n"
    assert _decode(text) == ["# Title", "", "Body text.", "  indented"]


def test_lines_without_continuation_marker_are_kept_verbatim() -> None:
    text = "/*! First\nSecond\n    indented\n**bold** text\n*/\n"
    assert _decode(text) == ["First", "Second", "    indented", "**bold** text"]


def test_text_on_closing_line_is_kept() -> None:
    assert _decode("/*!\n * one\n * two */\n") == ["one", "two"]


def test_balanced_nested_comment_is_content() -> None:
    assert _decode("/*! uses `/* */` inside */\n") == ["uses `/* */` inside"]


def test_block_docs_fixture_layout() -> None:
    text = "/*! ## Block-style docs\n\nThese use `/*! */` comments.\n*/\n\npub struct BlockDocs;\n"
    assert _decode(text) == ["## Block-style docs", "", "These use `/*! */` comments."]


def test_scan_reports_last_line_and_trailing_code() -> None:
    handler = BlockCommentHandler()
    source = SourceText.from_text("/*! a\n b */ pub fn f() {}\nfn g() {}\n")
    region = handler.scan(source, 0)

    assert region.first_line == 0
    assert region.last_line == 1
    assert region.trailing == " pub fn f() {}"


def test_crlf_body_decodes_like_lf() -> None:
    assert _decode("/*!\r\n * one\r\n * two\r\n */\r\n") == ["one", "two"]


def test_unterminated_block_raises_with_position() -> None:
    source = SourceText.from_text("\n/*! never closed\nfn main() {}\n", "src/lib.rs")
    with pytest.raises(MalformedRegion) as excinfo:
        BlockCommentHandler().scan(source, 1)

    error = excinfo.value
    assert (error.line, error.column) == (2, 1)
    assert "unterminated block doc comment" in str(error)
    assert "src/lib.rs:2:1" in str(error)


def test_unbalanced_nested_comment_raises() -> None:
    source = SourceText.from_text("/*! opens /* nested\n")
    with pytest.raises(MalformedRegion, match="nested"):
        BlockCommentHandler().scan(source, 0)
