"""Tests for the #![doc = "..."] attribute form."""

from __future__ import annotations

import pytest

from include_docs.errors import MalformedRegion
from include_docs.forms import AttributeStringHandler
from include_docs.source import SourceText


def _decode(text: str) -> list[str]:
    handler = AttributeStringHandler()
    source = SourceText.from_text(text)
    return handler.decode(handler.scan(source, 0))


@pytest.mark.parametrize(
    "line, expected",
    [
        ('#![doc = "docs"]', True),
        ('#![doc="docs"]', True),
        ('#![ doc = r#"docs"# ]', True),
        ('#![doc = include_docs::include_docs!("a.rs")]', False),
        ('#![doc = include_str!("README.md")]', False),
        ('#![doc(html_root_url = "https://docs.rs")]', False),
        ('#[doc = "outer"]', False),
        (' #![doc = "indented"]', False),
        ('#![forbid(unsafe_code)]', False),
    ],
)
def test_attribute_recognition(line: str, expected: bool) -> None:
    source = SourceText.from_text(line)
    assert AttributeStringHandler().recognizes(source, 0) is expected


def test_plain_literal() -> None:
    assert _decode('#![doc = "## Attribute-style docs"]\n') == ["## Attribute-style docs"]


def test_escaped_quote_and_backslash() -> None:
    assert _decode(r'#![doc = "say \"hi\" \\ ok"]') == ['say "hi" \\ ok']


def test_escaped_newlines_split_lines() -> None:
    assert _decode(r'#![doc = "first\n\nsecond"]') == ["first", "", "second"]


def test_literal_spanning_physical_lines() -> None:
    handler = AttributeStringHandler()
    source = SourceText.from_text('#![doc = "first\nsecond"]\nfn main() {}\n')
    region = handler.scan(source, 0)

    assert region.last_line == 1
    assert handler.decode(region) == ["first", "second"]


def test_raw_literal_is_verbatim() -> None:
    assert _decode('#![doc = r#"raw "quoted" \\n"#]') == ['raw "quoted" \\n']


def test_code_after_attribute_is_trailing() -> None:
    handler = AttributeStringHandler()
    region = handler.scan(SourceText.from_text('#![doc = "x"] pub struct X;\n'), 0)
    assert region.trailing == " pub struct X;"


def test_closing_bracket_on_next_line() -> None:
    handler = AttributeStringHandler()
    region = handler.scan(SourceText.from_text('#![doc = "a"\n]\nfn main() {}\n'), 0)

    assert region.last_line == 1
    assert region.trailing == ""
    assert handler.decode(region) == ["a"]


def test_literal_on_line_after_equals() -> None:
    handler = AttributeStringHandler()
    source = SourceText.from_text('#![doc =\n    "a"]\nfn main() {}\n')

    assert handler.recognizes(source, 0)
    region = handler.scan(source, 0)
    assert region.last_line == 1
    assert handler.decode(region) == ["a"]


def test_attribute_open_split_across_lines() -> None:
    source = SourceText.from_text('#![\n    doc\n    =\n    r"a"\n]\n')
    assert _decode(source.text) == ["a"]


def test_equals_followed_by_non_literal_on_next_line() -> None:
    source = SourceText.from_text('#![doc =\n    include_str!("README.md")]\n')
    assert not AttributeStringHandler().recognizes(source, 0)


def test_missing_closing_bracket() -> None:
    source = SourceText.from_text('#![doc = "x"\nfn main() {}\n')
    with pytest.raises(MalformedRegion, match="expected `]`") as excinfo:
        AttributeStringHandler().scan(source, 0)
    assert (excinfo.value.line, excinfo.value.column) == (2, 1)


def test_unterminated_literal() -> None:
    source = SourceText.from_text('#![doc = "never closed]\n', "attr.rs")
    with pytest.raises(MalformedRegion, match="unterminated double quote string") as excinfo:
        AttributeStringHandler().scan(source, 0)
    assert (excinfo.value.line, excinfo.value.column) == (1, 10)
    assert excinfo.value.path is not None and excinfo.value.path.name == "attr.rs"


def test_raw_delimiter_mismatch() -> None:
    source = SourceText.from_text('#![doc = r##"text"#]\n')
    with pytest.raises(MalformedRegion, match="unterminated raw string"):
        AttributeStringHandler().scan(source, 0)


def test_invalid_escape_position() -> None:
    source = SourceText.from_text('\n#![doc = "\\q"]\n')
    with pytest.raises(MalformedRegion, match="unknown character escape") as excinfo:
        AttributeStringHandler().scan(source, 1)
    assert (excinfo.value.line, excinfo.value.column) == (2, 11)
