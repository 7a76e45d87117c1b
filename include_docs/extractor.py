"""Extraction of the leading doc prologue from one source file."""

from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import PathLike
from .forms import DocFormHandler, discover_forms
from .logging import get_logger
from .models import DecodedBlock, Line
from .source import SourceText


class PrologueExtractor:
    """Collects the contiguous run of module doc regions at the top of a file.

    The first recognized form fixes the run: a line in any other form, or any
    other non-blank line, ends the prologue. Blank lines inside the run become
    empty text lines and trailing ones are trimmed.
    """

    def __init__(self, handlers: Optional[Sequence[DocFormHandler]] = None) -> None:
        self.handlers: List[DocFormHandler] = (
            list(handlers) if handlers is not None else discover_forms()
        )
        self.logger = get_logger("extractor")

    def extract(self, source: SourceText) -> DecodedBlock:
        name = source.path or "<text>"
        lines = source.lines
        index = _first_content_line(lines)
        active: Optional[DocFormHandler] = None
        decoded: List[str] = []

        while index < len(lines):
            line = lines[index]
            if line.is_blank():
                if active is not None:
                    decoded.append("")
                index += 1
                continue

            if active is None:
                active = self._select(source, index)
                if active is None:
                    self.logger.debug("No module docs in %s (code at line %d)", name, line.number)
                    break
                self.logger.debug("Module docs in %s use the %s form", name, active.form.value)
            elif not active.recognizes(source, index):
                self.logger.debug("Module docs in %s end at line %d", name, line.number)
                break

            region = active.scan(source, index)
            decoded.extend(active.decode(region))
            if region.trailing.strip():
                self.logger.debug(
                    "Module docs in %s end after line %d (code follows the region)",
                    name,
                    lines[region.last_line].number,
                )
                break
            index = region.last_line + 1

        while decoded and not decoded[-1].strip():
            decoded.pop()
        self.logger.debug("Extracted %d doc lines from %s", len(decoded), name)
        return DecodedBlock(tuple(decoded))

    def _select(self, source: SourceText, index: int) -> Optional[DocFormHandler]:
        for handler in self.handlers:
            if handler.recognizes(source, index):
                return handler
        return None


def extract_module_docs(
    text: str,
    *,
    path: Optional[PathLike] = None,
    forms: Optional[Sequence[str]] = None,
) -> str:
    """Return the normalized module docs written at the top of ``text``."""
    extractor = PrologueExtractor(discover_forms(forms))
    return extractor.extract(SourceText.from_text(text, path)).text


def _first_content_line(lines: Sequence[Line]) -> int:
    """Skip a leading ``#!`` shebang line; ``#![`` starts an attribute instead."""
    if lines and lines[0].text.startswith("#!") and not lines[0].text[2:].lstrip().startswith("["):
        return 1
    return 0


__all__ = ["PrologueExtractor", "extract_module_docs"]
