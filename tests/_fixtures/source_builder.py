"""Helper utilities for constructing temporary crates in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping


class SourceTreeBuilder:
    """Utility for writing source files into a throwaway crate directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "crate"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the crate."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_bytes(self, relative: str, payload: bytes) -> Path:
        """Write raw bytes, for encodings and line endings dedent would disturb."""
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
        return path

    def path(self, relative: str = "") -> Path:
        """Return a path inside the crate root."""
        return self.root / relative if relative else self.root


__all__ = ["SourceTreeBuilder"]
