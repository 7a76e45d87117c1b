"""Combining module docs from several files into one doc string."""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import List, Optional, Sequence

from .config import Config, load_config
from .errors import EmptyFileList, PathLike
from .extractor import PrologueExtractor
from .forms import discover_forms
from .logging import get_logger
from .models import DecodedBlock
from .source import SourceLoader


class DocsIncluder:
    """Reads each requested file's module docs and joins them in request order."""

    def __init__(
        self,
        config: Config | None = None,
        loader: SourceLoader | None = None,
        extractor: PrologueExtractor | None = None,
    ) -> None:
        self.config = config or Config()
        self.loader = loader or SourceLoader(encoding=self.config.encoding)
        self.extractor = extractor or PrologueExtractor(discover_forms(self.config.forms.enabled))
        self.logger = get_logger("concat")

    def include(self, paths: Sequence[PathLike], base_dir: PathLike) -> str:
        """Return the docs of ``paths`` (relative to ``base_dir``) separated by blank lines."""
        if not paths:
            raise EmptyFileList()
        root = self.config.paths.base_dir or Path(base_dir)
        blocks: List[DecodedBlock] = []
        for relative in paths:
            full_path = self.loader.resolve(root, relative)
            self.logger.debug("Including module docs from %s", full_path)
            blocks.append(self.read_block(full_path))
        return join_blocks(blocks)

    def read_block(self, path: PathLike) -> DecodedBlock:
        return self.extractor.extract(self.loader.load(path))


def join_blocks(blocks: Sequence[DecodedBlock]) -> str:
    """Join blocks with exactly one blank line between consecutive files.

    An empty block between two documented files keeps its separator. Empty
    blocks before the first or after the last documented file add nothing.
    """
    filled = [position for position, block in enumerate(blocks) if block]
    if not filled:
        return ""
    first, last = filled[0], filled[-1]
    lines: List[str] = []
    for position in range(first, last + 1):
        if position > first:
            lines.append("")
        lines.extend(blocks[position].lines)
    return "\n".join(lines)


def include_docs(
    *paths: PathLike,
    base_dir: Optional[PathLike] = None,
    config: Optional[Config] = None,
) -> str:
    """Return the combined module docs of ``paths``.

    Paths are relative to ``base_dir``, which defaults to the directory of the
    calling module. ``config`` defaults to the ``.include-docs.yml`` found in
    that directory, if any.

    Example::

        __doc__ = include_docs("fruit/apple.rs", "fruit/orange.rs")
    """
    if not paths:
        raise EmptyFileList()
    directory = Path(base_dir) if base_dir is not None else _caller_directory()
    return DocsIncluder(config or load_config(directory)).include(paths, directory)


def include_module_docs(
    path: PathLike,
    base_dir: Optional[PathLike] = None,
    config: Optional[Config] = None,
) -> str:
    """Return the module docs of a single file; see :func:`include_docs`."""
    directory = Path(base_dir) if base_dir is not None else _caller_directory()
    return DocsIncluder(config or load_config(directory)).include([path], directory)


def _caller_directory() -> Path:
    """Directory of the module that called the public function invoking this helper."""
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame and frame.f_back else None
        filename = caller.f_globals.get("__file__") if caller else None
    finally:
        del frame
    if not filename:
        return Path.cwd()
    return Path(filename).resolve().parent


__all__ = ["DocsIncluder", "include_docs", "include_module_docs", "join_blocks"]
