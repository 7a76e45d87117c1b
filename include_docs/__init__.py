"""Extract module doc prologues from Rust source files and combine them.

Write the docs once, at the top of a submodule file, and reuse them as the
summary docs of the parent module::

    from include_docs import include_docs

    docs = include_docs("fruit/apple.rs", "fruit/orange.rs")
"""

from .concat import DocsIncluder, include_docs, include_module_docs, join_blocks
from .config import Config, ConfigError, load_config
from .errors import EmptyFileList, IncludeDocsError, MalformedRegion, UnreadableFile
from .extractor import PrologueExtractor, extract_module_docs
from .logging import get_logger
from .models import DecodedBlock, DocForm
from .source import SourceLoader, SourceText

__all__ = [
    "Config",
    "ConfigError",
    "DecodedBlock",
    "DocForm",
    "DocsIncluder",
    "EmptyFileList",
    "IncludeDocsError",
    "MalformedRegion",
    "PrologueExtractor",
    "SourceLoader",
    "SourceText",
    "UnreadableFile",
    "extract_module_docs",
    "get_logger",
    "include_docs",
    "include_module_docs",
    "join_blocks",
    "load_config",
]
