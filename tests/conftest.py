from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.source_builder import SourceTreeBuilder

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def source_tree(tmp_path: Path) -> SourceTreeBuilder:
    """Provide a reusable crate builder rooted at the pytest tmp_path."""
    return SourceTreeBuilder(tmp_path)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the checked-in sample crates."""
    return FIXTURES
