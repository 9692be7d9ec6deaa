"""Pytest configuration and fixtures."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from bookgen.outline import DEFAULT_OUTLINE


@pytest.fixture
def temp_workspace() -> Generator[Path, None, None]:
    """Create a temporary workspace directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def outline_file(temp_workspace: Path) -> Path:
    """The built-in example outline written to the workspace."""
    path = temp_workspace / "book.yaml"
    path.write_text(DEFAULT_OUTLINE)
    return path
