"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a nested directory tree with text and binary files.

    Layout::

        tree/
            a.txt
            data.bin
            sub/
                b.md
                deeper/
                    c.txt
            empty/
    """
    root = tmp_path / "tree"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "data.bin").write_bytes(b"\x00\x01\xff")
    (root / "sub" / "b.md").write_text("# beta\n")
    (root / "sub" / "deeper" / "c.txt").write_text("gamma")
    return root


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create a single text file."""
    path = tmp_path / "notes.txt"
    path.write_text("hello world")
    return path


# ============================================================================
# Mock FileSystem Fixture
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock reports every path as missing and records all operations
    without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_file.return_value = False
    fs.list_dir.return_value = []
    fs.read.return_value = b""
    return fs


@pytest.fixture
def mock_file_filesystem(mock_filesystem: MagicMock) -> MagicMock:
    """Mock FileSystem where every path is an existing regular file."""
    mock_filesystem.exists.return_value = True
    mock_filesystem.is_file.return_value = True
    return mock_filesystem
