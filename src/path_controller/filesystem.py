"""Filesystem abstraction for testability.

This module provides the production filesystem used by PathController.
The RealFileSystem implementation wraps standard library operations and
lets their OSErrors propagate unchanged.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os, Path and shutil operations.
    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        return path.is_dir()

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        return path.is_file()

    def list_dir(self, path: Path) -> list[str]:
        """List entry names of a directory in sorted order."""
        return sorted(os.listdir(path))

    def read(self, path: Path, mode: str = "r", encoding: str | None = None) -> str | bytes:
        """Read text or bytes from a file.

        Append modes open positioned at the end, so reads start from the
        beginning explicitly.
        """
        if encoding is None:
            with open(path, mode + "b") as f:
                f.seek(0)
                return f.read()
        with open(path, mode, encoding=encoding) as f:
            f.seek(0)
            return f.read()

    def write(
        self,
        path: Path,
        data: str | bytes | bytearray | memoryview,
        mode: str = "w",
        encoding: str = "utf-8",
        permissions: int = 0o666,
    ) -> None:
        """Write text or bytes to a file."""

        def opener(file: str, flags: int) -> int:
            return os.open(file, flags, permissions)

        if isinstance(data, str):
            with open(path, mode, encoding=encoding, opener=opener) as f:
                f.write(data)
        else:
            with open(path, mode + "b", opener=opener) as f:
                f.write(data)

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file content and permission bits."""
        shutil.copyfile(src, dst)
        shutil.copymode(src, dst)

    def make_dirs(self, path: Path) -> None:
        """Create a directory with parents."""
        path.mkdir(parents=True, exist_ok=True)

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        path.unlink()

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        shutil.rmtree(path)
