"""Protocol definitions for filesystem access.

PathController never touches the operating system directly; every query and
mutation goes through a FileSystem. Designing to this interface enables:
- Substitution of test doubles
- A single place where raw OS calls live

Concrete implementations satisfy the protocol structurally (duck typing).
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem primitives used by PathController.

    Errors raised by implementations are expected to be OSError subclasses
    and are propagated to callers untouched.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists (following symlinks)."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Check if a path is a directory."""
        ...

    def is_file(self, path: Path) -> bool:
        """Check if a path is a regular file."""
        ...

    def list_dir(self, path: Path) -> list[str]:
        """List the immediate entry names of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entry names in sorted order.
        """
        ...

    def read(self, path: Path, mode: str = "r", encoding: str | None = None) -> str | bytes:
        """Read the full contents of a file.

        Args:
            path: File to read.
            mode: open() mode without the text/binary suffix.
            encoding: Text encoding. None reads bytes.

        Returns:
            Decoded text when an encoding is given, raw bytes otherwise.
        """
        ...

    def write(
        self,
        path: Path,
        data: str | bytes | bytearray | memoryview,
        mode: str = "w",
        encoding: str = "utf-8",
        permissions: int = 0o666,
    ) -> None:
        """Write data to a file, creating it if needed.

        Args:
            path: File to write.
            data: Text or bytes-like payload.
            mode: open() mode without the text/binary suffix.
            encoding: Encoding used for text payloads.
            permissions: Permission bits applied when the file is created.
        """
        ...

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy file content and permission bits."""
        ...

    def make_dirs(self, path: Path) -> None:
        """Create a directory and any missing ancestors, tolerating existence."""
        ...

    def unlink(self, path: Path) -> None:
        """Remove a file."""
        ...

    def rmtree(self, path: Path) -> None:
        """Remove a directory tree."""
        ...
