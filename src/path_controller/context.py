"""Application context for dependency injection.

This module separates object creation from object use, so CLI commands can
be exercised in tests with substituted dependencies.

Dependencies are typed using Protocols where one exists, enabling test
doubles to be injected without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from path_controller.console import ConsoleOutput
from path_controller.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from path_controller.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for CLI dependencies.

    Provides a single injection point for the services used by commands.
    """

    filesystem: FileSystem = field(default_factory=_default_filesystem)
    output: ConsoleOutput = field(default_factory=ConsoleOutput)


def create_context() -> AppContext:
    """Factory for application dependencies.

    Use this in production code. For tests, construct AppContext directly
    with test doubles.

    Returns:
        Configured AppContext.
    """
    return AppContext()
