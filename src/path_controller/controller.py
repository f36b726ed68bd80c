"""Path objects with an existence snapshot and synchronous file operations."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Union

from rich.text import Text

from path_controller.display import render_path
from path_controller.filesystem import RealFileSystem
from path_controller.options import ReadOptions, WriteOptions
from path_controller.protocols import FileSystem

logger = logging.getLogger(__name__)


class PathController:
    """A filesystem location plus what it was when the object was created.

    ``exists``, ``is_directory`` and ``is_file`` are queried once in the
    constructor and never refreshed, not even by this object's own
    ``write``/``mkdir``/``copy``/``move``. Build a new controller to see the
    current state.

    All operations block. Errors from the filesystem propagate unchanged;
    "not applicable" results are returned as None.
    """

    __slots__ = ("_path", "_filesystem", "_exists", "_is_directory", "_is_file")

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        filesystem: FileSystem | None = None,
    ) -> None:
        """Create a controller and snapshot the path's state.

        Args:
            path: Raw path. None becomes the empty path, which never exists.
            filesystem: Filesystem to query. Defaults to RealFileSystem.
        """
        self._path = os.fspath(path) if path else ""
        self._filesystem = filesystem or RealFileSystem()
        self._exists = bool(self._path) and self._filesystem.exists(Path(self._path))
        self._is_directory = self._exists and self._filesystem.is_dir(Path(self._path))
        self._is_file = (
            self._exists
            and not self._is_directory
            and self._filesystem.is_file(Path(self._path))
        )

    @classmethod
    def make(
        cls,
        path: ProduciblePath | None = None,
        filesystem: FileSystem | None = None,
    ) -> PathController:
        """Return path unchanged if it is a controller, otherwise wrap it.

        Args:
            path: String, os.PathLike or existing controller.
            filesystem: Filesystem for a newly created controller.

        Returns:
            A PathController.
        """
        if isinstance(path, PathController):
            return path
        return cls(path, filesystem=filesystem)

    def __fspath__(self) -> str:
        return self.absolute_path

    def __str__(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._path!r})"

    @property
    def path(self) -> str:
        """The raw path as supplied."""
        return self._path

    @property
    def filesystem(self) -> FileSystem:
        return self._filesystem

    @property
    def exists(self) -> bool:
        return self._exists

    @property
    def is_directory(self) -> bool:
        return self._is_directory

    @property
    def is_file(self) -> bool:
        return self._is_file

    # ------------------------------------------------------------------
    # Derived accessors
    # ------------------------------------------------------------------

    @property
    def extension(self) -> str:
        """Extension of the last segment including the dot, or ''."""
        return os.path.splitext(os.path.basename(self._path.rstrip(os.sep)))[1]

    @property
    def extension_without_dot(self) -> str:
        return self.extension[1:]

    @property
    def absolute_path(self) -> str:
        """The path resolved against the current working directory."""
        return os.path.abspath(self._path)

    @property
    def display_path(self) -> Text:
        """Absolute path for terminal output, shortened when very long."""
        return render_path(self.absolute_path)

    @property
    def parent_directory(self) -> str | None:
        """Own absolute path for a directory, containing directory for a file.

        None when the path did not exist at construction.
        """
        if self._is_directory:
            return self.absolute_path
        if self._is_file:
            return os.path.dirname(self.absolute_path)
        return None

    @property
    def basename(self) -> str:
        return os.path.basename(self.absolute_path)

    @property
    def basename_without_extension(self) -> str:
        name = self.basename
        extension = self.extension
        if extension and name != extension and name.endswith(extension):
            return name[: -len(extension)]
        return name

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def read(self, options: ReadOptions | dict[str, Any] | str | None = None) -> Any:
        """Read a file or list a directory.

        Args:
            options: ReadOptions, a mapping of its fields, or a bare
                encoding name. ``absolute_path`` only affects directories.

        Returns:
            For a directory, sorted entry names (absolute paths with
            ``absolute_path``). For a file, str when an encoding is given
            and bytes otherwise. None when the path did not exist.

        Raises:
            OSError: If the underlying read fails.
        """
        opts = ReadOptions.coerce(options)
        if self._is_directory:
            entries = self._filesystem.list_dir(Path(self.absolute_path))
            if opts.absolute_path:
                return [os.path.join(self.absolute_path, entry) for entry in entries]
            return entries
        if self._is_file:
            return self._filesystem.read(
                Path(self.absolute_path), mode=opts.open_mode, encoding=opts.encoding
            )
        return None

    def write(
        self,
        data: str | bytes | bytearray | memoryview,
        options: WriteOptions | dict[str, Any] | str | None = None,
    ) -> PathController:
        """Write data to this path, creating or overwriting the file.

        The parent directory must already exist; see mkdir.

        Raises:
            OSError: If the parent is missing or the write fails.
        """
        opts = WriteOptions.coerce(options)
        logger.debug("Writing %s", self.absolute_path)
        self._filesystem.write(
            Path(self.absolute_path),
            data,
            mode=opts.open_mode,
            encoding=opts.encoding,
            permissions=opts.mode,
        )
        return self

    def copy(self, target: ProduciblePath) -> PathController:
        """Copy this file or directory tree to target.

        Files already at the destination are overwritten, other files there
        are left alone. Nothing happens if this path did not exist.

        Args:
            target: Destination path or controller.

        Returns:
            This controller.
        """
        destination = self.make(target, filesystem=self._filesystem)
        if self._is_file:
            logger.debug("Copying %s to %s", self.absolute_path, destination.absolute_path)
            self._filesystem.copy_file(
                Path(self.absolute_path), Path(destination.mkdir().absolute_path)
            )
        elif self._is_directory:
            logger.debug("Copying tree %s to %s", self.absolute_path, destination.absolute_path)
            destination.mkdir(include_self=True)
            for source_file in self.deep_list() or []:
                relative = os.path.relpath(source_file, self.absolute_path)
                target_file = self.make(
                    os.path.join(destination.absolute_path, relative),
                    filesystem=self._filesystem,
                )
                self._filesystem.copy_file(
                    Path(source_file), Path(target_file.mkdir().absolute_path)
                )
        return self

    def move(self, target: ProduciblePath) -> PathController:
        """Copy to target, then delete the source.

        The source is only deleted once the copy has completed. If the copy
        raises, the source stays where it is.

        Args:
            target: Destination path or controller.

        Returns:
            A new controller for the destination.
        """
        self.copy(target)
        if self._is_file:
            logger.debug("Removing %s", self.absolute_path)
            self._filesystem.unlink(Path(self.absolute_path))
        elif self._is_directory:
            logger.debug("Removing tree %s", self.absolute_path)
            self._filesystem.rmtree(Path(self.absolute_path))
        raw = target.path if isinstance(target, PathController) else target
        return type(self)(raw, filesystem=self._filesystem)

    def mkdir(self, include_self: bool = False) -> PathController:
        """Create this path's parent directory, or the path itself.

        Does nothing if the path existed at construction.

        Args:
            include_self: Create the path itself rather than only its parent.

        Returns:
            This controller, with its snapshot unchanged.
        """
        if self._exists:
            return self
        directory = self.absolute_path if include_self else os.path.dirname(self.absolute_path)
        logger.debug("Creating directory %s", directory)
        self._filesystem.make_dirs(Path(directory))
        return self

    def deep_list(self) -> list[str] | None:
        """Absolute paths of every non-directory entry below this directory.

        Entries are visited depth-first in sorted order. None for anything
        that is not a directory.
        """
        if not self._is_directory:
            return None
        return self._walk(self.absolute_path)

    def _walk(self, directory: str) -> list[str]:
        files: list[str] = []
        for name in self._filesystem.list_dir(Path(directory)):
            full_path = os.path.join(directory, name)
            if self._filesystem.is_dir(Path(full_path)):
                files.extend(self._walk(full_path))
            else:
                files.append(full_path)
        return files

    def join(self, *segments: str) -> PathController:
        """Controller for segments joined onto the absolute path.

        Absolute segments are appended rather than restarting the path, so
        ``join("/etc")`` stays below this controller's path.
        """
        relative = (segment.lstrip(os.sep) for segment in segments)
        joined = os.path.normpath(os.path.join(self.absolute_path, *relative))
        return self.make(joined, filesystem=self._filesystem)


ProduciblePath = Union[str, "os.PathLike[str]", PathController]


def is_producible_path(value: object) -> bool:
    """Check whether value can be passed to PathController.make.

    Only plain strings and PathController instances qualify.
    """
    return isinstance(value, (str, PathController))
