"""Path objects bundling a path string with synchronous file operations."""

__version__ = "0.1.0"

# Export the public surface for callers and type hints
from path_controller.controller import (
    PathController,
    ProduciblePath,
    is_producible_path,
)
from path_controller.options import ReadOptions, WriteOptions
from path_controller.protocols import FileSystem

__all__ = [
    "__version__",
    "FileSystem",
    "PathController",
    "ProduciblePath",
    "ReadOptions",
    "WriteOptions",
    "is_producible_path",
]
