"""CLI commands using Typer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from path_controller.context import AppContext

import typer
from rich.markup import escape

from path_controller import __version__
from path_controller.context import create_context
from path_controller.controller import PathController
from path_controller.options import ReadOptions

app = typer.Typer(
    name="pathctl",
    help="Inspect, read, copy and move files and directories",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"pathctl v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging")] = False,
) -> None:
    """Inspect, read, copy and move files and directories."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def _existing(ctx: AppContext, path: str) -> PathController:
    """Wrap path, exiting with an error if it does not exist."""
    controller = PathController.make(path, filesystem=ctx.filesystem)
    if not controller.exists:
        ctx.output.show_error(f"Path not found: {escape(path)}")
        raise typer.Exit(1)
    return controller


def _shown(controller: PathController) -> str:
    return escape(str(controller.display_path))


# ============================================================================
# Inspection Commands
# ============================================================================


@app.command()
def info(
    path: Annotated[str, typer.Argument(help="Path to inspect")],
    _context=None,
) -> None:
    """Show what a path is."""
    ctx = _context or create_context()
    ctx.output.show_path_info(PathController.make(path, filesystem=ctx.filesystem))


@app.command()
def read(
    path: Annotated[str, typer.Argument(help="File or directory to read")],
    encoding: Annotated[str, typer.Option("--encoding", "-e", help="Text encoding")] = "utf-8",
    absolute: Annotated[
        bool, typer.Option("--absolute", "-a", help="Print directory entries as absolute paths")
    ] = False,
    _context=None,
) -> None:
    """Print a file's contents or a directory's entries."""
    ctx = _context or create_context()
    controller = _existing(ctx, path)

    try:
        result = controller.read(ReadOptions(encoding=encoding, absolute_path=absolute))
    except (OSError, UnicodeDecodeError, LookupError) as e:
        ctx.output.show_error(f"Failed to read {escape(path)}: {escape(str(e))}")
        raise typer.Exit(1) from e

    if result is None:
        ctx.output.show_error(f"Not a file or directory: {escape(path)}")
        raise typer.Exit(1)
    if isinstance(result, list):
        ctx.output.show_lines(result)
    else:
        ctx.output.show_content(result)


@app.command("ls")
def list_directory(
    path: Annotated[str, typer.Argument(help="Directory to list")] = ".",
    deep: Annotated[bool, typer.Option("--deep", "-d", help="List every file in the tree")] = False,
    _context=None,
) -> None:
    """List a directory."""
    ctx = _context or create_context()
    controller = _existing(ctx, path)
    if not controller.is_directory:
        ctx.output.show_error(f"Not a directory: {escape(path)}")
        raise typer.Exit(1)

    try:
        entries = controller.deep_list() if deep else controller.read({"absolute_path": True})
    except OSError as e:
        ctx.output.show_error(f"Failed to list {escape(path)}: {escape(str(e))}")
        raise typer.Exit(1) from e
    ctx.output.show_lines(entries or [])


# ============================================================================
# Mutating Commands
# ============================================================================


@app.command("cp")
def copy(
    source: Annotated[str, typer.Argument(help="File or directory to copy")],
    target: Annotated[str, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Copy a file or directory tree."""
    ctx = _context or create_context()
    controller = _existing(ctx, source)

    try:
        controller.copy(target)
    except OSError as e:
        ctx.output.show_error(f"Copy failed: {escape(str(e))}")
        raise typer.Exit(1) from e
    destination = PathController.make(target, filesystem=ctx.filesystem)
    ctx.output.show_success(f"Copied {_shown(controller)} to {_shown(destination)}")


@app.command("mv")
def move(
    source: Annotated[str, typer.Argument(help="File or directory to move")],
    target: Annotated[str, typer.Argument(help="Destination path")],
    _context=None,
) -> None:
    """Move a file or directory tree."""
    ctx = _context or create_context()
    controller = _existing(ctx, source)

    try:
        destination = controller.move(target)
    except OSError as e:
        ctx.output.show_error(f"Move failed: {escape(str(e))}")
        raise typer.Exit(1) from e
    ctx.output.show_success(f"Moved {_shown(controller)} to {_shown(destination)}")


@app.command()
def mkdir(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    parent_only: Annotated[
        bool, typer.Option("--parent-only", help="Create only the parent directory")
    ] = False,
    _context=None,
) -> None:
    """Create a directory and any missing parents."""
    ctx = _context or create_context()
    controller = PathController.make(path, filesystem=ctx.filesystem)
    if controller.exists:
        ctx.output.show_success(f"Already exists: {_shown(controller)}")
        return

    try:
        controller.mkdir(include_self=not parent_only)
    except OSError as e:
        ctx.output.show_error(f"Failed to create {escape(path)}: {escape(str(e))}")
        raise typer.Exit(1) from e
    ctx.output.show_success(f"Created {_shown(controller)}")


if __name__ == "__main__":
    app()
