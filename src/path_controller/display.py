"""Terminal rendering of paths."""

from __future__ import annotations

import os

from rich.text import Text

# Longest directory portion shown before the path is shortened
DISPLAY_DIR_MAX_LENGTH = 80
DISPLAY_ELLIPSIS = "..."
DISPLAY_STYLE = "bold dim"


def shorten_path(absolute_path: str, max_length: int = DISPLAY_DIR_MAX_LENGTH) -> str:
    """Shorten a path whose directory portion exceeds max_length.

    The first max_length characters are kept, followed by an ellipsis and
    the final path segment.

    Args:
        absolute_path: Path to shorten.
        max_length: Longest directory portion kept verbatim.

    Returns:
        The shortened path, or absolute_path unchanged when short enough.

    Example:
        >>> shorten_path("/a/b/c.txt", max_length=2)
        '/a...c.txt'
    """
    basename = os.path.basename(absolute_path)
    if len(absolute_path) - len(basename) <= max_length:
        return absolute_path
    return absolute_path[:max_length] + DISPLAY_ELLIPSIS + basename


def render_path(absolute_path: str) -> Text:
    """Render a path for the terminal, shortened and emphasized."""
    return Text(shorten_path(absolute_path), style=DISPLAY_STYLE)
