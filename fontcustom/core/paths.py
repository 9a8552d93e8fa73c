"""
Path helpers shared by the option resolution stages.
"""

import os
from pathlib import Path


def expand_path(path: str | os.PathLike, project_root: Path) -> Path:
    """
    Expand a user-supplied path to an absolute path.

    "~" is expanded, relative paths are taken from project_root, and
    "." / ".." segments are collapsed. Symlinks are not resolved.
    """
    expanded = Path(os.path.expanduser(os.fspath(path)))
    if not expanded.is_absolute():
        expanded = project_root / expanded
    return Path(os.path.normpath(expanded))


def relative_to_root(path: str | os.PathLike, project_root: Path) -> str:
    """
    Render a path relative to the project root for messages.

    The root itself renders as "."; paths outside it are returned unchanged.
    """
    path = Path(path)
    try:
        relative = path.relative_to(project_root)
    except ValueError:
        return str(path)
    return str(relative) if relative.parts else "."


def contains_svgs(directory: Path) -> bool:
    """Check whether a directory holds at least one .svg file (not recursive)."""
    return any(candidate.is_file() for candidate in directory.glob("*.svg"))
