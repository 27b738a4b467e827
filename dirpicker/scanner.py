"""
Directory listing.

Lists the immediate, visible subdirectories of a root directory.
"""

import os
from pathlib import Path

from . import hidden
from .errors import DirsError, DirectoryNotFoundError, DirectoryReadError


def list_directories(root: Path | str) -> list[str]:
    """
    List the non-hidden directories directly inside a root directory.

    Entries whose metadata cannot be read, or whose hidden check fails, are
    skipped rather than reported.

    Args:
        root: The directory to list.

    Returns:
        Full paths (root joined with child name) in the order the OS returns them.

    Raises:
        DirectoryNotFoundError: If root does not exist.
        DirectoryReadError: If root cannot be listed.
    """
    root_str = os.fspath(root)
    try:
        os.stat(root_str)
    except FileNotFoundError as e:
        raise DirectoryNotFoundError(root_str) from e
    except OSError as e:
        raise DirectoryReadError(f"failed to read directory: {root_str}, error: {e}") from e

    try:
        entries = list(os.scandir(root_str))
    except OSError as e:
        raise DirectoryReadError(f"failed to read directory: {root_str}, error: {e}") from e

    directories = []
    for entry in entries:
        try:
            if not entry.is_dir(follow_symlinks=False):
                continue
            entry.stat(follow_symlinks=False)
        except OSError:
            continue

        full_path = os.path.join(root_str, entry.name)
        try:
            if hidden.classifier.is_hidden(Path(full_path), entry.name, True):
                continue
        except (DirsError, OSError):
            continue

        directories.append(full_path)

    return directories
