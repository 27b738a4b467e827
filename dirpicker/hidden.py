"""
Hidden-file detection.

POSIX systems hide entries whose name starts with a dot. Windows hides entries
carrying the FILE_ATTRIBUTE_HIDDEN bit. The strategy for the host platform is
picked once at import time.
"""

import os
import stat
import sys
from pathlib import Path

from .errors import AttributeQueryError


class PosixHiddenClassifier:
    """Dot-prefix rule used on macOS, Linux and other Unix-like systems."""

    name = "posix"

    def is_hidden(self, directory: Path, name: str, is_dir: bool) -> bool:
        return name.startswith(".")


class WindowsHiddenClassifier:
    """Attribute-bit rule used on Windows."""

    name = "windows"

    def is_hidden(self, directory: Path, name: str, is_dir: bool) -> bool:
        """
        Check the hidden attribute of an entry.

        Args:
            directory: For a directory, its own full path. For a file, the
                directory containing it.
            name: Base name of the entry.
            is_dir: Whether the entry is a directory.

        Returns:
            True if the hidden attribute bit is set.

        Raises:
            AttributeQueryError: If the attribute lookup fails.
        """
        target = Path(directory) if is_dir else Path(directory) / name
        try:
            attributes = os.stat(target).st_file_attributes
        except (OSError, ValueError, AttributeError) as e:
            raise AttributeQueryError(f"cannot read attributes of {target}: {e}") from e
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)


def select_classifier(platform: str | None = None):
    """Return the hidden-file strategy for a platform (default: the host)."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        return WindowsHiddenClassifier()
    return PosixHiddenClassifier()


classifier = select_classifier()


def is_hidden(path: Path | str, is_dir: bool = True) -> bool:
    """
    Check whether a path is hidden on the host platform.

    For directories the path itself is queried; for files the parent directory
    and file name are joined, matching how entries are queried while listing.
    """
    path = Path(path)
    directory = path if is_dir else path.parent
    return classifier.is_hidden(directory, path.name, is_dir)
