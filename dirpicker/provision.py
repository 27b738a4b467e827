"""
Directory and file provisioning.

Both helpers are idempotent: calling them again with overwrite=False leaves an
existing path alone. With overwrite=True the path is removed and recreated.
A failure part-way through is not rolled back.
"""

import os
import shutil
from pathlib import Path

from .errors import ProvisionError


def _remove_tree(path: str) -> None:
    # Files and symlinks are unlinked; only real directories are removed recursively
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


def _remove_entry(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


def create_dir_if_not_exists(path: Path | str, overwrite: bool = False) -> None:
    """
    Create a directory (and missing parents) unless it already exists.

    Args:
        path: Directory to create.
        overwrite: If True and the path exists, delete it (with all its
            contents, for a directory) and create it again empty.

    Raises:
        ProvisionError: If removing or creating the directory fails.
    """
    path = os.fspath(path)
    if not os.path.exists(path):
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise ProvisionError(f"error creating directory: {e}") from e
    elif overwrite:
        try:
            _remove_tree(path)
        except OSError as e:
            raise ProvisionError(f"error removing existing directory: {e}") from e
        try:
            os.makedirs(path, exist_ok=True)
        except OSError as e:
            raise ProvisionError(f"error creating directory after removal: {e}") from e


def _create_empty_file(path: str) -> None:
    with open(path, "w", encoding="utf-8"):
        pass


def create_file_if_not_exists(path: Path | str, overwrite: bool = False) -> None:
    """
    Create an empty file unless it already exists.

    Args:
        path: File to create. Its parent directory must exist.
        overwrite: If True and the path exists (a file, symlink or empty
            directory), delete it and create it again empty.

    Raises:
        ProvisionError: If removing or creating the file fails.
    """
    path = os.fspath(path)
    if not os.path.exists(path):
        try:
            _create_empty_file(path)
        except OSError as e:
            raise ProvisionError(f"error creating file: {e}") from e
    elif overwrite:
        try:
            _remove_entry(path)
        except OSError as e:
            raise ProvisionError(f"error removing existing file: {e}") from e
        try:
            _create_empty_file(path)
        except OSError as e:
            raise ProvisionError(f"error creating file after removal: {e}") from e
