"""
Well-known directory lookup.

Maps a small, fixed vocabulary of directory-kind tags to paths.
"""

import os
import sys
from pathlib import Path

from .errors import PathLookupError, UnsupportedKindError

# Tags resolved relative to the user's home directory
HOME_SUFFIXES = {
    "userProfile": "",
    "desktop": "Desktop",
    "preferences": "preferences",
    "config": "config",
    "dropbox": "Dropbox",
    "oneDrive": "OneDrive",
}

DIRECTORY_KINDS = ("exec", "output", *HOME_SUFFIXES)


def _home_dir() -> str:
    try:
        return str(Path.home())
    except (RuntimeError, KeyError, OSError) as e:
        raise PathLookupError(f"error getting user profile directory: {e}") from e


def _executable_dir() -> str:
    # Frozen builds run from the bundled executable; otherwise use the launching script.
    if getattr(sys, "frozen", False) or not sys.argv or not sys.argv[0]:
        executable = sys.executable
    else:
        executable = sys.argv[0]
    if not executable:
        raise PathLookupError("error getting executable directory: executable path is unknown")
    try:
        return str(Path(executable).resolve().parent)
    except (OSError, RuntimeError) as e:
        raise PathLookupError(f"error getting executable directory: {e}") from e


def get_directory_path(kind: str) -> str:
    """
    Resolve a directory-kind tag to a path.

    Args:
        kind: One of DIRECTORY_KINDS (case-sensitive).

    Returns:
        The directory path. Nothing is created or checked for existence.

    Raises:
        UnsupportedKindError: If kind is not a known tag.
        PathLookupError: If the home directory or executable path lookup fails.
    """
    if kind == "exec":
        return _executable_dir()
    if kind == "output":
        return os.path.join(".", "output")
    if kind not in HOME_SUFFIXES:
        raise UnsupportedKindError(kind)

    home = _home_dir()
    suffix = HOME_SUFFIXES[kind]
    return os.path.join(home, suffix) if suffix else home


def get_user_desktop_dir() -> str:
    """Return the user's desktop directory."""
    return get_directory_path("desktop")
