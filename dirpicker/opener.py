"""
Open a directory in the platform's file manager.
"""

import subprocess
import sys
from pathlib import Path

from .errors import LaunchError, UnsupportedPlatformError
from .utils import print_error, print_info, print_success

LAUNCHERS = {
    "win32": "explorer",
    "darwin": "open",
    "linux": "xdg-open",
}


def get_launcher(platform: str | None = None) -> str:
    """Return the file-manager command for a platform (default: the host)."""
    platform = sys.platform if platform is None else platform
    key = "linux" if platform.startswith("linux") else platform
    try:
        return LAUNCHERS[key]
    except KeyError:
        raise UnsupportedPlatformError(f"unsupported platform: {platform}") from None


def open_directory(path: Path | str) -> subprocess.Popen:
    """
    Start the file manager on a directory without waiting for it.

    Args:
        path: Directory to open.

    Returns:
        The Popen handle of the launched process. Callers may wait() on it,
        but nothing here does.

    Raises:
        UnsupportedPlatformError: If the host platform has no known launcher.
        LaunchError: If the process could not be started.
    """
    cmd = [get_launcher(), str(path)]

    print_info(f"Executing command: {cmd[0]} {cmd[1:]}")
    try:
        process = subprocess.Popen(cmd)
    except (OSError, ValueError) as e:
        print_error(f"Failed to open directory: {e}")
        raise LaunchError(f"failed to start {cmd[0]}: {e}") from e

    print_success("Directory opened successfully")
    return process
