"""
dirs - Directory Picker
=======================

A command-line tool for picking a directory interactively, plus helpers for
creating directories and files, resolving well-known directories and opening
a directory in the file manager.
"""

__version__ = "1.0.0"

from .errors import (
    DirsError,
    DirectoryNotFoundError,
    DirectoryReadError,
    OSQueryError,
    AttributeQueryError,
    PathLookupError,
    PromptError,
    UnsupportedKindError,
    UnsupportedPlatformError,
    LaunchError,
    ProvisionError,
)
from .hidden import is_hidden, select_classifier
from .scanner import list_directories
from .paths import DIRECTORY_KINDS, get_directory_path, get_user_desktop_dir
from .provision import create_dir_if_not_exists, create_file_if_not_exists
from .opener import open_directory
from .selector import choose_directory, choose_root, prompt_for_root_directory, select_directory

__all__ = [
    "DirsError",
    "DirectoryNotFoundError",
    "DirectoryReadError",
    "OSQueryError",
    "AttributeQueryError",
    "PathLookupError",
    "PromptError",
    "UnsupportedKindError",
    "UnsupportedPlatformError",
    "LaunchError",
    "ProvisionError",
    "is_hidden",
    "select_classifier",
    "list_directories",
    "DIRECTORY_KINDS",
    "get_directory_path",
    "get_user_desktop_dir",
    "create_dir_if_not_exists",
    "create_file_if_not_exists",
    "open_directory",
    "choose_directory",
    "choose_root",
    "prompt_for_root_directory",
    "select_directory",
]
