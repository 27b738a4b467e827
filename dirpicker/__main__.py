#!/usr/bin/env python3
"""
dirs - CLI Entry Point
======================

Usage:
    dirs                      # prompt for a root (desktop by default), then pick a subdirectory
    dirs /path/to/root        # pick a subdirectory of an explicit root
    dirs --kind dropbox       # use a well-known directory as the root
    dirs /path/to/root --open # open the picked directory in the file manager
"""

import argparse
import sys

from .config import load_settings
from .errors import DirsError, PromptError
from .opener import open_directory
from .paths import DIRECTORY_KINDS, get_directory_path
from .selector import choose_root, select_directory
from .utils import print_error, print_info


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirs",
        description="Get root directory list of directories with files to be indexed",
    )
    parser.add_argument("root", nargs="?", default=None,
                        help="Root directory (default: prompt, starting from the desktop)")
    parser.add_argument("--kind", choices=DIRECTORY_KINDS, metavar="KIND",
                        help=f"Use a well-known directory as the root ({', '.join(DIRECTORY_KINDS)})")
    parser.add_argument("--open", action="store_true", dest="open_selected",
                        help="Open the selected directory in the file manager")
    return parser


def cmd_select(root: str, open_selected: bool) -> int:
    """Select a directory from a list under an established root."""
    try:
        selected = select_directory(root)
    except PromptError as e:
        print_error(f"Prompt failed: {e}")
        return 0
    except DirsError as e:
        print_error(f"Failed to list directories: {e}")
        return 0

    if selected and open_selected:
        try:
            open_directory(selected)
        except DirsError as e:
            print_error(str(e))
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.root is not None and args.kind is not None:
        parser.error("a root directory and --kind cannot be used together")

    try:
        settings = load_settings()
        root = args.root
        if args.kind is not None:
            root = get_directory_path(args.kind)
        root = choose_root(root, settings=settings)
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    except DirsError as e:
        print_error(f"Failed to establish root directory: {e}")
        return 1

    print_info(f"You selected: {root}")

    try:
        return cmd_select(root, args.open_selected or settings.open_selected)
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
