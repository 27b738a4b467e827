"""
Interactive directory selection.

Two prompts drive the dirs tool: a free-text prompt for the root directory and
a numbered single-choice list of the root's subdirectories. The chosen path is
returned to the caller; nothing is stored globally.
"""

import os
import sys

from rich.console import Console
from rich.prompt import IntPrompt, Prompt

from .config import Settings, load_settings
from .errors import DirectoryNotFoundError, PromptError
from .paths import get_directory_path
from .scanner import list_directories
from .utils import console as default_console, print_directory_table, print_info

ROOT_PROMPT = "Press enter for default or enter new root directory"
SELECT_PROMPT = "Choose a directory"


def is_interactive() -> bool:
    """Return True when stdin is attached to a terminal."""
    return sys.stdin is not None and sys.stdin.isatty()


def _ask(prompt_cls, message: str, **kwargs):
    if not is_interactive():
        raise PromptError("stdin is not an interactive terminal")
    try:
        return prompt_cls.ask(message, **kwargs)
    except (EOFError, KeyboardInterrupt) as e:
        raise PromptError(f"prompt cancelled ({type(e).__name__})") from e


def prompt_for_root_directory(default_dir: str, console: Console | None = None) -> str:
    """
    Ask for a root directory, offering a default.

    Args:
        default_dir: Returned when the user just presses Enter. It is not
            checked for existence.
        console: Console to prompt on (defaults to the shared one).

    Returns:
        The default, or the directory the user typed.

    Raises:
        DirectoryNotFoundError: If the typed directory does not exist.
        PromptError: If the terminal interaction fails.
    """
    console = console or default_console
    result = _ask(Prompt, ROOT_PROMPT, default=default_dir, console=console)

    result = (result or "").strip()
    if not result or result == default_dir:
        return default_dir

    if not os.path.isdir(result):
        raise DirectoryNotFoundError(result)

    return result


def choose_root(root: str | None = None, settings: Settings | None = None,
                console: Console | None = None) -> str:
    """
    Establish the root directory for selection.

    The default root (the desktop unless configured otherwise) is resolved
    first, so a failing home-directory lookup is reported even when a root is
    given explicitly.

    Args:
        root: Explicit root. Used as-is; existence is checked when listing.
        settings: Runtime settings (loaded from the environment if omitted).
        console: Console to prompt on.

    Returns:
        The root directory to list.
    """
    settings = settings or load_settings()
    default_dir = get_directory_path(settings.default_kind)

    if root is not None:
        return root

    return prompt_for_root_directory(default_dir, console=console)


def select_directory(root: str, console: Console | None = None) -> str | None:
    """
    List the visible subdirectories of root and let the user pick one.

    Args:
        root: An established root directory.
        console: Console to print and prompt on.

    Returns:
        The chosen directory, or None when root has no visible subdirectories.

    Raises:
        DirectoryNotFoundError: If root does not exist.
        DirectoryReadError: If root cannot be listed.
        PromptError: If the terminal interaction fails.
    """
    console = console or default_console
    directories = list_directories(root)

    if not directories:
        console.print("No directories found.")
        return None

    print_directory_table(directories, title=f"Directories in {root}", out=console)
    choices = [str(i) for i in range(1, len(directories) + 1)]
    index = _ask(IntPrompt, SELECT_PROMPT, choices=choices, show_choices=False, console=console)

    selected = directories[index - 1]
    print_info(f"You selected: {selected}", out=console)
    return selected


def choose_directory(root: str | None = None, settings: Settings | None = None) -> str | None:
    """Run the full flow: pick a root, then pick one of its subdirectories."""
    root = choose_root(root, settings=settings)
    print_info(f"You selected: {root}")
    return select_directory(root)
