"""
Console helpers for the dirs tool.

All user-facing output goes through a single rich Console.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Global console instance
console = Console()


def print_directory_table(directories: list[str], title: str = "Directories",
                          out: Console | None = None) -> Table:
    """Print a numbered table of directories and return it."""
    table = Table(title=escape(title))
    table.add_column("#", style="cyan", justify="right")
    table.add_column("Directory", style="magenta")

    for i, directory in enumerate(directories, 1):
        table.add_row(str(i), escape(directory))

    (out or console).print(table)
    return table


def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {escape(msg)}")


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {escape(msg)}")


def print_info(msg: str, out: Console | None = None):
    (out or console).print(f"[INFO] {msg}", markup=False, highlight=False)
