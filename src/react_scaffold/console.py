"""Rich-based console output.

Every message the tool prints goes through the module-level ``console`` so
tests can swap it for a recording console.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, soft_wrap=True)


def print_info(message: str) -> None:
    """Print a bold informational line."""
    console.print(f"[bold blue]i[/bold blue] [bold]{escape(message)}[/bold]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]✔[/bold green] [bold]{escape(message)}[/bold]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]✖ {escape(message)}[/bold red]")


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def print_generated_files(relative_paths: list[Path]) -> None:
    """Print the list of generated files followed by the final status line.

    Args:
        relative_paths: Written files, relative to the output root, in the
            order they were generated.
    """
    console.print()
    print_info("The following files have been generated:")
    for path in relative_paths:
        console.print(f"- {path.as_posix()}", markup=False)
    console.print()
    print_success("Done")
