import os
import sys

from rich.console import Console
from rich.table import Table


def is_ci_environment():
    return (
        os.getenv('CI') is not None or
        os.getenv('GITHUB_ACTIONS') is not None or
        not sys.stdout.isatty()
    )


def get_console() -> Console:
    """Detect environment and create console."""
    if is_ci_environment():
        # CI/automated environment - no colors, no interactive elements
        return Console(force_terminal=False, no_color=True)
    return Console()


def dependencies_table(title: str, packages: list) -> Table:
    """Render an ordered list of specifiers as a numbered table."""
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Dependency", style="cyan")
    for index, package in enumerate(packages, start=1):
        table.add_row(str(index), package)
    return table
