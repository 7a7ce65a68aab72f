"""
Virtual environment check command implementation.
"""
import sys
from typing import Optional

import typer

from setupscan.rich_utils.ui_helpers import get_console
from setupscan.venv import is_in_virtual_env


def check_venv_command(
    python_path: Optional[str] = typer.Option(None, "--python", help="Interpreter to check (default: current)"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Only set the exit code"),
):
    """Exit 0 if the interpreter runs inside a virtual environment, 1 otherwise."""
    in_venv = is_in_virtual_env(python_path)
    if not quiet:
        console = get_console()
        interpreter = python_path or "current interpreter"
        if in_venv:
            console.print(f"✅ {interpreter} is inside a virtual environment")
        else:
            console.print(f"❌ {interpreter} is not inside a virtual environment", style="red")
    sys.exit(0 if in_venv else 1)
