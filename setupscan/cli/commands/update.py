"""
Update command implementation.
"""
import sys

import typer

from setupscan.rich_utils.ui_helpers import get_console
from setupscan.update import update_dependency_file
from setupscan.utils.exceptions import SetupScanError


def update_command(
    file_path: str = typer.Argument(..., help="setup.py or requirements file to rewrite"),
    package: str = typer.Argument(..., help="Package whose version is pinned"),
    version: str = typer.Argument(..., help="Version to pin"),
):
    """Pin a dependency to a fixed version inside a dependency file."""
    console = get_console()
    try:
        changed = update_dependency_file(file_path, package, version)
    except SetupScanError as e:
        console.print(f"❌ {e}", style="red")
        sys.exit(1)

    if not changed:
        console.print(f"⚠️ {package} is not declared in {file_path}", style="yellow")
        sys.exit(1)
    console.print(f"✅ Pinned {package} to {version} in {file_path}")
