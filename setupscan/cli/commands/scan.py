"""
Scan and inspect command implementations.

Thin wrappers around ScannerService that handle CLI argument parsing
and delegate business logic to the service layer.
"""
import sys
from typing import Optional

import typer

from setupscan.core.scanner import ScannerService


def scan_command(
    project_path: str = typer.Argument(".", help="Project directory to scan"),
    config_path: Optional[str] = typer.Option(None, "-c", "--config", help="Path to config YAML"),
    output: Optional[str] = typer.Option(None, "-o", "--output", help="Output file override"),
    python_path: Optional[str] = typer.Option(None, "--python", help="Interpreter checked by virtualenv.require"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level override"),
):
    """Extract declared dependencies from setup.py and requirements files."""

    scanner_service = ScannerService()
    exit_code, _ = scanner_service.execute_scan(
        project_path=project_path,
        config_path=config_path,
        output=output,
        python_path=python_path,
        as_json=as_json,
        log_level=log_level,
    )

    if exit_code != 0:
        sys.exit(exit_code)


def inspect_command(
    setup_path: str = typer.Argument(..., help="Path to a setup.py script"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Show the inline install_requires of one setup script.

    Exits with 2 when the script does not declare its dependencies inline.
    """
    exit_code = ScannerService().inspect_file(setup_path, as_json=as_json)
    if exit_code != 0:
        sys.exit(exit_code)
