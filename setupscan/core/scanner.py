"""
Scanner service implementation for setupscan.

"""
import json
import logging
import os
from typing import Optional, Tuple

from setupscan.core.config_manager import ConfigManager
from setupscan.core.logging_config import configure_logging
from setupscan.extract import extract
from setupscan.extractors.python.setup_py import load_descriptor
from setupscan.models import InlineStatus
from setupscan.rich_utils.ui_helpers import dependencies_table, get_console
from setupscan.utils.exceptions import (
    ConfigurationError,
    SetupScanError,
    VirtualEnvRequiredError,
)
from setupscan.venv import is_in_virtual_env

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_INLINE_DEPENDENCIES = 2
EXIT_CONFIG_ERROR = 3


class ScannerService:
    """Runs project scans and single-file inspections for the CLI."""

    def __init__(self):
        self.config_manager = ConfigManager()
        self.console = get_console()

    def initialize_scan(
        self,
        config_path: Optional[str],
        output: Optional[str] = None,
        python_path: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> dict:
        """Load configuration, apply CLI overrides and configure logging."""
        config = self.config_manager.discover_and_load_config(config_path)
        config = self.config_manager.merge_config_and_args(config, output, python_path, log_level)
        configure_logging(config)
        return config

    def check_environment(self, config: dict, project_path: str) -> None:
        """Enforce ``virtualenv.require`` for the scan interpreter."""
        venv_config = config.get("virtualenv", {})
        if not venv_config.get("require"):
            return

        python_path = venv_config.get("python")
        if not is_in_virtual_env(python_path, cwd=project_path, timeout=venv_config.get("timeout", 30)):
            raise VirtualEnvRequiredError(python_path or "current interpreter")

    def save_results(self, config: dict, result: dict) -> str:
        """Write the dependencies analysis to the configured output file."""
        output_file = config.get("output", {}).get("dependencies_file", "dependencies.json")
        with open(output_file, "w") as fp:
            json.dump(result, fp, indent=4)
        return output_file

    def _display_results(self, result: dict) -> None:
        analysis = result["dependencies_analysis"]
        for package_file in analysis["package_files"]:
            title = package_file["path"]
            if package_file.get("resolved_from"):
                title += f" (from {package_file['resolved_from']})"
            elif package_file.get("inline_status") == InlineStatus.EXTERNAL.value:
                title += " (no inline dependencies)"
            self.console.print(dependencies_table(title, package_file["packages"]))

        for error in analysis.get("errors", []):
            self.console.print(f"❌ {error['path']}: {error['error']}", style="red")

        self.console.print(
            f"📦 {analysis['total_packages']} dependencies in {len(analysis['package_files'])} files",
            style="bold",
        )

    def execute_scan(
        self,
        project_path: str = ".",
        config_path: Optional[str] = None,
        output: Optional[str] = None,
        python_path: Optional[str] = None,
        as_json: bool = False,
        log_level: Optional[str] = None,
    ) -> Tuple[int, dict]:
        """Execute complete scan workflow."""
        try:
            config = self.initialize_scan(config_path, output, python_path, log_level)
        except ConfigurationError as e:
            self.console.print(f"❌ {e}", style="red")
            return EXIT_CONFIG_ERROR, {}

        if not os.path.isdir(project_path):
            self.console.print(f"❌ Project path not found: {project_path}", style="red")
            return EXIT_FAILURE, {}

        try:
            self.check_environment(config, project_path)
        except VirtualEnvRequiredError as e:
            self.console.print(f"❌ {e}", style="red")
            return EXIT_FAILURE, {}

        result = extract(project_path, config)

        if as_json:
            self.console.print_json(json.dumps(result))
        else:
            self._display_results(result)

        try:
            output_file = self.save_results(config, result)
            logger.info(f"Dependencies saved to {output_file}")
        except OSError as e:
            self.console.print(f"❌ Failed to write results: {e}", style="red")
            return EXIT_FAILURE, result

        exit_code = EXIT_FAILURE if result["dependencies_analysis"].get("errors") else EXIT_OK
        return exit_code, result

    def inspect_file(self, setup_path: str, as_json: bool = False) -> int:
        """Print the inline dependencies of a single setup script."""
        try:
            descriptor = load_descriptor(setup_path)
        except SetupScanError as e:
            self.console.print(f"❌ {e}", style="red")
            return EXIT_FAILURE

        if as_json:
            self.console.print_json(json.dumps({
                "name": descriptor.name,
                "version": descriptor.version,
                "inline_status": descriptor.inline_status.value,
                "install_requires": descriptor.install_requires,
                "requirements_file": descriptor.requirements_file,
            }))
        elif descriptor.has_inline_dependencies:
            title = descriptor.name or setup_path
            if descriptor.version:
                title += f" {descriptor.version}"
            self.console.print(dependencies_table(title, descriptor.install_requires))
        elif descriptor.inline_status == InlineStatus.EXTERNAL:
            message = "No inline dependencies found"
            if descriptor.requirements_file:
                message += f"; dependencies are read from {descriptor.requirements_file}"
            self.console.print(f"⚠️ {message}", style="yellow")
        else:
            self.console.print("⚠️ No install_requires found", style="yellow")

        return EXIT_OK if descriptor.has_inline_dependencies else EXIT_NO_INLINE_DEPENDENCIES
