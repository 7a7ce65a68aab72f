"""
Python ecosystem dependency extractor.

Discovers setup.py scripts and requirements files in a project and reads
their declared dependencies without executing anything.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from setupscan.extractors.base import BaseExtractor
from setupscan.extractors.python.requirements import parse_requirements_file
from setupscan.extractors.python.setup_py import load_descriptor
from setupscan.models import DependencySpecifier, InlineStatus
from setupscan.utils.exceptions import SetupScanError

logger = logging.getLogger(__name__)


class PythonExtractor(BaseExtractor):
    """Extracts declared dependencies from setup.py and requirements files."""

    def __init__(self, project_path: str = ".", config: Optional[Dict] = None):
        scan_config = self.validate_config(config)
        super().__init__(project_path, exclude=scan_config.get("exclude"))
        self.scan_config = scan_config

    @property
    def ecosystem_name(self) -> str:
        return "python"

    @property
    def supported_files(self) -> List[str]:
        return list(self.scan_config["setup_files"]) + [self.scan_config["requirements_pattern"]]

    def can_extract(self) -> bool:
        return bool(self.get_dependency_files())

    def _relative(self, file_path: Path) -> str:
        try:
            return file_path.relative_to(self.project_path).as_posix()
        except ValueError:
            return file_path.as_posix()

    def _is_setup_script(self, file_path: Path) -> bool:
        return file_path.name in self.scan_config["setup_files"]

    def _extract_setup_script(self, file_path: Path) -> Dict[str, Any]:
        descriptor = load_descriptor(file_path)
        entry = {
            "path": self._relative(file_path),
            "ecosystem": self.ecosystem_name,
            "type": "setup_script",
            "name": descriptor.name,
            "version": descriptor.version,
            "inline_status": descriptor.inline_status.value,
            "requirements_file": descriptor.requirements_file,
            "packages": list(descriptor.install_requires or []),
        }

        if descriptor.inline_status != InlineStatus.EXTERNAL:
            return entry

        logger.info(f"{entry['path']} does not declare dependencies inline")
        if not (descriptor.requirements_file and self.scan_config["follow_requirements_files"]):
            return entry

        requirements_path = file_path.parent / descriptor.requirements_file
        if not requirements_path.is_file():
            logger.warning(
                f"{entry['path']} refers to {descriptor.requirements_file}, which does not exist"
            )
            return entry

        entry["packages"] = parse_requirements_file(requirements_path)
        entry["resolved_from"] = self._relative(requirements_path)
        return entry

    def _extract_requirements_file(self, file_path: Path) -> Dict[str, Any]:
        return {
            "path": self._relative(file_path),
            "ecosystem": self.ecosystem_name,
            "type": "requirements",
            "packages": parse_requirements_file(file_path),
        }

    def extract_dependencies(self, config: Optional[Dict] = None) -> Dict[str, Any]:
        """
        Extract dependencies from every setup script and requirements file.

        Files that fail to parse are logged and reported under
        ``dependencies_analysis.errors``; the remaining files are still
        processed.
        """
        if config is not None:
            self.scan_config = self.validate_config(config)

        dependencies: Dict[str, Dict[str, str]] = {}
        package_files = []
        resolution_details: Dict[str, str] = {}
        errors = []
        total_packages = 0

        for file_path in self.get_dependency_files():
            try:
                if self._is_setup_script(file_path):
                    entry = self._extract_setup_script(file_path)
                else:
                    entry = self._extract_requirements_file(file_path)
            except SetupScanError as e:
                logger.error(f"Failed to extract dependencies from {file_path}: {e}")
                errors.append({"path": self._relative(file_path), "error": str(e)})
                continue

            specs = [DependencySpecifier.parse(raw) for raw in entry["packages"]]
            dependencies[entry["path"]] = {spec.name: spec.specifier for spec in specs}
            for spec in specs:
                resolution_details.setdefault(spec.name.lower(), spec.specifier)
            total_packages += len(specs)
            package_files.append(entry)

        return {
            "dependencies": dependencies,
            "dependencies_analysis": {
                "total_packages": total_packages,
                "package_files": package_files,
                "resolution_details": resolution_details,
                "errors": errors,
            },
        }
