"""
Base extractor interface for dependency extraction.

Defines the contract that ecosystem-specific extractors must implement.
"""

import fnmatch
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from pathlib import Path


DEFAULT_EXCLUDES = [
    "**/.git/**",
    "**/node_modules/**",
    "**/.venv/**",
    "**/venv/**",
    "**/site-packages/**",
    "**/__pycache__/**",
]


class BaseExtractor(ABC):
    """
    Abstract base class for ecosystem-specific dependency extractors.

    Each extractor is responsible for:
    1. Detecting if the project uses its ecosystem
    2. Extracting dependencies from ecosystem-specific files
    3. Returning results in a standardized format
    """

    def __init__(self, project_path: str = ".", exclude: Optional[List[str]] = None):
        """
        Initialize the extractor.

        Args:
            project_path: Path to the project directory to scan
            exclude: Glob patterns (relative to project_path) to skip
        """
        self.project_path = Path(project_path)
        self.exclude = list(DEFAULT_EXCLUDES if exclude is None else exclude)

    @property
    def ecosystem_name(self) -> Optional[str]:
        """Return the name of the ecosystem this extractor handles."""
        return None

    @property
    def supported_files(self) -> List[str]:
        """
        Return list of file patterns this extractor can handle.

        Patterns are matched recursively below the project path.
        """
        return []

    @abstractmethod
    def can_extract(self) -> bool:
        """
        Check if this extractor can handle the current project.

        Returns:
            True if the extractor can handle the project, False otherwise
        """
        pass

    @abstractmethod
    def extract_dependencies(self, config: Optional[Dict] = None) -> Dict[str, Any]:
        """
        Extract dependencies from the project.

        Args:
            config: Configuration dictionary

        Returns:
            Dictionary with standardized dependency extraction results:
            {
                "dependencies": {...},  # file -> {package: specifier}
                "dependencies_analysis": {
                    "total_packages": int,
                    "package_files": [...],
                    "resolution_details": {...}
                }
            }
        """
        pass

    def is_excluded(self, file_path: Path) -> bool:
        try:
            relative = file_path.relative_to(self.project_path).as_posix()
        except ValueError:
            relative = file_path.as_posix()
        # Leading slash lets "**/dir/**" match a top-level dir too
        return any(fnmatch.fnmatch("/" + relative, pattern) for pattern in self.exclude)

    def get_dependency_files(self) -> List[Path]:
        """
        Get list of dependency files found in the project.

        Returns:
            Sorted list of Path objects for found dependency files
        """
        found_files = set()
        for pattern in self.supported_files:
            for file_path in self.project_path.rglob(pattern):
                if file_path.is_file() and not self.is_excluded(file_path):
                    found_files.add(file_path)
        return sorted(found_files)

    def validate_config(self, config: Optional[Dict]) -> Dict:
        """
        Validate and provide defaults for configuration.

        Args:
            config: Configuration dictionary to validate

        Returns:
            Scan section of the configuration with defaults applied
        """
        if config is None:
            config = {}

        return {
            "setup_files": ["setup.py"],
            "requirements_pattern": "*requirements*.txt",
            "follow_requirements_files": True,
            **config.get("scan", {}),
        }
