"""
Project-level dependency extraction.

Detects setup scripts and requirements files in a project and returns the
declared dependencies of each one.
"""

import logging
from typing import Any, Dict, Optional

from .extractors.python.extractor import PythonExtractor

logger = logging.getLogger(__name__)


def extract(project_path: str = ".", config: Optional[Dict] = None) -> Dict[str, Any]:
    """
    Extract declared dependencies from a project.

    Args:
        project_path: Path to the project directory
        config: Configuration dictionary

    Returns:
        {
            "dependencies": {
                "setup.py": {"fire": "==0.1.3", ...},
                "requirements.txt": {...}
            },
            "dependencies_analysis": {
                "total_packages": 9,
                "ecosystems_detected": ["python"],
                "package_files": [
                    {"path": "setup.py", "ecosystem": "python", "packages": [...]},
                ],
                "resolution_details": {...},
                "errors": [...]
            }
        }
    """
    config = config or {}
    extractor = PythonExtractor(project_path, config)

    if not extractor.can_extract():
        logger.info(f"No setup.py or requirements files found in {project_path}")
        return _create_empty_result()

    result = extractor.extract_dependencies()
    result["dependencies_analysis"]["ecosystems_detected"] = [extractor.ecosystem_name]
    logger.info(
        f"Extracted {result['dependencies_analysis']['total_packages']} dependencies "
        f"from {len(result['dependencies'])} files"
    )
    return result


def _create_empty_result() -> Dict[str, Any]:
    """Create empty result structure."""
    return {
        "dependencies": {},
        "dependencies_analysis": {
            "total_packages": 0,
            "ecosystems_detected": [],
            "package_files": [],
            "resolution_details": {},
            "errors": [],
        },
    }
