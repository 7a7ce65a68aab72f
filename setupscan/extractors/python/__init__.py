"""
Python ecosystem dependency extractor.

Handles Python dependency files: setup.py scripts and requirements files.
"""

from .extractor import PythonExtractor
from .requirements import find_dependency_position, parse_requirements_file, parse_requirements_text
from .setup_py import (
    extract_install_requires,
    find_install_requires_position,
    load_descriptor,
    parse_descriptor,
)

__all__ = [
    "PythonExtractor",
    "extract_install_requires",
    "find_install_requires_position",
    "load_descriptor",
    "parse_descriptor",
    "find_dependency_position",
    "parse_requirements_file",
    "parse_requirements_text",
]
