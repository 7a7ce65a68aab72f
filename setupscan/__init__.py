"""Static dependency extraction for setup.py based Python projects."""

from setupscan.extract import extract
from setupscan.extractors.python.setup_py import extract_install_requires, parse_descriptor
from setupscan.models import DependencySpecifier, InlineStatus, PackageDescriptor, Position

__version__ = "0.1.0"

__all__ = [
    "extract",
    "extract_install_requires",
    "parse_descriptor",
    "DependencySpecifier",
    "InlineStatus",
    "PackageDescriptor",
    "Position",
]
