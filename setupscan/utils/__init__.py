"""
Utility modules for setupscan.

This package contains shared utility functions and classes used throughout
the setupscan codebase, including the exception hierarchy.
"""

from setupscan.utils.exceptions import (
    ConfigurationError,
    DependenciesNotFoundError,
    InstallRequiresNotFoundError,
    NoInlineDependenciesError,
    RequirementsFileError,
    SetupScanError,
    VirtualEnvRequiredError,
)

__all__ = [
    "SetupScanError",
    "DependenciesNotFoundError",
    "NoInlineDependenciesError",
    "InstallRequiresNotFoundError",
    "RequirementsFileError",
    "ConfigurationError",
    "VirtualEnvRequiredError",
]
