"""
Extractors package for dependency extraction.

This package provides extractors for package ecosystems. Extraction uses
auto-detection instead of manual registration.
"""

from .base import BaseExtractor

__all__ = ["BaseExtractor"]
