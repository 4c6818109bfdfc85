"""Dependency usage analysis."""

from depcheck_lite.analysis.analyzer import DependencyAnalyzer
from depcheck_lite.analysis.extraction import (
    ImportPattern,
    extract_package_name,
    extract_references,
)
from depcheck_lite.analysis.scanner import DEFAULT_DIRS, SOURCE_EXTENSIONS, SourceScanner

__all__ = [
    "DEFAULT_DIRS",
    "DependencyAnalyzer",
    "ImportPattern",
    "SOURCE_EXTENSIONS",
    "SourceScanner",
    "extract_package_name",
    "extract_references",
]
