"""Data models for depcheck-lite."""

from depcheck_lite.models.manifest import Manifest
from depcheck_lite.models.results import AnalysisResult, ScanStats

__all__ = [
    "AnalysisResult",
    "Manifest",
    "ScanStats",
]
