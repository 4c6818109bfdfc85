"""Dependency usage analysis."""

from __future__ import annotations

from pathlib import Path

from depcheck_lite.analysis.extraction import extract_references
from depcheck_lite.analysis.scanner import SourceScanner
from depcheck_lite.errors import FileReadError
from depcheck_lite.exclusion import PathExcluder
from depcheck_lite.filesystem import FileSystem, LocalFileSystem
from depcheck_lite.manifest import load_manifest
from depcheck_lite.models.results import AnalysisResult, ScanStats


class DependencyAnalyzer:
    """Finds declared dependencies that no source file references.

    The manifest is loaded and ignore-filtered once, at construction;
    ``analyze`` can be called any number of times afterwards.
    """

    def __init__(
        self,
        project_root: Path,
        ignore: list[str] | None = None,
        dirs: list[str] | None = None,
        fs: FileSystem | None = None,
        excluder: PathExcluder | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            project_root: Directory holding package.json.
            ignore: Package names to leave out of the analysis entirely.
            dirs: Directories to scan instead of the defaults.
            fs: File system to read from (default: the local disk).
            excluder: Extra gitignore-style exclusions for the scanner.

        Raises:
            ConfigurationError: If package.json is missing or invalid.
        """
        self.project_root = project_root
        self.fs = fs or LocalFileSystem()
        self.dirs = dirs or None
        self.excluder = excluder
        self.manifest = load_manifest(project_root, self.fs)
        self.declared = self.manifest.filtered(ignore)
        self.stats = ScanStats()

    def analyze(self) -> AnalysisResult:
        """Scan the source tree and reconcile it against the declared set.

        Raises:
            FileReadError: If an enumerated source file cannot be read.
                The whole run is aborted.
        """
        scanner = SourceScanner(self.project_root, self.dirs, self.fs, self.excluder)
        stats = ScanStats()
        used: set[str] = set()

        for source_file in scanner.scan():
            references = self._scan_file(source_file)
            stats.files_scanned += 1
            stats.references_found += len(references)
            used.update(ref for ref in references if ref in self.declared)

        stats.skipped_dirs = [str(d) for d in scanner.skipped_dirs]
        self.stats = stats

        return AnalysisResult.from_sets(self.declared, used)

    def _scan_file(self, path: Path) -> set[str]:
        try:
            content = self.fs.read_text(path)
        except OSError as e:
            raise FileReadError(path, e.strerror or str(e)) from e
        return extract_references(content)
