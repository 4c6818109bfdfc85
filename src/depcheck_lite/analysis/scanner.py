"""Source file discovery."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

from depcheck_lite.exclusion import PathExcluder
from depcheck_lite.filesystem import FileSystem, LocalFileSystem
from depcheck_lite.paths import DEPENDENCY_CACHE_DIR

# Conventional source roots, relative to the project root
DEFAULT_DIRS = ["src", "lib", "app", "components", "pages", "utils"]

SOURCE_EXTENSIONS = frozenset({".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs"})


class SourceScanner:
    """Walks source roots and yields files with a recognized suffix."""

    def __init__(
        self,
        project_root: Path,
        dirs: list[str] | None = None,
        fs: FileSystem | None = None,
        excluder: PathExcluder | None = None,
    ) -> None:
        self.project_root = project_root
        self.dirs = dirs or list(DEFAULT_DIRS)
        self.fs = fs or LocalFileSystem()
        self.excluder = excluder
        # Directories that could not be listed during the last scan
        self.skipped_dirs: list[Path] = []

    def scan(self) -> Iterator[Path]:
        """Yield every source file under the configured roots.

        Roots that do not exist are skipped. Directories that cannot be
        listed are recorded in ``skipped_dirs`` and the walk moves on.
        """
        self.skipped_dirs = []
        for name in self.dirs:
            root = self.project_root / name
            if not self.fs.is_dir(root):
                continue
            yield from self._walk(root)

    def _walk(self, root: Path) -> Iterator[Path]:
        stack = [root]
        while stack:
            current = stack.pop()
            try:
                entries = self.fs.list_dir(current)
            except OSError:
                # Unreadable, or removed since it was listed
                self.skipped_dirs.append(current)
                continue

            for entry in entries:
                path = current / entry.name
                if entry.is_dir:
                    if entry.name == DEPENDENCY_CACHE_DIR:
                        continue
                    if self._excluded(path, is_dir=True):
                        continue
                    stack.append(path)
                elif entry.is_file:
                    if path.suffix not in SOURCE_EXTENSIONS:
                        continue
                    if self._excluded(path):
                        continue
                    yield path

    def _excluded(self, path: Path, is_dir: bool = False) -> bool:
        return self.excluder is not None and self.excluder.should_exclude(path, is_dir=is_dir)

