"""Shared test doubles for the file system and process runner."""

import json
from pathlib import Path, PurePosixPath

import pytest

from depcheck_lite.filesystem import DirEntry

FIXTURES_PATH = Path(__file__).parent / "fixtures"


class MemoryFileSystem:
    """In-memory FileSystem keyed by absolute POSIX paths."""

    def __init__(self, files: dict[str, str] | None = None) -> None:
        self.files: dict[PurePosixPath, str] = {}
        self.unreadable_dirs: set[PurePosixPath] = set()
        self.vanished_dirs: set[PurePosixPath] = set()
        self.unreadable_files: set[PurePosixPath] = set()
        self.reads: list[PurePosixPath] = []
        for path, content in (files or {}).items():
            self.add(path, content)

    def add(self, path: str, content: str) -> None:
        self.files[PurePosixPath(path)] = content

    def add_manifest(self, root: str, dependencies=None, dev_dependencies=None) -> None:
        data: dict = {"name": "memory-project"}
        if dependencies is not None:
            data["dependencies"] = dependencies
        if dev_dependencies is not None:
            data["devDependencies"] = dev_dependencies
        self.add(f"{root}/package.json", json.dumps(data))

    def _dirs(self) -> set[PurePosixPath]:
        dirs: set[PurePosixPath] = set()
        for path in self.files:
            dirs.update(path.parents)
        return dirs

    def exists(self, path: Path) -> bool:
        p = PurePosixPath(path)
        return p in self.files or p in self._dirs()

    def is_dir(self, path: Path) -> bool:
        return PurePosixPath(path) in self._dirs()

    def list_dir(self, path: Path) -> list[DirEntry]:
        p = PurePosixPath(path)
        if p in {PurePosixPath(d) for d in self.unreadable_dirs}:
            raise PermissionError(13, "Permission denied", str(path))
        if p in {PurePosixPath(d) for d in self.vanished_dirs}:
            raise FileNotFoundError(2, "No such file or directory", str(path))

        entries: dict[str, DirEntry] = {}
        for candidate in list(self.files) + list(self._dirs()):
            if candidate.parent != p or candidate == p:
                continue
            entries[candidate.name] = DirEntry(
                name=candidate.name,
                is_dir=candidate not in self.files,
                is_file=candidate in self.files,
            )
        # Reverse order so nothing can rely on sorted listings
        return [entries[name] for name in sorted(entries, reverse=True)]

    def read_text(self, path: Path) -> str:
        p = PurePosixPath(path)
        self.reads.append(p)
        if p in {PurePosixPath(f) for f in self.unreadable_files}:
            raise PermissionError(13, "Permission denied", str(path))
        if p not in self.files:
            raise FileNotFoundError(2, "No such file or directory", str(path))
        return self.files[p]


class RecordingRunner:
    """ProcessRunner that records commands instead of running them."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[list[str], Path]] = []

    def run(self, args: list[str], cwd: Path) -> int:
        self.calls.append((list(args), cwd))
        return self.returncode


@pytest.fixture
def memory_fs() -> MemoryFileSystem:
    return MemoryFileSystem()


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()
