"""File system access used by the scanner and analyzer."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class DirEntry:
    """A single entry of a directory listing."""

    name: str
    is_dir: bool
    is_file: bool


@runtime_checkable
class FileSystem(Protocol):
    """Read-only view of a file system.

    The analyzer never touches the disk directly; everything goes through
    an implementation of this protocol so tests can supply an in-memory tree.
    """

    def exists(self, path: Path) -> bool:
        """Return True if anything exists at path."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Return True if path is a directory."""
        ...

    def list_dir(self, path: Path) -> list[DirEntry]:
        """List a directory.

        Raises:
            OSError: If the directory cannot be listed.
        """
        ...

    def read_text(self, path: Path) -> str:
        """Read a file as UTF-8 text.

        Raises:
            OSError: If the file cannot be read.
        """
        ...


class LocalFileSystem:
    """FileSystem backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_dir(self, path: Path) -> list[DirEntry]:
        entries: list[DirEntry] = []
        with os.scandir(path) as it:
            for entry in it:
                # Symlinks are not followed, like a plain directory walk
                entries.append(
                    DirEntry(
                        name=entry.name,
                        is_dir=entry.is_dir(follow_symlinks=False),
                        is_file=entry.is_file(follow_symlinks=False),
                    )
                )
        return entries

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")
