"""Gitignore-style path exclusion for the source scanner.

Patterns come from the project config and the ``--exclude`` option and are
matched with the pathspec library, relative to the project root.
"""

from dataclasses import dataclass, field
from pathlib import Path

import pathspec


@dataclass
class ExclusionConfig:
    """Configuration for path exclusion."""

    config_patterns: list[str] = field(default_factory=list)
    cli_patterns: list[str] = field(default_factory=list)


class PathExcluder:
    """Decides whether a scanned path should be skipped."""

    def __init__(
        self,
        project_root: Path,
        config_patterns: list[str] | None = None,
        cli_patterns: list[str] | None = None,
    ) -> None:
        """Initialize the excluder.

        Args:
            project_root: Root directory patterns are relative to.
            config_patterns: Patterns from .depcheck-lite.json.
            cli_patterns: Patterns passed on the command line.
        """
        self.project_root = project_root
        self._config = ExclusionConfig(
            config_patterns=list(config_patterns or []),
            cli_patterns=list(cli_patterns or []),
        )
        self._spec: pathspec.PathSpec | None = None

        if self.patterns:
            self._spec = pathspec.PathSpec.from_lines("gitignore", self.patterns)

    def should_exclude(self, path: Path, is_dir: bool = False) -> bool:
        """Check if a file or directory should be excluded.

        Args:
            path: Absolute path of the entry.
            is_dir: Whether the entry is a directory. Directory-only patterns
                such as ``generated/`` only match when this is True.

        Returns:
            True if the entry should be skipped, False otherwise.
        """
        if self._spec is None:
            return False

        try:
            rel_path = path.relative_to(self.project_root)
        except ValueError:
            return False

        rel_str = rel_path.as_posix()
        if is_dir:
            rel_str += "/"
        return self._spec.match_file(rel_str)

    @property
    def patterns(self) -> list[str]:
        """Return all loaded patterns."""
        return self._config.config_patterns + self._config.cli_patterns
