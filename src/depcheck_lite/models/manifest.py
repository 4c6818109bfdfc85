"""Declared dependencies of a project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Manifest:
    """The dependency groups read from a project's package.json."""

    path: Path
    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)

    @property
    def declared(self) -> frozenset[str]:
        """Names from both groups, merged into one set."""
        return frozenset(self.dependencies) | frozenset(self.dev_dependencies)

    def filtered(self, ignore: list[str] | None = None) -> frozenset[str]:
        """Declared names minus the ignored ones."""
        if not ignore:
            return self.declared
        return self.declared - set(ignore)
