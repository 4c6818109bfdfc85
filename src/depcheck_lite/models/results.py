"""Data models for analysis results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis run.

    ``used`` and ``unused`` are sorted, contain no duplicates, and together
    make up exactly the declared dependencies left after ignore-filtering.
    ``total`` is the size of that set.
    """

    used: tuple[str, ...] = ()
    unused: tuple[str, ...] = ()
    total: int = 0

    @classmethod
    def from_sets(cls, declared: set[str] | frozenset[str], used: set[str]) -> AnalysisResult:
        """Build a result from the declared set and the names found in use."""
        found = used & declared
        return cls(
            used=tuple(sorted(found)),
            unused=tuple(sorted(declared - found)),
            total=len(declared),
        )

    def to_dict(self) -> dict:
        return {
            "unused": list(self.unused),
            "used": list(self.used),
            "total": self.total,
        }


@dataclass
class ScanStats:
    """Counters collected while scanning, shown in verbose output."""

    files_scanned: int = 0
    references_found: int = 0
    skipped_dirs: list[str] = field(default_factory=list)
