"""Package reference extraction from JavaScript and TypeScript source text.

Matching is done with regular expressions over the raw text. Only literal
string targets are seen; anything built at runtime is invisible.
"""

import re
from enum import Enum


class ImportPattern(Enum):
    """The import-like constructs that name a package."""

    # import x from 'pkg', import { a } from 'pkg', import * as ns from 'pkg', import 'pkg'
    STATIC_IMPORT = r"""import\s+(?:[\w{},*\s]+\s+from\s+)?['"]([^'"]+)['"]"""
    # require('pkg')
    REQUIRE = r"""require\s*\(['"]([^'"]+)['"]\)"""
    # import('pkg')
    DYNAMIC_IMPORT = r"""import\s*\(['"]([^'"]+)['"]\)"""

    @property
    def regex(self) -> re.Pattern[str]:
        return _COMPILED[self]

    def targets(self, text: str) -> list[str]:
        """Return every literal target this pattern captures in text."""
        return [m.group(1) for m in self.regex.finditer(text)]


_COMPILED = {pattern: re.compile(pattern.value) for pattern in ImportPattern}


def extract_package_name(target: str) -> str:
    """
    Normalize an import target to the package it belongs to.

    Args:
        target: The literal string from an import or require call

    Returns:
        ``@scope/name`` for scoped packages, the first path segment for
        anything else, or an empty string for relative and absolute paths
    """
    if target.startswith((".", "/")):
        return ""

    parts = target.split("/")
    if target.startswith("@"):
        return "/".join(parts[:2]) if len(parts) >= 2 else target

    return parts[0]


def extract_targets(text: str) -> list[str]:
    """Return the raw targets of all patterns, in pattern order."""
    targets: list[str] = []
    for pattern in ImportPattern:
        targets.extend(pattern.targets(text))
    return targets


def extract_references(text: str) -> set[str]:
    """Return the set of package names referenced by a file's text."""
    references: set[str] = set()
    for target in extract_targets(text):
        name = extract_package_name(target)
        if name:
            references.add(name)
    return references
