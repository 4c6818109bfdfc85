"""Parsing of the user's package selection."""

import re
from dataclasses import dataclass, field


@dataclass
class Selection:
    """Result of parsing a selection string."""

    indices: list[int] = field(default_factory=list)  # 0-based, sorted, unique
    invalid: list[str] = field(default_factory=list)  # Tokens that were rejected


def parse_selection(text: str, count: int) -> Selection:
    """
    Parse which of ``count`` listed packages the user picked.

    Args:
        text: Raw input, e.g. "1 3 5", "2,4" or "all"
        count: Number of packages that were listed

    Returns:
        Selection with 0-based indices and any rejected tokens
    """
    text = text.strip()
    if not text:
        return Selection()

    if text.lower() == "all":
        return Selection(indices=list(range(count)))

    indices: set[int] = set()
    invalid: list[str] = []
    for token in re.split(r"[\s,]+", text):
        if not token:
            continue
        if not token.isdecimal() or not 1 <= int(token) <= count:
            invalid.append(token)
            continue
        indices.add(int(token) - 1)

    return Selection(indices=sorted(indices), invalid=invalid)

