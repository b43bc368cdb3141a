"""
Pattern helpers shared by the scoring rules.

All matching is case-insensitive `re.search`. Empty input never matches.
"""

import re
from typing import Iterable, List, Pattern, Sequence, Union

PatternLike = Union[str, Pattern]


def compile_patterns(*patterns: str) -> List[Pattern]:
    return [re.compile(p, re.IGNORECASE) for p in patterns]


def _as_regex(pattern: PatternLike) -> Pattern:
    if isinstance(pattern, str):
        return re.compile(pattern, re.IGNORECASE)
    return pattern


def matches_any(text: str, patterns: Sequence[PatternLike]) -> bool:
    """True if any pattern is found in text."""
    if not text:
        return False
    return any(_as_regex(p).search(text) for p in patterns)


def any_item_matches(items: Iterable[str], patterns: Sequence[PatternLike]) -> bool:
    """True if any item matches any pattern."""
    return any(matches_any(str(item), patterns) for item in items or [])
