"""Text normalization helpers shared by the matchers.

All matching in the engine is case-insensitive substring containment, so
every input passes through these helpers before comparison.
"""

import math
from typing import Iterable, List, Optional


def fold(value: Optional[str]) -> str:
    """Lower-case and strip a possibly-missing string."""
    if not value:
        return ""
    return str(value).strip().lower()


def fold_all(values: Optional[Iterable[Optional[str]]]) -> List[str]:
    """
    Case-fold a collection of strings, dropping blank entries.

    Blank entries are dropped because an empty string is a substring of
    every text and would otherwise match everything.

    Args:
        values: Strings to normalize (None is treated as empty)

    Returns:
        Folded, non-empty strings in input order
    """
    if not values:
        return []
    folded = (fold(v) for v in values)
    return [v for v in folded if v]


def contains_any(text: str, needles: Iterable[str]) -> bool:
    """Return True if any needle is a substring of text."""
    return any(needle in text for needle in needles)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))
