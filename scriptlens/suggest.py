"""Pure functions for near-miss keyword suggestions."""

from __future__ import annotations

from typing import Iterable

from . import constants


def levenshtein(a: str, b: str) -> int:
    """Minimum single-character insertions, deletions and substitutions from *a* to *b*."""
    if len(a) < len(b):
        return levenshtein(b, a)
    if not b:
        return len(a)

    previous_row = list(range(len(b) + 1))
    for i, ca in enumerate(a):
        current_row = [i + 1]
        for j, cb in enumerate(b):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (ca != cb)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row
    return previous_row[-1]


def suggest_keyword(
    word: str,
    keywords: Iterable[str],
    max_distance: int = constants.SUGGESTION_MAX_DISTANCE,
) -> str | None:
    """Return the closest keyword to *word*, or None if none is within *max_distance*.

    Ties go to the keyword that comes first in *keywords*.
    """
    best: str | None = None
    best_distance = max_distance + 1
    for keyword in keywords:
        distance = levenshtein(word, keyword)
        if distance < best_distance:
            best, best_distance = keyword, distance
    return best
