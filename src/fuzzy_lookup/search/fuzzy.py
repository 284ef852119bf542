"""Edit-distance scoring for candidate refinement.

Cosine similarity over grams finds candidates cheaply; the best of them are
then re-scored by normalized Levenshtein similarity, which rewards strings
whose characters line up in the same order.
"""

from __future__ import annotations

from fuzzy_lookup.errors import InvalidComparisonError, TypeMismatchError


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate the Levenshtein (edit) distance between two strings.

    Only two rows of the dynamic-programming table are kept, with the shorter
    string as columns.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "abc")
        3
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    if len(s1) > len(s2):
        s1, s2 = s2, s1

    m, n = len(s1), len(s2)
    prev_row = list(range(m + 1))
    curr_row = [0] * (m + 1)

    for j in range(1, n + 1):
        curr_row[0] = j
        for i in range(1, m + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            curr_row[i] = min(
                prev_row[i] + 1,  # deletion
                curr_row[i - 1] + 1,  # insertion
                prev_row[i - 1] + cost,  # substitution
            )
        prev_row, curr_row = curr_row, prev_row

    return prev_row[m]


def levenshtein_similarity(s1: str | None, s2: str | None) -> float:
    """Return ``1 - distance / max(len(s1), len(s2))``, a score in ``[0, 1]``.

    One absent side scores 0.0. Two empty strings are identical and score 1.0.

    Raises:
        InvalidComparisonError: If both sides are ``None``.
        TypeMismatchError: If a present side is not a string.
    """
    if s1 is None and s2 is None:
        raise InvalidComparisonError("Trying to compare two null values")
    if s1 is None or s2 is None:
        return 0.0
    for value in (s1, s2):
        if not isinstance(value, str):
            raise TypeMismatchError(value)

    longest = max(len(s1), len(s2))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(s1, s2) / longest
