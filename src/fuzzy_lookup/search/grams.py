"""Normalization and character n-gram extraction.

A value is lower-cased, stripped of anything outside ``[a-z0-9_, ]`` and
wrapped in ``-`` delimiters before a window of ``gram_size`` slides across it.
Short values are right-padded with delimiters so at least one gram exists.
"""

from __future__ import annotations

from collections import Counter
import re

from fuzzy_lookup.errors import TypeMismatchError


DELIMITER = "-"
NON_WORD_RE = re.compile(r"[^A-Za-z0-9_, ]+")


def normalize(value: str) -> str:
    """Return the exact-match key for ``value``.

    Raises:
        TypeMismatchError: If ``value`` is not a string.
    """
    if not isinstance(value, str):
        raise TypeMismatchError(value)
    return value.lower()


def simplify(value: str, gram_size: int = 2) -> str:
    """Return the filtered, wrapped and padded form that grams are cut from."""
    simplified = DELIMITER + NON_WORD_RE.sub("", normalize(value)) + DELIMITER
    len_diff = gram_size - len(simplified)
    if len_diff > 0:
        simplified += DELIMITER * len_diff
    return simplified


def iterate_grams(value: str, gram_size: int = 2) -> list[str]:
    """Return every overlapping gram of length ``gram_size``, in order.

    Examples:
        >>> iterate_grams("Ab", 2)
        ['-a', 'ab', 'b-']
        >>> iterate_grams("", 3)
        ['---']
    """
    simplified = simplify(value, gram_size)
    return [simplified[i : i + gram_size] for i in range(len(simplified) - gram_size + 1)]


def gram_counter(value: str, gram_size: int = 2) -> Counter[str]:
    """Return the term-frequency vector of ``value``: gram -> occurrences."""
    return Counter(iterate_grams(value, gram_size))


def magnitude_squared(counts: Counter[str]) -> int:
    return sum(count * count for count in counts.values())
