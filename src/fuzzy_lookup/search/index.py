"""Inverted n-gram index with per-gram-size entry records.

Each gram size keeps its own append-only list of ``EntryRecord`` objects; an
entry's position in that list is its stable index. Postings are keyed by gram
string. Grams of different sizes never collide because a gram's length is its
size, so a single postings map serves every level.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
import math

from fuzzy_lookup.search.grams import gram_counter, magnitude_squared
from fuzzy_lookup.search.models import EntryRecord, Posting


class GramIndex:
    """Term-frequency vectors for every indexed value, one sub-index per gram size."""

    def __init__(self, gram_sizes: Iterable[int]):
        self._entries: dict[int, list[EntryRecord]] = {gram_size: [] for gram_size in gram_sizes}
        self._postings: dict[str, list[Posting]] = {}

    def add(self, value: str, gram_size: int) -> int:
        """Index ``value`` at ``gram_size`` and return its entry index."""
        entries = self._entries.setdefault(gram_size, [])
        index = len(entries)

        counts = gram_counter(value, gram_size)
        for gram, count in counts.items():
            self._postings.setdefault(gram, []).append(Posting(entry_index=index, count=count))

        entries.append(EntryRecord(magnitude=math.sqrt(magnitude_squared(counts)), value=value))
        return index

    def dot_products(self, counts: Counter[str]) -> dict[int, int]:
        """Accumulate ``query . entry`` for every entry sharing a gram with ``counts``.

        Entries without a shared gram are absent from the result.
        """
        matches: dict[int, int] = {}
        for gram, gram_count in counts.items():
            for posting in self._postings.get(gram, ()):
                matches[posting.entry_index] = matches.get(posting.entry_index, 0) + gram_count * posting.count
        return matches

    def entry(self, gram_size: int, index: int) -> EntryRecord:
        return self._entries[gram_size][index]
