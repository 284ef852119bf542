"""Fuzzy string set backed by an n-gram cosine index.

Lookups run in stages:
1. Exact match on the lower-cased value returns ``[(1.0, stored)]``.
2. Otherwise gram sizes are tried from largest to smallest; the first size
   whose grams overlap any entry answers the query.
3. Candidates are scored by cosine similarity of gram-count vectors.
4. With edit-distance refinement enabled, the best candidates (at most
   ``levenshtein_max_candidates``) are re-scored by normalized Levenshtein
   similarity against the query.
5. Every candidate tied at the top score is returned.

Candidates past the refinement cap are never re-scored and keep their cosine
score. When that cosine score beats every edit-distance score, the unrefined
candidates outrank the refined ones and make up the whole result.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import logging
import math
from typing import TypeVar

from fuzzy_lookup import __version__
from fuzzy_lookup.config import FuzzySetConfig, Settings
from fuzzy_lookup.observability.tracing import create_span
from fuzzy_lookup.search.fuzzy import levenshtein_similarity
from fuzzy_lookup.search.grams import gram_counter, magnitude_squared, normalize
from fuzzy_lookup.search.index import GramIndex
from fuzzy_lookup.search.metrics import MetricsCollector, QueryMetrics, get_metrics_collector
from fuzzy_lookup.search.models import Match


logger = logging.getLogger(__name__)

T = TypeVar("T")


class FuzzySet:
    """Case-insensitive set of strings supporting approximate lookup.

    Not thread-safe: concurrent use needs an external lock or a
    single-writer discipline.

    Example:
        >>> fuzzy = FuzzySet(["Great Britain", "United Kingdom"])
        >>> fuzzy.query("great britain")
        [Match(score=1.0, value='Great Britain')]
    """

    version = __version__

    def __init__(
        self,
        values: Iterable[str] = (),
        use_levenshtein: bool = True,
        gram_size_lower: int = 2,
        gram_size_upper: int = 3,
        *,
        config: FuzzySetConfig | None = None,
        metrics: MetricsCollector | None = None,
    ):
        if config is None:
            config = FuzzySetConfig(
                use_levenshtein=use_levenshtein,
                gram_size_lower=gram_size_lower,
                gram_size_upper=gram_size_upper,
            )
        self._config = config
        self._metrics = metrics or get_metrics_collector()
        self._exact_set: dict[str, str] = {}
        self._index = GramIndex(config.gram_sizes)

        self.extend(values)

    @classmethod
    def from_settings(
        cls,
        values: Iterable[str] = (),
        settings: Settings | None = None,
        *,
        metrics: MetricsCollector | None = None,
    ) -> FuzzySet:
        """Build a set configured from ``FUZZY_LOOKUP_*`` environment settings."""
        settings = settings or Settings()  # type: ignore[call-arg]
        return cls(values, config=settings.to_index_config(), metrics=metrics)

    # ---- Configuration ----
    @property
    def config(self) -> FuzzySetConfig:
        return self._config

    @property
    def use_levenshtein(self) -> bool:
        return self._config.use_levenshtein

    @property
    def gram_size_lower(self) -> int:
        return self._config.gram_size_lower

    @property
    def gram_size_upper(self) -> int:
        return self._config.gram_size_upper

    # ---- Build ----
    def insert(self, value: str) -> bool:
        """Add ``value`` to the set.

        Returns:
            True if added, False if a case-insensitive duplicate was already present.

        Raises:
            TypeMismatchError: If ``value`` is not a string.
        """
        normalized_value = normalize(value)
        if normalized_value in self._exact_set:
            return False

        for gram_size in self._config.gram_sizes:
            self._index.add(value, gram_size)
        self._exact_set[normalized_value] = value

        logger.debug("Indexed value", extra={"entry_count": len(self._exact_set), "value_length": len(value)})
        return True

    add = insert

    def extend(self, values: Iterable[str]) -> int:
        """Add every value; return how many were new."""
        return sum(1 for value in values if self.insert(value))

    # ---- Query ----
    def query(self, value: str, default: T | None = None) -> list[Match] | T | None:
        """Return the best matches for ``value`` as ``(score, stored_value)`` pairs.

        Args:
            value: String to look up.
            default: Returned when no gram size yields any candidate.

        Returns:
            ``[(1.0, stored)]`` on a case-insensitive exact match, otherwise every
            match tied at the top score, or ``default``.

        Raises:
            TypeMismatchError: If ``value`` is not a string.
        """
        started = self._metrics.start_timer()
        normalized_value = normalize(value)

        with create_span("fuzzy_lookup.query", attributes={"query.length": len(value)}) as span:
            exact = self._exact_set.get(normalized_value)
            if exact is not None:
                span.set_attribute("query.exact", True)
                self._record(started, result_count=1, exact=True)
                return [Match(1.0, exact)]

            for gram_size in range(self._config.gram_size_upper, self._config.gram_size_lower - 1, -1):
                results, candidate_count = self._query_gram_size(value, gram_size)
                if results:
                    fallback = gram_size != self._config.gram_size_upper
                    if fallback:
                        logger.debug(
                            "Matched after falling back to a smaller gram size",
                            extra={"gram_size": gram_size, "gram_size_upper": self._config.gram_size_upper},
                        )
                    span.set_attribute("query.gram_size", gram_size)
                    span.set_attribute("query.result_count", len(results))
                    self._record(
                        started,
                        result_count=len(results),
                        candidate_count=candidate_count,
                        gram_size=gram_size,
                        fallback=fallback,
                    )
                    return results

            logger.debug("No candidates at any gram size", extra={"query_length": len(value)})
            span.set_attribute("query.result_count", 0)
            self._record(started, result_count=0)
            return default

    get = query

    def _query_gram_size(self, value: str, gram_size: int) -> tuple[list[Match], int]:
        """Score candidates sharing grams with ``value`` at one gram size.

        Returns the top-tied matches and the number of candidates scored.
        """
        gram_counts = gram_counter(value, gram_size)
        matches = self._index.dot_products(gram_counts)
        if not matches:
            return [], 0

        vector_normal = math.sqrt(magnitude_squared(gram_counts))
        results: list[Match] = []
        for entry_index in sorted(matches):
            entry = self._index.entry(gram_size, entry_index)
            results.append(Match(matches[entry_index] / (vector_normal * entry.magnitude), entry.value))

        if self._config.use_levenshtein:
            results.sort(key=lambda match: match.score, reverse=True)
            end_index = min(self._config.levenshtein_max_candidates, len(results))
            for i in range(end_index):
                results[i] = Match(levenshtein_similarity(results[i].value, value), results[i].value)

        results.sort(key=lambda match: match.score, reverse=True)

        top_score = results[0].score
        tied = [
            Match(match.score, self._exact_set[normalize(match.value)]) for match in results if match.score == top_score
        ]
        return tied, len(results)

    def _record(self, started: float, **fields) -> None:
        self._metrics.record_query(QueryMetrics(latency_ms=self._metrics.elapsed_ms(started), **fields))

    # ---- Inspection ----
    def size(self) -> int:
        """Number of distinct (case-insensitive) values."""
        return len(self._exact_set)

    def is_empty(self) -> bool:
        return not self._exact_set

    def values(self) -> list[str]:
        """Stored values in their original casing."""
        return list(self._exact_set.values())

    def __len__(self) -> int:
        return len(self._exact_set)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and value.lower() in self._exact_set

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._exact_set.values()))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(size={len(self._exact_set)}, "
            f"gram_sizes={self._config.gram_size_lower}..{self._config.gram_size_upper}, "
            f"use_levenshtein={self._config.use_levenshtein})"
        )
