"""In-memory fuzzy string lookup over character n-grams."""

__version__ = "0.0.2"

from fuzzy_lookup.config import FuzzySetConfig, Settings  # noqa: E402
from fuzzy_lookup.errors import FuzzyLookupError, InvalidComparisonError, TypeMismatchError  # noqa: E402
from fuzzy_lookup.fuzzy_set import FuzzySet  # noqa: E402
from fuzzy_lookup.search.models import Match  # noqa: E402


__all__ = [
    "FuzzyLookupError",
    "FuzzySet",
    "FuzzySetConfig",
    "InvalidComparisonError",
    "Match",
    "Settings",
    "TypeMismatchError",
    "__version__",
]
