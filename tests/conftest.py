"""Shared test fixtures and configuration."""

import os

import pytest

from fuzzy_lookup import FuzzySet
from fuzzy_lookup.search.metrics import MetricsCollector


# Environment that overrides every FUZZY_LOOKUP_* setting
TEST_ENV = {
    "FUZZY_LOOKUP_USE_LEVENSHTEIN": "true",
    "FUZZY_LOOKUP_GRAM_SIZE_LOWER": "2",
    "FUZZY_LOOKUP_GRAM_SIZE_UPPER": "3",
    "FUZZY_LOOKUP_LEVENSHTEIN_MAX_CANDIDATES": "50",
    "FUZZY_LOOKUP_LOG_LEVEL": "info",
    "FUZZY_LOOKUP_LOG_JSON": "true",
}


for key, value in TEST_ENV.items():
    os.environ[key] = value


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Reset FUZZY_LOOKUP_* variables to test defaults before each test."""
    for key, value in TEST_ENV.items():
        monkeypatch.setenv(key, value)


@pytest.fixture
def metrics():
    """Fresh per-test metrics collector."""
    return MetricsCollector(window_size=100)


@pytest.fixture
def countries():
    return ["Great Britain", "United Kingdom", "Great Brittain"]


@pytest.fixture
def country_set(countries, metrics):
    return FuzzySet(countries, metrics=metrics)


@pytest.fixture
def names():
    """Reordered words score high on grams but low on edit distance."""
    return ["smith john", "jon smyth"]
