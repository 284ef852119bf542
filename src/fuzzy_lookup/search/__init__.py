"""
Character n-gram matching engine.

This package provides the pure-Python core of the index:
- grams: normalization and n-gram extraction
- fuzzy: Levenshtein distance and normalized similarity
- models: postings, entry records and matches
- index: per-gram-size inverted index with dot-product accumulation
- metrics: in-process query metrics
"""
