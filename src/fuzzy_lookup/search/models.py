"""Index data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True, slots=True)
class Posting:
    """Occurrence of a gram within one indexed entry."""

    entry_index: int
    count: int


@dataclass(frozen=True, slots=True)
class EntryRecord:
    """An indexed value and the Euclidean norm of its gram vector at one gram size."""

    magnitude: float
    value: str


class Match(NamedTuple):
    """A scored lookup result; compares equal to a plain ``(score, value)`` tuple."""

    score: float
    value: str
