from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TextStatistics:
    """Counts extracted from a single input text."""

    words: int
    sentences: int
    characters: int
    syllables: int
    polysyllables: int


@dataclass(frozen=True, slots=True)
class ScoreResult:
    """Score produced by one readability formula."""

    name: str
    raw_score: float
    approximate_age: int
