from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Callable, Dict, Iterable, List, NamedTuple

from .errors import ScoreOutOfRangeError, UnsupportedFormulaError
from .models import ScoreResult, TextStatistics

LOGGER = logging.getLogger(__name__)

# Reader age for rounded scores 1..14.
AGE_TABLE = (6, 7, 9, 10, 11, 12, 13, 14, 15, 16, 17, 18, 24, 25)

ALL_SELECTOR = "all"


class Formula(str, Enum):
    """Supported readability formulas, valued by their CLI selector."""

    ARI = "ARI"
    FK = "FK"
    SMOG = "SMOG"
    CL = "CL"


class FormulaSpec(NamedTuple):
    name: str
    compute: Callable[[TextStatistics], float]


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division that yields inf/nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def automated_readability_index(stats: TextStatistics) -> float:
    return (
        _divide(4.71 * stats.characters, stats.words)
        + _divide(0.5 * stats.words, stats.sentences)
        - 21.43
    )


def flesch_kincaid(stats: TextStatistics) -> float:
    return (
        _divide(0.39 * stats.words, stats.sentences)
        + _divide(11.8 * stats.syllables, stats.words)
        - 15.59
    )


def smog(stats: TextStatistics) -> float:
    return (
        1.043 * math.sqrt(_divide(stats.polysyllables * 30.0, stats.sentences))
        + 3.1291
    )


def coleman_liau(stats: TextStatistics) -> float:
    return (
        _divide(0.0588 * stats.characters, stats.words) * 100
        - _divide(0.296 * stats.sentences, stats.words) * 100
        - 15.8
    )


# Table order is also the order used for the "all" report.
FORMULAS: Dict[Formula, FormulaSpec] = {
    Formula.ARI: FormulaSpec("Automated Readability Index", automated_readability_index),
    Formula.FK: FormulaSpec("Flesch–Kincaid readability tests", flesch_kincaid),
    Formula.SMOG: FormulaSpec("Simple Measure of Gobbledygook", smog),
    Formula.CL: FormulaSpec("Coleman–Liau index", coleman_liau),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded towards +infinity."""
    return math.floor(value + 0.5)


def round2(value: float) -> float:
    """Round to two decimal places (half-up); non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return math.floor(value * 100.0 + 0.5) / 100.0


def approximate_age(score: float) -> int:
    """Look up the approximate reader age for a score."""
    if not math.isfinite(score):
        raise ScoreOutOfRangeError(f"score {score} is not finite", score)
    index = round_half_up(score)
    if not 1 <= index <= len(AGE_TABLE):
        raise ScoreOutOfRangeError(
            f"rounded score {index} is outside 1-{len(AGE_TABLE)}", score
        )
    return AGE_TABLE[index - 1]


def compute_score(formula: Formula, stats: TextStatistics) -> float:
    """Return the raw score of one formula."""
    return FORMULAS[formula].compute(stats)


def evaluate(formula: Formula, stats: TextStatistics) -> ScoreResult:
    """Compute a formula and pair it with its approximate reader age."""
    spec = FORMULAS[formula]
    score = spec.compute(stats)
    LOGGER.debug("%s raw score: %r", formula.value, score)
    try:
        age = approximate_age(score)
    except ScoreOutOfRangeError as exc:
        raise ScoreOutOfRangeError(exc.detail, score, name=spec.name) from exc
    return ScoreResult(name=spec.name, raw_score=score, approximate_age=age)


def average_age(results: Iterable[ScoreResult]) -> float:
    """Mean approximate age across results, rounded to two decimals."""
    ages = [result.approximate_age for result in results]
    if not ages:
        raise ValueError("Cannot average the ages of zero results.")
    return round2(sum(ages) / len(ages))


def resolve_selector(selector: str) -> List[Formula]:
    """Map a CLI selector to the formulas it requests."""
    if selector == ALL_SELECTOR:
        return list(FORMULAS)
    try:
        return [Formula(selector)]
    except ValueError as exc:
        raise UnsupportedFormulaError(selector) from exc
