from __future__ import annotations

from typing import List

from .formulas import round2
from .models import ScoreResult, TextStatistics

PROMPT = "Enter the score you want to calculate (ARI, FK, SMOG, CL, all): "


def format_statistics(stats: TextStatistics) -> List[str]:
    return [
        f"Words: {stats.words}",
        f"Sentences: {stats.sentences}",
        f"Characters: {stats.characters}",
        f"Syllables: {stats.syllables}",
        f"Polysyllables: {stats.polysyllables}",
    ]


def format_score(result: ScoreResult) -> str:
    return (
        f"{result.name}: {round2(result.raw_score)} "
        f"(about {result.approximate_age} year olds)."
    )


def format_average(average: float) -> str:
    return f"This text should be understood in average by {average} year olds."


def format_unsupported(selector: str, message: str) -> str:
    return f"{selector} : {message}"


def format_load_failure(detail: str) -> str:
    return f"Couldn't read file: {detail}"



def format_unavailable(name: str, score: float, detail: str) -> str:
    """Line printed in place of a score whose age is off the table."""
    return f"{name}: {round2(score)} (approximate age unavailable: {detail})"
