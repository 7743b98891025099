"""
readability_index computes classic readability scores for plain-text files.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, load_config
from .formulas import Formula, average_age, compute_score, evaluate, resolve_selector
from .loader import load_text
from .models import ScoreResult, TextStatistics
from .textstats import extract_statistics

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "load_config",
    "Formula",
    "average_age",
    "compute_score",
    "evaluate",
    "resolve_selector",
    "load_text",
    "ScoreResult",
    "TextStatistics",
    "extract_statistics",
]

__version__ = "0.1.0"
