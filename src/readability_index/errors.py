from __future__ import annotations


class ReadabilityError(RuntimeError):
    """Base class for errors reported by the readability CLI."""


class TextLoadError(ReadabilityError):
    """Raised when the input text file cannot be read."""


class UnsupportedFormulaError(ReadabilityError):
    """Raised when a formula selector is not one of ARI, FK, SMOG, CL or all."""

    def __init__(self, selector: str) -> None:
        super().__init__("Not implemented, yet.")
        self.selector = selector


class ScoreOutOfRangeError(ReadabilityError, ValueError):
    """Raised when a score has no entry in the approximate age table."""

    def __init__(self, detail: str, score: float, name: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.score = score
        self.name = name
