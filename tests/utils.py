from __future__ import annotations

from pathlib import Path

# 22 words, 3 sentences, 123 characters, 38 syllables, 5 polysyllables.
GARDEN_TEXT = (
    "The little dog ran across the green park. "
    "Children played happily near the old wooden bench. "
    "Everybody enjoyed the beautiful afternoon together.\n"
)


def write_text_file(path: Path, text: str, encoding: str = "utf-8") -> Path:
    """Write text to path, creating parent directories, and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding=encoding)
    return path
