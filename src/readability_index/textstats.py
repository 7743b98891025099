from __future__ import annotations

import logging
import re
from typing import List

from .models import TextStatistics

LOGGER = logging.getLogger(__name__)

VOWELS = "aeiouyAEIOUY"
NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
# Whitespace is the ASCII set only; NBSP and other Unicode spaces count as text.
SENTENCE_END_RE = re.compile(r"[^\s][.!?]\s", re.ASCII)
WHITESPACE_RE = re.compile(r"\s+", re.ASCII)
SPACE_RE = re.compile(" ")

SENTENCE_COUNTING_MODES = ("matches", "segments")


def _split_keeping_inner_empties(pattern: re.Pattern[str], text: str) -> List[str]:
    """
    Split text on pattern, keeping empty pieces between separators but
    dropping the empty pieces left at the end of the text.
    """
    parts = pattern.split(text)
    if len(parts) == 1:
        # No separator found: the whole text is one piece, even when empty.
        return parts
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def split_words(text: str) -> List[str]:
    """Split text into raw word segments on single space characters."""
    return _split_keeping_inner_empties(SPACE_RE, text)


def clean_word(word: str) -> str:
    """Strip everything except ASCII letters and digits."""
    return NON_ALNUM_RE.sub("", word)


def count_syllables(word: str) -> int:
    """
    Estimate syllables by counting vowel-group onsets.

    A vowel starts a new group when it opens the word or follows a consonant.
    A lowercase ``e`` opening a group on the last character is silent. Every
    word has at least one syllable.
    """
    count = 0
    last = len(word) - 1
    for idx, ch in enumerate(word):
        if ch not in VOWELS:
            continue
        if idx == 0 or word[idx - 1] not in VOWELS:
            if idx < last or ch != "e":
                count += 1
    return count or 1


def count_sentences(text: str, mode: str = "matches") -> int:
    """
    Count sentence boundaries: a non-space character, then ``.``, ``!`` or
    ``?``, then whitespace.

    ``matches`` counts boundaries, so a final sentence with no whitespace after
    it is not counted. ``segments`` counts the pieces between boundaries.
    """
    if mode == "matches":
        return len(SENTENCE_END_RE.findall(text))
    if mode == "segments":
        return len(_split_keeping_inner_empties(SENTENCE_END_RE, text))
    raise ValueError(
        f"Unknown sentence counting mode '{mode}'; expected one of "
        f"{', '.join(SENTENCE_COUNTING_MODES)}."
    )


def count_characters(text: str) -> int:
    """Count characters that are not whitespace."""
    return len(WHITESPACE_RE.sub("", text))


def extract_statistics(text: str, sentence_counting: str = "matches") -> TextStatistics:
    """Compute word, sentence, character and syllable counts for text."""
    words = split_words(text)
    syllables = 0
    polysyllables = 0
    for word in words:
        cleaned = clean_word(word)
        if not cleaned:
            continue
        word_syllables = count_syllables(cleaned)
        syllables += word_syllables
        if word_syllables > 2:
            polysyllables += 1

    stats = TextStatistics(
        words=len(words),
        sentences=count_sentences(text, sentence_counting),
        characters=count_characters(text),
        syllables=syllables,
        polysyllables=polysyllables,
    )
    LOGGER.debug("Extracted statistics: %s", stats)
    return stats
