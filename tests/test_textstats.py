import pytest

from readability_index.models import TextStatistics
from readability_index.textstats import (
    clean_word,
    count_characters,
    count_sentences,
    count_syllables,
    extract_statistics,
    split_words,
)
from tests.utils import GARDEN_TEXT


def test_split_words_keeps_inner_empty_segments():
    assert split_words("Hello  world") == ["Hello", "", "world"]
    assert split_words("one two ") == ["one", "two"]
    assert split_words("") == [""]
    assert split_words("   ") == []


def test_clean_word_strips_non_alphanumerics():
    assert clean_word("fast!") == "fast"
    assert clean_word("it's") == "its"
    assert clean_word("2024,") == "2024"
    assert clean_word("--") == ""


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("The", 1),
        ("free", 1),
        ("queue", 1),
        ("little", 1),
        ("played", 1),
        ("wooden", 2),
        ("happily", 3),
        ("Everybody", 5),
        ("ARE", 2),
        ("rhythm", 1),
        ("2024", 1),
    ],
)
def test_count_syllables(word: str, expected: int):
    assert count_syllables(word) == expected


def test_count_syllables_is_at_least_one():
    for word in ["b", "xyz", "e", "the", "brr", "42"]:
        assert count_syllables(word) >= 1


def test_count_sentences_requires_trailing_whitespace():
    text = "The cat sat. It ran fast!"
    assert count_sentences(text) == 1
    assert count_sentences(text + "\n") == 2
    assert count_sentences("Hi! Bye? Ok. ") == 3


def test_count_sentences_segments_mode():
    assert count_sentences("The cat sat. It ran fast!", mode="segments") == 2
    assert count_sentences("The cat sat. It ran fast!\n", mode="segments") == 2
    assert count_sentences("no boundary here", mode="segments") == 1


def test_count_sentences_rejects_unknown_mode():
    with pytest.raises(ValueError, match="sentence counting mode"):
        count_sentences("Some text. ", mode="lines")


def test_count_characters_ignores_whitespace():
    assert count_characters("a b\n\tc ") == 3
    assert count_characters("") == 0


def test_extract_statistics_sample_text():
    stats = extract_statistics(GARDEN_TEXT)
    assert stats == TextStatistics(
        words=22, sentences=3, characters=123, syllables=38, polysyllables=5
    )


def test_extract_statistics_short_text():
    stats = extract_statistics("The cat sat. It ran fast!")
    assert stats.words == 6
    assert stats.sentences == 1
    assert stats.characters == 20
    assert stats.syllables == 6
    assert stats.polysyllables == 0


def test_extract_statistics_counts_empty_segments_as_words():
    stats = extract_statistics("Hello  world")
    # The empty segment between the spaces is a word but has no syllables.
    assert stats.words == 3
    assert stats.syllables == 3


def test_polysyllables_never_exceed_words():
    for text in [GARDEN_TEXT, "", "Extraordinary!", "a  -- unbelievable   idea. "]:
        stats = extract_statistics(text)
        assert stats.polysyllables <= stats.words


def test_unicode_spaces_are_not_whitespace():
    text = "Hello\xa0world. Bye.\xa0"
    # Only the ASCII space is removed; both no-break spaces are characters.
    assert count_characters(text) == 17
    assert count_characters("a\u3000b\u2028c") == 5
    assert count_sentences(text) == 1
    assert count_sentences("Stop.\xa0Go. ") == 1
    assert extract_statistics(text).words == 2
