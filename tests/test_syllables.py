import pytest

from readability_metrics.segmentation import segment_words
from readability_metrics.syllables import (
    END_SENSITIVE_PAIRS,
    VOWEL_OVERRIDE_PAIRS,
    estimate_syllables,
)


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("the", 1),
        ("lucozade", 3),
        ("love", 1),
        ("dodo", 2),
        ("world", 1),
        ("atom", 2),
        ("energy", 3),
        ("combination", 4),
    ],
)
def test_known_syllable_counts(word: str, expected: int):
    assert estimate_syllables(word) == expected


def test_genesis_sentence_syllables():
    sentence = "In the beginning, God created the heaven and the earth."
    words = segment_words(sentence)

    assert len(words) == 10
    assert [estimate_syllables(w) for w in words] == [1, 1, 3, 1, 2, 1, 3, 1, 1, 2]


def test_estimate_is_case_insensitive():
    for word in ["The", "LUCOZADE", "Breanne", "CREATED", "Heaven", "tHe"]:
        assert estimate_syllables(word) == estimate_syllables(word.lower())


def test_vowel_override_pairs_split_syllables():
    # "ea" splits even though both letters are vowels; "ou" does not.
    assert ("e", "a") in VOWEL_OVERRIDE_PAIRS
    assert estimate_syllables("bean") == 2
    assert estimate_syllables("bout") == 1


def test_end_sensitive_pairs_are_retracted_at_word_end():
    assert ("e", "d") in END_SENSITIVE_PAIRS
    assert estimate_syllables("wanted") == 1
    assert estimate_syllables("diet") == 2
    assert estimate_syllables("die") == 1


def test_double_e_ending_is_not_silent():
    assert estimate_syllables("agree") == 2
    assert estimate_syllables("tree") == 1


def test_short_and_degenerate_words():
    assert estimate_syllables("") == 0
    assert estimate_syllables("a") == 1
    assert estimate_syllables("be") == 1
    assert estimate_syllables("nth") == 0
    assert estimate_syllables("17") == 0
