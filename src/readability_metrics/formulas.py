"""
Published readability formulas evaluated over a Characterization.

Each function accepts either a Characterization or a raw document string; a
string is characterized with a default Characterizer first. Degenerate inputs
(no sentences or no words) give nan or inf rather than raising.
"""

from __future__ import annotations

from typing import Callable, Dict, Union

from .characterizer import Characterizer
from .models import LONG_WORD_THRESHOLD, Characterization, ReadabilityScores
from .stats import safe_divide

Source = Union[Characterization, str]

# A word is "easy" for Linsear Write when its syllable count is below this.
LINSEAR_EASY_WORD_MAX_SYLLABLES = 3
LINSEAR_EASY_WORD_POINTS = 1
LINSEAR_HARD_WORD_POINTS = 3
LINSEAR_THRESHOLD = 20


def _characterization(source: Source) -> Characterization:
    if isinstance(source, Characterization):
        return source
    return Characterizer().characterize(source)


def flesch_kincaid_grade_level(source: Source) -> float:
    stats = _characterization(source)
    return (
        0.39 * stats.average_sentence_length
        + 11.8 * stats.average_word_syllables
        - 15.59
    )


def flesch_reading_ease(source: Source) -> float:
    stats = _characterization(source)
    return (
        206.835
        - 1.015 * stats.average_sentence_length
        - 84.6 * stats.average_word_syllables
    )


def long_words_ratio(source: Source) -> float:
    stats = _characterization(source)
    return safe_divide(stats.long_word_count, stats.word_count)


def lix(source: Source) -> float:
    """LIX with the long-word share as a raw ratio (0..1), not a percentage."""
    stats = _characterization(source)
    return long_words_ratio(stats) + stats.average_sentence_length


def rix(source: Source) -> float:
    stats = _characterization(source)
    return safe_divide(stats.long_word_count, stats.sentence_count)


def coleman_liau(source: Source) -> float:
    stats = _characterization(source)
    letters = stats.letter_count
    letters_per_100_words = safe_divide(letters, stats.word_count) * 100
    sentences_per_100_letters = safe_divide(stats.sentence_count, letters) * 100
    return 0.0588 * letters_per_100_words - 0.296 * sentences_per_100_letters - 15.8


def automated_readability_index(source: Source) -> float:
    stats = _characterization(source)
    return (
        4.71 * safe_divide(stats.letter_count, stats.word_count)
        + 0.5 * safe_divide(stats.word_count, stats.sentence_count)
        - 21.43
    )


def linsear_write(source: Source) -> float:
    stats = _characterization(source)
    points = sum(
        LINSEAR_EASY_WORD_POINTS
        if syllables < LINSEAR_EASY_WORD_MAX_SYLLABLES
        else LINSEAR_HARD_WORD_POINTS
        for syllables in stats.word_syllable_lengths
    )
    provisional = safe_divide(points, stats.sentence_count)
    if provisional < LINSEAR_THRESHOLD:
        return provisional / 2 - 1
    return provisional / 2


FORMULAS: Dict[str, Callable[[Source], float]] = {
    "flesch_kincaid_grade_level": flesch_kincaid_grade_level,
    "flesch_reading_ease": flesch_reading_ease,
    "lix": lix,
    "rix": rix,
    "coleman_liau": coleman_liau,
    "automated_readability_index": automated_readability_index,
    "linsear_write": linsear_write,
}


def metric_key(name: str) -> str:
    return name.lower().strip().replace("-", "_")


def get_formula(name: str) -> Callable[[Source], float]:
    normalized = metric_key(name)
    if normalized not in FORMULAS:
        raise ValueError(f"Unknown readability metric '{name}'.")
    return FORMULAS[normalized]


def score_document(source: Source) -> ReadabilityScores:
    """Evaluate every formula against one characterization of ``source``."""
    stats = _characterization(source)
    return ReadabilityScores(**{name: formula(stats) for name, formula in FORMULAS.items()})
