from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Tuple

from .segmentation import grapheme_profile
from .stats import average

LONG_WORD_THRESHOLD = 6


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class Characterization:
    """
    Word and sentence statistics for one document.

    ``sentence_lengths[i]`` is the word count of ``sentences[i]`` and
    ``word_syllable_lengths[j]`` is the estimated syllable count of ``words[j]``.
    Grapheme and letter counts per word are filled in once at construction
    when the caller does not supply them.
    """

    sentences: Tuple[str, ...]
    sentence_lengths: Tuple[int, ...]
    words: Tuple[str, ...]
    word_syllable_lengths: Tuple[int, ...]
    word_grapheme_lengths: Tuple[int, ...] = field(default=(), repr=False)
    word_letter_counts: Tuple[int, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if (
            len(self.word_grapheme_lengths) != len(self.words)
            or len(self.word_letter_counts) != len(self.words)
        ):
            profiles = [grapheme_profile(word) for word in self.words]
            object.__setattr__(
                self, "word_grapheme_lengths", tuple(length for length, _ in profiles)
            )
            object.__setattr__(
                self, "word_letter_counts", tuple(letters for _, letters in profiles)
            )

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def syllable_count(self) -> int:
        return sum(self.word_syllable_lengths)

    @property
    def long_word_count(self) -> int:
        """Words of at least LONG_WORD_THRESHOLD graphemes."""
        return sum(
            1 for length in self.word_grapheme_lengths if length >= LONG_WORD_THRESHOLD
        )

    @property
    def letter_count(self) -> int:
        """Alphabetic graphemes across all words (digits and joiners excluded)."""
        return sum(self.word_letter_counts)

    @property
    def average_sentence_length(self) -> float:
        return average(self.sentence_lengths)

    @property
    def average_word_syllables(self) -> float:
        return average(self.word_syllable_lengths)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sentences": list(self.sentences),
            "sentence_lengths": list(self.sentence_lengths),
            "words": list(self.words),
            "word_syllable_lengths": list(self.word_syllable_lengths),
        }


@dataclass(slots=True)
class ReadabilityScores:
    """All readability formula results for one document."""

    flesch_kincaid_grade_level: float
    flesch_reading_ease: float
    lix: float
    rix: float
    coleman_liau: float
    automated_readability_index: float
    linsear_write: float

    def to_dict(self) -> dict[str, float]:
        return dict(asdict(self))
