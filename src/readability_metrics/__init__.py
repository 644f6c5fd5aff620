"""
readability_metrics package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .characterizer import Characterizer, characterize
from .config import ReadabilityConfig, build_characterizer, load_config
from .formulas import (
    LINSEAR_EASY_WORD_MAX_SYLLABLES,
    automated_readability_index,
    coleman_liau,
    flesch_kincaid_grade_level,
    flesch_reading_ease,
    linsear_write,
    lix,
    rix,
    score_document,
)
from .models import LONG_WORD_THRESHOLD, Characterization, ReadabilityScores
from .segmentation import segment_graphemes, segment_words
from .sentences import SentenceModelError, SentenceSplitter
from .stats import average, sentence_average_word_count, word_count
from .syllables import END_SENSITIVE_PAIRS, VOWEL_OVERRIDE_PAIRS, estimate_syllables

__all__ = [
    "Characterization",
    "Characterizer",
    "ReadabilityConfig",
    "ReadabilityScores",
    "SentenceModelError",
    "SentenceSplitter",
    "END_SENSITIVE_PAIRS",
    "VOWEL_OVERRIDE_PAIRS",
    "LONG_WORD_THRESHOLD",
    "LINSEAR_EASY_WORD_MAX_SYLLABLES",
    "average",
    "automated_readability_index",
    "build_characterizer",
    "characterize",
    "coleman_liau",
    "estimate_syllables",
    "flesch_kincaid_grade_level",
    "flesch_reading_ease",
    "linsear_write",
    "lix",
    "load_config",
    "rix",
    "score_document",
    "segment_graphemes",
    "segment_words",
    "sentence_average_word_count",
    "word_count",
]

__version__ = "0.1.0"
