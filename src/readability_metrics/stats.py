from __future__ import annotations

from typing import Sequence

import numpy as np


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics: 0/0 is nan and x/0 is +/-inf instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def average(values: Sequence[float]) -> float:
    """Arithmetic mean; an empty sequence gives nan."""
    return safe_divide(float(sum(values)), len(values))


def sentence_average_word_count(sentence_lengths: Sequence[int]) -> float:
    return average(sentence_lengths)


def word_count(words: Sequence[str]) -> int:
    return len(words)
