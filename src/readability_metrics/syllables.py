"""
Rule-based syllable estimation for English words.

The estimator counts the starts of vowel runs and then applies a handful of
two-letter corrections. It is an approximation and is kept frozen: the tables
below are the whole of its knowledge.
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

VOWELS = frozenset("aeiouy")

# Split into two syllables even though both letters are vowels ("Breanne", not "bread").
VOWEL_OVERRIDE_PAIRS: FrozenSet[Tuple[str, str]] = frozenset({("i", "a"), ("e", "a")})

# Split into two syllables unless the pair ends the word.
END_SENSITIVE_PAIRS: FrozenSet[Tuple[str, str]] = frozenset(
    {("i", "e"), ("y", "a"), ("e", "s"), ("e", "d")}
)

_SENTINEL = " "


def is_vowel(ch: str) -> bool:
    return ch in VOWELS


def estimate_syllables(word: str) -> int:
    """Estimate how many syllables ``word`` has when spoken.

    Matching is case-insensitive. The suffix correction can pull the running
    count below the number of vowel runs; the result is clamped at 0.
    """
    normalized = word.lower()
    count = 0

    previous = _SENTINEL
    for current in normalized:
        if is_vowel(current) and (
            not is_vowel(previous)
            or (previous, current) in VOWEL_OVERRIDE_PAIRS
            or (previous, current) in END_SENSITIVE_PAIRS
        ):
            count += 1
        previous = current

    if len(normalized) > 2:
        suffix = (normalized[-2], normalized[-1])
        if suffix in END_SENSITIVE_PAIRS or (
            suffix[1] == "e" and suffix != ("e", "e") and normalized != "the"
        ):
            count -= 1

    return max(count, 0)
