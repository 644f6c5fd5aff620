from __future__ import annotations

from typing import List, Tuple

import regex

WORD_BOUNDARY_PATTERN = regex.compile(r"\b", regex.WORD | regex.V1)
GRAPHEME_PATTERN = regex.compile(r"\X", regex.V1)


def segment_words(text: str) -> List[str]:
    """Split text into words on Unicode default word boundaries.

    Segments made only of whitespace or punctuation are dropped, so
    ``"tailor-made"`` yields two words while ``"it's"`` and ``"17.50"`` stay whole.
    """
    if not text:
        return []
    boundaries = {0, len(text)}
    boundaries.update(match.start() for match in WORD_BOUNDARY_PATTERN.finditer(text))
    ordered = sorted(boundaries)

    words: List[str] = []
    for start, end in zip(ordered, ordered[1:]):
        segment = text[start:end]
        if any(ch.isalnum() for ch in segment):
            words.append(segment)
    return words


def segment_graphemes(text: str) -> List[str]:
    """Split text into user-perceived characters (extended grapheme clusters)."""
    return GRAPHEME_PATTERN.findall(text)


def grapheme_profile(word: str) -> Tuple[int, int]:
    """Return ``(graphemes, alphabetic graphemes)`` for one word."""
    graphemes = segment_graphemes(word)
    return len(graphemes), sum(1 for g in graphemes if g[0].isalpha())
