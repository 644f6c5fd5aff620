from __future__ import annotations

from .models import Characterization
from .segmentation import grapheme_profile, segment_words
from .sentences import SentenceSplitter
from .syllables import estimate_syllables


class Characterizer:
    """
    Turns raw documents into Characterization records.

    The sentence splitter (and whatever Punkt model it carries) is fixed at
    construction; ``characterize`` never retrains it, so a single instance is
    safe to share across threads. Without an explicit splitter the pretrained
    English Punkt model is used.
    """

    def __init__(self, splitter: SentenceSplitter | None = None) -> None:
        self._splitter = splitter or SentenceSplitter.default()

    @property
    def splitter(self) -> SentenceSplitter:
        return self._splitter

    def characterize(self, document: str) -> Characterization:
        sentences = self._splitter.split(document)
        words = segment_words(document)
        profiles = [grapheme_profile(w) for w in words]
        return Characterization(
            sentences=tuple(sentences),
            sentence_lengths=tuple(len(segment_words(s)) for s in sentences),
            words=tuple(words),
            word_syllable_lengths=tuple(estimate_syllables(w) for w in words),
            word_grapheme_lengths=tuple(length for length, _ in profiles),
            word_letter_counts=tuple(letters for _, letters in profiles),
        )


def characterize(document: str, *, train: bool = False) -> Characterization:
    """
    Characterize a single document with a throwaway Characterizer.

    With ``train=True`` the Punkt model is trained on ``document`` itself
    before splitting it; otherwise the default English model is used.
    """
    splitter = SentenceSplitter.trained_on(document) if train else None
    return Characterizer(splitter).characterize(document)
