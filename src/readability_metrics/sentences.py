from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List

from nltk.tokenize.punkt import (
    PunktParameters,
    PunktSentenceTokenizer,
    PunktTokenizer,
    PunktTrainer,
)

LOGGER = logging.getLogger(__name__)

# Punkt abbreviation types: lowercase, final period dropped.
ENGLISH_ABBREVIATIONS: FrozenSet[str] = frozenset(
    {
        "mr",
        "mrs",
        "ms",
        "dr",
        "prof",
        "sr",
        "jr",
        "st",
        "mt",
        "gen",
        "gov",
        "sen",
        "rep",
        "rev",
        "capt",
        "col",
        "lt",
        "sgt",
        "co",
        "corp",
        "inc",
        "ltd",
        "dept",
        "univ",
        "vs",
        "etc",
        "approx",
        "fig",
        "vol",
        "pp",
        "jan",
        "feb",
        "mar",
        "apr",
        "jun",
        "jul",
        "aug",
        "sep",
        "sept",
        "oct",
        "nov",
        "dec",
        "e.g",
        "i.e",
        "a.m",
        "p.m",
        "u.s",
        "u.k",
        "u.s.a",
    }
)


class SentenceModelError(RuntimeError):
    """Raised when a Punkt sentence model cannot be built."""


class SentenceSplitter:
    """
    Abbreviation-aware sentence splitter backed by NLTK Punkt.

    The Punkt tokenizer is built once in the constructor and only read
    afterwards, so one splitter can be shared between threads. A splitter in
    per-document mode keeps no model at all: each ``split`` trains a private
    tokenizer on the document it is given and discards it.
    """

    def __init__(
        self,
        tokenizer: PunktSentenceTokenizer | None = None,
        *,
        per_document: bool = False,
        abbreviations: Iterable[str] = (),
    ) -> None:
        self._tokenizer = tokenizer or PunktSentenceTokenizer(PunktParameters())
        self._per_document = per_document
        self._abbreviations = frozenset(abbreviations)

    @property
    def per_document(self) -> bool:
        return self._per_document

    @classmethod
    def default(cls, language: str = "english") -> "SentenceSplitter":
        """
        Pretrained Punkt model for ``language``.

        When NLTK's ``punkt_tab`` data is not installed, falls back to Punkt
        trained on each document, seeded with common English abbreviations.
        """
        try:
            return cls.pretrained(language)
        except SentenceModelError as exc:
            LOGGER.warning("%s Falling back to Punkt trained per document.", exc)
        abbreviations = ENGLISH_ABBREVIATIONS if language == "english" else ()
        return cls(per_document=True, abbreviations=abbreviations)

    @classmethod
    def untrained(cls) -> "SentenceSplitter":
        """Splitter with no abbreviation knowledge; needs no downloaded data."""
        return cls()

    @classmethod
    def pretrained(cls, language: str = "english") -> "SentenceSplitter":
        """Load the Punkt model NLTK ships for ``language``."""
        try:
            tokenizer = PunktTokenizer(language)
        except LookupError as exc:
            raise SentenceModelError(
                f"Punkt model for {language!r} is not installed. "
                "Run `python -m nltk.downloader punkt_tab` to fetch it."
            ) from exc
        LOGGER.debug("Loaded pretrained Punkt model for %s", language)
        return cls(tokenizer)

    @classmethod
    def trained_on(
        cls, text: str, abbreviations: Iterable[str] = ()
    ) -> "SentenceSplitter":
        """Train a Punkt model on ``text`` (typically the document itself)."""
        return cls(_train_tokenizer(text, frozenset(abbreviations)))

    @classmethod
    def trained_on_file(cls, path: str | Path) -> "SentenceSplitter":
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SentenceModelError(
                f"Unable to read sentence training text {path}: {exc}"
            ) from exc
        return cls.trained_on(text)

    def split(self, document: str) -> List[str]:
        """Return the sentences of ``document`` in order, as substrings of it."""
        if not document.strip():
            return []
        tokenizer = (
            _train_tokenizer(document, self._abbreviations)
            if self._per_document
            else self._tokenizer
        )
        return [document[start:end] for start, end in tokenizer.span_tokenize(document)]


def _train_tokenizer(
    text: str, abbreviations: FrozenSet[str]
) -> PunktSentenceTokenizer:
    if text.strip():
        trainer = PunktTrainer()
        trainer.train(text, finalize=True)
        params = trainer.get_params()
    else:
        params = PunktParameters()
    params.abbrev_types.update(abbreviations)
    LOGGER.debug(
        "Trained Punkt model on %d chars (%d abbreviations)",
        len(text),
        len(params.abbrev_types),
    )
    return PunktSentenceTokenizer(params)
