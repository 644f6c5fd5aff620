# pyright: reportUnknownMemberType=false

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, List, Sequence, cast

import pandas as pd

from .characterizer import Characterizer
from .formulas import get_formula, metric_key
from .models import Document

LOGGER = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["doc_id", "sentences", "words", "syllables", "long_words"]


def score_corpus(
    documents: Iterable[Document],
    characterizer_factory: Callable[[str], Characterizer],
    metrics: Sequence[str],
    precision: int | None = None,
) -> Any:
    """
    Score each document and return a DataFrame with one row per document.

    ``characterizer_factory`` receives the document text so per-document
    sentence models can be trained; shared models simply ignore it.
    """
    formulas = [(metric_key(name), get_formula(name)) for name in metrics]
    rows: List[dict[str, Any]] = []
    for document in documents:
        stats = characterizer_factory(document.text).characterize(document.text)
        row: dict[str, Any] = {
            "doc_id": document.doc_id,
            "sentences": stats.sentence_count,
            "words": stats.word_count,
            "syllables": stats.syllable_count,
            "long_words": stats.long_word_count,
        }
        for name, formula in formulas:
            value = formula(stats)
            row[name] = round(value, precision) if precision is not None else value
        rows.append(row)

    columns = SUMMARY_COLUMNS + [name for name, _ in formulas]
    return cast(Any, pd.DataFrame(rows, columns=columns))


def write_report(frame: Any, path: Path) -> None:
    """Write the report as CSV or JSON records depending on the suffix."""
    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        frame.to_csv(path, index=False)
    elif suffix == ".json":
        frame.to_json(path, orient="records", indent=2)
    else:
        raise ValueError(f"Unsupported report format '{suffix}'; use .csv or .json.")
    LOGGER.info("Wrote %d rows to %s", len(frame), path)
