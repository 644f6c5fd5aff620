from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .characterizer import Characterizer
from .formulas import FORMULAS, get_formula
from .sentences import SentenceSplitter

SENTENCE_MODELS = ("untrained", "pretrained", "document")


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for document analysis."""

    sentence_model: str = "pretrained"
    language: str = "english"
    training_text_path: str | None = None
    metrics: List[str] = field(default_factory=lambda: list(FORMULAS))
    precision: int | None = None
    input_extensions: List[str] = field(
        default_factory=lambda: [".txt", ".md", ".html", ".htm"]
    )

    def __post_init__(self) -> None:
        if not isinstance(self.sentence_model, str):
            raise ValueError("sentence_model must be a string.")
        self.sentence_model = self.sentence_model.lower().strip()
        if self.sentence_model not in SENTENCE_MODELS:
            raise ValueError(
                f"Unknown sentence_model '{self.sentence_model}'; "
                f"expected one of {', '.join(SENTENCE_MODELS)}."
            )
        if not isinstance(self.language, str) or not self.language.strip():
            raise ValueError("language must be a non-empty string.")
        if isinstance(self.training_text_path, Path):
            self.training_text_path = str(self.training_text_path)
        if self.training_text_path is not None and not isinstance(
            self.training_text_path, str
        ):
            raise ValueError("training_text_path must be a string path.")
        self.metrics = _string_list("metrics", self.metrics)
        for name in self.metrics:
            get_formula(name)
        # bool is an int subclass; reject it explicitly.
        if self.precision is not None and (
            isinstance(self.precision, bool) or not isinstance(self.precision, int)
        ):
            raise ValueError("precision must be an integer or null.")
        extensions = _string_list("input_extensions", self.input_extensions)
        self.input_extensions = [ext.lower() for ext in extensions]
        for ext in self.input_extensions:
            if not ext.startswith("."):
                raise ValueError(
                    f"input_extensions entry '{ext}' must start with '.'."
                )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _string_list(name: str, value: Any) -> List[str]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValueError(f"{name} must be a list of strings.")
    if not all(isinstance(item, str) for item in value):
        raise ValueError(f"{name} must be a list of strings.")
    return list(value)


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input."""
    if data is None:
        return ReadabilityConfig()
    allowed = {item.name for item in fields(ReadabilityConfig)}
    return ReadabilityConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)


def build_splitter(config: ReadabilityConfig) -> SentenceSplitter:
    """
    Build the shared sentence splitter for ``untrained``/``pretrained`` modes.

    ``pretrained`` falls back to per-document Punkt training (with a logged
    warning) when the NLTK model for ``language`` is not installed.
    """
    if config.training_text_path:
        return SentenceSplitter.trained_on_file(config.training_text_path)
    if config.sentence_model == "pretrained":
        return SentenceSplitter.default(config.language)
    return SentenceSplitter.untrained()


def build_characterizer(config: ReadabilityConfig, document: str = "") -> Characterizer:
    """
    Construct the Characterizer described by ``config``.

    In ``document`` mode the Punkt model is trained on ``document``, so callers
    build one characterizer per document; other modes can be reused freely.
    """
    if config.sentence_model == "document":
        return Characterizer(SentenceSplitter.trained_on(document))
    return Characterizer(build_splitter(config))
