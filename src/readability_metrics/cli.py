from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import Callable, List

import typer
import yaml

from .characterizer import Characterizer
from .config import ReadabilityConfig, build_characterizer, load_config
from .report import score_corpus, write_report
from .sentences import SentenceModelError
from .sources import DocumentLoadError, document_from_file, load_documents
from .syllables import estimate_syllables

app = typer.Typer(help="Readability metrics CLI.", no_args_is_help=True)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    sentence_model: str | None = typer.Option(
        None,
        "--sentence-model",
        "-s",
        help="Sentence model: 'untrained', 'pretrained' or 'document'.",
    ),
    metrics: List[str] | None = typer.Option(
        None, "--metric", "-m", help="Metric to report (repeatable)."
    ),
    precision: int | None = typer.Option(
        None, "--precision", help="Round scores to this many digits."
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write a .csv or .json report instead of stdout."
    ),
) -> None:
    """Score every document under the input path."""
    cfg = _resolve_config(config, sentence_model, metrics, precision)
    try:
        documents = load_documents(input_path, cfg.input_extensions)
        factory = _characterizer_factory(cfg)
    except (DocumentLoadError, SentenceModelError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    frame = score_corpus(documents, factory, cfg.metrics, cfg.precision)
    if output is not None:
        try:
            write_report(frame, output)
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
        typer.echo(f"Wrote {len(documents)} document scores to {output}")
        return
    # NaN scores (empty documents) serialize as null.
    records = json.loads(frame.to_json(orient="records"))
    typer.echo(json.dumps({"documents": records}, indent=2))


@app.command()
def characterize(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    sentence_model: str | None = typer.Option(None, "--sentence-model", "-s"),
) -> None:
    """Print the sentence and word breakdown of a single document."""
    cfg = _resolve_config(config, sentence_model, None, None)
    try:
        document = document_from_file(input_path, input_path.name)
        characterizer = build_characterizer(cfg, document.text)
    except (DocumentLoadError, SentenceModelError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    payload = {"doc_id": document.doc_id}
    payload.update(characterizer.characterize(document.text).to_dict())
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def syllables(words: List[str] = typer.Argument(..., help="Words to estimate.")) -> None:
    """Print the estimated syllable count of each word."""
    for word in words:
        typer.echo(f"{word}\t{estimate_syllables(word)}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _resolve_config(
    path: Path | None,
    sentence_model: str | None,
    metrics: List[str] | None,
    precision: int | None,
) -> ReadabilityConfig:
    """Load the config file (or defaults) and layer CLI overrides on top."""
    try:
        cfg = load_config(path)
        overrides: dict[str, object] = {}
        if sentence_model:
            overrides["sentence_model"] = sentence_model
        if metrics:
            overrides["metrics"] = list(metrics)
        if precision is not None:
            overrides["precision"] = precision
        return dc_replace(cfg, **overrides) if overrides else cfg
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _characterizer_factory(cfg: ReadabilityConfig) -> Callable[[str], Characterizer]:
    """Return a per-document factory; shared models are built once up front."""
    if cfg.sentence_model == "document":
        return lambda text: build_characterizer(cfg, text)
    shared = build_characterizer(cfg)
    return lambda _text: shared


if __name__ == "__main__":
    main()
