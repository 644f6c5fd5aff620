import json
from pathlib import Path

from typer.testing import CliRunner

from readability_metrics.cli import app

runner = CliRunner()


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """analyze prints one JSON record per .txt and .html document."""
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.txt", "deck.html"]
    first = payload["documents"][0]
    assert first["sentences"] == 2
    assert "flesch_kincaid_grade_level" in first
    assert "linsear_write" in first


def test_cli_analyze_selected_metrics_to_csv(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    output = tmp_path / "reports" / "scores.csv"
    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(corpus_dir),
            "--metric",
            "lix",
            "--metric",
            "rix",
            "--sentence-model",
            "document",
            "--output",
            str(output),
        ],
    )
    assert result.exit_code == 0
    header = output.read_text(encoding="utf-8").splitlines()[0]
    assert header == "doc_id,sentences,words,syllables,long_words,lix,rix"


def test_cli_analyze_rejects_unknown_metric(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "--metric", "smog"]
    )
    assert result.exit_code != 0


def test_cli_analyze_uses_config_file(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("metrics: [rix]\nprecision: 2\n", encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "--config", str(config_path)]
    )
    assert result.exit_code == 0
    record = json.loads(result.stdout)["documents"][0]
    assert "rix" in record
    assert "lix" not in record


def test_cli_characterize_prints_breakdown(tmp_path: Path):
    path = tmp_path / "genesis.txt"
    path.write_text(
        "In the beginning, God created the heaven and the earth.", encoding="utf-8"
    )
    result = runner.invoke(app, ["characterize", "--input-path", str(path)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["doc_id"] == "genesis.txt"
    assert payload["sentence_lengths"] == [10]
    assert payload["word_syllable_lengths"] == [1, 1, 3, 1, 2, 1, 3, 1, 1, 2]


def test_cli_syllables():
    result = runner.invoke(app, ["syllables", "combination", "the"])
    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["combination\t4", "the\t1"]


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "sentence_model: pretrained" in result.stdout
    assert "metrics" in result.stdout


def _create_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus containing both .txt and .html sources."""
    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir()
    (corpus_dir / "chapter1.txt").write_text(
        "The storm clouds rolled over the bay. Sailors watched the winds.",
        encoding="utf-8",
    )
    (corpus_dir / "deck.html").write_text(
        "<html><body><p>The captain stood on deck.</p></body></html>",
        encoding="utf-8",
    )
    return corpus_dir


def test_cli_reports_bad_config_values(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("sentence_model: null\n", encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "--config", str(config_path)]
    )
    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)
