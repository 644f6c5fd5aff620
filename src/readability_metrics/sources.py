from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from bs4 import BeautifulSoup

from .models import Document

LOGGER = logging.getLogger(__name__)

HTML_EXTENSIONS = {".html", ".htm"}


class DocumentLoadError(RuntimeError):
    """Raised when an input document cannot be read."""


def load_documents(input_path: Path, extensions: Iterable[str]) -> List[Document]:
    """Expand a file or directory into documents keyed by relative path."""
    suffixes = {ext.lower() for ext in extensions}
    if input_path.is_file():
        return [document_from_file(input_path, input_path.name)]
    if not input_path.is_dir():
        raise DocumentLoadError(f"Input path not found: {input_path}")

    # Sorted so doc ids come out in a stable order.
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in suffixes
    )
    LOGGER.info("Found %d documents under %s", len(files), input_path)
    return [
        document_from_file(file, file.relative_to(input_path).as_posix())
        for file in files
    ]


def document_from_file(path: Path, doc_id: str) -> Document:
    """Read a supported file from disk and wrap it in a Document."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Unable to read {path}: {exc}") from exc
    if path.suffix.lower() in HTML_EXTENSIONS:
        raw = html_to_text(raw)
    LOGGER.debug("Loaded %s (%d chars)", doc_id, len(raw))
    return Document(doc_id=doc_id, text=raw)


def html_to_text(html: str) -> str:
    """Strip markup, keeping block elements on separate lines."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    lines = (line.strip() for line in soup.get_text(separator="\n").splitlines())
    return "\n".join(line for line in lines if line)
