"""Document reading helpers: plain text and markup files, PDF text extraction."""

from __future__ import annotations

from pathlib import Path

from pypdf import PdfReader


class DocumentReadError(OSError):
    """Raised when a document cannot be read; aborts the indexing run."""


def read_document(file_path: Path) -> str:
    """Return the text of ``file_path``.

    PDF files go through pypdf, everything else is decoded as UTF-8 with
    invalid byte sequences replaced.
    """
    try:
        if file_path.suffix.lower() == ".pdf":
            return _extract_pdf_text(file_path)
        return file_path.read_bytes().decode("utf-8", errors="replace")
    except Exception as exc:
        raise DocumentReadError(f"Failed to read document {file_path}: {exc}") from exc


def _extract_pdf_text(file_path: Path) -> str:
    reader = PdfReader(str(file_path))
    chunks: list[str] = []
    for page in reader.pages:
        text = page.extract_text() or ""
        if text:
            chunks.append(text)
    return "\n".join(chunks)
