from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path

from docx import Document
from pypdf import PdfReader

from resume_ats.core.config import settings

from .models import ExtractedText, ExtractionError

logger = logging.getLogger(__name__)

_MEDIA_TYPES = {
    "pdf": "pdf",
    ".pdf": "pdf",
    "application/pdf": "pdf",
    "docx": "docx",
    ".docx": "docx",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "txt": "txt",
    ".txt": "txt",
    "text/plain": "txt",
}


PLACEHOLDER_PREFIX = "[Resume Parsing Failed]"


def placeholder_text(filename: str | None) -> str:
    return f"{PLACEHOLDER_PREFIX} File: {filename or 'upload'}. Please check file format."


def is_placeholder_text(text: str) -> bool:
    """True for the stand-in text of a file that could not be read; it carries no resume content."""
    return text.startswith(PLACEHOLDER_PREFIX)


def _source_type(media_type: str | None, filename: str | None) -> str | None:
    if media_type:
        key = media_type.split(";", 1)[0].strip().lower()
        if key in _MEDIA_TYPES:
            return _MEDIA_TYPES[key]
    if filename:
        return _MEDIA_TYPES.get(Path(filename).suffix.lower())
    return None


def _read_txt(content: bytes) -> tuple[str, list[str]]:
    return content.decode("utf-8", errors="replace"), []


def _read_pdf(content: bytes) -> tuple[str, list[str]]:
    warnings: list[str] = []
    reader = PdfReader(BytesIO(content))
    text_parts: list[str] = []
    for index, page in enumerate(reader.pages, start=1):
        try:
            page_text = (page.extract_text() or "").strip()
        except Exception as exc:  # noqa: BLE001 - a bad page must not sink the document
            warnings.append(f"Page {index} could not be read: {exc}")
            continue
        if page_text:
            text_parts.append(page_text)
    return "\n".join(text_parts), warnings


def _read_docx(content: bytes) -> tuple[str, list[str]]:
    document = Document(BytesIO(content))
    parts = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    for table in document.tables:
        for row in table.rows:
            cells = [cell.text.strip() for cell in row.cells if cell.text and cell.text.strip()]
            if cells:
                parts.append(" | ".join(cells))
    return "\n".join(parts), []


_READERS = {
    "pdf": _read_pdf,
    "docx": _read_docx,
    "txt": _read_txt,
}


def _failed(filename: str | None, source_type: str | None, error: ExtractionError) -> ExtractedText:
    return ExtractedText(
        text=placeholder_text(filename),
        source_type=source_type,
        warnings=[error.message],
        error=error,
    )


def extract_text(
    content: bytes,
    media_type: str | None = None,
    *,
    filename: str | None = None,
) -> ExtractedText:
    """Turn an uploaded resume into plain text.

    Document problems never raise. A corrupt, oversized or unsupported file
    comes back with ``error`` set and a placeholder ``text`` that parses to an
    empty resume, so the rest of the pipeline keeps running.
    """
    if content is None:
        raise TypeError("content is required")

    source_type = _source_type(media_type, filename)
    if source_type is None:
        logger.warning("resume_extract_unsupported media_type=%s filename=%s", media_type, filename)
        return _failed(
            filename,
            None,
            ExtractionError(
                code="unsupported_format",
                message=f"Unsupported file type '{media_type or filename}'. Supported types: .pdf, .docx, .txt",
            ),
        )

    if len(content) > settings.resume_max_bytes:
        logger.warning("resume_extract_too_large bytes=%s limit=%s", len(content), settings.resume_max_bytes)
        return _failed(
            filename,
            source_type,
            ExtractionError(
                code="too_large",
                message=f"File exceeds {settings.resume_max_bytes} bytes.",
            ),
        )

    try:
        text, warnings = _READERS[source_type](content)
    except Exception as exc:  # noqa: BLE001 - extraction failures degrade to a placeholder
        logger.warning("resume_extract_failed source_type=%s filename=%s: %s", source_type, filename, exc)
        return _failed(
            filename,
            source_type,
            ExtractionError(code="corrupt_file", message=f"{source_type.upper()} parsing failed: {exc}"),
        )

    if not text.strip():
        text = ""
        warnings.append("No extractable text found")
    logger.info("resume_extract_completed source_type=%s chars=%s", source_type, len(text))
    return ExtractedText(text=text, source_type=source_type, warnings=warnings)


def extract_text_from_path(file_path: str | Path) -> ExtractedText:
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Input document not found: '{path}'")
    return extract_text(path.read_bytes(), filename=path.name)
