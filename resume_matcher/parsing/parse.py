from __future__ import annotations

import hashlib
import logging
from io import BytesIO

from docx import Document
from pypdf import PdfReader

from .errors import DocumentDecodeError, DocumentTooShortError, UnsupportedFormatError
from .models import ParsedBlock, ParsedDoc

logger = logging.getLogger(__name__)

CONTENT_TYPE_SOURCES = {
    "application/pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "application/msword": "docx",
    "text/plain": "txt",
}
EXTENSION_SOURCES = {"pdf": "pdf", "docx": "docx", "doc": "docx", "txt": "txt"}
_GENERIC_CONTENT_TYPES = {"", "application/octet-stream"}
_TEXT_ENCODINGS = ("utf-8", "utf-16", "latin-1")


def _compute_doc_id(text: str, filename: str) -> str:
    seed = text if text.strip() else filename
    digest = hashlib.sha256(seed.encode("utf-8", errors="ignore")).hexdigest()
    return digest[:16]


def resolve_source_type(content_type: str | None, filename: str = "") -> str:
    mime = (content_type or "").split(";")[0].strip().lower()
    if mime in CONTENT_TYPE_SOURCES:
        return CONTENT_TYPE_SOURCES[mime]
    if mime in _GENERIC_CONTENT_TYPES:
        ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if ext in EXTENSION_SOURCES:
            return EXTENSION_SOURCES[ext]
    raise UnsupportedFormatError("Unsupported file type. Please upload PDF, DOCX, or TXT files.")


def _parse_txt(content: bytes) -> tuple[str, list[ParsedBlock], dict[str, str]]:
    for encoding in _TEXT_ENCODINGS:
        try:
            return content.decode(encoding), [], {"encoding": encoding}
        except UnicodeDecodeError:
            continue
    raise DocumentDecodeError("Failed to read text file.")


def _parse_pdf(content: bytes) -> tuple[str, list[ParsedBlock], dict[str, int]]:
    try:
        reader = PdfReader(BytesIO(content))
        blocks: list[ParsedBlock] = []
        for index, page in enumerate(reader.pages, start=1):
            page_text = (page.extract_text() or "").strip()
            if page_text:
                blocks.append(ParsedBlock(page=index, text=page_text))
    except Exception as exc:
        raise DocumentDecodeError("Unable to extract text from this PDF file.") from exc
    return "\n".join(block.text for block in blocks), blocks, {"pages": len(reader.pages)}


def _parse_docx(content: bytes) -> tuple[str, list[ParsedBlock], dict[str, int]]:
    try:
        document = Document(BytesIO(content))
    except Exception as exc:
        raise DocumentDecodeError(
            "Unable to extract text from this Word file. Legacy .doc must be converted to .docx."
        ) from exc
    paragraphs = [p.text.strip() for p in document.paragraphs if p.text and p.text.strip()]
    blocks = [ParsedBlock(page=None, text=paragraph) for paragraph in paragraphs]
    return "\n".join(paragraphs), blocks, {"paragraphs": len(document.paragraphs)}


_PARSERS = {
    "txt": _parse_txt,
    "pdf": _parse_pdf,
    "docx": _parse_docx,
}


def extract_text(content: bytes, content_type: str | None, filename: str = "") -> ParsedDoc:
    source_type = resolve_source_type(content_type, filename)
    text, blocks, details = _PARSERS[source_type](content)
    text = text.strip()

    warnings: list[str] = []
    if not text:
        warnings.append(f"No extractable text found in {source_type.upper()}.")

    logger.info(
        "document_extracted source_type=%s characters=%d blocks=%d",
        source_type,
        len(text),
        len(blocks),
    )
    return ParsedDoc(
        doc_id=_compute_doc_id(text=text, filename=filename),
        source_type=source_type,
        text=text,
        blocks=blocks,
        parsing_warnings=warnings,
        details=dict(details),
    )


def ensure_analyzable(text: str, min_chars: int = 50) -> str:
    characters = len((text or "").strip())
    if characters < min_chars:
        raise DocumentTooShortError(characters=characters, min_chars=min_chars)
    return text
