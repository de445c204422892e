"""
Resume document reading for the Intake context.

Maps a resume file to its source kind and decodes it to plain text so the
extractors never see binary bytes. PDF text comes from pdfplumber, DOCX text
from python-docx; .tex and .txt files are read as UTF-8 text.
"""

from pathlib import Path
from typing import Dict, Union
from zipfile import BadZipFile

import pdfplumber
from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from tailor.contexts.intake.exceptions import DocumentDecodeError, UnsupportedSourceError
from tailor.contexts.intake.logger import _log_debug, _log_info, _log_warning
from tailor.contexts.intake.resume_parser import empty_resume_draft, extract_resume

SOURCE_KIND_BY_EXTENSION = {
    ".pdf": "pdf",
    ".tex": "latex",
    ".latex": "latex",
    ".docx": "docx",
    ".txt": "text",
}


def detect_source_kind(path: Union[str, Path]) -> str:
    """
    Map a file path to its source kind by extension.

    Raises:
        UnsupportedSourceError: If the extension is not supported

    Example:
        >>> detect_source_kind("resumes/jane_doe.TEX")
        'latex'
    """
    extension = Path(path).suffix.lower()
    if extension not in SOURCE_KIND_BY_EXTENSION:
        raise UnsupportedSourceError(extension or str(path), sorted(SOURCE_KIND_BY_EXTENSION))
    return SOURCE_KIND_BY_EXTENSION[extension]


def _read_pdf_text(path: Path) -> str:
    with pdfplumber.open(path) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages)


def _read_docx_text(path: Path) -> str:
    document = Document(str(path))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def read_document_text(path: Union[str, Path]) -> str:
    """
    Decode a resume document to plain text.

    Args:
        path: Path to a .pdf, .docx, .tex/.latex or .txt file

    Returns:
        Document text (raw LaTeX source for .tex files)

    Raises:
        UnsupportedSourceError: If the extension is not supported
        DocumentDecodeError: If the file cannot be decoded
    """
    path = Path(path)
    source_kind = detect_source_kind(path)

    if source_kind == "pdf":
        try:
            return _read_pdf_text(path)
        except Exception as e:
            # pdfplumber surfaces pdfminer's parser errors, which have no common base
            raise DocumentDecodeError(path, source_kind, e) from e

    if source_kind == "docx":
        try:
            return _read_docx_text(path)
        except (PackageNotFoundError, BadZipFile, KeyError, ValueError) as e:
            raise DocumentDecodeError(path, source_kind, e) from e

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentDecodeError(path, source_kind, e) from e


def extract_resume_file(path: Union[str, Path]) -> Dict:
    """
    Read a resume file and extract a draft resume record.

    A PDF that cannot be decoded yields the all-empty, zero-confidence draft
    instead of an error; other decode failures propagate.

    Raises:
        UnsupportedSourceError: If the extension is not supported
        DocumentDecodeError: If a non-PDF document cannot be decoded
    """
    path = Path(path)
    source_kind = detect_source_kind(path)
    _log_info(f"Reading {source_kind} resume: {path.name}")

    try:
        text = read_document_text(path)
    except DocumentDecodeError as e:
        if source_kind != "pdf":
            raise
        _log_warning(f"Could not decode PDF, returning empty draft: {e.original_error}")
        draft = empty_resume_draft(source_kind)
        draft["metadata"]["source_files"] = [path.name]
        return draft

    _log_debug(f"Decoded {len(text)} characters from {path.name}")
    draft = extract_resume(text, source_kind)
    draft["metadata"]["source_files"] = [path.name]
    return draft
