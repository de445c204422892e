"""
Input text normalizer for the Intake context.

Every resume and job posting passes through here before segmentation, so the
section and field patterns only ever see one spelling of quotes, spaces and
dashes. LaTeX sources are additionally converted to plain lines.
"""

import re
import unicodedata

from tailor.contexts.intake.exceptions import UnsupportedSourceError
from tailor.utils.latex_tools import latex_to_text

SOURCE_KINDS = ("pdf", "latex", "docx", "text")

# Unicode replacements: problematic char → ASCII equivalent
# Bullet glyphs are left alone; bullet detection relies on them.
UNICODE_REPLACEMENTS = {
    # Spaces
    "\u00a0": " ",  # non-breaking space
    "\u202f": " ",  # narrow no-break space
    "\u2009": " ",  # thin space
    # Zero-width characters → remove
    "\u200b": "",  # zero-width space
    "\u200c": "",  # zero-width non-joiner
    "\u200d": "",  # zero-width joiner
    "\u2060": "",  # word joiner
    "\ufeff": "",  # BOM
    "\u00ad": "",  # soft hyphen
    # Quotes
    "\u2018": "'",  # left single quote
    "\u2019": "'",  # right single quote
    "\u201c": '"',  # left double quote
    "\u201d": '"',  # right double quote
    # Dashes
    "\u2010": "-",  # hyphen
    "\u2011": "-",  # non-breaking hyphen
    "\u2212": "-",  # minus sign
    "\u2026": "...",  # ellipsis
}


def normalize_unicode(text: str) -> str:
    """
    Normalize unicode characters that cause parsing issues.

    Applies NFKC normalization and replaces common problematic characters
    with ASCII equivalents.

    Args:
        text: Raw text possibly containing problematic unicode

    Returns:
        Text with normalized unicode
    """
    text = unicodedata.normalize("NFKC", text)

    for char, replacement in UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)

    return text


def normalize_line_endings(text: str) -> str:
    """Convert CRLF / CR line endings to LF and drop trailing spaces per line."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return re.sub(r"[ \t]+\n", "\n", text)


def preprocess_resume_text(text: str, source_kind: str = "text") -> str:
    """
    Prepare a decoded resume body for section segmentation.

    Handles:
    - LaTeX source conversion (source_kind == "latex")
    - Unicode normalization (non-breaking spaces, smart quotes, etc.)
    - Line ending normalization

    Args:
        text: Decoded resume text, or raw .tex content for latex sources
        source_kind: One of SOURCE_KINDS

    Returns:
        Normalized text ready for segmentation

    Raises:
        UnsupportedSourceError: If source_kind is not a known source kind
    """
    if source_kind not in SOURCE_KINDS:
        raise UnsupportedSourceError(source_kind, list(SOURCE_KINDS))

    if not text:
        return ""

    text = normalize_line_endings(text)
    if source_kind == "latex":
        text = latex_to_text(text)

    return normalize_unicode(text)


def preprocess_job_text(text: str) -> str:
    """
    Prepare a pasted job posting for section segmentation.

    Args:
        text: Raw job posting text (plain or markdown)

    Returns:
        Normalized text ready for segmentation
    """
    if not text:
        return ""
    return normalize_unicode(normalize_line_endings(text))
