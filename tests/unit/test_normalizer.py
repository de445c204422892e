"""Unit tests for intake text normalization."""

import pytest

from tailor.contexts.intake.exceptions import UnsupportedSourceError
from tailor.contexts.intake.normalizer import (
    normalize_line_endings,
    normalize_unicode,
    preprocess_job_text,
    preprocess_resume_text,
)


@pytest.mark.unit
def test_normalize_unicode_replaces_spaces_and_quotes():
    text = "Jane\u00a0Doe \u201cRenderer\u201d team\u2019s lead\u200b"
    assert normalize_unicode(text) == 'Jane Doe "Renderer" team\'s lead'


@pytest.mark.unit
def test_normalize_unicode_keeps_bullet_glyphs():
    assert normalize_unicode("\u2022 Built a renderer") == "\u2022 Built a renderer"


@pytest.mark.unit
def test_normalize_line_endings():
    assert normalize_line_endings("a  \r\nb\rc") == "a\nb\nc"


@pytest.mark.unit
def test_preprocess_resume_text_converts_latex():
    source = "\\section*{Skills}\nPython, C\\texttt{++}"
    assert preprocess_resume_text(source, "latex") == "Skills\n\nPython, C++"


@pytest.mark.unit
def test_preprocess_resume_text_leaves_plain_text_lines():
    assert preprocess_resume_text("EXPERIENCE\r\n\u2022 Built X", "text") == "EXPERIENCE\n\u2022 Built X"


@pytest.mark.unit
def test_preprocess_resume_text_unknown_source_kind():
    with pytest.raises(UnsupportedSourceError) as exc_info:
        preprocess_resume_text("text", "rtf")
    assert exc_info.value.source == "rtf"
    assert "latex" in exc_info.value.supported


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", None])
def test_preprocess_empty_input(text):
    assert preprocess_resume_text(text) == ""
    assert preprocess_job_text(text) == ""
