"""Unit tests for section header matching and segmentation."""

import pytest

from tailor.contexts.intake.section_patterns import (
    is_bullet_line,
    match_job_header,
    match_resume_header,
    normalize_header_line,
    strip_bullet,
)
from tailor.contexts.intake.segmenter import segment_job, segment_resume, segment_sections


class TestHeaderMatching:
    """Tests for the resume and job header vocabularies."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line, section",
        [
            ("EXPERIENCE", "experience"),
            ("Work Experience:", "experience"),
            ("## **Technical Skills**", "skills"),
            ("Education", "education"),
            ("Selected Projects", "projects"),
            ("Publications", "publications"),
            ("Certifications & Licenses", "certifications"),
            ("Professional Summary", "summary"),
        ],
    )
    def test_resume_headers(self, line, section):
        assert match_resume_header(line) == section

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line, section",
        [
            ("Education & Certifications", "education"),
            ("Technical Skills & Languages", "skills"),
            ("Work Experience & Internships", "experience"),
            ("Skills Summary", "skills"),
            ("EXPERIENCE HIGHLIGHTS", "experience"),
        ],
    )
    def test_resume_header_with_extra_words(self, line, section):
        assert match_resume_header(line) == section

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["Jane Doe", "Acme Robotics", "Python, C++, Rust", "Inexperienced"])
    def test_resume_header_needs_vocabulary_word(self, line):
        assert match_resume_header(line) is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line, section",
        [
            ("Preferred Qualifications", "preferred"),
            ("Nice to have", "preferred"),
            ("Minimum Qualifications", "requirements"),
            ("What we're looking for", "requirements"),
            ("What you'll do", "responsibilities"),
            ("About the role", "responsibilities"),
            ("About us", "about"),
            ("Benefits & Perks", "benefits"),
        ],
    )
    def test_job_headers(self, line, section):
        assert match_job_header(line) == section

    @pytest.mark.unit
    def test_job_header_rejects_sentences(self):
        assert match_job_header("Rust experience is a plus.") is None

    @pytest.mark.unit
    def test_normalize_header_line(self):
        assert normalize_header_line("## **Work   Experience:**") == "work experience"


class TestBullets:
    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["• Built X", "•Built X", "- Built X", "* Built X", "1. Built X", "2) Built X"])
    def test_bullet_lines(self, line):
        assert is_bullet_line(line)
        assert strip_bullet(line) == "Built X"

    @pytest.mark.unit
    @pytest.mark.parametrize("line", ["-5% churn", "**Header**", "3.5 GPA", "Built X"])
    def test_not_bullet_lines(self, line):
        assert not is_bullet_line(line)


class TestSegmentSections:
    """Tests for segment_sections and its resume/job wrappers."""

    @pytest.mark.unit
    def test_preamble_is_discarded(self):
        sections = segment_resume("Jane Doe\njane@acme.io\n\nSKILLS\nPython, C++")
        assert sections == {"skills": "Python, C++"}

    @pytest.mark.unit
    def test_no_header_gives_empty_result(self):
        assert segment_resume("Just a paragraph of text\nwith two lines") == {}

    @pytest.mark.unit
    def test_sections_keep_first_appearance_order(self):
        text = "EDUCATION\nStanford University\nEXPERIENCE\nAcme | 2020 - Present"
        assert list(segment_resume(text)) == ["education", "experience"]

    @pytest.mark.unit
    def test_empty_section_is_not_recorded(self):
        sections = segment_resume("SUMMARY\n\nSKILLS\nPython")
        assert "summary" not in sections
        assert sections["skills"] == "Python"

    @pytest.mark.unit
    def test_repeated_section_is_appended_by_default(self):
        text = "SKILLS\nPython\nEDUCATION\nMIT\nSkills\nRust"
        assert segment_resume(text)["skills"] == "Python\nRust"

    @pytest.mark.unit
    def test_repeated_section_replace_policy(self):
        text = "SKILLS\nPython\nEDUCATION\nMIT\nSkills\nRust"
        assert segment_resume(text, on_repeat="replace")["skills"] == "Rust"

    @pytest.mark.unit
    def test_unknown_repeat_policy(self):
        with pytest.raises(ValueError, match="repeat policy"):
            segment_resume("SKILLS\nPython", on_repeat="merge")

    @pytest.mark.unit
    def test_long_keyword_line_is_not_a_header(self):
        line = "Experience " + "x" * 60
        assert segment_sections(line, match_resume_header, 50) == {}

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "header, section",
        [
            ("Education & Certifications", "education"),
            ("Technical Skills & Languages", "skills"),
            ("Work Experience & Internships", "experience"),
            ("Skills Summary", "skills"),
            ("EXPERIENCE HIGHLIGHTS", "experience"),
        ],
    )
    def test_compound_headers_open_sections(self, header, section):
        assert segment_resume(f"Jane\n{header}\nPython, Go\n") == {section: "Python, Go"}

    @pytest.mark.unit
    def test_bullet_line_is_never_a_header(self):
        sections = segment_resume("SKILLS\nPython\n• Projects\nPROJECTS\nTracer")
        assert sections["skills"] == "Python\n• Projects"
        assert sections["projects"] == "Tracer"

    @pytest.mark.unit
    def test_segment_job(self, sample_job_text):
        sections = segment_job(sample_job_text)
        assert list(sections) == ["about", "responsibilities", "requirements", "preferred"]
        assert sections["requirements"].startswith("- 5+ years")
        assert "Kubernetes" in sections["preferred"]

    @pytest.mark.unit
    def test_segment_resume_fixture(self, sample_resume_text):
        sections = segment_resume(sample_resume_text)
        assert list(sections) == [
            "summary",
            "experience",
            "education",
            "skills",
            "projects",
            "publications",
            "certifications",
        ]
