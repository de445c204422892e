"""Unit tests for job posting parsing."""

import pytest

from tailor.contexts.intake.extraction_patterns import KEYWORD_LIMIT
from tailor.contexts.intake.job_parser import (
    detect_signals,
    extract_company,
    extract_job,
    extract_job_from_input,
    extract_job_skills,
    extract_keywords,
    extract_level,
    extract_location,
    extract_role_title,
    extract_visa_constraints,
    is_url,
)


class TestMetadata:
    """Tests for role, company, location, level and visa extraction."""

    @pytest.mark.unit
    def test_role_title_from_leading_lines(self):
        lines = ["Acme Robotics", "## Senior Graphics Engineer", "Remote"]
        assert extract_role_title(lines) == "Senior Graphics Engineer"

    @pytest.mark.unit
    def test_role_title_outside_search_window(self):
        lines = ["a", "b", "c", "d", "e", "Software Engineer"]
        assert extract_role_title(lines) == ""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text, company",
        [
            ("Senior Engineer at Acme Robotics, Austin", "Acme Robotics"),
            ("Join us @ Initech today", "Initech"),
            ("Hiring for Black & Decker.", "Black & Decker"),
            ("work at a startup", None),
        ],
    )
    def test_extract_company(self, text, company):
        assert extract_company(text) == company

    @pytest.mark.unit
    def test_extract_location(self):
        assert extract_location("Location: Austin, TX\nFull time") == "Austin, TX"
        assert extract_location("We are based in Berlin.") == "Berlin"
        assert extract_location("Fully remote") is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "role_title, level",
        [
            ("Senior Staff Graphics Engineer", "Staff"),
            ("Sr. Software Engineer", "Senior"),
            ("Principal Research Scientist", "Principal"),
            ("Software Engineering Intern", "Intern"),
            ("Entry-Level Data Engineer", "Junior"),
            ("Software Engineer", None),
        ],
    )
    def test_extract_level(self, role_title, level):
        assert extract_level(role_title) == level

    @pytest.mark.unit
    def test_extract_visa_constraints(self):
        text = "Great team.\n- We are unable to sponsor visas for this role.\nApply now."
        assert extract_visa_constraints(text) == "We are unable to sponsor visas for this role."

    @pytest.mark.unit
    def test_no_visa_constraints(self):
        assert extract_visa_constraints("Great team. Apply now.") is None


class TestSkillsAndKeywords:
    """Tests for skills, keywords and signals."""

    @pytest.mark.unit
    def test_catalog_skills(self):
        assert extract_job_skills("- 3+ years of experience with Python and Kubernetes") == [
            "Python",
            "Kubernetes",
        ]

    @pytest.mark.unit
    def test_free_text_experience_phrases(self):
        skills = extract_job_skills("- Experience with distributed systems, Linux kernels and Bazel.")
        assert skills == ["distributed systems", "Linux kernels", "Bazel"]

    @pytest.mark.unit
    def test_skills_dedupe_case_insensitively(self):
        skills = extract_job_skills("- Experience with python\n- Python scripting")
        assert skills == ["Python"]

    @pytest.mark.unit
    def test_empty_section_has_no_skills(self):
        assert extract_job_skills("") == []

    @pytest.mark.unit
    def test_extract_keywords(self):
        keywords = extract_keywords("We use Python and Node.js at The Company with AWS")
        assert keywords == ["Python", "Node.js", "Company", "AWS"]

    @pytest.mark.unit
    def test_keywords_are_capped(self):
        text = " ".join(f"Word{i}" for i in range(KEYWORD_LIMIT + 20))
        assert len(extract_keywords(text)) == KEYWORD_LIMIT

    @pytest.mark.unit
    def test_detect_signals(self):
        signals = detect_signals("Optimize CUDA kernels for our LLM inference stack")
        assert signals == {"research": False, "gpu": True, "graphics": False, "genai": True}

    @pytest.mark.unit
    def test_signals_need_word_start(self):
        signals = detect_signals("Maintain the email service")
        assert signals["genai"] is False


class TestExtractJob:
    """Tests for the extract_job entry point."""

    @pytest.mark.unit
    def test_fixture_posting(self, sample_job_text):
        job = extract_job(sample_job_text)

        assert job["role_title"] == "Senior Graphics Engineer"
        assert job["company"] == "Acme Robotics"
        assert job["level"] == "Senior"
        assert job["location"] == "San Jose, CA"
        assert job["visa_constraints"] == "Applicants must be authorized to work in the United States."
        assert job["responsibilities"] == [
            "Design and build Vulkan rendering features for our simulator",
            "Profile and optimize CUDA kernels on modern GPU hardware",
        ]
        assert job["required_skills"] == ["Python", "C++", "CUDA", "Vulkan"]
        assert job["preferred_skills"] == ["Kubernetes", "TensorFlow", "PyTorch"]
        assert job["signals"] == {"research": True, "gpu": True, "graphics": True, "genai": False}
        assert "Vulkan" in job["keywords"]
        assert "The" not in job["keywords"]

    @pytest.mark.unit
    def test_posting_without_sections(self):
        job = extract_job("We need someone who knows Rust.")
        assert job["role_title"] == ""
        assert job["responsibilities"] == []
        assert job["required_skills"] == []
        assert job["keywords"] == ["Rust"]

    @pytest.mark.unit
    def test_url_input_is_not_fetched(self):
        assert is_url("  https://jobs.acme.io/123")
        with pytest.raises(NotImplementedError, match="paste the job description"):
            extract_job_from_input("https://jobs.acme.io/123")

    @pytest.mark.unit
    def test_text_input_is_extracted(self, sample_job_text):
        assert extract_job_from_input(sample_job_text)["company"] == "Acme Robotics"
