"""
Unit tests for resume field extractors.

Tests the independent section heuristics in tailor.contexts.intake.field_extractors.
"""

import pytest

from tailor.contexts.intake.field_extractors import (
    categorize_skill,
    classify_link,
    detect_technologies,
    extract_bullets,
    extract_certifications,
    extract_education,
    extract_email,
    extract_experience,
    extract_identity,
    extract_name,
    extract_phone,
    extract_projects,
    extract_publications,
    extract_skills,
    extract_summary,
    find_urls,
    parse_certification,
    parse_education_line,
    parse_experience_header,
    parse_publication,
)


class TestExtractBullets:
    """Tests for extract_bullets function."""

    @pytest.mark.unit
    def test_marked_bullets(self):
        assert extract_bullets("• Built system X\n• Improved Y by 30%") == [
            "Built system X",
            "Improved Y by 30%",
        ]

    @pytest.mark.unit
    def test_long_unmarked_line_continues_previous_bullet(self):
        text = "• Built a distributed cache\nserving two million requests per second"
        assert extract_bullets(text) == [
            "Built a distributed cache serving two million requests per second"
        ]

    @pytest.mark.unit
    def test_long_unmarked_line_starts_bullet_when_none_open(self):
        assert extract_bullets("Led migration to a new build system") == [
            "Led migration to a new build system"
        ]

    @pytest.mark.unit
    def test_short_unmarked_lines_are_dropped(self):
        assert extract_bullets("Acme Corp\n• Shipped v2") == ["Shipped v2"]

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["", None, "\n\n"])
    def test_empty_input(self, text):
        assert extract_bullets(text) == []


class TestIdentity:
    """Tests for identity and contact extraction."""

    @pytest.mark.unit
    def test_extract_email_skips_invalid_candidates(self):
        assert extract_email("contact: jane.doe@acme.io.") == "jane.doe@acme.io"
        assert extract_email("no address here") is None

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text, phone",
        [
            ("Call (555) 123-4567 anytime", "(555) 123-4567"),
            ("555.123.4567", "555.123.4567"),
            ("+1 555-123-4567", "+1 555-123-4567"),
        ],
    )
    def test_extract_phone(self, text, phone):
        assert extract_phone(text) == phone

    @pytest.mark.unit
    def test_extract_phone_ignores_date_ranges(self):
        assert extract_phone("2016 - 2019") is None

    @pytest.mark.unit
    def test_extract_name_skips_document_title(self):
        assert extract_name("Curriculum Vitae\nJane Doe\njane@acme.io") == "Jane Doe"

    @pytest.mark.unit
    def test_extract_name_keeps_segment_before_contact_details(self):
        assert extract_name("Jane Doe | jane@acme.io | (555) 123-4567") == "Jane Doe"

    @pytest.mark.unit
    def test_extract_name_skips_contact_only_lines(self):
        assert extract_name("jane@acme.io\nJane Doe") == "Jane Doe"

    @pytest.mark.unit
    def test_extract_name_stops_at_section_header(self):
        assert extract_name("EXPERIENCE\nAcme Robotics") == ""

    @pytest.mark.unit
    def test_find_urls_trims_punctuation_and_adds_scheme(self):
        text = "See https://jdoe.dev/blog. Also linkedin.com/in/jdoe, and https://jdoe.dev/blog"
        assert find_urls(text) == ["https://jdoe.dev/blog", "https://linkedin.com/in/jdoe"]

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["Portfolio coming soon: https://, stay tuned", "http://", "https://."])
    def test_find_urls_skips_scheme_without_host(self, text):
        assert find_urls(text) == []

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "url, kind",
        [
            ("https://www.linkedin.com/in/jdoe", "linkedin"),
            ("https://github.com/jdoe", "github"),
            ("https://jdoe.github.io", "portfolio"),
            ("https://jdoe.dev/portfolio", "portfolio"),
            ("https://jdoe.dev", "other"),
        ],
    )
    def test_classify_link(self, url, kind):
        assert classify_link(url) == kind

    @pytest.mark.unit
    def test_extract_identity(self, sample_resume_text):
        identity = extract_identity(sample_resume_text)

        assert identity["name"] == "Jane Doe"
        assert identity["email"] == "jane.doe@acme.io"
        assert identity["phone"] == "(555) 123-4567"
        assert {"kind": "linkedin", "url": "https://www.linkedin.com/in/janedoe"} in identity["links"]
        assert {"kind": "github", "url": "https://github.com/janedoe"} in identity["links"]

    @pytest.mark.unit
    def test_extract_identity_from_empty_text(self):
        identity = extract_identity("")
        assert identity["name"] == ""
        assert identity["email"] is None
        assert identity["links"] == []


class TestSummary:
    @pytest.mark.unit
    def test_summary_lines_are_joined(self):
        assert extract_summary("Graphics engineer\nwith  six years") == "Graphics engineer with six years"

    @pytest.mark.unit
    def test_empty_summary(self):
        assert extract_summary("  \n ") is None


class TestExperience:
    """Tests for experience header parsing and entry extraction."""

    @pytest.mark.unit
    def test_parse_header_title_company_location(self):
        entry = parse_experience_header("Senior Engineer | Acme Robotics | San Jose, CA | Jan 2020 - Present")
        assert entry["title"] == "Senior Engineer"
        assert entry["company"] == "Acme Robotics"
        assert entry["location"] == "San Jose, CA"
        assert entry["start_date"] == "Jan 2020"
        assert entry["end_date"] is None

    @pytest.mark.unit
    def test_parse_header_with_closed_range(self):
        entry = parse_experience_header("Software Engineer, Initech, 06/2016 to 08/2019")
        assert (entry["title"], entry["company"]) == ("Software Engineer", "Initech")
        assert (entry["start_date"], entry["end_date"]) == ("06/2016", "08/2019")

    @pytest.mark.unit
    def test_parse_header_single_part_is_company(self):
        entry = parse_experience_header("Initech 2019")
        assert entry["company"] == "Initech"
        assert entry["title"] == ""
        assert entry["start_date"] == "2019"

    @pytest.mark.unit
    def test_month_words_are_not_dates(self):
        entry = parse_experience_header("Marketing Analyst | Initech | 2018 - 2019")
        assert entry["title"] == "Marketing Analyst"
        assert entry["start_date"] == "2018"

    @pytest.mark.unit
    def test_extract_experience_entries(self):
        text = (
            "Graphics Engineer | Acme Robotics | Jan 2020 - Present\n"
            "• Built a Vulkan renderer in C++\n"
            "• Optimized CUDA kernels\n"
            "Software Engineer | Initech | 2016 - 2019\n"
            "• Maintained Python tooling\n"
        )
        entries = extract_experience(text)

        assert len(entries) == 2
        assert entries[0]["bullets"] == ["Built a Vulkan renderer in C++", "Optimized CUDA kernels"]
        assert entries[0]["tech"] == ["C++", "CUDA", "Vulkan"]
        assert entries[1]["company"] == "Initech"
        assert entries[1]["end_date"] == "2019"
        assert entries[1]["tech"] == ["Python"]

    @pytest.mark.unit
    def test_lines_before_first_dated_header_are_ignored(self):
        assert extract_experience("• Orphan bullet without a role\nAcme") == []


class TestEducation:
    """Tests for education line parsing and entry merging."""

    @pytest.mark.unit
    def test_parse_education_line(self):
        entry = parse_education_line("Stanford University, B.S. Computer Science, 2016 - 2020")
        assert entry["school"] == "Stanford University"
        assert entry["degree"] == "B.S. Computer Science"
        assert (entry["start_date"], entry["end_date"]) == ("2016", "2020")

    @pytest.mark.unit
    def test_parse_education_line_with_gpa_and_location(self):
        entry = parse_education_line("M.S. Computer Science | Georgia Institute of Technology | Atlanta | 2021 | GPA: 3.9/4.0")
        assert entry["school"] == "Georgia Institute of Technology"
        assert entry["degree"] == "M.S. Computer Science"
        assert entry["location"] == "Atlanta"
        assert entry["end_date"] == "2021"
        assert entry["gpa"] == "3.9/4.0"

    @pytest.mark.unit
    def test_degree_then_school_lines_merge(self):
        entries = extract_education("B.S. Computer Science, 2020\nStanford University\nGPA: 3.8")
        assert len(entries) == 1
        assert entries[0]["degree"] == "B.S. Computer Science"
        assert entries[0]["school"] == "Stanford University"
        assert entries[0]["gpa"] == "3.8"

    @pytest.mark.unit
    def test_two_schools_make_two_entries(self):
        text = "Stanford University, B.S. Physics, 2016\nMIT Institute, Ph.D. Physics, 2021"
        entries = extract_education(text)
        assert [entry["school"] for entry in entries] == ["Stanford University", "MIT Institute"]

    @pytest.mark.unit
    def test_unkeyed_lines_before_first_entry_are_ignored(self):
        assert extract_education("Dean's list") == []


class TestSkills:
    """Tests for skill tokenizing and categorization."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "token, category",
        [
            ("C++", "languages"),
            ("Python", "languages"),
            ("Django", "frameworks"),
            ("PyTorch", "frameworks"),
            ("Vulkan", "gpu_graphics"),
            ("CUDA", "gpu_graphics"),
            ("Kubernetes", "systems_tools"),
            ("Docker", "systems_tools"),
        ],
    )
    def test_categorize_skill(self, token, category):
        assert categorize_skill(token) == category

    @pytest.mark.unit
    def test_extract_skills_strips_labels_and_dedupes(self):
        skills = extract_skills("Languages: Python, C++; python\n• Tools: Docker, Git.")
        assert skills == {
            "languages": ["Python", "C++"],
            "frameworks": [],
            "gpu_graphics": [],
            "systems_tools": ["Docker", "Git"],
        }

    @pytest.mark.unit
    def test_categories_are_disjoint(self):
        skills = extract_skills("Python, C++, Rust, PyTorch, React, Vulkan, OpenGL, CUDA, Docker, Git")
        flattened = [skill for category in skills.values() for skill in category]
        assert len(flattened) == len(set(flattened)) == 10


class TestProjects:
    """Tests for project extraction."""

    @pytest.mark.unit
    def test_name_with_inline_tech(self):
        projects = extract_projects("Path Tracer | C++, CI/CD\n• Real-time path tracer with BVH acceleration")
        assert projects[0]["name"] == "Path Tracer"
        assert projects[0]["tech"] == ["C++", "CI/CD"]
        assert projects[0]["bullets"] == ["Real-time path tracer with BVH acceleration"]

    @pytest.mark.unit
    def test_url_moves_to_links_and_long_line_is_one_liner(self):
        text = (
            "Shader Playground https://github.com/janedoe/shaders\n"
            "A browser sandbox for experimenting with GLSL fragment shaders and live-reloading uniforms"
        )
        project = extract_projects(text)[0]
        assert project["name"] == "Shader Playground"
        assert project["links"] == [{"kind": "github", "url": "https://github.com/janedoe/shaders"}]
        assert project["one_liner"].startswith("A browser sandbox")
        assert project["tech"] == ["GLSL"]

    @pytest.mark.unit
    def test_bullets_before_any_project_are_dropped(self):
        assert extract_projects("• stray bullet") == []


class TestDetectTechnologies:
    @pytest.mark.unit
    def test_catalog_order(self):
        assert detect_technologies("Ported the renderer from OpenGL to Vulkan in C++") == [
            "C++",
            "OpenGL",
            "Vulkan",
        ]

    @pytest.mark.unit
    def test_case_sensitive_names(self):
        assert "Go" not in detect_technologies("Ready to go live")
        assert "Go" in detect_technologies("Services written in Go")

    @pytest.mark.unit
    def test_no_partial_word_matches(self):
        assert detect_technologies("JavaScript") == ["JavaScript"]


class TestPublicationsAndCertifications:
    @pytest.mark.unit
    def test_parse_publication_with_quoted_title(self):
        publication = parse_publication('"Fast BVH Builds, Revisited", SIGGRAPH, 2022')
        assert publication == {
            "title": "Fast BVH Builds, Revisited",
            "venue": "SIGGRAPH",
            "year": "2022",
            "links": [],
        }

    @pytest.mark.unit
    def test_parse_publication_without_quotes(self):
        publication = parse_publication("Neural Radiance Caching, HPG 2021")
        assert (publication["title"], publication["venue"], publication["year"]) == (
            "Neural Radiance Caching",
            "HPG",
            "2021",
        )

    @pytest.mark.unit
    def test_extract_publications_skips_blank_lines(self):
        assert len(extract_publications("• Paper A, Venue, 2020\n\n• Paper B, Venue, 2021")) == 2

    @pytest.mark.unit
    def test_parse_certification(self):
        assert parse_certification("AWS Solutions Architect - Amazon Web Services, 2023") == {
            "name": "AWS Solutions Architect",
            "issuer": "Amazon Web Services",
            "date": "2023",
        }

    @pytest.mark.unit
    def test_certification_without_issuer(self):
        assert extract_certifications("• CKA") == [{"name": "CKA", "issuer": "", "date": None}]
