"""Unit tests for resume x job relevance analysis."""

import pytest

from tailor.contexts.intake.validator import validate
from tailor.contexts.targeting.relevance import (
    MAX_EMPHASIZED_SKILLS,
    analyze_relevance,
    bullet_words,
    count_keyword_mentions,
)


@pytest.fixture
def resume():
    return validate(
        {
            "skills": {
                "languages": ["Python", "C++"],
                "gpu_graphics": ["CUDA"],
                "systems_tools": ["Docker"],
            },
            "experience": [
                {
                    "company": "Acme Robotics",
                    "title": "Graphics Engineer",
                    "start_date": "2020",
                    "bullets": ["Built a Vulkan renderer, shaders and CUDA kernels"],
                },
                {
                    "company": "Initech",
                    "title": "Engineer",
                    "start_date": "2016",
                    "bullets": ["Maintained Python tooling", "Go services"],
                },
            ],
            "projects": [
                {"name": "Vulkan Path Tracer", "bullets": ["CUDA denoiser"]},
                {"name": "Blog", "bullets": ["Static site"]},
            ],
        },
        "resume",
    )


@pytest.fixture
def job():
    return validate(
        {
            "role_title": "Graphics Engineer",
            "required_skills": ["Python", "Vulkan"],
            "preferred_skills": ["cuda", "Rust"],
            "keywords": ["Vulkan", "CUDA", "Shaders", "Kubernetes", "Go"],
        },
        "job",
    )


@pytest.mark.unit
def test_skill_partition(resume, job):
    relevance = analyze_relevance(resume, job)

    assert relevance.matching_skills == ["Python", "cuda"]
    assert relevance.missing_skills == ["Vulkan", "Rust"]


@pytest.mark.unit
def test_matching_keywords_use_bullet_words(resume, job):
    relevance = analyze_relevance(resume, job)
    assert relevance.matching_keywords == ["Vulkan", "CUDA", "Shaders"]


@pytest.mark.unit
def test_short_words_never_match(resume, job):
    assert "Go" not in analyze_relevance(resume, job).matching_keywords
    assert "go" not in bullet_words(resume)


@pytest.mark.unit
def test_emphasis_suggestions(resume, job):
    suggestions = analyze_relevance(resume, job).emphasis_suggestions

    assert suggestions.experiences == [0]
    assert suggestions.projects == [0]
    assert suggestions.skills == ["Python", "cuda"]


@pytest.mark.unit
def test_emphasized_skills_are_capped(resume):
    skills = [f"Skill{i}" for i in range(MAX_EMPHASIZED_SKILLS + 3)]
    rich_resume = resume.model_copy(update={"skills": resume.skills.model_copy(update={"systems_tools": skills})})
    job = validate({"required_skills": skills}, "job")

    relevance = analyze_relevance(rich_resume, job)
    assert len(relevance.matching_skills) == MAX_EMPHASIZED_SKILLS + 3
    assert relevance.emphasis_suggestions.skills == skills[:MAX_EMPHASIZED_SKILLS]


@pytest.mark.unit
def test_empty_job_gives_empty_relevance(resume):
    relevance = analyze_relevance(resume, validate({}, "job"))

    assert relevance.matching_skills == []
    assert relevance.missing_skills == []
    assert relevance.matching_keywords == []
    assert relevance.emphasis_suggestions.experiences == []


@pytest.mark.unit
def test_analysis_is_deterministic(resume, job):
    assert analyze_relevance(resume, job) == analyze_relevance(resume, job)


@pytest.mark.unit
def test_count_keyword_mentions_counts_distinct_keywords():
    assert count_keyword_mentions("CUDA cuda Vulkan", ["CUDA", "Vulkan", "Metal"]) == 2
