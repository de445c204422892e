"""Shared fixtures for tailor tests."""

from pathlib import Path

import pytest

FIXTURES_PATH = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def sample_resume_text() -> str:
    return (FIXTURES_PATH / "sample_resume.txt").read_text(encoding="utf-8")


@pytest.fixture
def sample_resume_latex() -> str:
    return (FIXTURES_PATH / "sample_resume.tex").read_text(encoding="utf-8")


@pytest.fixture
def sample_job_text() -> str:
    return (FIXTURES_PATH / "sample_job.txt").read_text(encoding="utf-8")


@pytest.fixture
def minimal_resume_draft() -> dict:
    """Small hand-written draft with one entry per section."""
    return {
        "identity": {
            "name": "Jane Doe",
            "email": "jane.doe@acme.io",
            "phone": "(555) 123-4567",
            "links": [{"kind": "github", "url": "https://github.com/janedoe"}],
        },
        "summary": "Graphics engineer.",
        "skills": {
            "languages": ["Python", "C++"],
            "frameworks": ["PyTorch"],
            "gpu_graphics": ["CUDA", "Vulkan"],
            "systems_tools": ["Docker"],
        },
        "experience": [
            {
                "company": "Acme Robotics",
                "title": "Graphics Engineer",
                "start_date": "Jan 2020",
                "end_date": None,
                "bullets": ["Built a Vulkan renderer", "Optimized CUDA kernels"],
                "tech": ["Vulkan", "CUDA"],
            }
        ],
        "education": [
            {"school": "Stanford University", "degree": "B.S. Computer Science", "end_date": "2016"}
        ],
        "projects": [
            {
                "name": "Path Tracer",
                "bullets": ["Real-time path tracer"],
                "tech": ["C++"],
                "links": [{"kind": "github", "url": "https://github.com/janedoe/tracer"}],
            }
        ],
    }
