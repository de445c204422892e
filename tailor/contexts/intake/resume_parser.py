"""
Resume extraction for the Intake context.

Turns a decoded resume body into a draft resume record (plain dict):
normalize → segment → run each section's field extractor → score confidence.
The draft is shaped like ResumeRecord and always passes validation.
"""

from typing import Dict

from tailor.contexts.intake.field_extractors import (
    SKILL_CATEGORIES,
    extract_certifications,
    extract_education,
    extract_experience,
    extract_identity,
    extract_projects,
    extract_publications,
    extract_skills,
    extract_summary,
)
from tailor.contexts.intake.logger import log_extraction_result
from tailor.contexts.intake.normalizer import preprocess_resume_text
from tailor.contexts.intake.segmenter import segment_resume

# Core signals counted toward extraction confidence
CONFIDENCE_SIGNALS = ("name", "email", "experience", "education", "skills")

SECTION_EXTRACTORS = {
    "experience": extract_experience,
    "education": extract_education,
    "projects": extract_projects,
    "publications": extract_publications,
    "certifications": extract_certifications,
}


def empty_resume_draft(source_kind: str = None) -> Dict:
    """
    Build the all-empty, zero-confidence resume draft.

    Used as the starting point for every extraction and returned as-is when a
    document cannot be decoded.
    """
    return {
        "identity": {
            "name": "",
            "headline": None,
            "email": None,
            "phone": None,
            "location": None,
            "links": [],
        },
        "summary": None,
        "skills": {category: [] for category in SKILL_CATEGORIES},
        "experience": [],
        "education": [],
        "projects": [],
        "publications": [],
        "certifications": [],
        "metadata": {
            "source_kind": source_kind,
            "source_files": [],
            "extraction_confidence": 0.0,
        },
    }


def compute_confidence(draft: Dict) -> float:
    """
    Fraction of core signals present in a draft, rounded to two decimals.

    Signals: name, email, at least one experience entry, at least one
    education entry, at least one skill.
    """
    found = {
        "name": bool(draft["identity"].get("name")),
        "email": bool(draft["identity"].get("email")),
        "experience": bool(draft["experience"]),
        "education": bool(draft["education"]),
        "skills": any(draft["skills"].get(category) for category in SKILL_CATEGORIES),
    }
    return round(sum(found[signal] for signal in CONFIDENCE_SIGNALS) / len(CONFIDENCE_SIGNALS), 2)


def extract_resume(text: str, source_kind: str = "text") -> Dict:
    """
    Extract a draft resume record from decoded text.

    Args:
        text: Decoded resume body (raw .tex content when source_kind is "latex")
        source_kind: "pdf", "latex", "docx" or "text"

    Returns:
        Draft resume dict shaped like ResumeRecord

    Raises:
        UnsupportedSourceError: If source_kind is not recognized
    """
    body = preprocess_resume_text(text or "", source_kind)
    sections = segment_resume(body)

    draft = empty_resume_draft(source_kind)
    draft["identity"] = extract_identity(body)

    if "summary" in sections:
        draft["summary"] = extract_summary(sections["summary"])
    if "skills" in sections:
        draft["skills"] = extract_skills(sections["skills"])

    for section, extractor in SECTION_EXTRACTORS.items():
        if section in sections:
            draft[section] = extractor(sections[section])

    draft["metadata"]["extraction_confidence"] = compute_confidence(draft)

    log_extraction_result(
        "resume",
        {
            "sections": len(sections),
            "experience": len(draft["experience"]),
            "education": len(draft["education"]),
            "projects": len(draft["projects"]),
            "skills": sum(len(draft["skills"][category]) for category in SKILL_CATEGORIES),
        },
        confidence=draft["metadata"]["extraction_confidence"],
    )
    return draft
