"""
Pattern matching for resume and job posting section identification.

This module provides the two header vocabularies used by the section
segmenter, plus the bullet-line pattern shared by all bullet extraction.

Pattern classes follow the project convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# =============================================================================
# HEADER LENGTH THRESHOLDS
# =============================================================================

# A keyword-bearing line at least this long is prose, not a header
RESUME_MAX_HEADER_LENGTH = 50
JOB_MAX_HEADER_LENGTH = 100


# =============================================================================
# BULLET PATTERNS
# =============================================================================


@dataclass(frozen=True)
class BulletPatterns:
    """
    Regex patterns for recognizing bulleted lines.

    Unicode glyphs may be glued to the text ("•Built ..." is common in PDF text
    dumps). ASCII markers and numbered prefixes need trailing whitespace so that
    "**Header**", "-5% churn" and "3.5 GPA" are not mistaken for bullets.
    """

    BULLET_PREFIX: re.Pattern = re.compile(r"^(?:[•▪◦·‣●■○➢►–—]\s*|[-*+]\s+|\d{1,2}[.)]\s+)")


def is_bullet_line(line: str) -> bool:
    """Check if a (stripped) line starts with a bullet glyph or numbered prefix."""
    return bool(BulletPatterns.BULLET_PREFIX.match(line))


def strip_bullet(line: str) -> str:
    """Remove a leading bullet glyph or numbered prefix from a line."""
    return BulletPatterns.BULLET_PREFIX.sub("", line, count=1).strip()


# =============================================================================
# RESUME SECTION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ResumeSectionPatterns:
    """
    Regex patterns for resume section headers.

    Patterns are searched as whole words anywhere in the normalized line, so
    "Education & Certifications" or "Skills Summary" still open a section. The
    segmenter's header length threshold keeps prose lines out.
    """

    SUMMARY: tuple = (
        r"(?:professional |career )?summary",
        r"(?:professional )?profile",
        r"(?:career )?objective",
        r"about(?: me)?",
    )

    EXPERIENCE: tuple = (
        r"(?:work |professional |relevant |industry |research )?experience",
        r"employment(?: history)?",
        r"work history",
    )

    EDUCATION: tuple = (
        r"education(?: (?:&|and) training)?",
        r"academic background",
    )

    SKILLS: tuple = (
        r"(?:technical |core |key )?skills(?: (?:&|and) (?:tools|technologies|interests))?",
        r"technologies",
        r"tech stack",
    )

    PROJECTS: tuple = (
        r"(?:selected |personal |technical |key |side )?projects",
        r"portfolio",
    )

    PUBLICATIONS: tuple = (
        r"(?:selected )?publications",
        r"papers",
    )

    CERTIFICATIONS: tuple = (
        r"certifications?(?: (?:&|and) licenses)?",
        r"certificates",
        r"licenses(?: (?:&|and) certifications)?",
    )


# Mapping of section names to their patterns (checked in this order)
RESUME_SECTION_PATTERNS: Dict[str, Tuple[str, ...]] = {
    "experience": ResumeSectionPatterns.EXPERIENCE,
    "education": ResumeSectionPatterns.EDUCATION,
    "skills": ResumeSectionPatterns.SKILLS,
    "projects": ResumeSectionPatterns.PROJECTS,
    "publications": ResumeSectionPatterns.PUBLICATIONS,
    "certifications": ResumeSectionPatterns.CERTIFICATIONS,
    "summary": ResumeSectionPatterns.SUMMARY,
}


# =============================================================================
# JOB POSTING SECTION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class JobSectionPatterns:
    """
    Regex patterns for job posting section headers.

    Job postings phrase headers as questions or sentences ("What you'll do",
    "What we're looking for"), so patterns are searched anywhere in the line.
    PREFERRED is checked before REQUIREMENTS so that "Preferred Qualifications"
    is not claimed by the bare "qualifications" pattern.
    """

    PREFERRED: tuple = (
        r"preferred",
        r"nice[- ]to[- ]have",
        r"\bbonus\b",
        r"\bplus\b",
        r"ideal candidate",
    )

    REQUIREMENTS: tuple = (
        r"requirements?",
        r"qualifications?",
        r"what we'?re looking for",
        r"what you'?ll (?:need|bring)",
        r"must[- ]?haves?",
    )

    RESPONSIBILITIES: tuple = (
        r"responsibilities",
        r"what you'?ll (?:be )?do(?:ing)?",
        r"\brole\b",
        r"\bduties\b",
    )

    ABOUT: tuple = (
        r"about (?:us|the company)",
        r"who we are",
    )

    BENEFITS: tuple = (
        r"benefits",
        r"perks",
        r"what we offer",
    )


JOB_SECTION_PATTERNS: Dict[str, Tuple[str, ...]] = {
    "preferred": JobSectionPatterns.PREFERRED,
    "requirements": JobSectionPatterns.REQUIREMENTS,
    "responsibilities": JobSectionPatterns.RESPONSIBILITIES,
    "about": JobSectionPatterns.ABOUT,
    "benefits": JobSectionPatterns.BENEFITS,
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def normalize_header_line(line: str) -> str:
    """
    Normalize a candidate header line for matching.

    Strips markdown decoration (# headers, **bold**), trailing colons, and
    normalizes case and internal whitespace.

    Example:
        >>> normalize_header_line("## **Work Experience:**")
        'work experience'
    """
    normalized = line.strip().lstrip("#").strip()
    normalized = normalized.strip("*_").strip()
    normalized = normalized.rstrip(":").strip()
    normalized = normalized.lower()
    return re.sub(r"\s+", " ", normalized)


def match_resume_header(line: str) -> Optional[str]:
    """
    Match a resume line against the resume header vocabulary.

    Returns:
        Section name, or None if the line is not a resume header
    """
    normalized = normalize_header_line(line)
    for section, patterns in RESUME_SECTION_PATTERNS.items():
        if any(re.search(rf"\b(?:{pattern})\b", normalized) for pattern in patterns):
            return section
    return None


def match_job_header(line: str) -> Optional[str]:
    """
    Match a job posting line against the job header vocabulary.

    Lines ending like a sentence ("... is a plus.") are never headers.

    Returns:
        Section name, or None if the line is not a job header
    """
    if line.rstrip().endswith((".", ";")):
        return None

    normalized = normalize_header_line(line)
    for section, patterns in JOB_SECTION_PATTERNS.items():
        if any(re.search(pattern, normalized) for pattern in patterns):
            return section
    return None
