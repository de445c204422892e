"""
Job posting parsing for the Intake context.

Turns pasted job posting text into a draft job record (plain dict) shaped like
JobRecord. Metadata (role, company, location, level, visa constraints), the
keyword list and topical signals are read from the whole body; responsibilities
and skills come from the segmented sections.

URL input is recognized but not fetched: the caller must paste the posting text.
"""

import re
from typing import Dict, List, Optional

from tailor.contexts.intake.extraction_patterns import (
    KEYWORD_LIMIT,
    KEYWORD_STOPLIST,
    ROLE_KEYWORDS,
    ROLE_SEARCH_LINES,
    SENIORITY_LEVELS,
    SIGNAL_PATTERNS,
    JobPatterns,
)
from tailor.contexts.intake.field_extractors import detect_technologies, extract_bullets
from tailor.contexts.intake.logger import _log_warning, log_extraction_result
from tailor.contexts.intake.normalizer import preprocess_job_text
from tailor.contexts.intake.segmenter import segment_job
from tailor.utils.text_processing import collapse_whitespace, dedupe_preserving_order, non_blank_lines

# Free-text "experience with X" phrases longer than this are prose, not skills
MAX_FREE_TEXT_SKILL_WORDS = 4


def is_url(text: str) -> bool:
    return text.strip().lower().startswith(("http://", "https://"))


# =============================================================================
# METADATA
# =============================================================================


def extract_role_title(lines: List[str]) -> str:
    """First of the leading lines that names a role (engineer, developer, ...)."""
    for line in lines[:ROLE_SEARCH_LINES]:
        lowered = line.lower()
        if any(keyword in lowered for keyword in ROLE_KEYWORDS):
            return line.lstrip("#").strip().strip("*").strip()
    return ""


def extract_company(text: str) -> Optional[str]:
    """
    Company from an "at/@/for CapitalizedWords" phrase.

    Example:
        >>> extract_company("Senior Engineer at Acme Robotics, Austin")
        'Acme Robotics'
    """
    match = JobPatterns.COMPANY.search(text)
    if not match:
        return None
    return match.group(1).strip().rstrip(".,'") or None


def extract_location(text: str) -> Optional[str]:
    """
    Location from a "location / based in / office in" phrase on a single line.

    Example:
        >>> extract_location("Location: Austin, TX\\nFull time")
        'Austin, TX'
    """
    match = JobPatterns.LOCATION.search(text)
    if not match:
        return None
    location = match.group(1).strip().rstrip(",.-/ ")
    return location or None


def extract_level(role_title: str) -> Optional[str]:
    """
    Seniority label from the role title (most senior label wins).

    Example:
        >>> extract_level("Senior Staff Graphics Engineer")
        'Staff'
    """
    for level, pattern in SENIORITY_LEVELS:
        if pattern.search(role_title):
            return level
    return None


def extract_visa_constraints(text: str) -> Optional[str]:
    """First sentence mentioning visas, sponsorship, citizenship, clearance or work authorization."""
    match = JobPatterns.VISA_SENTENCE.search(text)
    if not match:
        return None
    return collapse_whitespace(match.group(0)).lstrip("-*• ").strip() or None


# =============================================================================
# SKILLS, KEYWORDS, SIGNALS
# =============================================================================


def _split_free_text_skills(phrase: str) -> List[str]:
    skills = []
    for token in re.split(r"[,/]| and | or ", phrase):
        token = re.sub(r"^(?:and|or)\s+", "", token.strip(), flags=re.IGNORECASE).strip(" .")
        if token and len(token.split()) <= MAX_FREE_TEXT_SKILL_WORDS:
            skills.append(token)
    return skills


def extract_job_skills(text: str) -> List[str]:
    """
    Skills named in a requirements or preferred section.

    Curated catalog matches (canonical spelling) come first, then phrases from
    "experience with/in X, Y" in the section's bullets. Deduplicated
    case-insensitively.

    Example:
        >>> extract_job_skills("- 3+ years of experience with Python and Kubernetes")
        ['Python', 'Kubernetes']
    """
    if not text:
        return []

    skills = detect_technologies(text)
    for bullet in extract_bullets(text):
        for match in JobPatterns.EXPERIENCE_WITH.finditer(bullet):
            skills.extend(_split_free_text_skills(match.group(1)))

    return dedupe_preserving_order(skills, case_sensitive=False)


def extract_keywords(text: str) -> List[str]:
    """
    Keywords: capitalized words (minus a stoplist, longer than 2 characters)
    followed by technical tokens (internal punctuation or all-caps acronyms).

    Deduplicated and capped at KEYWORD_LIMIT.
    """
    keywords = [
        word
        for word in JobPatterns.CAPITALIZED_WORD.findall(text)
        if len(word) > 2 and word not in KEYWORD_STOPLIST
    ]
    keywords.extend(JobPatterns.TECHNICAL_TOKEN.findall(text))
    return dedupe_preserving_order(keywords)[:KEYWORD_LIMIT]


def detect_signals(text: str) -> Dict[str, bool]:
    """
    Topical flags set by whole-word keyword containment.

    Example:
        >>> detect_signals("Optimize CUDA kernels for our LLM inference stack")["gpu"]
        True
    """
    return {name: bool(pattern.search(text)) for name, pattern in SIGNAL_PATTERNS}


# =============================================================================
# ENTRY POINTS
# =============================================================================


def extract_job(text: str) -> Dict:
    """
    Extract a draft job record from pasted posting text.

    Args:
        text: Job posting body (plain text or markdown)

    Returns:
        Draft job dict shaped like JobRecord
    """
    body = preprocess_job_text(text or "")
    lines = non_blank_lines(body)
    sections = segment_job(body)

    role_title = extract_role_title(lines)
    draft = {
        "company": extract_company(body),
        "role_title": role_title,
        "level": extract_level(role_title),
        "location": extract_location(body),
        "visa_constraints": extract_visa_constraints(body),
        "responsibilities": extract_bullets(sections.get("responsibilities", "")),
        "required_skills": extract_job_skills(sections.get("requirements", "")),
        "preferred_skills": extract_job_skills(sections.get("preferred", "")),
        "keywords": extract_keywords(body),
        "signals": detect_signals(body),
    }

    log_extraction_result(
        "job",
        {
            "sections": len(sections),
            "responsibilities": len(draft["responsibilities"]),
            "required_skills": len(draft["required_skills"]),
            "preferred_skills": len(draft["preferred_skills"]),
            "keywords": len(draft["keywords"]),
        },
    )
    return draft


def extract_job_from_input(url_or_text: str) -> Dict:
    """
    Extract a job draft from user input that may be a URL or pasted text.

    Raises:
        NotImplementedError: If the input is an http(s) URL; fetching job pages
            is not supported and the posting text must be pasted instead
    """
    if is_url(url_or_text):
        _log_warning(f"Job URL given, not fetched: {url_or_text.strip()}")
        raise NotImplementedError(
            "Fetching job postings from a URL is not supported. "
            "Please paste the job description text directly."
        )
    return extract_job(url_or_text)
