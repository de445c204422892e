"""
Resume x job relevance analysis for the Targeting context.

Compares one validated resume against one job record: which job skills the
resume already lists, which job keywords its experience bullets use, and which
experience/project entries and skills are worth foregrounding when tailoring.

Pure and deterministic; nothing is cached between calls.
"""

from dataclasses import dataclass, field
from typing import List, Set

from tailor.contexts.intake.records import JobRecord, ResumeRecord
from tailor.contexts.targeting.logger import _log_debug
from tailor.utils.text_processing import dedupe_preserving_order

# An experience entry is emphasized when its bullets mention more than this
# many distinct job keywords; likewise for projects (name + bullets)
EXPERIENCE_KEYWORD_THRESHOLD = 2
PROJECT_KEYWORD_THRESHOLD = 1

# Number of matching skills suggested for emphasis
MAX_EMPHASIZED_SKILLS = 10

# Bullet words this short never count as keyword matches
MIN_BULLET_WORD_LENGTH = 4

_WORD_PUNCTUATION = ".,;:!?()[]\"'"


@dataclass
class EmphasisSuggestions:
    """Indices and skill names worth foregrounding for a specific job."""

    experiences: List[int] = field(default_factory=list)
    projects: List[int] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)


@dataclass
class RelevanceMap:
    """
    Derived comparison of one resume against one job.

    Attributes:
        matching_skills: Job skills (required then preferred) the resume lists
        missing_skills: Job skills the resume does not list, in job order
        matching_keywords: Job keywords used as words in experience bullets
        emphasis_suggestions: What to foreground when tailoring
    """

    matching_skills: List[str] = field(default_factory=list)
    missing_skills: List[str] = field(default_factory=list)
    matching_keywords: List[str] = field(default_factory=list)
    emphasis_suggestions: EmphasisSuggestions = field(default_factory=EmphasisSuggestions)


def resume_skill_set(resume: ResumeRecord) -> Set[str]:
    """Lowercased skills across all four resume skill categories."""
    return {skill.lower() for skill in resume.skills.flattened()}


def bullet_words(resume: ResumeRecord) -> Set[str]:
    """
    Lowercased whitespace-delimited words from every experience bullet.

    Surrounding punctuation is trimmed ("Kubernetes," counts as "kubernetes");
    words shorter than MIN_BULLET_WORD_LENGTH are skipped.
    """
    words = set()
    for entry in resume.experience:
        for bullet in entry.bullets:
            for word in bullet.split():
                word = word.strip(_WORD_PUNCTUATION).lower()
                if len(word) >= MIN_BULLET_WORD_LENGTH:
                    words.add(word)
    return words


def count_keyword_mentions(text: str, keywords: List[str]) -> int:
    """Count distinct keywords contained in text (case-insensitive substring)."""
    lowered = text.lower()
    return sum(1 for keyword in keywords if keyword.lower() in lowered)


def analyze_relevance(resume: ResumeRecord, job: JobRecord) -> RelevanceMap:
    """
    Compare a validated resume against a job record.

    Args:
        resume: Validated resume record
        job: Validated (possibly sparse) job record

    Returns:
        RelevanceMap for this resume x job pair
    """
    relevance = RelevanceMap()

    skills = resume_skill_set(resume)
    for skill in job.required_skills + job.preferred_skills:
        if skill.lower() in skills:
            relevance.matching_skills.append(skill)
        else:
            relevance.missing_skills.append(skill)

    words = bullet_words(resume)
    relevance.matching_keywords = [keyword for keyword in job.keywords if keyword.lower() in words]

    keywords = dedupe_preserving_order(job.keywords, case_sensitive=False)
    suggestions = relevance.emphasis_suggestions

    for index, entry in enumerate(resume.experience):
        if count_keyword_mentions(" ".join(entry.bullets), keywords) > EXPERIENCE_KEYWORD_THRESHOLD:
            suggestions.experiences.append(index)

    for index, project in enumerate(resume.projects):
        project_text = " ".join([project.name] + project.bullets)
        if count_keyword_mentions(project_text, keywords) > PROJECT_KEYWORD_THRESHOLD:
            suggestions.projects.append(index)

    suggestions.skills = relevance.matching_skills[:MAX_EMPHASIZED_SKILLS]

    _log_debug(
        f"Relevance: {len(relevance.matching_skills)} matching / "
        f"{len(relevance.missing_skills)} missing skills, "
        f"{len(relevance.matching_keywords)} keywords, "
        f"emphasize experiences {suggestions.experiences} projects {suggestions.projects}"
    )
    return relevance
