"""
Reusable patterns and constants for resume and job posting field extraction.

This module provides the regex patterns and vocabularies the field extractors
use: contact details, dates, education keywords, skill categories, the curated
technology catalog, keyword stoplists and topical signals.

Pattern classes follow the project convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass
from typing import Dict, Tuple

# =============================================================================
# CONTACT PATTERNS
# =============================================================================


@dataclass(frozen=True)
class ContactPatterns:
    """
    Regex patterns for identity/contact details in a resume body.
    """

    EMAIL: re.Pattern = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

    # Loose North American number: 555-123-4567, (555) 123-4567, +1 555.123.4567
    PHONE: re.Pattern = re.compile(r"(?<!\d)(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}(?!\d)")

    # At least one host character after the scheme; a bare "https://" is not a URL
    URL: re.Pattern = re.compile(r"https?://[A-Za-z0-9][^\s<>()\"'|]*")

    # Profile URLs written without a scheme (linkedin.com/in/jdoe)
    BARE_PROFILE_URL: re.Pattern = re.compile(
        r"(?<![/\w.])(?:www\.)?(?:linkedin\.com|github\.com)/[^\s<>()\"',;|]+"
    )

    # A first line like "Resume" or "Curriculum Vitae" is a title, not a name
    DOCUMENT_TITLE: re.Pattern = re.compile(r"resume|résumé|curriculum", re.IGNORECASE)

    # Separators between name and inline contact details ("Jane Doe | jane@x.com")
    INLINE_SEPARATOR: re.Pattern = re.compile(r"\s*[|•·]\s*")


# Trailing characters that belong to prose, not to the URL
URL_TRAILING_PUNCTUATION = ".,;:)]}>'\""

# Link kind probes, checked in this priority order
LINK_KIND_PROBES: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("linkedin", ("linkedin.com",)),
    ("github", ("github.com",)),
    ("portfolio", ("portfolio", "personal", "github.io")),
)


# =============================================================================
# DATE PATTERNS
# =============================================================================

_MONTH = (
    r"\b(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
_SEASON = r"\b(?:spring|summer|fall|autumn|winter)"
_YEAR = r"(?:19|20)\d{2}"
_DATE = rf"(?:(?:{_MONTH}|{_SEASON})\s+{_YEAR}|\d{{1,2}}/{_YEAR}|{_YEAR})"


@dataclass(frozen=True)
class DatePatterns:
    """
    Regex patterns for dates in experience and education header lines.
    """

    YEAR: re.Pattern = re.compile(r"\b(?:19|20)\d{2}\b")

    ONGOING: re.Pattern = re.compile(r"\b(?:present|current)\b", re.IGNORECASE)

    # "Jan 2020 - Present", "2018 -- 2021", "06/2019 to 08/2020"
    DATE_RANGE: re.Pattern = re.compile(
        rf"({_DATE})\s*(?:-{{1,3}}|–|—|\bto\b|\buntil\b)\s*({_DATE}|present|current)",
        re.IGNORECASE,
    )

    SINGLE_DATE: re.Pattern = re.compile(rf"(?<!\w){_DATE}(?!\w)", re.IGNORECASE)

    # Separators left dangling once the dates are cut off a header line
    TRAILING_SEPARATORS: re.Pattern = re.compile(r"[\s|,;:(\[–—-]+$")


# =============================================================================
# EDUCATION PATTERNS
# =============================================================================


@dataclass(frozen=True)
class EducationPatterns:
    """
    Keywords and patterns for education entries.
    """

    INSTITUTION: re.Pattern = re.compile(r"\b(?:university|college|institute|school of)\b", re.IGNORECASE)

    DEGREE: re.Pattern = re.compile(
        r"\b(?:bachelor|master|phd|ph\.d|doctorate|associate|b\.s|m\.s|b\.a|m\.a|b\.sc|m\.sc|mba)",
        re.IGNORECASE,
    )

    GPA: re.Pattern = re.compile(r"\bGPA\b[:\s]*([0-9]\.[0-9]{1,2}(?:\s*/\s*[0-9](?:\.[0-9]{1,2})?)?)", re.IGNORECASE)


# =============================================================================
# SKILL CATEGORY PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SkillCategoryPatterns:
    """
    Regex patterns that assign a resume skill token to a category.

    Checked in priority order (languages, frameworks, gpu_graphics); a token
    matching none of them falls into systems_tools.
    """

    LANGUAGES: re.Pattern = re.compile(
        r"(?<![\w+#])(?:python|java|javascript|typescript|rust|go|golang|ruby|php|swift|kotlin"
        r"|scala|perl|haskell|lua|julia|matlab|r|c|c\+\+|c#|sql|bash|shell|html|css|zig|dart"
        r"|elixir|erlang|fortran|ocaml|objective-c)(?![\w+#])",
        re.IGNORECASE,
    )

    FRAMEWORKS: re.Pattern = re.compile(
        r"(?<![\w])(?:react|vue|angular|svelte|django|flask|fastapi|node(?:\.js)?|express"
        r"|next(?:\.js)?|spring|rails|pytorch|tensorflow|jax|keras|numpy|pandas|scikit-learn"
        r"|qt|unity|unreal(?: engine)?|\.net|tailwind)(?![\w])",
        re.IGNORECASE,
    )

    GPU_GRAPHICS: re.Pattern = re.compile(
        r"(?<![\w])(?:cuda|opengl|vulkan|directx|metal|gpus?|shaders?|hlsl|glsl|webgl|webgpu"
        r"|optix|opencl|ray ?tracing|rendering)(?![\w])",
        re.IGNORECASE,
    )


SKILL_CATEGORY_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = (
    ("languages", SkillCategoryPatterns.LANGUAGES),
    ("frameworks", SkillCategoryPatterns.FRAMEWORKS),
    ("gpu_graphics", SkillCategoryPatterns.GPU_GRAPHICS),
)

FALLBACK_SKILL_CATEGORY = "systems_tools"

# "Languages: Python, C++" - the label is not a skill
SKILL_LINE_LABEL = re.compile(r"^[A-Za-z][A-Za-z /&-]{0,40}:\s*")


# =============================================================================
# TECHNOLOGY CATALOG
# =============================================================================

# Canonical technology names grouped by kind. Used for job skill extraction and
# for tagging experience/project entries with the technologies they mention.
TECHNOLOGY_CATALOG: Dict[str, Tuple[str, ...]] = {
    "languages": (
        "Python", "Java", "JavaScript", "TypeScript", "C++", "C#", "Go", "Rust",
        "Ruby", "PHP", "Swift", "Kotlin", "Scala",
    ),
    "frameworks": (
        "React", "Angular", "Vue", "Django", "Flask", "FastAPI", "Express",
        "Node.js", "Next.js", "Spring", "Rails",
    ),
    "databases": (
        "SQL", "MySQL", "PostgreSQL", "MongoDB", "Redis", "Elasticsearch", "DynamoDB",
    ),
    "cloud": ("AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform"),
    "ml": ("TensorFlow", "PyTorch", "Keras", "Scikit-learn", "CUDA", "OpenCV"),
    "graphics": ("OpenGL", "Vulkan", "DirectX", "HLSL", "GLSL"),
    "tools": ("Git", "CI/CD", "Jenkins", "GitHub Actions", "Jira"),
}

# Names that are also ordinary English words; only matched with this exact casing
CASE_SENSITIVE_TECHNOLOGIES = {"Go", "Swift", "Spring", "Rails", "Express"}


def _technology_pattern(name: str) -> re.Pattern:
    """Build a boundary-aware pattern for a technology name (handles C++, C#, Node.js)."""
    flags = 0 if name in CASE_SENSITIVE_TECHNOLOGIES else re.IGNORECASE
    return re.compile(rf"(?<![\w+#]){re.escape(name)}(?![\w+#])", flags)


TECHNOLOGY_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = tuple(
    (name, _technology_pattern(name))
    for names in TECHNOLOGY_CATALOG.values()
    for name in names
)


# =============================================================================
# JOB POSTING PATTERNS
# =============================================================================

ROLE_KEYWORDS = ("engineer", "developer", "scientist", "manager", "designer")

# Role title must appear within this many leading non-empty lines
ROLE_SEARCH_LINES = 5

KEYWORD_LIMIT = 50

# Common capitalized words that carry no signal as keywords
KEYWORD_STOPLIST = frozenset(
    {
        "The", "We", "You", "Our", "Are", "Will", "Can", "Must", "Should",
        "This", "That", "And", "For", "With", "Who", "What", "Why", "How",
        "About", "Join", "Your", "They", "Their", "All", "Any", "Not",
        "Have", "Has", "Been", "Also", "Its", "Work", "Working",
    }
)


@dataclass(frozen=True)
class JobPatterns:
    """
    Regex patterns for job posting metadata and keywords.
    """

    # "at Acme Corp", "@ Acme", "for Initech Labs"
    COMPANY: re.Pattern = re.compile(
        r"(?:\bat|@|\bfor)[ \t]+([A-Z][\w&.'-]*(?:[ \t]+(?:&[ \t]+)?[A-Z][\w&.'-]*)*)"
    )

    # "Location: Austin, TX", "based in Berlin", "office in New York"
    LOCATION: re.Pattern = re.compile(
        r"(?:location|based in|office in)[ \t]*:?[ \t]*([A-Za-z][A-Za-z ,.()/-]*)", re.IGNORECASE
    )

    # "X years of experience with Y, Z and W."
    EXPERIENCE_WITH: re.Pattern = re.compile(
        r"experience (?:with|in) ([\w\s,./+#-]+?)(?:\.(?:\s|$)|,\s*(?:and|or)\s+(?:a|an|the)\b|;|\n|$)",
        re.IGNORECASE,
    )

    CAPITALIZED_WORD: re.Pattern = re.compile(r"\b[A-Z][A-Za-z0-9+#.-]*\b")

    # Tokens with internal punctuation (Node.js, CI/CD) or all-caps acronyms (GPU)
    TECHNICAL_TOKEN: re.Pattern = re.compile(
        r"\b(?:[A-Z][A-Za-z0-9]*[./+#-][A-Za-z0-9./+#-]*|[A-Z]{2,})\b"
    )

    VISA_SENTENCE: re.Pattern = re.compile(
        r"[^.\n]*\b(?:visa|sponsorship|sponsor|citizenship|citizens?|security clearance"
        r"|clearance|work authori[sz]ation|authorized to work)\b[^.\n]*\.?",
        re.IGNORECASE,
    )


# Seniority labels, most senior first so "Senior Staff Engineer" reads as Staff
SENIORITY_LEVELS: Tuple[Tuple[str, re.Pattern], ...] = (
    ("Director", re.compile(r"\bdirector\b", re.IGNORECASE)),
    ("Principal", re.compile(r"\bprincipal\b", re.IGNORECASE)),
    ("Staff", re.compile(r"\bstaff\b", re.IGNORECASE)),
    ("Lead", re.compile(r"\blead\b", re.IGNORECASE)),
    ("Senior", re.compile(r"\b(?:senior|sr\.?)(?!\w)", re.IGNORECASE)),
    ("Mid", re.compile(r"\bmid[- ]level\b", re.IGNORECASE)),
    ("Junior", re.compile(r"\b(?:junior|jr\.?|entry[- ]level)(?!\w)", re.IGNORECASE)),
    ("Intern", re.compile(r"\bintern(?:ship)?\b", re.IGNORECASE)),
)


# =============================================================================
# SIGNAL PATTERNS
# =============================================================================


@dataclass(frozen=True)
class SignalPatterns:
    """
    Topical flags on a job posting, set by keyword containment.

    Leading word boundaries keep "ai" from firing on "maintain" while still
    letting "parallel" match "parallelism".
    """

    RESEARCH: re.Pattern = re.compile(r"\bresearch|\bph\.?d\b", re.IGNORECASE)
    GPU: re.Pattern = re.compile(r"\b(?:gpu|cuda|parallel)", re.IGNORECASE)
    GRAPHICS: re.Pattern = re.compile(r"\b(?:graphics|opengl|vulkan)", re.IGNORECASE)
    GENAI: re.Pattern = re.compile(
        r"\b(?:ai|llms?|genai)\b|\b(?:machine|deep) learning|\bgenerative", re.IGNORECASE
    )


SIGNAL_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = (
    ("research", SignalPatterns.RESEARCH),
    ("gpu", SignalPatterns.GPU),
    ("graphics", SignalPatterns.GRAPHICS),
    ("genai", SignalPatterns.GENAI),
)
