"""
Validated record schemas for the Intake context.

Extractors produce plain dict drafts; these pydantic models are the single
gate every draft passes before it is used for rendering or relevance analysis.
Absent fields take their declared defaults, explicit None values are treated
as absent, numbers are coerced to strings and surrounding whitespace is
stripped.
"""

from typing import List, Literal, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

from tailor.contexts.intake.extraction_patterns import KEYWORD_LIMIT

LinkKind = Literal["linkedin", "github", "portfolio", "other"]
SourceKind = Literal["pdf", "latex", "docx", "text"]

ONGOING_MARKERS = {"", "present", "current"}


class RecordModel(BaseModel):
    """Base for every record: shared coercion rules and None-as-absent handling."""

    model_config = ConfigDict(
        coerce_numbers_to_str=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_none_values(cls, data):
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


# =============================================================================
# RESUME RECORDS
# =============================================================================


class Link(RecordModel):
    kind: LinkKind = "other"
    url: str = Field(pattern=r"^https?://\S+$")

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_url(cls, data):
        # Hand-edited drafts often list links as plain URL strings
        if isinstance(data, str):
            return {"url": data}
        return data


class Identity(RecordModel):
    name: str = ""
    headline: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    links: List[Link] = Field(default_factory=list)

    @field_validator("email", mode="before")
    @classmethod
    def _blank_email_is_absent(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value.strip() if isinstance(value, str) else value


class Skills(RecordModel):
    languages: List[str] = Field(default_factory=list)
    frameworks: List[str] = Field(default_factory=list)
    gpu_graphics: List[str] = Field(default_factory=list)
    systems_tools: List[str] = Field(default_factory=list)

    def flattened(self) -> List[str]:
        """All skills across the four categories, in category order."""
        return self.languages + self.frameworks + self.gpu_graphics + self.systems_tools


class ExperienceEntry(RecordModel):
    company: str
    title: str
    location: Optional[str] = None
    start_date: str
    end_date: Optional[str] = None
    bullets: List[str] = Field(default_factory=list)
    tech: List[str] = Field(default_factory=list)

    @field_validator("end_date", mode="before")
    @classmethod
    def _ongoing_is_absent(cls, value):
        # An absent end date means the role is ongoing
        if isinstance(value, str) and value.strip().lower() in ONGOING_MARKERS:
            return None
        return value


class EducationEntry(RecordModel):
    school: str
    degree: str
    field: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    gpa: Optional[str] = None


class ProjectEntry(RecordModel):
    name: str
    one_liner: Optional[str] = None
    bullets: List[str] = Field(default_factory=list)
    tech: List[str] = Field(default_factory=list)
    links: List[Link] = Field(default_factory=list)


class PublicationEntry(RecordModel):
    title: str
    venue: str
    year: str
    links: List[Link] = Field(default_factory=list)


class CertificationEntry(RecordModel):
    name: str
    issuer: str
    date: Optional[str] = None


class ResumeMetadata(RecordModel):
    source_kind: Optional[SourceKind] = None
    source_files: List[str] = Field(default_factory=list)
    extraction_confidence: float = Field(0.0, ge=0.0, le=1.0)


class ResumeRecord(RecordModel):
    identity: Identity = Field(default_factory=Identity)
    summary: Optional[str] = None
    skills: Skills = Field(default_factory=Skills)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    publications: List[PublicationEntry] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    metadata: ResumeMetadata = Field(default_factory=ResumeMetadata)


# =============================================================================
# JOB RECORDS
# =============================================================================


class JobSignals(RecordModel):
    """Topical flags; not mutually exclusive."""

    research: bool = False
    gpu: bool = False
    graphics: bool = False
    genai: bool = False


class JobRecord(RecordModel):
    company: Optional[str] = None
    role_title: str = ""
    level: Optional[str] = None
    location: Optional[str] = None
    visa_constraints: Optional[str] = None
    responsibilities: List[str] = Field(default_factory=list)
    required_skills: List[str] = Field(default_factory=list)
    preferred_skills: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)
    signals: JobSignals = Field(default_factory=JobSignals)

    @field_validator("keywords")
    @classmethod
    def _cap_keywords(cls, value: List[str]) -> List[str]:
        return value[:KEYWORD_LIMIT]


# =============================================================================
# HELPERS
# =============================================================================

_EMAIL_ADAPTER = TypeAdapter(EmailStr)


def is_valid_email(address: str) -> bool:
    """
    Check an address with the same rules the Identity record applies.

    Example:
        >>> is_valid_email("a@b.com")
        True
        >>> is_valid_email("not-an-email")
        False
    """
    try:
        _EMAIL_ADAPTER.validate_python(address)
    except ValidationError:
        return False
    return True
