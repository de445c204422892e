"""
Intake Context

Responsibilities:
- Decodes resume documents (PDF, DOCX, LaTeX source, plain text) to text
- Segments resume and job posting bodies into named sections
- Extracts draft resume and job records with field-level heuristics
- Validates drafts into typed records

Owns: Section vocabularies, extraction heuristics, record schemas
Never: Compares resumes against jobs or produces LaTeX output
"""

from tailor.contexts.intake.documents import detect_source_kind, extract_resume_file
from tailor.contexts.intake.job_parser import extract_job, extract_job_from_input
from tailor.contexts.intake.records import JobRecord, ResumeRecord
from tailor.contexts.intake.resume_parser import extract_resume
from tailor.contexts.intake.validator import validate

__all__ = [
    # Extraction entry points
    "extract_resume",
    "extract_resume_file",
    "detect_source_kind",
    "extract_job",
    "extract_job_from_input",
    # Validation
    "validate",
    "ResumeRecord",
    "JobRecord",
]
