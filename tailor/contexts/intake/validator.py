"""
Record validation for the Intake context.

validate() is the single gate between extractor drafts and everything
downstream: it applies defaults, coerces values and either returns a complete
record or rejects the whole draft with every offending field listed.
"""

from typing import Dict, Mapping, Type, Union

from pydantic import BaseModel, ValidationError

from tailor.contexts.intake.exceptions import RecordValidationError
from tailor.contexts.intake.logger import _log_debug, _log_warning
from tailor.contexts.intake.records import JobRecord, RecordModel, ResumeRecord

RECORD_SCHEMAS: Dict[str, Type[RecordModel]] = {
    "resume": ResumeRecord,
    "job": JobRecord,
}


def _error_path(location: tuple) -> str:
    return ".".join(str(part) for part in location) or "<root>"


def validate(draft: Union[Mapping, BaseModel], kind: str) -> Union[ResumeRecord, JobRecord]:
    """
    Validate and normalize a draft record.

    Args:
        draft: Draft dict from an extractor (or hand-edited), or an existing
            record to re-validate
        kind: "resume" or "job"

    Returns:
        ResumeRecord or JobRecord

    Raises:
        ValueError: If kind is not a known schema kind
        RecordValidationError: If the draft violates the schema; .fields lists
            the dotted path of every offending field
    """
    if kind not in RECORD_SCHEMAS:
        raise ValueError(f"Unknown record kind '{kind}' (expected one of {list(RECORD_SCHEMAS)})")

    if isinstance(draft, BaseModel):
        draft = draft.model_dump()

    try:
        record = RECORD_SCHEMAS[kind].model_validate(draft)
    except ValidationError as e:
        errors = e.errors()
        fields = [_error_path(error["loc"]) for error in errors]
        details = [error["msg"] for error in errors]
        _log_warning(f"Rejected {kind} draft: {', '.join(fields)}")
        raise RecordValidationError(kind, fields, details) from e

    _log_debug(f"Validated {kind} record")
    return record


def validate_resume(draft: Union[Mapping, BaseModel]) -> ResumeRecord:
    return validate(draft, "resume")


def validate_job(draft: Union[Mapping, BaseModel]) -> JobRecord:
    return validate(draft, "job")
