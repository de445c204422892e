"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import List, Optional


class UnsupportedSourceError(ValueError):
    """
    Exception raised for a resume file extension or source kind the intake
    context cannot read.

    Attributes:
        source: The offending extension or source kind
        supported: Source kinds / extensions that are accepted
    """

    def __init__(self, source: str, supported: Optional[List[str]] = None):
        self.source = source
        self.supported = supported or []

        message = f"Unsupported resume source: '{source}'"
        if self.supported:
            message += f" (supported: {', '.join(self.supported)})"

        super().__init__(message)


class DocumentDecodeError(RuntimeError):
    """
    Exception raised when a resume document cannot be turned into text.

    Attributes:
        path: Path to the document that failed to decode
        source_kind: Source kind the document was read as
        original_error: The underlying decoder error
    """

    def __init__(
        self,
        path: Path,
        source_kind: str,
        original_error: Optional[Exception] = None,
    ):
        self.path = path
        self.source_kind = source_kind
        self.original_error = original_error

        parts = [f"Failed to decode {source_kind} document: {path}"]
        if original_error:
            parts.append(f"Original error: {str(original_error)}")

        super().__init__("\n".join(parts))


class RecordValidationError(ValueError):
    """
    Exception raised when a draft record does not conform to its schema.

    The draft is rejected as a whole; nothing is partially applied.

    Attributes:
        schema_kind: "resume" or "job"
        fields: Dotted paths of every offending field (e.g., "identity.email")
        details: Human-readable reason per offending field, in the same order
    """

    def __init__(self, schema_kind: str, fields: List[str], details: List[str]):
        self.schema_kind = schema_kind
        self.fields = fields
        self.details = details

        parts = [f"Invalid {schema_kind} record ({len(fields)} field(s))"]
        for field_path, detail in zip(fields, details):
            parts.append(f"  {field_path}: {detail}")

        super().__init__("\n".join(parts))
