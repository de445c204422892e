"""
Assistant extension point for the Targeting context.

A resume assistant takes a validated resume plus a free-text instruction
("emphasize GPU work") and returns a revised record with a human-readable diff.
No assistant is bundled: UnavailableAssistant is the placeholder wired in by
default, and describe_changes() is the diff helper any implementation can use.
"""

from dataclasses import dataclass
from typing import List, Protocol

from omegaconf import OmegaConf

from tailor.contexts.intake.records import ResumeRecord
from tailor.contexts.targeting.logger import _log_warning
from tailor.utils.text_processing import unified_text_diff


@dataclass
class AssistantRevision:
    """A revised resume and the diff that produced it."""

    record: ResumeRecord
    diff: List[str]


class ResumeAssistant(Protocol):
    def revise(self, record: ResumeRecord, instruction: str) -> AssistantRevision:
        """Apply a free-text instruction to a resume record."""
        ...


class UnavailableAssistant:
    """Placeholder assistant: every revision request fails."""

    def revise(self, record: ResumeRecord, instruction: str) -> AssistantRevision:
        _log_warning(f"Assistant requested but not available: '{instruction}'")
        raise NotImplementedError(
            "No resume assistant is configured. Edit the record directly and re-render."
        )


def _escape_interpolations(value):
    # OmegaConf reads "${...}" in a value as an interpolation
    if isinstance(value, str):
        return value.replace("${", "\\${")
    if isinstance(value, list):
        return [_escape_interpolations(item) for item in value]
    if isinstance(value, dict):
        return {key: _escape_interpolations(item) for key, item in value.items()}
    return value


def record_to_yaml(record: ResumeRecord) -> str:
    """Dump a record to YAML for display and diffing. Any resume text is accepted."""
    data = _escape_interpolations(record.model_dump(mode="json"))
    return OmegaConf.to_yaml(OmegaConf.create(data))


def describe_changes(before: ResumeRecord, after: ResumeRecord) -> List[str]:
    """
    Unified diff between two resume records' YAML dumps.

    Returns:
        Diff lines; empty when the records are identical
    """
    diff, _ = unified_text_diff(record_to_yaml(before), record_to_yaml(after), "before", "after")
    return diff
